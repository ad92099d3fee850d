#
# Copyright(c) 2019 Intel Corporation
# SPDX-License-Identifier: BSD-3-Clause-Clear
#

from sized_file.exceptions import DivisionByZero, InvalidArgument, MissingPostfixError, SizeError
from sized_file.postfixes import (default_postfixes, get_postfixes_generator, postfixes_generator,
                                  reset_postfixes_generator, resolve_postfixes,
                                  set_postfixes_generator)
from sized_file.size import Size
from sized_file.unit import Unit, parse_unit

__all__ = [
    "DivisionByZero",
    "InvalidArgument",
    "MissingPostfixError",
    "Size",
    "SizeError",
    "Unit",
    "default_postfixes",
    "get_postfixes_generator",
    "parse_unit",
    "postfixes_generator",
    "reset_postfixes_generator",
    "resolve_postfixes",
    "set_postfixes_generator",
]
