#
# Copyright(c) 2019 Intel Corporation
# SPDX-License-Identifier: BSD-3-Clause-Clear
#

# Number of bytes in a kilobyte, and between every following unit.
divider = 1024

# Fractional digits used by Size.format() when the caller passes none.
default_fraction_digits = 2
max_fraction_digits = 20

# Keys every postfixes map has to provide, smallest unit first.
postfix_keys = ("B", "KB", "MB", "GB", "TB")

default_postfixes = {
    "B": "B",
    "KB": "KB",
    "MB": "MB",
    "GB": "GB",
    "TB": "TB",
}
