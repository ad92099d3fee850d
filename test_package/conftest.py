#
# Copyright(c) 2019 Intel Corporation
# SPDX-License-Identifier: BSD-3-Clause-Clear
#

import logging

import pytest

from sized_file import reset_postfixes_generator

LOGGER = logging.getLogger(__name__)


@pytest.fixture(autouse=True)
def restore_postfixes_generator(request):
    """
    The postfixes generator is process-wide, so every test starts and ends
    with the default English labels.
    """
    LOGGER.info(f"**********Test {request.node.name} started!**********")
    reset_postfixes_generator()
    yield
    reset_postfixes_generator()
