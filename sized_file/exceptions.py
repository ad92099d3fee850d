#
# Copyright(c) 2019 Intel Corporation
# SPDX-License-Identifier: BSD-3-Clause-Clear
#


class SizeError(Exception):
    """Base exception for all size errors"""

    def __init__(self, message: str, details: dict = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class InvalidArgument(SizeError, ValueError):
    """Raised when a size is built or formatted from an invalid value"""


class DivisionByZero(SizeError, ZeroDivisionError):
    """Raised on division by a zero scalar or by a zero-byte size"""


class MissingPostfixError(SizeError, LookupError):
    """Raised when a postfixes map lacks labels for some units"""

    def __init__(self, missing_keys: list, message: str = None):
        msg = message or f"Postfixes are missing labels for: {', '.join(missing_keys)}"
        super().__init__(msg, {"missing_keys": missing_keys})
