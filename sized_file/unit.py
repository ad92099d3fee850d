#
# Copyright(c) 2019 Intel Corporation
# SPDX-License-Identifier: BSD-3-Clause-Clear
#

import enum
import numbers

from sized_file import configuration
from sized_file.exceptions import InvalidArgument


def parse_unit(str_unit: str):
    for u in Unit:
        if str_unit == u.name or str_unit == u.label:
            return u

    if str_unit == "KiB":
        return Unit.KiloByte
    elif str_unit == "MiB":
        return Unit.MegaByte
    elif str_unit == "GiB":
        return Unit.GigaByte
    elif str_unit == "TiB":
        return Unit.TeraByte

    raise InvalidArgument(f"Unable to parse unit '{str_unit}'", {"unit": str_unit})


class Unit(enum.Enum):
    Byte = configuration.divider ** 0
    KiloByte = configuration.divider ** 1
    MegaByte = configuration.divider ** 2
    GigaByte = configuration.divider ** 3
    TeraByte = configuration.divider ** 4

    @property
    def exponent(self):
        return list(Unit).index(self)

    @property
    def label(self):
        """Key of this unit in a postfixes map."""
        return configuration.postfix_keys[self.exponent]

    def get_value(self):
        return self.value

    def to_bytes(self, value) -> int:
        # Truncates toward zero, fractions of a byte are dropped.
        return int(value * self.get_value())

    def from_bytes(self, byte_count: int) -> float:
        return byte_count / self.get_value()

    def __rmul__(self, other):
        from sized_file.size import Size
        if isinstance(other, numbers.Real) and not isinstance(other, bool):
            return Size(other, self)
        return NotImplemented

    __mul__ = __rmul__
