#
# Copyright(c) 2019 Intel Corporation
# SPDX-License-Identifier: BSD-3-Clause-Clear
#

from fractions import Fraction
from functools import reduce
import logging
import math
import numbers
import operator
import re

from multimethod import multimethod

from sized_file import configuration
from sized_file.exceptions import DivisionByZero, InvalidArgument
from sized_file.postfixes import resolve_postfixes, set_postfixes_generator
from sized_file.unit import Unit, parse_unit

LOGGER = logging.getLogger(__name__)

_SIZE_PATTERN = re.compile(r"^\s*(?P<value>\d+(?:\.\d*)?|\.\d+)\s*(?P<unit>[A-Za-z]+)?\s*$")


def _check_number(value):
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise InvalidArgument(f"Expected a real number, got {value!r}.", {"value": value})
    if not isinstance(value, numbers.Integral) and not math.isfinite(value):
        raise InvalidArgument(f"Expected a finite number, got {value!r}.", {"value": value})


def _as_fraction(value) -> Fraction:
    # Exact value of the number, floats included.
    if isinstance(value, numbers.Rational):
        return Fraction(int(value.numerator), int(value.denominator))
    return Fraction(float(value))


def _round_half_up(value: Fraction) -> int:
    # Ties go up: 2.5 -> 3, 0.5 -> 1. Only used for non-negative values.
    return (2 * value.numerator + value.denominator) // (2 * value.denominator)


def _to_bytes(value: Fraction) -> int:
    if value < 0:
        return 0
    return _round_half_up(value)


def _to_fixed(value: Fraction, fraction_digits: int) -> str:
    scale = 10 ** fraction_digits
    integer, fraction = divmod(_round_half_up(value * scale), scale)
    if not fraction_digits:
        return str(integer)
    return f"{integer}.{fraction:0{fraction_digits}d}"


class Size:
    """
    Immutable, non-negative amount of storage kept as a whole number of bytes.

    Larger units are binary (1 KB = 1024 B). Values built from fractional units
    are truncated to whole bytes. Equality, ordering and hashing depend on the
    byte count only, regardless of the unit a value was built from.
    """

    __slots__ = ("_bytes",)

    def __init__(self, value: float = 0, unit: Unit = Unit.Byte):
        _check_number(value)
        byte_count = unit.to_bytes(value)
        if byte_count < 0:
            raise InvalidArgument("Size has to be positive.", {"bytes": byte_count})
        object.__setattr__(self, "_bytes", byte_count)

    @classmethod
    def from_bytes(cls, byte_count: int):
        if isinstance(byte_count, bool) or not isinstance(byte_count, numbers.Integral):
            raise InvalidArgument(f"Byte count has to be an integer, got {byte_count!r}.",
                                  {"bytes": byte_count})
        return cls(int(byte_count))

    @classmethod
    def from_kilobytes(cls, value: float):
        return cls(value, Unit.KiloByte)

    @classmethod
    def from_megabytes(cls, value: float):
        return cls(value, Unit.MegaByte)

    @classmethod
    def from_gigabytes(cls, value: float):
        return cls(value, Unit.GigaByte)

    @classmethod
    def from_terabytes(cls, value: float):
        return cls(value, Unit.TeraByte)

    @classmethod
    def from_units(cls, bytes=0, kb=0, mb=0, gb=0, tb=0):
        """
        Build a size from several magnitudes, e.g. from_units(gb=2, mb=500).
        Every magnitude is truncated to whole bytes on its own before summing.
        """
        parts = ((Unit.Byte, bytes), (Unit.KiloByte, kb), (Unit.MegaByte, mb),
                 (Unit.GigaByte, gb), (Unit.TeraByte, tb))
        for _, value in parts:
            _check_number(value)
        return cls(sum(unit.to_bytes(value) for unit, value in parts if value))

    @classmethod
    def parse(cls, text: str):
        """Parse text like '1.5 MB', '512KiB' or '100' (bytes)."""
        match = _SIZE_PATTERN.match(text) if isinstance(text, str) else None
        if match is None:
            raise InvalidArgument(f"Unable to parse size '{text}'.", {"text": text})
        value = match.group("value")
        number = int(value) if value.isdigit() else float(value)
        unit = parse_unit(match.group("unit")) if match.group("unit") else Unit.Byte
        LOGGER.debug(f"Parsed '{text}' as {number} {unit.name}")
        return cls(number, unit)

    @staticmethod
    def zero():
        return Size(0)

    set_postfixes_generator = staticmethod(set_postfixes_generator)

    @property
    def bytes(self) -> int:
        return self._bytes

    @property
    def kilobytes(self) -> float:
        return self.get_value(Unit.KiloByte)

    @property
    def megabytes(self) -> float:
        return self.get_value(Unit.MegaByte)

    @property
    def gigabytes(self) -> float:
        return self.get_value(Unit.GigaByte)

    @property
    def terabytes(self) -> float:
        return self.get_value(Unit.TeraByte)

    def get_value(self, target_unit: Unit = Unit.Byte) -> float:
        return target_unit.from_bytes(self._bytes)

    def is_zero(self):
        return self._bytes == 0

    def format(self, fraction_digits: int = configuration.default_fraction_digits,
               postfixes: dict = None) -> str:
        """
        Human readable size, e.g. '500 B', '1.50 KB' or '2.00 TB'.

        The smallest unit keeping the number below 1024 is used, terabytes are
        used for everything from 1024 GB up. Byte counts never get fractional
        digits. Labels come from postfixes, or from the process-wide postfixes
        generator when it is None.
        """
        if isinstance(fraction_digits, bool) or not isinstance(fraction_digits, int) \
                or not 0 <= fraction_digits <= configuration.max_fraction_digits:
            raise InvalidArgument(
                f"Fraction digits have to be an integer between 0 and "
                f"{configuration.max_fraction_digits}, got {fraction_digits!r}.",
                {"fraction_digits": fraction_digits})
        postfixes = resolve_postfixes(postfixes)

        if self._bytes < configuration.divider:
            return f"{self._bytes} {postfixes[Unit.Byte.label]}"
        # Exact quotients, a power of 1024 always divides into a finite decimal.
        for unit in (Unit.KiloByte, Unit.MegaByte, Unit.GigaByte):
            if self._bytes < configuration.divider * unit.value:
                value = Fraction(self._bytes, unit.value)
                return f"{_to_fixed(value, fraction_digits)} {postfixes[unit.label]}"
        value = Fraction(self._bytes, Unit.TeraByte.value)
        return f"{_to_fixed(value, fraction_digits)} {postfixes[Unit.TeraByte.label]}"

    def compare_to(self, other) -> int:
        if not isinstance(other, Size):
            raise TypeError(f"Cannot compare Size and {type(other).__name__}")
        return (self._bytes > other.bytes) - (self._bytes < other.bytes)

    def ratio_to(self, other) -> float:
        if not isinstance(other, Size):
            raise TypeError(f"Cannot calculate ratio of Size and {type(other).__name__}")
        if other.bytes == 0:
            raise DivisionByZero("Cannot calculate ratio with zero bytes.")
        return self._bytes / other.bytes

    def __str__(self):
        return self.format()

    def __repr__(self):
        return f"Size({self._bytes})"

    def __hash__(self):
        return hash(self._bytes)

    def __int__(self):
        return self._bytes

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __reduce__(self):
        return Size, (self._bytes,)

    def __eq__(self, other):
        if not isinstance(other, Size):
            return NotImplemented
        return self._bytes == other.bytes

    def __lt__(self, other):
        if not isinstance(other, Size):
            return NotImplemented
        return self._bytes < other.bytes

    def __le__(self, other):
        if not isinstance(other, Size):
            return NotImplemented
        return self._bytes <= other.bytes

    def __gt__(self, other):
        if not isinstance(other, Size):
            return NotImplemented
        return self._bytes > other.bytes

    def __ge__(self, other):
        if not isinstance(other, Size):
            return NotImplemented
        return self._bytes >= other.bytes

    def __add__(self, other):
        if not isinstance(other, Size):
            return NotImplemented
        return Size(self._bytes + other.bytes)

    def __radd__(self, other):
        # Lets builtin sum() start from 0.
        if isinstance(other, numbers.Integral) and not isinstance(other, bool) and other == 0:
            return self
        return NotImplemented

    def __sub__(self, other):
        if not isinstance(other, Size):
            return NotImplemented
        return Size(max(self._bytes - other.bytes, 0))

    def __mul__(self, other):
        if isinstance(other, bool) or not isinstance(other, numbers.Real):
            return NotImplemented
        _check_number(other)
        return Size(_to_bytes(self._bytes * _as_fraction(other)))

    __rmul__ = __mul__

    @multimethod
    def __truediv__(self, other):
        if not isinstance(other, Size):
            return NotImplemented
        return self.ratio_to(other)

    @multimethod
    def __truediv__(self, other: numbers.Integral):
        if other == 0:
            raise DivisionByZero("Divisor must not be equal to 0.", {"divisor": other})
        return Size(_to_bytes(Fraction(self._bytes, int(other))))

    @multimethod
    def __truediv__(self, other: numbers.Real):
        if other == 0:
            raise DivisionByZero("Divisor must not be equal to 0.", {"divisor": other})
        _check_number(other)
        return Size(_to_bytes(self._bytes / _as_fraction(other)))

    @staticmethod
    def min(sizes):
        """Smallest of sizes, the first one on ties. Zero for no sizes."""
        sizes = list(sizes)
        if not sizes:
            return Size.zero()
        return reduce(lambda a, b: a if a <= b else b, sizes)

    @staticmethod
    def max(sizes):
        """Largest of sizes, the first one on ties. Zero for no sizes."""
        sizes = list(sizes)
        if not sizes:
            return Size.zero()
        return reduce(lambda a, b: a if a >= b else b, sizes)

    @staticmethod
    def sum(sizes):
        return reduce(operator.add, sizes, Size.zero())

    @staticmethod
    def average(sizes):
        """Mean of sizes rounded to the nearest byte. Zero for no sizes."""
        sizes = list(sizes)
        if not sizes:
            return Size.zero()
        count = len(sizes)
        return Size(_to_bytes(Fraction(Size.sum(sizes).bytes, count)))
