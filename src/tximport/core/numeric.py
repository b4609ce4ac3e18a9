#!/usr/bin/env python3
"""
Numeric Primitive Type

Immutable exact rational value used for amounts, values and prices.
Prevents floating-point errors and keeps currency conversions exact.
"""

from dataclasses import dataclass
from decimal import Decimal
from fractions import Fraction
from typing import Union

Scalar = Union[int, Fraction, "Numeric"]


@dataclass(frozen=True)
class Numeric:
    """
    Immutable exact rational number.

    Amounts, split values and exchange rates are all Numerics so that
    ``value = amount * price`` and its inverse never lose precision.

    Examples:
        >>> amount = Numeric.from_string("100.50")
        >>> str(amount)
        '100.5'

        >>> rate = Numeric.from_string("1.25")
        >>> str(amount * rate)
        '125.625'

        >>> (amount * rate * rate.inv()) == amount
        True
    """

    value: Fraction = Fraction(0)

    @classmethod
    def zero(cls) -> "Numeric":
        """Create a zero Numeric."""
        return cls(Fraction(0))

    @classmethod
    def from_string(cls, number: str) -> "Numeric":
        """
        Create Numeric from a plain decimal string like '-12.34'.

        Only plain Python number syntax is accepted here; locale aware
        parsing of user input lives in ``core.currency``.
        """
        return cls(Fraction(Decimal(number)))

    @classmethod
    def from_fraction(cls, numerator: int, denominator: int = 1) -> "Numeric":
        """Create Numeric from numerator and denominator."""
        return cls(Fraction(numerator, denominator))

    @property
    def is_zero(self) -> bool:
        """True when the value is exactly zero."""
        return self.value == 0

    @property
    def is_decimal(self) -> bool:
        """True when the value has a finite decimal representation."""
        denominator = self.value.denominator
        for factor in (2, 5):
            while denominator % factor == 0:
                denominator //= factor
        return denominator == 1

    def inv(self) -> "Numeric":
        """
        Return the reciprocal.

        Raises:
            ZeroDivisionError: If the value is zero
        """
        return Numeric(1 / self.value)

    def to_decimal(self) -> Decimal:
        """
        Convert to an exact Decimal.

        Raises:
            ValueError: If the value has no finite decimal representation
        """
        if not self.is_decimal:
            raise ValueError(f"{self.value} has no finite decimal representation")
        places = 0
        scaled = self.value
        while scaled.denominator != 1:
            scaled *= 10
            places += 1
        return Decimal(scaled.numerator).scaleb(-places)

    def __add__(self, other: Scalar) -> "Numeric":
        """Add a Numeric or integer."""
        return Numeric(self.value + _as_fraction(other))

    def __sub__(self, other: Scalar) -> "Numeric":
        """Subtract a Numeric or integer."""
        return Numeric(self.value - _as_fraction(other))

    def __mul__(self, other: Scalar) -> "Numeric":
        """Multiply by a Numeric or integer."""
        return Numeric(self.value * _as_fraction(other))

    def __neg__(self) -> "Numeric":
        """Negate."""
        return Numeric(-self.value)

    def __eq__(self, other: object) -> bool:
        """Check equality."""
        if not isinstance(other, Numeric):
            return NotImplemented
        return self.value == other.value

    def __lt__(self, other: "Numeric") -> bool:
        """Less than comparison."""
        return self.value < other.value

    def __le__(self, other: "Numeric") -> bool:
        """Less than or equal comparison."""
        return self.value <= other.value

    def __gt__(self, other: "Numeric") -> bool:
        """Greater than comparison."""
        return self.value > other.value

    def __ge__(self, other: "Numeric") -> bool:
        """Greater than or equal comparison."""
        return self.value >= other.value

    def __str__(self) -> str:
        """Format as plain decimal string, or as a fraction if not decimal."""
        if self.is_decimal:
            text = format(self.to_decimal(), "f")
            if "." in text:
                text = text.rstrip("0").rstrip(".")
            return text
        return f"{self.value.numerator}/{self.value.denominator}"

    def __repr__(self) -> str:
        """Repr format."""
        return f"Numeric({self})"


def _as_fraction(other: Scalar) -> Fraction:
    if isinstance(other, Numeric):
        return other.value
    return Fraction(other)
