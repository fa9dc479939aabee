"""Small rational numbers used for musical positions and pitches."""

from __future__ import annotations

import math
from fractions import Fraction
from functools import total_ordering
from numbers import Real

_APPROX_DENOMINATOR = 10000


@total_ordering
class Fract:
    """A numerator/denominator pair with musical-grid arithmetic."""

    __slots__ = ("num", "den")

    def __init__(self, num: int = 0, den: int = 1) -> None:
        self.num = int(num)
        self.den = int(den)

    def simplify(self) -> None:
        """Reduce the fraction in place by the greatest common divisor."""
        divisor = math.gcd(self.num, self.den)
        if divisor:
            self.num //= divisor
            self.den //= divisor

    def __float__(self) -> float:
        return self.num / self.den

    def __mul__(self, factor):
        if isinstance(factor, (Real, Fract)):
            return float(factor) * self.num / self.den
        return NotImplemented

    def __rmul__(self, factor):
        return self.__mul__(factor)

    def __add__(self, other):
        if isinstance(other, Fract):
            result = Fract(
                self.num * other.den + other.num * self.den, self.den * other.den
            )
            result.simplify()
            return result
        if isinstance(other, Real):
            total = float(self) + float(other)
            result = Fract(int(total * _APPROX_DENOMINATOR), _APPROX_DENOMINATOR)
            result.simplify()
            return result
        return NotImplemented

    def __radd__(self, other):
        if isinstance(other, Real):
            return float(other) + float(self)
        return NotImplemented

    def __sub__(self, other):
        if isinstance(other, Fract):
            result = Fract(
                self.num * other.den - other.num * self.den, self.den * other.den
            )
            result.simplify()
            return result
        if isinstance(other, Real):
            return float(self) - float(other)
        return NotImplemented

    def __rsub__(self, other):
        if isinstance(other, Real):
            return float(other) - float(self)
        return NotImplemented

    def __eq__(self, other) -> bool:
        if isinstance(other, Fract):
            return self.num * other.den == other.num * self.den
        if isinstance(other, Real):
            return float(self) == other
        return NotImplemented

    def __lt__(self, other) -> bool:
        if isinstance(other, (Fract, Real)):
            return float(self) < float(other)
        return NotImplemented

    def __hash__(self) -> int:
        if self.den:
            return hash(Fraction(self.num, self.den))
        return hash((self.num, self.den))

    def __repr__(self) -> str:
        return f"Fract({self.num}, {self.den})"