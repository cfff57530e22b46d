"""
Coefficient Rings

Principal ideal domains used as the graded pieces of a monoid algebra.
Ideal membership for monomials reduces to divisibility here, so every ring
exposes gcd, lcm and divides alongside its arithmetic.
"""

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass
from fractions import Fraction
from functools import reduce
from typing import Any, Iterable, List, Tuple

import numpy as np
import sympy as sp


class CoefficientRing(ABC):
    """A commutative principal ideal domain with exact arithmetic."""

    is_field = False

    @property
    @abstractmethod
    def zero(self) -> Any:
        """Additive identity."""

    @property
    @abstractmethod
    def one(self) -> Any:
        """Multiplicative identity."""

    @abstractmethod
    def coerce(self, value: Any) -> Any:
        """Convert a raw value into a ring element."""

    @abstractmethod
    def gcd(self, a: Any, b: Any) -> Any:
        """Generator of the ideal (a, b), normalised."""

    def add(self, a: Any, b: Any) -> Any:
        return a + b

    def neg(self, a: Any) -> Any:
        return -a

    def mul(self, a: Any, b: Any) -> Any:
        return a * b

    def is_zero(self, a: Any) -> bool:
        return a == self.zero

    def divides(self, a: Any, b: Any) -> bool:
        """True if b lies in the principal ideal (a)."""
        if self.is_zero(a):
            return self.is_zero(b)
        return self._divides_nonzero(a, b)

    def lcm(self, a: Any, b: Any) -> Any:
        """Generator of (a) ∩ (b)."""
        if self.is_zero(a) or self.is_zero(b):
            return self.zero
        return self._lcm_nonzero(a, b)

    def gcd_all(self, values: Iterable[Any]) -> Any:
        return reduce(self.gcd, values, self.zero)

    @abstractmethod
    def factor_pairs(self, c: Any) -> List[Tuple[Any, Any]]:
        """
        Pairs (d, e) with d * e = c, one for every divisor d of c up to units.
        """

    @abstractmethod
    def _divides_nonzero(self, a: Any, b: Any) -> bool:
        pass

    @abstractmethod
    def _lcm_nonzero(self, a: Any, b: Any) -> Any:
        pass


@dataclass(frozen=True)
class IntegerRing(CoefficientRing):
    """The integers Z."""

    @property
    def zero(self) -> int:
        return 0

    @property
    def one(self) -> int:
        return 1

    def coerce(self, value: Any) -> int:
        if isinstance(value, Fraction):
            if value.denominator != 1:
                raise ValueError(f"{value} is not an integer")
            return int(value)
        if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
            raise TypeError(f"Cannot coerce {value!r} into Z")
        return int(value)

    def gcd(self, a: int, b: int) -> int:
        return math.gcd(a, b)

    def factor_pairs(self, c: int) -> List[Tuple[int, int]]:
        if c == 0:
            return [(0, 0)]
        return [(int(d), c // int(d)) for d in sp.divisors(c)]

    def _divides_nonzero(self, a: int, b: int) -> bool:
        return b % a == 0

    def _lcm_nonzero(self, a: int, b: int) -> int:
        return abs(a * b) // math.gcd(a, b)


class Field(CoefficientRing):
    """A field: every nonzero element is a unit, so the only ideals are 0 and 1."""

    is_field = True

    @abstractmethod
    def inverse(self, a: Any) -> Any:
        """Multiplicative inverse of a nonzero element."""

    def gcd(self, a: Any, b: Any) -> Any:
        if self.is_zero(a) and self.is_zero(b):
            return self.zero
        return self.one

    def _divides_nonzero(self, a: Any, b: Any) -> bool:
        return True

    def factor_pairs(self, c: Any) -> List[Tuple[Any, Any]]:
        return [(self.one, c)]

    def _lcm_nonzero(self, a: Any, b: Any) -> Any:
        return self.one

    @property
    @abstractmethod
    def sympy_domain(self) -> Any:
        """The same field as a sympy domain, for Groebner basis computations."""

    def to_sympy(self, a: Any) -> Any:
        return sp.Integer(int(a))


@dataclass(frozen=True)
class RationalField(Field):
    """The rationals Q with fractions.Fraction arithmetic."""

    @property
    def zero(self) -> Fraction:
        return Fraction(0)

    @property
    def one(self) -> Fraction:
        return Fraction(1)

    def coerce(self, value: Any) -> Fraction:
        if isinstance(value, bool):
            raise TypeError(f"Cannot coerce {value!r} into Q")
        if isinstance(value, np.integer):
            value = int(value)
        return Fraction(value)

    def inverse(self, a: Fraction) -> Fraction:
        if a == 0:
            raise ZeroDivisionError("0 has no inverse")
        return 1 / a

    @property
    def sympy_domain(self) -> Any:
        return sp.QQ

    def to_sympy(self, a: Fraction) -> Any:
        return sp.Rational(a.numerator, a.denominator)


@dataclass(frozen=True)
class PrimeField(Field):
    """The finite field GF(p), elements stored as integers in [0, p)."""

    p: int = 2

    def __post_init__(self):
        if not sp.isprime(self.p):
            raise ValueError(f"p must be prime, got {self.p}")

    @property
    def zero(self) -> int:
        return 0

    @property
    def one(self) -> int:
        return 1

    def coerce(self, value: Any) -> int:
        if isinstance(value, Fraction):
            return self.mul(self.coerce(value.numerator), self.inverse(self.coerce(value.denominator)))
        if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
            raise TypeError(f"Cannot coerce {value!r} into GF({self.p})")
        return int(value) % self.p

    def add(self, a: int, b: int) -> int:
        return (a + b) % self.p

    def neg(self, a: int) -> int:
        return -a % self.p

    def mul(self, a: int, b: int) -> int:
        return (a * b) % self.p

    def inverse(self, a: int) -> int:
        if a % self.p == 0:
            raise ZeroDivisionError("0 has no inverse")
        return pow(a, -1, self.p)

    @property
    def sympy_domain(self) -> Any:
        return sp.GF(self.p)
