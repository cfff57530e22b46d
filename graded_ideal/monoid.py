"""
Index Monoid Module

Commutative monoids that index the components of a graded ring.

The leading-index argument of the primality engine needs more than a monoid:
the order on indices has to be total, translation-invariant and cancellative.
That capability is the OrderedCancelMonoid class; code that depends on it
checks for the class instead of a runtime flag.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Hashable, Iterable, Iterator, Optional, Tuple

import numpy as np

from .errors import UnsupportedOperation


Index = Hashable


class IndexMonoid(ABC):
    """
    A commutative monoid of grading indices.

    Divisibility is the monoid's own: a | b iff a + h = b for some index h.
    """

    @property
    @abstractmethod
    def zero(self) -> Index:
        """Neutral element."""

    @abstractmethod
    def add(self, a: Index, b: Index) -> Index:
        """Monoid operation."""

    @abstractmethod
    def coerce(self, a: Any) -> Index:
        """Normalise a raw index, raising ValueError/TypeError if it is not one."""

    @abstractmethod
    def divides(self, a: Index, b: Index) -> bool:
        """True if a + h = b for some index h."""

    @abstractmethod
    def lcm(self, a: Index, b: Index) -> Index:
        """
        A common multiple c of a and b such that c | m whenever a | m and b | m.
        """

    def decompositions(self, k: Index) -> Iterator[Tuple[Index, Index]]:
        """All pairs (i, j) with i + j = k."""
        raise UnsupportedOperation(f"{self!r} has no finite decompositions of {k!r}")


class OrderedCancelMonoid(IndexMonoid):
    """
    Monoid with a total order that is translation-invariant
    (a <= b implies a + c <= b + c) and cancellative (a + c = b + c implies a = b).

    Under these laws the maximum of a finite set of indices behaves like the
    degree of a polynomial's top term.
    """

    @abstractmethod
    def sort_key(self, a: Index) -> Any:
        """Key realising the total order."""

    @abstractmethod
    def subtract(self, b: Index, a: Index) -> Optional[Index]:
        """The unique h with a + h = b, or None."""

    def less(self, a: Index, b: Index) -> bool:
        return self.sort_key(a) < self.sort_key(b)

    def leading(self, indices: Iterable[Index]) -> Index:
        """
        Leading index: maximum of a finite nonempty set under the monoid order.

        Raises:
            ValueError: if the set is empty
        """
        indices = list(indices)
        if not indices:
            raise ValueError("Leading index of an empty set is undefined")
        return max(indices, key=self.sort_key)


class FreeMonoid(OrderedCancelMonoid):
    """Ordered monoid isomorphic to N^rank, addressed through exponent vectors."""

    rank: int

    @abstractmethod
    def exponents(self, a: Index) -> np.ndarray:
        """Exponent vector of an index."""

    @abstractmethod
    def from_exponents(self, vector: Iterable[int]) -> Index:
        """Index with the given exponent vector."""

    def variable(self, position: int) -> Index:
        """Index of the position-th free generator."""
        if not 0 <= position < self.rank:
            raise ValueError(f"Variable {position} out of range [0, {self.rank})")
        unit = np.zeros(self.rank, dtype=np.int64)
        unit[position] = 1
        return self.from_exponents(unit)


def _as_int(value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
        raise TypeError(f"Index must be an integer, got {value!r}")
    return int(value)


@dataclass(frozen=True)
class NaturalMonoid(FreeMonoid):
    """Natural numbers under addition: the degree grading of K[x]."""

    rank = 1

    @property
    def zero(self) -> int:
        return 0

    def add(self, a: int, b: int) -> int:
        return a + b

    def coerce(self, a: Any) -> int:
        a = _as_int(a)
        if a < 0:
            raise ValueError(f"Natural index must be non-negative, got {a}")
        return a

    def divides(self, a: int, b: int) -> bool:
        return a <= b

    def lcm(self, a: int, b: int) -> int:
        return max(a, b)

    def decompositions(self, k: int) -> Iterator[Tuple[int, int]]:
        for i in range(k + 1):
            yield i, k - i

    def sort_key(self, a: int) -> int:
        return a

    def subtract(self, b: int, a: int) -> Optional[int]:
        return b - a if a <= b else None

    def exponents(self, a: int) -> np.ndarray:
        return np.array([a], dtype=np.int64)

    def from_exponents(self, vector: Iterable[int]) -> int:
        (value,) = [int(v) for v in vector]
        return self.coerce(value)


@dataclass(frozen=True)
class IntegerMonoid(OrderedCancelMonoid):
    """
    Integers under addition (Laurent grading).

    Every index divides every other, so every nonzero monomial is a unit.
    """

    @property
    def zero(self) -> int:
        return 0

    def add(self, a: int, b: int) -> int:
        return a + b

    def coerce(self, a: Any) -> int:
        return _as_int(a)

    def divides(self, a: int, b: int) -> bool:
        return True

    def lcm(self, a: int, b: int) -> int:
        return 0

    def sort_key(self, a: int) -> int:
        return a

    def subtract(self, b: int, a: int) -> int:
        return b - a


@dataclass(frozen=True)
class LexMonoid(FreeMonoid):
    """
    N^rank with componentwise addition and lexicographic order.

    Divisibility is componentwise <=, so homogeneous ideals of the monoid
    algebra are the monomial ideals of K[x_0, ..., x_{rank-1}].
    """

    rank: int = 2

    def __post_init__(self):
        if self.rank < 1:
            raise ValueError(f"rank must be >= 1, got {self.rank}")

    @property
    def zero(self) -> Tuple[int, ...]:
        return (0,) * self.rank

    def add(self, a, b) -> Tuple[int, ...]:
        return tuple(int(v) for v in np.add(a, b))

    def coerce(self, a: Any) -> Tuple[int, ...]:
        try:
            values = tuple(_as_int(v) for v in a)
        except TypeError:
            raise TypeError(f"Index of {self!r} must be a sequence of integers, got {a!r}") from None
        if len(values) != self.rank:
            raise ValueError(f"Index {a!r} has length {len(values)}, expected {self.rank}")
        if any(v < 0 for v in values):
            raise ValueError(f"Index {a!r} has a negative exponent")
        return values

    def divides(self, a, b) -> bool:
        return bool(np.all(np.asarray(a) <= np.asarray(b)))

    def lcm(self, a, b) -> Tuple[int, ...]:
        return tuple(int(v) for v in np.maximum(a, b))

    def decompositions(self, k) -> Iterator[Tuple[Tuple[int, ...], Tuple[int, ...]]]:
        for i in np.ndindex(*(int(v) + 1 for v in k)):
            yield tuple(int(v) for v in i), tuple(int(v) for v in np.subtract(k, i))

    def sort_key(self, a) -> Tuple[int, ...]:
        return tuple(a)

    def subtract(self, b, a) -> Optional[Tuple[int, ...]]:
        if not self.divides(a, b):
            return None
        return tuple(int(v) for v in np.subtract(b, a))

    def exponents(self, a) -> np.ndarray:
        return np.asarray(a, dtype=np.int64)

    def from_exponents(self, vector: Iterable[int]) -> Tuple[int, ...]:
        return self.coerce(int(v) for v in vector)


@dataclass(frozen=True)
class CyclicMonoid(IndexMonoid):
    """
    Z/n under addition: a grading with no compatible total order.

    Useful as the canonical example that the leading-index argument must reject.
    """

    order: int = 2

    def __post_init__(self):
        if self.order < 1:
            raise ValueError(f"order must be >= 1, got {self.order}")

    @property
    def zero(self) -> int:
        return 0

    def add(self, a: int, b: int) -> int:
        return (a + b) % self.order

    def coerce(self, a: Any) -> int:
        return _as_int(a) % self.order

    def divides(self, a: int, b: int) -> bool:
        return True

    def lcm(self, a: int, b: int) -> int:
        return 0

    def decompositions(self, k: int) -> Iterator[Tuple[int, int]]:
        for i in range(self.order):
            yield i, (k - i) % self.order
