"""
Graded Element Module

Finitely supported elements of a graded ring, their components and the
convolution product.

An element is an immutable mapping index -> nonzero piece value. Zero values
never appear in the mapping, so equality and hashing are extensional over it
and the support is simply the set of keys.
"""

from fractions import Fraction
from typing import Any, Dict, FrozenSet, Hashable, Iterator, List, Mapping, Optional, Tuple

import numpy as np


Index = Hashable


class GradedElement:
    """
    An element of a graded ring R = ⊕ A(i).

    Attributes:
        ring: The graded ring the element belongs to
    """

    def __init__(self, ring, components: Optional[Mapping[Any, Any]] = None):
        self.ring = ring
        collected: Dict[Index, Any] = {}
        for raw_index, raw_value in (components or {}).items():
            index = ring.monoid.coerce(raw_index)
            value = ring.piece_coerce(index, raw_value)
            if index in collected:
                value = ring.piece_add(index, collected[index], value)
            collected[index] = value
        self._components = {
            i: v for i, v in collected.items() if not ring.piece_is_zero(i, v)
        }

    @classmethod
    def from_pairs(cls, ring, pairs) -> "GradedElement":
        """Build an element from (index, value) pairs; repeated indices are summed."""
        element = ring.zero()
        for index, value in pairs:
            element = element + ring.homogeneous(index, value)
        return element

    @property
    def support(self) -> FrozenSet[Index]:
        """Indices with a nonzero component."""
        return frozenset(self._components)

    def __getitem__(self, index: Any) -> Any:
        """Raw piece value at `index` (the piece's zero outside the support)."""
        index = self.ring.monoid.coerce(index)
        return self._components.get(index, self.ring.piece_zero(index))

    def items(self) -> List[Tuple[Index, Any]]:
        """(index, value) pairs of the support, in index order."""
        return sorted(self._components.items(), key=lambda item: item[0])

    def project(self, index: Any) -> "HomogeneousElement":
        """Component at `index`, lifted back into the ring."""
        return HomogeneousElement(self.ring, index, self[index])

    def components(self) -> List["HomogeneousElement"]:
        """The nonzero homogeneous components, in index order."""
        return [HomogeneousElement(self.ring, i, v) for i, v in self.items()]

    def sum_of_components(self) -> "GradedElement":
        total = self.ring.zero()
        for component in self.components():
            total = total + component
        return total

    def is_zero(self) -> bool:
        return not self._components

    def is_homogeneous(self) -> bool:
        """True if the element lies in a single component."""
        return len(self._components) <= 1

    def as_homogeneous(self) -> "HomogeneousElement":
        """
        View a homogeneous element as a HomogeneousElement.

        Raises:
            ValueError: if the element has more than one component
        """
        if isinstance(self, HomogeneousElement):
            return self
        if not self.is_homogeneous():
            raise ValueError(f"{self!r} is not homogeneous")
        if self.is_zero():
            return HomogeneousElement(self.ring, self.ring.monoid.zero, self.ring.piece_zero(self.ring.monoid.zero))
        ((index, value),) = self._components.items()
        return HomogeneousElement(self.ring, index, value)

    def leading_index(self) -> Index:
        """Maximal index of the support (ordered index monoids only)."""
        monoid = self.ring.require_ordered("leading index")
        return monoid.leading(self._components)

    def _lift(self, other: Any) -> Optional["GradedElement"]:
        if isinstance(other, GradedElement):
            if other.ring != self.ring:
                raise ValueError("Elements belong to different graded rings")
            return other
        if isinstance(other, (int, Fraction, np.integer)) and not isinstance(other, bool):
            return self.ring.scalar(other)
        return None

    def __add__(self, other: Any) -> "GradedElement":
        other = self._lift(other)
        if other is None:
            return NotImplemented
        ring = self.ring
        merged = dict(self._components)
        for index, value in other._components.items():
            if index in merged:
                merged[index] = ring.piece_add(index, merged[index], value)
            else:
                merged[index] = value
        return GradedElement(ring, merged)

    __radd__ = __add__

    def __neg__(self) -> "GradedElement":
        ring = self.ring
        return GradedElement(ring, {i: ring.piece_neg(i, v) for i, v in self._components.items()})

    def __sub__(self, other: Any) -> "GradedElement":
        other = self._lift(other)
        if other is None:
            return NotImplemented
        return self + (-other)

    def __rsub__(self, other: Any) -> "GradedElement":
        other = self._lift(other)
        if other is None:
            return NotImplemented
        return other + (-self)

    def __mul__(self, other: Any) -> "GradedElement":
        other = self._lift(other)
        if other is None:
            return NotImplemented
        return convolution(self, other)

    def __rmul__(self, other: Any) -> "GradedElement":
        other = self._lift(other)
        if other is None:
            return NotImplemented
        return convolution(other, self)

    def __pow__(self, exponent: int) -> "GradedElement":
        if exponent < 0:
            raise ValueError("Negative powers are not defined in a graded ring")
        result = self.ring.one()
        for _ in range(exponent):
            result = result * self
        return result

    def __eq__(self, other: Any) -> bool:
        """Elements compare equal only to elements of the same ring; scalars are not lifted."""
        if not isinstance(other, GradedElement):
            return NotImplemented
        if other.ring != self.ring:
            return False
        return self._components == other._components

    def __hash__(self):
        return hash(frozenset(self._components.items()))

    def __repr__(self):
        terms = ", ".join(f"{i!r}: {v!r}" for i, v in self.items())
        return f"GradedElement({{{terms}}})"


class HomogeneousElement(GradedElement):
    """
    An element lying in the single component A(index).

    The producing (index, value) pair is kept even when value is zero.
    """

    def __init__(self, ring, index: Any, value: Any):
        index = ring.monoid.coerce(index)
        value = ring.piece_coerce(index, value)
        super().__init__(ring, {index: value})
        self.index = index
        self.value = value

    def __repr__(self):
        return f"HomogeneousElement({self.index!r}, {self.value!r})"


def support(x: GradedElement) -> FrozenSet[Index]:
    return x.support


def project(x: GradedElement, index: Any) -> HomogeneousElement:
    """Component of x at index; zero when index is outside the support."""
    return x.project(index)


def sum_of_components(x: GradedElement) -> GradedElement:
    """Reassemble x from its components. Always returns an element equal to x."""
    return x.sum_of_components()


def convolution_terms(x: GradedElement, y: GradedElement, target: Any) -> Iterator[Tuple[Index, Index, Any]]:
    """
    Pairs (i, j) with i + j = target, i in support(x), j in support(y),
    together with the piece product x_i * y_j in A(target).
    """
    ring = x.ring
    target = ring.monoid.coerce(target)
    for i, a in x.items():
        for j, b in y.items():
            if ring.monoid.add(i, j) == target:
                yield i, j, ring.piece_mul(i, a, j, b)


def convolution(x: GradedElement, y: GradedElement) -> GradedElement:
    """
    Multiply two graded elements.

    The component at k is the sum of x_i * y_j over i + j = k; the product of
    homogeneous elements at i and j is homogeneous at i + j.
    """
    if x.ring != y.ring:
        raise ValueError("Elements belong to different graded rings")
    ring = x.ring
    monoid = ring.monoid

    if isinstance(x, HomogeneousElement) and isinstance(y, HomogeneousElement):
        index = monoid.add(x.index, y.index)
        return HomogeneousElement(ring, index, ring.piece_mul(x.index, x.value, y.index, y.value))

    acc: Dict[Index, Any] = {}
    for i, a in x.items():
        for j, b in y.items():
            k = monoid.add(i, j)
            term = ring.piece_mul(i, a, j, b)
            acc[k] = ring.piece_add(k, acc[k], term) if k in acc else term
    return GradedElement(ring, acc)
