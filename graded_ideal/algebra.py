"""
Ideal Algebra Module

Lattice and multiplicative operations on homogeneous ideals. Every operation
returns a HomogeneousIdeal together with an explicit homogeneous generating
set, so homogeneity of the result is certified by construction.

Infinite families are out of reach: `infimum` takes a finite iterable and
`radical` is only computed where the homogeneous primes are the finitely many
monomial primes (free index monoids over a field).
"""

import itertools
import logging
from functools import reduce
from typing import Iterable, List

import numpy as np

from .element import GradedElement, HomogeneousElement
from .errors import UnsupportedOperation
from .ideal import HomogeneousIdeal, Ideal, as_homogeneous
from .monoid import FreeMonoid
from .ring import MonoidAlgebra


logger = logging.getLogger(__name__)


def _common_ring(*ideals: Ideal):
    ring = ideals[0].ring
    for other in ideals[1:]:
        if other.ring != ring:
            raise ValueError("Ideals belong to different graded rings")
    return ring


def _monoid_algebra(ring, operation: str) -> MonoidAlgebra:
    if not isinstance(ring, MonoidAlgebra):
        raise UnsupportedOperation(f"{operation} is only computed for monoid algebras, got {ring!r}")
    return ring


def _nonzero(ideal: HomogeneousIdeal) -> List[HomogeneousElement]:
    return [g for g in ideal.generators if not g.is_zero()]


def minimal_generators(ring, generators: Iterable[GradedElement]) -> List[HomogeneousElement]:
    """Drop generators that already lie in the ideal generated by the rest."""
    kept = [g for g in generators if not g.is_zero()]
    position = 0
    while position < len(kept):
        rest = kept[:position] + kept[position + 1:]
        if ring.contains(rest, kept[position]):
            kept.pop(position)
        else:
            position += 1
    return kept


def product(I: Ideal, J: Ideal) -> HomogeneousIdeal:
    """I·J, generated by the pairwise products s·t (homogeneous at i + j)."""
    ring = _common_ring(I, J)
    I, J = as_homogeneous(I), as_homogeneous(J)
    return HomogeneousIdeal(ring, [s * t for s in _nonzero(I) for t in _nonzero(J)])


def sup(I: Ideal, J: Ideal) -> HomogeneousIdeal:
    """I + J, generated by S ∪ T."""
    ring = _common_ring(I, J)
    I, J = as_homogeneous(I), as_homogeneous(J)
    return HomogeneousIdeal(ring, I.generators + J.generators)


def inf(I: Ideal, J: Ideal) -> HomogeneousIdeal:
    """
    I ∩ J.

    The intersection of homogeneous ideals is homogeneous (a component of an
    element of both lies in both), so it is generated by its homogeneous
    members. c·x^m lies in I ∩ J iff c is a multiple of both gcd_I(m) and
    gcd_J(m); those gcds only depend on which generator indices divide m, and
    the least such m for each divisor pattern is an lcm of generator indices.
    """
    ring = _common_ring(I, J)
    I, J = as_homogeneous(I), as_homogeneous(J)
    _monoid_algebra(ring, "inf")
    S, T = _nonzero(I), _nonzero(J)
    if not S or not T:
        return ring.zero_ideal()

    coefficients = ring.coefficients
    candidates = ring.lcm_closure(g.index for g in S + T)
    logger.debug("inf: %d candidate indices from %d generators", len(candidates), len(S) + len(T))

    generators = []
    for index in candidates:
        a = ring.coefficient_gcd_at(S, index)
        b = ring.coefficient_gcd_at(T, index)
        c = coefficients.lcm(a, b)
        if not coefficients.is_zero(c):
            generators.append(ring.homogeneous(index, c))
    return HomogeneousIdeal(ring, minimal_generators(ring, generators))


def infimum(ideals: Iterable[Ideal], ring=None) -> HomogeneousIdeal:
    """
    Intersection of a finite family of homogeneous ideals.

    The empty family gives the whole ring, which needs `ring` to be named.
    """
    ideals = list(ideals)
    if not ideals:
        if ring is None:
            raise ValueError("The intersection of an empty family needs an explicit ring")
        return ring.whole_ring()
    if ring is not None and ideals[0].ring != ring:
        raise ValueError("Ideals belong to different graded rings")
    return reduce(inf, (as_homogeneous(I) for I in ideals))


def _free_monoid_ring(I: HomogeneousIdeal, operation: str):
    ring = _monoid_algebra(I.ring, operation)
    monoid = ring.require_ordered(operation)
    if not isinstance(monoid, FreeMonoid) or not ring.coefficients.is_field:
        raise UnsupportedOperation(
            f"{operation} is only computed over a field with a free index monoid, got {ring!r}"
        )
    return ring, monoid


def radical(I: Ideal) -> HomogeneousIdeal:
    """
    √I for a monomial ideal: generated by x^supp(g) for every generator x^g.

    Equal to the intersection of the homogeneous primes containing I
    (see minimal_primes).

    Raises:
        PreconditionViolation: if the index monoid is not ordered and cancellative
        UnsupportedOperation: if the homogeneous primes are not monomial primes
    """
    I = as_homogeneous(I)
    ring, monoid = _free_monoid_ring(I, "radical")
    generators = []
    for g in _nonzero(I):
        squarefree = (monoid.exponents(g.index) > 0).astype(np.int64)
        generators.append(ring.monomial(monoid.from_exponents(squarefree)))
    return HomogeneousIdeal(ring, minimal_generators(ring, generators))


def in_radical(I: Ideal, x: GradedElement) -> bool:
    return x in radical(I)


def minimal_primes(I: Ideal) -> List[HomogeneousIdeal]:
    """
    Minimal homogeneous primes over a monomial ideal.

    Each is generated by a set of variables hitting the support of every
    generator, minimal under inclusion. The zero ideal gives [0]; the whole
    ring has no primes over it.
    """
    I = as_homogeneous(I)
    ring, monoid = _free_monoid_ring(I, "minimal_primes")
    generators = _nonzero(I)
    if not generators:
        return [ring.zero_ideal()]

    incidence = np.array([monoid.exponents(g.index) > 0 for g in generators])
    if not incidence.any(axis=1).all():
        return []

    covers: List[frozenset] = []
    for size in range(1, monoid.rank + 1):
        for subset in itertools.combinations(range(monoid.rank), size):
            chosen = frozenset(subset)
            if any(cover <= chosen for cover in covers):
                continue
            if incidence[:, list(subset)].any(axis=1).all():
                covers.append(chosen)
    logger.debug("minimal_primes: %d variable covers", len(covers))

    return [
        HomogeneousIdeal(ring, [ring.monomial(monoid.variable(v)) for v in sorted(cover)])
        for cover in covers
    ]
