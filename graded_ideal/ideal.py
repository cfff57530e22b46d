"""
Ideal Module

Ideals given by finite generating sets, and the homogeneity oracle.

An ideal I of a graded ring is homogeneous when any of these equivalent
conditions holds:

1. generator form: I = ⟨S⟩ for some set S of homogeneous elements
2. self-generation form: I = ⟨{x ∈ I : x homogeneous}⟩
3. component-closure form: project(x, i) ∈ I for every x ∈ I and index i

Form 3 is the canonical check (is_homogeneous); forms 1 and 2 are derived
queries built on the homogeneous closure.
"""

import logging
from typing import Any, Iterable, Optional, Tuple

from .element import GradedElement, HomogeneousElement
from .errors import MalformedGeneratingSet


logger = logging.getLogger(__name__)


class Ideal:
    """
    An ideal of a graded ring, represented by a finite generating set.

    Ideals are never mutated; every operation builds a new one.
    """

    def __init__(self, ring, generators: Iterable[Any] = ()):
        self.ring = ring
        self._generators = tuple(ring.lift(g) for g in generators)

    @property
    def generators(self) -> Tuple[GradedElement, ...]:
        return self._generators

    def __contains__(self, x: Any) -> bool:
        return self.ring.contains(self._generators, x)

    def contains_all(self, elements: Iterable[Any]) -> bool:
        return all(x in self for x in elements)

    def __le__(self, other: "Ideal") -> bool:
        """Inclusion self ⊆ other."""
        if not isinstance(other, Ideal):
            return NotImplemented
        if other.ring != self.ring:
            raise ValueError("Ideals belong to different graded rings")
        return other.contains_all(self._generators)

    def __ge__(self, other: "Ideal") -> bool:
        if not isinstance(other, Ideal):
            return NotImplemented
        return other <= self

    def __eq__(self, other: Any) -> bool:
        """Equality as ideals (mutual inclusion), not as generating sets."""
        if not isinstance(other, Ideal):
            return NotImplemented
        if other.ring != self.ring:
            return False
        return self <= other and other <= self

    __hash__ = None

    def is_zero(self) -> bool:
        return all(g.is_zero() for g in self._generators)

    def is_whole_ring(self) -> bool:
        return self.ring.one() in self

    def __repr__(self):
        gens = ", ".join(repr(g) for g in self._generators)
        return f"{type(self).__name__}([{gens}])"


class HomogeneousIdeal(Ideal):
    """
    An ideal generated by homogeneous elements (form 1).

    Raises:
        MalformedGeneratingSet: if a generator has more than one component
    """

    def __init__(self, ring, generators: Iterable[Any] = ()):
        super().__init__(ring, generators)
        checked = []
        for g in self._generators:
            if not g.is_homogeneous():
                raise MalformedGeneratingSet(
                    f"Generator {g!r} has support of size {len(g.support)}, expected at most 1"
                )
            checked.append(g.as_homogeneous())
        self._generators = tuple(checked)

    @property
    def generators(self) -> Tuple[HomogeneousElement, ...]:
        return self._generators


def generator_form(ideal: Ideal) -> Optional[Tuple[HomogeneousElement, ...]]:
    """
    A homogeneous generating set S with ideal = ⟨S⟩, or None if none exists.

    The candidate S generates the homogeneous closure; it generates the whole
    ideal exactly when every given generator is a member of ⟨S⟩.
    """
    if isinstance(ideal, HomogeneousIdeal):
        return ideal.generators
    closure = homogeneous_closure(ideal)
    if ideal <= closure:
        return closure.generators
    return None


def self_generation_form(ideal: Ideal) -> bool:
    """True if ideal = ⟨{x ∈ ideal : x homogeneous}⟩."""
    return homogeneous_closure(ideal) == ideal


def component_closure_form(ideal: Ideal) -> bool:
    """
    True if every component of every element of the ideal lies in the ideal.

    Checking the generators suffices: if their components lie in I they
    generate I itself, and a homogeneously generated ideal is closed under
    projection.
    """
    for g in ideal.generators:
        for component in g.components():
            if component not in ideal:
                logger.debug("Component %r of generator %r escapes the ideal", component, g)
                return False
    return True


def is_homogeneous(ideal: Ideal) -> bool:
    if isinstance(ideal, HomogeneousIdeal):
        return True
    return component_closure_form(ideal)


def component_closed_on(ideal: Ideal, elements: Iterable[GradedElement]) -> bool:
    """
    Check the component-closure form on an explicit sample of members.

    Raises:
        ValueError: if a sample element is not a member of the ideal
    """
    for x in elements:
        if x not in ideal:
            raise ValueError(f"{x!r} is not an element of the ideal")
        if not ideal.contains_all(x.components()):
            return False
    return True


def homogeneous_closure(ideal: Ideal) -> HomogeneousIdeal:
    """
    ⟨{x : x homogeneous and x ∈ ideal}⟩.

    Always homogeneous, contained in `ideal`, and equal to it exactly when
    `ideal` is homogeneous.
    """
    if isinstance(ideal, HomogeneousIdeal):
        return ideal
    return HomogeneousIdeal(ideal.ring, ideal.ring.homogeneous_part(ideal.generators))


def as_homogeneous(ideal: Ideal) -> HomogeneousIdeal:
    """
    Re-express a homogeneous ideal with a homogeneous generating set.

    Raises:
        MalformedGeneratingSet: if the ideal is not homogeneous
    """
    if isinstance(ideal, HomogeneousIdeal):
        return ideal
    witness = generator_form(ideal)
    if witness is None:
        raise MalformedGeneratingSet(f"{ideal!r} is not a homogeneous ideal")
    return HomogeneousIdeal(ideal.ring, witness)
