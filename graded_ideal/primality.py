"""
Primality Engine Module

Decides primality of a homogeneous ideal from a condition on homogeneous
elements only, using the leading-index argument.

Suppose x·y ∈ I with x ∉ I and y ∉ I. The components of x outside I form a
finite nonempty set of indices; call its maximum m1, and likewise m2 for y.
In the component of x·y at m1 + m2 every contribution x_i·y_j other than
x_m1·y_m2 has i > m1 (so x_i ∈ I) or i < m1, hence j > m2 (so y_j ∈ I).
Since I is closed under components, x_m1·y_m2 ∈ I, and an oracle that is
honest on homogeneous pairs must then place x_m1 or y_m2 in I, which
contradicts the choice of m1 and m2.

The order on indices must be total, translation-invariant and cancellative;
without it there is no unique leading index and the case split fails.
"""

import logging
from dataclasses import dataclass
from typing import Any, Callable, FrozenSet, Iterable, Optional, Tuple

from .config import EngineConfig
from .element import GradedElement, HomogeneousElement, convolution_terms
from .errors import MalformedGeneratingSet, OracleContractViolation, PreconditionViolation
from .ideal import Ideal, as_homogeneous


logger = logging.getLogger(__name__)


MixedMembershipOracle = Callable[[HomogeneousElement, HomogeneousElement], bool]


@dataclass(frozen=True)
class PrimeObstruction:
    """Homogeneous witness a·b ∈ I with a ∉ I and b ∉ I."""
    left_index: Any
    right_index: Any
    left: HomogeneousElement
    right: HomogeneousElement


@dataclass(frozen=True)
class PairVerdict:
    """Outcome of running the leading-index argument on a pair with x·y ∈ I."""
    left_in_ideal: bool
    right_in_ideal: bool
    obstruction: Optional[PrimeObstruction] = None

    @property
    def holds(self) -> bool:
        """True if one of the factors lies in the ideal."""
        return self.left_in_ideal or self.right_in_ideal


def membership_oracle(ideal: Ideal) -> MixedMembershipOracle:
    """The honest oracle: a ∈ I or b ∈ I, decided by the ring."""
    def mixed_mem_or_mem(a: HomogeneousElement, b: HomogeneousElement) -> bool:
        return a in ideal or b in ideal
    return mixed_mem_or_mem


class PrimalityEngine:
    """
    Primality of a homogeneous ideal from a homogeneous-pair oracle.

    Args:
        ideal: Homogeneous ideal (re-expressed with homogeneous generators)
        mixed_mem_or_mem: Oracle deciding a ∈ I or b ∈ I for homogeneous
            a, b with a·b ∈ I
        config: Engine configuration

    Raises:
        PreconditionViolation: if the index monoid has no total cancellative order
        MalformedGeneratingSet: if the ideal is not homogeneous
    """

    def __init__(self, ideal: Ideal,
                 mixed_mem_or_mem: Optional[MixedMembershipOracle] = None,
                 config: Optional[EngineConfig] = None):
        self.monoid = ideal.ring.require_ordered("primality test")
        self.ideal = as_homogeneous(ideal)
        self.ring = self.ideal.ring
        self.mixed_mem_or_mem = mixed_mem_or_mem or membership_oracle(self.ideal)
        self.config = config or EngineConfig()

    def obstruction_indices(self, x: GradedElement) -> FrozenSet:
        """Indices of the components of x that lie outside the ideal."""
        return frozenset(i for i in x.support if x.project(i) not in self.ideal)

    def leading_obstruction(self, x: GradedElement) -> Optional[Any]:
        """Largest index whose component lies outside the ideal; None if x ∈ I."""
        indices = self.obstruction_indices(x)
        if not indices:
            return None
        return self.monoid.leading(indices)

    def _ask(self, a: HomogeneousElement, b: HomogeneousElement) -> bool:
        answer = bool(self.mixed_mem_or_mem(a, b))
        if self.config.verify_oracle:
            actual = a in self.ideal or b in self.ideal
            if answer != actual:
                logger.warning("Oracle answered %s for (%r, %r); membership says %s", answer, a, b, actual)
                raise OracleContractViolation(
                    f"Oracle answered {answer} for ({a!r}, {b!r}) but membership gives {actual}"
                )
        return answer

    def _check_contribution(self, x: GradedElement, y: GradedElement,
                            i: Any, j: Any, m1: Any, m2: Any) -> None:
        """
        A contribution x_i·y_j to index m1 + m2 other than (m1, m2) has a factor in I.

        i > m1 puts x_i past the leading obstruction of x; i < m1 forces
        j > m2 by cancellation, which puts y_j past the leading obstruction of y.
        """
        monoid = self.monoid
        if monoid.less(m1, i):
            factor = x.project(i)
        elif monoid.less(i, m1):
            if not monoid.less(m2, j):
                raise PreconditionViolation(
                    f"Index order is not cancellative: {i!r} < {m1!r} but {j!r} <= {m2!r}"
                )
            factor = y.project(j)
        else:
            raise PreconditionViolation(
                f"Index order is not cancellative: {i!r} + {j!r} = {m1!r} + {m2!r} with {j!r} != {m2!r}"
            )
        if factor not in self.ideal:
            raise MalformedGeneratingSet(
                f"Component {factor!r} beyond the leading obstruction lies outside the ideal"
            )

    def check_pair(self, x: GradedElement, y: GradedElement) -> PairVerdict:
        """
        Run the leading-index argument on x, y with x·y ∈ I.

        Returns a verdict naming which factor lies in I, or a PrimeObstruction
        built from the leading components when neither does.

        Raises:
            ValueError: if x·y is not in the ideal
            OracleContractViolation: if the oracle places a leading component in I
        """
        x, y = self.ring.lift(x), self.ring.lift(y)
        product = x * y
        if product not in self.ideal:
            raise ValueError(f"Product of {x!r} and {y!r} is not in the ideal")

        left, right = x in self.ideal, y in self.ideal
        if left or right:
            return PairVerdict(left, right)

        m1, m2 = self.leading_obstruction(x), self.leading_obstruction(y)
        if m1 is None or m2 is None:
            raise MalformedGeneratingSet(
                "An element outside the ideal has all its components inside it; the ideal is not homogeneous"
            )
        logger.debug("Leading obstructions m1=%r, m2=%r", m1, m2)

        target = self.monoid.add(m1, m2)
        a, b = x.project(m1), y.project(m2)
        leading = a * b

        for i, j, _ in convolution_terms(x, y, target):
            if (i, j) != (m1, m2):
                self._check_contribution(x, y, i, j, m1, m2)

        remainder = product.project(target) - leading
        if remainder not in self.ideal:
            raise MalformedGeneratingSet(f"Non-leading part {remainder!r} of the product escaped the ideal")
        if leading not in self.ideal:
            raise MalformedGeneratingSet(f"Leading product {leading!r} escaped the ideal")

        if self._ask(a, b):
            logger.warning("Oracle placed %r or %r in the ideal; both lie outside it", a, b)
            raise OracleContractViolation(
                f"Oracle claims {a!r} or {b!r} is in the ideal, but both are leading obstructions"
            )
        return PairVerdict(False, False, PrimeObstruction(m1, m2, a, b))

    def is_prime(self, pairs: Optional[Iterable[Tuple[GradedElement, GradedElement]]] = None) -> bool:
        """
        Decide whether the ideal is prime.

        The whole ring is never prime. Otherwise the oracle is consulted on
        every homogeneous pair (a, b) with a·b ∈ I from `pairs`, or from the
        ring's critical pairs when `pairs` is None. If all answers hold the
        ideal is prime by the leading-index argument.

        Raises:
            PreconditionViolation: if more than config.max_critical_pairs pairs are produced
            MalformedGeneratingSet: if a supplied pair is not homogeneous
        """
        if self.ideal.is_whole_ring():
            logger.info("%r is the whole ring, not prime", self.ideal)
            return False

        if pairs is None:
            pairs = self.ring.critical_pairs(self.ideal.generators)

        checked = 0
        for count, (a, b) in enumerate(pairs, start=1):
            if count > self.config.max_critical_pairs:
                raise PreconditionViolation(
                    f"More than {self.config.max_critical_pairs} homogeneous pairs to check"
                )
            a, b = self.ring.lift(a), self.ring.lift(b)
            if not (a.is_homogeneous() and b.is_homogeneous()):
                raise MalformedGeneratingSet(f"Pair ({a!r}, {b!r}) is not homogeneous")
            a, b = a.as_homogeneous(), b.as_homogeneous()
            if (a * b) not in self.ideal:
                continue
            checked += 1
            if not self._ask(a, b):
                logger.info("%r is not prime: %r * %r lies in it, neither factor does", self.ideal, a, b)
                return False

        logger.info("%r is prime (%d homogeneous pairs checked)", self.ideal, checked)
        return True


def is_prime(ideal: Ideal,
             mixed_mem_or_mem: Optional[MixedMembershipOracle] = None,
             pairs: Optional[Iterable[Tuple[GradedElement, GradedElement]]] = None,
             config: Optional[EngineConfig] = None) -> bool:
    """Convenience wrapper around PrimalityEngine.is_prime."""
    return PrimalityEngine(ideal, mixed_mem_or_mem, config).is_prime(pairs)
