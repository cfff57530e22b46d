"""
Graded Ideal - Homogeneous Ideals of Graded Rings

Decision procedures over finitely supported elements of a graded ring:
homogeneity of ideals (three equivalent forms), the homogeneous closure,
closure algebra on homogeneous ideals, and a primality test driven by the
leading-index argument.
"""

__version__ = "0.1.0"

from .monoid import (
    IndexMonoid,
    OrderedCancelMonoid,
    FreeMonoid,
    NaturalMonoid,
    IntegerMonoid,
    LexMonoid,
    CyclicMonoid,
)
from .coefficients import CoefficientRing, IntegerRing, RationalField, PrimeField
from .element import (
    GradedElement,
    HomogeneousElement,
    support,
    project,
    sum_of_components,
    convolution,
)
from .ideal import (
    Ideal,
    HomogeneousIdeal,
    generator_form,
    self_generation_form,
    component_closure_form,
    component_closed_on,
    is_homogeneous,
    homogeneous_closure,
    as_homogeneous,
)
from .ring import GradedRing, MonoidAlgebra
from .algebra import product, sup, inf, infimum, radical, in_radical, minimal_primes
from .primality import PrimalityEngine, PairVerdict, PrimeObstruction, membership_oracle, is_prime
from .config import EngineConfig
from .errors import (
    GradedRingError,
    PreconditionViolation,
    MalformedGeneratingSet,
    OracleContractViolation,
    UnsupportedOperation,
)

__all__ = [
    "IndexMonoid",
    "OrderedCancelMonoid",
    "FreeMonoid",
    "NaturalMonoid",
    "IntegerMonoid",
    "LexMonoid",
    "CyclicMonoid",
    "CoefficientRing",
    "IntegerRing",
    "RationalField",
    "PrimeField",
    "GradedElement",
    "HomogeneousElement",
    "support",
    "project",
    "sum_of_components",
    "convolution",
    "Ideal",
    "HomogeneousIdeal",
    "generator_form",
    "self_generation_form",
    "component_closure_form",
    "component_closed_on",
    "is_homogeneous",
    "homogeneous_closure",
    "as_homogeneous",
    "GradedRing",
    "MonoidAlgebra",
    "product",
    "sup",
    "inf",
    "infimum",
    "radical",
    "in_radical",
    "minimal_primes",
    "PrimalityEngine",
    "PairVerdict",
    "PrimeObstruction",
    "membership_oracle",
    "is_prime",
    "EngineConfig",
    "GradedRingError",
    "PreconditionViolation",
    "MalformedGeneratingSet",
    "OracleContractViolation",
    "UnsupportedOperation",
]
