"""
Error Types

Exceptions raised by the graded ideal engine. All of them describe broken
preconditions or contracts; the decision procedures never fail on ordinary
inputs such as the zero element, the zero ideal or the whole ring.
"""


class GradedRingError(Exception):
    """Base class for graded ring and ideal errors."""


class PreconditionViolation(GradedRingError, ValueError):
    """
    The index monoid (or the call itself) lacks a capability the operation
    depends on, e.g. a total translation-invariant cancellative order.

    Raised before the algorithm runs, never halfway through it.
    """


class MalformedGeneratingSet(GradedRingError, ValueError):
    """A generator claimed to be homogeneous has more than one component."""


class OracleContractViolation(GradedRingError, RuntimeError):
    """The mixed membership oracle contradicts the ideal's own membership test."""


class UnsupportedOperation(GradedRingError, NotImplementedError):
    """No decision procedure is available for this ring and generating set."""
