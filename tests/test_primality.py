"""
Tests for the Primality Engine and the leading-index argument
"""

import logging

import pytest

from graded_ideal import (
    CyclicMonoid,
    EngineConfig,
    IntegerMonoid,
    IntegerRing,
    LexMonoid,
    MonoidAlgebra,
    NaturalMonoid,
    PrimalityEngine,
    PrimeField,
    PrimeObstruction,
    RationalField,
    homogeneous_closure,
    is_prime,
    membership_oracle,
)
from graded_ideal.errors import (
    MalformedGeneratingSet,
    OracleContractViolation,
    PreconditionViolation,
    UnsupportedOperation,
)


QX = MonoidAlgebra(NaturalMonoid(), RationalField())
ZX = MonoidAlgebra(NaturalMonoid(), IntegerRing())
QXY = MonoidAlgebra(LexMonoid(2), RationalField())
LAURENT = MonoidAlgebra(IntegerMonoid(), RationalField())

X = QX.monomial(1)
x = QXY.monomial((1, 0))
y = QXY.monomial((0, 1))

UNCHECKED = EngineConfig(verify_oracle=False)


class TestIsPrime:
    def test_variable_ideal_is_prime(self):
        assert is_prime(QX.ideal([X]))
        assert is_prime(QXY.ideal([x]))
        assert is_prime(QXY.ideal([x, y]))

    def test_powers_and_products_are_not_prime(self):
        assert not is_prime(QX.ideal([X ** 2]))
        assert not is_prime(QXY.ideal([x * y]))
        assert not is_prime(QXY.ideal([x ** 2]))

    def test_zero_ideal_is_prime(self):
        assert is_prime(QX.zero_ideal())
        assert is_prime(QXY.zero_ideal())
        assert is_prime(LAURENT.zero_ideal())
        assert is_prime(ZX.zero_ideal())
        assert is_prime(MonoidAlgebra(IntegerMonoid(), IntegerRing()).zero_ideal())

    def test_whole_ring_is_not_prime(self):
        assert not is_prime(QX.whole_ring())
        assert not is_prime(LAURENT.ideal([LAURENT.monomial(2)]))

    def test_whole_ring_ignores_oracle(self):
        engine = PrimalityEngine(QX.whole_ring(), lambda a, b: True, UNCHECKED)
        assert not engine.is_prime()

    def test_prime_field(self):
        R = MonoidAlgebra(NaturalMonoid(), PrimeField(2))
        t = R.monomial(1)
        assert is_prime(R.ideal([t]))
        assert not is_prime(R.ideal([t ** 2]))

    def test_ideal_given_by_non_homogeneous_generators(self):
        assert is_prime(QX.ideal([X + X ** 2, X ** 2]))

    def test_closure_of_prime_is_prime(self):
        closure = homogeneous_closure(QX.ideal([X - 1]))
        assert closure.is_zero()
        assert is_prime(closure)

    def test_explicit_pairs_over_integers(self):
        I = ZX.ideal([ZX.scalar(6)])
        assert not is_prime(I, pairs=[(2, 3)])
        assert is_prime(ZX.ideal([ZX.scalar(5)]), pairs=[(1, 5), (ZX.monomial(1), 5)])

    def test_integer_critical_pairs(self):
        assert is_prime(ZX.ideal([ZX.monomial(1)]))
        assert not is_prime(ZX.ideal([ZX.homogeneous(1, 6)]))
        assert is_prime(ZX.ideal([ZX.scalar(2), ZX.monomial(1)]))
        assert not is_prime(ZX.ideal([ZX.scalar(4), ZX.monomial(1)]))

    def test_coefficient_gcd_across_generators(self):
        # (4x, 6x) = (2x), which contains 2·x but neither 2 nor x
        assert not is_prime(ZX.ideal([ZX.homogeneous(1, 4), ZX.homogeneous(1, 6)]))
        assert is_prime(ZX.ideal([ZX.homogeneous(1, 2), ZX.homogeneous(1, 3)]))

    def test_integer_laurent_critical_pairs(self):
        R = MonoidAlgebra(IntegerMonoid(), IntegerRing())
        t = R.monomial(1)
        assert is_prime(R.ideal([2 * t]))
        assert not is_prime(R.ideal([R.scalar(6)]))

    def test_non_homogeneous_over_integers_is_undecided(self):
        with pytest.raises(UnsupportedOperation):
            is_prime(ZX.ideal([ZX.element({0: 1, 1: 2})]))

    def test_oracle_only_sees_products_in_ideal(self):
        I = QX.ideal([X ** 3])
        calls = []
        honest = membership_oracle(I)

        def recording(a, b):
            calls.append((a, b))
            return honest(a, b)

        pairs = [(X, X), (QX.one(), X), (X, X ** 2)]
        assert not is_prime(I, recording, pairs=pairs)
        assert calls == [(X, X ** 2)]

    def test_pairs_must_be_homogeneous(self):
        with pytest.raises(MalformedGeneratingSet):
            is_prime(QX.ideal([X]), pairs=[(X + 1, X)])

    def test_pair_budget(self):
        config = EngineConfig(max_critical_pairs=3)
        with pytest.raises(PreconditionViolation):
            is_prime(QXY.ideal([x, y]), config=config)
        assert is_prime(QXY.ideal([x]), config=config)

    def test_logs_decision(self, caplog):
        with caplog.at_level(logging.INFO, logger="graded_ideal.primality"):
            is_prime(QX.ideal([X ** 2]))
        assert "is not prime" in caplog.text


class TestPreconditions:
    def test_cyclic_grading_rejected(self):
        R = MonoidAlgebra(CyclicMonoid(3), RationalField())
        with pytest.raises(PreconditionViolation):
            PrimalityEngine(R.ideal([R.monomial(1)]))
        with pytest.raises(PreconditionViolation):
            is_prime(R.zero_ideal())

    def test_non_homogeneous_ideal_rejected(self):
        with pytest.raises(MalformedGeneratingSet):
            is_prime(QX.ideal([X + 1]))


class TestOracleContract:
    def test_lying_oracle_detected(self):
        with pytest.raises(OracleContractViolation):
            is_prime(QX.ideal([X]), lambda a, b: False)
        with pytest.raises(OracleContractViolation):
            is_prime(QX.ideal([X ** 2]), lambda a, b: True)

    def test_unverified_oracle_is_trusted_by_is_prime(self):
        engine = PrimalityEngine(QX.ideal([X ** 2]), lambda a, b: True, UNCHECKED)
        assert engine.is_prime()

    def test_unverified_lie_caught_by_leading_argument(self):
        engine = PrimalityEngine(QX.ideal([X ** 2]), lambda a, b: True, UNCHECKED)
        with pytest.raises(OracleContractViolation):
            engine.check_pair(X + X ** 3, X + X ** 2)


class TestLeadingIndexArgument:
    def test_obstruction_indices(self):
        engine = PrimalityEngine(ZX.ideal([ZX.homogeneous(2, 2)]))
        element = ZX.element({0: 1, 2: 2, 5: 3})
        assert engine.obstruction_indices(element) == frozenset({0, 5})
        assert engine.leading_obstruction(element) == 5
        assert engine.leading_obstruction(ZX.homogeneous(3, 4)) is None

    def test_obstruction_from_leading_components(self):
        engine = PrimalityEngine(QX.ideal([X ** 2]))
        verdict = engine.check_pair(X + X ** 3, X + X ** 2)
        assert not verdict.holds
        assert verdict.obstruction == PrimeObstruction(1, 1, X, X)

    def test_member_factor(self):
        engine = PrimalityEngine(QX.ideal([X ** 2]))
        verdict = engine.check_pair(X ** 2, X + 1)
        assert verdict.holds
        assert verdict.left_in_ideal
        assert not verdict.right_in_ideal
        assert verdict.obstruction is None

    def test_product_outside_ideal(self):
        engine = PrimalityEngine(QX.ideal([X ** 3]))
        with pytest.raises(ValueError):
            engine.check_pair(X, X)

    def test_trichotomy_with_integer_coefficients(self):
        engine = PrimalityEngine(ZX.ideal([ZX.scalar(4)]))
        f = ZX.element({0: 2, 1: 2, 2: 4})
        verdict = engine.check_pair(f, f)
        T = ZX.monomial(1)
        assert verdict.obstruction == PrimeObstruction(1, 1, 2 * T, 2 * T)

    def test_multigraded_pair(self):
        engine = PrimalityEngine(QXY.ideal([x * y]))
        verdict = engine.check_pair(x + x ** 2, y + x * y)
        assert verdict.obstruction.left == x ** 2
        assert verdict.obstruction.right == y

    def test_prime_ideal_pairs_hold(self):
        engine = PrimalityEngine(QXY.ideal([x]))
        verdict = engine.check_pair(x + y, x * y + x)
        assert verdict.holds
        assert verdict.right_in_ideal


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
