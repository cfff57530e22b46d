"""
Tests for Index Monoids, Coefficient Rings and Graded Elements
"""

from fractions import Fraction

import pytest
import numpy as np

from graded_ideal import (
    CyclicMonoid,
    HomogeneousElement,
    IntegerMonoid,
    IntegerRing,
    LexMonoid,
    MonoidAlgebra,
    NaturalMonoid,
    PrimeField,
    RationalField,
    convolution,
    project,
    sum_of_components,
    support,
)
from graded_ideal.element import convolution_terms
from graded_ideal.errors import PreconditionViolation, UnsupportedOperation


QX = MonoidAlgebra(NaturalMonoid(), RationalField())
ZX = MonoidAlgebra(NaturalMonoid(), IntegerRing())
QXY = MonoidAlgebra(LexMonoid(2), RationalField())


class TestIndexMonoids:
    def test_natural_divisibility(self):
        m = NaturalMonoid()
        assert m.divides(2, 5)
        assert not m.divides(5, 2)
        assert m.lcm(2, 5) == 5
        assert list(m.decompositions(2)) == [(0, 2), (1, 1), (2, 0)]

    def test_natural_rejects_bad_indices(self):
        m = NaturalMonoid()
        with pytest.raises(ValueError):
            m.coerce(-1)
        with pytest.raises(TypeError):
            m.coerce(1.5)
        with pytest.raises(TypeError):
            m.coerce(True)

    def test_lex_order_and_divisibility(self):
        m = LexMonoid(2)
        assert m.add((1, 0), (0, 2)) == (1, 2)
        assert m.divides((1, 0), (1, 2))
        assert not m.divides((2, 0), (1, 2))
        assert m.lcm((2, 0), (0, 1)) == (2, 1)
        assert m.leading([(0, 5), (1, 0), (0, 7)]) == (1, 0)
        assert m.subtract((1, 2), (1, 0)) == (0, 2)
        assert m.subtract((0, 2), (1, 0)) is None

    def test_lex_decompositions(self):
        m = LexMonoid(2)
        assert sorted(m.decompositions((1, 1))) == [
            ((0, 0), (1, 1)),
            ((0, 1), (1, 0)),
            ((1, 0), (0, 1)),
            ((1, 1), (0, 0)),
        ]

    def test_lex_rank_validation(self):
        with pytest.raises(ValueError):
            LexMonoid(0)
        with pytest.raises(ValueError):
            LexMonoid(2).coerce((1, 2, 3))

    def test_variables(self):
        assert LexMonoid(3).variable(1) == (0, 1, 0)
        assert NaturalMonoid().variable(0) == 1
        with pytest.raises(ValueError):
            LexMonoid(3).variable(3)

    def test_leading_of_empty_set(self):
        with pytest.raises(ValueError):
            NaturalMonoid().leading([])

    def test_cyclic_wraps(self):
        m = CyclicMonoid(3)
        assert m.add(2, 2) == 1
        assert m.coerce(5) == 2
        assert len(list(m.decompositions(1))) == 3

    def test_integer_monoid_has_no_finite_decompositions(self):
        with pytest.raises(UnsupportedOperation):
            list(IntegerMonoid().decompositions(1))


class TestCoefficientRings:
    def test_integer_gcd_lcm(self):
        Z = IntegerRing()
        assert Z.gcd(4, 6) == 2
        assert Z.lcm(4, 6) == 12
        assert Z.lcm(0, 6) == 0
        assert Z.divides(2, 6)
        assert not Z.divides(4, 6)
        assert Z.divides(0, 0)
        assert not Z.divides(0, 3)

    def test_integer_coercion(self):
        Z = IntegerRing()
        assert Z.coerce(Fraction(4, 2)) == 2
        with pytest.raises(ValueError):
            Z.coerce(Fraction(3, 2))

    def test_prime_field(self):
        F = PrimeField(5)
        assert F.coerce(7) == 2
        assert F.inverse(2) == 3
        assert F.coerce(Fraction(1, 2)) == 3
        assert F.neg(1) == 4
        with pytest.raises(ValueError):
            PrimeField(4)

    def test_field_ideals_are_trivial(self):
        Q = RationalField()
        assert Q.gcd(Q.zero, Q.zero) == 0
        assert Q.gcd(Fraction(2), Q.zero) == 1
        assert Q.divides(Fraction(3), Fraction(1, 7))
        assert not Q.divides(Q.zero, Fraction(1, 7))


class TestGradedElement:
    def test_zero_values_are_dropped(self):
        x = QX.element({0: 1, 3: 0, 5: 2})
        assert support(x) == frozenset({0, 5})
        assert x[3] == 0
        assert x[5] == 2

    def test_project_outside_support(self):
        x = QX.element({0: 1, 5: 2})
        p = project(x, 4)
        assert isinstance(p, HomogeneousElement)
        assert p.is_zero()
        assert p.index == 4

    def test_project_inside_support(self):
        x = QX.element({0: 1, 5: 2})
        p = project(x, 5)
        assert p.index == 5
        assert p.value == 2
        assert support(p) == frozenset({5})

    def test_round_trip(self):
        samples = [
            QX.zero(),
            QX.element({0: 1, 2: Fraction(-3, 4), 7: 5}),
            QXY.element({(0, 0): 1, (1, 2): 3, (2, 0): -1}),
            MonoidAlgebra(CyclicMonoid(4), IntegerRing()).element({1: 2, 3: 5}),
        ]
        for x in samples:
            assert sum_of_components(x) == x

    def test_from_pairs_sums_repeated_indices(self):
        x = QX.from_pairs([(1, 2), (1, 3), (0, 1)])
        assert x == QX.element({0: 1, 1: 5})

    def test_convolution_is_polynomial_multiplication(self):
        X = QX.monomial(1)
        assert (1 + X) * (1 - X) == QX.element({0: 1, 2: -1})
        assert (1 + X) ** 2 == QX.element({0: 1, 1: 2, 2: 1})

    def test_convolution_terms(self):
        x = QX.element({0: 1, 1: 2})
        y = QX.element({1: 3, 2: 4})
        terms = sorted(convolution_terms(x, y, 2))
        assert terms == [(0, 2, 4), (1, 1, 6)]
        assert (x * y)[2] == 10

    def test_grading_respect(self):
        for i, j in [(0, 0), (1, 2), (3, 5)]:
            a = QX.homogeneous(i, 3)
            b = QX.homogeneous(j, Fraction(1, 2))
            p = convolution(a, b)
            assert isinstance(p, HomogeneousElement)
            assert p.index == i + j
            assert p.value == Fraction(3, 2)
            assert support(p) == frozenset({i + j})

    def test_grading_respect_multigraded(self):
        p = QXY.monomial((1, 0)) * QXY.homogeneous((0, 2), 7)
        assert isinstance(p, HomogeneousElement)
        assert p.index == (1, 2)

    def test_cyclic_convolution_wraps(self):
        R = MonoidAlgebra(CyclicMonoid(3), IntegerRing())
        g = R.monomial(2)
        assert g * g == R.monomial(1)
        assert g * g * g == R.one()

    def test_prime_field_arithmetic(self):
        R = MonoidAlgebra(NaturalMonoid(), PrimeField(3))
        x = R.element({0: 1, 1: 1})
        assert x ** 3 == R.element({0: 1, 3: 1})

    def test_scalar_lifting(self):
        X = QX.monomial(1)
        assert X + 1 == QX.element({0: 1, 1: 1})
        assert 2 * X == QX.homogeneous(1, 2)
        assert 1 - X == QX.element({0: 1, 1: -1})
        assert QX.zero() == QX.scalar(0)

    def test_numpy_indices(self):
        x = QX.element({np.int64(2): 1})
        assert support(x) == frozenset({2})

    def test_rings_do_not_mix(self):
        with pytest.raises(ValueError):
            QX.monomial(1) + ZX.monomial(1)
        assert QX.monomial(1) != ZX.monomial(1)

    def test_leading_index(self):
        assert QX.element({0: 1, 2: 1, 5: 1}).leading_index() == 5
        R = MonoidAlgebra(CyclicMonoid(3), IntegerRing())
        with pytest.raises(PreconditionViolation):
            R.element({1: 1, 2: 1}).leading_index()

    def test_scalars_are_not_elements(self):
        assert QX.one() != 1
        assert QX.zero() != 0
        assert len({QX.one(), 1}) == 2
        assert {QX.scalar(3): "a"}.get(3) is None

    def test_hash_matches_equality(self):
        assert len({QX.element({1: 2}), QX.homogeneous(1, 2)}) == 1
        assert hash(QX.element({0: 1, 1: 2}).project(1)) == hash(QX.homogeneous(1, 2))

    def test_as_homogeneous(self):
        h = QX.element({3: 4}).as_homogeneous()
        assert (h.index, h.value) == (3, 4)
        with pytest.raises(ValueError):
            QX.element({0: 1, 1: 1}).as_homogeneous()

    def test_negative_power(self):
        with pytest.raises(ValueError):
            QX.monomial(1) ** -1


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
