"""
Graded Ring Module

Graded rings R = ⊕_{i∈ι} A(i) and the ideal membership procedures they
provide.

A GradedRing supplies the arithmetic of its pieces A(i) and decides
membership in ideals given by finite generating sets. MonoidAlgebra is the
concrete ring K[ι]: every piece is the coefficient ring K and
x^i * x^j = x^(i+j). Its homogeneous ideals are monomial ideals, which makes
membership a divisibility question on indices and coefficients. Ideals with
non-homogeneous generators are handled over a field through sympy Groebner
bases.
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, Iterable, Iterator, List, Sequence, Tuple

import sympy as sp
from sympy.polys.polytools import GroebnerBasis

from .coefficients import CoefficientRing
from .element import GradedElement, HomogeneousElement
from .errors import PreconditionViolation, UnsupportedOperation
from .ideal import HomogeneousIdeal, Ideal
from .monoid import CyclicMonoid, FreeMonoid, IndexMonoid, IntegerMonoid, OrderedCancelMonoid


logger = logging.getLogger(__name__)


class GradedRing(ABC):
    """
    A ring graded by a commutative index monoid.

    Subclasses define the piece family A(i) and the membership decision
    procedure; elements and ideals are built through the ring.
    """

    def __init__(self, monoid: IndexMonoid):
        self.monoid = monoid

    # ------------------------------------------------------------------
    # Piece family A(i)
    # ------------------------------------------------------------------

    @abstractmethod
    def piece_zero(self, index: Any) -> Any:
        """Zero of A(index)."""

    @abstractmethod
    def piece_coerce(self, index: Any, value: Any) -> Any:
        """Convert a raw value into A(index)."""

    @abstractmethod
    def piece_add(self, index: Any, a: Any, b: Any) -> Any:
        pass

    @abstractmethod
    def piece_neg(self, index: Any, a: Any) -> Any:
        pass

    @abstractmethod
    def piece_is_zero(self, index: Any, a: Any) -> bool:
        pass

    @abstractmethod
    def piece_mul(self, i: Any, a: Any, j: Any, b: Any) -> Any:
        """Product of a in A(i) and b in A(j), as an element of A(i + j)."""

    @abstractmethod
    def piece_one(self) -> Any:
        """Multiplicative identity, living in A(0)."""

    # ------------------------------------------------------------------
    # Elements
    # ------------------------------------------------------------------

    def zero(self) -> GradedElement:
        return GradedElement(self)

    def one(self) -> HomogeneousElement:
        return HomogeneousElement(self, self.monoid.zero, self.piece_one())

    def homogeneous(self, index: Any, value: Any) -> HomogeneousElement:
        return HomogeneousElement(self, index, value)

    def scalar(self, value: Any) -> HomogeneousElement:
        return HomogeneousElement(self, self.monoid.zero, value)

    def element(self, components=None) -> GradedElement:
        """Element from an {index: value} mapping."""
        return GradedElement(self, components)

    def from_pairs(self, pairs: Iterable[Tuple[Any, Any]]) -> GradedElement:
        return GradedElement.from_pairs(self, pairs)

    # ------------------------------------------------------------------
    # Ideals
    # ------------------------------------------------------------------

    def ideal(self, generators: Iterable[GradedElement] = ()) -> Ideal:
        """
        Ideal generated by `generators`.

        Returns a HomogeneousIdeal when every generator is homogeneous.
        """
        generators = list(generators)
        if all(self.lift(g).is_homogeneous() for g in generators):
            return HomogeneousIdeal(self, generators)
        return Ideal(self, generators)

    def whole_ring(self) -> HomogeneousIdeal:
        return HomogeneousIdeal(self, [self.one()])

    def zero_ideal(self) -> HomogeneousIdeal:
        return HomogeneousIdeal(self, [])

    def lift(self, value: Any) -> GradedElement:
        if isinstance(value, GradedElement):
            if value.ring != self:
                raise ValueError("Element belongs to a different graded ring")
            return value
        return self.scalar(value)

    # ------------------------------------------------------------------
    # Capabilities
    # ------------------------------------------------------------------

    @property
    def is_ordered(self) -> bool:
        return isinstance(self.monoid, OrderedCancelMonoid)

    def require_ordered(self, operation: str) -> OrderedCancelMonoid:
        """
        Return the index monoid if it is an OrderedCancelMonoid.

        Raises:
            PreconditionViolation: if the monoid has no total cancellative order
        """
        if not self.is_ordered:
            raise PreconditionViolation(
                f"{operation} needs a totally ordered cancellative index monoid, got {self.monoid!r}"
            )
        return self.monoid

    # ------------------------------------------------------------------
    # Decision procedures
    # ------------------------------------------------------------------

    @abstractmethod
    def contains(self, generators: Sequence[GradedElement], x: GradedElement) -> bool:
        """Decide x ∈ ⟨generators⟩."""

    @abstractmethod
    def homogeneous_part(self, generators: Sequence[GradedElement]) -> List[HomogeneousElement]:
        """Generators of ⟨{x ∈ ⟨generators⟩ : x homogeneous}⟩."""

    def critical_pairs(self, generators: Sequence[HomogeneousElement]) -> Iterator[Tuple[HomogeneousElement, HomogeneousElement]]:
        """Finite set of homogeneous pairs that decides homogeneous primality."""
        raise UnsupportedOperation(f"{self!r} cannot enumerate critical pairs")


class MonoidAlgebra(GradedRing):
    """
    The monoid algebra K[ι] graded by ι.

    Examples:
        MonoidAlgebra(NaturalMonoid(), RationalField())   # Q[x], graded by degree
        MonoidAlgebra(LexMonoid(2), PrimeField(5))         # GF(5)[x, y], multigraded
        MonoidAlgebra(IntegerMonoid(), RationalField())   # Q[x, 1/x]
        MonoidAlgebra(CyclicMonoid(3), IntegerRing())      # Z[Z/3]
    """

    def __init__(self, monoid: IndexMonoid, coefficients: CoefficientRing):
        super().__init__(monoid)
        self.coefficients = coefficients

    def __eq__(self, other):
        if not isinstance(other, MonoidAlgebra):
            return NotImplemented
        return self.monoid == other.monoid and self.coefficients == other.coefficients

    def __hash__(self):
        return hash((type(self), self.monoid, self.coefficients))

    def __repr__(self):
        return f"MonoidAlgebra({self.monoid!r}, {self.coefficients!r})"

    def piece_zero(self, index: Any) -> Any:
        return self.coefficients.zero

    def piece_coerce(self, index: Any, value: Any) -> Any:
        return self.coefficients.coerce(value)

    def piece_add(self, index: Any, a: Any, b: Any) -> Any:
        return self.coefficients.add(a, b)

    def piece_neg(self, index: Any, a: Any) -> Any:
        return self.coefficients.neg(a)

    def piece_is_zero(self, index: Any, a: Any) -> bool:
        return self.coefficients.is_zero(a)

    def piece_mul(self, i: Any, a: Any, j: Any, b: Any) -> Any:
        return self.coefficients.mul(a, b)

    def piece_one(self) -> Any:
        return self.coefficients.one

    def monomial(self, index: Any) -> HomogeneousElement:
        """x^index with coefficient one."""
        return HomogeneousElement(self, index, self.coefficients.one)

    # ------------------------------------------------------------------
    # Monomial ideals
    # ------------------------------------------------------------------

    def coefficient_gcd_at(self, generators: Iterable[HomogeneousElement], index: Any) -> Any:
        """
        Generator of the coefficient ideal {c : c·x^index ∈ ⟨generators⟩}.

        Only generators whose index divides `index` contribute.
        """
        coefficients = self.coefficients
        return coefficients.gcd_all(
            g.value for g in generators
            if not g.is_zero() and self.monoid.divides(g.index, index)
        )

    def _monomial_in(self, generators: Sequence[HomogeneousElement], index: Any, value: Any) -> bool:
        return self.coefficients.divides(self.coefficient_gcd_at(generators, index), value)

    def lcm_closure(self, indices: Iterable[Any]) -> List[Any]:
        """The given indices together with the lcm of every subset of them."""
        closure = list(dict.fromkeys(indices))
        seen = set(closure)
        frontier = list(closure)
        while frontier:
            fresh = []
            for a in frontier:
                for b in closure:
                    c = self.monoid.lcm(a, b)
                    if c not in seen:
                        seen.add(c)
                        fresh.append(c)
            closure.extend(fresh)
            frontier = fresh
        return closure

    # ------------------------------------------------------------------
    # Non-homogeneous generators: Groebner bases over a field
    # ------------------------------------------------------------------

    @property
    def has_groebner_bases(self) -> bool:
        """
        True when K[ι] is a quotient or localisation of a polynomial ring
        over a field that sympy can compute in.
        """
        return self.coefficients.is_field and isinstance(
            self.monoid, (FreeMonoid, IntegerMonoid, CyclicMonoid)
        )

    def _require_groebner(self) -> None:
        if not self.has_groebner_bases:
            raise UnsupportedOperation(
                f"Membership in a non-homogeneous ideal of {self!r} is not decidable here"
            )

    def _symbols(self) -> Tuple[sp.Symbol, ...]:
        rank = self.monoid.rank if isinstance(self.monoid, FreeMonoid) else 1
        return sp.symbols(f"x0:{rank}")

    def _exponents(self, index: Any) -> Tuple[int, ...]:
        if isinstance(self.monoid, FreeMonoid):
            return tuple(int(v) for v in self.monoid.exponents(index))
        return (int(index),)

    def _normalize(self, f: GradedElement) -> GradedElement:
        """Shift a Laurent polynomial so its lowest index is 0 (multiplication by a unit)."""
        if f.is_zero() or not isinstance(self.monoid, IntegerMonoid):
            return f
        return f * self.monomial(-min(f.support))

    def to_sympy(self, f: Any) -> sp.Poly:
        """
        f as a sympy polynomial in x0, ..., x{rank-1}.

        Laurent polynomials are first shifted into K[x]; elements of K[Z/n]
        are read through their representatives x^0, ..., x^(n-1).
        """
        self._require_groebner()
        f = self._normalize(self.lift(f))
        terms = {self._exponents(i): self.coefficients.to_sympy(c) for i, c in f.items()}
        return sp.Poly.from_dict(terms, *self._symbols(), domain=self.coefficients.sympy_domain)

    def groebner_basis(self, generators: Iterable[GradedElement]) -> GroebnerBasis:
        """
        Reduced Groebner basis of ⟨generators⟩ in the polynomial ring.

        For K[Z/n] the relation x^n - 1 is added; for K[x, 1/x] the basis
        describes the contraction to K[x] of the shifted generators.
        """
        self._require_groebner()
        symbols = self._symbols()
        domain = self.coefficients.sympy_domain
        polys = [self.to_sympy(g) for g in generators]
        if isinstance(self.monoid, CyclicMonoid):
            polys.append(sp.Poly(symbols[0] ** self.monoid.order - 1, *symbols, domain=domain))
        return sp.groebner(polys, *symbols, order="grevlex", domain=domain)

    def _largest_monomial_ideal(self, generators: Sequence[GradedElement]) -> List[HomogeneousElement]:
        """
        Monomials generating the largest monomial ideal inside ⟨generators⟩.

        Substitute x_i -> x_i·t_i, saturate by t_0⋯t_{r-1} and eliminate the t_i.
        """
        rank = self.monoid.rank
        domain = self.coefficients.sympy_domain
        s = sp.Symbol("s")
        t = sp.symbols(f"t0:{rank}")
        symbols = (s, *t, *self._symbols())

        polys = []
        for g in generators:
            terms = {}
            for index, c in g.items():
                a = self._exponents(index)
                terms[(0,) + a + a] = self.coefficients.to_sympy(c)
            polys.append(sp.Poly.from_dict(terms, *symbols, domain=domain))
        polys.append(sp.Poly(1 - s * sp.prod(t), *symbols, domain=domain))

        basis = sp.groebner(polys, *symbols, order="lex", domain=domain)
        exponents = set()
        for p in basis.polys:
            monoms = p.monoms()
            if all(not any(m[:rank + 1]) for m in monoms):
                exponents.update(m[rank + 1:] for m in monoms)
        return [self.monomial(self.monoid.from_exponents(e)) for e in sorted(exponents)]

    # ------------------------------------------------------------------
    # Decision procedures
    # ------------------------------------------------------------------

    def _split(self, generators: Sequence[GradedElement]) -> Tuple[List[GradedElement], bool]:
        nonzero = [self.lift(g) for g in generators]
        nonzero = [g for g in nonzero if not g.is_zero()]
        return nonzero, all(g.is_homogeneous() for g in nonzero)

    def contains(self, generators: Sequence[GradedElement], x: GradedElement) -> bool:
        """
        Decide x ∈ ⟨generators⟩.

        Homogeneous generators: each component c·x^i of x must satisfy
        gcd{c_g : i_g | i} | c. Otherwise x must reduce to zero modulo a
        Groebner basis of the generators.

        Raises:
            UnsupportedOperation: for non-homogeneous generators over a coefficient ring that is not a field
        """
        x = self.lift(x)
        if x.is_zero():
            return True
        generators, homogeneous = self._split(generators)
        if homogeneous:
            monomials = [g.as_homogeneous() for g in generators]
            return all(self._monomial_in(monomials, i, c) for i, c in x.items())
        basis = self.groebner_basis(generators)
        return basis.contains(self.to_sympy(x).as_expr())

    def homogeneous_part(self, generators: Sequence[GradedElement]) -> List[HomogeneousElement]:
        generators, homogeneous = self._split(generators)
        if homogeneous:
            return [g.as_homogeneous() for g in generators]
        self._require_groebner()
        if isinstance(self.monoid, FreeMonoid):
            return self._largest_monomial_ideal(generators)
        # Every monomial of K[x, 1/x] and K[Z/n] is a unit.
        if self.groebner_basis(generators).contains(sp.Integer(1)):
            return [self.one()]
        logger.debug("No monomial lies in %r; homogeneous part is zero", generators)
        return []

    def _splits(self, index: Any) -> Iterator[Tuple[Any, Any]]:
        if isinstance(self.monoid, IntegerMonoid):
            # Every index divides every other one, so a single split covers all.
            yield self.monoid.zero, index
        else:
            yield from self.monoid.decompositions(index)

    def critical_pairs(self, generators: Sequence[HomogeneousElement]) -> Iterator[Tuple[HomogeneousElement, HomogeneousElement]]:
        """
        Homogeneous pairs (d·x^i, e·x^j) that decide primality of a monomial ideal.

        For every index l in the lcm-closure of the generator indices, with
        c = gcd{c_g : i_g | l}, every factorisation c = d·e and every split
        l = i + j gives one pair. If a·x^p · b·x^q lies in the ideal, the lcm
        l of the generator indices dividing p + q splits as i + j with i | p
        and j | q, and c divides a·b, so some pair (d·x^i, e·x^j) has d | a
        and e | b.
        """
        generators, homogeneous = self._split(generators)
        if not generators:
            return
        if not homogeneous:
            raise UnsupportedOperation("Critical pairs need a homogeneous generating set")
        monomials = [g.as_homogeneous() for g in generators]
        closure = self.lcm_closure(g.index for g in monomials)
        logger.debug("critical pairs over %d lcm indices", len(closure))
        for index in closure:
            c = self.coefficient_gcd_at(monomials, index)
            for d, e in self.coefficients.factor_pairs(c):
                for i, j in self._splits(index):
                    yield self.homogeneous(i, d), self.homogeneous(j, e)
