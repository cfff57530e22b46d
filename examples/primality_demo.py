"""
Demonstration of the Graded Ideal Engine

This script walks through the three parts of the engine:
1. Graded elements and the convolution product
2. The homogeneity oracle and the homogeneous closure
3. Primality from homogeneous pairs and the leading-index argument
"""

import logging

from graded_ideal import (
    CyclicMonoid,
    EngineConfig,
    IntegerRing,
    LexMonoid,
    MonoidAlgebra,
    NaturalMonoid,
    PrimalityEngine,
    RationalField,
    homogeneous_closure,
    inf,
    is_homogeneous,
    is_prime,
    minimal_primes,
    radical,
)
from graded_ideal.errors import PreconditionViolation


def print_section(title):
    """Print a formatted section header."""
    print("\n" + "=" * 70)
    print(f"  {title}")
    print("=" * 70)


def demonstrate_elements():
    print_section("PART 1: Graded Elements")

    QX = MonoidAlgebra(NaturalMonoid(), RationalField())
    X = QX.monomial(1)
    f = 1 + 2 * X + X ** 3
    print(f"\nf = {f!r}")
    print(f"  support:         {sorted(f.support)}")
    print(f"  component at 3:  {f.project(3)!r}")
    print(f"  leading index:   {f.leading_index()}")
    print(f"  f * f =          {f * f!r}")

    R = MonoidAlgebra(CyclicMonoid(3), IntegerRing())
    g = R.monomial(2)
    print(f"\nIn Z[Z/3]: g * g = {g * g!r}, g^3 = {g ** 3!r}")


def demonstrate_homogeneity():
    print_section("PART 2: Homogeneity Oracle")

    QX = MonoidAlgebra(NaturalMonoid(), RationalField())
    X = QX.monomial(1)
    ideals = {
        "(x + x^2, x^2)": QX.ideal([X + X ** 2, X ** 2]),
        "(x - 1)": QX.ideal([X - 1]),
        "(x^2 - 1, x^2 + x)": QX.ideal([X ** 2 - 1, X ** 2 + X]),
    }
    for name, ideal in ideals.items():
        closure = homogeneous_closure(ideal)
        print(f"\nI = {name}")
        print(f"  homogeneous:  {is_homogeneous(ideal)}")
        print(f"  closure:      {closure!r}")


def demonstrate_primality():
    print_section("PART 3: Primality Engine")

    QXY = MonoidAlgebra(LexMonoid(2), RationalField())
    x, y = QXY.monomial((1, 0)), QXY.monomial((0, 1))

    for name, ideal in [("(x)", QXY.ideal([x])),
                        ("(x, y)", QXY.ideal([x, y])),
                        ("(x*y)", QXY.ideal([x * y])),
                        ("(x^2)", QXY.ideal([x ** 2]))]:
        print(f"\nI = {name}: prime = {is_prime(ideal)}")

    I = QXY.ideal([x * y])
    engine = PrimalityEngine(I)
    verdict = engine.check_pair(x + x ** 2, y + x * y)
    print(f"\nLeading-index argument on (x + x^2)(y + xy) in (xy):")
    print(f"  obstruction: {verdict.obstruction}")

    print(f"\nradical((x^2, x*y^3)) = {radical(QXY.ideal([x ** 2, x * y ** 3]))!r}")
    print(f"(x^2) ∩ (x*y)        = {inf(QXY.ideal([x ** 2]), I)!r}")
    print(f"minimal primes of (x*y): {minimal_primes(I)!r}")

    R = MonoidAlgebra(CyclicMonoid(3), RationalField())
    try:
        PrimalityEngine(R.ideal([R.monomial(1)]), config=EngineConfig.from_env())
    except PreconditionViolation as exc:
        print(f"\nZ/3 grading rejected: {exc}")


def main():
    """Run the complete demonstration."""
    logging.basicConfig(level=logging.INFO, format="%(name)s: %(message)s")

    print("\n" + "=" * 70)
    print("  GRADED IDEAL ENGINE - DEMONSTRATION")
    print("=" * 70)

    demonstrate_elements()
    demonstrate_homogeneity()
    demonstrate_primality()

    print("\n" + "=" * 70 + "\n")


if __name__ == "__main__":
    main()
