"""Test utilities: polynomial builders, brute-force oracles."""

from itertools import product

from gfext.modular import PrimeField
from gfext.polynomial import Polynomial
from gfext.quotient_ring import QuotientRingElement


def poly(coeffs, p):
    """Polynomial over Z_p from plain ints, constant term first."""
    return Polynomial(coeffs, PrimeField(p))


def element(coeffs, modulus_coeffs, p):
    return QuotientRingElement(poly(coeffs, p), poly(modulus_coeffs, p))


def all_polynomials(p, max_degree):
    """Every polynomial over Z_p of degree <= max_degree, zero included."""
    field = PrimeField(p)
    for coeffs in product(range(p), repeat=max_degree + 1):
        yield Polynomial(list(coeffs), field)


def has_root(f):
    """Brute-force root search; decides irreducibility for degree 2 and 3."""
    return any(f.evaluate(x) == 0 for x in f.field.elements())
