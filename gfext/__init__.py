"""Exact arithmetic in GF(p^n): prime fields, polynomials, quotient rings."""

from gfext.errors import (
    FieldArithmeticError, PolynomialDivisionByZero, ModulusMismatchError,
    NoInverseError, ReducibleModulusError,
)
from gfext.modular import ModularInt, PrimeField, is_prime
from gfext.polynomial import Polynomial, monomial
from gfext.quotient_ring import QuotientRingElement, extended_gcd
from gfext.irreducible import (
    IrreducibleModulus, find_divisor, find_irreducible, is_irreducible,
    monic_candidates,
)
from gfext import rng
