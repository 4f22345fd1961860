"""Irreducibility testing over prime fields by exhaustive monic-divisor search.

Any nontrivial factorization of a degree-d polynomial has a factor of degree
at most d/2, and divisibility is unchanged by scaling with a unit, so only
monic candidates of degree 1..d/2 need to be tried. Cost grows as q^(d/2);
this is meant for small fields and small degrees.
"""

import logging
from itertools import product

from gfext.errors import ReducibleModulusError
from gfext.modular import PrimeField
from gfext.polynomial import Polynomial
from gfext.quotient_ring import QuotientRingElement

logger = logging.getLogger(__name__)


def _prime_field(poly: Polynomial) -> PrimeField:
    if not isinstance(poly.field, PrimeField):
        raise TypeError(
            f"irreducibility search needs coefficients in a prime field, not {poly.field!r}")
    return poly.field


def monic_candidates(field: PrimeField, degree: int):
    """Yield every monic polynomial of `degree` over `field` (q^degree of them)."""
    one = field.one()
    for low in product(field.elements(), repeat=degree):
        yield Polynomial(list(low) + [one], field)


def find_divisor(poly: Polynomial) -> Polynomial | None:
    """First monic divisor of degree 1..deg/2 in enumeration order, or None."""
    field = _prime_field(poly)
    for d in range(1, poly.degree // 2 + 1):
        examined = 0
        for candidate in monic_candidates(field, d):
            examined += 1
            if poly.divmod(candidate)[1].degree < 0:
                logger.debug("%s is divisible by %s (degree %d, %d candidates tried)",
                             poly, candidate, d, examined)
                return candidate
        logger.debug("no divisor of degree %d for %s among %d candidates", d, poly, examined)
    return None


def is_irreducible(poly: Polynomial) -> bool:
    """True if `poly` has no nontrivial factorization over its prime field."""
    _prime_field(poly)
    if poly.degree <= 0:
        return False
    if poly.degree == 1:
        return True
    return find_divisor(poly) is None


def find_irreducible(field: PrimeField, degree: int) -> Polynomial:
    """First irreducible monic polynomial of `degree` over `field` in enumeration order."""
    if degree < 1:
        raise ValueError(f"degree must be at least 1, got {degree}")
    for candidate in monic_candidates(field, degree):
        if is_irreducible(candidate):
            return candidate
    # Unreachable: irreducible polynomials of every degree exist over a finite field.
    raise RuntimeError(f"no irreducible polynomial of degree {degree} over {field.name}")


class IrreducibleModulus:
    """A modulus polynomial certified irreducible, so F[x]/(f) is a field.

    Validation runs once here rather than on every QuotientRingElement.
    """

    def __init__(self, poly: Polynomial):
        self.field = _prime_field(poly)
        if poly.degree <= 0:
            raise ReducibleModulusError(f"modulus must have degree >= 1, got {poly}")
        divisor = find_divisor(poly)
        if divisor is not None:
            raise ReducibleModulusError(
                f"{poly} is reducible over {self.field.name}: divisible by {divisor}")
        self.poly = poly

    @property
    def degree(self) -> int:
        return self.poly.degree

    @property
    def order(self) -> int:
        """Number of elements of the field F[x]/(f)."""
        return self.field.p ** self.poly.degree

    def element(self, poly) -> QuotientRingElement:
        return QuotientRingElement(poly, self.poly)

    def zero(self) -> QuotientRingElement:
        return self.element(Polynomial((), self.field))

    def one(self) -> QuotientRingElement:
        return self.element(Polynomial([1], self.field))

    def __repr__(self):
        return f"IrreducibleModulus({self.poly} over {self.field.name})"
