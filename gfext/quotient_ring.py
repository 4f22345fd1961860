"""Elements of the quotient ring F[x]/(m(x)).

When m is irreducible over F the ring is the field GF(|F|^deg m) and every
nonzero element has an inverse. Irreducibility is not checked here; see
gfext.irreducible.IrreducibleModulus for a validated modulus.
"""

from fractions import Fraction

from gfext.errors import ModulusMismatchError, NoInverseError
from gfext.polynomial import Polynomial


def extended_gcd(a: Polynomial, b: Polynomial) -> tuple[Polynomial, Polynomial, Polynomial]:
    """Return (g, x, y) with a*x + b*y == g == gcd(a, b).

    Iterative form of the recursive Euclidean extension
        egcd(a, 0) = (a, 1, 0)
        egcd(a, b) = (g, y', x' - q*y') where (g, x', y') = egcd(b, a mod b)
    carrying the running Bezout pairs instead of recursing.
    """
    field = a.field
    old_r, r = a, b
    old_x, x = Polynomial([1], field), Polynomial((), field)
    old_y, y = Polynomial((), field), Polynomial([1], field)
    while not r.is_zero():
        q, rem = old_r.divmod(r)
        old_r, r = r, rem
        old_x, x = x, old_x - q * x
        old_y, y = y, old_y - q * y
    return old_r, old_x, old_y


class QuotientRingElement:
    """Residue class of `poly` modulo `modulus`.

    The representative is reduced once at construction, so deg(rep) < deg(modulus)
    for every element. Binary operations require identical moduli.
    """

    __slots__ = ('poly', 'modulus')

    def __init__(self, poly=None, modulus=None):
        if modulus is None:
            modulus = Polynomial([1], getattr(poly, 'field', None) or Fraction)
        elif not isinstance(modulus, Polynomial):
            modulus = Polynomial(modulus)
        if poly is None:
            poly = Polynomial((), modulus.field)
        elif not isinstance(poly, Polynomial):
            poly = Polynomial(poly, modulus.field)
        self.modulus = modulus
        self.poly = poly % modulus

    @property
    def field(self):
        return self.modulus.field

    def zero(self) -> 'QuotientRingElement':
        return QuotientRingElement(Polynomial((), self.field), self.modulus)

    def one(self) -> 'QuotientRingElement':
        return QuotientRingElement(Polynomial([1], self.field), self.modulus)

    def is_zero(self) -> bool:
        return self.poly.is_zero()

    def _check(self, other):
        """Lift int/Polynomial operands into this ring and verify the moduli agree."""
        if isinstance(other, QuotientRingElement):
            if other.modulus.coefficients != self.modulus.coefficients:
                raise ModulusMismatchError(
                    f"different moduli: ({self.modulus}) and ({other.modulus})")
            return other
        if isinstance(other, Polynomial):
            return QuotientRingElement(other, self.modulus)
        try:
            return QuotientRingElement(Polynomial([other], self.field), self.modulus)
        except ModulusMismatchError:
            raise
        except (TypeError, ValueError):
            return None

    def __add__(self, other):
        other = self._check(other)
        if other is None:
            return NotImplemented
        return QuotientRingElement(self.poly + other.poly, self.modulus)

    def __radd__(self, other):
        return self.__add__(other)

    def __sub__(self, other):
        other = self._check(other)
        if other is None:
            return NotImplemented
        return QuotientRingElement(self.poly - other.poly, self.modulus)

    def __rsub__(self, other):
        other = self._check(other)
        if other is None:
            return NotImplemented
        return other - self

    def __mul__(self, other):
        other = self._check(other)
        if other is None:
            return NotImplemented
        return QuotientRingElement(self.poly * other.poly, self.modulus)

    def __rmul__(self, other):
        return self.__mul__(other)

    def __neg__(self):
        return QuotientRingElement(-self.poly, self.modulus)

    def inv(self) -> 'QuotientRingElement':
        """Multiplicative inverse from the Bezout coefficient of rep against the modulus."""
        g, x, _ = extended_gcd(self.poly, self.modulus)
        if g.degree != 0:
            raise NoInverseError(
                f"{self.poly} is not invertible modulo {self.modulus}")
        scale = Polynomial([self.field(1) / g[0]], self.field)
        return QuotientRingElement(x * scale, self.modulus)

    inverse = inv

    def __truediv__(self, other):
        other = self._check(other)
        if other is None:
            return NotImplemented
        return self * other.inv()

    def __rtruediv__(self, other):
        other = self._check(other)
        if other is None:
            return NotImplemented
        return other * self.inv()

    def __pow__(self, exponent):
        if not isinstance(exponent, int):
            return NotImplemented
        base = self
        if exponent < 0:
            base, exponent = self.inv(), -exponent
        result = self.one()
        while exponent:
            if exponent & 1:
                result = result * base
            base = base * base
            exponent >>= 1
        return result

    def pow(self, exponent: int) -> 'QuotientRingElement':
        return self ** exponent

    def __eq__(self, other):
        if isinstance(other, QuotientRingElement):
            return (self.modulus.coefficients == other.modulus.coefficients
                    and self.poly == other.poly)
        return self.poly == other

    def __hash__(self):
        return hash(self.poly)

    def __bool__(self):
        return not self.poly.is_zero()

    def __str__(self):
        return str(self.poly)

    def __repr__(self):
        return f"QuotientRingElement({self.poly} mod {self.modulus})"
