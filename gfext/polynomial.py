"""Dense univariate polynomials over a field or ring."""

from fractions import Fraction
from itertools import zip_longest

from gfext.errors import ModulusMismatchError, PolynomialDivisionByZero


def _infer_field(coeffs):
    for c in coeffs:
        field = getattr(c, 'field', None)
        if field is not None:
            return field
    for c in coeffs:
        if not isinstance(c, (int, Fraction)):
            return type(c)
    return Fraction


def strip(coeffs: list, zero) -> list:
    """Drop trailing copies of zero."""
    i = len(coeffs)
    while i > 0 and coeffs[i - 1] == zero:
        i -= 1
    return coeffs[:i]


class Polynomial:
    """Polynomial over `field`. coeffs[0] = constant term.

    `field` is the coefficient constructor: a PrimeField, Fraction, float, or
    any callable mapping an int to a ring element. Coefficients are always
    normalized so the last one is nonzero; () is the zero polynomial.
    """

    __slots__ = ('coefficients', 'field')

    def __init__(self, coeffs=(), field=None):
        if isinstance(coeffs, Polynomial):
            field = field or coeffs.field
            coeffs = coeffs.coefficients
        elif not hasattr(coeffs, '__iter__'):
            coeffs = [coeffs]
        coeffs = list(coeffs)
        if field is None:
            field = _infer_field(coeffs)
        self.field = field
        self.coefficients = tuple(strip([field(c) for c in coeffs], field(0)))

    @classmethod
    def zero(cls, field=Fraction) -> 'Polynomial':
        return cls((), field)

    @classmethod
    def one(cls, field=Fraction) -> 'Polynomial':
        return cls([1], field)

    @classmethod
    def random(cls, degree: int, field, constant=None) -> 'Polynomial':
        """Random polynomial of exactly `degree` over a PrimeField, optionally with p(0) = constant."""
        if degree < 0:
            return cls.zero(field)
        coeffs = [field.random() for _ in range(degree)] + [field.random_nonzero()]
        if constant is not None:
            coeffs[0] = field(constant)
            if degree == 0 and coeffs[0] == 0:
                return cls.zero(field)
        return cls(coeffs, field)

    @property
    def degree(self) -> int:
        return len(self.coefficients) - 1

    def is_zero(self) -> bool:
        return not self.coefficients

    def leading_coefficient(self):
        if not self.coefficients:
            return self.field(0)
        return self.coefficients[-1]

    def is_monic(self) -> bool:
        return bool(self.coefficients) and self.coefficients[-1] == self.field(1)

    def __getitem__(self, i: int):
        if 0 <= i < len(self.coefficients):
            return self.coefficients[i]
        return self.field(0)

    def __len__(self):
        return len(self.coefficients)

    def __iter__(self):
        return iter(self.coefficients)

    def __bool__(self):
        return bool(self.coefficients)

    def _coerce(self, other):
        if isinstance(other, Polynomial):
            return other
        try:
            return Polynomial([other], self.field)
        except ModulusMismatchError:
            raise
        except (TypeError, ValueError):
            return None

    def __eq__(self, other):
        if isinstance(other, Polynomial):
            return self.coefficients == other.coefficients
        if self._coerce(other) is None:
            return NotImplemented
        # a scalar equals the constant polynomial it would build
        return self.degree <= 0 and self[0] == other

    def __hash__(self):
        if self.degree <= 0:
            return hash(self[0])
        return hash(self.coefficients)

    def __neg__(self):
        return Polynomial([-c for c in self.coefficients], self.field)

    def __add__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        zero = self.field(0)
        return Polynomial([a + b for a, b in zip_longest(self, other, fillvalue=zero)],
                          self.field)

    def __radd__(self, other):
        return self.__add__(other)

    def __sub__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        zero = self.field(0)
        return Polynomial([a - b for a, b in zip_longest(self, other, fillvalue=zero)],
                          self.field)

    def __rsub__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return other - self

    def __mul__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        if self.is_zero() or other.is_zero():
            return Polynomial((), self.field)
        result = [self.field(0)] * (len(self) + len(other) - 1)
        for i, a in enumerate(self):
            for j, b in enumerate(other):
                result[i + j] = result[i + j] + a * b
        return Polynomial(result, self.field)

    def __rmul__(self, other):
        return self.__mul__(other)

    def divmod(self, divisor) -> tuple['Polynomial', 'Polynomial']:
        """Long division: returns (q, r) with divisor*q + r == self and deg r < deg divisor."""
        other = self._coerce(divisor)
        if other is None:
            raise TypeError(f"cannot divide a polynomial by {divisor!r}")
        divisor = other
        if divisor.is_zero():
            raise PolynomialDivisionByZero()

        zero = self.field(0)
        quotient, remainder = Polynomial((), self.field), self
        divisor_deg = divisor.degree
        divisor_lc = divisor.leading_coefficient()

        while not remainder.is_zero() and remainder.degree >= divisor_deg:
            shift = remainder.degree - divisor_deg
            factor = remainder.leading_coefficient() / divisor_lc
            term = Polynomial([zero] * shift + [factor], self.field)
            quotient = quotient + term
            # drop the leading term: it cancels, up to rounding residue over float
            reduced = remainder - term * divisor
            remainder = Polynomial(reduced.coefficients[:remainder.degree], self.field)

        return quotient, remainder

    def __divmod__(self, divisor):
        if self._coerce(divisor) is None:
            return NotImplemented
        return self.divmod(divisor)

    def __truediv__(self, divisor):
        if self._coerce(divisor) is None:
            return NotImplemented
        return self.divmod(divisor)[0]

    __floordiv__ = __truediv__

    def __mod__(self, divisor):
        if self._coerce(divisor) is None:
            return NotImplemented
        return self.divmod(divisor)[1]

    def __pow__(self, exponent):
        if not isinstance(exponent, int):
            return NotImplemented
        if exponent < 0:
            raise ValueError("exponent must be non-negative")
        result = Polynomial([1], self.field)
        base = self
        while exponent:
            if exponent & 1:
                result = result * base
            base = base * base
            exponent >>= 1
        return result

    def pow(self, exponent: int) -> 'Polynomial':
        return self ** exponent

    def evaluate(self, x):
        """Evaluate polynomial at x using Horner's method."""
        x = self.field(x)
        result = self.field(0)
        for coeff in reversed(self.coefficients):
            result = result * x + coeff
        return result

    __call__ = evaluate

    def __str__(self):
        one = self.field(1)
        terms = []
        for i in range(self.degree, -1, -1):
            c = self.coefficients[i]
            if c == 0:
                continue
            if i == 0:
                terms.append(str(c))
                continue
            term = '' if c == one else f"{c}*"
            term += 'x' if i == 1 else f"x^{i}"
            terms.append(term)
        return ' + '.join(terms) if terms else '0'

    def __repr__(self):
        name = getattr(self.field, 'name', None) or getattr(self.field, '__name__', '?')
        return f"Polynomial([{', '.join(str(c) for c in self.coefficients)}], {name})"


def monomial(coefficient, degree: int, field=None) -> Polynomial:
    """coefficient * x^degree."""
    if field is None:
        field = _infer_field([coefficient])
    return Polynomial([0] * degree + [coefficient], field)
