"""Arithmetic on residues modulo a prime p."""

import operator

from gfext import rng
from gfext.errors import ModulusMismatchError, NoInverseError


def is_prime(n: int) -> bool:
    """Trial division; fine for the field sizes this package targets."""
    if n < 2:
        return False
    if n < 4:
        return True
    if n % 2 == 0:
        return False
    i = 3
    while i * i <= n:
        if n % i == 0:
            return False
        i += 2
    return True


class PrimeField:
    """The prime field Z_p. Calling it builds elements: Z5 = PrimeField(5); Z5(7) == 2.

    Instances are cached per p, so two fields compare by identity.
    """

    _cache: dict[int, 'PrimeField'] = {}

    def __new__(cls, p: int):
        if not isinstance(p, int) or isinstance(p, bool):
            raise TypeError(f"field modulus must be an int, not {type(p).__name__}")
        field = cls._cache.get(p)
        if field is not None:
            return field
        if not is_prime(p):
            raise ValueError(f"field modulus must be prime, got {p}")
        field = super().__new__(cls)
        field.p = p
        cls._cache[p] = field
        return field

    def __call__(self, value) -> 'ModularInt':
        if isinstance(value, ModularInt):
            if value.field is not self:
                raise ModulusMismatchError(
                    f"cannot cast {value!r} into {self.name}")
            return value
        return ModularInt(value, self)

    def __getnewargs__(self):
        return (self.p,)

    @property
    def name(self):
        return f"Z{self.p}"

    @property
    def order(self) -> int:
        return self.p

    def zero(self) -> 'ModularInt':
        return ModularInt(0, self)

    def one(self) -> 'ModularInt':
        return ModularInt(1, self)

    def elements(self):
        """All residues 0, 1, ..., p-1 in increasing order."""
        for v in range(self.p):
            yield ModularInt(v, self)

    def random(self) -> 'ModularInt':
        """Random element (may be zero)."""
        return ModularInt(rng.randbelow(self.p), self)

    def random_nonzero(self) -> 'ModularInt':
        return ModularInt(rng.randbelow(self.p - 1) + 1, self)

    def __repr__(self):
        return f"PrimeField({self.p})"


class ModularInt:
    """Element of Z_p, always stored normalized into [0, p)."""

    __slots__ = ('value', 'field')

    def __init__(self, value: int, p):
        field = p if isinstance(p, PrimeField) else PrimeField(p)
        if isinstance(value, ModularInt):
            value = field(value).value
        object.__setattr__(self, 'field', field)
        object.__setattr__(self, 'value', operator.index(value) % field.p)

    def __setattr__(self, name, value):
        raise AttributeError("ModularInt is immutable")

    @property
    def p(self) -> int:
        return self.field.p

    def _c(self, other):
        """Coerce int/same-field operand, or None if the type is foreign."""
        if isinstance(other, ModularInt):
            if other.field is not self.field:
                raise ModulusMismatchError(
                    f"operands live in different fields: {self.field.name} "
                    f"and {other.field.name}")
            return other
        if isinstance(other, int):
            return ModularInt(other, self.field)
        return None

    def __add__(self, other):
        other = self._c(other)
        if other is None:
            return NotImplemented
        return ModularInt(self.value + other.value, self.field)

    def __radd__(self, other):
        return self.__add__(other)

    def __sub__(self, other):
        other = self._c(other)
        if other is None:
            return NotImplemented
        return ModularInt(self.value - other.value, self.field)

    def __rsub__(self, other):
        other = self._c(other)
        if other is None:
            return NotImplemented
        return ModularInt(other.value - self.value, self.field)

    def __mul__(self, other):
        other = self._c(other)
        if other is None:
            return NotImplemented
        return ModularInt(self.value * other.value, self.field)

    def __rmul__(self, other):
        return self.__mul__(other)

    def __truediv__(self, other):
        other = self._c(other)
        if other is None:
            return NotImplemented
        return self * other.inv()

    def __rtruediv__(self, other):
        other = self._c(other)
        if other is None:
            return NotImplemented
        return other * self.inv()

    def __neg__(self):
        return ModularInt(-self.value, self.field)

    def __pow__(self, exp):
        if isinstance(exp, ModularInt):
            exp = exp.value
        if not isinstance(exp, int):
            return NotImplemented
        if exp < 0:
            raise ValueError("exponent must be non-negative")
        return ModularInt(pow(self.value, exp, self.p), self.field)

    def pow(self, exp: int) -> 'ModularInt':
        return self ** exp

    def inv(self) -> 'ModularInt':
        """Multiplicative inverse via Fermat's little theorem: a^{p-2} mod p."""
        if self.value == 0:
            raise NoInverseError(f"cannot invert zero in {self.field.name}")
        return ModularInt(pow(self.value, self.p - 2, self.p), self.field)

    inverse = inv

    def __eq__(self, other):
        if isinstance(other, ModularInt):
            return self.field is other.field and self.value == other.value
        if isinstance(other, int):
            return self.value == other
        return NotImplemented

    def __hash__(self):
        return hash(self.value)

    def __bool__(self):
        return self.value != 0

    def __int__(self):
        return self.value

    def to_int(self):
        return self.value

    def __reduce__(self):
        return (ModularInt, (self.value, self.p))

    def __str__(self):
        return str(self.value)

    def __repr__(self):
        return f"{self.field.name}({self.value})"
