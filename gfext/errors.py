"""Error taxonomy for field, polynomial and quotient-ring arithmetic."""


class FieldArithmeticError(ArithmeticError):
    """Base class for arithmetic failures raised by gfext."""


class PolynomialDivisionByZero(FieldArithmeticError, ZeroDivisionError):
    """Polynomial division with the zero polynomial as divisor."""

    def __init__(self, message="division by the zero polynomial"):
        super().__init__(message)


class ModulusMismatchError(FieldArithmeticError, ValueError):
    """Binary operation on operands with different moduli."""


class NoInverseError(FieldArithmeticError, ZeroDivisionError):
    """Element has no multiplicative inverse."""


class ReducibleModulusError(ValueError):
    """Polynomial offered as a field modulus factors over its base field."""
