"""Tests for dense polynomial arithmetic and exact division."""

import random
from fractions import Fraction

import pytest

from gfext import rng
from gfext.errors import PolynomialDivisionByZero
from gfext.modular import PrimeField
from gfext.polynomial import Polynomial, monomial

from tests.utils import all_polynomials, poly

Z5 = PrimeField(5)
Z7 = PrimeField(7)
Z11 = PrimeField(11)


def q(coeffs):
    return Polynomial(coeffs, Fraction)


@pytest.fixture(params=[Fraction, Z5, Z11], ids=["Q", "Z5", "Z11"])
def p(request):
    field = request.param
    return lambda coeffs: Polynomial(coeffs, field)


def test_equality(p):
    assert p([]) == p([])
    assert p([1, 2]) == p([1, 2])
    assert p([1, 2, 0]) == p([1, 2, 0, 0])


def test_normalization_strips_trailing_zeros(p):
    a = p([1, 2, 0, 0])
    assert a.degree == 1
    assert a.coefficients == p([1, 2]).coefficients


def test_zero_polynomial_degree(p):
    assert p([]).degree == -1
    assert p([0, 0, 0]).degree == -1
    assert p([7]).degree == 0


def test_index_out_of_range_is_zero(p):
    a = p([1, 2])
    assert a[1] == 2
    assert a[5] == 0
    assert a[-1] == 0


def test_addition(p):
    assert p([1, 0, 3]) + p([0, 2]) == p([1, 2, 3])
    assert p([1, 2, 3]) + p([]) == p([1, 2, 3])
    assert p([4]) + p([1, 2, 3]) == p([5, 2, 3])
    assert p([1, 2, 3]) + p([0, 0, -3]) == p([1, 2])


def test_subtraction(p):
    assert p([1, 0, 3]) - p([0, 2]) == p([1, -2, 3])
    assert p([1, 2, 3]) - p([]) == p([1, 2, 3])
    assert p([]) - p([1, 2, 3]) == p([-1, -2, -3])
    assert (p([1, 2, 3]) - p([1, 2, 3])).degree == -1


def test_multiplication(p):
    assert p([1, 1]) * p([1, 1]) == p([1, 2, 1])
    assert p([2, 3]) * p([1, 1, 1]) == p([2, 5, 5, 3])
    assert p([0, 1, 7]) * p([7]) == p([0, 7, 49])


def test_multiply_by_zero(p):
    assert (p([1, 2, 3]) * p([])).degree == -1
    assert (p([]) * p([1, 2, 3])).degree == -1


def test_scalar_operands(p):
    assert p([1, 2]) + 1 == p([2, 2])
    assert 3 * p([1, 2]) == p([3, 6])
    assert 1 - p([1, 1]) == p([0, -1])


def test_division(p):
    assert p([-1, 0, 0, 0, 0, 0, 1]) / p([-1, 1]) == p([1, 1, 1, 1, 1, 1])
    assert p([1, 0, 0, 0, 0, 0, 1]) / p([1, 1]) == p([-1, 1, -1, 1, -1, 1])
    assert p([]) / p([1, 1]) == p([])
    assert p([1, 1]) / p([1]) == p([1, 1])
    assert p([2, 2]) / p([2]) == p([1, 1])


def test_modulus(p):
    assert p([1, 7, 49]) % p([7]) == p([])
    assert p([-3, 10, -5, 3]) % p([1, 3]) == p([-7])


def test_divmod_invariant_exhaustive_z3():
    divisors = [d for d in all_polynomials(3, 2) if d.degree >= 0]
    for a in all_polynomials(3, 3):
        for d in divisors:
            quotient, remainder = divmod(a, d)
            assert d * quotient + remainder == a
            assert remainder.degree < d.degree


def test_divmod_method_matches_operators():
    a, d = poly([1, 2, 3, 4], 5), poly([1, 1], 5)
    assert a.divmod(d) == (a / d, a % d)


def test_divmod_terminates_over_floats():
    a = Polynomial([0, 0, 1.0], float)
    quotient, remainder = a.divmod(Polynomial([0, 49.0], float))
    assert quotient.degree == 1
    assert quotient[1] == pytest.approx(1 / 49)
    assert remainder.degree < 1


def test_divmod_float_reconstructs_dividend():
    gen = random.Random(0)
    for _ in range(50):
        a = Polynomial([gen.uniform(-10, 10) for _ in range(5)] + [gen.uniform(1, 10)], float)
        d = Polynomial([gen.uniform(-10, 10), gen.uniform(-10, 10), gen.uniform(1, 10)], float)
        quotient, remainder = a.divmod(d)
        assert quotient.degree == 3
        assert remainder.degree < 2
        for x in (0.0, 0.5, -1.5, 2.0):
            assert (d * quotient + remainder)(x) == pytest.approx(a(x), rel=1e-9, abs=1e-6)


def test_divide_by_zero(p):
    for dividend in (p([]), p([1]), p([1, 2, 3])):
        with pytest.raises(PolynomialDivisionByZero):
            dividend.divmod(p([]))
        with pytest.raises(ZeroDivisionError):
            dividend % p([0, 0])


def test_ring_axioms_z5():
    rng.set_seed(3)
    for _ in range(30):
        a, b, c = (Polynomial.random(rng.randbelow(5), Z5) for _ in range(3))
        assert (a + b) + c == a + (b + c)
        assert a + b == b + a
        assert a * b == b * a
        assert a * (b + c) == a * b + a * c
    rng.set_seed(None)


def test_pow(p):
    assert p([1, 1]) ** 2 == p([1, 2, 1])
    assert p([1, 1]).pow(3) == p([1, 3, 3, 1])
    assert p([3, 4]) ** 0 == p([1])
    assert p([]) ** 0 == p([1])


def test_pow_negative_rejected():
    with pytest.raises(ValueError):
        q([1, 1]) ** -1


def test_evaluate_constant():
    f = poly([42], 101)
    assert f.evaluate(0) == 42
    assert f.evaluate(99) == 42


def test_evaluate_linear():
    f = poly([3, 2], 101)
    assert f.evaluate(0) == 3
    assert f.evaluate(1) == 5
    assert f(5) == 13


def test_evaluate_quadratic():
    f = poly([1, 0, 1], 101)
    assert f.evaluate(0) == 1
    assert f.evaluate(3) == 10


def test_evaluate_zero_polynomial():
    assert poly([], 7).evaluate(3) == 0


def test_evaluate_over_rationals():
    assert q([Fraction(1, 2), 0, 3]).evaluate(Fraction(1, 3)) == Fraction(5, 6)


def test_random_polynomial():
    rng.set_seed(11)
    f = Polynomial.random(degree=3, field=Z5, constant=4)
    assert f.degree == 3
    assert f.evaluate(0) == 4
    rng.set_seed(None)


def test_field_inference():
    assert Polynomial([Z5(1), Z5(2)]).field is Z5
    assert Polynomial([1, 2]).field is Fraction
    assert Polynomial([1.5, 2]).field is float


def test_constant_polynomial_hashes_like_scalar():
    c = poly([3], 7)
    assert c == Z7(3)
    assert hash(c) == hash(Z7(3)) == hash(3)
    assert Z7(3) in {c}
    assert hash(poly([], 7)) == hash(0)
    assert poly([1, 2], 7) != 1


def test_non_integer_coefficient_over_prime_field():
    with pytest.raises(TypeError):
        Polynomial([Fraction(7, 2), 1], Z5)


def test_constant_constructor():
    assert Polynomial(Z5(3)) == poly([3], 5)
    assert Polynomial(0, Z5).degree == -1


def test_monomial():
    assert monomial(Z5(3), 2) == poly([0, 0, 3], 5)
    assert monomial(1, 0, Z5) == poly([1], 5)


def test_leading_coefficient_and_monic():
    assert poly([1, 2, 3], 5).leading_coefficient() == 3
    assert poly([1, 1], 5).is_monic()
    assert not poly([], 5).is_monic()


@pytest.mark.parametrize("coeffs, expected", [
    ([], "0"),
    ([0, 0], "0"),
    ([3], "3"),
    ([0, 1], "x"),
    ([3, 4], "4*x + 3"),
    ([2, 0, 1], "x^2 + 2"),
    ([1, 1, 0, 2], "2*x^3 + x + 1"),
])
def test_str(coeffs, expected):
    assert str(poly(coeffs, 5)) == expected


def test_str_rationals():
    assert str(q([Fraction(1, 2), 0, 1])) == "x^2 + 1/2"
