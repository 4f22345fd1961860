"""Polynomial and quotient-ring calculator: entry point.

With no arguments, runs a few fixed scenarios in GF(p^n). Otherwise computes
with the field, modulus and elements given on the command line, e.g.

    python -m gfext --prime 5 --modulus 2,0,1 -a 3,4 -b 2,1 --exp 3

`--calc N` switches to plain polynomial arithmetic over the rationals:

    python -m gfext --calc 4 -a=-1,0,0,1 -b=-1,1      # divmod
    python -m gfext --calc 6 -a 1/2,0,3 --at 1/3      # evaluate

Polynomials are comma-separated coefficients, constant term first.
Set LOG_LEVEL=DEBUG (or pass -v) to trace the irreducibility search.
"""

import argparse
import logging
import os
import sys
from fractions import Fraction

from gfext import rng
from gfext.errors import NoInverseError, PolynomialDivisionByZero, ReducibleModulusError
from gfext.irreducible import IrreducibleModulus, find_irreducible
from gfext.modular import PrimeField
from gfext.polynomial import Polynomial

logger = logging.getLogger(__name__)

DEFAULT_PRIME = 5
DEFAULT_MODULUS = "2,0,1"  # x^2 + 2
DEFAULT_A = "3,4"
DEFAULT_B = "2,1"
DEFAULT_EXPONENT = 3
DEFAULT_POINT = "0"

OPERATIONS = {
    1: ("A + B", lambda a, b, e: a + b),
    2: ("A - B", lambda a, b, e: a - b),
    3: ("A * B", lambda a, b, e: a * b),
    4: ("A / B", lambda a, b, e: a / b),
    5: ("Inverse of A", lambda a, b, e: a.inv()),
    6: ("A^{e}", lambda a, b, e: a ** e),
}

CALCULATOR = {
    1: "addition",
    2: "subtraction",
    3: "multiplication",
    4: "division (quotient and remainder)",
    5: "exponentiation",
    6: "evaluation at a point",
}


def setup_logging(verbose: bool = False):
    """Root logger at LOG_LEVEL (default INFO), or DEBUG when verbose."""
    level_name = os.environ.get("LOG_LEVEL", "INFO").upper()
    level = getattr(logging, level_name, None)
    if not isinstance(level, int):
        level = logging.INFO
    if verbose:
        level = logging.DEBUG
    logging.basicConfig(level=level, format="%(asctime)s - %(levelname)s - %(name)s: %(message)s")


def parse_polynomial(text: str, field=Fraction) -> Polynomial:
    """Parse "3,4" as 3 + 4x: ints over a PrimeField, rationals otherwise."""
    text = text.strip()
    if not text:
        return Polynomial((), field)
    convert = int if isinstance(field, PrimeField) else field
    try:
        return Polynomial([convert(c) for c in text.split(",")], field)
    except (ValueError, ZeroDivisionError):
        raise argparse.ArgumentTypeError(f"not a coefficient list: {text!r}") from None


def run_calculator(operation: int, a: Polynomial, b: Polynomial, exponent: int, point):
    """One operation of the plain polynomial calculator."""
    print(f"=== Polynomial {CALCULATOR[operation]} ===")
    if operation == 1:
        print(f"A + B = {a + b}")
    elif operation == 2:
        print(f"A - B = {a - b}")
    elif operation == 3:
        print(f"A * B = {a * b}")
    elif operation == 4:
        try:
            quotient, remainder = a.divmod(b)
        except PolynomialDivisionByZero as e:
            print(f"Error: {e}")
        else:
            print(f"Quotient: {quotient}")
            print(f"Remainder: {remainder}")
    elif operation == 5:
        print(f"A^{exponent} = {a ** exponent}")
    else:
        print(f"A({point}) = {a.evaluate(point)}")


def run_quotient_ring(prime: int, modulus: Polynomial, a: Polynomial, b: Polynomial,
                      exponent: int, operation: int | None = None):
    """Print the results of the ring operations on A and B modulo `modulus`.

    Raises ReducibleModulusError if `modulus` is not irreducible over Z_prime.
    """
    ring = IrreducibleModulus(modulus)
    print(f"=== GF({prime}^{ring.degree}) = Z{prime}[x]/({modulus}) ===")
    elem_a, elem_b = ring.element(a), ring.element(b)
    print(f"Element A = {elem_a}")
    print(f"Element B = {elem_b}")
    print()

    selected = [operation] if operation is not None else sorted(OPERATIONS)
    for op in selected:
        label, fn = OPERATIONS[op]
        label = label.format(e=exponent)
        try:
            print(f"  {label} = {fn(elem_a, elem_b, exponent)}")
        except NoInverseError as e:
            print(f"  {label}: error computing inverse: {e}")
    print()


def run_scenarios(seed: int):
    print("=" * 50)
    print("SCENARIO 1: GF(25) with f(x) = x^2 + 2")
    print("=" * 50)
    z5 = PrimeField(5)
    run_quotient_ring(5, Polynomial([2, 0, 1], z5), Polynomial([3, 4], z5),
                      Polynomial([2, 1], z5), DEFAULT_EXPONENT)

    print("=" * 50)
    print("SCENARIO 2: GF(8) with f(x) = x^3 + x + 1, B = 0")
    print("=" * 50)
    z2 = PrimeField(2)
    run_quotient_ring(2, Polynomial([1, 1, 0, 1], z2), Polynomial([0, 1], z2),
                      Polynomial((), z2), 6)

    print("=" * 50)
    print("SCENARIO 3: Reducible modulus x^2 - 1 over Z7")
    print("=" * 50)
    z7 = PrimeField(7)
    try:
        run_quotient_ring(7, Polynomial([-1, 0, 1], z7), Polynomial([1], z7),
                          Polynomial([1], z7), 2)
    except ReducibleModulusError as e:
        print(f"  Rejected: {e}")
    print()

    print("=" * 50)
    print(f"SCENARIO 4: Random elements of GF(7^3), seed={seed}")
    print("=" * 50)
    rng.set_seed(seed)
    f = find_irreducible(z7, 3)
    run_quotient_ring(7, f, Polynomial.random(2, z7), Polynomial.random(2, z7), 48)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Arithmetic in Q[x] and Z_p[x]/(f(x))")
    parser.add_argument("--prime", "-p", type=int, default=None,
                        help=f"field modulus p (default {DEFAULT_PRIME})")
    parser.add_argument("--modulus", "-f", default=None,
                        help=f"ring modulus f(x), constant first (default {DEFAULT_MODULUS})")
    parser.add_argument("-a", default=DEFAULT_A, help="element A")
    parser.add_argument("-b", default=DEFAULT_B, help="element B")
    parser.add_argument("--exp", "-e", type=int, default=DEFAULT_EXPONENT,
                        help="non-negative exponent for A^exp")
    parser.add_argument("--operation", "-o", type=int, choices=sorted(OPERATIONS),
                        help="only run one ring operation: 1:+ 2:- 3:* 4:/ 5:inverse 6:pow")
    parser.add_argument("--calc", "-c", type=int, choices=sorted(CALCULATOR),
                        help="polynomial calculator over Q: 1:+ 2:- 3:* 4:divmod 5:pow 6:evaluate")
    parser.add_argument("--at", default=DEFAULT_POINT,
                        help="point for --calc 6, an integer or fraction like 1/3")
    parser.add_argument("--seed", type=int,
                        default=int(os.environ.get("GFEXT_SEED", "42")),
                        help="seed for random scenarios (env GFEXT_SEED)")
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    return parser


def cli(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.verbose)

    if args.exp < 0:
        parser.error("exponent must be non-negative")

    if args.calc is not None:
        try:
            a = parse_polynomial(args.a)
            b = parse_polynomial(args.b)
            point = Fraction(args.at)
        except (argparse.ArgumentTypeError, ValueError, ZeroDivisionError) as e:
            parser.error(str(e))
        logger.debug("calc=%d A=%s B=%s exp=%d at=%s", args.calc, a, b, args.exp, point)
        run_calculator(args.calc, a, b, args.exp, point)
        return 0

    if args.prime is None and args.modulus is None:
        run_scenarios(args.seed)
        return 0

    prime = args.prime if args.prime is not None else DEFAULT_PRIME
    try:
        field = PrimeField(prime)
    except ValueError as e:
        parser.error(str(e))
    try:
        modulus = parse_polynomial(args.modulus or DEFAULT_MODULUS, field)
        a = parse_polynomial(args.a, field)
        b = parse_polynomial(args.b, field)
    except argparse.ArgumentTypeError as e:
        parser.error(str(e))

    logger.debug("p=%d f=%s A=%s B=%s exp=%d", prime, modulus, a, b, args.exp)
    try:
        run_quotient_ring(prime, modulus, a, b, args.exp, args.operation)
    except ReducibleModulusError as e:
        print(f"The polynomial f(x) is reducible over Z{prime}: {e}", file=sys.stderr)
        return 2
    return 0


if __name__ == "__main__":
    sys.exit(cli())
