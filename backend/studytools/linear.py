import math
import re
from decimal import Decimal

from models import LinearEquation, Solution
from studytools.errors import (
    InvalidNumericLiteral,
    MissingEqualsSign,
    MissingVariable,
    UnsupportedEquationForm,
    ZeroCoefficient,
)

_WHITESPACE = re.compile(r"\s+")
_SIGNED_DECIMAL = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)")
_UNSIGNED_DECIMAL = re.compile(r"\d+(?:\.\d*)?|\.\d+")


def _number(literal: str, signed: bool = True) -> float:
    pattern = _SIGNED_DECIMAL if signed else _UNSIGNED_DECIMAL
    if not pattern.fullmatch(literal):
        raise InvalidNumericLiteral(literal)
    value = float(literal)
    if not math.isfinite(value):
        raise InvalidNumericLiteral(literal)
    return value


def format_number(value: float) -> str:
    """Shortest round-trip digits laid out the way a browser prints numbers.

    2.0 -> "2", -0.0 -> "0", 0.5 -> "0.5", 1e-7 -> "1e-7", 1e21 -> "1e+21".
    Plain notation is used while the decimal point sits between 1e-6 and 1e21.
    """
    if value == 0:
        return "0"
    sign = "-" if value < 0 else ""
    _, digit_tuple, exponent = Decimal(repr(abs(value))).normalize().as_tuple()
    digits = "".join(str(d) for d in digit_tuple)
    k = len(digits)
    n = k + exponent  # position of the decimal point relative to the digits
    if k <= n <= 21:
        body = digits + "0" * (n - k)
    elif 0 < n <= 21:
        body = digits[:n] + "." + digits[n:]
    elif -6 < n <= 0:
        body = "0." + "0" * -n + digits
    else:
        e = n - 1
        mantissa = digits[0] + ("." + digits[1:] if k > 1 else "")
        body = f"{mantissa}e{'+' if e >= 0 else '-'}{abs(e)}"
    return sign + body


def parse_equation(equation_text: str) -> LinearEquation:
    """Parse `ax+b=c` (x on the left, once) into its three numbers."""
    cleaned = _WHITESPACE.sub("", equation_text or "")
    if "=" not in cleaned:
        raise MissingEqualsSign()
    if cleaned.count("=") > 1:
        raise UnsupportedEquationForm("only one '=' is allowed")
    left, right = cleaned.split("=")

    x_index = left.find("x")
    if x_index == -1:
        raise MissingVariable()
    if cleaned.count("x") > 1:
        raise UnsupportedEquationForm("x may appear only once, on the left side")

    coefficient = left[:x_index]
    if coefficient == "":
        a = 1.0
    elif coefficient == "-":
        a = -1.0
    else:
        a = _number(coefficient)

    constant = left[x_index + 1:]
    if constant == "":
        b = 0.0
    elif constant.startswith("+"):
        b = _number(constant[1:], signed=False)
    elif constant.startswith("-"):
        b = -_number(constant[1:], signed=False)
    else:
        # no explicit operator, e.g. "2x3": read as "+3"
        b = _number(constant, signed=False)

    c = _number(right)
    return LinearEquation(a, b, c)


def _term(a: float) -> str:
    if a == 1:
        return "x"
    if a == -1:
        return "-x"
    return f"{format_number(a)}x"


def _steps(eq: LinearEquation, rhs: float, x: float):
    if eq.b > 0:
        shown = f"{_term(eq.a)} + {format_number(eq.b)} = {format_number(eq.c)}"
        move = f"Subtract {format_number(eq.b)} from both sides"
    elif eq.b < 0:
        shown = f"{_term(eq.a)} - {format_number(-eq.b)} = {format_number(eq.c)}"
        move = f"Add {format_number(-eq.b)} to both sides"
    else:
        shown = f"{_term(eq.a)} = {format_number(eq.c)}"
        move = "No constant to move"
    return [
        shown,
        f"{move}: {_term(eq.a)} = {format_number(rhs)}",
        f"Divide both sides by {format_number(eq.a)}: x = {format_number(x)}",
    ]


def solve(equation_text: str) -> Solution:
    eq = parse_equation(equation_text)
    if eq.a == 0:
        raise ZeroCoefficient()
    rhs = eq.c - eq.b
    x = rhs / eq.a
    if not math.isfinite(x):
        raise UnsupportedEquationForm("the solution is too large to represent")
    return Solution(x=x, text=f"x = {format_number(x)}", steps=_steps(eq, rhs, x))
