"""Number base conversion between binary, octal, decimal and hexadecimal.

Every conversion goes through a single Python int, so the four renderings
always describe the same value.
"""
import re
from dataclasses import dataclass
from typing import Dict

from models import ConversionResult
from studytools.errors import InvalidDigitForBase, OutOfRange, UnsupportedBase

# Largest integer the original browser tool could represent exactly (2**53 - 1).
MAX_SAFE_INTEGER = 2 ** 53 - 1


@dataclass(frozen=True)
class BaseInfo:
    name: str
    prefix: str
    pattern: "re.Pattern"
    fmt: str


BASES: Dict[int, BaseInfo] = {
    2: BaseInfo("Binary", "0b", re.compile(r"[01]+"), "b"),
    8: BaseInfo("Octal", "0o", re.compile(r"[0-7]+"), "o"),
    10: BaseInfo("Decimal", "", re.compile(r"[0-9]+"), "d"),
    16: BaseInfo("Hexadecimal", "0x", re.compile(r"[0-9A-Fa-f]+"), "x"),
}


def coerce_base(base) -> int:
    """Accepts 16 or "16"; anything outside BASES raises UnsupportedBase."""
    if isinstance(base, int) and not isinstance(base, bool):
        b = base
    elif isinstance(base, str) and base.isdecimal():
        b = int(base)
    else:
        raise UnsupportedBase(base)
    if b not in BASES:
        raise UnsupportedBase(base)
    return b


def empty_results() -> Dict[str, str]:
    return {str(b): "" for b in BASES}


def render(value: int, base: int) -> str:
    return format(value, BASES[coerce_base(base)].fmt)


def parse(text: str, base: int, limit: int = MAX_SAFE_INTEGER) -> int:
    base = coerce_base(base)
    info = BASES[base]
    if not info.pattern.fullmatch(text):
        raise InvalidDigitForBase(info.name)
    # Compare digit counts first so huge inputs never reach int().
    digits = text.lstrip("0")
    if len(digits) > len(render(limit, base)):
        raise OutOfRange(limit)
    value = int(text, base)
    if value > limit:
        raise OutOfRange(limit)
    return value


def convert(text: str, base: int, limit: int = MAX_SAFE_INTEGER) -> ConversionResult:
    """Render `text` (written in `base`) in all four bases.

    Input problems come back on the result rather than being raised: the
    results are all empty and `error`/`code` describe the failure. An empty
    input is not a failure, it just yields empty results.
    """
    base = coerce_base(base)
    if text == "":
        return ConversionResult(empty_results())
    try:
        value = parse(text, base, limit)
    except (InvalidDigitForBase, OutOfRange) as e:
        return ConversionResult(empty_results(), error=e.message, code=e.code)
    return ConversionResult({str(b): render(value, b) for b in BASES})


def convert_to(text: str, from_base: int, to_base: int, prefixed: bool = True,
               limit: int = MAX_SAFE_INTEGER) -> str:
    to_base = coerce_base(to_base)
    if text == "":
        return ""
    value = parse(text, from_base, limit)
    out = render(value, to_base)
    if prefixed:
        out = BASES[to_base].prefix + out
    return out
