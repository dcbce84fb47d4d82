"""Display helpers for unit identifiers and conversion results."""

import math
import re

_WORD_START_RE = re.compile(r"\b([a-z])")
# What a browser number field can hold: ASCII digits, one optional point, optional exponent.
_NUMBER_RE = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")


def format_unit(unit: str) -> str:
    """Turn a unit identifier into a label, e.g. 'meter_per_second' -> 'Meter Per Second'."""
    if not unit:
        return ""
    return _WORD_START_RE.sub(lambda m: m.group(1).upper(), unit.replace("_", " "))


def format_number(value: float) -> str:
    """Render a number the way a JavaScript template string does.

    Integral values below 1e21 print as plain digits with no '.0'; larger
    ones fall back to exponent notation.
    """
    if math.isfinite(value) and float(value).is_integer() and abs(value) < 1e21:
        return str(int(value))
    return repr(float(value))


def format_result(result: float, unit: str) -> str:
    """Pair a numeric result with its unit, e.g. (3.6, 'kilometer') -> '3.6 kilometer'."""
    return f"{format_number(result)} {unit}"


def is_numeric(text: str) -> bool:
    """True when text is a non-empty string holding a finite ASCII decimal number."""
    if text is None:
        return False
    match = _NUMBER_RE.fullmatch(text.strip())
    return match is not None and math.isfinite(float(match.group()))
