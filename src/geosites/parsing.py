"""Best-effort numeric parsing for user-editable text fields.

Location lines are hand edited, so malformed numbers do not raise. Each helper
returns the parsed value and a flag telling whether parsing succeeded; on
failure the value is the supplied default.
"""

import math
import re
from decimal import Decimal

_INT_PATTERN = re.compile(r"[+-]?\d+")
_FLOAT_PATTERN = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")

INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1

# Anything larger cannot land in int32 after scaling by a small power of ten.
_MAX_DECIMAL_EXPONENT = 15


def parse_int(text: str, default: int = 0) -> tuple[int, bool]:
    """Parse a base-10 integer, returning (default, False) on failure."""
    text = text.strip()
    if not _INT_PATTERN.fullmatch(text):
        return default, False
    return int(text), True


def parse_float(text: str, default: float = 0.0) -> tuple[float, bool]:
    """Parse a decimal number, returning (default, False) on failure.

    Only plain decimal and exponent notation is accepted: ``nan``, ``inf``,
    digit separators and literals that overflow a float are treated as
    malformed.
    """
    text = text.strip()
    if not _FLOAT_PATTERN.fullmatch(text):
        return default, False
    value = float(text)
    if not math.isfinite(value):
        return default, False
    return value, True


def parse_decimal(text: str, default: Decimal = Decimal(0)) -> tuple[Decimal, bool]:
    """Parse a decimal number exactly, returning (default, False) on failure."""
    text = text.strip()
    if not _FLOAT_PATTERN.fullmatch(text):
        return default, False
    value = Decimal(text)
    if value and value.adjusted() > _MAX_DECIMAL_EXPONENT:
        return default, False
    return value, True


def parse_float_or_zero(text: str) -> float:
    """Parse a mandatory numeric field; malformed input yields zero."""
    value, _ = parse_float(text, 0.0)
    return value


def parse_int32_or_zero(text: str, scale: int = 1) -> int:
    """Parse a mandatory integer field written as a decimal number.

    The value is multiplied by ``scale`` exactly and truncated toward zero.
    Malformed input, or a result outside the int32 range, yields zero.

    Examples
    --------
    >>> parse_int32_or_zero("32.3", scale=1000)
    32300
    """
    value, ok = parse_decimal(text)
    if not ok:
        return 0
    result = int(value * scale)
    if not INT32_MIN <= result <= INT32_MAX:
        return 0
    return result
