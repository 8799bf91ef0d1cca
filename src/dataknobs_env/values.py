"""Value parsing and rendering for environment strings.

Environment values are always strings. Numbers are parsed with the same
leniency as JavaScript's ``Number(string)``, and defaults/bounds are rendered
the way ``String(value)`` renders them, so messages and injected values are
stable whether a bound was declared as ``10`` or ``10.0``.
"""

import math
import re
from decimal import Decimal
from typing import Any

_DECIMAL = re.compile(r"^[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?$", re.ASCII)
_RADIX = {"0x": 16, "0o": 8, "0b": 2}
_RADIX_DIGITS = {
    16: frozenset("0123456789abcdefABCDEF"),
    8: frozenset("01234567"),
    2: frozenset("01"),
}
_INFINITY = {"Infinity": math.inf, "+Infinity": math.inf, "-Infinity": -math.inf}


def parse_number(value: str) -> float | None:
    """Parse an environment string as a number.

    Only ASCII digits are accepted.

    Args:
        value: Raw environment value

    Returns:
        The parsed number, or None if the string is not numeric

    Examples:
        >>> parse_number(" 42 ")
        42.0
        >>> parse_number("0x10")
        16.0
        >>> parse_number("")
        0.0
        >>> parse_number("abc") is None
        True
    """
    text = value.strip()
    if not text:
        return 0.0

    if text in _INFINITY:
        return _INFINITY[text]

    prefix = text[:2].lower()
    if prefix in _RADIX:
        radix = _RADIX[prefix]
        digits = text[2:]
        if not digits or not set(digits) <= _RADIX_DIGITS[radix]:
            return None
        return float(int(digits, radix))

    if not _DECIMAL.match(text):
        return None
    return float(text)


def format_number(value: float | int) -> str:
    """Render a number as JavaScript's ``String(number)`` does.

    Integral values drop the fraction, and magnitudes of ``1e21`` and above
    or below ``1e-6`` use exponent form (``1e+21``, ``1e-7``).

    Args:
        value: Number to render

    Returns:
        String form of the number
    """
    if isinstance(value, bool):
        return format_value(value)
    if isinstance(value, int) and abs(value) < 10**21:
        return str(value)

    value = float(value)
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value == 0:
        return "0"

    sign = "-" if value < 0 else ""
    # Shortest round-tripping digits, as both Python and JavaScript use
    _, digit_tuple, exponent = Decimal(repr(abs(value))).as_tuple()
    digits = "".join(str(d) for d in digit_tuple).rstrip("0")
    exponent += len(digit_tuple) - len(digits)
    k = len(digits)
    n = exponent + k

    if k <= n <= 21:
        text = digits + "0" * (n - k)
    elif 0 < n <= 21:
        text = f"{digits[:n]}.{digits[n:]}"
    elif -6 < n <= 0:
        text = "0." + "0" * -n + digits
    else:
        mantissa = digits if k == 1 else f"{digits[0]}.{digits[1:]}"
        text = f"{mantissa}e{'+' if n - 1 >= 0 else '-'}{abs(n - 1)}"
    return sign + text


def format_value(value: Any) -> str:
    """Render a default value as it is written into the environment.

    Args:
        value: Default value (bool, number, or string)

    Returns:
        Environment string for the value
    """
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return format_number(value)
    return str(value)
