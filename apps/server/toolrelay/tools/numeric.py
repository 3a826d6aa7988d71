"""
Number coercion and rendering with JavaScript ``Number()`` / ``String(number)``
semantics, so tool output matches what existing clients expect
("7" not "7.0", "NaN", "Infinity", "1e+21").
"""
from __future__ import annotations

import math
import re
from decimal import Decimal

_DECIMAL_RE = re.compile(r"^[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?$", re.ASCII)
_RADIX_RE = {
    16: re.compile(r"^0[xX][0-9a-fA-F]+$"),
    8: re.compile(r"^0[oO][0-7]+$"),
    2: re.compile(r"^0[bB][01]+$"),
}
_INFINITY_RE = re.compile(r"^([+-]?)Infinity$")

# WhiteSpace and LineTerminator code points as JavaScript trims them.
_JS_WHITESPACE = (
    "\t\n\v\f\r \u00a0\u1680\u2000\u2001\u2002\u2003\u2004\u2005\u2006"
    "\u2007\u2008\u2009\u200a\u2028\u2029\u202f\u205f\u3000\ufeff"
)


def parse_number(raw: str) -> float:
    """Parse a string like JavaScript's ``Number(raw)``. Unparseable input gives NaN."""
    s = (raw or "").strip(_JS_WHITESPACE)
    if not s:
        return 0.0

    m = _INFINITY_RE.match(s)
    if m:
        return -math.inf if m.group(1) == "-" else math.inf

    for radix, pattern in _RADIX_RE.items():
        if pattern.match(s):
            return float(int(s[2:], radix))

    if _DECIMAL_RE.match(s):
        return float(s)

    return math.nan


def format_number(value: float | int) -> str:
    """Render a number the way JavaScript's ``String(value)`` does."""
    x = float(value)
    if math.isnan(x):
        return "NaN"
    if math.isinf(x):
        return "-Infinity" if x < 0 else "Infinity"
    if x == 0:
        return "0"
    if x < 0:
        return "-" + format_number(-x)

    # repr() gives the shortest round-tripping digits; only the layout differs.
    _, digit_tuple, exponent = Decimal(repr(x)).as_tuple()
    digits = "".join(str(d) for d in digit_tuple)
    while len(digits) > 1 and digits.endswith("0"):
        digits = digits[:-1]
        exponent += 1

    k = len(digits)
    n = exponent + k  # position of the decimal point relative to the digits

    if k <= n <= 21:
        return digits + "0" * (n - k)
    if 0 < n <= 21:
        return digits[:n] + "." + digits[n:]
    if -6 < n <= 0:
        return "0." + "0" * (-n) + digits

    e = n - 1
    mantissa = digits[0] + ("." + digits[1:] if k > 1 else "")
    return f"{mantissa}e{'+' if e >= 0 else '-'}{abs(e)}"
