from __future__ import annotations

import math
from decimal import Decimal

# Decimal exponents at or above this switch to exponent notation.
EXPONENT_THRESHOLD = 6


def format_price(value: float) -> str:
    """Format a float with the fewest digits that round-trip.

    Plain notation is used when the decimal exponent is in [-4, 6), exponent
    notation otherwise: ``100``, ``2.575``, ``1.234567e+06``, ``1.234e-05``.
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "+Inf" if value > 0 else "-Inf"
    if value == 0:
        return "-0" if math.copysign(1.0, value) < 0 else "0"

    sign, digit_tuple, exponent = Decimal(repr(value)).normalize().as_tuple()
    digits = "".join(str(digit) for digit in digit_tuple)
    point = len(digits) + exponent
    decimal_exponent = point - 1
    prefix = "-" if sign else ""

    if decimal_exponent < -4 or decimal_exponent >= EXPONENT_THRESHOLD:
        mantissa = digits[0] + (f".{digits[1:]}" if len(digits) > 1 else "")
        exponent_sign = "-" if decimal_exponent < 0 else "+"
        return f"{prefix}{mantissa}e{exponent_sign}{abs(decimal_exponent):02d}"
    if point <= 0:
        return f"{prefix}0.{'0' * -point}{digits}"
    if point >= len(digits):
        return f"{prefix}{digits}{'0' * (point - len(digits))}"
    return f"{prefix}{digits[:point]}.{digits[point:]}"
