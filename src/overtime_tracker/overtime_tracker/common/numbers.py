from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal, localcontext

# Enough significant digits to quantize any finite float (up to ~1.8e308).
_PRECISION = 340


def round_half_up(value: float, places: int = 2) -> float:
    """Round like a payroll sheet does: halves go away from zero.

    The value goes through ``repr`` so that 2.675 rounds to 2.68 rather than
    following its binary approximation down.
    """
    quantum = Decimal(1).scaleb(-places)
    with localcontext() as ctx:
        ctx.prec = _PRECISION
        return float(Decimal(repr(float(value))).quantize(quantum, rounding=ROUND_HALF_UP))
