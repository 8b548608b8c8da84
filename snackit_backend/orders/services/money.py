# orders/services/money.py

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal

TWOPLACES = Decimal("0.01")


def money(v) -> Decimal:
    """Rupee amount rounded half-up to 2dp; None / "" count as zero."""
    if v is None or v == "":
        return Decimal("0.00")
    return Decimal(str(v)).quantize(TWOPLACES, rounding=ROUND_HALF_UP)
