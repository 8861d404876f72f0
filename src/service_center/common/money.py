from __future__ import annotations

from decimal import Decimal

from ..core.constants import CURRENCY_SIGN, THOUSANDS_SEPARATOR


def format_money(value: Decimal | int) -> str:
    """6000 -> '6 000 ₽', 1200.5 -> '1 200,50 ₽' (groups split by a non-breaking space)."""
    amount = Decimal(value)
    if amount == amount.to_integral_value():
        text = f"{int(amount):,}"
    else:
        text = f"{amount:,.2f}".replace(".", "#")
    text = text.replace(",", THOUSANDS_SEPARATOR).replace("#", ",")
    return f"{text} {CURRENCY_SIGN}"
