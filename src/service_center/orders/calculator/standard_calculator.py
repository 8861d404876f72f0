from __future__ import annotations

from decimal import Decimal

from ..model import Order, OrderTotals
from .base import TotalsCalculator


class StandardTotalsCalculator(TotalsCalculator):
    """Standard rule: sum of service prices + sum of stored material totals.

    Material totals are trusted as stored, not re-derived from quantity * price.
    """

    def calculate(self, order: Order) -> OrderTotals:
        services_total = sum((s.price for s in order.services), Decimal("0"))
        materials_total = sum((m.total for m in order.materials), Decimal("0"))
        return OrderTotals(
            services_total=services_total,
            materials_total=materials_total,
            total=services_total + materials_total,
        )


def calculate_totals(order: Order) -> OrderTotals:
    return StandardTotalsCalculator().calculate(order)
