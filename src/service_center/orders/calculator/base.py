from __future__ import annotations

from abc import ABC, abstractmethod

from ..model import Order, OrderTotals


class TotalsCalculator(ABC):
    """Calculator interface (Strategy Pattern for order totals)."""

    @abstractmethod
    def calculate(self, order: Order) -> OrderTotals:
        raise NotImplementedError
