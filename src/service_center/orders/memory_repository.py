from __future__ import annotations

from threading import Lock
from typing import Iterable, Optional, Sequence

from .model import Order


class InMemoryOrderRepository:
    """Process-wide order list; state is lost when the process exits.

    Every operation runs under one lock so a threaded WSGI server cannot
    interleave writes.
    """

    def __init__(self, orders: Iterable[Order] = ()):
        self._orders: list[Order] = list(orders)
        self._lock = Lock()

    def list_all(self) -> Sequence[Order]:
        with self._lock:
            return list(self._orders)

    def list_by_master(self, master_id: str) -> Sequence[Order]:
        with self._lock:
            return [o for o in self._orders if o.master_id == master_id]

    def get_by_id(self, order_id: str) -> Optional[Order]:
        with self._lock:
            for o in self._orders:
                if o.order_id == order_id:
                    return o
        return None

    def add(self, order: Order) -> None:
        with self._lock:
            self._orders.append(order)

    def replace(self, order: Order) -> bool:
        with self._lock:
            for i, o in enumerate(self._orders):
                if o.order_id == order.order_id:
                    self._orders[i] = order
                    return True
        return False

    def delete(self, order_id: str) -> bool:
        with self._lock:
            before = len(self._orders)
            self._orders = [o for o in self._orders if o.order_id != order_id]
            return len(self._orders) != before
