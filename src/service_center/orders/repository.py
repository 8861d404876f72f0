from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Order


class OrderRepository(Protocol):
    """Хранилище заказов.

    Порядок вставки сохраняется. Сервисы зависят от этого интерфейса,
    поэтому хранилище в памяти можно заменить постоянным без изменения
    расчётов и правил доступа.
    """

    def list_all(self) -> Sequence[Order]:
        raise NotImplementedError

    def list_by_master(self, master_id: str) -> Sequence[Order]:
        raise NotImplementedError

    def get_by_id(self, order_id: str) -> Optional[Order]:
        raise NotImplementedError

    def add(self, order: Order) -> None:
        """Append an order. Id uniqueness is the caller's responsibility."""

        raise NotImplementedError

    def replace(self, order: Order) -> bool:
        """Replace the entry with the same id.

        Returns False (and changes nothing) when no entry matches.
        """

        raise NotImplementedError

    def delete(self, order_id: str) -> bool:
        raise NotImplementedError
