from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, Optional, Sequence

from ..access.policy import ensure_can_modify, visible_orders
from ..common.validators import require_non_empty, require_non_negative, require_positive_int
from ..core.enums import OrderStatus
from ..core.exceptions import ValidationError
from ..users.model import Master, User
from .calculator.base import TotalsCalculator
from .calculator.standard_calculator import StandardTotalsCalculator
from .model import Order, OrderTotals, StatusSummary
from .repository import OrderRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MasterWorkload:
    master: Master
    summary: StatusSummary


class OrderService:
    def __init__(
        self,
        orders: OrderRepository,
        *,
        calculator: Optional[TotalsCalculator] = None,
    ):
        self._orders = orders
        self._calculator = calculator or StandardTotalsCalculator()

    # ---- queries -------------------------------------------------------

    def list_orders(self) -> Sequence[Order]:
        return self._orders.list_all()

    def list_orders_by_master(self, master_id: str) -> Sequence[Order]:
        return self._orders.list_by_master(master_id)

    def orders_for(self, user: User) -> Sequence[Order]:
        return visible_orders(user, self._orders.list_all())

    def get_order(self, order_id: str) -> Optional[Order]:
        return self._orders.get_by_id(order_id)

    def calculate_totals(self, order: Order) -> OrderTotals:
        return self._calculator.calculate(order)

    @staticmethod
    def status_summary(orders: Iterable[Order]) -> StatusSummary:
        orders = list(orders)
        return StatusSummary(
            total=len(orders),
            pending=sum(1 for o in orders if o.status == OrderStatus.PENDING),
            in_progress=sum(1 for o in orders if o.status == OrderStatus.IN_PROGRESS),
            completed=sum(1 for o in orders if o.status == OrderStatus.COMPLETED),
        )

    def master_workload(self, masters: Iterable[Master]) -> list[MasterWorkload]:
        orders = self._orders.list_all()
        return [
            MasterWorkload(
                master=m,
                summary=self.status_summary(o for o in orders if o.master_id == m.master_id),
            )
            for m in masters
        ]

    # ---- mutations (manager only) --------------------------------------

    def create_order(self, *, current_user: User, order: Order) -> Order:
        ensure_can_modify(current_user)
        order = self._validate(order)
        self._orders.add(order)
        logger.info("Order %s (%s) created by %s", order.order_id, order.document_number, current_user.login)
        return order

    def update_order(self, *, current_user: User, order: Order) -> bool:
        """Replace an existing order.

        An unknown id is a silent no-op: nothing changes and False is returned.
        """
        ensure_can_modify(current_user)
        order = self._validate(order)
        updated = self._orders.replace(order)
        if updated:
            logger.info("Order %s updated by %s", order.order_id, current_user.login)
        else:
            logger.debug("Update of unknown order %s ignored", order.order_id)
        return updated

    def delete_order(self, *, current_user: User, order_id: str) -> bool:
        """Delete an order. Deleting an unknown id is a no-op."""
        ensure_can_modify(current_user)
        deleted = self._orders.delete(order_id)
        if deleted:
            logger.info("Order %s deleted by %s", order_id, current_user.login)
        else:
            logger.debug("Delete of unknown order %s ignored", order_id)
        return deleted

    @staticmethod
    def _validate(order: Order) -> Order:
        if not order.order_id:
            raise ValidationError("Не задан идентификатор заказа")
        if not isinstance(order.status, OrderStatus):
            try:
                order = order.with_changes(status=OrderStatus(order.status))
            except ValueError:
                raise ValidationError("Недопустимый статус заказа")

        require_non_empty(order.document_number, "Номер документа")
        require_non_empty(order.client, "Клиент")
        require_non_empty(order.repair_object, "Объект ремонта")
        require_non_empty(order.description, "Описание проблемы")

        for s in order.services:
            require_non_empty(s.name, "Название услуги")
            require_non_negative(s.price, "Стоимость услуги")
        for m in order.materials:
            require_non_empty(m.name, "Название материала")
            require_positive_int(m.quantity, "Количество")
            require_non_negative(m.price_per_unit, "Цена материала")
        return order
