from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import date
from decimal import Decimal
from typing import Optional

from ..core.enums import OrderStatus


@dataclass(frozen=True)
class Service:
    """Услуга (работа мастера) в составе заказа."""

    service_id: str
    name: str
    description: str = ""
    price: Decimal = Decimal("0")


@dataclass(frozen=True)
class Material:
    """Материал (запчасть) в составе заказа.

    `total` хранится, но пересчитывается как quantity * price_per_unit
    при каждом изменении количества или цены (см. `create` / `revise`).
    """

    material_id: str
    name: str
    quantity: int
    price_per_unit: Decimal
    total: Decimal

    @classmethod
    def create(cls, *, material_id: str, name: str, quantity: int, price_per_unit: Decimal) -> "Material":
        return cls(
            material_id=material_id,
            name=name,
            quantity=quantity,
            price_per_unit=price_per_unit,
            total=quantity * price_per_unit,
        )

    def revise(
        self,
        *,
        name: Optional[str] = None,
        quantity: Optional[int] = None,
        price_per_unit: Optional[Decimal] = None,
    ) -> "Material":
        qty = self.quantity if quantity is None else quantity
        price = self.price_per_unit if price_per_unit is None else price_per_unit
        total = self.total
        if quantity is not None or price_per_unit is not None:
            total = qty * price
        return replace(
            self,
            name=self.name if name is None else name,
            quantity=qty,
            price_per_unit=price,
            total=total,
        )


@dataclass(frozen=True)
class Order:
    """Заказ-наряд на ремонт."""

    order_id: str
    document_number: str
    date: date
    client: str
    master_id: Optional[str]
    repair_object: str
    description: str
    invoice_number: str
    invoice_date: date
    supplier: str
    status: OrderStatus = OrderStatus.PENDING
    image_url: Optional[str] = None
    services: tuple[Service, ...] = field(default_factory=tuple)
    materials: tuple[Material, ...] = field(default_factory=tuple)

    def with_changes(self, **changes) -> "Order":
        return replace(self, **changes)


@dataclass(frozen=True)
class OrderTotals:
    services_total: Decimal
    materials_total: Decimal
    total: Decimal


@dataclass(frozen=True)
class StatusSummary:
    total: int
    pending: int
    in_progress: int
    completed: int
