"""Editing rules for the order form.

All helpers are pure: they take an order and return a new one. Lines are
addressed by their position in the order, as in the editor form.
"""
from __future__ import annotations

import uuid
from datetime import date
from decimal import Decimal
from typing import Any, Optional

from ..core.enums import OrderStatus
from ..core.exceptions import ValidationError
from .model import Material, Order, Service


def new_id() -> str:
    return uuid.uuid4().hex


def new_order_draft(today: date, *, order_id: Optional[str] = None) -> Order:
    """Blank order as shown by the "create order" form."""
    return Order(
        order_id=order_id or new_id(),
        document_number="",
        date=today,
        client="",
        master_id=None,
        repair_object="",
        description="",
        invoice_number="",
        invoice_date=today,
        supplier="",
        status=OrderStatus.PENDING,
        image_url=None,
        services=(),
        materials=(),
    )


def _check_index(items: tuple, index: int) -> None:
    if not 0 <= index < len(items):
        raise ValidationError("Строка не найдена")


def add_service(order: Order) -> Order:
    line = Service(service_id=new_id(), name="", description="", price=Decimal("0"))
    return order.with_changes(services=order.services + (line,))


def update_service(order: Order, index: int, **changes: Any) -> Order:
    _check_index(order.services, index)
    unknown = set(changes) - {"name", "description", "price"}
    if unknown:
        raise ValidationError(f"Неизвестные поля услуги: {', '.join(sorted(unknown))}")

    services = list(order.services)
    current = services[index]
    services[index] = Service(
        service_id=current.service_id,
        name=changes.get("name", current.name),
        description=changes.get("description", current.description),
        price=changes.get("price", current.price),
    )
    return order.with_changes(services=tuple(services))


def remove_service(order: Order, index: int) -> Order:
    _check_index(order.services, index)
    return order.with_changes(services=order.services[:index] + order.services[index + 1 :])


def add_material(order: Order) -> Order:
    line = Material.create(material_id=new_id(), name="", quantity=1, price_per_unit=Decimal("0"))
    return order.with_changes(materials=order.materials + (line,))


def update_material(
    order: Order,
    index: int,
    *,
    name: Optional[str] = None,
    quantity: Optional[int] = None,
    price_per_unit: Optional[Decimal] = None,
) -> Order:
    """Change one material line; total follows quantity and price."""
    _check_index(order.materials, index)
    materials = list(order.materials)
    materials[index] = materials[index].revise(name=name, quantity=quantity, price_per_unit=price_per_unit)
    return order.with_changes(materials=tuple(materials))


def remove_material(order: Order, index: int) -> Order:
    _check_index(order.materials, index)
    return order.with_changes(materials=order.materials[:index] + order.materials[index + 1 :])
