"""Parse the order editor form into an Order.

Services and materials arrive as parallel lists (`service_name`,
`service_price`, ...). Material totals are recomputed from quantity and
price, never taken from the form.
"""
from __future__ import annotations

from itertools import zip_longest
from typing import Optional

from werkzeug.datastructures import MultiDict

from ..common.datetime_utils import parse_form_date
from ..common.validators import parse_decimal, parse_int
from ..core.enums import OrderStatus
from ..core.exceptions import ValidationError
from .editor import new_id
from .model import Material, Order, Service


def _rows(form: MultiDict, *fields: str):
    columns = [form.getlist(f) for f in fields]
    return zip_longest(*columns, fillvalue="")


def order_from_form(form: MultiDict, *, order_id: str, keep_blank_rows: bool = False) -> Order:
    """Build an Order from the editor form.

    Fully blank line rows are dropped unless `keep_blank_rows` is set; line
    actions (add/remove by position) need every on-screen row kept so the
    row indexes still match.
    """
    status_s = form.get("status", OrderStatus.PENDING.value)
    try:
        status = OrderStatus(status_s)
    except ValueError:
        raise ValidationError("Недопустимый статус заказа")

    master_id: Optional[str] = (form.get("master_id") or "").strip() or None
    image_url: Optional[str] = (form.get("image_url") or "").strip() or None

    services = []
    for sid, name, description, price in _rows(
        form, "service_id", "service_name", "service_description", "service_price"
    ):
        if not keep_blank_rows and not (name or description or price):
            continue
        services.append(
            Service(
                service_id=sid or new_id(),
                name=name.strip(),
                description=description.strip(),
                price=parse_decimal(price, "Стоимость услуги"),
            )
        )

    materials = []
    for mid, name, quantity, price in _rows(
        form, "material_id", "material_name", "material_quantity", "material_price"
    ):
        if not keep_blank_rows and not (name or quantity or price):
            continue
        materials.append(
            Material.create(
                material_id=mid or new_id(),
                name=name.strip(),
                quantity=parse_int(quantity or "1", "Количество"),
                price_per_unit=parse_decimal(price, "Цена материала"),
            )
        )

    return Order(
        order_id=order_id,
        document_number=(form.get("document_number") or "").strip(),
        date=parse_form_date(form.get("date", ""), "Дата"),
        client=(form.get("client") or "").strip(),
        master_id=master_id,
        repair_object=(form.get("repair_object") or "").strip(),
        description=(form.get("description") or "").strip(),
        invoice_number=(form.get("invoice_number") or "").strip(),
        invoice_date=parse_form_date(form.get("invoice_date", ""), "Дата накладной"),
        supplier=(form.get("supplier") or "").strip(),
        status=status,
        image_url=image_url,
        services=tuple(services),
        materials=tuple(materials),
    )
