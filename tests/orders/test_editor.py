from __future__ import annotations

from datetime import date
from decimal import Decimal

import pytest

from service_center.core.enums import OrderStatus
from service_center.core.exceptions import ValidationError
from service_center.orders import editor
from service_center.orders.model import Material
from service_center.seed.demo import demo_orders


def test_new_draft_defaults():
    today = date(2025, 3, 14)

    draft = editor.new_order_draft(today)

    assert draft.status == OrderStatus.PENDING
    assert draft.date == today
    assert draft.invoice_date == today
    assert draft.master_id is None
    assert draft.services == ()
    assert draft.materials == ()
    assert draft.order_id


def test_new_drafts_get_unique_ids():
    today = date(2025, 3, 14)

    ids = {editor.new_order_draft(today).order_id for _ in range(50)}

    assert len(ids) == 50


def test_material_create_computes_total():
    m = Material.create(material_id="m", name="Подшипник", quantity=3, price_per_unit=Decimal("800"))

    assert m.total == Decimal("2400")


@pytest.mark.parametrize(
    "changes, expected_total",
    [
        ({"quantity": 5}, Decimal("4000")),
        ({"price_per_unit": Decimal("750.50")}, Decimal("1501.00")),
        ({"quantity": 1, "price_per_unit": Decimal("10")}, Decimal("10")),
    ],
)
def test_material_revise_keeps_total_invariant(changes, expected_total):
    m = Material.create(material_id="m", name="Подшипник", quantity=2, price_per_unit=Decimal("800"))

    revised = m.revise(**changes)

    assert revised.total == expected_total
    assert revised.total == revised.quantity * revised.price_per_unit


def test_material_rename_leaves_total_alone():
    m = Material(material_id="m", name="old", quantity=2, price_per_unit=Decimal("5"), total=Decimal("7"))

    assert m.revise(name="new").total == Decimal("7")


def test_add_material_defaults():
    order = editor.add_material(demo_orders()[0])

    line = order.materials[-1]
    assert (line.quantity, line.price_per_unit, line.total) == (1, 0, 0)


def test_update_material_recomputes_total():
    order = demo_orders()[1]

    updated = editor.update_material(order, 0, quantity=4)

    assert updated.materials[0].total == Decimal("3200")
    assert updated.materials[1] == order.materials[1]
    assert order.materials[0].total == Decimal("1600")


def test_service_lines_add_update_remove():
    order = demo_orders()[0].with_changes(services=())

    order = editor.add_service(order)
    order = editor.update_service(order, 0, name="Чистка", price=Decimal("300"))
    order = editor.add_service(order)

    assert [s.name for s in order.services] == ["Чистка", ""]
    assert order.services[0].price == Decimal("300")

    order = editor.remove_service(order, 1)
    assert [s.name for s in order.services] == ["Чистка"]


def test_remove_material_by_position():
    order = demo_orders()[1]

    updated = editor.remove_material(order, 0)

    assert [m.material_id for m in updated.materials] == ["3"]


def test_bad_line_index_raises():
    order = demo_orders()[0]

    with pytest.raises(ValidationError):
        editor.remove_service(order, 5)
    with pytest.raises(ValidationError):
        editor.update_material(order, -1, quantity=2)


def test_update_service_rejects_unknown_fields():
    with pytest.raises(ValidationError):
        editor.update_service(demo_orders()[0], 0, total=Decimal("1"))
