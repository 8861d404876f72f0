from __future__ import annotations

from decimal import Decimal

import pytest

from service_center.core.enums import OrderStatus
from service_center.core.exceptions import AuthorizationError, ValidationError
from service_center.orders.memory_repository import InMemoryOrderRepository
from service_center.orders.model import Material, OrderTotals, Service
from service_center.orders.service import OrderService
from service_center.seed.demo import DEMO_MASTERS, demo_orders


@pytest.fixture
def repo():
    return InMemoryOrderRepository(demo_orders())


@pytest.fixture
def svc(repo):
    return OrderService(repo)


def _new_order(order_id="100"):
    return demo_orders()[0].with_changes(order_id=order_id, document_number="0100")


def test_create_appends_for_manager(svc, manager):
    svc.create_order(current_user=manager, order=_new_order())

    assert [o.order_id for o in svc.list_orders()] == ["1", "2", "3", "100"]


def test_master_cannot_mutate(svc, master_1):
    with pytest.raises(AuthorizationError):
        svc.create_order(current_user=master_1, order=_new_order())
    with pytest.raises(AuthorizationError):
        svc.update_order(current_user=master_1, order=demo_orders()[0])
    with pytest.raises(AuthorizationError):
        svc.delete_order(current_user=master_1, order_id="1")

    assert len(svc.list_orders()) == 3


def test_update_round_trip_changes_only_that_order(svc, manager):
    created = svc.create_order(current_user=manager, order=_new_order())
    before = {o.order_id: o for o in svc.list_orders()}

    assert svc.update_order(current_user=manager, order=created.with_changes(status=OrderStatus.COMPLETED)) is True

    after = {o.order_id: o for o in svc.list_orders()}
    assert len(after) == len(before)
    assert after["100"].status == OrderStatus.COMPLETED
    for order_id in ("1", "2", "3"):
        assert after[order_id] == before[order_id]


def test_update_missing_order_is_silent_noop(svc, manager):
    before = list(svc.list_orders())

    assert svc.update_order(current_user=manager, order=_new_order("ghost")) is False
    assert list(svc.list_orders()) == before


def test_delete_missing_order_is_silent_noop(svc, manager):
    assert svc.delete_order(current_user=manager, order_id="1") is True
    assert svc.delete_order(current_user=manager, order_id="1") is False
    assert [o.order_id for o in svc.list_orders()] == ["2", "3"]


def test_status_can_go_backwards(svc, manager):
    done = svc.get_order("3")
    assert done.status == OrderStatus.COMPLETED

    svc.update_order(current_user=manager, order=done.with_changes(status=OrderStatus.PENDING))

    assert svc.get_order("3").status == OrderStatus.PENDING


def test_status_given_as_string_is_normalised(svc, manager):
    svc.update_order(current_user=manager, order=svc.get_order("1").with_changes(status="completed"))

    assert svc.get_order("1").status is OrderStatus.COMPLETED


@pytest.mark.parametrize(
    "changes",
    [
        {"document_number": "  "},
        {"client": ""},
        {"repair_object": ""},
        {"description": ""},
        {"status": "archived"},
        {"materials": (Material.create(material_id="m", name="X", quantity=0, price_per_unit=Decimal("1")),)},
        {"materials": (Material.create(material_id="m", name="", quantity=1, price_per_unit=Decimal("1")),)},
        {"materials": (Material.create(material_id="m", name="X", quantity=1, price_per_unit=Decimal("-1")),)},
    ],
)
def test_invalid_orders_are_rejected(svc, manager, changes):
    with pytest.raises(ValidationError):
        svc.create_order(current_user=manager, order=_new_order().with_changes(**changes))

    assert len(svc.list_orders()) == 3


def test_negative_service_price_rejected(svc, manager):
    order = _new_order()
    bad = order.with_changes(services=(Service(service_id="s", name="S", price=Decimal("-5")),))

    with pytest.raises(ValidationError):
        svc.create_order(current_user=manager, order=bad)


def test_unassigned_master_is_allowed(svc, manager):
    svc.create_order(current_user=manager, order=_new_order().with_changes(master_id=None))

    assert svc.get_order("100").master_id is None


def test_orders_for_applies_visibility(svc, manager, master_2):
    assert [o.order_id for o in svc.orders_for(manager)] == ["1", "2", "3"]
    assert [o.order_id for o in svc.orders_for(master_2)] == ["2"]
    assert [o.order_id for o in svc.list_orders_by_master("1")] == ["1", "3"]


def test_calculate_totals_uses_injected_calculator(repo):
    class FlatCalculator:
        def calculate(self, order):
            return OrderTotals(services_total=Decimal("1"), materials_total=Decimal("2"), total=Decimal("3"))

    svc = OrderService(repo, calculator=FlatCalculator())

    assert svc.calculate_totals(demo_orders()[0]).total == Decimal("3")


def test_status_summary_counts_each_status(svc):
    summary = svc.status_summary(svc.list_orders())

    assert (summary.total, summary.pending, summary.in_progress, summary.completed) == (3, 1, 1, 1)


def test_master_workload(svc):
    workload = {w.master.master_id: w.summary for w in svc.master_workload(DEMO_MASTERS)}

    assert workload["1"].total == 2
    assert workload["1"].in_progress == 1
    assert workload["1"].completed == 1
    assert workload["2"].pending == 1
    assert workload["4"].total == 0
