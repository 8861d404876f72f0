from __future__ import annotations

import pytest

from service_center.access.policy import (
    can_modify_orders,
    can_view_order,
    ensure_can_modify,
    select_view,
    visible_orders,
)
from service_center.core.enums import Role, ViewKind
from service_center.core.exceptions import AuthorizationError
from service_center.seed.demo import demo_orders
from service_center.users.model import User


def test_select_view(manager, master_1):
    assert select_view(manager) == ViewKind.MANAGER_DASHBOARD
    assert select_view(master_1) == ViewKind.MASTER_DASHBOARD


def test_manager_sees_everything_unchanged(manager):
    orders = demo_orders()

    assert visible_orders(manager, orders) == orders


def test_master_2_sees_exactly_one_seed_order(master_2):
    visible = visible_orders(master_2, demo_orders())

    assert [o.order_id for o in visible] == ["2"]


@pytest.mark.parametrize("master_id", ["1", "2", "3", "4", "manager", ""])
def test_master_view_is_subset_of_own_orders(master_id):
    user = User(user_id=master_id, login="x", role=Role.MASTER, name="X")
    orders = demo_orders()

    visible = visible_orders(user, orders)

    assert all(o in orders for o in visible)
    assert all(o.master_id == master_id for o in visible)
    assert len(visible) == sum(1 for o in orders if o.master_id == master_id)


def test_unassigned_order_is_hidden_from_masters(master_1):
    orphan = demo_orders()[0].with_changes(order_id="9", master_id=None)

    assert visible_orders(master_1, [orphan]) == []
    assert not can_view_order(master_1, orphan)


def test_only_manager_can_modify(manager, master_1):
    assert can_modify_orders(manager)
    assert not can_modify_orders(master_1)

    ensure_can_modify(manager)
    with pytest.raises(AuthorizationError):
        ensure_can_modify(master_1)


def test_can_view_order(manager, master_1, master_2):
    order_1 = demo_orders()[0]

    assert can_view_order(manager, order_1)
    assert can_view_order(master_1, order_1)
    assert not can_view_order(master_2, order_1)
