"""Role-based view selection and order visibility.

Managers see and edit every order; masters see only the orders assigned to
them and cannot modify anything. The same predicate is applied by the web
layer for display and by the order service before each mutation.
"""
from __future__ import annotations

from typing import Iterable, Sequence

from ..core.constants import PERMISSION_DENIED_MESSAGE
from ..core.enums import Role, ViewKind
from ..core.exceptions import AuthorizationError
from ..orders.model import Order
from ..users.model import User


def select_view(user: User) -> ViewKind:
    if user.role == Role.MANAGER:
        return ViewKind.MANAGER_DASHBOARD
    return ViewKind.MASTER_DASHBOARD


def can_view_order(user: User, order: Order) -> bool:
    return user.role == Role.MANAGER or order.master_id == user.user_id


def visible_orders(user: User, orders: Iterable[Order]) -> Sequence[Order]:
    if user.role == Role.MANAGER:
        return list(orders)
    return [o for o in orders if o.master_id == user.user_id]


def can_modify_orders(user: User) -> bool:
    return user.role == Role.MANAGER


def ensure_can_modify(user: User) -> None:
    if not can_modify_orders(user):
        raise AuthorizationError(PERMISSION_DENIED_MESSAGE)
