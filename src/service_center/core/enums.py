from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """Роль пользователя, определяет доступный интерфейс."""

    MANAGER = "manager"
    MASTER = "master"


class OrderStatus(str, Enum):
    """Статус заказа. Переходы между значениями не ограничены."""

    PENDING = "pending"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"


class ViewKind(str, Enum):
    MANAGER_DASHBOARD = "manager_dashboard"
    MASTER_DASHBOARD = "master_dashboard"
