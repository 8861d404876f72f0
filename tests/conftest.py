from __future__ import annotations

import pytest

from service_center import create_app
from service_center.core.enums import Role
from service_center.users.model import User


@pytest.fixture
def manager() -> User:
    return User(user_id="manager", login="менеджер", role=Role.MANAGER, name="Менеджер")


@pytest.fixture
def master_1() -> User:
    return User(user_id="1", login="мастер1", role=Role.MASTER, name="Иван Петров")


@pytest.fixture
def master_2() -> User:
    return User(user_id="2", login="мастер2", role=Role.MASTER, name="Сергей Иванов")


@pytest.fixture
def app(monkeypatch):
    monkeypatch.setenv("APP_ENV", "testing")
    return create_app()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def container(app):
    return app.extensions["service_center"]
