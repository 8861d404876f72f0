from __future__ import annotations

from dataclasses import dataclass

from ..core.enums import Role


@dataclass(frozen=True)
class User:
    """Пользователь текущей сессии.

    Создаётся при успешном входе и не меняется до выхода из системы.
    """

    user_id: str
    login: str
    role: Role
    name: str

    @property
    def is_manager(self) -> bool:
        return self.role == Role.MANAGER


@dataclass(frozen=True)
class Credential:
    """Запись справочника учётных данных (пароль хранится открытым текстом)."""

    user_id: str
    login: str
    password: str
    role: Role
    name: str

    def to_user(self) -> User:
        return User(user_id=self.user_id, login=self.login, role=self.role, name=self.name)


@dataclass(frozen=True)
class Master:
    """Мастер (выездной техник), справочные данные."""

    master_id: str
    name: str
    login: str
