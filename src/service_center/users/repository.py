from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Credential, Master


class CredentialRepository(Protocol):
    """Интерфейс справочника учётных данных.

    Сервис входа зависит только от этого интерфейса, сам справочник
    передаётся при сборке контейнера.
    """

    def find(self, login: str, password: str) -> Optional[Credential]:
        raise NotImplementedError


class MasterRepository(Protocol):
    def list_all(self) -> Sequence[Master]:
        raise NotImplementedError

    def get_by_id(self, master_id: str) -> Optional[Master]:
        raise NotImplementedError
