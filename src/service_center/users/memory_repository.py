from __future__ import annotations

from typing import Iterable, Optional, Sequence

from .model import Credential, Master


class InMemoryCredentialRepository:
    """Fixed roster; lookups are exact string matches."""

    def __init__(self, credentials: Iterable[Credential]):
        self._credentials = tuple(credentials)

    def find(self, login: str, password: str) -> Optional[Credential]:
        for c in self._credentials:
            if c.login == login and c.password == password:
                return c
        return None


class InMemoryMasterRepository:
    def __init__(self, masters: Iterable[Master]):
        self._masters = tuple(masters)

    def list_all(self) -> Sequence[Master]:
        return self._masters

    def get_by_id(self, master_id: str) -> Optional[Master]:
        for m in self._masters:
            if m.master_id == master_id:
                return m
        return None
