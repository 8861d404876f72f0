from __future__ import annotations

import logging
from typing import Optional, Sequence

from ..core.constants import UNASSIGNED_MASTER_LABEL
from ..core.exceptions import InvalidCredentials
from .model import Master, User
from .repository import CredentialRepository, MasterRepository

logger = logging.getLogger(__name__)


class AuthService:
    """Use case: authenticate user (login)."""

    def __init__(self, credentials: CredentialRepository):
        self._credentials = credentials

    def authenticate(self, login: str, password: str) -> User:
        login = (login or "").strip()
        password = (password or "").strip()

        credential = self._credentials.find(login, password)
        if not credential:
            logger.warning("Failed login attempt for %r", login)
            raise InvalidCredentials()

        logger.info("User %s (%s) logged in", credential.login, credential.role.value)
        return credential.to_user()


class MasterService:
    """Use case: read-only access to the technicians roster."""

    def __init__(self, masters: MasterRepository):
        self._masters = masters

    def list_masters(self) -> Sequence[Master]:
        return self._masters.list_all()

    def get_master(self, master_id: Optional[str]) -> Optional[Master]:
        if not master_id:
            return None
        return self._masters.get_by_id(master_id)

    def master_name(self, master_id: Optional[str]) -> str:
        master = self.get_master(master_id)
        return master.name if master else UNASSIGNED_MASTER_LABEL
