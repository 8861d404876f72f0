from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional

from .orders.memory_repository import InMemoryOrderRepository
from .orders.model import Order
from .orders.service import OrderService
from .seed.demo import demo_orders
from .seed.roster import load_roster
from .users.memory_repository import InMemoryCredentialRepository, InMemoryMasterRepository
from .users.model import Credential, Master
from .users.service import AuthService, MasterService


@dataclass(frozen=True)
class Container:
    credentials_repo: InMemoryCredentialRepository
    masters_repo: InMemoryMasterRepository
    orders_repo: InMemoryOrderRepository

    auth_service: AuthService
    master_service: MasterService
    order_service: OrderService


def build_container(
    *,
    credentials: Optional[Iterable[Credential]] = None,
    masters: Optional[Iterable[Master]] = None,
    orders: Iterable[Order] = (),
    roster_file: Optional[str] = None,
) -> Container:
    """Wire repositories and services.

    Explicit `credentials`/`masters` win over `roster_file`; with neither the
    demo roster is used.
    """
    file_credentials, file_masters = load_roster(roster_file)

    credentials_repo = InMemoryCredentialRepository(credentials if credentials is not None else file_credentials)
    masters_repo = InMemoryMasterRepository(masters if masters is not None else file_masters)
    orders_repo = InMemoryOrderRepository(orders)

    return Container(
        credentials_repo=credentials_repo,
        masters_repo=masters_repo,
        orders_repo=orders_repo,
        auth_service=AuthService(credentials_repo),
        master_service=MasterService(masters_repo),
        order_service=OrderService(orders_repo),
    )


def build_demo_container(*, roster_file: Optional[str] = None) -> Container:
    return build_container(orders=demo_orders(), roster_file=roster_file)
