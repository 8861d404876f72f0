"""Demo reference data: credential roster, technicians and sample orders."""
from __future__ import annotations

from datetime import date
from decimal import Decimal

from ..core.enums import OrderStatus, Role
from ..orders.model import Material, Order, Service
from ..users.model import Credential, Master

DEMO_CREDENTIALS: tuple[Credential, ...] = (
    Credential(user_id="1", login="мастер1", password="пасс1", role=Role.MASTER, name="Иван Петров"),
    Credential(user_id="2", login="мастер2", password="пасс2", role=Role.MASTER, name="Сергей Иванов"),
    Credential(user_id="3", login="мастер3", password="пасс3", role=Role.MASTER, name="Алексей Смирнов"),
    Credential(user_id="4", login="мастер4", password="пасс4", role=Role.MASTER, name="Дмитрий Козлов"),
    Credential(user_id="manager", login="менеджер", password="менеджер", role=Role.MANAGER, name="Менеджер"),
)

DEMO_MASTERS: tuple[Master, ...] = (
    Master(master_id="1", name="Иван Петров", login="master1"),
    Master(master_id="2", name="Сергей Иванов", login="master2"),
    Master(master_id="3", name="Алексей Смирнов", login="master3"),
    Master(master_id="4", name="Дмитрий Козлов", login="master4"),
)


def demo_orders() -> list[Order]:
    return [
        Order(
            order_id="1",
            document_number="0001",
            date=date(2024, 10, 28),
            client='ООО "Техника"',
            master_id="1",
            repair_object='Телевизор LG 55"',
            description="Не включается, подозрение на блок питания",
            image_url="https://images.unsplash.com/photo-1593784991095-a205069470b6?w=400",
            services=(
                Service(service_id="1", name="Диагностика", description="Проверка всех систем", price=Decimal("500")),
                Service(
                    service_id="2",
                    name="Замена блока питания",
                    description="Установка нового БП",
                    price=Decimal("2000"),
                ),
            ),
            materials=(
                Material.create(
                    material_id="1",
                    name="Блок питания LG EAY64511101",
                    quantity=1,
                    price_per_unit=Decimal("3500"),
                ),
            ),
            invoice_number="ПН-0001",
            invoice_date=date(2024, 10, 27),
            supplier='ООО "ЭлектроСнаб"',
            status=OrderStatus.IN_PROGRESS,
        ),
        Order(
            order_id="2",
            document_number="0002",
            date=date(2024, 10, 28),
            client="Иванова М.А.",
            master_id="2",
            repair_object="Стиральная машина Samsung WW70",
            description="Не отжимает белье",
            image_url="https://images.unsplash.com/photo-1626806787461-102c1bfaaea1?w=400",
            services=(
                Service(
                    service_id="3",
                    name="Диагностика",
                    description="Проверка системы отжима",
                    price=Decimal("400"),
                ),
                Service(
                    service_id="4",
                    name="Замена подшипников",
                    description="Замена подшипников барабана",
                    price=Decimal("3000"),
                ),
            ),
            materials=(
                Material.create(material_id="2", name="Подшипник 6305", quantity=2, price_per_unit=Decimal("800")),
                Material.create(
                    material_id="3",
                    name="Сальник 37x66x9.5/12",
                    quantity=1,
                    price_per_unit=Decimal("500"),
                ),
            ),
            invoice_number="ПН-0002",
            invoice_date=date(2024, 10, 27),
            supplier='ИП "Запчасти+"',
            status=OrderStatus.PENDING,
        ),
        Order(
            order_id="3",
            document_number="0003",
            date=date(2024, 10, 29),
            client="Петров А.С.",
            master_id="1",
            repair_object="Холодильник Indesit DF 5200",
            description="Не морозит холодильная камера",
            image_url="https://images.unsplash.com/photo-1571175443880-49e1d25b2bc5?w=400",
            services=(
                Service(
                    service_id="5",
                    name="Диагностика",
                    description="Проверка системы охлаждения",
                    price=Decimal("600"),
                ),
                Service(
                    service_id="6",
                    name="Замена термостата",
                    description="Установка нового термостата",
                    price=Decimal("1500"),
                ),
            ),
            materials=(
                Material.create(material_id="4", name="Термостат K59-L1686", quantity=1, price_per_unit=Decimal("1200")),
            ),
            invoice_number="ПН-0003",
            invoice_date=date(2024, 10, 28),
            supplier='ООО "ЭлектроСнаб"',
            status=OrderStatus.COMPLETED,
        ),
    ]
