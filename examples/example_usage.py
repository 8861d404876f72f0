"""Пример: работа с сервисным слоем без Flask.

Контроллеры лишь тонкая обёртка, вся логика находится в сервисах.
"""

from service_center.container import build_demo_container
from service_center.orders import editor


def main():
    container = build_demo_container()
    manager = container.auth_service.authenticate("менеджер", "менеджер")
    master = container.auth_service.authenticate("мастер1", "пасс1")

    order = container.order_service.get_order("1")
    order = editor.update_material(order, 0, quantity=2)
    container.order_service.update_order(current_user=manager, order=order)

    for o in container.order_service.orders_for(master):
        totals = container.order_service.calculate_totals(o)
        print(o.document_number, container.master_service.master_name(o.master_id), totals.total)


if __name__ == "__main__":
    main()
