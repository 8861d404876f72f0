from __future__ import annotations

from flask import Flask, abort, current_app, flash, g, redirect, render_template, request, url_for

from ..access.policy import can_view_order, select_view
from ..common.datetime_utils import today_local
from ..container import Container
from ..core.enums import OrderStatus, ViewKind
from ..core.exceptions import AuthorizationError, ValidationError
from ..users.session import login_required, manager_required
from . import editor
from .forms import order_from_form
from .model import Order


def register(app: Flask, container: Container) -> None:
    orders = container.order_service
    masters = container.master_service

    def _rows(items):
        return [
            {
                "order": o,
                "totals": orders.calculate_totals(o),
                "master_name": masters.master_name(o.master_id),
            }
            for o in items
        ]

    def _render_form(order: Order, *, is_creating: bool, status_code: int = 200):
        return (
            render_template(
                "manager/order_form.html",
                user=g.user,
                order=order,
                totals=orders.calculate_totals(order),
                masters=masters.list_masters(),
                statuses=list(OrderStatus),
                is_creating=is_creating,
                active_page="orders",
            ),
            status_code,
        )

    def _apply_line_action(order: Order, action: str) -> Order:
        if action == "add_service":
            return editor.add_service(order)
        if action == "add_material":
            return editor.add_material(order)
        kind, _, index_s = action.partition(":")
        if kind == "remove_service" and index_s.isdigit():
            return editor.remove_service(order, int(index_s))
        if kind == "remove_material" and index_s.isdigit():
            return editor.remove_material(order, int(index_s))
        raise ValidationError("Неизвестное действие")

    @app.route("/dashboard", endpoint="dashboard")
    @login_required
    def dashboard():
        user = g.user
        visible = orders.orders_for(user)

        if select_view(user) == ViewKind.MANAGER_DASHBOARD:
            return render_template(
                "manager/dashboard.html",
                user=user,
                rows=_rows(visible),
                total_count=len(visible),
                active_page="orders",
            )

        return render_template(
            "master/dashboard.html",
            user=user,
            rows=_rows(visible),
            summary=orders.status_summary(visible),
        )

    @app.route("/orders/new", methods=["GET", "POST"], endpoint="order_create")
    @manager_required
    def order_create():
        if request.method == "GET":
            return _render_form(editor.new_order_draft(today_local()), is_creating=True)

        action = request.form.get("action", "save")
        try:
            order = order_from_form(request.form, order_id=editor.new_id(), keep_blank_rows=action != "save")
            if action != "save":
                return _render_form(_apply_line_action(order, action), is_creating=True)

            orders.create_order(current_user=g.user, order=order)
            flash(f"Заказ № {order.document_number} создан", "success")
            return redirect(url_for("dashboard"))
        except (ValidationError, AuthorizationError) as e:
            flash(str(e), "danger")
        except Exception:
            current_app.logger.exception("Order create failed")
            flash("Ошибка системы при создании заказа", "danger")

        try:
            draft = order_from_form(request.form, order_id=editor.new_id())
        except ValidationError:
            draft = editor.new_order_draft(today_local())
        return _render_form(draft, is_creating=True, status_code=400)

    @app.route("/orders/<order_id>/edit", methods=["GET", "POST"], endpoint="order_edit")
    @manager_required
    def order_edit(order_id: str):
        existing = orders.get_order(order_id)

        if request.method == "GET":
            if existing is None:
                flash("Заказ не найден", "warning")
                return redirect(url_for("dashboard"))
            return _render_form(existing, is_creating=False)

        action = request.form.get("action", "save")
        try:
            order = order_from_form(request.form, order_id=order_id, keep_blank_rows=action != "save")
            if action != "save":
                return _render_form(_apply_line_action(order, action), is_creating=False)

            if orders.update_order(current_user=g.user, order=order):
                flash(f"Заказ № {order.document_number} сохранён", "success")
            return redirect(url_for("dashboard"))
        except (ValidationError, AuthorizationError) as e:
            flash(str(e), "danger")
        except Exception:
            current_app.logger.exception("Order update failed")
            flash("Ошибка системы при сохранении заказа", "danger")

        try:
            submitted = order_from_form(request.form, order_id=order_id)
        except ValidationError:
            if existing is None:
                return redirect(url_for("dashboard"))
            submitted = existing
        return _render_form(submitted, is_creating=False, status_code=400)

    @app.route("/orders/<order_id>/delete", methods=["POST"], endpoint="order_delete")
    @manager_required
    def order_delete(order_id: str):
        try:
            if orders.delete_order(current_user=g.user, order_id=order_id):
                flash("Заказ удалён", "success")
        except AuthorizationError as e:
            flash(str(e), "danger")
        except Exception:
            current_app.logger.exception("Order delete failed")
            flash("Ошибка системы при удалении заказа", "danger")

        return redirect(url_for("dashboard"))

    @app.route("/orders/<order_id>", endpoint="order_detail")
    @login_required
    def order_detail(order_id: str):
        order = orders.get_order(order_id)
        if order is None:
            abort(404)
        if not can_view_order(g.user, order):
            return render_template("403.html", current_user=g.user), 403

        return render_template(
            "master/order_detail.html",
            user=g.user,
            order=order,
            totals=orders.calculate_totals(order),
            master_name=masters.master_name(order.master_id),
        )

    @app.route("/reports", endpoint="reports")
    @manager_required
    def reports():
        return render_template("manager/reports.html", user=g.user, active_page="reports")
