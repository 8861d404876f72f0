from __future__ import annotations

from flask import Flask, current_app, flash, g, redirect, render_template, request, session, url_for

from ..container import Container
from ..core.exceptions import AuthenticationError
from .session import load_user, manager_required, store_user


def register(app: Flask, container: Container) -> None:
    @app.route("/", methods=["GET", "POST"], endpoint="login")
    def login():
        if load_user() is not None:
            return redirect(url_for("dashboard"))

        if request.method == "POST":
            login_s = request.form.get("login", "")
            password = request.form.get("password", "")
            remember = bool(request.form.get("remember_me"))

            try:
                user = container.auth_service.authenticate(login_s, password)
                store_user(user, remember=remember)
                return redirect(url_for("dashboard"))
            except AuthenticationError as e:
                flash(str(e), "danger")
            except Exception:
                current_app.logger.exception("Login failed with an unexpected error")
                flash("Ошибка системы при входе", "danger")

        return render_template("login.html")

    @app.route("/logout", endpoint="logout")
    def logout():
        session.clear()
        flash("Вы вышли из системы", "info")
        return redirect(url_for("login"))

    @app.route("/masters", endpoint="masters")
    @manager_required
    def masters():
        workload = container.order_service.master_workload(container.master_service.list_masters())
        return render_template(
            "manager/masters.html",
            user=g.user,
            workload=workload,
            active_page="masters",
        )
