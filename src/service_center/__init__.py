"""Service Center package.

Feature modules (users, orders, access) with a thin Flask controller layer
over service/repository layers.
"""
from __future__ import annotations

import importlib
import logging
from datetime import timedelta
from typing import Any, Optional

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .common.datetime_utils import format_ru_date
from .common.money import format_money
from .container import build_container, build_demo_container
from .core.constants import DEFAULT_SESSION_DAYS, STATUS_LABELS
from .orders.controller import register as register_orders
from .users.controller import register as register_users


def create_app(settings_overrides: Optional[dict[str, Any]] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    options = {
        "SECRET_KEY": getattr(settings, "SECRET_KEY"),
        "DEBUG": bool(getattr(settings, "DEBUG", False)),
        "TESTING": bool(getattr(settings, "TESTING", False)),
        "ROSTER_FILE": getattr(settings, "ROSTER_FILE", None),
        "AUTO_SEED_DB": bool(getattr(settings, "AUTO_SEED_DB", True)),
        "SESSION_DAYS": int(getattr(settings, "SESSION_DAYS", DEFAULT_SESSION_DAYS)),
    }
    options.update(settings_overrides or {})

    app.secret_key = options["SECRET_KEY"]
    app.config.update(
        DEBUG=options["DEBUG"],
        TESTING=options["TESTING"],
        PERMANENT_SESSION_LIFETIME=timedelta(days=options["SESSION_DAYS"]),
    )
    app.logger.setLevel(logging.DEBUG if options["DEBUG"] else logging.INFO)

    if options["AUTO_SEED_DB"]:
        container = build_demo_container(roster_file=options["ROSTER_FILE"])
    else:
        container = build_container(roster_file=options["ROSTER_FILE"])
    app.extensions["service_center"] = container

    app.logger.info(
        "settings=%s roster=%s orders=%d",
        settings_module,
        options["ROSTER_FILE"] or "demo",
        len(container.orders_repo.list_all()),
    )

    app.jinja_env.filters["money"] = format_money
    app.jinja_env.filters["ru_date"] = format_ru_date
    app.jinja_env.globals["status_labels"] = STATUS_LABELS

    register_users(app, container)
    register_orders(app, container)

    return app


__all__ = ["create_app", "build_container", "build_demo_container"]
