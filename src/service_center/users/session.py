from __future__ import annotations

from functools import wraps
from typing import Optional

from flask import flash, g, redirect, render_template, session, url_for

from ..access.policy import can_modify_orders
from ..core.enums import Role
from .model import User

_SESSION_KEYS = ("user_id", "login", "role", "name")


def store_user(user: User, *, remember: bool = False) -> None:
    session.clear()
    session.permanent = remember
    session["user_id"] = user.user_id
    session["login"] = user.login
    session["role"] = user.role.value
    session["name"] = user.name


def load_user() -> Optional[User]:
    if any(k not in session for k in _SESSION_KEYS):
        return None
    try:
        role = Role(session["role"])
    except ValueError:
        session.clear()
        return None
    return User(user_id=session["user_id"], login=session["login"], role=role, name=session["name"])


def login_required(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        user = load_user()
        if user is None:
            flash("Войдите в систему для продолжения работы", "warning")
            return redirect(url_for("login"))
        g.user = user
        return view(*args, **kwargs)

    return wrapper


def manager_required(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        user = load_user()
        if user is None:
            return redirect(url_for("login"))
        if not can_modify_orders(user):
            return render_template("403.html", current_user=user), 403
        g.user = user
        return view(*args, **kwargs)

    return wrapper
