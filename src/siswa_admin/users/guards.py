from __future__ import annotations

from functools import wraps

from flask import flash, redirect, session, url_for

LOGIN_REQUIRED = "Anda harus login terlebih dahulu!"


def login_required(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        if "user_id" not in session:
            flash(LOGIN_REQUIRED, "warning")
            return redirect(url_for("login"))
        return view(*args, **kwargs)

    return wrapper
