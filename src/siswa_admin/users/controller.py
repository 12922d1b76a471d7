from __future__ import annotations

import logging

from flask import Flask, flash, redirect, render_template, request, session, url_for

from ..container import Container
from ..core.exceptions import AuthenticationError, FieldError, FormValidationError, StoreError
from ..sessions.interface import rotate_session

logger = logging.getLogger(__name__)

SERVER_ERROR = "Kesalahan server!"


def register(app: Flask, container: Container) -> None:
    @app.route("/login", methods=["GET"], endpoint="login")
    def login():
        if "user_id" in session:
            return redirect(url_for("home"))
        return render_template("login.html", title="Login")

    @app.route("/login", methods=["POST"], endpoint="login_submit")
    def login_submit():
        try:
            s_user = container.auth_service.login(request.form)
        except FormValidationError as e:
            return render_template("login.html", title="Login", errors=e.errors, form=request.form)
        except AuthenticationError as e:
            errors = [FieldError(field="", message=str(e))]
            return render_template("login.html", title="Login", errors=errors, form=request.form)
        except StoreError:
            logger.exception("Login failed: store error")
            errors = [FieldError(field="", message=SERVER_ERROR)]
            return render_template("login.html", title="Login", errors=errors, form=request.form)

        rotate_session(session, container.session_store)
        session.permanent = True
        session["user_id"] = s_user.user_id
        session["username"] = s_user.username

        flash("Login berhasil!", "success")
        return redirect(url_for("home"))

    @app.route("/logout", endpoint="logout")
    def logout():
        session.clear()
        return redirect(url_for("login"))
