from __future__ import annotations

import importlib
import logging
from datetime import timedelta
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from flask import Flask, render_template

from config import get_settings_module

from .common.datetime_utils import parse_iso_date
from .common.method_override import MethodOverrideMiddleware
from .container import Container, build_container
from .core.constants import DEFAULT_SESSION_MINUTES, DEFAULT_TGL_MASUK_CUTOFF
from .core.exceptions import StoreError
from .database.bootstrap import apply_schema, ensure_admin_user, list_tables
from .sessions.interface import ServerSessionInterface
from .students.controller import register as register_students
from .users.controller import SERVER_ERROR
from .users.controller import register as register_users

logger = logging.getLogger(__name__)

REPO_ROOT = Path(__file__).resolve().parents[2]


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, str(level).upper(), logging.INFO),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


def create_app(container: Optional[Container] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(
        __name__,
        template_folder=str(REPO_ROOT / "templates"),
        static_folder=str(REPO_ROOT / "static"),
    )

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    _configure_logging(getattr(settings, "LOG_LEVEL", "INFO"))

    app.secret_key = getattr(settings, "SECRET_KEY")
    db_config = getattr(settings, "DB_CONFIG")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.config["PORT"] = int(getattr(settings, "PORT", 3000))
    app.config["PERMANENT_SESSION_LIFETIME"] = timedelta(
        minutes=int(getattr(settings, "SESSION_LIFETIME_MINUTES", DEFAULT_SESSION_MINUTES))
    )
    app.config["SESSION_COOKIE_HTTPONLY"] = True
    app.config["SESSION_COOKIE_SAMESITE"] = "Lax"
    app.config["SESSION_COOKIE_SECURE"] = bool(getattr(settings, "SESSION_COOKIE_SECURE", False))

    cutoff_s = getattr(settings, "TGL_MASUK_CUTOFF", None)
    cutoff = parse_iso_date(cutoff_s) if cutoff_s else DEFAULT_TGL_MASUK_CUTOFF

    logger.debug(
        "settings=%s db=%s@%s:%s/%s cutoff=%s",
        settings_module,
        db_config.get("user"),
        db_config.get("host"),
        db_config.get("port", 3306),
        db_config.get("database"),
        cutoff,
    )

    if container is None:
        if bool(getattr(settings, "AUTO_INIT_DB", False)):
            apply_schema(db_config, schema_path=REPO_ROOT / "database" / "schema.sql")
            logger.info("Schema ready (tables=%d)", len(list_tables(db_config)))
        if bool(getattr(settings, "AUTO_SEED_DB", False)):
            admin_password = getattr(settings, "ADMIN_PASSWORD", None)
            if admin_password:
                ensure_admin_user(
                    db_config,
                    username=getattr(settings, "ADMIN_USERNAME", "admin"),
                    password=admin_password,
                )
            else:
                logger.warning("AUTO_SEED_DB is set but ADMIN_PASSWORD is empty, admin not seeded")
        container = build_container(db_config=db_config, cutoff=cutoff)

    app.session_interface = ServerSessionInterface(container.session_store)
    app.wsgi_app = MethodOverrideMiddleware(app.wsgi_app)

    register_users(app, container)
    register_students(app, container)

    @app.errorhandler(StoreError)
    def handle_store_error(e: StoreError):
        logger.error("Request aborted: store error", exc_info=e)
        return render_template("error.html", title="Error", message=SERVER_ERROR), 500

    @app.errorhandler(404)
    def handle_not_found(e):
        return render_template("not_found.html", title="Tidak Ditemukan", message="Halaman tidak ditemukan!"), 404

    return app
