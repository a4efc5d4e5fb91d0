from __future__ import annotations

import importlib
import logging
from datetime import timedelta
from typing import Optional

from dotenv import load_dotenv
from flask import Flask, jsonify
from werkzeug.exceptions import HTTPException

from .advances.controller import register as register_advances
from .attendance.controller import register as register_attendance
from .auth.controller import register as register_auth
from .auth.service import AuthService
from .config import get_settings_module
from .container import Container, build_container
from .core.exceptions import AuthenticationError, ValidationError
from .customers.controller import register as register_customers
from .dashboard.controller import register as register_dashboard
from .database.bootstrap import apply_schema, list_tables
from .employees.controller import register as register_employees

logger = logging.getLogger(__name__)


def _build_auth_service(settings) -> AuthService:
    pin_hash = getattr(settings, "APP_PIN_HASH", None)
    if pin_hash:
        return AuthService(pin_hash)
    pin = getattr(settings, "APP_PIN", None)
    if not pin:
        raise RuntimeError("Set APP_PIN or APP_PIN_HASH to enable login")
    return AuthService.from_pin(pin)


def _register_error_handlers(app: Flask) -> None:
    @app.errorhandler(ValidationError)
    def handle_validation(e: ValidationError):
        return jsonify({"success": False, "message": str(e)}), 400

    @app.errorhandler(AuthenticationError)
    def handle_authentication(e: AuthenticationError):
        return jsonify({"success": False, "message": str(e)}), 401

    @app.errorhandler(Exception)
    def handle_unexpected(e: Exception):
        if isinstance(e, HTTPException):
            return jsonify({"success": False, "message": e.description}), e.code

        logger.exception("Unhandled error")
        if app.config.get("DEBUG"):
            return jsonify({"success": False, "message": f"Internal error: {e}"}), 500
        return jsonify({"success": False, "message": "Internal error"}), 500


def create_app(container: Optional[Container] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.permanent_session_lifetime = timedelta(days=30)

    logging.basicConfig(
        level=getattr(settings, "LOG_LEVEL", "INFO"),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )

    if container is None:
        db_config = getattr(settings, "DB_CONFIG")
        logger.info(
            "settings=%s db=%s@%s:%s/%s",
            settings_module,
            db_config.get("user"),
            db_config.get("host"),
            db_config.get("port", 3306),
            db_config.get("database"),
        )
        if bool(getattr(settings, "AUTO_INIT_DB", False)):
            apply_schema(db_config)
            logger.info("schema ready (tables=%s)", len(list_tables(db_config)))
        container = build_container(db_config=db_config, auth_service=_build_auth_service(settings))

    _register_error_handlers(app)
    register_auth(app, container)
    register_dashboard(app, container)
    register_customers(app, container)
    register_employees(app, container)
    register_attendance(app, container)
    register_advances(app, container)

    return app
