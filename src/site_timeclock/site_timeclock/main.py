from __future__ import annotations

import atexit
import importlib
import logging

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .assistant.controller import register as register_assistant
from .common.http import register_error_handlers
from .container import Container, build_container
from .employees.controller import register as register_employees
from .punches.controller import register as register_kiosk
from .reports.controller import register as register_reports
from .settings.controller import register as register_settings
from .sites.controller import register as register_sites

logger = logging.getLogger(__name__)


def setup_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=getattr(logging, str(level).upper(), logging.INFO),
        format="%(asctime)s [%(levelname)s] %(message)s",
    )


def load_settings():
    return importlib.import_module(get_settings_module())


def create_app(settings=None, *, container: Container | None = None) -> Flask:
    load_dotenv(override=False)
    settings = settings or load_settings()
    setup_logging(getattr(settings, "LOG_LEVEL", "INFO"))

    app = Flask(__name__)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.json.ensure_ascii = False

    container = container or build_container(settings)
    app.extensions["site_timeclock"] = container
    atexit.register(container.punch_session.close)

    logger.info(
        "[site-timeclock] storage=%s tz=%s camera=%s",
        getattr(settings, "STORAGE_BACKEND", "file"),
        container.tz,
        getattr(settings, "CAMERA_SOURCE", "none"),
    )

    register_error_handlers(app)
    register_kiosk(app, container)
    register_employees(app, container)
    register_sites(app, container)
    register_settings(app, container)
    register_reports(app, container)
    register_assistant(app, container)

    return app
