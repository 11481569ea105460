from __future__ import annotations

import importlib
import logging

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .container import build_container
from .timesheet.controller import register as register_timesheet


def create_app() -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.config["MAX_CONTENT_LENGTH"] = int(getattr(settings, "MAX_CONTENT_LENGTH", 16 * 1024 * 1024))
    app.json.ensure_ascii = False

    logging.basicConfig(
        level=getattr(settings, "LOG_LEVEL", "INFO"),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    container = build_container(
        default_start=getattr(settings, "DEFAULT_START"),
        shift_starts=getattr(settings, "SHIFT_STARTS", {}),
        employee_starts=getattr(settings, "EMPLOYEE_STARTS", {}),
    )
    app.logger.info(
        "[timekeeper] settings=%s default_start=%s shifts=%s",
        settings_module,
        container.default_config.default_start,
        dict(container.default_config.shifts),
    )

    register_timesheet(app, container)

    return app
