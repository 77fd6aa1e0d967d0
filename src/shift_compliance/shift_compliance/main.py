from __future__ import annotations

import importlib
import logging
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .container import build_container
from .compliance.controller import register as register_compliance
from .timeclock.controller import register as register_timeclock
from .timesheets.controller import register as register_timesheets

SETTING_NAMES = (
    "SECRET_KEY",
    "DEBUG",
    "TESTING",
    "LOG_LEVEL",
    "TIMEZONE",
    "STANDARD_WEEKLY_HOURS",
    "DOUBLE_PUNCH_THRESHOLD_SECONDS",
)


def load_settings(settings_module: Optional[str] = None) -> dict:
    module = importlib.import_module(settings_module or get_settings_module())
    return {name: getattr(module, name) for name in SETTING_NAMES if hasattr(module, name)}


def create_app(settings_module: Optional[str] = None) -> Flask:
    load_dotenv(override=False)
    settings = load_settings(settings_module)

    logging.basicConfig(
        level=getattr(logging, str(settings.get("LOG_LEVEL", "INFO")).upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    app = Flask(__name__)
    app.secret_key = settings.get("SECRET_KEY")
    app.config["DEBUG"] = bool(settings.get("DEBUG", False))
    app.config["TESTING"] = bool(settings.get("TESTING", False))

    container = build_container(settings=settings)
    app.extensions["shift_compliance"] = container

    app.logger.info(
        "shift-compliance ready tz=%s weekly_hours=%s",
        container.tz.key,
        settings.get("STANDARD_WEEKLY_HOURS"),
    )

    register_timesheets(app, container)
    register_compliance(app, container)
    register_timeclock(app, container)

    return app
