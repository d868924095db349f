from __future__ import annotations

import importlib
import logging

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .common.logging_setup import configure_logging
from .container import build_container
from .absence.controller import register as register_absence
from .clock.controller import register as register_clock
from .progress.controller import register as register_progress
from .ranges.controller import register as register_ranges
from .status.controller import register as register_status
from .timelogs.controller import register as register_timelogs

logger = logging.getLogger(__name__)


def create_app(settings_module: str | None = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = settings_module or get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    engine_config = getattr(settings, "ENGINE_CONFIG", {})

    configure_logging(getattr(settings, "LOG_LEVEL", "INFO"))
    logger.info("timesheet-tracker settings=%s engine=%s", settings_module, engine_config)

    container = build_container(engine_config=engine_config)
    app.extensions["timesheet_container"] = container

    register_clock(app, container)
    register_ranges(app, container)
    register_timelogs(app, container)
    register_progress(app, container)
    register_status(app, container)
    register_absence(app, container)

    return app
