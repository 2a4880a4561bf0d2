from __future__ import annotations

import logging
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from .config import get_settings_module
from .container import build_container, load_settings
from .common.responses import register_error_handlers
from .employees.controller import register as register_employees
from .leaves.controller import register as register_leaves
from .logging_config import setup_logging

logger = logging.getLogger(__name__)


def create_app(settings_module: Optional[str] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = settings_module or get_settings_module()
    settings = load_settings(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    setup_logging(getattr(settings, "LOG_LEVEL", "INFO"))

    approvers = getattr(settings, "APPROVERS", ("manager",))
    container = build_container(approver_names=approvers)
    app.extensions["leave_tracker"] = container

    logger.info("leave-tracker started (settings=%s, approvers=%s)", settings_module, ",".join(approvers))

    register_error_handlers(app)
    register_employees(app, container)
    register_leaves(app, container)

    return app
