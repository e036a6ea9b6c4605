from __future__ import annotations

import importlib
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .attendance.controller import register as register_attendance
from .common.logging import configure_logging, get_logger
from .container import Container, build_container
from .exams.controller import register as register_exams
from .instructors.controller import register as register_instructors
from .navigation.controller import register as register_navigation
from .recitation.controller import register as register_recitation

logger = get_logger(__name__)


def create_app(container: Optional[Container] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__, template_folder="../../../templates", static_folder="../../../static")

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    configure_logging(getattr(settings, "LOG_LEVEL", None))

    if container is None:
        container = build_container(
            api_base_url=getattr(settings, "API_BASE_URL"),
            api_token=getattr(settings, "API_TOKEN", None),
            api_timeout=float(getattr(settings, "API_TIMEOUT", 10)),
            locale=getattr(settings, "DEFAULT_LOCALE", "en"),
            reference_workers=int(getattr(settings, "REFERENCE_FETCH_WORKERS", 4)),
            qr_scan_delay_ms=int(getattr(settings, "QR_SCAN_DELAY_MS", 300)),
        )

    logger.info("Application configured", extra={"settings": settings_module, "locale": container.translator.locale})

    register_navigation(app, container)
    register_attendance(app, container)
    register_exams(app, container)
    register_instructors(app, container)
    register_recitation(app, container)

    return app
