from __future__ import annotations

import importlib
import logging

from dotenv import load_dotenv

from .config import get_settings_module
from .container import Container, build_container
from .database.bootstrap import apply_schema

logger = logging.getLogger(__name__)


def bootstrap() -> Container:
    """Load settings, configure logging and wire the services.

    The web/CLI layer calls this once at startup and keeps the container.
    """

    load_dotenv(override=False)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)

    logging.basicConfig(
        level=getattr(settings, "LOG_LEVEL", "INFO"),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    container = build_container(settings=settings)

    logger.debug("settings=%s db=%s", settings_module, container.conn.config.describe())

    if bool(getattr(settings, "AUTO_INIT_DB", False)):
        apply_schema(container.conn)

    return container
