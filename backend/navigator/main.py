"""Process bootstrap shared by workers and scripts: logging, error monitoring, schema."""

from __future__ import annotations

import logging

from .platform.brand import BRAND_NAME
from .platform.config import settings
from .platform.database import Base, engine
from .platform.logging import setup_logging
from .platform.monitoring import init_sentry


def bootstrap(create_tables: bool = False) -> logging.Logger:
    """Configure logging and Sentry; optionally create missing tables."""
    logger = setup_logging()
    sentry_enabled = init_sentry()
    if create_tables:
        from . import models  # noqa: F401  (register tables on Base.metadata)

        Base.metadata.create_all(bind=engine)
    logger.info(
        "%s backend started | env=%s sentry=%s",
        BRAND_NAME,
        settings.DEPLOYMENT_ENV,
        sentry_enabled,
    )
    return logger
