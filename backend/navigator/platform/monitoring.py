import logging

from .config import settings

logger = logging.getLogger(__name__)


def init_sentry() -> bool:
    """Initialise Sentry when a DSN is configured. Returns True when enabled."""
    dsn = (settings.SENTRY_DSN or "").strip()
    if not dsn.startswith("https://"):
        return False

    import sentry_sdk
    from sentry_sdk.integrations.sqlalchemy import SqlalchemyIntegration

    sentry_sdk.init(
        dsn=dsn,
        environment=settings.DEPLOYMENT_ENV,
        traces_sample_rate=settings.SENTRY_TRACES_SAMPLE_RATE if settings.is_production else 1.0,
        integrations=[SqlalchemyIntegration()],
    )
    logger.info("Sentry enabled | env=%s", settings.DEPLOYMENT_ENV)
    return True
