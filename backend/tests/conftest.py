import os
# Override DATABASE_URL before any package imports to avoid PostgreSQL driver requirement
os.environ["DATABASE_URL"] = "sqlite:///./test.db"
# Keep external integrations disabled by default for unit tests. Individual
# tests can opt-in by monkeypatching settings.
os.environ["RESEND_API_KEY"] = ""
os.environ["RATE_LIMIT_BACKEND"] = "memory"
os.environ["SENTRY_DSN"] = ""

import uuid
import pytest
from sqlalchemy import event
from navigator.platform.database import Base, SessionLocal, engine
from navigator.platform.rate_limit import reset_rate_limits
from navigator.components.scoring.catalog import ASSESSMENT_QUESTIONS, GROUP_DIMENSIONS, WeightGroup
from navigator.models import Assessment, AssessmentAnswer  # noqa: F401  (register tables)


# Enable foreign key support for SQLite
@event.listens_for(engine, "connect")
def set_sqlite_pragma(dbapi_connection, connection_record):
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


@pytest.fixture(scope="function")
def db():
    Base.metadata.create_all(bind=engine)
    db = SessionLocal()
    yield db
    db.close()
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def clean_rate_limits():
    # Clear in-memory rate limit state between tests to prevent bleed-through
    reset_rate_limits()
    yield
    reset_rate_limits()


# ---------------------------------------------------------------------------
# Factory helpers: build response sets quickly and consistently
# ---------------------------------------------------------------------------

def unique_user_id() -> str:
    return f"user-{uuid.uuid4().hex[:8]}"


def uniform_responses(value=4):
    """Every catalog question answered with ``value``."""
    return {q.key: value for q in ASSESSMENT_QUESTIONS}


def group_responses(aaimm_value, navigator_value):
    """AAIMM questions answered with one value, Navigator questions with another."""
    responses = {}
    for q in ASSESSMENT_QUESTIONS:
        if q.dimension in GROUP_DIMENSIONS[WeightGroup.AAIMM]:
            responses[q.key] = aaimm_value
        else:
            responses[q.key] = navigator_value
    return responses


def dimension_responses(dimension, values):
    """Answer the three questions of one dimension with ``values`` in catalog order."""
    keys = [q.key for q in ASSESSMENT_QUESTIONS if q.dimension.value == str(getattr(dimension, "value", dimension))]
    return dict(zip(keys, values))
