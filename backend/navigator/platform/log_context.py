from contextlib import contextmanager
from contextvars import ContextVar
from typing import Iterator, Optional

_assessment_id_ctx: ContextVar[Optional[str]] = ContextVar("assessment_id", default=None)


def set_assessment_id(assessment_id: Optional[str]):
    return _assessment_id_ctx.set(assessment_id)


def get_assessment_id() -> Optional[str]:
    return _assessment_id_ctx.get()


@contextmanager
def bound_assessment_id(assessment_id: Optional[str]) -> Iterator[None]:
    """Tag every log line emitted inside the block with ``assessment_id``."""
    token = set_assessment_id(assessment_id)
    try:
        yield
    finally:
        _assessment_id_ctx.reset(token)
