"""Unit tests for platform plumbing: settings, JSON logging, Sentry, bootstrap."""

import json
import logging
import sys
from unittest.mock import patch

import pytest

from navigator.main import bootstrap
from navigator.platform.config import Settings, settings
from navigator.platform.log_context import bound_assessment_id, get_assessment_id
from navigator.platform.logging import JsonFormatter, setup_logging
from navigator.platform.monitoring import init_sentry


@pytest.fixture(autouse=True)
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


def _record(message="hello", exc_info=None, **extra):
    record = logging.LogRecord("navigator.test", logging.INFO, __file__, 1, message, None, exc_info)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


class TestSettings:
    def test_report_url_strips_trailing_slash(self, monkeypatch):
        monkeypatch.setattr(settings, "FRONTEND_URL", "https://navigator.example.com/")
        assert settings.report_url("abc") == "https://navigator.example.com/app/results/abc"

    def test_env_overrides(self, monkeypatch):
        monkeypatch.setenv("DEPLOYMENT_ENV", "Production")
        monkeypatch.setenv("RATE_LIMIT_BACKEND", "REDIS")
        monkeypatch.setenv("REPORT_EMAIL_RATE_LIMIT", "9")
        configured = Settings()
        assert configured.is_production is True
        assert configured.uses_redis_rate_limit is True
        assert configured.REPORT_EMAIL_RATE_LIMIT == 9

    def test_defaults(self):
        configured = Settings(_env_file=None, RATE_LIMIT_BACKEND="memory")
        assert configured.ASSESSMENT_TITLE == "AI Navigator Assessment"
        assert configured.uses_redis_rate_limit is False
        assert configured.EMAIL_FROM == "AI Navigator <onboarding@resend.dev>"


class TestJsonFormatter:
    def test_basic_fields(self):
        payload = json.loads(JsonFormatter().format(_record("scored")))
        assert payload["level"] == "INFO"
        assert payload["logger"] == "navigator.test"
        assert payload["message"] == "scored"
        assert payload["timestamp"].endswith("Z")
        assert "assessment_id" not in payload

    def test_bound_assessment_id_is_included(self):
        with bound_assessment_id("a-42"):
            payload = json.loads(JsonFormatter().format(_record()))
        assert payload["assessment_id"] == "a-42"
        assert get_assessment_id() is None

    def test_explicit_extra_wins(self):
        with bound_assessment_id("a-1"):
            payload = json.loads(JsonFormatter().format(_record(assessment_id="a-2")))
        assert payload["assessment_id"] == "a-2"

    def test_exception_info(self):
        try:
            raise ValueError("boom")
        except ValueError:
            record = _record("failed", exc_info=sys.exc_info())
        payload = json.loads(JsonFormatter().format(record))
        assert "ValueError: boom" in payload["exc_info"]


class TestSetupLogging:
    def test_installs_single_json_handler(self):
        root = setup_logging("debug")
        assert root.level == logging.DEBUG
        assert len(root.handlers) == 1
        assert isinstance(root.handlers[0].formatter, JsonFormatter)

    def test_unknown_level_falls_back_to_info(self):
        assert setup_logging("chatty").level == logging.INFO


class TestMonitoring:
    def test_disabled_without_dsn(self, monkeypatch):
        monkeypatch.setattr(settings, "SENTRY_DSN", "")
        assert init_sentry() is False

    def test_ignores_non_https_dsn(self, monkeypatch):
        monkeypatch.setattr(settings, "SENTRY_DSN", "http://key@sentry.local/1")
        assert init_sentry() is False

    def test_enabled_with_dsn(self, monkeypatch):
        monkeypatch.setattr(settings, "SENTRY_DSN", "https://key@o1.ingest.sentry.io/1")
        with patch("sentry_sdk.init") as mock_init:
            assert init_sentry() is True
        kwargs = mock_init.call_args.kwargs
        assert kwargs["dsn"] == "https://key@o1.ingest.sentry.io/1"
        assert kwargs["environment"] == settings.DEPLOYMENT_ENV


class TestBootstrap:
    def test_creates_tables(self, monkeypatch):
        monkeypatch.setattr(settings, "SENTRY_DSN", "")
        with patch("navigator.main.Base.metadata.create_all") as create_all:
            logger = bootstrap(create_tables=True)
        create_all.assert_called_once()
        assert isinstance(logger, logging.Logger)

    def test_skips_tables_by_default(self, monkeypatch):
        monkeypatch.setattr(settings, "SENTRY_DSN", "")
        with patch("navigator.main.Base.metadata.create_all") as create_all:
            bootstrap()
        create_all.assert_not_called()


def test_init_db_script_creates_tables(monkeypatch):
    from navigator.scripts import init_db

    monkeypatch.setattr(settings, "SENTRY_DSN", "")
    with patch("navigator.main.Base.metadata.create_all") as create_all:
        assert init_db.main() == 0
    create_all.assert_called_once()
