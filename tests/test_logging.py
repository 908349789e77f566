"""
Tests for the logging module.

Tests verify:
- configure_logging renders JSON lines and filters by level
- The configurator keeps working once logging is configured
- Events never carry passwords
"""

import json
from unittest.mock import patch

import structlog
from sqlalchemy.engine import make_url

from dbproviders.config.components import ConnectionConfig, DatabaseKind
from dbproviders.configurator import configure_builder
from dbproviders.logging import configure_logging, get_logger
from dbproviders.orm.options import DatabaseOptionsBuilder
from dbproviders.orm.session import create_provider_engine

PG_URL = "postgresql://app:secret@db/app"


def _last_json_line(out: str) -> dict:
    return json.loads(out.strip().splitlines()[-1])


class TestConfigureLogging:
    def test_json_output(self, capsys):
        configure_logging(level="INFO", json_format=True)
        get_logger("test").info("provider.configured", kind="postgres")

        payload = _last_json_line(capsys.readouterr().out)
        assert payload["event"] == "provider.configured"
        assert payload["kind"] == "postgres"
        assert payload["level"] == "info"
        assert "timestamp" in payload

    def test_debug_suppressed_at_info(self, capsys):
        configure_logging(level="INFO", json_format=True)
        get_logger("test").debug("generator.replaced")
        assert "generator.replaced" not in capsys.readouterr().out

    def test_console_output(self, capsys):
        configure_logging(level="DEBUG", json_format=False)
        get_logger("test").debug("engine.created", kind="sqlite")
        out = capsys.readouterr().out
        assert "engine.created" in out
        assert "sqlite" in out


class TestConfiguratorLogging:
    def test_configure_after_configure_logging(self, capsys):
        configure_logging(level="INFO", json_format=True)
        builder = configure_builder(
            DatabaseOptionsBuilder(),
            DatabaseKind.POSTGRES,
            ConnectionConfig(PG_URL, "app:migrations", "app"),
        )

        assert builder.provider is DatabaseKind.POSTGRES
        assert builder.retry_attempts == 10
        out = capsys.readouterr().out
        payload = _last_json_line(out)
        assert payload["event"] == "provider.configured"
        assert payload["migrations_history_table"] == "app"
        assert "secret" not in out

    def test_provider_configured_event(self):
        with structlog.testing.capture_logs() as logs:
            configure_builder(
                DatabaseOptionsBuilder(),
                DatabaseKind.POSTGRES,
                ConnectionConfig(PG_URL, "app:migrations", "app"),
            )
        events = {entry["event"]: entry for entry in logs}
        assert events["provider.configured"]["retry_attempts"] == 10
        assert events["provider.configured"]["migrations_history_table"] == "app"
        assert "generator.replaced" in events
        assert all("secret" not in str(entry) for entry in logs)


class TestEngineLogging:
    def test_engine_url_password_hidden(self):
        with patch("sqlalchemy.create_engine") as mock_create:
            mock_create.return_value.url = make_url(PG_URL)
            with structlog.testing.capture_logs() as logs:
                create_provider_engine(DatabaseKind.POSTGRES, PG_URL)

        (event,) = [entry for entry in logs if entry["event"] == "engine.created"]
        assert event["url"] == "postgresql://app:***@db/app"
        assert event["pool_pre_ping"] is True
