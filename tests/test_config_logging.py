"""Tests for config and logging."""

import json
import logging
import os
from datetime import date
from decimal import Decimal
from pathlib import Path
from unittest.mock import patch

import pytest

from backoffice.config import BackofficeConfig, OutputConfig, ProjectionConfig
from backoffice.exceptions import ConfigurationError
from backoffice.logging import JsonFormatter, build_formatter, setup_logging
from backoffice.models import AccountKind, BaseAccount
from backoffice.recurrence import expand


class TestProjectionConfig:
    """Tests for ProjectionConfig."""

    def test_default_values(self) -> None:
        config = ProjectionConfig()

        assert config.horizon_months == 12
        assert config.max_occurrences == 24

    def test_validate_ok(self) -> None:
        ProjectionConfig(horizon_months=0, max_occurrences=0).validate()

    def test_validate_negative_horizon(self) -> None:
        with pytest.raises(ConfigurationError, match="horizon_months"):
            ProjectionConfig(horizon_months=-1).validate()

    def test_validate_negative_cap(self) -> None:
        with pytest.raises(ConfigurationError, match="max_occurrences"):
            ProjectionConfig(max_occurrences=-1).validate()


class TestOutputConfig:
    """Tests for OutputConfig."""

    def test_default_values(self) -> None:
        config = OutputConfig()

        assert config.json_output_dir == Path("output")
        assert config.pretty_json is False


class TestBackofficeConfig:
    """Tests for BackofficeConfig."""

    def test_default_values(self) -> None:
        config = BackofficeConfig()

        assert config.projection == ProjectionConfig()
        assert config.output == OutputConfig()
        assert config.seed is None
        assert config.log_level == "INFO"
        assert config.log_format == "standard"
        assert config.locale == "pt_BR"

    def test_from_env_default(self) -> None:
        with patch.dict(os.environ, {}, clear=True):
            config = BackofficeConfig.from_env()

        assert config.projection.horizon_months == 12
        assert config.projection.max_occurrences == 24
        assert config.output.json_output_dir == Path("output")
        assert config.seed is None

    def test_from_env_custom(self) -> None:
        env = {
            "PROJECTION_HORIZON_MONTHS": "6",
            "PROJECTION_MAX_OCCURRENCES": "10",
            "OUTPUT_DIR": "/tmp/projections",
            "PRETTY_JSON": "true",
            "SEED": "7",
            "LOG_LEVEL": "DEBUG",
            "LOG_FORMAT": "JSON",
            "FAKER_LOCALE": "en_US",
        }
        with patch.dict(os.environ, env, clear=True):
            config = BackofficeConfig.from_env()

        assert config.projection.horizon_months == 6
        assert config.projection.max_occurrences == 10
        assert config.output.json_output_dir == Path("/tmp/projections")
        assert config.output.pretty_json is True
        assert config.seed == 7
        assert config.log_level == "DEBUG"
        assert config.log_format == "json"
        assert config.locale == "en_US"

    def test_from_env_not_a_number(self) -> None:
        with patch.dict(os.environ, {"PROJECTION_HORIZON_MONTHS": "twelve"}, clear=True):
            with pytest.raises(ConfigurationError):
                BackofficeConfig.from_env()

    def test_from_env_unknown_log_format(self) -> None:
        with patch.dict(os.environ, {"LOG_FORMAT": "xml"}, clear=True):
            with pytest.raises(ConfigurationError, match="LOG_FORMAT"):
                BackofficeConfig.from_env()

    def test_from_env_negative(self) -> None:
        with patch.dict(os.environ, {"PROJECTION_MAX_OCCURRENCES": "-5"}, clear=True):
            with pytest.raises(ConfigurationError, match="max_occurrences"):
                BackofficeConfig.from_env()


class TestSetupLogging:
    """Tests for setup_logging."""

    def test_setup_logging_default(self) -> None:
        setup_logging()

        assert logging.getLogger().level == logging.INFO

    def test_setup_logging_debug(self) -> None:
        setup_logging(level="DEBUG")

        assert logging.getLogger().level == logging.DEBUG
        assert logging.getLogger("backoffice").level == logging.DEBUG

    def test_setup_logging_invalid_level(self) -> None:
        """Invalid level falls back to INFO."""
        setup_logging(level="INVALID")

        assert logging.getLogger().level == logging.INFO

    def test_setup_logging_json_format(self) -> None:
        setup_logging(format_type="json")

        assert any(isinstance(h.formatter, JsonFormatter) for h in logging.getLogger().handlers)

    def test_setup_logging_unknown_format(self) -> None:
        with pytest.raises(ConfigurationError, match="xml"):
            setup_logging(format_type="xml")

    def test_build_formatter_standard(self) -> None:
        formatter = build_formatter("standard")

        assert not isinstance(formatter, JsonFormatter)
        assert "%(levelname)" in formatter._fmt

    def test_setup_logging_replaces_handlers(self) -> None:
        logger = logging.getLogger()
        logger.addHandler(logging.StreamHandler())
        logger.addHandler(logging.StreamHandler())

        setup_logging()

        assert len(logger.handlers) == 1

    def test_faker_logger_quieted(self) -> None:
        setup_logging(level="DEBUG")

        assert logging.getLogger("faker").level == logging.WARNING


class TestJsonFormatter:
    """Tests for JsonFormatter."""

    def _record(self, **kwargs: object) -> logging.LogRecord:
        return logging.LogRecord(
            name="backoffice.recurrence.expander",
            level=logging.WARNING,
            pathname=__file__,
            lineno=1,
            msg="Account %s has unrecognised period",
            args=("acc-001",),
            exc_info=kwargs.get("exc_info"),  # type: ignore[arg-type]
        )

    def test_format_basic(self) -> None:
        data = json.loads(JsonFormatter().format(self._record()))

        assert data["level"] == "WARNING"
        assert data["logger"] == "backoffice.recurrence.expander"
        assert data["message"] == "Account acc-001 has unrecognised period"
        assert "timestamp" in data

    def test_format_with_exception(self) -> None:
        try:
            raise ValueError("bad period")
        except ValueError:
            import sys

            record = self._record(exc_info=sys.exc_info())

        data = json.loads(JsonFormatter().format(record))

        assert "ValueError: bad period" in data["exception"]

    def test_format_with_account_context(self) -> None:
        record = self._record()
        record.account_id = "acc-001"
        record.company_id = None

        data = json.loads(JsonFormatter().format(record))

        assert data["account_id"] == "acc-001"
        assert "company_id" not in data

    def test_expander_warning_as_json(self, caplog: pytest.LogCaptureFixture) -> None:
        account = BaseAccount(
            account_id="acc-009",
            kind=AccountKind.PAYABLE,
            description="Seguro",
            amount=Decimal("80.00"),
            due_date=date(2024, 1, 10),
            is_recurring=True,
            recurring_period="fortnightly",
            company_id="company-001",
        )

        with caplog.at_level(logging.WARNING, logger="backoffice.recurrence.expander"):
            expand(account, today=date(2024, 1, 1))

        data = json.loads(JsonFormatter().format(caplog.records[-1]))

        assert data["level"] == "WARNING"
        assert data["account_id"] == "acc-009"
        assert data["company_id"] == "company-001"

