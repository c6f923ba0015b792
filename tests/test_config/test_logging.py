"""Testes para config.logging.

Cobre: configure_logging, log_fallback, RequestContextFilter,
CredentialMaskingFilter, mask_secret e o formatter JSON.
"""

from __future__ import annotations

import json
import logging
from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from config.logging import (
    FIELD_RENAME_MAP,
    REQUIRED_LOG_FIELDS,
    RequestContextFilter,
    CredentialMaskingFilter,
    configure_logging,
    create_json_formatter,
    get_logger,
    log_fallback,
    mask_secret,
)
from config.logging.config import DEFAULT_SERVICE_NAME, NOISY_LOGGERS


def _record(msg: str = "event", **extra: object) -> logging.LogRecord:
    record = logging.LogRecord(
        name="tests.logging",
        level=logging.INFO,
        pathname="",
        lineno=0,
        msg=msg,
        args=(),
        exc_info=None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


class TestConfigureLogging:
    """Testes para configure_logging."""

    @pytest.mark.parametrize(
        ("level", "expected"),
        [("INFO", logging.INFO), ("debug", logging.DEBUG), ("Warning", logging.WARNING)],
    )
    def test_sets_root_level(self, level: str, expected: int) -> None:
        configure_logging(level=level)
        assert logging.getLogger().level == expected

    def test_invalid_level_raises(self) -> None:
        with pytest.raises(ValueError, match="Nível de log inválido"):
            configure_logging(level="VERBOSE")

    def test_single_handler_with_both_filters(self) -> None:
        root = logging.getLogger()
        root.handlers = [logging.NullHandler(), logging.NullHandler()]

        configure_logging(service_name="fax_gateway_test")

        assert len(root.handlers) == 1
        filters = root.handlers[0].filters
        assert any(isinstance(f, RequestContextFilter) for f in filters)
        assert any(isinstance(f, CredentialMaskingFilter) for f in filters)

    def test_default_service_name(self) -> None:
        assert DEFAULT_SERVICE_NAME == "fax_gateway"

    def test_quiets_http_client_loggers(self) -> None:
        logging.getLogger("httpx").setLevel(logging.DEBUG)

        configure_logging(level="DEBUG")

        for name in NOISY_LOGGERS:
            assert logging.getLogger(name).level == logging.WARNING


class TestMasking:
    """Credenciais nunca aparecem completas nos logs."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [("acme-user", "ac****er"), ("abcd", "****"), ("", "****"), (None, None)],
    )
    def test_mask_secret(self, value: str | None, expected: str | None) -> None:
        assert mask_secret(value) == expected

    def test_filter_masks_sensitive_extras(self) -> None:
        record = _record(username="acme-user", password="s3cret-pass", fax_id="42")

        assert CredentialMaskingFilter().filter(record) is True

        assert record.username == "ac****er"
        assert record.password == "s3****ss"
        assert record.fax_id == "42"

    def test_filter_masks_nested_headers(self) -> None:
        record = _record(headers={"Authorization": "Basic YWNtZTpzM2NyZXQ=", "Accept": "*/*"})

        CredentialMaskingFilter().filter(record)

        assert record.headers["Authorization"] == "Ba****Q="
        assert record.headers["Accept"] == "*/*"

    def test_json_output_never_contains_password(self) -> None:
        handler_filter = CredentialMaskingFilter()
        record = _record("interfax_client_created", password="s3cret-pass")
        record.correlation_id = "req-1"
        record.service = "fax_gateway"

        handler_filter.filter(record)
        output = create_json_formatter().format(record)

        assert "s3cret-pass" not in output


class TestLogFallback:
    """Degradações observáveis (ex: conversão TIFF → PDF)."""

    def test_fallback_with_fax_context(self) -> None:
        logger = MagicMock(spec=logging.Logger)

        log_fallback(logger, "tiff_conversion", reason="binary_missing", fax_id="11", direction="inbound")

        args, kwargs = logger.info.call_args
        assert args == ("Fallback applied for %s", "tiff_conversion")
        extra = kwargs["extra"]
        assert extra["fallback_used"] is True
        assert extra["reason"] == "binary_missing"
        assert extra["fax_id"] == "11"
        assert extra["direction"] == "inbound"

    def test_fallback_without_reason(self) -> None:
        logger = MagicMock(spec=logging.Logger)

        log_fallback(logger, "tiff_conversion")

        assert "reason" not in logger.info.call_args[1]["extra"]


class TestRequestContextFilter:
    def test_injects_from_getter(self) -> None:
        record = _record()

        RequestContextFilter("fax_gateway", lambda: "corr-123").filter(record)

        assert record.correlation_id == "corr-123"
        assert record.service == "fax_gateway"

    def test_preserves_explicit_value(self) -> None:
        record = _record(correlation_id="explicit-id")

        RequestContextFilter("svc", lambda: "from-getter").filter(record)

        assert record.correlation_id == "explicit-id"

    def test_empty_without_getter(self) -> None:
        record = _record()

        RequestContextFilter("svc").filter(record)

        assert record.correlation_id == ""


class TestJsonFormatter:
    def test_field_order_and_renames(self) -> None:
        assert REQUIRED_LOG_FIELDS[:4] == ("asctime", "levelname", "name", "message")
        assert set(REQUIRED_LOG_FIELDS[4:]) == {"correlation_id", "service"}
        assert FIELD_RENAME_MAP == {"asctime": "timestamp", "levelname": "level", "name": "logger"}

    def test_formats_event_with_extras(self) -> None:
        record = _record("fax_list_fetched", correlation_id="abc", service="fax_gateway", direction="inbound")

        payload = json.loads(create_json_formatter().format(record))

        assert payload["message"] == "fax_list_fetched"
        assert payload["level"] == "INFO"
        assert payload["logger"] == "tests.logging"
        assert payload["correlation_id"] == "abc"
        assert payload["direction"] == "inbound"
        assert "timestamp" in payload

    def test_decimal_and_bytes_extras_are_serializable(self) -> None:
        record = _record("account_balance_fetched", balance=Decimal("12.50"), content=b"%PDF")

        payload = json.loads(create_json_formatter().format(record))

        assert payload["balance"] == "12.50"
        assert payload["content"] == "<4 bytes>"


def test_get_logger_returns_named_logger() -> None:
    assert get_logger("app.services.fax_gateway").name == "app.services.fax_gateway"
