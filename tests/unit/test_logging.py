"""Unit tests for logging_audit module."""

import logging
from logging.handlers import RotatingFileHandler

import pytest

from anet_gateway.logging_audit import (
    PAYLOAD_FLAG,
    CardDataRedactingFormatter,
    ConsolePayloadFilter,
    configure_logging,
    get_logger,
    log_audit_event,
)


def _format(formatter: logging.Formatter, message: str) -> str:
    record = logging.LogRecord(
        name="test", level=logging.INFO, pathname=__file__, lineno=1,
        msg=message, args=(), exc_info=None,
    )
    return formatter.format(record)


class TestConfigureLogging:
    """Test logging configuration."""

    @pytest.fixture(autouse=True)
    def restore_root_handlers(self):
        """Remove handlers installed by configure_logging after each test."""
        yield
        root_logger = logging.getLogger()
        for handler in list(root_logger.handlers):
            installed = isinstance(handler, RotatingFileHandler) or any(
                isinstance(f, ConsolePayloadFilter) for f in handler.filters
            )
            if installed:
                root_logger.removeHandler(handler)
                handler.close()

    def test_configure_logging_creates_file(self, tmp_path):
        # Arrange
        log_file = tmp_path / "logs" / "test.log"

        # Act
        configure_logging(level="INFO", log_file=log_file)
        get_logger(__name__).info("Test message")

        # Assert
        assert log_file.exists()
        assert "Test message" in log_file.read_text()

    def test_console_level_and_file_level(self, tmp_path):
        # Act
        configure_logging(level="WARNING", log_file=tmp_path / "test.log")

        # Assert
        root_logger = logging.getLogger()
        console_handlers = [h for h in root_logger.handlers if type(h) is logging.StreamHandler]
        file_handlers = [h for h in root_logger.handlers if isinstance(h, RotatingFileHandler)]
        assert console_handlers[0].level == logging.WARNING
        assert file_handlers[0].level == logging.DEBUG

    def test_idempotent(self, tmp_path):
        configure_logging(level="INFO", log_file=tmp_path / "a.log")
        configure_logging(level="INFO", log_file=tmp_path / "b.log")

        file_handlers = [
            h for h in logging.getLogger().handlers if isinstance(h, RotatingFileHandler)
        ]
        assert len(file_handlers) == 1
        assert file_handlers[0].baseFilename == str(tmp_path / "b.log")

    def test_reconfigure_keeps_foreign_handlers(self, tmp_path):
        # Arrange
        root_logger = logging.getLogger()
        foreign = logging.NullHandler()
        root_logger.addHandler(foreign)

        try:
            # Act
            configure_logging(level="INFO", log_file=tmp_path / "a.log")
            configure_logging(level="INFO", log_file=tmp_path / "b.log")

            # Assert
            assert foreign in root_logger.handlers
        finally:
            root_logger.removeHandler(foreign)

    def test_payload_records_only_in_file(self, tmp_path, capsys):
        # Arrange
        log_file = tmp_path / "test.log"
        configure_logging(level="DEBUG", log_file=log_file)
        logger = get_logger(__name__)

        # Act
        logger.debug('{"transactionResponse": {"transId": "2149394533"}}', extra={PAYLOAD_FLAG: True})
        logger.debug("Parsed response")

        # Assert
        console = capsys.readouterr().err
        assert "2149394533" not in console
        assert "DEBUG: Parsed response" in console
        assert "2149394533" in log_file.read_text()

    def test_console_payload_filter(self):
        record = logging.LogRecord(
            name="test", level=logging.DEBUG, pathname=__file__, lineno=1,
            msg="payload", args=(), exc_info=None,
        )
        payload_filter = ConsolePayloadFilter()

        assert payload_filter.filter(record) is True
        setattr(record, PAYLOAD_FLAG, True)
        assert payload_filter.filter(record) is False

    def test_invalid_level(self, tmp_path):
        with pytest.raises(ValueError) as exc_info:
            configure_logging(level="LOUD", log_file=tmp_path / "test.log")

        assert "Invalid log level" in str(exc_info.value)

    def test_env_log_file(self, tmp_path, monkeypatch):
        log_file = tmp_path / "env.log"
        monkeypatch.setenv("ANET_LOG_FILE", str(log_file))

        configure_logging(level="INFO")
        get_logger(__name__).info("From env")

        assert "From env" in log_file.read_text()

    def test_file_content_redacted(self, tmp_path):
        log_file = tmp_path / "test.log"

        configure_logging(level="INFO", log_file=log_file, redact_card_data=True)
        get_logger(__name__).info("cardNumber 4111111111111111")

        content = log_file.read_text()
        assert "4111111111111111" not in content
        assert "XXXXXXXXXXXX1111" in content


class TestCardDataRedactingFormatter:
    """Test card data redaction."""

    @pytest.fixture
    def formatter(self):
        return CardDataRedactingFormatter(fmt="%(message)s", redact_card_data=True)

    def test_masks_card_number(self, formatter):
        assert _format(formatter, "card=5424000000000015 ok") == "card=XXXXXXXXXXXX0015 ok"

    def test_keeps_short_numbers(self, formatter):
        assert _format(formatter, "transId=2149394533") == "transId=2149394533"

    def test_masks_card_code(self, formatter):
        assert _format(formatter, "<cardCode>999</cardCode>") == "<cardCode>[REDACTED]</cardCode>"
        assert _format(formatter, '{"cardCode": "999"}') == '{"cardCode": "[REDACTED]"}'

    def test_masks_trans_hash(self, formatter):
        xml = "<transHash>B1B6E27AA5E08A9BEDC9E3E5C3EF1A6B</transHash>"
        json_text = '"transHash": "B1B6E27AA5E08A9BEDC9E3E5C3EF1A6B"'

        assert _format(formatter, xml) == "<transHash>[HASH-REDACTED]</transHash>"
        assert _format(formatter, json_text) == '"transHash": "[HASH-REDACTED]"'
        assert _format(formatter, "trans_hash=ABC123") == "trans_hash=[HASH-REDACTED]"

    def test_disabled(self):
        formatter = CardDataRedactingFormatter(fmt="%(message)s", redact_card_data=False)

        assert _format(formatter, "card=4111111111111111") == "card=4111111111111111"


class TestAuditEvents:
    """Test structured audit events."""

    def test_success_event(self, caplog):
        # Act
        with caplog.at_level(logging.INFO, logger="anet_gateway.logging_audit.audit"):
            log_audit_event("RESPONSE_INSPECTED", {
                "input_file": "response.json",
                "status": "success",
                "response_code": 1,
                "correlation_id": "abc",
                "extra": "value",
            })

        # Assert
        record = caplog.records[-1]
        assert record.levelno == logging.INFO
        assert record.getMessage() == (
            "AUDIT [RESPONSE_INSPECTED] | status=success | input_file=response.json"
            " | response_code=1 | correlation_id=abc | extra=value"
        )

    def test_failure_event_logged_as_error(self, caplog):
        with caplog.at_level(logging.INFO, logger="anet_gateway.logging_audit.audit"):
            log_audit_event("RESPONSE_PARSE_FAILED", {"status": "failure", "duration": 0.5})

        record = caplog.records[-1]
        assert record.levelno == logging.ERROR
        assert "duration=0.50s" in record.getMessage()
        assert "correlation_id=" in record.getMessage()

    def test_details_not_mutated(self, caplog):
        details = {"status": "success"}

        with caplog.at_level(logging.INFO):
            log_audit_event("RESPONSE_INSPECTED", details)

        assert details == {"status": "success"}
