"""Unit tests for the logging helpers."""

import pytest

from storefront.catalog_kit.common import LoggerMixin, log_exceptions, logger, redact_credentials, setup_logging


@pytest.fixture
def records():
    captured = []
    sink_id = logger.add(lambda message: captured.append(message.record), level="DEBUG")
    yield captured
    logger.remove(sink_id)


class Service(LoggerMixin):
    def run(self):
        self.logger.info("running")


class TestLogging:
    """Test suite for logging helpers."""

    def test_setup_logging_writes_file(self, tmp_path):
        log_file = tmp_path / "catalog.log"

        setup_logging("debug", str(log_file))
        logger.complete()
        logger.remove()

        assert "INFO" in log_file.read_text(encoding="utf-8")

    def test_logger_mixin_binds_class_name(self, records):
        Service().run()

        assert records[-1]["extra"]["name"].endswith(".Service")
        assert records[-1]["message"] == "running"

    async def test_log_exceptions_reraises(self, records):
        @log_exceptions
        async def explode():
            raise RuntimeError("boom")

        with pytest.raises(RuntimeError, match="boom"):
            await explode()

        assert records[-1]["level"].name == "ERROR"
        assert "RuntimeError: boom" in records[-1]["message"]

    def test_log_exceptions_sync(self, records):
        @log_exceptions
        def explode():
            raise ValueError("bad slug")

        with pytest.raises(ValueError):
            explode()

        assert "ValueError: bad slug" in records[-1]["message"]

    def test_bearer_tokens_are_redacted(self, records):
        logger.info("headers={'Authorization': 'Bearer t-123.secret'}")

        assert records[-1]["message"] == "headers={'Authorization': 'Bearer ***'}"


def test_redact_credentials():
    assert redact_credentials("Authorization: Bearer abc.def") == "Authorization: Bearer ***"
    assert redact_credentials("no token here") == "no token here"
