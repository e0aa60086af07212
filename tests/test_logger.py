"""Tests for envgg.logger module."""

import io
import json
import logging

import pytest

from envgg.logger import (
    JsonFormatter,
    Logger,
    StructuredLogger,
    TextFormatter,
    create_logger,
    get_logger,
    parse_level,
)


class TestLoggerInterface:
    """Tests for the Logger abstract interface."""

    def test_logger_is_abstract(self):
        with pytest.raises(TypeError):
            Logger()  # type: ignore

    def test_logger_has_required_methods(self):
        for method in ("debug", "info", "warning", "error", "critical", "get_session_id"):
            assert hasattr(Logger, method)


class TestStructuredLogger:
    """Tests for StructuredLogger."""

    def test_writes_text_to_given_stream(self):
        stream = io.StringIO()
        logger = StructuredLogger(name="envgg-text", level=logging.INFO, stream=stream)

        logger.info("Resolved environment", variables=3)

        output = stream.getvalue()
        assert "[INFO]" in output
        assert "[envgg-text]" in output
        assert f"[session:{logger.get_session_id()}]" in output
        assert "Resolved environment variables=3" in output

    def test_default_stream_is_stderr(self, capsys):
        logger = StructuredLogger(name="envgg-stderr", level=logging.WARNING)
        logger.warning("careful")

        captured = capsys.readouterr()
        assert "careful" in captured.err
        assert captured.out == ""

    def test_level_filters(self):
        stream = io.StringIO()
        logger = StructuredLogger(name="envgg-level", level=logging.WARNING, stream=stream)

        logger.debug("hidden")
        logger.info("hidden too")
        logger.error("shown")

        assert "hidden" not in stream.getvalue()
        assert "shown" in stream.getvalue()

    def test_json_format(self):
        stream = io.StringIO()
        logger = StructuredLogger(name="envgg-json", level=logging.DEBUG, json_format=True, stream=stream)

        logger.debug("Keyring lookup", key="API_KEY")

        record = json.loads(stream.getvalue().strip())
        assert record["level"] == "DEBUG"
        assert record["message"] == "Keyring lookup"
        assert record["logger"] == "envgg-json"
        assert record["key"] == "API_KEY"
        assert record["session_id"] == logger.get_session_id()

    def test_reserved_keys_are_prefixed(self):
        stream = io.StringIO()
        logger = StructuredLogger(name="envgg-reserved", level=logging.INFO, json_format=True, stream=stream)

        logger.info("Parsed", filename=".env")

        assert json.loads(stream.getvalue())["_filename"] == ".env"

    def test_reinitialising_does_not_duplicate_handlers(self):
        stream = io.StringIO()
        StructuredLogger(name="envgg-dup", stream=stream)
        logger = StructuredLogger(name="envgg-dup", stream=stream)

        logger.warning("once")

        assert stream.getvalue().count("once") == 1

    def test_log_file(self, tmp_path):
        log_file = tmp_path / "envgg.log"
        logger = StructuredLogger(name="envgg-file", log_file=str(log_file), stream=io.StringIO())

        logger.error("to file")
        for handler in logging.getLogger("envgg-file").handlers:
            handler.flush()

        assert "to file" in log_file.read_text()

    def test_unopenable_log_file_falls_back_to_stream(self, tmp_path):
        stream = io.StringIO()
        logger = StructuredLogger(
            name="envgg-badfile",
            log_file=str(tmp_path / "missing-dir" / "envgg.log"),
            stream=stream,
        )
        logger.error("still logged")

        assert "Failed to open log file" in stream.getvalue()
        assert "still logged" in stream.getvalue()


class TestFactories:
    """Tests for create_logger/get_logger."""

    def test_create_logger_reads_env(self, monkeypatch: pytest.MonkeyPatch, capsys):
        monkeypatch.setenv("ENVGG_LOG_LEVEL", "DEBUG")
        monkeypatch.setenv("ENVGG_LOG_JSON", "true")

        logger = create_logger()
        logger.debug("hello")

        record = json.loads(capsys.readouterr().err.strip())
        assert record["message"] == "hello"

    def test_default_level_is_warning(self, capsys):
        logger = get_logger()
        logger.info("quiet")
        logger.warning("loud")

        err = capsys.readouterr().err
        assert "quiet" not in err
        assert "loud" in err

    def test_explicit_arguments_win(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("ENVGG_LOG_LEVEL", "CRITICAL")
        stream = io.StringIO()

        logger = create_logger(level=logging.INFO, json_format=False, stream=stream)
        logger.info("visible")

        assert "visible" in stream.getvalue()

    @pytest.mark.parametrize(
        "name,expected",
        [("debug", logging.DEBUG), ("INFO", logging.INFO), (" warning ", logging.WARNING), ("bogus", logging.WARNING)],
    )
    def test_parse_level(self, name, expected):
        assert parse_level(name) == expected


class TestFormatters:
    """Formatters work on plain records."""

    def test_text_formatter_appends_extras(self):
        record = logging.LogRecord("n", logging.INFO, __file__, 1, "msg", None, None)
        record.key = "API_KEY"
        assert TextFormatter("%(message)s").format(record) == "msg key=API_KEY"

    def test_json_formatter_without_session(self):
        record = logging.LogRecord("n", logging.INFO, __file__, 1, "msg", None, None)
        data = json.loads(JsonFormatter().format(record))
        assert "session_id" not in data
        assert data["message"] == "msg"
