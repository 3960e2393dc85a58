"""
Tests for CLI helpers (app/cli/helpers.py).

This module tests:
- Logging setup from the 'logging' config section
- JSON log formatting
- Config loading and output writing
"""

import json
import logging
import sys
import tempfile
from logging.handlers import RotatingFileHandler

import pytest

from app.cli import helpers
from app.cli.helpers import JSONFormatter, load_config, setup_logging, write_output


@pytest.fixture(autouse=True)
def reset_logging():
    """Remove the handlers installed by each test and restore the root level."""
    root_level = logging.getLogger().level
    yield
    helpers._clear_managed_handlers()
    logging.getLogger().setLevel(root_level)


def _file_handlers():
    return [h for h in logging.getLogger().handlers if isinstance(h, logging.FileHandler)]


def _read_json_lines(path):
    for handler in logging.getLogger().handlers:
        handler.flush()
    return [json.loads(line) for line in path.read_text(encoding='utf-8').splitlines()]


@pytest.mark.unit
class TestJSONFormatter:
    """Tests for the structured log formatter."""

    def test_record_is_parseable(self):
        """Test that a formatted record is one JSON object."""
        record = logging.LogRecord(
            "formats.rdf.turtle_codec", logging.WARNING, __file__, 10,
            "Parsed %d triples", (3,), None,
        )

        payload = json.loads(JSONFormatter().format(record))

        assert payload['level'] == 'WARNING'
        assert payload['logger'] == 'formats.rdf.turtle_codec'
        assert payload['message'] == 'Parsed 3 triples'
        assert payload['timestamp'].endswith('Z')

    def test_exception_included(self):
        """Test that exception text is carried in the payload."""
        try:
            raise ValueError("bad triple")
        except ValueError:
            record = logging.LogRecord(
                "graph", logging.ERROR, __file__, 1, "failed", (), sys.exc_info(),
            )

        payload = json.loads(JSONFormatter().format(record))

        assert 'ValueError: bad triple' in payload['exception']
        assert '\n' not in JSONFormatter().format(record)


@pytest.mark.unit
class TestSetupLogging:
    """Tests for setup_logging."""

    def test_console_only_by_default(self):
        """Test that no file handler is installed without a 'file' key."""
        assert setup_logging({}) is None
        assert _file_handlers() == []
        assert logging.getLogger().level == logging.INFO

    def test_level_from_config(self):
        setup_logging({"level": "debug"})
        assert logging.getLogger().level == logging.DEBUG

    def test_json_file_output(self, tmp_path):
        """Test that the json format writes one parseable record per line."""
        log_file = tmp_path / "logs" / "mapper.log"

        used = setup_logging({"file": str(log_file), "format": "json"})
        logging.getLogger("graph").info("Mapped 2 records")

        assert used == str(log_file)
        lines = _read_json_lines(log_file)
        assert any(line['message'] == 'Mapped 2 records' for line in lines)

    def test_rotation_settings(self, tmp_path):
        """Test that rotation settings reach the rotating handler."""
        log_file = tmp_path / "mapper.log"

        setup_logging({
            "file": str(log_file),
            "rotation": {"enabled": True, "max_mb": 2, "backup_count": 4},
        })

        handler = _file_handlers()[0]
        assert isinstance(handler, RotatingFileHandler)
        assert handler.maxBytes == 2 * 1024 * 1024
        assert handler.backupCount == 4

    def test_rotation_disabled(self, tmp_path):
        setup_logging({"file": str(tmp_path / "mapper.log"), "rotation": {"enabled": False}})

        handler = _file_handlers()[0]
        assert not isinstance(handler, RotatingFileHandler)

    def test_unwritable_path_falls_back_to_temp_dir(self, tmp_path, monkeypatch, capsys):
        """Test that a log path under a regular file falls back to the temp directory."""
        blocker = tmp_path / "blocker"
        blocker.write_text("not a directory", encoding='utf-8')
        fallback_dir = tmp_path / "fallback"
        monkeypatch.setattr(tempfile, "tempdir", str(fallback_dir))

        used = setup_logging({"file": str(blocker / "mapper.log")})

        assert used == str(fallback_dir / "mapper.log")
        assert "fallback" in capsys.readouterr().err

    def test_repeated_setup_replaces_handlers(self, tmp_path):
        """Test that calling setup twice does not stack handlers."""
        setup_logging({"file": str(tmp_path / "a.log")})
        setup_logging({"file": str(tmp_path / "b.log")})

        handlers = _file_handlers()
        assert len(handlers) == 1
        assert handlers[0].baseFilename.endswith("b.log")

    @pytest.mark.parametrize("config", [
        {"level": "LOUD"},
        {"format": "xml"},
    ])
    def test_invalid_settings(self, config):
        """Test that unknown levels and formats are configuration errors."""
        with pytest.raises(ValueError):
            setup_logging(config)


@pytest.mark.unit
class TestLoadConfig:
    """Tests for load_config."""

    def test_loads_object(self, tmp_path):
        config_file = tmp_path / "config.json"
        config_file.write_text('{"mapping": {"output_indent": 4}}', encoding='utf-8')

        assert load_config(str(config_file)) == {"mapping": {"output_indent": 4}}

    def test_rejects_non_json_extension(self, tmp_path):
        with pytest.raises(ValueError, match="must be JSON"):
            load_config(str(tmp_path / "config.yaml"))

    def test_rejects_array(self, tmp_path):
        config_file = tmp_path / "config.json"
        config_file.write_text('[1, 2]', encoding='utf-8')

        with pytest.raises(ValueError, match="JSON object"):
            load_config(str(config_file))


@pytest.mark.unit
class TestWriteOutput:
    """Tests for write_output."""

    def test_stdout(self, capsys):
        write_output('{"a": 1}')
        assert capsys.readouterr().out == '{"a": 1}\n'

    def test_file(self, tmp_path):
        target = tmp_path / "nested" / "out.json"
        write_output("[]", str(target))
        assert target.read_text(encoding='utf-8') == "[]"
