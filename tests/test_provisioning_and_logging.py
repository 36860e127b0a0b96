"""
Tests for the API key provisioning script and logging setup.
"""

import json
import logging

import create_api_key
from shortlink_app.common.logging_config import JsonFormatter, setup_logging
from shortlink_app.config import settings
from shortlink_app.models import APIKey


class TestCreateAPIKey:
    """Test the provisioning CLI against the test database"""

    def test_creates_given_key(self, db_session, capsys):
        assert create_api_key.main(["cli@example.com", "--key", "cli-key"]) == 0

        assert capsys.readouterr().out.strip() == "cli-key"
        records = db_session.query(APIKey).filter(APIKey.api_key == "cli-key").all()
        assert len(records) == 1
        assert records[0].owner_email == "cli@example.com"

    def test_generates_random_key(self, db_session, capsys):
        assert create_api_key.main(["cli@example.com"]) == 0

        key = capsys.readouterr().out.strip()
        assert len(key) >= 24
        assert db_session.query(APIKey).filter(APIKey.api_key == key).count() == 1

    def test_memory_backend_refused(self, db_session, monkeypatch):
        monkeypatch.setattr(settings, "storage_backend", "memory")

        assert create_api_key.main(["cli@example.com", "--key", "cli-key"]) == 1
        assert db_session.query(APIKey).count() == 0


class TestJsonFormatter:
    """Test JSON log output"""

    def test_quotes_in_message_stay_valid_json(self):
        record = logging.LogRecord(
            name="shortlink_app.test",
            level=logging.ERROR,
            pathname=__file__,
            lineno=1,
            msg='error recorded: %s; message: %s',
            args=('bad "quoted" input', "Error validating API key"),
            exc_info=None,
        )

        entry = json.loads(JsonFormatter().format(record))

        assert entry["level"] == "ERROR"
        assert entry["logger"] == "shortlink_app.test"
        assert entry["message"] == (
            'error recorded: bad "quoted" input; message: Error validating API key'
        )

    def test_setup_logging_uses_json_formatter(self):
        logger = setup_logging(level="INFO", json_format=True)
        try:
            assert isinstance(logger.handlers[0].formatter, JsonFormatter)
        finally:
            setup_logging(level=settings.log_level)
