"""
Simple Notes Backend: Configuration & Logging Tests
=====================================================
"""

import logging

import pytest
from pydantic import ValidationError as PydanticValidationError

from notes_backend.config import Settings
from notes_backend.middleware.logging import level_for_status
from notes_backend.main import setup_logging


class TestSettings:

    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("CORS_ORIGINS", raising=False)
        monkeypatch.delenv("LOG_LEVEL", raising=False)
        s = Settings(_env_file=None)
        assert s.app_name == "Simple Notes API"
        assert s.backend_port == 8000
        assert s.cors_allow_any_origin

    def test_log_level_normalized(self):
        assert Settings(_env_file=None, log_level="debug").log_level == "DEBUG"

    def test_invalid_log_level_rejected(self):
        with pytest.raises(PydanticValidationError):
            Settings(_env_file=None, log_level="chatty")

    def test_cors_origins_split(self):
        s = Settings(_env_file=None, cors_origins="http://a.test, http://b.test,")
        assert s.cors_origins_list == ["http://a.test", "http://b.test"]
        assert not s.cors_allow_any_origin

    def test_port_range_enforced(self):
        with pytest.raises(PydanticValidationError):
            Settings(_env_file=None, backend_port=80)


class TestLogging:

    @pytest.mark.parametrize(
        "status, level",
        [(200, logging.INFO), (204, logging.INFO), (400, logging.WARNING),
         (404, logging.WARNING), (500, logging.ERROR)],
    )
    def test_level_for_status(self, status, level):
        assert level_for_status(status) == level

    def test_setup_logging_sets_root_level(self):
        setup_logging("DEBUG")
        try:
            assert logging.getLogger().level == logging.DEBUG
        finally:
            setup_logging("WARNING")
