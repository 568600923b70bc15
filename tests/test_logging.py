import logging
import os

from shrinkgen.logging import LOG_LEVEL_ENV, get_logger

# Captured at collection, before any fixture has run
LEVEL_BEFORE_TESTS = os.environ.get(LOG_LEVEL_ENV)


class TestGetLogger:
    def test_library_module_defaults_to_warning(self, monkeypatch):
        monkeypatch.delenv(LOG_LEVEL_ENV, raising=False)
        assert get_logger("shrinkgen.tests.library_default").level == logging.WARNING

    def test_cli_module_defaults_to_info(self, monkeypatch):
        monkeypatch.delenv(LOG_LEVEL_ENV, raising=False)
        assert get_logger("shrinkgen.tests.cli").level == logging.INFO

    def test_environment_overrides_default(self, monkeypatch):
        monkeypatch.setenv(LOG_LEVEL_ENV, "debug")
        assert get_logger("shrinkgen.tests.overridden").level == logging.DEBUG

    def test_unknown_level_keeps_default(self, monkeypatch):
        monkeypatch.setenv(LOG_LEVEL_ENV, "chatty")
        assert get_logger("shrinkgen.tests.unknown_level").level == logging.WARNING

    def test_handler_attached_once(self):
        first = get_logger("shrinkgen.tests.single_handler")
        second = get_logger("shrinkgen.tests.single_handler")

        assert first is second
        assert len(second.handlers) == 1


class TestQuietLogsFixture:
    def test_level_is_restored_after_each_test(self, monkeypatch):
        assert os.environ[LOG_LEVEL_ENV] == "WARNING"

        monkeypatch.undo()

        assert os.environ.get(LOG_LEVEL_ENV) == LEVEL_BEFORE_TESTS
