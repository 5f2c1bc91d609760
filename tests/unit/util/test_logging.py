"""Unit tests for logging setup."""

import logging

from blog.config import Settings
from blog.util.logging import setup_logging


class TestSetupLogging:
    def test_debug_settings_enable_debug_level(self):
        setup_logging(Settings(debug=True, git_sha="test"))

        assert logging.getLogger("blog").level == logging.DEBUG
        assert logging.getLogger("sqlalchemy.engine").level == logging.WARNING

    def test_default_level_is_info(self):
        setup_logging(Settings(debug=False, git_sha="test"))

        assert logging.getLogger("blog").level == logging.INFO
