"""Tests for shared/logging_config.py."""

import logging
from unittest.mock import patch

from shared.logging_config import LOG_FORMAT, configure_logging


class TestConfigureLogging:
    @patch("shared.logging_config.logging.basicConfig")
    def test_uses_configured_level(self, mock_basic):
        configure_logging("warning")
        mock_basic.assert_called_once_with(level=logging.WARNING, format=LOG_FORMAT)

    @patch("shared.logging_config.logging.basicConfig")
    def test_debug_forces_debug_level(self, mock_basic):
        configure_logging("ERROR", debug=True)
        mock_basic.assert_called_once_with(level=logging.DEBUG, format=LOG_FORMAT)

    @patch("shared.logging_config.logging.basicConfig")
    def test_unknown_level_falls_back_to_info(self, mock_basic):
        configure_logging("chatty")
        mock_basic.assert_called_once_with(level=logging.INFO, format=LOG_FORMAT)

    @patch("shared.logging_config.logging.basicConfig")
    def test_quiets_httpx(self, mock_basic):
        configure_logging()
        assert logging.getLogger("httpx").level == logging.WARNING
