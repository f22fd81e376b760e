"""
Unit Tests for configuration and logging set-up
"""
import logging

import pytest

from achievify_doodle.config import Config
from achievify_doodle.utils.logging_config import LoggingConfig


class TestConfig:
    """Test configuration constants and paths"""

    def test_tool_widths(self):
        assert Config.PEN_WIDTH == 3
        assert Config.ERASER_WIDTH == 20

    def test_palette_lookup_case_insensitive(self):
        assert Config.is_palette_color('#88CCFF')
        assert not Config.is_palette_color('#0a1628')

    def test_palette_entries_unique(self):
        assert len(set(Config.PALETTE)) == len(Config.PALETTE)

    def test_log_dir_under_user_data(self, monkeypatch, tmp_path):
        monkeypatch.setattr(Config, 'get_user_data_dir', classmethod(lambda cls: tmp_path))
        assert Config.get_log_dir() == tmp_path / 'logs'


class TestLoggingConfig:
    """Test central logging set-up"""

    @pytest.fixture
    def clean_root_logger(self, monkeypatch):
        monkeypatch.setattr(LoggingConfig, '_initialized', False)
        monkeypatch.setattr(LoggingConfig, '_log_file_path', None)
        root = logging.getLogger()
        handlers = list(root.handlers)
        level = root.level
        yield root
        for handler in root.handlers[:]:
            if handler not in handlers:
                root.removeHandler(handler)
                handler.close()
        root.setLevel(level)

    def test_setup_writes_log_file(self, clean_root_logger, tmp_path):
        LoggingConfig.setup_logging(tmp_path / 'logs')
        LoggingConfig.get_logger('achievify_doodle.test').debug("surface ready")

        log_file = LoggingConfig.get_log_file_path()
        assert log_file == tmp_path / 'logs' / 'achievify_doodle.log'
        for handler in clean_root_logger.handlers:
            handler.flush()
        assert "surface ready" in log_file.read_text(encoding='utf-8')

    def test_setup_runs_once(self, clean_root_logger, tmp_path):
        LoggingConfig.setup_logging(tmp_path / 'a')
        count = len(clean_root_logger.handlers)
        LoggingConfig.setup_logging(tmp_path / 'b')

        assert len(clean_root_logger.handlers) == count
        assert not (tmp_path / 'b').exists()
