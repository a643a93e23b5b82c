"""
Unit tests for BitzConfig in bitz/configs.py
"""

import pytest

from bitz.configs import BitzConfig
from bitz.errors import ConfigError


def write_config(tmp_path, text):
    path = tmp_path / "bitz.toml"
    path.write_text(text, encoding="utf-8")
    return str(path)


class TestBitzConfig:
    """Tests for loading configuration from TOML files."""

    def test_defaults(self):
        """Test the defaults when no config file is given."""
        config = BitzConfig.from_toml(None)
        assert config.capacity == 64
        assert config.fill is False
        assert config.width == 64
        assert config.start == 0
        assert config.logging.level == "WARNING"
        assert config.logging.file is None

    def test_load_all_sections(self, tmp_path):
        """Test loading every section from a TOML file."""
        path = write_config(
            tmp_path,
            """
[bitset]
capacity = 128
fill = true

[render]
width = 32
start = 8

[logging]
level = "debug"
file = "bitz.log"
log-dir = "/tmp/bitz-logs"
""",
        )
        config = BitzConfig.from_toml(path)
        assert config.capacity == 128
        assert config.fill is True
        assert config.width == 32
        assert config.start == 8
        assert config.logging.level == "DEBUG"
        assert config.logging.file == "bitz.log"
        assert config.logging.log_dir == "/tmp/bitz-logs"

    def test_partial_section_keeps_defaults(self, tmp_path):
        """Test that keys missing from a section keep their defaults."""
        path = write_config(tmp_path, "[render]\nwidth = 16\n")
        config = BitzConfig.from_toml(path)
        assert config.width == 16
        assert config.start == 0
        assert config.capacity == 64

    def test_empty_log_file_means_none(self, tmp_path):
        """Test that an empty log file name means no file logging."""
        path = write_config(tmp_path, '[logging]\nfile = ""\n')
        assert BitzConfig.from_toml(path).logging.file is None

    def test_missing_file_raises(self, tmp_path):
        """Test that a missing file raises ConfigError."""
        with pytest.raises(ConfigError, match="Cannot load config file"):
            BitzConfig.from_toml(str(tmp_path / "missing.toml"))

    def test_invalid_toml_raises(self, tmp_path):
        """Test that malformed TOML raises ConfigError."""
        path = write_config(tmp_path, "[bitset\ncapacity = ")
        with pytest.raises(ConfigError):
            BitzConfig.from_toml(path)

    def test_negative_capacity_raises(self, tmp_path):
        """Test that a negative capacity raises ConfigError."""
        path = write_config(tmp_path, "[bitset]\ncapacity = -8\n")
        with pytest.raises(ConfigError, match="non-negative"):
            BitzConfig.from_toml(path)

    def test_wrong_type_raises(self, tmp_path):
        """Test that a non-integer width raises ConfigError."""
        path = write_config(tmp_path, '[render]\nwidth = "wide"\n')
        with pytest.raises(ConfigError, match="must be an integer"):
            BitzConfig.from_toml(path)

    def test_non_bool_fill_raises(self, tmp_path):
        """Test that a non-boolean fill raises ConfigError."""
        path = write_config(tmp_path, "[bitset]\nfill = 1\n")
        with pytest.raises(ConfigError, match="must be a boolean"):
            BitzConfig.from_toml(path)

    def test_unknown_log_level_raises(self, tmp_path):
        """Test that an unknown log level raises ConfigError."""
        path = write_config(tmp_path, '[logging]\nlevel = "loud"\n')
        with pytest.raises(ConfigError, match="Unknown log level"):
            BitzConfig.from_toml(path)

    def test_non_string_log_file_raises(self, tmp_path):
        """Test that a non-string log file name raises ConfigError."""
        path = write_config(tmp_path, "[logging]\nfile = 5\n")
        with pytest.raises(ConfigError, match="'file' must be a string, got 5"):
            BitzConfig.from_toml(path)

    def test_non_string_log_dir_raises(self, tmp_path):
        """Test that a non-string log directory raises ConfigError."""
        path = write_config(tmp_path, '[logging]\nfile = "x.log"\nlog-dir = 5\n')
        with pytest.raises(ConfigError, match="'log-dir' must be a string, got 5"):
            BitzConfig.from_toml(path)
