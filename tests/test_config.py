"""Tests for configuration loading."""

import logging

from eve_cli.config import ConfigModel, load_config, save_config
from eve_cli.logging_setup import setup_logging


class TestConfig:

    def test_defaults(self, tmp_path, monkeypatch):
        monkeypatch.delenv("EVE_DATA_FILE", raising=False)
        config = load_config(tmp_path / "missing.yaml")

        assert config.data_file.endswith("eve.txt")
        assert "~" not in config.data_file
        assert config.log_level == "WARNING"
        assert config.use_color is True
        assert not (tmp_path / "missing.yaml").exists()

    def test_yaml_round_trip(self, tmp_path, monkeypatch):
        monkeypatch.delenv("EVE_DATA_FILE", raising=False)
        path = tmp_path / "config.yaml"
        config = ConfigModel(data_file=str(tmp_path / "tasks.txt"), log_level="debug", use_color=False)

        assert save_config(config, path)
        loaded = load_config(path)

        assert loaded == config
        assert loaded.log_level == "DEBUG"

    def test_unknown_keys_are_ignored(self, tmp_path, monkeypatch, caplog):
        monkeypatch.delenv("EVE_DATA_FILE", raising=False)
        path = tmp_path / "config.yaml"
        path.write_text("data_file: /tmp/x.txt\ntheme: dark\n", encoding="utf-8")

        config = load_config(path)
        assert config.data_file == "/tmp/x.txt"
        assert "theme" in caplog.text

    def test_invalid_yaml_falls_back_to_defaults(self, tmp_path, caplog):
        path = tmp_path / "config.yaml"
        path.write_text("data_file: [unclosed\n", encoding="utf-8")

        config = load_config(path)
        assert config.log_level == "WARNING"
        assert "Failed to load config" in caplog.text

    def test_non_mapping_yaml_falls_back_to_defaults(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("- just\n- a list\n", encoding="utf-8")

        assert load_config(path) == load_config(tmp_path / "missing.yaml")

    def test_env_overrides_data_file(self, tmp_path, monkeypatch):
        monkeypatch.setenv("EVE_DATA_FILE", str(tmp_path / "env.txt"))
        config = load_config(tmp_path / "missing.yaml")
        assert config.data_file == str(tmp_path / "env.txt")


class TestLoggingSetup:

    def test_setup_is_idempotent(self, tmp_path):
        log_file = tmp_path / "logs" / "eve.log"
        setup_logging("info", log_file)
        logger = setup_logging("debug", log_file)

        assert logger.level == logging.DEBUG
        assert len(logger.handlers) == 2

        logging.getLogger("eve_cli.storage").debug("hello from storage")
        for handler in logger.handlers:
            handler.flush()
        assert "hello from storage" in log_file.read_text(encoding="utf-8")

    def test_unknown_level_name_defaults_to_warning(self):
        assert setup_logging("chatty").level == logging.WARNING
