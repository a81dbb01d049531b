"""Tests for configuration loading."""

import pytest

from orderbrowser.config import config_loader
from orderbrowser.config import get_logger, get_table_config, reload_all_config


@pytest.fixture
def restore_config():
    yield
    reload_all_config()


class TestConfigLoader:
    """Tests for YAML configuration loading."""

    def test_table_config_from_yaml(self):
        table = get_table_config()
        assert table.page_size_options == [10, 20, 50, 100]
        assert table.estimated_row_height == 56
        assert table.overscan == 8
        assert table.status_priority[:2] == ["Booked", "In Cart"]

    def test_missing_files_fall_back_to_defaults(self, tmp_path, monkeypatch, restore_config):
        """Test built-in defaults are used when YAML files are absent."""
        monkeypatch.setattr(config_loader, "CONFIG_DIR", tmp_path)
        reload_all_config()

        assert get_table_config().page_size_options == [10, 20, 50, 100]
        assert config_loader.get_built_in_presets().get_all_presets() == {}
        assert "Booked" in config_loader.get_filter_options().statuses

    def test_invalid_yaml_raises_configuration_error(self, tmp_path, monkeypatch):
        (tmp_path / "broken.yaml").write_text("tables: [unclosed", encoding="utf-8")
        monkeypatch.setattr(config_loader, "CONFIG_DIR", tmp_path)

        with pytest.raises(config_loader.ConfigurationError):
            config_loader._load_yaml_file("broken.yaml")


class TestLogging:
    """Tests for logger naming."""

    def test_logger_namespace(self):
        assert get_logger("engine").name == "order_browser.engine"
        assert get_logger().name == "order_browser"
