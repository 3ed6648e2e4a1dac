"""Tests for core/config.py module."""

import json

import pytest
import yaml

from motionkit.core.config import MotionConfig, get_default_config, load_config
from motionkit.core.exceptions import ConfigurationError


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Keep config discovery away from the real environment."""
    monkeypatch.delenv("MOTIONKIT_CONFIG", raising=False)
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("HOME", str(tmp_path / "home"))


class TestMotionConfig:
    """Tests for MotionConfig."""

    def test_defaults(self):
        config = get_default_config()

        assert config.additive is False
        assert config.additive_weighting == 1.0
        assert config.adapters == ["struct", "color", "numeric"]

    def test_default_adapters_not_shared(self):
        first = MotionConfig()
        first.adapters.append("custom")

        assert MotionConfig().adapters == ["struct", "color", "numeric"]

    def test_from_dict(self):
        config = MotionConfig.from_dict({
            "additive": True,
            "additive_weighting": 0.25,
            "adapters": ["numeric"],
        })

        assert config.additive is True
        assert config.additive_weighting == 0.25
        assert config.adapters == ["numeric"]

    def test_from_dict_integer_weighting(self):
        assert MotionConfig.from_dict({"additive_weighting": 1}).additive_weighting == 1.0

    @pytest.mark.parametrize(
        "data",
        [
            {"additive": "yes"},
            {"additive_weighting": "half"},
            {"additive_weighting": True},
            {"adapters": "numeric"},
            {"adapters": ["numeric", 3]},
        ],
    )
    def test_from_dict_rejects_bad_types(self, data):
        with pytest.raises(ConfigurationError):
            MotionConfig.from_dict(data)

    def test_save_and_load(self, tmp_path):
        path = tmp_path / "out" / "motionkit.yaml"
        MotionConfig(additive=True, additive_weighting=0.5, adapters=["color"]).save(path)

        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)

        assert data == {"additive": True, "additive_weighting": 0.5, "adapters": ["color"]}
        assert load_config(path) == MotionConfig(True, 0.5, ["color"])


class TestLoadConfig:
    """Tests for load_config search order."""

    def test_default_when_nothing_found(self):
        assert load_config() == MotionConfig()

    def test_explicit_path(self, tmp_path):
        path = tmp_path / "custom.yaml"
        path.write_text("additive: true\n", encoding="utf-8")

        assert load_config(path).additive is True

    def test_json_file(self, tmp_path):
        path = tmp_path / "custom.json"
        path.write_text(json.dumps({"additive_weighting": 0.2}), encoding="utf-8")

        assert load_config(path).additive_weighting == 0.2

    def test_environment_variable(self, tmp_path, monkeypatch):
        path = tmp_path / "env.yaml"
        path.write_text("adapters: [numeric]\n", encoding="utf-8")
        monkeypatch.setenv("MOTIONKIT_CONFIG", str(path))

        assert load_config().adapters == ["numeric"]

    def test_explicit_path_wins_over_environment(self, tmp_path, monkeypatch):
        explicit = tmp_path / "explicit.yaml"
        explicit.write_text("additive: true\n", encoding="utf-8")
        env = tmp_path / "env.yaml"
        env.write_text("additive: false\n", encoding="utf-8")
        monkeypatch.setenv("MOTIONKIT_CONFIG", str(env))

        assert load_config(explicit).additive is True

    def test_search_paths(self, tmp_path):
        path = tmp_path / "search.yml"
        path.write_text("additive_weighting: 0.3\n", encoding="utf-8")

        assert load_config(search_paths=[tmp_path / "missing.yaml", path]).additive_weighting == 0.3

    def test_working_directory(self, tmp_path):
        (tmp_path / "motionkit.yaml").write_text("additive: true\n", encoding="utf-8")

        assert load_config().additive is True

    def test_empty_file_gives_defaults(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("", encoding="utf-8")

        assert load_config(path) == MotionConfig()

    def test_invalid_yaml(self, tmp_path):
        path = tmp_path / "broken.yaml"
        path.write_text("additive: [unclosed\n", encoding="utf-8")

        with pytest.raises(ConfigurationError):
            load_config(path)

    def test_non_mapping_document(self, tmp_path):
        path = tmp_path / "list.yaml"
        path.write_text("- numeric\n", encoding="utf-8")

        with pytest.raises(ConfigurationError):
            load_config(path)

    def test_missing_explicit_path(self, tmp_path):
        with pytest.raises(ConfigurationError) as exc_info:
            load_config(tmp_path / "absent.yaml")

        assert exc_info.value.context["source"] == "config_path"

    def test_missing_environment_file(self, tmp_path, monkeypatch):
        monkeypatch.setenv("MOTIONKIT_CONFIG", str(tmp_path / "absent.yaml"))
        (tmp_path / "motionkit.yaml").write_text("additive: true\n", encoding="utf-8")

        with pytest.raises(ConfigurationError) as exc_info:
            load_config()

        assert exc_info.value.context["source"] == "MOTIONKIT_CONFIG"
