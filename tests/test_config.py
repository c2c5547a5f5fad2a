# tests/test_config.py
"""
Tests for spec-kit.yaml loading, saving and project discovery.
"""

from __future__ import annotations

import pytest

from speckit.core.config import (
    ConfigNotFoundError,
    ConfigParseError,
    ConfigValidationError,
    ProjectConfig,
    SdkSettings,
    load_config,
    save_config,
)
from speckit.core.errors import SpecKitError
from speckit.core.paths import CONFIG_FILE, SpecKitPaths


class TestLoadConfig:
    def test_defaults(self, tmp_path):
        path = tmp_path / CONFIG_FILE
        path.write_text("name: petstore\n", encoding="utf-8")

        config = load_config(path)

        assert config.openapi == "openapi.yaml"
        assert config.plan == "plan.yaml"
        assert config.consumer.language == "python"
        assert config.consumer.output_dir == "consumer"
        assert config.package_name is None

    def test_camel_case_aliases(self, tmp_path):
        path = tmp_path / CONFIG_FILE
        path.write_text(
            "name: petstore\n"
            "sdk: {language: java, outputDir: sdk, packageName: io.pets}\n"
            "consumer: {language: typescript, outputDir: web}\n",
            encoding="utf-8",
        )

        config = load_config(path)

        assert config.package_name == "io.pets"
        assert config.consumer.output_dir == "web"

    def test_missing(self, tmp_path):
        with pytest.raises(ConfigNotFoundError):
            load_config(tmp_path / CONFIG_FILE)

    def test_invalid_yaml(self, tmp_path):
        path = tmp_path / CONFIG_FILE
        path.write_text("name: [oops", encoding="utf-8")

        with pytest.raises(ConfigParseError):
            load_config(path)

    def test_missing_name(self, tmp_path):
        path = tmp_path / CONFIG_FILE
        path.write_text("version: 1.0.0\n", encoding="utf-8")

        with pytest.raises(ConfigValidationError):
            load_config(path)

    def test_config_errors_are_speckit_errors(self, tmp_path):
        with pytest.raises(SpecKitError):
            load_config(tmp_path / CONFIG_FILE)

    def test_round_trip(self, tmp_path):
        config = ProjectConfig(name="petstore", sdk=SdkSettings(package_name="io.pets"))

        path = save_config(config, tmp_path)

        assert path == tmp_path / CONFIG_FILE
        assert load_config(path) == config
        assert "packageName: io.pets" in path.read_text(encoding="utf-8")


class TestProjectDiscovery:
    def test_walks_up_to_config(self, tmp_path):
        (tmp_path / CONFIG_FILE).write_text("name: x\n", encoding="utf-8")
        nested = tmp_path / "a" / "b"
        nested.mkdir(parents=True)

        assert SpecKitPaths.find_project_root(nested) == tmp_path.resolve()

    def test_no_project(self, tmp_path):
        assert SpecKitPaths.find_project_root(tmp_path) is None

    def test_override(self, tmp_path):
        SpecKitPaths.set_project_root(tmp_path)

        assert SpecKitPaths.project_root() == tmp_path
        assert SpecKitPaths.config() == tmp_path / CONFIG_FILE
        assert SpecKitPaths.resolve("plan.yaml") == tmp_path / "plan.yaml"

    def test_absolute_paths_pass_through(self, tmp_path):
        assert SpecKitPaths.resolve(tmp_path / "x.yaml", root=tmp_path / "other") == tmp_path / "x.yaml"
