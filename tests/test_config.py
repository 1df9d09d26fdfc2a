"""Tests for Vector3DConfig loading and validation."""

import tempfile

import pytest
import yaml
from pydantic import ValidationError

from vector3d.config import DisplayConfig, Vector3DConfig


class TestVector3DConfig:
    def test_default_config(self) -> None:
        config = Vector3DConfig()
        assert config.display.echo_operands is False
        assert not config.debug

    def test_from_yaml_none_returns_default(self) -> None:
        config = Vector3DConfig.from_yaml(None)
        assert config == Vector3DConfig()

    def test_from_yaml_missing_file_raises(self) -> None:
        with pytest.raises(FileNotFoundError):
            Vector3DConfig.from_yaml("/nonexistent/config.yaml")

    def test_from_yaml_valid_file(self) -> None:
        data = {"display": {"echo_operands": True}, "debug": True}
        with tempfile.NamedTemporaryFile(mode="w", suffix=".yaml", delete=False) as f:
            yaml.dump(data, f)
            f.flush()

            config = Vector3DConfig.from_yaml(f.name)
            assert config.display.echo_operands is True
            assert config.debug is True

    def test_from_yaml_partial_file(self) -> None:
        with tempfile.NamedTemporaryFile(mode="w", suffix=".yaml", delete=False) as f:
            yaml.dump({"debug": True}, f)
            f.flush()

            config = Vector3DConfig.from_yaml(f.name)
            assert config.debug is True
            # Unspecified sections should use defaults
            assert config.display.echo_operands is False

    def test_from_yaml_empty_file(self) -> None:
        with tempfile.NamedTemporaryFile(mode="w", suffix=".yaml", delete=False) as f:
            f.write("")
            f.flush()

            config = Vector3DConfig.from_yaml(f.name)
            assert config.debug is False

    def test_from_yaml_invalid_types(self) -> None:
        data = {"display": {"echo_operands": "sometimes"}}
        with tempfile.NamedTemporaryFile(mode="w", suffix=".yaml", delete=False) as f:
            yaml.dump(data, f)
            f.flush()

            with pytest.raises(ValidationError):
                Vector3DConfig.from_yaml(f.name)


class TestDisplayConfig:
    def test_defaults(self) -> None:
        assert DisplayConfig().echo_operands is False

    def test_invalid_type_raises(self) -> None:
        with pytest.raises(ValidationError):
            DisplayConfig(echo_operands=[1, 2])  # type: ignore[arg-type]
