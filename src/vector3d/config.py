"""
Configuration module for the vector3d command-line interface.

Loads configuration from a YAML file with Pydantic validation.
"""

from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel


class DisplayConfig(BaseModel):
    echo_operands: bool = False


class Vector3DConfig(BaseModel):
    display: DisplayConfig = DisplayConfig()
    debug: bool = False

    @classmethod
    def from_yaml(cls, path: Path | str | None = None) -> "Vector3DConfig":
        """Load configuration from a YAML file."""
        if path is None:
            return cls()

        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")

        with open(path, encoding="utf-8") as f:
            data: dict[str, Any] = yaml.safe_load(f) or {}

        return cls(**data)
