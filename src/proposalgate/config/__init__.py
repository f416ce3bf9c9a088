"""Configuration management utilities."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from ..schemas.config import load_config


class ConfigManager:
    """Simple YAML-backed configuration loader."""

    def __init__(self, base_path: str | Path):
        self._base_path = Path(base_path)

    def load(self, name: str) -> dict[str, Any]:
        """Load a YAML configuration by name without file extension."""
        for suffix in (".yaml", ".yml"):
            path = self._base_path / f"{name}{suffix}"
            if path.exists():
                return self.load_path(path)
        raise FileNotFoundError(f"No configuration named {name!r} under {self._base_path}")

    @staticmethod
    def load_path(path: str | Path) -> dict[str, Any]:
        """Load and validate a YAML file, returning container settings."""
        with Path(path).open("r", encoding="utf-8") as handle:
            raw = yaml.safe_load(handle) or {}
        return load_config(raw).to_settings()


__all__ = ["ConfigManager"]
