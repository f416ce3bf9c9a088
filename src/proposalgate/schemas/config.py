"""Pydantic configuration schema for YAML input."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, ValidationError

from .documents import ArtifactRule


class RulesConfig(BaseModel):
    artifacts: dict[str, ArtifactRule] | None = None


class AppConfig(BaseModel):
    gating: dict[str, Any] | None = None
    completion: dict[str, Any] | None = None
    coverage: dict[str, Any] | None = None
    scoring: dict[str, Any] | None = None
    partners: dict[str, Any] | None = None
    readiness: dict[str, Any] | None = None
    audit_log: str | None = None
    rules: RulesConfig = Field(default_factory=RulesConfig)

    def to_settings(self) -> dict[str, Any]:
        settings = self.model_dump(exclude_none=True, exclude={"rules"})
        if self.rules.artifacts:
            settings["rules"] = {"artifacts": dict(self.rules.artifacts)}
        return settings


def load_config(raw: Any) -> AppConfig:
    if not isinstance(raw, dict):
        raise ValidationError.from_exception_data(
            "AppConfig",
            [{"type": "dict_type", "loc": ("config",), "input": raw}],
        )
    return AppConfig.model_validate(raw)
