"""Document, artifact rule and coverage records."""

from __future__ import annotations

from datetime import datetime
from enum import Enum

import pendulum
from pydantic import AliasChoices, BaseModel, ConfigDict, Field, computed_field, field_validator

MATCH_THRESHOLD = 0.6


class DocumentScope(str, Enum):
    COMPANY = "company"
    OPPORTUNITY = "opportunity"


class DocumentRecord(BaseModel):
    """Candidate document snapshot supplied by the caller."""

    id: str
    name: str
    declared_type: str = Field(
        default="", validation_alias=AliasChoices("declared_type", "type")
    )
    tags: frozenset[str] = Field(default_factory=frozenset)
    uploaded_at: datetime | None = None
    expires_at: datetime | None = None
    scope: DocumentScope = DocumentScope.COMPANY

    model_config = ConfigDict(extra="forbid", frozen=True)

    @field_validator("declared_type", mode="before")
    @classmethod
    def _lower_type(cls, value: str | None) -> str:
        return (value or "").strip().lower()

    @field_validator("tags", mode="before")
    @classmethod
    def _lower_tags(cls, value):
        if value is None:
            return frozenset()
        return frozenset(str(tag).strip().lower() for tag in value if tag)

    @field_validator("uploaded_at", "expires_at", mode="after")
    @classmethod
    def _as_pendulum(cls, value: datetime | None) -> datetime | None:
        if value is None:
            return None
        # Naive timestamps are taken as UTC.
        return pendulum.instance(value)


class ArtifactRule(BaseModel):
    """Matching parameters for one named artifact requirement."""

    tags: frozenset[str] = Field(default_factory=frozenset)
    types: frozenset[str] | None = None
    max_age_days: int | None = Field(default=None, ge=0)

    model_config = ConfigDict(extra="forbid", frozen=True)

    @field_validator("tags", mode="before")
    @classmethod
    def _lower_tags(cls, value):
        return frozenset(str(item).strip().lower() for item in value or () if item)

    @field_validator("types", mode="before")
    @classmethod
    def _lower_types(cls, value):
        if not value:
            return None
        return frozenset(str(item).strip().lower() for item in value if item)


class CoverageMatch(BaseModel):
    """Best document found for an artifact, with confidence in [0, 1]."""

    artifact: str
    confidence: float = Field(ge=0.0, le=1.0)
    source: DocumentScope | None = None
    document: DocumentRecord | None = None
    reason: str

    model_config = ConfigDict(extra="forbid", frozen=True)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def matched(self) -> bool:
        return self.confidence >= MATCH_THRESHOLD
