"""Company readiness rule and report records."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class PhaseStatus(str, Enum):
    LOCKED = "locked"
    AVAILABLE = "available"
    IN_PROGRESS = "in-progress"
    COMPLETE = "complete"


class ReadinessRule(BaseModel):
    """Recommended company document and its weight in the readiness score."""

    key: str
    label: str
    doc_type: str | None = None
    tags: list[str] = Field(default_factory=list)
    required: bool = False
    weight: int | None = Field(default=None, ge=0)

    model_config = ConfigDict(extra="forbid", frozen=True)


class ReadinessEntry(BaseModel):
    key: str
    label: str
    completed: bool
    required: bool
    weight: int
    document_id: str | None = None
    reason: str | None = None

    model_config = ConfigDict(extra="forbid")


class ReadinessReport(BaseModel):
    score: int = Field(ge=0, le=100)
    total_weight: int
    achieved_weight: int
    breakdown: list[ReadinessEntry] = Field(default_factory=list)
    missing_keys: list[str] = Field(default_factory=list)
    missing_required: list[str] = Field(default_factory=list)

    model_config = ConfigDict(extra="forbid")
