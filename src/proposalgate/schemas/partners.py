"""Subcontractor candidate and selection records."""

from __future__ import annotations

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class ConflictRisk(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class SelectionStatus(str, Enum):
    PENDING = "pending"
    SELECTED = "selected"
    CONTRACTED = "contracted"
    BACKUP_NEEDED = "backup-needed"


class Pricing(BaseModel):
    labor_rate: float = 0.0
    markup: float = 0.0
    estimated_total: float = 0.0
    competitive_rank: int = Field(ge=1)

    model_config = ConfigDict(extra="forbid")


class Engagement(BaseModel):
    """Past project delivered by a candidate."""

    project_name: str
    value: float = 0.0
    year: int | None = None
    client_rating: float | None = Field(default=None, ge=0.0, le=5.0)

    model_config = ConfigDict(extra="forbid")


class Availability(BaseModel):
    start_date: str | None = None
    duration: str | None = None
    conflict_risk: ConflictRisk = ConflictRisk.MEDIUM

    model_config = ConfigDict(extra="forbid")


class ComplianceStatus(BaseModel):
    insurance: bool = False
    licensing: bool = False
    bonding: bool = False
    security: bool = False
    osha: bool = False
    overall_score: int = Field(default=0, ge=0, le=100)

    model_config = ConfigDict(extra="forbid")


class SubcontractorCandidate(BaseModel):
    """Subcontractor eligible for a specialty category."""

    id: str
    name: str
    type: str
    specialty: list[str] = Field(default_factory=list)
    rating: float = Field(ge=0.0, le=5.0)
    experience: str = ""
    location: str = ""
    capacity: str = ""
    pricing: Pricing
    qualifications: list[str] = Field(default_factory=list)
    past_performance: list[Engagement] = Field(default_factory=list)
    availability: Availability = Field(default_factory=Availability)
    compliance_status: ComplianceStatus = Field(default_factory=ComplianceStatus)
    strengths: list[str] = Field(default_factory=list)
    concerns: list[str] = Field(default_factory=list)
    recommendation_score: int = Field(default=0, ge=0, le=100)

    model_config = ConfigDict(extra="forbid", frozen=True)


class SelectionCriteria(BaseModel):
    """Relative weights for price, quality, schedule and experience."""

    price: float = Field(default=30.0, ge=0.0)
    quality: float = Field(default=40.0, ge=0.0)
    schedule: float = Field(default=20.0, ge=0.0)
    experience: float = Field(default=10.0, ge=0.0)

    model_config = ConfigDict(extra="forbid", frozen=True)

    @property
    def total(self) -> float:
        return self.price + self.quality + self.schedule + self.experience


class SubcontractorSelection(BaseModel):
    """The choice made for one category of an RFP."""

    rfp_id: str
    category: str
    selected_candidate_id: str | None
    alternate_ids: list[str] = Field(default_factory=list)
    criteria: SelectionCriteria = Field(default_factory=SelectionCriteria)
    status: SelectionStatus = SelectionStatus.PENDING
    notes: str = ""
    last_updated: datetime

    model_config = ConfigDict(extra="forbid")
