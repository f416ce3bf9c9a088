"""Pydantic schema definitions for engine inputs and decision records."""

from __future__ import annotations

from .checklist import (
    ActionKind,
    ChecklistItem,
    ChecklistItemTemplate,
    ChecklistUpdate,
    ItemStatus,
    SectionProgress,
    SectionState,
    SectionStatus,
    SectionTemplate,
)
from .documents import (
    MATCH_THRESHOLD,
    ArtifactRule,
    CoverageMatch,
    DocumentRecord,
    DocumentScope,
)
from .partners import (
    Availability,
    ComplianceStatus,
    ConflictRisk,
    Engagement,
    Pricing,
    SelectionCriteria,
    SelectionStatus,
    SubcontractorCandidate,
    SubcontractorSelection,
)
from .readiness import PhaseStatus, ReadinessEntry, ReadinessReport, ReadinessRule

__all__ = [
    "ActionKind",
    "ArtifactRule",
    "Availability",
    "ChecklistItem",
    "ChecklistItemTemplate",
    "ChecklistUpdate",
    "ComplianceStatus",
    "ConflictRisk",
    "CoverageMatch",
    "DocumentRecord",
    "DocumentScope",
    "Engagement",
    "ItemStatus",
    "MATCH_THRESHOLD",
    "PhaseStatus",
    "Pricing",
    "ReadinessEntry",
    "ReadinessReport",
    "ReadinessRule",
    "SectionProgress",
    "SectionState",
    "SectionStatus",
    "SectionTemplate",
    "SelectionCriteria",
    "SelectionStatus",
    "SubcontractorCandidate",
    "SubcontractorSelection",
]
