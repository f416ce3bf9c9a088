"""Checklist and section progress records."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_serializer


class ActionKind(str, Enum):
    """Side effect that accompanies completing a checklist item."""

    UPLOAD = "upload"
    REVIEW = "review"
    SUBMIT = "submit"
    VERIFY = "verify"
    AUTOMATIC = "automatic"
    MANUAL = "manual"


class ItemStatus(str, Enum):
    LOCKED = "locked"
    AVAILABLE = "available"
    COMPLETE = "complete"


class SectionStatus(str, Enum):
    LOCKED = "locked"
    AVAILABLE = "available"
    IN_PROGRESS = "in-progress"
    COMPLETE = "complete"


class ChecklistItemTemplate(BaseModel):
    """Static definition of a checklist item inside a section template."""

    key: str
    label: str
    description: str | None = None
    required: bool = True
    action_kind: ActionKind = ActionKind.MANUAL
    action_label: str | None = None
    action_url: str | None = None
    depends_on: list[str] = Field(default_factory=list)
    estimated_effort: str = "5 min"
    help_text: str | None = None

    model_config = ConfigDict(extra="forbid", frozen=True)


class SectionTemplate(BaseModel):
    """Static checklist definition for one journey section."""

    title: str
    description: str
    next_section: str | None = None
    checklist: list[ChecklistItemTemplate] = Field(default_factory=list)

    model_config = ConfigDict(extra="forbid", frozen=True)


class ChecklistItem(BaseModel):
    """One actionable unit inside a section."""

    id: str
    label: str
    description: str
    required: bool = True
    completed: bool = False
    dependencies: set[str] = Field(default_factory=set)
    action_kind: ActionKind = ActionKind.MANUAL
    action_label: str | None = None
    action_url: str | None = None
    estimated_effort: str = "5 min"
    help_text: str | None = None

    model_config = ConfigDict(extra="forbid")

    @field_serializer("dependencies")
    def _sorted_dependencies(self, value: set[str]) -> list[str]:
        return sorted(value)


class SectionState(BaseModel):
    """Mutable checklist state persisted per session and section."""

    section_id: str
    template_id: str
    checklist: list[ChecklistItem] = Field(default_factory=list)

    model_config = ConfigDict(extra="forbid")


class ChecklistUpdate(BaseModel):
    """Single mutation inside a batch update."""

    item_id: str
    completed: bool

    model_config = ConfigDict(extra="forbid")


class SectionProgress(BaseModel):
    """Read-only snapshot of a section, recomputed after every mutation."""

    section_id: str
    title: str
    description: str
    next_section: str | None = None
    checklist: list[ChecklistItem] = Field(default_factory=list)
    overall_progress: int = Field(ge=0, le=100)
    is_complete: bool
    can_proceed: bool
    status: SectionStatus
    item_statuses: dict[str, ItemStatus] = Field(default_factory=dict)

    model_config = ConfigDict(extra="forbid")
