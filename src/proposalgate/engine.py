"""Decision engine facade used by presentation collaborators."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Iterable, Mapping

import pendulum
import structlog

from . import __version__
from .core import (
    DEFAULT_SESSION,
    CoverageMatcher,
    GatingEngine,
    PartnerRanking,
    RankedCandidate,
    ReadinessEvaluator,
)
from .core.evaluators import CandidateScore
from .schemas import (
    ChecklistItem,
    ChecklistUpdate,
    CoverageMatch,
    DocumentRecord,
    ItemStatus,
    PhaseStatus,
    ReadinessReport,
    SectionProgress,
    SelectionCriteria,
    SelectionStatus,
    SubcontractorCandidate,
    SubcontractorSelection,
)

Criteria = SelectionCriteria | Mapping[str, float]
Documents = Iterable[DocumentRecord | Mapping[str, Any]]


class AuditLogger:
    """Append-only audit logger writing JSON lines."""

    def __init__(self, path: Path):
        self._path = path
        self._path.parent.mkdir(parents=True, exist_ok=True)

    def append(self, record: dict) -> None:
        with self._path.open("a", encoding="utf-8") as handle:
            handle.write(json.dumps(record, ensure_ascii=False, default=_json_default))
            handle.write("\n")


class DecisionEngine:
    """Single entry point over gating, coverage, readiness and partner ranking.

    The subsystems share nothing; the facade only routes calls and records
    selections to the optional audit log.
    """

    def __init__(
        self,
        *,
        gating: GatingEngine,
        coverage: CoverageMatcher,
        partners: PartnerRanking,
        readiness: ReadinessEvaluator,
        audit_logger: AuditLogger | None = None,
    ) -> None:
        self._gating = gating
        self._coverage = coverage
        self._partners = partners
        self._readiness = readiness
        self._audit_logger = audit_logger
        self._logger = structlog.get_logger(__name__)

    # Checklist progress & gating

    def initialize_section(self, section_id: str, *, session_id: str = DEFAULT_SESSION) -> SectionProgress:
        return self._gating.initialize_section(section_id, session_id=session_id)

    def update_checklist_item(
        self,
        section_id: str,
        item_id: str,
        completed: bool,
        *,
        session_id: str = DEFAULT_SESSION,
    ) -> SectionProgress:
        return self._gating.update_checklist_item(
            section_id, item_id, completed, session_id=session_id
        )

    def batch_update(
        self,
        section_id: str,
        updates: Iterable[ChecklistUpdate | Mapping[str, Any]],
        *,
        session_id: str = DEFAULT_SESSION,
    ) -> SectionProgress:
        return self._gating.batch_update(section_id, updates, session_id=session_id)

    def can_complete_item(self, section_id: str, item_id: str, *, session_id: str = DEFAULT_SESSION) -> bool:
        return self._gating.can_complete_item(section_id, item_id, session_id=session_id)

    def item_status(
        self, section_id: str, item_id: str, *, session_id: str = DEFAULT_SESSION
    ) -> ItemStatus | None:
        return self._gating.item_status(section_id, item_id, session_id=session_id)

    def next_incomplete_item(
        self, section_id: str, *, session_id: str = DEFAULT_SESSION
    ) -> ChecklistItem | None:
        return self._gating.next_incomplete_item(section_id, session_id=session_id)

    def journey(self, *, session_id: str = DEFAULT_SESSION) -> list[SectionProgress]:
        return self._gating.journey(session_id=session_id)

    # Document coverage

    def match_artifact(
        self,
        artifact_name: str,
        documents: Documents,
        *,
        now: pendulum.DateTime | None = None,
    ) -> CoverageMatch:
        return self._coverage.match(artifact_name, documents, now=now)

    def match_artifacts(
        self,
        artifact_names: Iterable[str],
        documents: Documents,
        *,
        now: pendulum.DateTime | None = None,
    ) -> list[CoverageMatch]:
        return self._coverage.match_many(artifact_names, documents, now=now)

    # Company readiness

    def evaluate_readiness(self, documents: Documents) -> ReadinessReport:
        return self._readiness.evaluate(documents)

    def phase_status(self, readiness: float, phase_minimum: float) -> PhaseStatus:
        return self._readiness.phase_status(readiness, phase_minimum)

    # Partner recommendation

    def candidates_for_specialty(self, specialty: str) -> list[SubcontractorCandidate]:
        return self._partners.candidates_for_specialty(specialty)

    def score_candidate(self, candidate: SubcontractorCandidate, criteria: Criteria) -> int:
        return self._partners.score_candidate(candidate, criteria)

    def score_breakdown(self, candidate: SubcontractorCandidate, criteria: Criteria) -> CandidateScore:
        return self._partners.score_breakdown(candidate, criteria)

    def recommend(self, specialty: str) -> SubcontractorCandidate | None:
        return self._partners.recommend(specialty)

    def rank(self, specialty: str, criteria: Criteria | None = None) -> list[RankedCandidate]:
        return self._partners.rank(specialty, criteria)

    def compare(self, candidate_ids: Iterable[str]) -> list[SubcontractorCandidate]:
        return self._partners.compare(candidate_ids)

    def select(
        self,
        rfp_id: str,
        category: str,
        candidate_id: str,
        notes: str = "",
        *,
        criteria: Criteria | None = None,
    ) -> SubcontractorSelection:
        selection = self._partners.select(rfp_id, category, candidate_id, notes, criteria=criteria)
        self._audit(selection)
        return selection

    def selection_for(self, rfp_id: str, category: str) -> SubcontractorSelection | None:
        return self._partners.selection_for(rfp_id, category)

    def update_selection_status(
        self,
        rfp_id: str,
        category: str,
        status: SelectionStatus | str,
        *,
        notes: str | None = None,
    ) -> SubcontractorSelection | None:
        selection = self._partners.update_selection_status(rfp_id, category, status, notes=notes)
        if selection is not None:
            self._audit(selection)
        return selection

    def _audit(self, selection: SubcontractorSelection) -> None:
        if not self._audit_logger:
            return
        record = selection.model_dump(mode="json")
        record["app_version"] = __version__
        self._audit_logger.append(record)
        self._logger.debug("selection.audited", rfp_id=selection.rfp_id, category=selection.category)


def _json_default(value: Any) -> str:
    if isinstance(value, pendulum.DateTime):
        return value.to_iso8601_string()
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")
