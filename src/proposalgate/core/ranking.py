"""Subcontractor ranking, recommendation and selection."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Callable, Iterable, Mapping, Sequence

import pendulum
import structlog

from ..rules import CANDIDATE_POOL
from ..schemas import (
    SelectionCriteria,
    SelectionStatus,
    SubcontractorCandidate,
    SubcontractorSelection,
)
from .errors import InvalidWeightError, NotFoundError
from .evaluators import CandidateScore, CandidateScorer


@dataclass
class PartnerConfig:
    """``strict`` validates candidate ids and criteria instead of degrading."""

    strict: bool = False
    expected_weight_total: float = 100.0


@dataclass(slots=True)
class RankedCandidate:
    position: int
    candidate: SubcontractorCandidate
    score: CandidateScore


class SelectionRegistry:
    """Active selection per ``(rfp_id, category)``; a new one replaces the old."""

    def __init__(self) -> None:
        self._selections: dict[tuple[str, str], SubcontractorSelection] = {}

    def record(self, selection: SubcontractorSelection) -> SubcontractorSelection | None:
        key = (selection.rfp_id, selection.category)
        previous = self._selections.get(key)
        self._selections[key] = selection
        return previous

    def get(self, rfp_id: str, category: str) -> SubcontractorSelection | None:
        return self._selections.get((rfp_id, category))

    def for_rfp(self, rfp_id: str) -> list[SubcontractorSelection]:
        return [
            selection
            for (selection_rfp, _), selection in self._selections.items()
            if selection_rfp == rfp_id
        ]


class PartnerRanking:
    """Filter, order and select subcontractor candidates for a specialty."""

    def __init__(
        self,
        *,
        pool: Sequence[SubcontractorCandidate | Mapping[str, Any]] | None = None,
        scorer: CandidateScorer | None = None,
        registry: SelectionRegistry | None = None,
        config: PartnerConfig | None = None,
        now_provider: Callable[[], pendulum.DateTime] | None = None,
    ) -> None:
        raw_pool = CANDIDATE_POOL if pool is None else pool
        self._pool = tuple(
            item
            if isinstance(item, SubcontractorCandidate)
            else SubcontractorCandidate.model_validate(item)
            for item in raw_pool
        )
        self._by_id = {candidate.id: candidate for candidate in self._pool}
        self._scorer = scorer or CandidateScorer()
        self._registry = registry if registry is not None else SelectionRegistry()
        self._config = config or PartnerConfig()
        self._now_provider = now_provider or pendulum.now
        self._logger = structlog.get_logger(__name__)

    @property
    def pool(self) -> tuple[SubcontractorCandidate, ...]:
        return self._pool

    def candidates_for_specialty(self, specialty: str) -> list[SubcontractorCandidate]:
        """Candidates whose specialty tags contain ``specialty`` or whose type equals it."""
        needle = specialty.strip().lower()
        matches = [
            candidate
            for candidate in self._pool
            if any(needle in tag.lower() for tag in candidate.specialty)
            or candidate.type.lower() == needle
        ]
        if not matches:
            self._logger.warning("partners.empty_pool", specialty=specialty)
        return sorted(matches, key=lambda candidate: candidate.recommendation_score, reverse=True)

    def recommend(self, specialty: str) -> SubcontractorCandidate | None:
        candidates = self.candidates_for_specialty(specialty)
        return candidates[0] if candidates else None

    def score_candidate(
        self,
        candidate: SubcontractorCandidate,
        criteria: SelectionCriteria | Mapping[str, float],
    ) -> int:
        return self.score_breakdown(candidate, criteria).total

    def score_breakdown(
        self,
        candidate: SubcontractorCandidate,
        criteria: SelectionCriteria | Mapping[str, float],
    ) -> CandidateScore:
        return self._scorer.breakdown(candidate, self._check_criteria(criteria))

    def rank(
        self,
        specialty: str,
        criteria: SelectionCriteria | Mapping[str, float] | None = None,
    ) -> list[RankedCandidate]:
        """Order the specialty pool by dynamic score, best first.

        Ties keep the static recommendation order.
        """
        resolved = self._check_criteria(criteria or SelectionCriteria())
        scored = [
            (candidate, self._scorer.breakdown(candidate, resolved))
            for candidate in self.candidates_for_specialty(specialty)
        ]
        scored.sort(key=lambda pair: pair[1].total, reverse=True)
        return [
            RankedCandidate(position=index, candidate=candidate, score=score)
            for index, (candidate, score) in enumerate(scored, start=1)
        ]

    def get_candidate(self, candidate_id: str) -> SubcontractorCandidate | None:
        candidate = self._by_id.get(candidate_id)
        if candidate is None:
            if self._config.strict:
                raise NotFoundError("candidate", candidate_id)
            self._logger.warning("partners.unknown_candidate", candidate_id=candidate_id)
        return candidate

    def compare(self, candidate_ids: Iterable[str]) -> list[SubcontractorCandidate]:
        found = [self.get_candidate(candidate_id) for candidate_id in candidate_ids]
        return sorted(
            (candidate for candidate in found if candidate is not None),
            key=lambda candidate: candidate.recommendation_score,
            reverse=True,
        )

    def select(
        self,
        rfp_id: str,
        category: str,
        candidate_id: str,
        notes: str = "",
        *,
        criteria: SelectionCriteria | Mapping[str, float] | None = None,
    ) -> SubcontractorSelection:
        """Record ``candidate_id`` as the choice for the category, replacing any prior one."""
        if self._config.strict and candidate_id not in self._by_id:
            raise NotFoundError("candidate", candidate_id)

        resolved = self._check_criteria(criteria or SelectionCriteria())
        alternates = [
            candidate.id
            for candidate in self.candidates_for_specialty(category)
            if candidate.id != candidate_id
        ]
        selection = SubcontractorSelection(
            rfp_id=rfp_id,
            category=category,
            selected_candidate_id=candidate_id,
            alternate_ids=alternates,
            criteria=resolved,
            status=SelectionStatus.SELECTED,
            notes=notes,
            last_updated=self._now_provider(),
        )
        previous = self._registry.record(selection)
        self._logger.info(
            "selection.recorded",
            rfp_id=rfp_id,
            category=category,
            candidate_id=candidate_id,
            superseded=previous.selected_candidate_id if previous else None,
        )
        return selection

    def selection_for(self, rfp_id: str, category: str) -> SubcontractorSelection | None:
        return self._registry.get(rfp_id, category)

    def selections_for_rfp(self, rfp_id: str) -> list[SubcontractorSelection]:
        return self._registry.for_rfp(rfp_id)

    def update_selection_status(
        self,
        rfp_id: str,
        category: str,
        status: SelectionStatus | str,
        *,
        notes: str | None = None,
    ) -> SubcontractorSelection | None:
        current = self._registry.get(rfp_id, category)
        if current is None:
            if self._config.strict:
                raise NotFoundError("selection", f"{rfp_id}/{category}")
            self._logger.warning("selection.unknown", rfp_id=rfp_id, category=category)
            return None
        updated = current.model_copy(
            update={
                "status": SelectionStatus(status),
                "notes": current.notes if notes is None else notes,
                "last_updated": self._now_provider(),
            }
        )
        self._registry.record(updated)
        return updated

    def _check_criteria(
        self,
        criteria: SelectionCriteria | Mapping[str, float],
    ) -> SelectionCriteria:
        resolved = (
            criteria
            if isinstance(criteria, SelectionCriteria)
            else SelectionCriteria.model_validate(criteria)
        )
        total = resolved.total
        expected = self._config.expected_weight_total
        if math.isclose(total, expected):
            return resolved
        if self._config.strict:
            raise InvalidWeightError(
                f"Selection criteria weights must sum to {expected:g}, got {total:g}"
            )
        self._logger.warning("partners.criteria_unbalanced", total=total, expected=expected)
        return resolved
