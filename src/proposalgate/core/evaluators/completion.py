"""Weighted checklist completion scoring."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from ...schemas import ChecklistItem


@dataclass
class CompletionConfig:
    """Share of the percentage earned by required and optional items."""

    required_weight: float = 80.0
    optional_weight: float = 20.0


@dataclass(slots=True)
class CompletionScore:
    """Completion percentage and gate decision for a checklist."""

    overall_progress: int
    can_proceed: bool
    required_total: int
    required_completed: int
    optional_total: int
    optional_completed: int
    rationale: str

    @property
    def is_complete(self) -> bool:
        return self.overall_progress == 100

    @property
    def started(self) -> bool:
        return self.required_completed > 0


class CompletionEvaluator:
    """Score a checklist: required work dominates, optional work tops it up."""

    method = "completion"

    def __init__(self, *, config: CompletionConfig | None = None) -> None:
        self._config = config or CompletionConfig()

    def evaluate(self, items: Iterable[ChecklistItem]) -> CompletionScore:
        items = list(items)
        required = [item for item in items if item.required]
        optional = [item for item in items if not item.required]
        required_done = sum(1 for item in required if item.completed)
        optional_done = sum(1 for item in optional if item.completed)

        required_score = self._share(required_done, len(required), self._config.required_weight)
        optional_score = self._share(optional_done, len(optional), self._config.optional_weight)
        overall = min(max(round(required_score + optional_score), 0), 100)
        can_proceed = required_done == len(required)

        return CompletionScore(
            overall_progress=overall,
            can_proceed=can_proceed,
            required_total=len(required),
            required_completed=required_done,
            optional_total=len(optional),
            optional_completed=optional_done,
            rationale=(
                f"{required_done}/{len(required)} required, "
                f"{optional_done}/{len(optional)} optional complete"
            ),
        )

    @staticmethod
    def _share(done: int, total: int, weight: float) -> float:
        # An empty group earns its full weight.
        if total == 0:
            return weight
        return done / total * weight
