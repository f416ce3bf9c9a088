"""Company readiness scoring over recommended documents."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Mapping, Sequence

from ...rules import RECOMMENDED_DOCS
from ...schemas import (
    DocumentRecord,
    PhaseStatus,
    ReadinessEntry,
    ReadinessReport,
    ReadinessRule,
)
from ._numeric import clamp


@dataclass
class ReadinessConfig:
    required_default_weight: int = 3
    optional_default_weight: int = 2
    locked_margin: int = 15
    complete_margin: int = 25


class ReadinessEvaluator:
    """Weighted share of recommended company documents on file."""

    method = "readiness"

    def __init__(
        self,
        *,
        rules: Sequence[ReadinessRule] | None = None,
        config: ReadinessConfig | None = None,
    ) -> None:
        self._rules = tuple(RECOMMENDED_DOCS if rules is None else rules)
        self._config = config or ReadinessConfig()

    def evaluate(
        self,
        documents: Iterable[DocumentRecord | Mapping[str, Any]],
    ) -> ReadinessReport:
        docs = [
            doc if isinstance(doc, DocumentRecord) else DocumentRecord.model_validate(doc)
            for doc in documents
        ]
        breakdown: list[ReadinessEntry] = []
        total = 0
        achieved = 0
        for rule in self._rules:
            weight = self._weight(rule)
            hit = next((doc for doc in docs if self._satisfies(rule, doc)), None)
            total += weight
            if hit is not None:
                achieved += weight
            breakdown.append(
                ReadinessEntry(
                    key=rule.key,
                    label=rule.label,
                    completed=hit is not None,
                    required=rule.required,
                    weight=weight,
                    document_id=hit.id if hit else None,
                    reason=None if hit else f"Add {rule.label}",
                )
            )

        score = int(clamp(round(achieved / total * 100), 0, 100)) if total else 0
        return ReadinessReport(
            score=score,
            total_weight=total,
            achieved_weight=achieved,
            breakdown=breakdown,
            missing_keys=[entry.key for entry in breakdown if not entry.completed],
            missing_required=[
                entry.key for entry in breakdown if entry.required and not entry.completed
            ],
        )

    def phase_status(self, readiness: float, phase_minimum: float) -> PhaseStatus:
        if readiness < phase_minimum - self._config.locked_margin:
            return PhaseStatus.LOCKED
        if readiness < phase_minimum:
            return PhaseStatus.AVAILABLE
        if readiness < phase_minimum + self._config.complete_margin:
            return PhaseStatus.IN_PROGRESS
        return PhaseStatus.COMPLETE

    def _weight(self, rule: ReadinessRule) -> int:
        if rule.weight is not None:
            return rule.weight
        if rule.required:
            return self._config.required_default_weight
        return self._config.optional_default_weight

    @staticmethod
    def _satisfies(rule: ReadinessRule, doc: DocumentRecord) -> bool:
        haystacks = [doc.declared_type, doc.name.lower()]
        if rule.doc_type and rule.doc_type.lower() in doc.declared_type:
            return True
        for tag in rule.tags:
            needle = tag.lower()
            if any(needle in text for text in haystacks):
                return True
            if any(needle in doc_tag for doc_tag in doc.tags):
                return True
        return False
