"""Document coverage matching for binder artifacts."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterable, Mapping, Sequence

import pendulum
import structlog

from ...rules import ARTIFACT_RULES
from ...schemas import ArtifactRule, CoverageMatch, DocumentRecord
from ._numeric import clamp

_SECONDS_PER_DAY = 86400.0


@dataclass
class CoverageConfig:
    """Score contributions for each matching signal."""

    tag_weight: float = 0.5
    type_weight: float = 0.3
    freshness_weight: float = 0.15
    undated_credit: float = 0.05
    unexpired_weight: float = 0.05
    fallback_confidence: float = 0.2


class CoverageMatcher:
    """Pick the document that best satisfies a named artifact requirement.

    Scoring is a pure function of ``(artifact, documents, now)``: the matcher
    holds no per-call state, so one instance may serve concurrent callers.
    """

    method = "coverage"

    def __init__(
        self,
        *,
        rules: Mapping[str, ArtifactRule] | None = None,
        config: CoverageConfig | None = None,
        now_provider: Callable[[], pendulum.DateTime] | None = None,
    ) -> None:
        self._rules = dict(ARTIFACT_RULES if rules is None else rules)
        self._config = config or CoverageConfig()
        self._now_provider = now_provider or pendulum.now
        self._logger = structlog.get_logger(__name__)

    @property
    def artifacts(self) -> list[str]:
        return list(self._rules)

    def rule_for(self, artifact: str) -> ArtifactRule | None:
        return self._rules.get(artifact)

    def match(
        self,
        artifact: str,
        documents: Iterable[DocumentRecord | Mapping[str, Any]],
        *,
        now: pendulum.DateTime | None = None,
    ) -> CoverageMatch:
        docs = _validate_documents(documents)
        as_of = _resolve_now(now, self._now_provider)
        rule = self._rules.get(artifact)
        if rule is None:
            return self._fallback(artifact, docs)

        best_score = 0.0
        best: CoverageMatch | None = None
        for doc in docs:
            score, reason = self.score(rule, doc, now=as_of)
            if score > best_score:
                best_score = score
                best = CoverageMatch(
                    artifact=artifact,
                    confidence=score,
                    source=doc.scope,
                    document=doc,
                    reason=reason,
                )

        if best is None:
            return CoverageMatch(
                artifact=artifact,
                confidence=0.0,
                reason="No matching documents" if docs else "No documents",
            )

        self._logger.debug(
            "coverage.matched",
            artifact=artifact,
            document_id=best.document.id if best.document else None,
            confidence=best.confidence,
            matched=best.matched,
        )
        return best

    def match_many(
        self,
        artifacts: Iterable[str],
        documents: Iterable[DocumentRecord | Mapping[str, Any]],
        *,
        now: pendulum.DateTime | None = None,
    ) -> list[CoverageMatch]:
        docs = _validate_documents(documents)
        as_of = _resolve_now(now, self._now_provider)
        # A document may satisfy any number of artifacts.
        return [self.match(artifact, docs, now=as_of) for artifact in artifacts]

    def score(
        self,
        rule: ArtifactRule,
        doc: DocumentRecord,
        *,
        now: pendulum.DateTime,
    ) -> tuple[float, str]:
        """Return the clamped confidence of ``doc`` for ``rule`` and the reason."""
        config = self._config
        score = 0.0

        tag_hit = bool(rule.tags & doc.tags)
        type_hit = not rule.types or doc.declared_type in rule.types
        if tag_hit:
            score += config.tag_weight
        if type_hit:
            score += config.type_weight

        # A zero max age counts as no age limit.
        if rule.max_age_days and doc.uploaded_at is not None:
            age_days = (now - doc.uploaded_at).total_seconds() / _SECONDS_PER_DAY
            if age_days <= rule.max_age_days:
                score += config.freshness_weight
        else:
            score += config.undated_credit

        if doc.expires_at is not None and doc.expires_at > now:
            score += config.unexpired_weight

        if tag_hit:
            reason = "Tag match"
        elif type_hit:
            reason = "Type match"
        else:
            reason = "Freshness/expiry"
        return round(clamp(score, 0.0, 1.0), 4), reason

    def _fallback(self, artifact: str, docs: Sequence[DocumentRecord]) -> CoverageMatch:
        self._logger.warning(
            "coverage.rule_missing",
            artifact=artifact,
            candidate_count=len(docs),
        )
        if not docs:
            return CoverageMatch(artifact=artifact, confidence=0.0, reason="No documents")
        first = docs[0]
        return CoverageMatch(
            artifact=artifact,
            confidence=self._config.fallback_confidence,
            source=first.scope,
            document=first,
            reason="No rule; best effort",
        )


def _validate_documents(
    documents: Iterable[DocumentRecord | Mapping[str, Any]],
) -> list[DocumentRecord]:
    return [
        doc if isinstance(doc, DocumentRecord) else DocumentRecord.model_validate(doc)
        for doc in documents
    ]


def _resolve_now(
    now: pendulum.DateTime | None,
    now_provider: Callable[[], pendulum.DateTime],
) -> pendulum.DateTime:
    return pendulum.instance(now if now is not None else now_provider())
