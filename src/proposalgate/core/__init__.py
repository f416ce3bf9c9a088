"""Core decision engine components."""

from __future__ import annotations

# NOTE: keep imports explicit for export clarity.
from .errors import DependencyNotMetError, EngineError, InvalidWeightError, NotFoundError
from .evaluators import (
    CandidateScorer,
    CompletionEvaluator,
    CoverageMatcher,
    ReadinessEvaluator,
)
from .gating import GatingConfig, GatingEngine
from .ranking import PartnerConfig, PartnerRanking, RankedCandidate, SelectionRegistry
from .store import DEFAULT_SESSION, InMemoryProgressStore, ProgressStore, SectionKey

__all__ = [
    "CandidateScorer",
    "CompletionEvaluator",
    "CoverageMatcher",
    "DEFAULT_SESSION",
    "DependencyNotMetError",
    "EngineError",
    "GatingConfig",
    "GatingEngine",
    "InMemoryProgressStore",
    "InvalidWeightError",
    "NotFoundError",
    "PartnerConfig",
    "PartnerRanking",
    "ProgressStore",
    "RankedCandidate",
    "ReadinessEvaluator",
    "SectionKey",
    "SelectionRegistry",
]
