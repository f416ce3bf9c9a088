"""Scoring primitives for the decision engine."""

from .candidate import CandidateScore, CandidateScorer, CandidateScoringConfig
from .completion import CompletionConfig, CompletionEvaluator, CompletionScore
from .coverage import CoverageConfig, CoverageMatcher
from .readiness import ReadinessConfig, ReadinessEvaluator

__all__ = [
    "CandidateScore",
    "CandidateScorer",
    "CandidateScoringConfig",
    "CompletionConfig",
    "CompletionEvaluator",
    "CompletionScore",
    "CoverageConfig",
    "CoverageMatcher",
    "ReadinessConfig",
    "ReadinessEvaluator",
]
