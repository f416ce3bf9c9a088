"""Static rule tables consumed by the scoring primitives."""

from __future__ import annotations

from .artifacts import ARTIFACT_RULES
from .partners import CANDIDATE_POOL
from .readiness import RECOMMENDED_DOCS
from .sections import DEFAULT_SECTION, JOURNEY_ORDER, SECTION_TEMPLATES

__all__ = [
    "ARTIFACT_RULES",
    "CANDIDATE_POOL",
    "DEFAULT_SECTION",
    "JOURNEY_ORDER",
    "RECOMMENDED_DOCS",
    "SECTION_TEMPLATES",
]
