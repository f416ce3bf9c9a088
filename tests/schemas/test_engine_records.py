from __future__ import annotations

import json
from datetime import datetime

import pendulum
import pytest
from pydantic import ValidationError

from proposalgate.schemas import (
    ArtifactRule,
    ChecklistItem,
    ConflictRisk,
    CoverageMatch,
    DocumentRecord,
    SelectionCriteria,
    SubcontractorCandidate,
)


def test_document_record_normalises_type_and_tags():
    doc = DocumentRecord.model_validate(
        {"id": "d1", "name": "Policy", "type": " PDF ", "tags": ["COI", "Insurance", ""]}
    )

    assert doc.declared_type == "pdf"
    assert doc.tags == frozenset({"coi", "insurance"})
    assert doc.scope.value == "company"


def test_naive_timestamps_are_treated_as_utc():
    doc = DocumentRecord(id="d1", name="Policy", uploaded_at=datetime(2025, 1, 1, 12, 0))

    assert doc.uploaded_at == pendulum.datetime(2025, 1, 1, 12, 0, tz="UTC")
    assert doc.uploaded_at.utcoffset().total_seconds() == 0


def test_document_record_rejects_unknown_fields():
    with pytest.raises(ValidationError):
        DocumentRecord.model_validate({"id": "d1", "name": "x", "owner": "someone"})


def test_artifact_rule_without_types_accepts_any_type():
    rule = ArtifactRule(tags=["Capabilities"], types=[])

    assert rule.types is None
    assert rule.tags == frozenset({"capabilities"})
    with pytest.raises(ValidationError):
        ArtifactRule(tags=["x"], max_age_days=-1)


def test_coverage_match_derives_matched_from_confidence():
    below = CoverageMatch(artifact="A", confidence=0.59, reason="Type match")
    at = CoverageMatch(artifact="A", confidence=0.6, reason="Tag match")

    assert below.matched is False
    assert at.matched is True
    assert at.model_dump()["matched"] is True
    with pytest.raises(ValidationError):
        CoverageMatch(artifact="A", confidence=1.2, reason="Tag match")


def test_selection_criteria_defaults_and_bounds():
    criteria = SelectionCriteria()

    assert (criteria.price, criteria.quality, criteria.schedule, criteria.experience) == (30, 40, 20, 10)
    assert criteria.total == 100
    with pytest.raises(ValidationError):
        SelectionCriteria(price=-1)
    with pytest.raises(ValidationError):
        SelectionCriteria(cost=10)


def test_candidate_requires_bounded_rating_and_rank():
    base = {"id": "c1", "name": "C", "type": "electrical", "pricing": {"competitive_rank": 1}}

    candidate = SubcontractorCandidate.model_validate({**base, "rating": 4.2})
    assert candidate.availability.conflict_risk is ConflictRisk.MEDIUM

    with pytest.raises(ValidationError):
        SubcontractorCandidate.model_validate({**base, "rating": 5.5})
    with pytest.raises(ValidationError):
        SubcontractorCandidate.model_validate({**base, "rating": 4.0, "pricing": {"competitive_rank": 0}})


def test_checklist_item_dumps_dependencies_sorted():
    item = ChecklistItem(
        id="review-5",
        label="Submit",
        description="Submit proposal",
        dependencies={"review-3", "review-0", "review-2", "review-1"},
    )

    assert item.model_dump(mode="json")["dependencies"] == ["review-0", "review-1", "review-2", "review-3"]
    assert json.loads(item.model_dump_json())["dependencies"] == ["review-0", "review-1", "review-2", "review-3"]
