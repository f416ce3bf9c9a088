from __future__ import annotations

import pendulum
import pytest
from pydantic import ValidationError

from proposalgate.core import (
    InvalidWeightError,
    NotFoundError,
    PartnerConfig,
    PartnerRanking,
    SelectionRegistry,
)
from proposalgate.rules import CANDIDATE_POOL
from proposalgate.schemas import SelectionCriteria, SelectionStatus

FIXED_NOW = pendulum.datetime(2025, 3, 14, 9, 30, tz="UTC")


def build_ranking(**config) -> PartnerRanking:
    return PartnerRanking(config=PartnerConfig(**config), now_provider=lambda: FIXED_NOW)


def test_candidates_for_specialty_sorted_by_recommendation():
    ranking = build_ranking()

    candidates = ranking.candidates_for_specialty("Electrical")

    assert [candidate.id for candidate in candidates] == ["sub-elec-001", "sub-elec-002", "sub-elec-003"]
    assert [candidate.recommendation_score for candidate in candidates] == [95, 72, 58]


def test_specialty_matches_substring_of_tags_or_exact_type():
    ranking = build_ranking()

    controls = ranking.candidates_for_specialty("controls")
    hvac = ranking.candidates_for_specialty("HVAC")

    assert [candidate.id for candidate in controls] == ["sub-hvac-001", "sub-elec-001", "sub-elec-003"]
    assert [candidate.id for candidate in hvac][0] == "sub-hvac-001"


def test_recommend_returns_top_candidate_or_none():
    ranking = build_ranking()

    assert ranking.recommend("plumbing").id == "sub-plmb-001"
    assert ranking.recommend("roofing") is None
    assert ranking.candidates_for_specialty("roofing") == []


def test_rank_orders_by_dynamic_score():
    ranking = build_ranking()

    ranked = ranking.rank("electrical", SelectionCriteria())

    assert [entry.position for entry in ranked] == [1, 2, 3]
    assert [entry.candidate.id for entry in ranked] == ["sub-elec-001", "sub-elec-002", "sub-elec-003"]
    assert [entry.score.total for entry in ranked] == [87, 69, 51]


def test_rank_can_diverge_from_static_order():
    ranking = build_ranking()

    ranked = ranking.rank("controls", {"price": 0, "quality": 0, "schedule": 100, "experience": 0})

    # hvac and elec-001 tie on schedule; static order is kept
    assert [entry.candidate.id for entry in ranked] == ["sub-hvac-001", "sub-elec-001", "sub-elec-003"]
    assert [entry.score.total for entry in ranked] == [100, 100, 40]


def test_score_candidate_accepts_plain_mapping():
    ranking = build_ranking()
    candidate = ranking.get_candidate("sub-hvac-001")

    assert ranking.score_candidate(candidate, {"price": 30, "quality": 40, "schedule": 20, "experience": 10}) == 88


def test_negative_weights_are_rejected():
    ranking = build_ranking()

    with pytest.raises(ValidationError):
        ranking.score_candidate(CANDIDATE_POOL[0], {"price": -10, "quality": 110})


def test_unbalanced_weights_are_tolerated_unless_strict():
    lenient = build_ranking()
    strict = build_ranking(strict=True)
    criteria = {"price": 50, "quality": 50, "schedule": 50, "experience": 50}

    assert lenient.score_candidate(CANDIDATE_POOL[0], criteria) == 166
    with pytest.raises(InvalidWeightError):
        strict.score_candidate(CANDIDATE_POOL[0], criteria)
    with pytest.raises(InvalidWeightError):
        strict.score_candidate(CANDIDATE_POOL[0], {"price": 0, "quality": 0, "schedule": 0, "experience": 0})


def test_compare_orders_subset_and_skips_unknown_ids():
    ranking = build_ranking()

    compared = ranking.compare(["sub-elec-003", "missing", "sub-elec-001"])

    assert [candidate.id for candidate in compared] == ["sub-elec-001", "sub-elec-003"]


def test_strict_compare_raises_for_unknown_ids():
    ranking = build_ranking(strict=True)

    with pytest.raises(NotFoundError) as excinfo:
        ranking.compare(["sub-elec-001", "missing"])

    assert excinfo.value.identifier == "missing"


def test_select_records_selection_with_defaults():
    ranking = build_ranking()

    selection = ranking.select("RFP-001", "electrical", "sub-elec-002", "Best value")

    assert selection.status is SelectionStatus.SELECTED
    assert selection.selected_candidate_id == "sub-elec-002"
    assert selection.alternate_ids == ["sub-elec-001", "sub-elec-003"]
    assert selection.criteria == SelectionCriteria(price=30, quality=40, schedule=20, experience=10)
    assert selection.last_updated == FIXED_NOW
    assert ranking.selection_for("RFP-001", "electrical") == selection


def test_new_selection_supersedes_previous_one():
    registry = SelectionRegistry()
    ranking = PartnerRanking(registry=registry, now_provider=lambda: FIXED_NOW)

    ranking.select("RFP-001", "electrical", "sub-elec-002")
    ranking.select("RFP-001", "electrical", "sub-elec-001")
    ranking.select("RFP-001", "hvac", "sub-hvac-001")
    ranking.select("RFP-002", "electrical", "sub-elec-003")

    assert ranking.selection_for("RFP-001", "electrical").selected_candidate_id == "sub-elec-001"
    assert [selection.category for selection in ranking.selections_for_rfp("RFP-001")] == ["electrical", "hvac"]
    assert registry.get("RFP-002", "electrical").selected_candidate_id == "sub-elec-003"


def test_lenient_select_accepts_unknown_candidate():
    ranking = build_ranking()

    selection = ranking.select("RFP-001", "electrical", "sub-ghost-999")

    assert selection.selected_candidate_id == "sub-ghost-999"


def test_strict_select_rejects_unknown_candidate():
    ranking = build_ranking(strict=True)

    with pytest.raises(NotFoundError):
        ranking.select("RFP-001", "electrical", "sub-ghost-999")
    assert ranking.selection_for("RFP-001", "electrical") is None


def test_update_selection_status():
    ranking = build_ranking()
    ranking.select("RFP-001", "electrical", "sub-elec-001", "Initial")

    updated = ranking.update_selection_status("RFP-001", "electrical", "contracted")

    assert updated.status is SelectionStatus.CONTRACTED
    assert updated.notes == "Initial"
    assert ranking.selection_for("RFP-001", "electrical").status is SelectionStatus.CONTRACTED
    assert ranking.update_selection_status("RFP-404", "electrical", "contracted") is None
    with pytest.raises(NotFoundError):
        build_ranking(strict=True).update_selection_status("RFP-404", "electrical", "contracted")


def test_custom_pool_from_plain_records():
    ranking = PartnerRanking(
        pool=[
            {
                "id": "sub-roof-001",
                "name": "Levee Roofing",
                "type": "roofing",
                "rating": 4.0,
                "pricing": {"competitive_rank": 2},
                "recommendation_score": 70,
            }
        ]
    )

    assert ranking.recommend("roofing").name == "Levee Roofing"
    assert len(ranking.pool) == 1
