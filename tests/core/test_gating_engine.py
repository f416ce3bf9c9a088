from __future__ import annotations

import pytest

from proposalgate.core import (
    DependencyNotMetError,
    GatingConfig,
    GatingEngine,
    InMemoryProgressStore,
    SectionKey,
)
from proposalgate.schemas import (
    ChecklistItemTemplate,
    ItemStatus,
    SectionStatus,
    SectionTemplate,
)


def build_engine(**config) -> GatingEngine:
    return GatingEngine(config=GatingConfig(**config))


def test_overview_required_items_open_gate_at_eighty():
    engine = build_engine()
    progress = engine.initialize_section("overview")

    assert len(progress.checklist) == 5
    assert sum(1 for item in progress.checklist if item.required) == 3

    for item_id in ("overview-0", "overview-1", "overview-2"):
        progress = engine.update_checklist_item("overview", item_id, True)

    assert progress.overall_progress == 80
    assert progress.can_proceed is True
    assert progress.is_complete is False
    assert progress.status is SectionStatus.COMPLETE


def test_template_items_get_positional_ids_and_resolved_dependencies():
    engine = build_engine()
    progress = engine.initialize_section("overview")

    ids = [item.id for item in progress.checklist]
    assert ids == [f"overview-{index}" for index in range(5)]
    assert progress.checklist[1].dependencies == {"overview-0"}
    assert progress.checklist[0].dependencies == set()


def test_initialize_is_idempotent():
    engine = build_engine()
    engine.initialize_section("overview")
    engine.update_checklist_item("overview", "overview-2", True)

    again = engine.initialize_section("overview")

    assert next(item for item in again.checklist if item.id == "overview-2").completed is True
    assert again.overall_progress == 27


def test_progress_is_monotonic_over_required_items():
    engine = build_engine()
    previous = engine.initialize_section("pricing").overall_progress
    required_ids = [item.id for item in engine.initialize_section("pricing").checklist if item.required]

    for item_id in required_ids:
        current = engine.update_checklist_item("pricing", item_id, True).overall_progress
        assert current >= previous
        previous = current

    assert previous == 80


def test_can_complete_item_reflects_dependencies():
    engine = build_engine()
    engine.initialize_section("overview")

    assert engine.can_complete_item("overview", "overview-0") is True
    assert engine.can_complete_item("overview", "overview-1") is False
    assert engine.item_status("overview", "overview-1") is ItemStatus.LOCKED

    engine.update_checklist_item("overview", "overview-0", True)

    assert engine.can_complete_item("overview", "overview-1") is True
    assert engine.item_status("overview", "overview-1") is ItemStatus.AVAILABLE
    assert engine.item_status("overview", "overview-0") is ItemStatus.COMPLETE


def test_update_does_not_block_out_of_order_completion_by_default():
    engine = build_engine()

    progress = engine.update_checklist_item("overview", "overview-1", True)

    item = next(item for item in progress.checklist if item.id == "overview-1")
    assert item.completed is True
    assert engine.can_complete_item("overview", "overview-0") is True


def test_strict_mode_rejects_unmet_dependencies():
    engine = build_engine(enforce_dependencies=True)

    with pytest.raises(DependencyNotMetError) as excinfo:
        engine.update_checklist_item("overview", "overview-1", True)

    assert excinfo.value.missing == ["overview-0"]
    progress = engine.initialize_section("overview")
    assert not any(item.completed for item in progress.checklist)


def test_strict_mode_allows_unchecking_items():
    engine = build_engine(enforce_dependencies=True)
    engine.update_checklist_item("overview", "overview-0", True)
    engine.update_checklist_item("overview", "overview-1", True)

    progress = engine.update_checklist_item("overview", "overview-0", False)

    assert progress.item_statuses["overview-0"] is ItemStatus.AVAILABLE
    assert progress.item_statuses["overview-1"] is ItemStatus.COMPLETE


def test_automatic_item_cascades_one_level():
    engine = build_engine()

    progress = engine.update_checklist_item("compliance", "compliance-0", True)

    completed = {item.id for item in progress.checklist if item.completed}
    assert completed == {"compliance-0", "compliance-1"}
    assert progress.overall_progress == 53
    assert progress.can_proceed is False
    assert progress.status is SectionStatus.IN_PROGRESS


def test_manual_item_does_not_cascade():
    engine = build_engine()

    progress = engine.update_checklist_item("overview", "overview-0", True)

    completed = {item.id for item in progress.checklist if item.completed}
    assert completed == {"overview-0"}


def test_batch_update_matches_sequential_updates():
    updates = [
        {"item_id": "overview-0", "completed": True},
        {"item_id": "overview-2", "completed": True},
        {"item_id": "overview-3", "completed": True},
    ]
    sequential = build_engine()
    for update in updates:
        expected = sequential.update_checklist_item("overview", update["item_id"], update["completed"])

    batched = build_engine().batch_update("overview", updates)

    assert batched.overall_progress == expected.overall_progress == 63
    assert batched.can_proceed == expected.can_proceed
    assert [item.completed for item in batched.checklist] == [
        item.completed for item in expected.checklist
    ]


def test_batch_update_skips_cascades_and_unknown_items():
    engine = build_engine()

    progress = engine.batch_update(
        "compliance",
        [
            {"item_id": "compliance-0", "completed": True},
            {"item_id": "compliance-99", "completed": True},
        ],
    )

    completed = {item.id for item in progress.checklist if item.completed}
    assert completed == {"compliance-0"}


def test_strict_batch_checks_dependencies_against_final_state():
    engine = build_engine(enforce_dependencies=True)

    progress = engine.batch_update(
        "overview",
        [
            {"item_id": "overview-1", "completed": True},
            {"item_id": "overview-0", "completed": True},
        ],
    )
    assert progress.item_statuses["overview-1"] is ItemStatus.COMPLETE

    other = build_engine(enforce_dependencies=True)
    with pytest.raises(DependencyNotMetError):
        other.batch_update("overview", [{"item_id": "overview-1", "completed": True}])
    assert other.initialize_section("overview").overall_progress == 0


def test_unknown_item_is_a_logged_no_op():
    engine = build_engine()
    before = engine.initialize_section("overview")

    after = engine.update_checklist_item("overview", "missing", True)

    assert after.overall_progress == before.overall_progress
    assert [item.completed for item in after.checklist] == [False] * 5
    assert engine.can_complete_item("overview", "missing") is True
    assert engine.item_status("overview", "missing") is None


def test_unknown_section_falls_back_to_default_template():
    engine = build_engine()

    progress = engine.initialize_section("mystery")

    assert progress.section_id == "mystery"
    assert progress.title == "RFP Overview & Analysis"
    assert [item.id for item in progress.checklist][:2] == ["mystery-0", "mystery-1"]
    assert progress.checklist[1].dependencies == {"mystery-0"}
    assert progress.status is SectionStatus.AVAILABLE


def test_next_incomplete_item_skips_optional_items():
    engine = build_engine()
    engine.update_checklist_item("overview", "overview-0", True)

    item = engine.next_incomplete_item("overview")
    assert item is not None and item.id == "overview-1"

    engine.update_checklist_item("overview", "overview-1", True)
    engine.update_checklist_item("overview", "overview-2", True)
    assert engine.next_incomplete_item("overview") is None


def test_sessions_are_isolated():
    store = InMemoryProgressStore()
    engine = GatingEngine(store=store)

    engine.update_checklist_item("overview", "overview-0", True, session_id="alice")
    bob = engine.initialize_section("overview", session_id="bob")

    assert not any(item.completed for item in bob.checklist)
    assert store.sessions() == ["alice", "bob"]
    assert store.get(SectionKey("alice", "overview")).checklist[0].completed is True


def test_returned_snapshot_does_not_alias_stored_state():
    engine = build_engine()
    progress = engine.initialize_section("overview")

    progress.checklist[0].completed = True

    assert engine.initialize_section("overview").overall_progress == 0


def test_journey_unlocks_next_section_at_threshold():
    engine = build_engine()

    statuses = {entry.section_id: entry.status for entry in engine.journey()}
    assert statuses["overview"] is SectionStatus.AVAILABLE
    assert statuses["gap-analysis"] is SectionStatus.LOCKED

    for item_id in ("overview-0", "overview-1", "overview-2"):
        engine.update_checklist_item("overview", item_id, True)

    journey = engine.journey()
    assert [entry.section_id for entry in journey] == list(engine.journey_order)
    statuses = {entry.section_id: entry.status for entry in journey}
    assert statuses["overview"] is SectionStatus.COMPLETE
    assert statuses["gap-analysis"] is SectionStatus.AVAILABLE
    assert statuses["instructions"] is SectionStatus.LOCKED


def test_journey_does_not_open_sections():
    store = InMemoryProgressStore()
    engine = GatingEngine(store=store)

    engine.journey()

    assert len(store) == 0


def test_custom_templates_and_threshold():
    templates = {
        "first": SectionTemplate(
            title="First",
            description="",
            next_section="second",
            checklist=[
                ChecklistItemTemplate(key="a", label="A"),
                ChecklistItemTemplate(key="b", label="B"),
            ],
        ),
        "second": SectionTemplate(
            title="Second",
            description="",
            checklist=[ChecklistItemTemplate(key="c", label="C", depends_on=["unknown"])],
        ),
    }
    engine = GatingEngine(
        templates=templates,
        journey=["first", "second"],
        config=GatingConfig(fallback_section="first", unlock_threshold=40),
    )

    progress = engine.update_checklist_item("first", "first-0", True)
    assert progress.overall_progress == 60
    assert progress.checklist[0].description == "Complete a"

    second = engine.initialize_section("second")
    assert second.status is SectionStatus.AVAILABLE
    assert engine.can_complete_item("second", "second-0") is False


def build_cascade_engine(**config) -> GatingEngine:
    templates = {
        "s": SectionTemplate(
            title="Cascade",
            description="",
            checklist=[
                ChecklistItemTemplate(key="a", label="A", action_kind="automatic"),
                ChecklistItemTemplate(key="b", label="B"),
                ChecklistItemTemplate(key="c", label="C", depends_on=["a", "b"]),
            ],
        )
    }
    return GatingEngine(templates=templates, journey=["s"], config=GatingConfig(fallback_section="s", **config))


def test_strict_cascade_skips_dependents_with_other_unmet_dependencies():
    engine = build_cascade_engine(enforce_dependencies=True)

    progress = engine.update_checklist_item("s", "s-0", True)

    completed = {item.id: item.completed for item in progress.checklist}
    assert completed == {"s-0": True, "s-1": False, "s-2": False}
    assert progress.item_statuses["s-2"] is ItemStatus.LOCKED


def test_strict_cascade_completes_dependents_once_other_dependencies_are_met():
    engine = build_cascade_engine(enforce_dependencies=True)
    engine.update_checklist_item("s", "s-1", True)

    progress = engine.update_checklist_item("s", "s-0", True)

    assert all(item.completed for item in progress.checklist)


def test_lenient_cascade_completes_every_direct_dependent():
    engine = build_cascade_engine()

    progress = engine.update_checklist_item("s", "s-0", True)

    completed = {item.id: item.completed for item in progress.checklist}
    assert completed == {"s-0": True, "s-1": False, "s-2": True}
