from __future__ import annotations

from proposalgate.core.evaluators import CompletionConfig, CompletionEvaluator
from proposalgate.schemas import ChecklistItem


def build_item(index: int, *, required: bool = True, completed: bool = False) -> ChecklistItem:
    return ChecklistItem(
        id=f"s-{index}",
        label=f"Item {index}",
        description=f"Complete item {index}",
        required=required,
        completed=completed,
    )


def test_required_items_alone_reach_eighty_percent():
    evaluator = CompletionEvaluator()
    items = [
        build_item(0, completed=True),
        build_item(1, completed=True),
        build_item(2, completed=True),
        build_item(3, required=False),
        build_item(4, required=False),
    ]

    score = evaluator.evaluate(items)

    assert score.overall_progress == 80
    assert score.can_proceed is True
    assert score.is_complete is False
    assert score.rationale == "3/3 required, 0/2 optional complete"


def test_optional_work_cannot_open_the_gate():
    evaluator = CompletionEvaluator()
    items = [
        build_item(0),
        build_item(1, completed=True),
        build_item(2, required=False, completed=True),
    ]

    score = evaluator.evaluate(items)

    assert score.overall_progress == 60
    assert score.can_proceed is False
    assert score.started is True


def test_rounding_is_half_to_even():
    evaluator = CompletionEvaluator()
    # 1/8 required -> 10.0, 1/8 optional -> 2.5
    items = [build_item(index, completed=index == 0) for index in range(8)]
    items += [build_item(10 + index, required=False, completed=index == 0) for index in range(8)]

    score = evaluator.evaluate(items)

    assert score.overall_progress == 12


def test_empty_groups_earn_full_weight():
    evaluator = CompletionEvaluator()

    only_optional = evaluator.evaluate([build_item(0, required=False)])
    only_required = evaluator.evaluate([build_item(0, completed=True)])
    empty = evaluator.evaluate([])

    assert only_optional.overall_progress == 80
    assert only_optional.can_proceed is True
    assert only_required.overall_progress == 100
    assert only_required.is_complete is True
    assert empty.overall_progress == 100


def test_custom_weights_apply():
    evaluator = CompletionEvaluator(config=CompletionConfig(required_weight=60, optional_weight=40))
    items = [build_item(0, completed=True), build_item(1, required=False)]

    score = evaluator.evaluate(items)

    assert score.overall_progress == 60
    assert score.can_proceed is True


def test_marking_more_required_items_never_lowers_progress():
    evaluator = CompletionEvaluator()
    items = [build_item(index) for index in range(4)] + [build_item(9, required=False, completed=True)]

    previous = evaluator.evaluate(items).overall_progress
    for item in items[:4]:
        item.completed = True
        current = evaluator.evaluate(items).overall_progress
        assert current >= previous
        previous = current

    assert previous == 100
