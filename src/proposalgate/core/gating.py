"""Checklist progress tracking and section gating."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Mapping, Sequence

import structlog

from ..rules import DEFAULT_SECTION, JOURNEY_ORDER, SECTION_TEMPLATES
from ..schemas import (
    ActionKind,
    ChecklistItem,
    ChecklistUpdate,
    ItemStatus,
    SectionProgress,
    SectionState,
    SectionStatus,
    SectionTemplate,
)
from .errors import DependencyNotMetError
from .evaluators import CompletionEvaluator, CompletionScore
from .store import DEFAULT_SESSION, InMemoryProgressStore, ProgressStore, SectionKey


@dataclass
class GatingConfig:
    """Gating policy.

    ``enforce_dependencies`` turns the dependency check from advisory into a
    hard rule inside the mutators. ``unlock_threshold`` is the progress the
    previous journey section needs before the next one becomes available.
    """

    enforce_dependencies: bool = False
    fallback_section: str = DEFAULT_SECTION
    unlock_threshold: int = 70


class GatingEngine:
    """Owns per-session checklist state and decides section advancement.

    Only item ``completed`` flags are stored. Progress, gate and status
    values are recomputed from the checklist on every read and after every
    mutation, so they cannot drift from it.
    """

    def __init__(
        self,
        *,
        templates: Mapping[str, SectionTemplate] | None = None,
        journey: Sequence[str] | None = None,
        store: ProgressStore | None = None,
        evaluator: CompletionEvaluator | None = None,
        config: GatingConfig | None = None,
    ) -> None:
        self._templates = dict(SECTION_TEMPLATES if templates is None else templates)
        self._journey = tuple(JOURNEY_ORDER if journey is None else journey)
        self._store = store if store is not None else InMemoryProgressStore()
        self._evaluator = evaluator or CompletionEvaluator()
        self._config = config or GatingConfig()
        self._logger = structlog.get_logger(__name__)

    @property
    def journey_order(self) -> tuple[str, ...]:
        return self._journey

    def initialize_section(
        self,
        section_id: str,
        *,
        session_id: str = DEFAULT_SESSION,
    ) -> SectionProgress:
        """Instantiate the section from its template unless state already exists."""
        state = self._load(section_id, session_id)
        return self._snapshot(state, session_id)

    def can_complete_item(
        self,
        section_id: str,
        item_id: str,
        *,
        session_id: str = DEFAULT_SESSION,
    ) -> bool:
        state = self._load(section_id, session_id)
        item = _find(state, item_id)
        if item is None:
            self._log_unknown_item(section_id, item_id, session_id)
            return True
        return not _missing_dependencies(item, _completed_ids(state))

    def item_status(
        self,
        section_id: str,
        item_id: str,
        *,
        session_id: str = DEFAULT_SESSION,
    ) -> ItemStatus | None:
        state = self._load(section_id, session_id)
        item = _find(state, item_id)
        if item is None:
            self._log_unknown_item(section_id, item_id, session_id)
            return None
        return _item_status(item, _completed_ids(state))

    def next_incomplete_item(
        self,
        section_id: str,
        *,
        session_id: str = DEFAULT_SESSION,
    ) -> ChecklistItem | None:
        state = self._load(section_id, session_id)
        return next(
            (item for item in state.checklist if item.required and not item.completed),
            None,
        )

    def update_checklist_item(
        self,
        section_id: str,
        item_id: str,
        completed: bool,
        *,
        session_id: str = DEFAULT_SESSION,
    ) -> SectionProgress:
        state = self._load(section_id, session_id)
        item = _find(state, item_id)
        if item is None:
            self._log_unknown_item(section_id, item_id, session_id)
            return self._snapshot(state, session_id)

        if completed:
            self._check_dependencies(state, item, _completed_ids(state))

        item.completed = completed
        cascaded: list[str] = []
        if completed and item.action_kind is ActionKind.AUTOMATIC:
            cascaded = self._cascade(state, item)

        self._save(state, session_id)
        progress = self._snapshot(state, session_id)
        self._logger.info(
            "checklist.updated",
            session_id=session_id,
            section_id=section_id,
            item_id=item_id,
            completed=completed,
            cascaded=cascaded,
            overall_progress=progress.overall_progress,
            can_proceed=progress.can_proceed,
        )
        return progress

    def batch_update(
        self,
        section_id: str,
        updates: Iterable[ChecklistUpdate | Mapping[str, Any]],
        *,
        session_id: str = DEFAULT_SESSION,
    ) -> SectionProgress:
        """Apply every update, then recompute once. No automatic cascades run."""
        state = self._load(section_id, session_id)
        by_id = {item.id: item for item in state.checklist}

        applicable: list[ChecklistUpdate] = []
        skipped: list[str] = []
        for raw in updates:
            update = raw if isinstance(raw, ChecklistUpdate) else ChecklistUpdate.model_validate(raw)
            if update.item_id not in by_id:
                self._log_unknown_item(section_id, update.item_id, session_id)
                skipped.append(update.item_id)
                continue
            applicable.append(update)

        final_completed = _completed_ids(state)
        for update in applicable:
            if update.completed:
                final_completed.add(update.item_id)
            else:
                final_completed.discard(update.item_id)
        for update in applicable:
            if update.completed:
                self._check_dependencies(state, by_id[update.item_id], final_completed)

        for update in applicable:
            by_id[update.item_id].completed = update.completed

        self._save(state, session_id)
        progress = self._snapshot(state, session_id)
        self._logger.info(
            "checklist.batch_updated",
            session_id=session_id,
            section_id=section_id,
            applied=len(applicable),
            skipped=skipped,
            overall_progress=progress.overall_progress,
            can_proceed=progress.can_proceed,
        )
        return progress

    def journey(self, *, session_id: str = DEFAULT_SESSION) -> list[SectionProgress]:
        """Snapshot every journey section in order without opening new ones."""
        return [
            self._snapshot(self._peek(section_id, session_id), session_id)
            for section_id in self._journey
        ]

    def _load(self, section_id: str, session_id: str) -> SectionState:
        key = SectionKey(session_id, section_id)
        state = self._store.get(key)
        if state is None:
            state = self._instantiate(section_id)
            self._store.put(key, state)
            self._logger.info(
                "section.initialized",
                session_id=session_id,
                section_id=section_id,
                template_id=state.template_id,
                item_count=len(state.checklist),
            )
        return state

    def _peek(self, section_id: str, session_id: str) -> SectionState:
        state = self._store.get(SectionKey(session_id, section_id))
        return state if state is not None else self._instantiate(section_id)

    def _save(self, state: SectionState, session_id: str) -> None:
        self._store.put(SectionKey(session_id, state.section_id), state)

    def _instantiate(self, section_id: str) -> SectionState:
        template_id = section_id
        if section_id not in self._templates:
            template_id = self._config.fallback_section
            self._logger.warning(
                "section.template_fallback",
                section_id=section_id,
                template_id=template_id,
            )
        template = self._templates[template_id]
        ids = {entry.key: f"{section_id}-{index}" for index, entry in enumerate(template.checklist)}
        checklist = [
            ChecklistItem(
                id=ids[entry.key],
                label=entry.label,
                description=entry.description or f"Complete {entry.label.lower()}",
                required=entry.required,
                dependencies={ids.get(key, key) for key in entry.depends_on},
                action_kind=entry.action_kind,
                action_label=entry.action_label,
                action_url=entry.action_url,
                estimated_effort=entry.estimated_effort,
                help_text=entry.help_text,
            )
            for entry in template.checklist
        ]
        return SectionState(section_id=section_id, template_id=template_id, checklist=checklist)

    def _snapshot(self, state: SectionState, session_id: str) -> SectionProgress:
        score = self._evaluator.evaluate(state.checklist)
        template = self._templates[state.template_id]
        completed_ids = _completed_ids(state)
        return SectionProgress(
            section_id=state.section_id,
            title=template.title,
            description=template.description,
            next_section=template.next_section,
            checklist=state.checklist,
            overall_progress=score.overall_progress,
            is_complete=score.is_complete,
            can_proceed=score.can_proceed,
            status=self._section_status(state.section_id, score, session_id),
            item_statuses={
                item.id: _item_status(item, completed_ids) for item in state.checklist
            },
        )

    def _section_status(
        self,
        section_id: str,
        score: CompletionScore,
        session_id: str,
    ) -> SectionStatus:
        if score.can_proceed:
            return SectionStatus.COMPLETE
        if score.started:
            return SectionStatus.IN_PROGRESS
        if self._is_unlocked(section_id, session_id):
            return SectionStatus.AVAILABLE
        return SectionStatus.LOCKED

    def _is_unlocked(self, section_id: str, session_id: str) -> bool:
        if section_id not in self._journey:
            return True
        index = self._journey.index(section_id)
        if index == 0:
            return True
        previous = self._peek(self._journey[index - 1], session_id)
        previous_score = self._evaluator.evaluate(previous.checklist)
        return previous_score.overall_progress >= self._config.unlock_threshold

    def _check_dependencies(
        self,
        state: SectionState,
        item: ChecklistItem,
        completed_ids: set[str],
    ) -> None:
        missing = _missing_dependencies(item, completed_ids)
        if not missing:
            return
        if self._config.enforce_dependencies:
            raise DependencyNotMetError(state.section_id, item.id, missing)
        self._logger.warning(
            "checklist.dependencies_bypassed",
            section_id=state.section_id,
            item_id=item.id,
            missing=missing,
        )

    def _cascade(self, state: SectionState, trigger: ChecklistItem) -> list[str]:
        """Complete the direct dependents of ``trigger``; one level only.

        With ``enforce_dependencies`` a dependent is completed only when its
        other dependencies are already complete.
        """
        dependents = [
            item
            for item in state.checklist
            if item.id != trigger.id and trigger.id in item.dependencies and not item.completed
        ]
        completed_ids = _completed_ids(state)
        cascaded: list[str] = []
        for item in dependents:
            missing = _missing_dependencies(item, completed_ids)
            if missing and self._config.enforce_dependencies:
                self._logger.warning(
                    "checklist.cascade_skipped",
                    section_id=state.section_id,
                    item_id=item.id,
                    trigger_id=trigger.id,
                    missing=missing,
                )
                continue
            item.completed = True
            cascaded.append(item.id)
        return cascaded

    def _log_unknown_item(self, section_id: str, item_id: str, session_id: str) -> None:
        self._logger.warning(
            "checklist.unknown_item",
            session_id=session_id,
            section_id=section_id,
            item_id=item_id,
        )


def _find(state: SectionState, item_id: str) -> ChecklistItem | None:
    return next((item for item in state.checklist if item.id == item_id), None)


def _completed_ids(state: SectionState) -> set[str]:
    return {item.id for item in state.checklist if item.completed}


def _missing_dependencies(item: ChecklistItem, completed_ids: set[str]) -> list[str]:
    return sorted(item.dependencies - completed_ids)


def _item_status(item: ChecklistItem, completed_ids: set[str]) -> ItemStatus:
    if item.completed:
        return ItemStatus.COMPLETE
    if _missing_dependencies(item, completed_ids):
        return ItemStatus.LOCKED
    return ItemStatus.AVAILABLE

