"""Checklist state storage keyed by session and section."""

from __future__ import annotations

from typing import NamedTuple, Protocol, runtime_checkable

from ..schemas import SectionState

DEFAULT_SESSION = "default"


class SectionKey(NamedTuple):
    session_id: str
    section_id: str


@runtime_checkable
class ProgressStore(Protocol):
    """Key-value store for section state with last-write-wins semantics."""

    def get(self, key: SectionKey) -> SectionState | None:
        """Return a copy of the stored state, or None when absent."""

    def put(self, key: SectionKey, state: SectionState) -> None:
        """Replace the stored state for ``key``."""


class InMemoryProgressStore:
    """Process-local store; state lives for the lifetime of the instance."""

    def __init__(self) -> None:
        self._states: dict[SectionKey, SectionState] = {}

    def get(self, key: SectionKey) -> SectionState | None:
        state = self._states.get(key)
        return state.model_copy(deep=True) if state is not None else None

    def put(self, key: SectionKey, state: SectionState) -> None:
        self._states[key] = state.model_copy(deep=True)

    def sessions(self) -> list[str]:
        return sorted({key.session_id for key in self._states})

    def __len__(self) -> int:
        return len(self._states)
