"""Exceptions raised by the strict engine variants."""

from __future__ import annotations


class EngineError(Exception):
    """Base class for decision engine errors."""


class NotFoundError(EngineError, LookupError):
    """Raised when a referenced record does not exist."""

    def __init__(self, kind: str, identifier: str):
        super().__init__(f"Unknown {kind}: {identifier!r}")
        self.kind = kind
        self.identifier = identifier


class InvalidWeightError(EngineError, ValueError):
    """Raised when selection criteria cannot be used for scoring."""


class DependencyNotMetError(EngineError):
    """Raised when completing an item whose dependencies are incomplete."""

    def __init__(self, section_id: str, item_id: str, missing: list[str]):
        super().__init__(
            f"Item {item_id!r} in section {section_id!r} has incomplete dependencies: {missing}"
        )
        self.section_id = section_id
        self.item_id = item_id
        self.missing = missing
