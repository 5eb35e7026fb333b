"""Domain exceptions shared across the loader, engine and state store."""

from __future__ import annotations


class LoadError(Exception):
    """A part definition could not be fetched or parsed."""

    def __init__(self, identifier: str, reason: str) -> None:
        super().__init__(f"Failed to load {identifier}: {reason}")
        self.identifier = identifier
        self.reason = reason


class DecompositionError(ValueError):
    """A raw KAGE definition could not be flattened into stroke records."""


class StateValidationError(ValueError):
    """Imported editor state is missing fields or has the wrong shape."""
