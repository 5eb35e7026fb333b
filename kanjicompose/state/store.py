"""Editor state: current composite, linear undo history, JSON import/export.

Single-writer: callers serialise ``reset``/``update``/``undo``/``import_json``.
Only the current state is exported; history never leaves the process.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, replace

from pydantic import ValidationError

from kanjicompose.engine.context import CompositionResult
from kanjicompose.engine.layout_constants import BASE_AREA, BASE_LOGICAL_SIZE
from kanjicompose.errors import StateValidationError
from kanjicompose.models.state import PersistedState

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CompositeState:
    """A composite glyph. ``logical_size`` drives geometry, ``area`` drives display scale."""

    data: str = ""
    logical_size: float = BASE_LOGICAL_SIZE
    area: float = BASE_AREA

    def to_dict(self) -> dict[str, str | float]:
        return {"data": self.data, "logicalSize": self.logical_size, "area": self.area}


class EditorState:
    """Holds the current CompositeState plus snapshots for undo."""

    def __init__(self) -> None:
        self._history: list[CompositeState] = []
        self._state = CompositeState()

    @property
    def current(self) -> CompositeState:
        return self._state

    @property
    def history_depth(self) -> int:
        return len(self._history)

    def reset(self, initial_data: str = "") -> None:
        """Clear history and start over from the canonical 200-unit square."""
        self._history = []
        self._state = CompositeState(data=initial_data)
        logger.info("State reset (%d chars of initial data)", len(initial_data))

    def update(self, data: str, logical_size: float, area: float) -> None:
        """Snapshot the current state onto the history, then replace it."""
        self._history.append(self._state)
        self._state = replace(self._state, data=data, logical_size=logical_size, area=area)
        logger.debug("State updated: size=%s area=%s depth=%d", logical_size, area, len(self._history))

    def apply(self, result: CompositionResult) -> None:
        self.update(result.data, result.logical_size, result.area)

    def undo(self) -> bool:
        """Restore the most recent snapshot. False (and no change) when history is empty."""
        if not self._history:
            return False
        self._state = self._history.pop()
        return True

    def export_json(self) -> str:
        return json.dumps(self._state.to_dict(), indent=2, ensure_ascii=False)

    def import_json(self, text: str) -> bool:
        """Replace the current state from exported JSON; history is cleared on success.

        Any parse or validation failure leaves the state untouched.
        """
        try:
            state = _parse_state(text)
        except StateValidationError as e:
            logger.warning("State import rejected: %s", e)
            return False

        self._history = []
        self._state = state
        logger.info("State imported: size=%s area=%s", state.logical_size, state.area)
        return True


def _parse_state(text: str) -> CompositeState:
    try:
        persisted = PersistedState.model_validate_json(text)
    except ValidationError as e:
        raise StateValidationError(f"{e.error_count()} validation error(s): {e.errors()[0]['msg']}") from e
    return CompositeState(
        data=persisted.data,
        logical_size=persisted.logical_size,
        area=persisted.area,
    )
