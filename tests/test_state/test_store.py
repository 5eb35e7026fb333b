"""Tests for the editor state: history, undo and JSON import/export."""

from __future__ import annotations

import json

import pytest

from kanjicompose.engine.context import CompositionResult
from kanjicompose.errors import StateValidationError
from kanjicompose.state.store import CompositeState, EditorState, _parse_state


@pytest.fixture
def editor() -> EditorState:
    return EditorState()


class TestHistory:
    def test_initial_state(self, editor):
        assert editor.current == CompositeState("", 200, 40000)
        assert editor.history_depth == 0

    def test_update_pushes_snapshot(self, editor):
        editor.update("a", 500, 100000)
        assert editor.current == CompositeState("a", 500, 100000)
        assert editor.history_depth == 1

    def test_undo_restores_previous(self, editor):
        editor.update("a", 500, 100000)
        editor.update("b", 650, 130000)
        assert editor.undo() is True
        assert editor.current == CompositeState("a", 500, 100000)
        assert editor.undo() is True
        assert editor.current == CompositeState()

    def test_undo_on_empty_history_is_a_noop(self, editor):
        assert editor.undo() is False
        assert editor.current == CompositeState()

    def test_reset_clears_history(self, editor):
        editor.update("a", 500, 100000)
        editor.reset("1:0:0:10:10:50:50")
        assert editor.history_depth == 0
        assert editor.current == CompositeState("1:0:0:10:10:50:50", 200, 40000)
        assert editor.undo() is False

    def test_undo_walks_back_to_reset_state(self, editor):
        editor.reset("d")
        editor.update("a", 500, 100000)
        editor.update("b", 650, 130000)

        assert editor.undo() is True
        assert editor.current == CompositeState("a", 500, 100000)
        assert editor.undo() is True
        assert editor.current == CompositeState("d", 200, 40000)
        assert editor.undo() is False
        assert editor.current == CompositeState("d", 200, 40000)

    def test_apply_result(self, editor):
        editor.apply(CompositionResult(data="x", logical_size=320, area=64000))
        assert editor.current.logical_size == 320
        assert editor.history_depth == 1


class TestImportExport:
    def test_export_shape(self, editor):
        editor.update("1:0:0:10:10:50:50", 500, 100000)
        assert json.loads(editor.export_json()) == {
            "data": "1:0:0:10:10:50:50",
            "logicalSize": 500,
            "area": 100000,
        }

    def test_export_keeps_non_ascii(self, editor):
        editor.update("99:0:0:0:0:200:200:木", 200, 40000)
        assert "木" in editor.export_json()

    def test_export_then_import_restores_state(self, editor):
        editor.update("1:0:0:10:10:50:50", 500, 100000)
        exported = editor.export_json()

        other = EditorState()
        other.update("zzz", 999, 1)
        assert other.import_json(exported) is True
        assert other.current == editor.current
        assert other.history_depth == 0

    def test_extra_fields_are_ignored(self, editor):
        assert editor.import_json('{"data": "", "logicalSize": 300, "area": 90000, "history": []}') is True
        assert editor.current == CompositeState("", 300, 90000)

    @pytest.mark.parametrize(
        "text",
        [
            "not json",
            "[]",
            '{"data": "", "logicalSize": 200}',
            '{"data": 5, "logicalSize": 200, "area": 40000}',
            '{"data": "", "logicalSize": "200", "area": 40000}',
            '{"data": "", "logicalSize": true, "area": 40000}',
            '{"data": "", "logicalSize": 200, "area": null}',
            '{"data": "", "logicalSize": NaN, "area": 40000}',
            '{"data": "", "logicalSize": 200, "area": Infinity}',
            '{"data": "", "logicalSize": -Infinity, "area": 40000}',
        ],
    )
    def test_invalid_import_leaves_state_untouched(self, editor, text):
        editor.update("keep", 500, 100000)
        assert editor.import_json(text) is False
        assert editor.current == CompositeState("keep", 500, 100000)
        assert editor.history_depth == 1

    def test_export_stays_strict_json(self, editor):
        editor.import_json('{"data": "", "logicalSize": NaN, "area": Infinity}')
        exported = editor.export_json()
        assert "NaN" not in exported
        assert "Infinity" not in exported

    def test_parse_error_type(self):
        with pytest.raises(StateValidationError):
            _parse_state('{"data": ""}')
