"""KAGE raw definition parser: record/field splitting and component scanning.

A raw definition is a ``$``-separated list of records, each a ``:``-separated
list of fields. Type code 99 is a component reference whose eighth field names
another glyph; every other record is a primitive stroke with coordinate pairs
from the fourth field onwards.
"""

from __future__ import annotations

import math

from kanjicompose.errors import DecompositionError

RECORD_SEP = "$"
FIELD_SEP = ":"

COMPONENT_TYPE = 99
COMPONENT_NAME_FIELD = 7
# Fields 3..6 of a component reference: x1, y1, x2, y2 in the parent space
COMPONENT_BOX_FIELDS = (3, 4, 5, 6)
# Fields 1, 2, 9, 10: optional stretch parameters
COMPONENT_STRETCH_FIELDS = (1, 2, 9, 10)

# First coordinate field of a primitive stroke
COORD_START = 3


def split_records(definition: str) -> list[list[str]]:
    """Split a raw definition into field lists, dropping empty records."""
    if not definition:
        return []
    records: list[list[str]] = []
    for line in definition.split(RECORD_SEP):
        line = line.strip()
        if line:
            records.append(line.split(FIELD_SEP))
    return records


def to_int(field_text: str) -> int:
    """Floor a numeric field. An empty field counts as 0."""
    if field_text == "":
        return 0
    try:
        return math.floor(float(field_text))
    except (ValueError, OverflowError) as e:
        raise DecompositionError(f"Malformed numeric field {field_text!r}") from e


def is_component(fields: list[str]) -> bool:
    return bool(fields) and fields[0].strip() == str(COMPONENT_TYPE)


def component_references(definition: str) -> list[str]:
    """Identifiers referenced by type-99 records, in first-seen order."""
    refs: list[str] = []
    seen: set[str] = set()
    for fields in split_records(definition):
        if not is_component(fields) or len(fields) <= COMPONENT_NAME_FIELD:
            continue
        ref_id = fields[COMPONENT_NAME_FIELD].strip()
        if ref_id and ref_id not in seen:
            seen.add(ref_id)
            refs.append(ref_id)
    return refs

