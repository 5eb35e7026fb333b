"""Write stroke records back out as a KAGE raw definition."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from kanjicompose.kage.parser import FIELD_SEP, RECORD_SEP


def format_field(value: float) -> str:
    """Render a number the way KAGE data stores it (integral values without ``.0``)."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def stringify(strokes: Iterable[Sequence[float]]) -> str:
    """Join stroke records into ``a:b:c$d:e:f`` form."""
    return RECORD_SEP.join(FIELD_SEP.join(format_field(v) for v in s) for s in strokes)
