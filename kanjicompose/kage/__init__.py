"""KAGE glyph format: parsing, decomposition and serialization."""

from kanjicompose.kage.decomposer import KAGE_UNIT, KageDecomposer, StrokeDecomposer, StrokeRecord
from kanjicompose.kage.parser import component_references, split_records
from kanjicompose.kage.serializer import stringify

__all__ = [
    "KAGE_UNIT",
    "KageDecomposer",
    "StrokeDecomposer",
    "StrokeRecord",
    "component_references",
    "split_records",
    "stringify",
]
