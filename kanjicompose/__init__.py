"""kanjicompose: incremental composite kanji builder on top of GlyphWiki KAGE data."""

__version__ = "0.1.0"
