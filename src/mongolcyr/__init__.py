"""Latin-script romanized Mongolian to Mongolian Cyrillic conversion."""

from .transliteration import Transliterator, convert_to_cyrillic

__all__ = ["Transliterator", "convert_to_cyrillic"]
