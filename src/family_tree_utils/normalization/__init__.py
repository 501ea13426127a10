from __future__ import annotations

from .name_normalization import format_name, format_names, name_words

__all__ = ["format_name", "format_names", "name_words"]
