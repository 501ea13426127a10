from __future__ import annotations

from .soundex import soundex, soundex_equal

__all__ = ["soundex", "soundex_equal"]
