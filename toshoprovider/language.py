"""Audio language heuristics for torrent titles.

Not applied by any search; callers may use it to annotate results.
"""

import re

from .models import LanguageInfo

DUB_PATTERN = re.compile(r"\b(dub|dubbed|english dub)\b", re.IGNORECASE)
MULTI_AUDIO_PATTERN = re.compile(
    r"\b(dual audio|multi-audio|multi audio)\b", re.IGNORECASE
)


def detect_language(title: str) -> LanguageInfo:
    """Classify a title as dubbed, multi-audio or (by default) subtitled."""
    is_dub = DUB_PATTERN.search(title) is not None
    is_multi = MULTI_AUDIO_PATTERN.search(title) is not None
    return LanguageInfo(is_dub=is_dub, is_sub=not is_dub and not is_multi, is_multi=is_multi)
