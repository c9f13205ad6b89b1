"""Display formatting helpers for dates, sizes and anchors."""

from __future__ import annotations

import unicodedata
from datetime import datetime
from urllib.parse import quote

from pypinyin import lazy_pinyin

# Characters encodeURIComponent leaves untouched besides alphanumerics.
_ANCHOR_SAFE = "-_.!~*'()"


def format_date(timestamp: float) -> str:
    """Format a POSIX timestamp as a long local date, e.g. ``2024年1月5日``."""
    moment = datetime.fromtimestamp(timestamp)
    return f"{moment.year}年{moment.month}月{moment.day}日"


def format_size(num_bytes: int) -> str:
    if num_bytes < 1024:
        return f"{num_bytes} B"
    if num_bytes < 1024 * 1024:
        return f"{num_bytes / 1024:.1f} KB"
    return f"{num_bytes / (1024 * 1024):.1f} MB"


def anchor_id(label: str) -> str:
    """Percent-encode a group label for use as a fragment identifier."""
    return quote(label, safe=_ANCHOR_SAFE)


def collation_key(text: str, lang: str = "zh-CN") -> tuple[str, str]:
    """Stable, case-insensitive ordering key for display labels.

    Under a Chinese display locale Han characters order by their pinyin
    reading, so 北京 (bei) sorts before 上海 (shang).
    """
    normalized = unicodedata.normalize("NFKC", text)
    if lang.lower().startswith("zh"):
        normalized = " ".join(lazy_pinyin(normalized))
    return normalized.casefold(), text
