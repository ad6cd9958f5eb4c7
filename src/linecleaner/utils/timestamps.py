"""Moment-style timestamp formatting for backup file names."""

from __future__ import annotations

import datetime as dt
import re
from pathlib import Path

# Longest tokens first so "YYYY" is not read as two "YY"
_TOKEN_RE = re.compile(r"\[([^\]]*)\]|YYYY|YY|MM|M|DD|D|HH|H|mm|m|ss|s")

_TOKENS = {
    "YYYY": lambda d: f"{d.year:04d}",
    "YY": lambda d: f"{d.year % 100:02d}",
    "MM": lambda d: f"{d.month:02d}",
    "M": lambda d: str(d.month),
    "DD": lambda d: f"{d.day:02d}",
    "D": lambda d: str(d.day),
    "HH": lambda d: f"{d.hour:02d}",
    "H": lambda d: str(d.hour),
    "mm": lambda d: f"{d.minute:02d}",
    "m": lambda d: str(d.minute),
    "ss": lambda d: f"{d.second:02d}",
    "s": lambda d: str(d.second),
}


def now_local() -> dt.datetime:
    return dt.datetime.now().astimezone()


def format_timestamp(pattern: str, when: dt.datetime | None = None) -> str:
    """Render ``pattern`` for ``when`` (default: now).

    Supports YYYY, YY, MM, M, DD, D, HH, H, mm, m, ss and s. Text in square
    brackets is copied literally without the brackets, as is anything that
    is not a token.
    """
    when = when or now_local()

    def _render(match: re.Match[str]) -> str:
        if match.group(1) is not None:
            return match.group(1)
        return _TOKENS[match.group(0)](when)

    return _TOKEN_RE.sub(_render, pattern)


def backup_path_for(path: str | Path, pattern: str, when: dt.datetime | None = None) -> Path:
    """Backup location for ``path``: same directory, timestamp before the suffix."""
    path = Path(path)
    return path.with_name(f"{path.stem}{format_timestamp(pattern, when)}{path.suffix}")


_TOKEN_PATTERNS = {
    "YYYY": r"\d{4}",
    "YY": r"\d{2}",
    "MM": r"\d{2}",
    "DD": r"\d{2}",
    "HH": r"\d{2}",
    "mm": r"\d{2}",
    "ss": r"\d{2}",
    "M": r"\d{1,2}",
    "D": r"\d{1,2}",
    "H": r"\d{1,2}",
    "m": r"\d{1,2}",
    "s": r"\d{1,2}",
}


def timestamp_regex(pattern: str) -> re.Pattern[str]:
    """Compile a regex matching any output of ``format_timestamp(pattern)``."""
    parts: list[str] = []
    pos = 0
    for match in _TOKEN_RE.finditer(pattern):
        parts.append(re.escape(pattern[pos : match.start()]))
        if match.group(1) is not None:
            parts.append(re.escape(match.group(1)))
        else:
            parts.append(_TOKEN_PATTERNS[match.group(0)])
        pos = match.end()
    parts.append(re.escape(pattern[pos:]))
    return re.compile("".join(parts))
