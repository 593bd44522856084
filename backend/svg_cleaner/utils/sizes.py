"""Byte-size accounting helpers used for reporting."""

from __future__ import annotations

_UNITS = ["B", "KB", "MB"]


def byte_size(text: str) -> int:
    """UTF-8 encoded length of ``text``."""
    return len(text.encode("utf-8"))


def savings_percent(original: int, cleaned: int) -> float:
    if original <= 0:
        return 0.0
    return round((original - cleaned) / original * 100, 1)


def format_file_size(n_bytes: int) -> str:
    """Human-readable size: ``0 B``, ``512 B``, ``1.5 KB``, ``2 MB``."""
    if n_bytes <= 0:
        return "0 B"
    value = float(n_bytes)
    unit = 0
    while value >= 1024 and unit < len(_UNITS) - 1:
        value /= 1024
        unit += 1
    value = round(value, 1)
    if value == int(value):
        return f"{int(value)} {_UNITS[unit]}"
    return f"{value} {_UNITS[unit]}"
