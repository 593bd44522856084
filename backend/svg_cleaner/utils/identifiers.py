"""Helpers for ASCII transliteration of ids/classes and url(#id) rewriting."""

from __future__ import annotations

import re

_NON_ASCII_RE = re.compile(r"[^\x00-\x7F]")
_DISALLOWED_RE = re.compile(r"[^a-zA-Z0-9_-]")
_UNDERSCORE_RUN_RE = re.compile(r"_{2,}")

ZERO_WIDTH_RE = re.compile("[\u200b-\u200d\ufeff]")

# url(#id) as written in attribute values and stylesheet text
URL_REF_RE = re.compile(r"url\(#([^)]+)\)")

# .className tokens in stylesheet text; non-ASCII letters are allowed in the name
CSS_CLASS_RE = re.compile("\\.([a-zA-Z_][a-zA-Z0-9_\u00a0-\uffff-]*)")


def has_non_ascii(value: str) -> bool:
    return _NON_ASCII_RE.search(value) is not None


def transliterate(value: str) -> str:
    """Reduce ``value`` to ``[A-Za-z0-9_-]``.

    Non-ASCII characters are dropped, other disallowed characters become ``_``,
    underscore runs collapse and leading/trailing underscores are trimmed.
    The result may be empty.
    """
    value = _NON_ASCII_RE.sub("", value)
    value = _DISALLOWED_RE.sub("_", value)
    value = _UNDERSCORE_RUN_RE.sub("_", value)
    return value.strip("_")


def strip_zero_width(value: str) -> str:
    return ZERO_WIDTH_RE.sub("", value)


def transliterate_url_refs(value: str) -> str:
    """Transliterate the id inside every ``url(#id)``; empty ids become ``none``."""

    def _sub(match: re.Match) -> str:
        clean_id = transliterate(match.group(1))
        return f"url(#{clean_id})" if clean_id else "none"

    return URL_REF_RE.sub(_sub, value)


def transliterate_class_selectors(css: str) -> str:
    """Transliterate ``.name`` selector tokens; tokens that clean to nothing are dropped."""

    def _sub(match: re.Match) -> str:
        clean_name = transliterate(match.group(1))
        return f".{clean_name}" if clean_name else ""

    return CSS_CLASS_RE.sub(_sub, css)
