"""Slug normalization helpers.

Turns free text into a lower-case, URL-safe fragment: diacritics removed,
punctuation dropped, whitespace collapsed and replaced by hyphens.
"""
from __future__ import annotations

import re
import unicodedata
from typing import Iterable, Optional

from behaviorable.utils.settings import get_settings

_INVALID_CHARS = re.compile(r"[^a-z0-9\s-]")
_WHITESPACE_RUN = re.compile(r"\s+")
_WHITESPACE = re.compile(r"\s")


def remove_diacritics(text: str) -> str:
    """Return ``text`` with combining marks stripped (``é`` -> ``e``)."""
    decomposed = unicodedata.normalize("NFD", text)
    stripped = "".join(c for c in decomposed if unicodedata.category(c) != "Mn")
    return unicodedata.normalize("NFC", stripped)


def generate_slug(text: str, max_length: Optional[int] = None) -> str:
    if max_length is None:
        max_length = get_settings().slug_max_length
    value = remove_diacritics(text).lower()
    value = _INVALID_CHARS.sub("", value)
    value = _WHITESPACE_RUN.sub(" ", value).strip()
    value = value[:max_length].strip()
    return _WHITESPACE.sub("-", value)


def join_slug(fragments: Iterable[object], max_length: Optional[int] = None) -> str:
    """Slugify each value and join the non-empty results with ``-``.

    ``None`` values contribute nothing; everything else goes through ``str()``.
    """
    parts = []
    for fragment in fragments:
        if fragment is None:
            continue
        slug = generate_slug(str(fragment), max_length=max_length)
        if slug:
            parts.append(slug)
    return "-".join(parts)


def split_counter(slug: str, separator: Optional[str] = None, default: int = 1) -> int:
    """Return the numeric counter after the last ``separator`` in ``slug``.

    Falls back to ``default`` when the slug carries no separator or the
    suffix is not an integer.
    """
    if separator is None:
        separator = get_settings().slug_separator
    if separator not in slug:
        return default
    suffix = slug.rsplit(separator, 1)[1]
    try:
        return int(suffix)
    except ValueError:
        return default
