"""Title → filename slug normalisation."""

from __future__ import annotations

import re

# Anything that is not a lowercase ASCII letter, digit, space or hyphen
_INVALID_RE = re.compile(r"[^a-z0-9 -]")
_WHITESPACE_RE = re.compile(r"\s+")
_HYPHENS_RE = re.compile(r"-+")


def slugify(text: str) -> str:
    """Turn a free-text note title into a filesystem-safe slug.

    ``"  My Note!! "`` becomes ``"my-note"``.  Input with no usable characters
    yields ``""``.
    """
    text = text.strip().lower()
    text = _INVALID_RE.sub("", text)
    text = _WHITESPACE_RE.sub("-", text)
    return _HYPHENS_RE.sub("-", text)
