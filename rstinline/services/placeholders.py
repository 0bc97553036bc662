#!/usr/bin/env python
#
#
# -----------------------------------------------------------------------------
"""
Placeholder store
=================
Content-addressed tables used to protect spans between passes.

A pass swaps a captured span for an opaque token such as ``[[il:<key>]]`` and
records the original text under ``<key>``; a later pass swaps the token back
for the final output.  Keys are SHA-1 digests of the captured text, so two
identical spans share one entry and one rendering.

Tokens of kind ``hlr`` / ``subr`` are never resolved here.  They are left in
the output for an external resolver, which recomputes the same key from the
label with :func:`content_key`.
"""
# -----------------------------------------------------------------------------

from __future__ import annotations

import hashlib
from enum import Enum
from typing import Callable


# -----------------------------------------------------------------------------

ANONYMOUS_HYPERLINK = "[[anon-hl]]"


class Kind(str, Enum):
    LITERAL = "il"
    INTERPRETED_TEXT = "it"
    HYPERLINK_REFERENCE = "hlr"
    SUBSTITUTION_REFERENCE = "subr"


# -----------------------------------------------------------------------------

def content_key(text: str) -> str:
    """Return the hex SHA-1 digest used to key *text*."""
    return hashlib.sha1(text.encode("utf-8")).hexdigest()


def token(kind: Kind, key: str) -> str:
    return f"[[{kind.value}:{key}]]"


# -----------------------------------------------------------------------------

class PlaceholderStore:
    """Per-render tables, one per placeholder kind."""

    def __init__(self) -> None:
        self._tables: dict[Kind, dict[str, str]] = {kind: {} for kind in Kind}

    def save(self, kind: Kind, text: str) -> str:
        """Record *text* under its content key and return the key."""
        key = content_key(text)
        self._tables[kind][key] = text
        return key

    def protect(self, kind: Kind, text: str) -> str:
        """Record *text* and return the in-buffer token standing in for it."""
        return token(kind, self.save(kind, text))

    def table(self, kind: Kind) -> dict[str, str]:
        return dict(self._tables[kind])

    def resolve(self, kind: Kind, content: str, transform: Callable[[str], str] = str) -> str:
        """Replace every *kind* token in *content* with ``transform(original)``."""
        for key, value in self._tables[kind].items():
            content = content.replace(token(kind, key), transform(value))
        return content


# -----------------------------------------------------------------------------
