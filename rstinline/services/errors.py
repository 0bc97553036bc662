#!/usr/bin/env python
#
#
# -----------------------------------------------------------------------------
"""
Render errors.

Every error here is fatal to the render in progress: the caller gets the
exception and no partially rewritten buffer.
"""
# -----------------------------------------------------------------------------

from __future__ import annotations


# -----------------------------------------------------------------------------

class RenderError(ValueError):
    """Base class for all inline render failures."""


class UnknownRole(RenderError):
    """Interpreted text used a role name the registry does not know."""

    def __init__(self, role: str) -> None:
        self.role = role
        super().__init__(f"Don't know what to do with role: {role}")


class UnknownURIScheme(RenderError):
    """A recognised absolute URI whose scheme has no renderer yet."""

    def __init__(self, scheme: str) -> None:
        self.scheme = scheme
        super().__init__(f"Don't know what to do with hyperlink scheme: {scheme}")


class FootnoteSymbolsExhausted(RenderError):

    def __init__(self, limit: int) -> None:
        self.limit = limit
        super().__init__(f"Footnote symbols exhausted: at most {limit} auto-symbol footnotes per render")


# -----------------------------------------------------------------------------
