#!/usr/bin/env python
#
#
# -----------------------------------------------------------------------------
"""
Inline markup renderer
======================
Renders the inline subset of reStructuredText to HTML fragments.

Supported syntax
----------------
``literal``                     — <code>, contents HTML-escaped, never re-parsed
`title` / :role:`text`          — interpreted text (see roles.py)
**strong** / *emphasis*         — <strong> / <em>
_`target`                       — internal target  → href [[hlr:<key>]]
word__ / `phrase`__             — anonymous link   → href [[anon-hl]]
`text <url>`_                   — explicit link    → href url
`phrase`_ / word_               — reference        → href [[hlr:<key>]]
[1]_ / [#]_ / [*]_              — footnote references
|name|                          — substitution     → [[subr:<key>]]
https://example.com             — standalone hyperlink

The passes run in a fixed order over one buffer.  Spans that later passes
must not touch are swapped for placeholder tokens first and swapped back at
the end.  Hyperlink-reference, substitution and anonymous-link tokens are
left in the output for an external resolver keyed by ``content_key()``.
"""
# -----------------------------------------------------------------------------

from __future__ import annotations

import html
import logging
import re
from dataclasses import dataclass, field
from typing import Callable, Optional

from rstinline.services.errors import RenderError, UnknownURIScheme
from rstinline.services.footnotes import DEFAULT_FOOTNOTE_SYMBOLS, FootnoteSequencer
from rstinline.services.placeholders import ANONYMOUS_HYPERLINK, Kind, PlaceholderStore
from rstinline.services.roles import RoleRegistry, default_registry

log = logging.getLogger(__name__)


# -----------------------------------------------------------------------------
# Patterns
# -----------------------------------------------------------------------------

# The closing backtick of one phrase never opens the next one
_PHRASE_START = r"(?<![\w`])"

# Already-emitted anchors, tags and placeholder tokens; rules that use this
# leave such spans untouched.
_SKIP = r"(?P<skip><a\b[^>]*>.*?</a>|</?[a-zA-Z][^<>]*>|\[\[[^\[\]]*\]\])"

_ROLE = r"[\w\-+.]+"

_LITERAL_RE = re.compile(r"``(.+?)``", re.DOTALL)

# Internal targets and phrase references are matched as skip spans so their
# backticks are left for the target and reference passes.
_INTERPRETED_TEXT_RE = re.compile(
    r"(?P<skip>_`[^`]+`|`[^`]+`__?(?=\W|\Z))|"
    rf"(?:(?<!_):(?P<prefix>{_ROLE}):|(?<![_`]))"
    r"`(?P<text>[^`]+)`(?!_)"
    rf"(?::(?P<suffix>{_ROLE}):)?"
)

_STRONG_RE   = re.compile(r"\*\*(.+?)\*\*", re.DOTALL)
# [*] is a footnote label, never an emphasis delimiter
_EMPHASIS_RE = re.compile(r"(?!(?<=\[)\*\])\*([^*]+?)(?!(?<=\[)\*\])\*")

_INTERNAL_TARGET_RE = re.compile(r"_`([^`]+)`")

_ANON_WORD_RE   = re.compile(rf"{_SKIP}|(?P<word>\w+)__(?=\W|\Z)", re.DOTALL)
_ANON_PHRASE_RE = re.compile(rf"{_PHRASE_START}`([^`]+)`__(?=\W|\Z)")

_EXPLICIT_LINK_RE = re.compile(
    rf"{_PHRASE_START}`(?P<text>[^`]+?)\s+<(?P<target>[^`<>]+)>`_(?=\W|\Z)"
)
_PHRASE_REF_RE = re.compile(rf"{_PHRASE_START}`(?P<text>[^`]+)`_(?=\W|\Z)")
_WORD_REF_RE   = re.compile(rf"{_SKIP}|(?P<word>\w+)_(?=\W|\Z)", re.DOTALL)

_FOOTNOTE_RE = re.compile(r"\[(\d+|#|\*)\]_")

_SUBSTITUTION_RE = re.compile(r"\|([^|]+?)\|")

_HYPERLINK_RE = re.compile(
    rf"{_SKIP}|"
    r"(?P<uri>\b(?:(?P<scheme>https?|s?ftp|ftps|file|smb|afp|nfs|(?:x-)?man(?:-page)?|gopher)://"
    r"|(?P<mailto>mailto):)"
    r"[-:@a-zA-Z0-9_.,~%+/?=&#;]+(?<![-.,?:#;]))",
    re.DOTALL,
)

WEB_SCHEMES = frozenset({"http", "https"})


# -----------------------------------------------------------------------------
# Per-render state
# -----------------------------------------------------------------------------

@dataclass
class RenderState:
    """Everything one ``render`` call owns.  Never shared between calls."""

    content: str
    placeholders: PlaceholderStore = field(default_factory=PlaceholderStore)
    footnotes: FootnoteSequencer = field(default_factory=FootnoteSequencer)
    # Hook for block-level callers; the inline passes never read it.
    header_hierarchy: list = field(default_factory=list)
    anonymous_hyperlinks: int = 0

    @property
    def hyperlink_references(self) -> dict[str, str]:
        return self.placeholders.table(Kind.HYPERLINK_REFERENCE)

    @property
    def substitution_references(self) -> dict[str, str]:
        return self.placeholders.table(Kind.SUBSTITUTION_REFERENCE)


Pass = Callable[[RenderState], str]


# -----------------------------------------------------------------------------
# Renderer
# -----------------------------------------------------------------------------

class InlineRenderer:
    """Runs the inline passes.

    The instance holds configuration only; all mutable state lives in the
    ``RenderState`` built for each call, so one renderer may be shared.
    """

    def __init__(
        self,
        roles: Optional[RoleRegistry] = None,
        footnote_symbols: tuple[str, ...] = DEFAULT_FOOTNOTE_SYMBOLS,
    ) -> None:
        self.roles = roles or default_registry
        self.footnote_symbols = tuple(footnote_symbols)

    def passes(self) -> list[tuple[str, Pass]]:
        return [
            ("inline literals",         self._find_inline_literals),
            ("interpreted text",        self._find_interpreted_text),
            ("strong emphasis",         self._replace_strong_emphasis),
            ("emphasis",                self._replace_emphasis),
            ("internal targets",        self._replace_internal_targets),
            ("anonymous hyperlinks",    self._replace_anonymous_hyperlinks),
            ("hyperlink references",    self._replace_hyperlink_references),
            ("footnote references",     self._replace_footnote_references),
            ("substitution references", self._replace_substitution_references),
            ("resolve interpreted text", self._replace_interpreted_text),
            ("standalone hyperlinks",   self._replace_standalone_hyperlinks),
            ("resolve inline literals", self._replace_inline_literals),
        ]

    def new_state(self, content: str) -> RenderState:
        return RenderState(content, footnotes=FootnoteSequencer(self.footnote_symbols))

    def render_state(self, content: str) -> RenderState:
        """Render *content* and return the final state, tables included."""
        state = self.new_state(content)
        for name, step in self.passes():
            try:
                state.content = step(state)
            except RenderError as exc:
                log.warning("Inline render failed in %s pass: %s", name, exc)
                raise
            log.debug("%s pass done: %d chars", name, len(state.content))
        return state

    def render(self, content: str) -> str:
        return self.render_state(content).content

    # ── 1. literals ──────────────────────────────────────────────────────────

    def _find_inline_literals(self, state: RenderState) -> str:
        return _LITERAL_RE.sub(
            lambda m: state.placeholders.protect(Kind.LITERAL, m.group(1)),
            state.content,
        )

    # ── 2. interpreted text ──────────────────────────────────────────────────

    def _find_interpreted_text(self, state: RenderState) -> str:
        def _interpreted(m: re.Match) -> str:
            if m.group("skip"):
                return m.group(0)
            role = m.group("prefix") or m.group("suffix") or ""
            text = m.group("text")
            key  = state.placeholders.save(Kind.INTERPRETED_TEXT, text)
            return self.roles.resolve(role, key, text)

        return _INTERPRETED_TEXT_RE.sub(_interpreted, state.content)

    # ── 3-4. emphasis ────────────────────────────────────────────────────────

    @staticmethod
    def _replace_strong_emphasis(state: RenderState) -> str:
        return _STRONG_RE.sub(r"<strong>\1</strong>", state.content)

    @staticmethod
    def _replace_emphasis(state: RenderState) -> str:
        return _EMPHASIS_RE.sub(r"<em>\1</em>", state.content)

    # ── 5-7. targets and references ──────────────────────────────────────────

    @staticmethod
    def _reference_anchor(state: RenderState, text: str) -> str:
        href = state.placeholders.protect(Kind.HYPERLINK_REFERENCE, text)
        return f"<a href='{href}'>{text}</a>"

    def _replace_internal_targets(self, state: RenderState) -> str:
        return _INTERNAL_TARGET_RE.sub(
            lambda m: self._reference_anchor(state, m.group(1)),
            state.content,
        )

    @staticmethod
    def _replace_anonymous_hyperlinks(state: RenderState) -> str:
        def _anonymous(text: str) -> str:
            state.anonymous_hyperlinks += 1
            return f"<a href='{ANONYMOUS_HYPERLINK}'>{text}</a>"

        def _word(m: re.Match) -> str:
            if m.group("skip"):
                return m.group(0)
            return _anonymous(m.group("word"))

        content = _ANON_WORD_RE.sub(_word, state.content)
        return _ANON_PHRASE_RE.sub(lambda m: _anonymous(m.group(1)), content)

    def _replace_hyperlink_references(self, state: RenderState) -> str:
        content = _EXPLICIT_LINK_RE.sub(
            lambda m: f"<a href='{m.group('target')}'>{m.group('text')}</a>",
            state.content,
        )
        content = _PHRASE_REF_RE.sub(
            lambda m: self._reference_anchor(state, m.group("text")),
            content,
        )

        # Post-processed against the link targets by the caller
        def _word(m: re.Match) -> str:
            if m.group("skip"):
                return m.group(0)
            return self._reference_anchor(state, m.group("word"))

        return _WORD_REF_RE.sub(_word, content)

    # ── 8. footnotes ─────────────────────────────────────────────────────────

    @staticmethod
    def _replace_footnote_references(state: RenderState) -> str:
        def _footnote(m: re.Match) -> str:
            label = m.group(1)
            if label == "#":
                number    = state.footnotes.next_number()
                anchor    = f"footnote-{number}"
                link_text = str(number)
            elif label == "*":
                symbol    = state.footnotes.next_symbol(with_entity=False)
                anchor    = f"footnote-{symbol}"
                link_text = f"&{symbol};"
            else:
                anchor    = f"footnote-{label}"
                link_text = label
            return f"[<a href='#{anchor}'>{link_text}</a>]"

        return _FOOTNOTE_RE.sub(_footnote, state.content)

    # ── 9. substitutions ─────────────────────────────────────────────────────

    @staticmethod
    def _replace_substitution_references(state: RenderState) -> str:
        return _SUBSTITUTION_RE.sub(
            lambda m: state.placeholders.protect(Kind.SUBSTITUTION_REFERENCE, m.group(1)),
            state.content,
        )

    # ── 10. interpreted text, resolved ───────────────────────────────────────

    @staticmethod
    def _replace_interpreted_text(state: RenderState) -> str:
        return state.placeholders.resolve(Kind.INTERPRETED_TEXT, state.content)

    # ── 11. standalone hyperlinks ────────────────────────────────────────────

    @staticmethod
    def _replace_standalone_hyperlinks(state: RenderState) -> str:
        def _hyperlink(m: re.Match) -> str:
            if m.group("skip"):
                return m.group(0)
            uri    = m.group("uri")
            scheme = m.group("scheme") or m.group("mailto")
            if scheme not in WEB_SCHEMES:
                raise UnknownURIScheme(scheme)
            return f'<a href="{uri}">{uri}</a>'

        return _HYPERLINK_RE.sub(_hyperlink, state.content)

    # ── 12. literals, resolved ───────────────────────────────────────────────

    @staticmethod
    def _replace_inline_literals(state: RenderState) -> str:
        return state.placeholders.resolve(
            Kind.LITERAL,
            state.content,
            lambda value: f"<code>{html.escape(value)}</code>",
        )


# -----------------------------------------------------------------------------
# Public render function
# -----------------------------------------------------------------------------

_renderer: Optional[InlineRenderer] = None


def _get_renderer() -> InlineRenderer:
    global _renderer
    if _renderer is None:
        _renderer = InlineRenderer()
    return _renderer


def render(content: str) -> str:
    """
    Render the inline markup in *content* to HTML.

    Raises ``RenderError`` (``UnknownRole``, ``UnknownURIScheme`` or
    ``FootnoteSymbolsExhausted``); nothing is returned on failure.
    """
    return _get_renderer().render(content)


# -----------------------------------------------------------------------------
