#!/usr/bin/env python
#
#
# -----------------------------------------------------------------------------
"""Tests for plain text, strong emphasis and emphasis."""
# -----------------------------------------------------------------------------

from __future__ import annotations

import pytest

from rstinline import render


# ── Plain text ────────────────────────────────────────────────────────────────

@pytest.mark.parametrize("text", [
    "",
    "Just some plain text.",
    "Commas, colons: and (parentheses) [brackets] {braces}.",
    "a + b = c; 3 < 4 > 2",
    "snake_case and __dunder__ident are left alone",
    "Two\nlines\n\nand a paragraph.",
])
def test_text_without_markup_is_unchanged(text):
    assert render(text) == text


# ── Strong emphasis ───────────────────────────────────────────────────────────

def test_strong():
    assert render("**x**") == "<strong>x</strong>"


def test_strong_in_sentence():
    assert render("a **bold** move") == "a <strong>bold</strong> move"


def test_strong_matches_shortest_span():
    assert render("**a** b **c**") == "<strong>a</strong> b <strong>c</strong>"


def test_strong_spans_lines():
    assert render("**two\nlines**") == "<strong>two\nlines</strong>"


# ── Emphasis ──────────────────────────────────────────────────────────────────

def test_emphasis():
    assert render("*x*") == "<em>x</em>"


def test_emphasis_after_strong():
    assert render("**bold** and *em*") == "<strong>bold</strong> and <em>em</em>"


def test_lone_asterisk_is_left_alone():
    assert render("5 * 3") == "5 * 3"


def test_emphasis_inside_brackets():
    assert render("[*note*]") == "[<em>note</em>]"


def test_emphasis_before_closing_bracket():
    assert render("*a*]") == "<em>a</em>]"


# -----------------------------------------------------------------------------
