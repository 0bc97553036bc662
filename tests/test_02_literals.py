#!/usr/bin/env python
#
#
# -----------------------------------------------------------------------------
"""Tests for ``inline literal`` protection and resolution."""
# -----------------------------------------------------------------------------

from __future__ import annotations

from rstinline import content_key, render
from rstinline.services.placeholders import Kind


# -----------------------------------------------------------------------------

def test_literal_becomes_code():
    assert render("``code``") == "<code>code</code>"


def test_emphasis_does_not_fire_inside_literal():
    assert render("``a*b``") == "<code>a*b</code>"
    assert render("``**a** *b*``") == "<code>**a** *b*</code>"


def test_literal_is_html_escaped():
    assert render('``<b> & "q"``') == "<code>&lt;b&gt; &amp; &quot;q&quot;</code>"


def test_literal_uri_is_not_linked():
    assert render("``https://x.y/z``") == "<code>https://x.y/z</code>"


def test_literal_unknown_scheme_is_not_an_error():
    assert render("``ftp://files.example.com``") == "<code>ftp://files.example.com</code>"


def test_literal_hides_references_and_roles():
    assert render("``foo_ |bar| [#]_ :bogus:`x` ``") == (
        "<code>foo_ |bar| [#]_ :bogus:`x` </code>"
    )


def test_two_literals_in_one_line():
    assert render("``a`` and ``b``") == "<code>a</code> and <code>b</code>"


def test_literal_inside_strong():
    assert render("**``a*b``**") == "<strong><code>a*b</code></strong>"


def test_no_literal_tokens_left_behind():
    html = render("``one`` two ``three``")
    assert "[[il:" not in html


def test_same_literal_shares_key_and_output(renderer):
    state = renderer.render_state("``x`` then ``x`` again")
    assert state.placeholders.table(Kind.LITERAL) == {content_key("x"): "x"}
    assert state.content == "<code>x</code> then <code>x</code> again"


# -----------------------------------------------------------------------------
