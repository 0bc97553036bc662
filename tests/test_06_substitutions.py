#!/usr/bin/env python
#
#
# -----------------------------------------------------------------------------
"""Tests for |substitution| references."""
# -----------------------------------------------------------------------------

from __future__ import annotations

from rstinline import content_key, render


# -----------------------------------------------------------------------------

def test_substitution_becomes_placeholder():
    assert render("|logo|") == f"[[subr:{content_key('logo')}]]"


def test_two_substitutions_on_one_line():
    assert render("a |b| c |d| e") == (
        f"a [[subr:{content_key('b')}]] c [[subr:{content_key('d')}]] e"
    )


def test_substitutions_are_recorded(renderer):
    state = renderer.render_state("|logo| and |logo| and |name|")
    assert state.substitution_references == {
        content_key("logo"): "logo",
        content_key("name"): "name",
    }


def test_substitution_inside_literal_is_untouched():
    assert render("``|x|``") == "<code>|x|</code>"


def test_single_pipe_is_left_alone():
    assert render("a | b") == "a | b"


# -----------------------------------------------------------------------------
