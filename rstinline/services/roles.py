#!/usr/bin/env python
#
#
# -----------------------------------------------------------------------------
"""
Interpreted-text roles
======================
Maps a role name (``:sub:`2```) to a function ``(key, text) -> html``.

Built-in roles
--------------
(no role) / title-reference  — deferred, re-emits the raw text at the end
func                         — <a href="#func_name">name</a>
sub / subscript              — <sub>text</sub>
sup / superscript            — <sup>text</sup>

Extra roles can be registered on a private registry; the default registry is
shared by every renderer and is never mutated.
"""
# -----------------------------------------------------------------------------

from __future__ import annotations

import html
from enum import Enum
from types import MappingProxyType
from typing import Callable, Mapping, Optional

from rstinline.services.errors import UnknownRole
from rstinline.services.placeholders import Kind, token


RoleHandler = Callable[[str, str], str]


# -----------------------------------------------------------------------------

class Role(str, Enum):
    TITLE_REFERENCE = "title-reference"
    FUNC = "func"
    SUBSCRIPT = "subscript"
    SUPERSCRIPT = "superscript"


ROLE_ALIASES: Mapping[str, Role] = MappingProxyType({
    "":    Role.TITLE_REFERENCE,
    "sub": Role.SUBSCRIPT,
    "sup": Role.SUPERSCRIPT,
})


# ── Built-in handlers ────────────────────────────────────────────────────────

def title_reference(key: str, text: str) -> str:
    # Resolved back to the raw text once the inline passes are done.
    return token(Kind.INTERPRETED_TEXT, key)


def func_reference(key: str, text: str) -> str:
    text = text.strip()
    return f'<a href="#func_{html.escape(text)}">{text}</a>'


def subscript_reference(key: str, text: str) -> str:
    return f"<sub>{text}</sub>"


def superscript_reference(key: str, text: str) -> str:
    return f"<sup>{text}</sup>"


_BUILTIN_HANDLERS: Mapping[Role, RoleHandler] = MappingProxyType({
    Role.TITLE_REFERENCE: title_reference,
    Role.FUNC:            func_reference,
    Role.SUBSCRIPT:       subscript_reference,
    Role.SUPERSCRIPT:     superscript_reference,
})


# -----------------------------------------------------------------------------

def builtin_role(name: str) -> Optional[Role]:
    """Return the built-in role called *name* (or aliased to it), else None."""
    if name in ROLE_ALIASES:
        return ROLE_ALIASES[name]
    try:
        return Role(name)
    except ValueError:
        return None


# -----------------------------------------------------------------------------

class RoleRegistry:
    """Role name → handler lookup.

    Built-in roles always win and cannot be replaced; *extra* handlers extend
    the set.  A ``frozen`` registry refuses further registrations.
    """

    def __init__(
        self,
        extra: Optional[Mapping[str, RoleHandler]] = None,
        frozen: bool = False,
    ) -> None:
        self._extra: dict[str, RoleHandler] = {}
        self._frozen = False
        for name, handler in (extra or {}).items():
            self.register(name, handler)
        self._frozen = frozen

    def register(self, name: str, handler: RoleHandler) -> None:
        if self._frozen:
            raise RuntimeError("Role registry is frozen")
        if builtin_role(name) is not None:
            raise ValueError(f"Role '{name}' is built in and cannot be replaced")
        self._extra[name] = handler

    def handler_for(self, name: str) -> RoleHandler:
        role = builtin_role(name)
        if role is not None:
            return _BUILTIN_HANDLERS[role]
        try:
            return self._extra[name]
        except KeyError:
            raise UnknownRole(name) from None

    def resolve(self, name: str, key: str, text: str) -> str:
        return self.handler_for(name)(key, text)

    def names(self) -> list[str]:
        builtin = {*ROLE_ALIASES, *(r.value for r in Role)} - {""}
        return sorted(builtin | set(self._extra))


# -----------------------------------------------------------------------------

default_registry = RoleRegistry(frozen=True)


# -----------------------------------------------------------------------------
