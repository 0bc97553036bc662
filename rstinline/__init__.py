"""rst-inline — render inline reStructuredText markup to HTML fragments."""

from rstinline._version import __version__
from rstinline.services.errors import (
    FootnoteSymbolsExhausted,
    RenderError,
    UnknownRole,
    UnknownURIScheme,
)
from rstinline.services.placeholders import content_key
from rstinline.services.renderer import InlineRenderer, RenderState, render
from rstinline.services.roles import Role, RoleRegistry

__all__ = [
    "__version__",
    "render", "InlineRenderer", "RenderState",
    "Role", "RoleRegistry",
    "content_key",
    "RenderError", "UnknownRole", "UnknownURIScheme", "FootnoteSymbolsExhausted",
]
