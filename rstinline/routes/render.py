#!/usr/bin/env python
#
#
# -----------------------------------------------------------------------------
"""
Render endpoint — live preview of inline markup.

GET  /api/v1/render?content=...
POST /api/v1/render   {"content": "..."}
"""
# -----------------------------------------------------------------------------

from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException, Query

from rstinline.core.config import get_settings
from rstinline.schemas import RenderRequest, RenderResponse
from rstinline.services.errors import RenderError
from rstinline.services.renderer import InlineRenderer

log = logging.getLogger(__name__)


# -----------------------------------------------------------------------------

router = APIRouter(prefix="/render", tags=["render"])

_renderer = InlineRenderer()


# -----------------------------------------------------------------------------

def _render_response(content: str) -> RenderResponse:
    settings = get_settings()
    if len(content) > settings.max_content_length:
        raise HTTPException(
            status_code=422,
            detail=f"Content exceeds {settings.max_content_length} characters",
        )
    try:
        state = _renderer.render_state(content)
    except RenderError as exc:
        raise HTTPException(
            status_code=422,
            detail=str(exc),
        ) from exc
    return RenderResponse(
        html=state.content,
        hyperlink_references=state.hyperlink_references,
        substitution_references=state.substitution_references,
        anonymous_hyperlinks=state.anonymous_hyperlinks,
    )


# -----------------------------------------------------------------------------

@router.get("", response_model=RenderResponse)
async def render_preview(content: str = Query(default="")):
    """Return rendered HTML for a snippet of inline markup — used by editor previews."""
    return _render_response(content)


@router.post("", response_model=RenderResponse)
async def render_document(body: RenderRequest):
    log.debug("Rendering %d chars", len(body.content))
    return _render_response(body.content)


# -----------------------------------------------------------------------------
