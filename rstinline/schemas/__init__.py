from rstinline.schemas.schemas import (
    RenderRequest, RenderResponse,
    HealthResponse,
)

__all__ = [
    "RenderRequest", "RenderResponse",
    "HealthResponse",
]
