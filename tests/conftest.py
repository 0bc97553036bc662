#!/usr/bin/env python
#
#
# -----------------------------------------------------------------------------
"""
Pytest fixtures for rst-inline tests.
"""
# -----------------------------------------------------------------------------

from __future__ import annotations

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from rstinline.core.config import get_settings
from rstinline.main import create_app
from rstinline.services.renderer import InlineRenderer


# -----------------------------------------------------------------------------

@pytest.fixture(autouse=True)
def testing_env(monkeypatch):
    """Every test sees fresh settings built from a testing environment."""
    monkeypatch.setenv("RSTINLINE_ENVIRONMENT", "testing")
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def renderer() -> InlineRenderer:
    return InlineRenderer()


@pytest_asyncio.fixture(scope="function")
async def client():
    """HTTP test client wired to a freshly built app."""
    app = create_app()
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac


# -----------------------------------------------------------------------------
