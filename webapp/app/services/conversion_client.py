"""HTTP client for the external conversion service."""

from __future__ import annotations

from typing import Optional

import httpx

from app.config import Settings


def build_client(
    settings: Settings, transport: Optional[httpx.AsyncBaseTransport] = None
) -> httpx.AsyncClient:
    """Create the async client both workflows post through.

    ``transport`` replaces the network layer, e.g. ``httpx.MockTransport``
    in tests.
    """
    return httpx.AsyncClient(
        base_url=settings.backend_url,
        timeout=settings.request_timeout,
        headers={"Content-Type": "application/json"},
        transport=transport,
    )
