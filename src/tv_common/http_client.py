"""Shared httpx client factory — one connection pool for all Horizon calls.

Created lazily on first use, closed in the FastAPI lifespan shutdown.
"""

import httpx

from config.settings import settings

_http_client: httpx.AsyncClient | None = None


async def get_http_client() -> httpx.AsyncClient:
    """Get or create the shared AsyncClient."""
    global _http_client  # noqa: PLW0603
    if _http_client is None:
        _http_client = httpx.AsyncClient(
            base_url=settings.HORIZON_URL,
            timeout=httpx.Timeout(settings.HORIZON_TIMEOUT_SECONDS),
            headers={"Accept": "application/json"},
        )
    return _http_client


async def close_http_client() -> None:
    """Close the shared AsyncClient."""
    global _http_client  # noqa: PLW0603
    if _http_client is not None:
        await _http_client.aclose()
        _http_client = None
