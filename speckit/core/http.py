# speckit/core/http.py
"""
HTTP client factory used for contract sync.

Usage:
    from speckit.core.http import http_client, to_sync_error

    with http_client() as client:
        response = client.get(url)

Tests pass `transport=httpx.MockTransport(handler)` through **kwargs.
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import Any, Dict, Generator, Optional

import httpx

from speckit.core.errors import ContractSyncError
from speckit.logging.logger import get_logger

logger = get_logger(__name__)

DEFAULT_TIMEOUT = 30.0

DEFAULT_HEADERS = {
    "Accept": "application/yaml, application/json;q=0.9, */*;q=0.5",
}


def create_http_client(
    timeout: Optional[float] = None,
    headers: Optional[Dict[str, str]] = None,
    **kwargs: Any,
) -> httpx.Client:
    """
    Create a configured HTTP client.

    Args:
        timeout: Request timeout in seconds (default: DEFAULT_TIMEOUT)
        headers: Additional headers to include
        **kwargs: Additional arguments passed to httpx.Client
    """
    final_headers = dict(DEFAULT_HEADERS)
    if headers:
        final_headers.update(headers)

    timeout = DEFAULT_TIMEOUT if timeout is None else timeout
    client = httpx.Client(headers=final_headers, timeout=timeout, **kwargs)

    logger.debug(f"Created HTTP client (timeout={timeout}s)")
    return client


@contextmanager
def http_client(**kwargs: Any) -> Generator[httpx.Client, None, None]:
    """Context manager for an HTTP client with automatic cleanup."""
    client = create_http_client(**kwargs)
    try:
        yield client
    finally:
        client.close()


def to_sync_error(exc: Exception, url: str) -> ContractSyncError:
    """
    Convert an httpx exception to a ContractSyncError naming the URL.

    Example:
        try:
            response = client.get(url)
        except httpx.HTTPError as exc:
            raise to_sync_error(exc, url) from exc
    """
    if isinstance(exc, httpx.HTTPStatusError):
        status_code = exc.response.status_code
        return ContractSyncError(
            f"HTTP {status_code}: Failed to fetch contract from {url}",
            url=url,
            status_code=status_code,
        )

    if isinstance(exc, httpx.TimeoutException):
        return ContractSyncError(f"Timed out fetching contract from {url}: {exc}", url=url)

    return ContractSyncError(f"Failed to connect to {url}: {exc}", url=url)


__all__ = ["DEFAULT_TIMEOUT", "create_http_client", "http_client", "to_sync_error"]
