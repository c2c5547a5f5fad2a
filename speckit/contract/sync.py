# speckit/contract/sync.py
"""
Contract sync - pull the provider's contract into the project.

Two sources:
    fetch_contract(url)                     one GET, no retry
    sync_contract(destination, url=...)     fetch + validate + write
    sync_contract(destination, file=...)    copy a local contract

A non-200 response or a transport error is terminal and surfaces the URL
and status/cause; nothing is written in that case.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Optional, Union

import httpx

from speckit.contract.loader import parse_contract, read_contract_text
from speckit.core.errors import ContractSyncError, NotFoundError
from speckit.core.http import http_client, to_sync_error
from speckit.logging.logger import get_logger
from speckit.logging.tags import SYNC

logger = get_logger(__name__)


def fetch_contract(url: str, **client_kwargs: Any) -> str:
    """
    Fetch contract text from a provider URL.

    Args:
        url: http(s) URL of the contract document
        **client_kwargs: Passed to the httpx client (timeout, transport, ...)

    Raises:
        ContractSyncError: Invalid URL, non-200 status, or connection failure
    """
    if not url:
        raise ContractSyncError("URL is required", url=url)

    if not url.startswith(("http://", "https://")):
        raise ContractSyncError(
            f"Invalid URL: {url}. URL must start with http:// or https://", url=url
        )

    logger.info(f"{SYNC} Fetching contract from {url}")

    with http_client(**client_kwargs) as client:
        try:
            response = client.get(url)
        except httpx.HTTPError as exc:
            raise to_sync_error(exc, url) from exc

    if response.status_code != 200:
        raise ContractSyncError(
            f"HTTP {response.status_code}: Failed to fetch contract from {url}",
            url=url,
            status_code=response.status_code,
        )

    return response.text


def sync_contract(
    destination: Union[str, Path],
    url: Optional[str] = None,
    file: Optional[Union[str, Path]] = None,
    **client_kwargs: Any,
) -> Path:
    """
    Refresh the project contract from a URL or a local file.

    The fetched text must parse as a contract before it replaces the
    destination.

    Raises:
        ValueError: If neither or both of url/file are given
        NotFoundError: If `file` does not exist
        ContractSyncError: If fetching fails
        ParseError: If the fetched document is not a valid contract, or the
            file is not UTF-8
    """
    if (url is None) == (file is None):
        raise ValueError("Provide exactly one of url or file")

    if url is not None:
        text = fetch_contract(url, **client_kwargs)
        source: Union[str, Path] = url
    else:
        source = Path(file)
        if not source.is_file():
            raise NotFoundError("File not found", path=source)
        text = read_contract_text(source)

    document = parse_contract(text, source=source)

    target = Path(destination)
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text(text, encoding="utf-8")

    logger.info(f"{SYNC} Saved '{document.info.title}' contract to {target}")
    return target


__all__ = ["fetch_contract", "sync_contract"]
