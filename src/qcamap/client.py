"""HTTP transport for the QCAmap REST API.

All remote calls go through a ``Transport``. The production implementation
wraps an ``aiohttp.ClientSession``; tests plug in an in-memory fake.
"""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

import aiohttp

from qcamap.errors import HTTPError, TransportError

if TYPE_CHECKING:
    from qcamap.config import ApiConfig

logger = logging.getLogger(__name__)

API_PREFIX = "/api/v1"

_DEFAULT_HEADERS = {"Accept": "application/json, text/plain, */*"}


# ── Endpoint paths ────────────────────────────────────────────


def contents_path(project_id: int) -> str:
    return f"{API_PREFIX}/projects/{project_id}/contents"


def categories_path(project_id: int, rq_id: int) -> str:
    return f"{API_PREFIX}/projects/{project_id}/researchQuestions/{rq_id}/categories"


def category_path(project_id: int, rq_id: int, category_id: int) -> str:
    return f"{categories_path(project_id, rq_id)}/{category_id}"


def markers_path(project_id: int, rq_id: int, document_id: int) -> str:
    return (
        f"{API_PREFIX}/projects/{project_id}/researchQuestions/{rq_id}"
        f"/contents/{document_id}/markers"
    )


def marker_path(project_id: int, rq_id: int, document_id: int, marker_id: int) -> str:
    return f"{markers_path(project_id, rq_id, document_id)}/{marker_id}"


# ── Transport ─────────────────────────────────────────────────


@runtime_checkable
class Transport(Protocol):
    """Protocol that all transports must implement."""

    async def request(self, method: str, path: str, *, body: Any = None) -> Any:
        """Send a request and return the decoded JSON body (None if empty).

        Raises HTTPError for any non-success status and TransportError when
        no response arrives.
        """
        ...


class AiohttpTransport:
    """Transport backed by a lazily created aiohttp session."""

    def __init__(self, config: ApiConfig, session: aiohttp.ClientSession | None = None) -> None:
        self._base_url = config.base_url.rstrip("/")
        self._timeout = aiohttp.ClientTimeout(total=config.timeout)
        self._headers = dict(_DEFAULT_HEADERS)
        if config.cookie:
            self._headers["Cookie"] = config.cookie
        self._session = session
        self._owns_session = session is None

    def _get_session(self) -> aiohttp.ClientSession:
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(headers=self._headers, timeout=self._timeout)
            self._owns_session = True
        return self._session

    async def request(self, method: str, path: str, *, body: Any = None) -> Any:
        session = self._get_session()
        url = self._base_url + path
        logger.debug("%s %s", method, url)
        kwargs: dict = {}
        if body is not None:
            kwargs["json"] = body
        try:
            async with session.request(method, url, **kwargs) as response:
                if not 200 <= response.status < 300:
                    logger.error("%s %s failed with status %d", method, path, response.status)
                    raise HTTPError(response.status, method, path)
                return await response.json(content_type=None)
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            logger.error("%s %s failed: %s", method, path, e)
            raise TransportError(method, path, e) from e

    async def close(self) -> None:
        if self._session is not None and self._owns_session and not self._session.closed:
            await self._session.close()

    async def __aenter__(self) -> AiohttpTransport:
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.close()

