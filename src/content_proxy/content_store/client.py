"""Sanity HTTP query client.

Usage:
    client = SanityClient(settings.sanity)
    post = await client.fetch(BLOG_POST_QUERY, {"slug": "mon-article"})
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from typing import Any, Optional, Protocol

import httpx

from content_proxy.common.config import SanitySettings
from content_proxy.common.errors import ContentStoreError

logger = logging.getLogger(__name__)


class ContentStore(Protocol):
    """Anything that can run a read-only query and return its result."""

    async def fetch(self, query: str, params: Optional[Mapping[str, Any]] = None) -> Any:
        ...


class SanityClient:
    """Runs GROQ queries through the Sanity HTTP API.

    One request per ``fetch`` call, no retries. ``transport`` lets tests
    substitute an ``httpx.MockTransport``.
    """

    def __init__(
        self,
        settings: SanitySettings,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        if not settings.project_id:
            raise ValueError("SANITY_PROJECT_ID must be set to query the content store")
        self._settings = settings
        self._transport = transport

    @property
    def query_url(self) -> str:
        host = "apicdn.sanity.io" if self._settings.use_cdn else "api.sanity.io"
        return (
            f"https://{self._settings.project_id}.{host}"
            f"/v{self._settings.api_version}/data/query/{self._settings.dataset}"
        )

    @staticmethod
    def build_params(query: str, params: Optional[Mapping[str, Any]] = None) -> dict[str, str]:
        """Encode a query and its parameters; GROQ values are JSON literals."""
        encoded = {"query": query}
        for name, value in (params or {}).items():
            encoded[f"${name}"] = json.dumps(value, ensure_ascii=False)
        return encoded

    async def fetch(self, query: str, params: Optional[Mapping[str, Any]] = None) -> Any:
        """Execute a query and return the ``result`` member of the reply.

        Raises:
            ContentStoreError: On transport failure, non-2xx status or a
                malformed reply.
        """
        headers = {"Accept": "application/json"}
        if self._settings.token:
            headers["Authorization"] = f"Bearer {self._settings.token}"

        async with httpx.AsyncClient(
            timeout=self._settings.timeout_seconds,
            transport=self._transport,
        ) as client:
            try:
                response = await client.get(
                    self.query_url,
                    params=self.build_params(query, params),
                    headers=headers,
                )
                response.raise_for_status()
            except httpx.HTTPStatusError as e:
                raise ContentStoreError(
                    f"Content store returned HTTP {e.response.status_code}"
                ) from e
            except httpx.RequestError as e:
                raise ContentStoreError(f"Content store unreachable: {e}") from e

        try:
            payload = response.json()
        except json.JSONDecodeError as e:
            raise ContentStoreError("Content store reply is not JSON") from e
        if not isinstance(payload, dict):
            raise ContentStoreError("Content store reply has no result")

        logger.debug("Query took %sms", payload.get("ms"))
        return payload.get("result")
