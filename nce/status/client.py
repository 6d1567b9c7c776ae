"""HTTP client for the Nextcloud serverinfo status page."""

from __future__ import annotations

import logging

import httpx

from nce.config.settings import NextcloudConfig

logger = logging.getLogger(__name__)


class StatusPageClient:
    """Loads the status page using Nextcloud admin credentials."""

    def __init__(
        self,
        config: NextcloudConfig,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._url = config.url
        self._client = httpx.AsyncClient(
            auth=httpx.BasicAuth(config.user, config.password),
            timeout=config.timeout,
            verify=config.verify_tls,
            transport=transport,
        )

    async def fetch(self) -> str | None:
        """Return the status page text, or None when it can't be loaded."""
        try:
            response = await self._client.get(self._url)
        except httpx.HTTPError as exc:
            logger.error('Request of Nextcloud status failed (url="%s"): %s',
                         self._url, exc)
            return None

        logger.debug("Response %s", response)
        if response.status_code != httpx.codes.OK:
            logger.warning("Status code is not 200: %d", response.status_code)
            return None

        try:
            return response.content.decode(response.encoding or "utf-8")
        except (UnicodeDecodeError, LookupError) as exc:
            logger.warning("There was a problem loading the result: %s", exc)
            return None

    async def close(self) -> None:
        await self._client.aclose()
