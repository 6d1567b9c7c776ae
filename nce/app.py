"""Application orchestrator: wires together all components."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import TYPE_CHECKING

from rich.logging import RichHandler

from nce.api.counters import RequestCounter
from nce.config import check_settings, load_config, load_replacements
from nce.config.settings import LOG_LEVEL_ENV
from nce.status import StatusPageClient

if TYPE_CHECKING:
    from fastapi import FastAPI

logger = logging.getLogger(__name__)


def setup_logging(level: str = "INFO") -> None:
    """Log to stdout through Rich; unknown level names fall back to INFO."""
    numeric = logging.getLevelName(level.upper())
    if not isinstance(numeric, int):
        numeric = logging.INFO

    handler = RichHandler(show_path=False, rich_tracebacks=True)
    handler.setFormatter(logging.Formatter("[%(name)s] %(message)s"))
    logging.root.handlers = [handler]
    logging.root.setLevel(numeric)

    # Quiet noisy libraries
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)


class Application:
    """Top-level application orchestrator."""

    def __init__(
        self,
        config_path: str | Path | None = None,
        *,
        log_level: str | None = None,
    ) -> None:
        # Configure output before the config is read so its warnings show up
        setup_logging(log_level or os.environ.get(LOG_LEVEL_ENV, "INFO"))
        self.settings = load_config(config_path)
        setup_logging(log_level or self.settings.log_level)
        check_settings(self.settings, str(config_path or ""))
        logger.debug("Config loaded %s", self.settings.redacted())

        self.replacements = load_replacements(self.settings.replacement_path)
        logger.debug("Replace config loaded with %d values", len(self.replacements))

        self.counter = RequestCounter()
        self.client = StatusPageClient(self.settings.nextcloud)
        self._api_server = None

    def create_app(self) -> FastAPI:
        from nce.api.server import create_api_app

        return create_api_app(
            self.client, self.replacements.values, counter=self.counter,
        )

    async def start(self, *, host: str | None = None, port: int | None = None) -> None:
        """Serve the exporter until interrupted."""
        import uvicorn

        config = uvicorn.Config(
            self.create_app(),
            host=host or self.settings.api.host,
            port=port or self.settings.api.port,
            log_level="warning",
        )
        self._api_server = uvicorn.Server(config)
        logger.info("Exporter listening on %s:%d", config.host, config.port)
        try:
            await self._api_server.serve()
        finally:
            await self.shutdown()

    async def shutdown(self) -> None:
        """Graceful shutdown."""
        logger.info("Shutting down...")
        await self.client.close()
        logger.info("Shutdown complete.")
