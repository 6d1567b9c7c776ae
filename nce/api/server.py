"""FastAPI server exposing the status page as Prometheus metrics."""

from __future__ import annotations

import logging
import time
from collections.abc import Mapping
from typing import Any, Protocol

from fastapi import FastAPI, Response
from fastapi.responses import PlainTextResponse

from nce.api.counters import RequestCounter
from nce.metrics import convert
from nce.metrics.values import ReplacementValue

logger = logging.getLogger(__name__)

CONTENT_TYPE = "text/plain; version=0.0.4; charset=utf-8"

# Names are part of the scrape contract of existing dashboards.
PARSE_DURATION = "rust_nce_parse_duration"
LOAD_DURATION = "rust_nce_load_duration"
TOTAL_DURATION = "rust_nce_total_duration"
START_COUNT = "rust_nce_request_start_count"
END_COUNT = "rust_nce_request_end_count"


class StatusFetcher(Protocol):
    async def fetch(self) -> str | None: ...


def exporter_preamble(
    *,
    parse: float,
    load: float,
    total: float,
    counter: RequestCounter,
) -> list[str]:
    """Self-timing and counter lines placed before the status metrics."""
    return [
        "# exporter duration",
        f"{PARSE_DURATION} {parse}",
        f"{LOAD_DURATION} {load}",
        f"{TOTAL_DURATION} {total}",
        f"{START_COUNT} {counter.started}",
        f"{END_COUNT} {counter.completed}",
        "# nextcloud metrics",
        "ocs_meta_up 1",
    ]


def create_api_app(
    fetcher: StatusFetcher,
    replacements: Mapping[str, ReplacementValue],
    counter: RequestCounter | None = None,
) -> FastAPI:
    """Create and configure the FastAPI application."""

    app = FastAPI(
        title="NCE",
        description="Nextcloud status page exporter for Prometheus",
        version="0.1.0",
    )
    counter = counter or RequestCounter()
    app.state.counter = counter

    async def scrape() -> Response:
        timer = time.perf_counter()
        counter.count_start()

        xml = await fetcher.fetch()
        if xml is None:
            return Response(status_code=503)
        dur_load = time.perf_counter() - timer

        conversion = convert(xml, replacements)
        dur_total = time.perf_counter() - timer
        counter.count_end()

        preamble = exporter_preamble(
            parse=dur_total - dur_load,
            load=dur_load,
            total=dur_total,
            counter=counter,
        )
        return PlainTextResponse(
            conversion.render(preamble), media_type=CONTENT_TYPE,
        )

    app.add_api_route("/", scrape, methods=["GET"])
    app.add_api_route("/metrics", scrape, methods=["GET"])

    @app.get("/health")
    async def health() -> dict[str, Any]:
        return {
            "status": "ok",
            "requests_started": counter.started,
            "requests_completed": counter.completed,
        }

    return app
