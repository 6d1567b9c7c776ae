"""Entry point: python -m nce."""

from __future__ import annotations

import argparse
import asyncio


def main() -> None:
    parser = argparse.ArgumentParser(
        prog="nce",
        description="Nextcloud status page exporter for Prometheus",
    )
    parser.add_argument(
        "-c", "--config",
        help="Path to configuration YAML file",
        default=None,
    )
    parser.add_argument("--host", help="Address to listen on", default=None)
    parser.add_argument("--port", type=int, help="Port to listen on", default=None)
    parser.add_argument(
        "--log-level",
        help="Log level (overrides config and NCE_LOG_LEVEL)",
        default=None,
    )
    args = parser.parse_args()

    from nce.app import Application

    app = Application(config_path=args.config, log_level=args.log_level)
    try:
        asyncio.run(app.start(host=args.host, port=args.port))
    except KeyboardInterrupt:
        pass


if __name__ == "__main__":
    main()
