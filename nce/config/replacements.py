"""Replacement table for non-numeric status values (``yes`` -> 1, ...)."""

from __future__ import annotations

import json
import logging
from pathlib import Path

from pydantic import BaseModel, Field, ValidationError

from nce.metrics.values import ReplacementValue, parse_number

logger = logging.getLogger(__name__)


class ReplacementConfig(BaseModel):
    """Contents of the replacement JSON file.

    Only ``values`` is used; other top-level keys are ignored.
    """
    values: dict[str, ReplacementValue] = Field(default_factory=dict)

    def __len__(self) -> int:
        return len(self.values)


def _warn_non_numeric(config: ReplacementConfig, path: Path) -> None:
    for key, value in config.values.items():
        if isinstance(value, str) and parse_number(value.strip()) is None:
            logger.warning(
                "Replacement for %r in %s is not a number (%r); values mapped "
                "to it are dropped.", key, path, value,
            )


def load_replacements(path: str | Path) -> ReplacementConfig:
    """Read the replacement file, falling back to an empty table.

    A missing, unreadable or malformed file never stops the exporter;
    every non-numeric value is dropped instead.
    """
    path = Path(path)
    logger.debug("Reading replace config from: %s", path)
    if not path.exists():
        logger.error("Replacement config file doesn't exist: %s", path)
        return ReplacementConfig()

    try:
        with open(path, encoding="utf-8") as f:
            raw = json.load(f)
        config = ReplacementConfig.model_validate(raw)
        _warn_non_numeric(config, path)
        return config
    except (OSError, UnicodeDecodeError) as exc:
        logger.error("The replacement config could not be read (%s): %s", path, exc)
    except json.JSONDecodeError as exc:
        logger.error("The replacement config is not valid JSON (%s): %s", path, exc)
    except ValidationError as exc:
        logger.error("The replacement config has an invalid shape (%s): %s", path, exc)
    return ReplacementConfig()
