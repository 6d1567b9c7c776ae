"""YAML config loader with environment variable expansion."""

from __future__ import annotations

import logging
import os
import re
from pathlib import Path

import yaml
from pydantic import BaseModel, Field

logger = logging.getLogger(__name__)

LOG_LEVEL_ENV = "NCE_LOG_LEVEL"


def _expand_env_vars(value: str) -> str:
    """Replace ${VAR_NAME} with environment variable values."""
    pattern = re.compile(r"\$\{([^}]+)\}")
    def replacer(match: re.Match) -> str:
        var = match.group(1)
        return os.environ.get(var, match.group(0))
    return pattern.sub(replacer, value)


def _walk_and_expand(obj: object) -> object:
    """Recursively expand environment variables in strings."""
    if isinstance(obj, str):
        return _expand_env_vars(obj)
    if isinstance(obj, dict):
        return {k: _walk_and_expand(v) for k, v in obj.items()}
    if isinstance(obj, list):
        return [_walk_and_expand(item) for item in obj]
    return obj


class NextcloudConfig(BaseModel):
    url: str = ""
    user: str = ""
    password: str = ""
    replacement_config: str = "replacements.json"
    timeout: float = 30.0
    verify_tls: bool = True


class APIConfig(BaseModel):
    host: str = "127.0.0.1"
    port: int = 9205


class LoggingConfig(BaseModel):
    level: str = "INFO"


class Settings(BaseModel):
    nextcloud: NextcloudConfig = Field(default_factory=NextcloudConfig)
    api: APIConfig = Field(default_factory=APIConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    config_dir: Path = Field(default_factory=Path.cwd, exclude=True)

    @property
    def replacement_path(self) -> Path:
        """Replacement file path; relative paths resolve against the config dir."""
        path = Path(self.nextcloud.replacement_config).expanduser()
        if not path.is_absolute():
            path = self.config_dir / path
        return path

    @property
    def log_level(self) -> str:
        return os.environ.get(LOG_LEVEL_ENV, self.logging.level).upper()

    def missing_fields(self) -> list[str]:
        """Names of the nextcloud settings the exporter cannot work without."""
        return [
            name for name in ("url", "user", "password")
            if not getattr(self.nextcloud, name)
        ]

    def redacted(self) -> str:
        nc = self.nextcloud
        return (
            "nce config:\n"
            f'nextcloud.url = "{nc.url}"\n'
            f'nextcloud.user = "{nc.user}"\n'
            f'nextcloud.password = "{"*****" if nc.password else ""}"\n'
            f'nextcloud.replacement_config = "{nc.replacement_config}"\n'
            f'api = "{self.api.host}:{self.api.port}"'
        )


def load_config(path: str | Path | None = None) -> Settings:
    """Load configuration from a YAML file, falling back to defaults."""
    if path is None:
        candidates = [
            Path("config.yaml"),
            Path("config.yml"),
            Path.home() / ".nce" / "config.yaml",
        ]
        for candidate in candidates:
            if candidate.exists():
                path = candidate
                break

    if path is not None:
        path = Path(path)
        if not path.is_file():
            raise FileNotFoundError(
                f"No config found at {path}. "
                "Nextcloud credentials are required for the exporter to work."
            )
        with open(path, encoding="utf-8") as f:
            raw = yaml.safe_load(f) or {}
        raw = _walk_and_expand(raw)

        settings = Settings.model_validate(raw)
        settings.config_dir = path.resolve().parent
        return settings

    logger.warning("No configuration file found, using defaults.")
    return Settings()


def check_settings(settings: Settings, source: str = "") -> None:
    """Warn about settings that leave the exporter without metrics."""
    missing = settings.missing_fields()
    if "user" in missing or "password" in missing:
        logger.warning("Nextcloud user credentials are empty.")
    if "url" in missing:
        logger.warning("Nextcloud status page URL config is empty.")
    if missing:
        logger.warning("Consider updating the configuration (%s).",
                       source or "config.yaml")
