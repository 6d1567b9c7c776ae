from nce.config.replacements import ReplacementConfig, load_replacements
from nce.config.settings import Settings, check_settings, load_config

__all__ = [
    "ReplacementConfig",
    "Settings",
    "check_settings",
    "load_config",
    "load_replacements",
]
