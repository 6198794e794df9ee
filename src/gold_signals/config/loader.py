"""Config loader — reads YAML, applies environment variable overrides."""

from __future__ import annotations

import os
from pathlib import Path

import yaml

from gold_signals.config.schema import AppConfig

# env var -> (section path, key)
ENV_OVERRIDES: dict[str, tuple[tuple[str, ...], str]] = {
    "TWELVE_DATA_API_KEY": (("providers", "twelve_data"), "api_key"),
    "METALS_DEV_API_KEY": (("providers", "metals_dev"), "api_key"),
    "NEWS_API_KEY": (("providers", "news_api"), "api_key"),
    "GOLD_SIGNALS_LOG_LEVEL": (("logging",), "level"),
    "GOLD_SIGNALS_LOG_FORMAT": (("logging",), "format"),
    "GOLD_SIGNALS_HOST": (("api",), "host"),
    "GOLD_SIGNALS_PORT": (("api",), "port"),
}


def load_config(path: str | Path | None = None) -> AppConfig:
    """Load config from a YAML file, then apply env var overrides.

    If *path* is None, ``GOLD_SIGNALS_CONFIG`` is consulted. If neither
    names an existing file, defaults are used.

    Environment variable overrides:
        TWELVE_DATA_API_KEY     -> providers.twelve_data.api_key
        METALS_DEV_API_KEY      -> providers.metals_dev.api_key
        NEWS_API_KEY            -> providers.news_api.api_key
        GOLD_SIGNALS_LOG_LEVEL  -> logging.level
        GOLD_SIGNALS_LOG_FORMAT -> logging.format
        GOLD_SIGNALS_HOST       -> api.host
        GOLD_SIGNALS_PORT       -> api.port
    """
    if path is None:
        path = os.environ.get("GOLD_SIGNALS_CONFIG") or None

    data: dict = {}
    if path is not None:
        p = Path(path)
        if p.exists():
            with open(p) as f:
                data = yaml.safe_load(f) or {}

    for env_name, (sections, key) in ENV_OVERRIDES.items():
        value = os.environ.get(env_name)
        if not value:
            continue
        target = data
        for section in sections:
            target = target.setdefault(section, {})
        target[key] = value

    return AppConfig.model_validate(data)
