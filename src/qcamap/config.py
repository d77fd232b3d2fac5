"""Configuration loading from environment variables and qcamap.toml."""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass, field

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib
from pathlib import Path

_CONFIG_FILENAME = "qcamap.toml"
_DEFAULT_BASE_URL = "https://www.qcamap.org"


@dataclass
class ApiConfig:
    """Remote QCAmap API settings."""

    base_url: str = _DEFAULT_BASE_URL
    timeout: int = 30
    cookie: str = ""  # raw Cookie header of a logged-in browser session


@dataclass
class QcamapConfig:
    """Top-level configuration."""

    api: ApiConfig = field(default_factory=ApiConfig)
    log_level: str = "INFO"


def load_config(config_path: Path | None = None) -> QcamapConfig:
    """Load configuration from environment variables and optional qcamap.toml.

    Priority: environment variables > qcamap.toml > defaults.
    """
    file_data: dict = {}
    if config_path and config_path.exists():
        file_data = tomllib.loads(config_path.read_text())
    else:
        for candidate in [Path.cwd() / _CONFIG_FILENAME, Path.home() / ".qcamap" / _CONFIG_FILENAME]:
            if candidate.exists():
                file_data = tomllib.loads(candidate.read_text())
                break

    api_data = file_data.get("api", {})

    return QcamapConfig(
        api=ApiConfig(
            base_url=os.getenv("QCAMAP_BASE_URL", api_data.get("base_url", _DEFAULT_BASE_URL)).rstrip("/"),
            timeout=int(os.getenv("QCAMAP_TIMEOUT", api_data.get("timeout", 30))),
            cookie=os.getenv("QCAMAP_COOKIE", api_data.get("cookie", "")),
        ),
        log_level=os.getenv("QCAMAP_LOG_LEVEL", file_data.get("log_level", "INFO")),
    )
