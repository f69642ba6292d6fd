"""Settings — layered configuration for host applications.

Values are merged in order: built-in defaults -> ``.bracecalc/config.json``
in the project root -> environment variables.
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel

from bracecalc.config import (
    CUSTOM_STORE_FILENAME,
    DEFAULT_CATALOG_PATH,
    PROJECT_CONFIG_DIR,
    PROJECT_CONFIG_FILENAME,
)

logger = logging.getLogger(__name__)

# Environment variable -> Settings field
_ENV_KEYS: dict[str, str] = {
    "BRACECALC_CATALOG_PATH": "catalog_path",
    "BRACECALC_CUSTOM_STORE": "custom_store_path",
    "BRACECALC_LOG_LEVEL": "log_level",
}


class Settings(BaseModel):
    """Resolved runtime settings."""

    catalog_path: Path = DEFAULT_CATALOG_PATH
    """Catalog JSON document to load at startup."""

    custom_store_path: Path | None = None
    """Where custom bracing types are persisted.  *None* keeps them in memory."""

    log_level: str = "INFO"


def load_settings(project_path: str | Path | None = None) -> Settings:
    """Load merged settings for *project_path*.

    Relative paths found in ``config.json`` are resolved against the
    project root.
    """
    values: dict[str, Any] = {}

    if project_path is not None:
        root = Path(project_path)
        values["custom_store_path"] = root / PROJECT_CONFIG_DIR / CUSTOM_STORE_FILENAME

        config_json = root / PROJECT_CONFIG_DIR / PROJECT_CONFIG_FILENAME
        if config_json.is_file():
            try:
                data = json.loads(config_json.read_text(encoding="utf-8"))
                for key in ("catalog_path", "custom_store_path"):
                    if data.get(key):
                        path = Path(data[key])
                        values[key] = path if path.is_absolute() else root / path
                if data.get("log_level"):
                    values["log_level"] = str(data["log_level"])
            except (json.JSONDecodeError, OSError):
                logger.debug("Could not read %s", config_json, exc_info=True)

    # Environment variables override all
    for env_key, field in _ENV_KEYS.items():
        env_val = os.environ.get(env_key)
        if env_val:
            values[field] = env_val

    return Settings.model_validate(values)


def configure_logging(settings: Settings) -> None:
    """Apply ``settings.log_level`` to the ``bracecalc`` logger."""
    level = logging.getLevelName(settings.log_level.upper())
    if not isinstance(level, int):
        logger.warning("Unknown log level %r, using INFO", settings.log_level)
        level = logging.INFO
    logging.getLogger("bracecalc").setLevel(level)
