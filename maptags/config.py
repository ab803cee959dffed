"""Configuration helpers for the tag menu."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field, ValidationError

from .board import PAGE_SIZE
from .bridge import MIN_RECORD_ID_LENGTH
from .catalogue import DEFAULT_LABELS, TagCatalogue

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path(__file__).resolve().parent.parent / "maptags.json"


class Settings(BaseModel):
    tags: List[str] = Field(default_factory=lambda: list(DEFAULT_LABELS))
    page_size: int = Field(default=PAGE_SIZE, ge=1)
    min_record_id_length: int = Field(default=MIN_RECORD_ID_LENGTH, ge=0)
    notify_url: Optional[str] = None
    notify_retries: int = Field(default=3, ge=1)

    def catalogue(self) -> TagCatalogue:
        return TagCatalogue(labels=self.tags)


def load_config(path: Optional[Path] = None) -> Dict[str, Any]:
    """Load configuration from *path* if it exists.

    Parameters
    ----------
    path:
        Optional path to a JSON configuration file. When omitted the function
        looks for ``maptags.json`` in the repository root.  Any errors while
        reading the file result in an empty config dictionary.
    """

    cfg_path = path or DEFAULT_CONFIG_PATH
    try:
        with open(cfg_path, encoding="utf-8") as fh:
            return json.load(fh)
    except (OSError, ValueError):
        return {}


def apply_config(config: Dict[str, Any]) -> Settings:
    """Validate *config* into :class:`Settings`.

    Supported keys are ``tags``, ``page_size``, ``min_record_id_length``,
    ``notify_url`` and ``notify_retries``.  Unknown keys are ignored.  A
    config that fails validation, including a tag list with blank or
    duplicate labels, is logged and replaced by the defaults.
    """

    try:
        settings = Settings(**config)
        settings.catalogue()
    except (TypeError, ValidationError) as e:
        logger.warning("Invalid tag menu config, using defaults: %s", e)
        return Settings()
    return settings
