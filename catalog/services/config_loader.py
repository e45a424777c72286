from __future__ import annotations

"""Loading of the type-configuration table (config.json)."""

import json
import logging
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from catalog.schemas import CatalogConfig, TypeConfig

logger = logging.getLogger(__name__)


def default_config() -> CatalogConfig:
    return CatalogConfig(types={})


def config_from_dict(payload: Any) -> CatalogConfig:
    """Validate a decoded config document.

    A malformed entry for one type is dropped so that type falls back to the
    defaults; a document that is not an object yields the default config.
    The decoded document itself is echoed back unchanged by ``to_payload``.
    """
    if not isinstance(payload, dict):
        logger.warning("Configuration must be a JSON object, using defaults")
        return default_config()

    raw_types = payload.get("tipos")
    types: dict[str, TypeConfig] = {}
    if isinstance(raw_types, dict):
        for code, entry in raw_types.items():
            try:
                types[str(code)] = TypeConfig.model_validate(entry)
            except ValidationError as exc:
                logger.warning("Invalid configuration for type %s, using defaults: %s", code, exc)
    elif raw_types is not None:
        logger.warning("'tipos' must be an object, using defaults")

    rest = {key: value for key, value in payload.items() if key != "tipos"}
    try:
        config = CatalogConfig.model_validate({**rest, "tipos": types})
    except ValidationError as exc:
        logger.warning("Invalid configuration, using type table only: %s", exc)
        config = CatalogConfig(types=types)
    return config.keep_source(payload)


def load_config(path: str | Path) -> CatalogConfig:
    """Read ``path``; a missing or corrupt file never aborts a scan."""

    config_path = Path(path)
    if not config_path.exists():
        logger.info("No configuration at %s, using defaults", config_path)
        return default_config()

    try:
        payload = json.loads(config_path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as exc:
        logger.warning("Could not read %s, using defaults: %s", config_path, exc)
        return default_config()

    return config_from_dict(payload)
