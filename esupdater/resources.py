"""Resource reader for index settings and template definitions.

Files are resolved under a root directory by convention::

    <root>/<index>/_settings.json          settings used to create the index
    <root>/<index>/_update_settings.json   settings pushed to an existing index
    <root>/_template/<template>.json       index template body

A missing file is not an error: the readers return ``None`` and the
updaters fall back to cluster defaults or skip the update.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import structlog

from esupdater.config.constants import (
    INDEX_SETTINGS_FILE,
    JSON_EXT,
    TEMPLATE_DIR,
    UPDATE_SETTINGS_FILE,
)
from esupdater.config.settings import get_settings
from esupdater.errors import InvalidResourceError

logger: structlog.stdlib.BoundLogger = structlog.get_logger()


def resolve_root(root: str | Path | None = None) -> Path:
    """Return the resource root, defaulting to the configured config dir."""
    if root is None:
        root = get_settings().config_dir
    return Path(root)


def read_file(path: str | Path) -> str | None:
    """Read a resource file.

    Returns ``None`` when the file does not exist or holds only whitespace.
    """
    path = Path(path)
    if not path.is_file():
        logger.debug("resource_not_found", path=str(path))
        return None

    content = path.read_text(encoding="utf-8")
    if not content.strip():
        logger.debug("resource_empty", path=str(path))
        return None
    return content


def read_settings(index: str, root: str | Path | None = None) -> str | None:
    """Read ``_settings.json`` for an index."""
    return read_file(resolve_root(root) / index / f"{INDEX_SETTINGS_FILE}{JSON_EXT}")


def read_update_settings(index: str, root: str | Path | None = None) -> str | None:
    """Read ``_update_settings.json`` for an index."""
    return read_file(resolve_root(root) / index / f"{UPDATE_SETTINGS_FILE}{JSON_EXT}")


def read_template(template: str, root: str | Path | None = None) -> str | None:
    """Read a template body (``.json`` is appended to the name)."""
    return read_file(resolve_root(root) / TEMPLATE_DIR / f"{template}{JSON_EXT}")


def parse_json(name: str, payload: str | dict[str, Any]) -> dict[str, Any]:
    """Turn a payload into a dict, accepting already-parsed documents."""
    if isinstance(payload, dict):
        return payload
    try:
        doc = json.loads(payload)
    except json.JSONDecodeError as e:
        raise InvalidResourceError(name, str(e)) from e
    if not isinstance(doc, dict):
        raise InvalidResourceError(name, f"expected a JSON object, got {type(doc).__name__}")
    return doc


def blank_to_none(payload: str | dict[str, Any] | None) -> str | dict[str, Any] | None:
    """Treat a whitespace-only string payload like a missing one."""
    if isinstance(payload, str) and not payload.strip():
        return None
    return payload
