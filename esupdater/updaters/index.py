"""Index updater: create indices and push settings updates.

By default, indices are created with the cluster's default settings. Put a
``<root>/<index>/_settings.json`` file next to your code to create the index
with your own settings instead::

    {
      "index": {
        "number_of_shards": 3,
        "number_of_replicas": 2
      }
    }

A payload with top-level ``settings``, ``mappings`` or ``aliases`` keys is
sent as a full create-index body; any other top-level keys in it are folded
into ``settings``.

Existence is checked right before creation; this is not atomic, so a
concurrent creator can still make the create call fail with a
``BadRequestError`` (``resource_already_exists_exception``). That error is
propagated, not handled.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import structlog
from elasticsearch import Elasticsearch

from esupdater.config.constants import CREATE_INDEX_BODY_KEYS
from esupdater.errors import AcknowledgmentError
from esupdater.models import Action, ResourceKind
from esupdater.resources import blank_to_none, parse_json, read_settings, read_update_settings

logger: structlog.stdlib.BoundLogger = structlog.get_logger()


def create_index(client: Elasticsearch, index: str, root: str | Path | None = None) -> Action:
    """Create an index if it does not exist, using ``_settings.json`` if found."""
    settings = read_settings(index, root)
    return create_index_with_settings(client, index, settings)


def create_index_with_settings(
    client: Elasticsearch,
    index: str,
    settings: str | dict[str, Any] | None,
) -> Action:
    """Create an index if it does not exist.

    ``settings`` is a JSON string or dict, or ``None`` for cluster defaults.
    Returns ``Action.CREATED`` or ``Action.SKIPPED`` when the index is
    already there.
    """
    if is_index_exist(client, index):
        logger.debug("index_already_exists", index=index)
        return Action.SKIPPED

    logger.debug("index_not_found_creating", index=index)
    _create_index_in_elasticsearch(client, index, settings)
    return Action.CREATED


def _create_index_in_elasticsearch(
    client: Elasticsearch,
    index: str,
    settings: str | dict[str, Any] | None,
) -> None:
    kwargs: dict[str, Any] = {}
    # No settings means Elasticsearch defaults
    settings = blank_to_none(settings)
    if settings is not None:
        doc = parse_json(index, settings)
        logger.debug("index_settings_found", index=index, settings=doc)
        kwargs = _create_index_body(doc)

    resp = client.indices.create(index=index, **kwargs)
    if not resp.body.get("acknowledged", False):
        logger.warning("index_creation_not_acknowledged", index=index)
        raise AcknowledgmentError(ResourceKind.INDEX, index)

    logger.info("index_created", index=index)


def _create_index_body(doc: dict[str, Any]) -> dict[str, Any]:
    """Split a payload into create-index request fields.

    Top-level keys other than settings, mappings and aliases are index
    settings; explicit ``settings`` entries win over them.
    """
    if not any(key in doc for key in CREATE_INDEX_BODY_KEYS):
        return {"settings": doc}

    body = {key: doc[key] for key in CREATE_INDEX_BODY_KEYS if key in doc and key != "settings"}
    settings = {key: value for key, value in doc.items() if key not in CREATE_INDEX_BODY_KEYS}
    settings.update(doc.get("settings") or {})
    if settings:
        body["settings"] = settings
    return body


def is_index_exist(client: Elasticsearch, index: str) -> bool:
    """Check whether an index exists on the cluster."""
    return bool(client.indices.exists(index=index))


def update_settings(client: Elasticsearch, index: str, root: str | Path | None = None) -> Action:
    """Push ``_update_settings.json`` to an index, if the file exists.

    No existence check is made: updating a missing index fails in the
    client with ``NotFoundError``.
    """
    settings = read_update_settings(index, root)
    if settings is None:
        logger.debug("no_update_settings", index=index)
        return Action.SKIPPED

    doc = parse_json(index, settings)
    logger.debug("updating_index_settings", index=index, settings=doc)
    client.indices.put_settings(index=index, settings=doc)
    logger.info("index_settings_updated", index=index)
    return Action.UPDATED
