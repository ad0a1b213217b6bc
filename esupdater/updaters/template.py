"""Template updater: create, replace and remove index templates.

Template bodies are read from ``<root>/_template/<template>.json``::

    {
      "index_patterns": ["twitter*"],
      "settings": {"number_of_shards": 1},
      "mappings": {"properties": {"message": {"type": "text"}}}
    }

With ``force=False`` an existing template is left untouched. With
``force=True`` it is deleted and recreated, even if the body did not change.
Between the delete and the put the template is briefly absent on the
cluster; indices created in that window do not get it.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import structlog
from elasticsearch import Elasticsearch

from esupdater.errors import AcknowledgmentError, MissingResourceError
from esupdater.models import Action, ResourceKind
from esupdater.resources import blank_to_none, parse_json, read_template

logger: structlog.stdlib.BoundLogger = structlog.get_logger()


def create_template(
    client: Elasticsearch,
    template: str,
    force: bool = False,
    root: str | Path | None = None,
) -> Action:
    """Create a template from its JSON file under ``root``."""
    template_json = read_template(template, root)
    return create_template_with_json(client, template, template_json, force)


def create_template_with_json(
    client: Elasticsearch,
    template: str,
    template_json: str | dict[str, Any] | None,
    force: bool = False,
) -> Action:
    """Create a template, replacing an existing one when ``force`` is set.

    An existing template without ``force`` is left alone whatever the body.
    Otherwise the body is validated before the template is removed, so a
    bad or missing file never leaves a forced template deleted.
    """
    exists = is_template_exist(client, template)
    if exists and not force:
        logger.debug("template_already_exists", template=template)
        return Action.SKIPPED

    body = _template_body(template, template_json)

    removed = False
    if exists:
        logger.debug("template_exists_force_removing", template=template)
        remove_template(client, template)
        removed = True

    if not is_template_exist(client, template):
        logger.debug("template_not_found_creating", template=template)
        _create_template_in_elasticsearch(client, template, body)
        return Action.REPLACED if removed else Action.CREATED

    return Action.SKIPPED


def _template_body(template: str, template_json: str | dict[str, Any] | None) -> dict[str, Any]:
    template_json = blank_to_none(template_json)
    if template_json is None:
        raise MissingResourceError(ResourceKind.TEMPLATE, template)
    return parse_json(template, template_json)


def _create_template_in_elasticsearch(client: Elasticsearch, template: str, body: dict[str, Any]) -> None:
    resp = client.indices.put_template(name=template, body=body)
    if not resp.body.get("acknowledged", False):
        logger.warning("template_creation_not_acknowledged", template=template)
        raise AcknowledgmentError(ResourceKind.TEMPLATE, template)

    logger.info("template_created", template=template)


def is_template_exist(client: Elasticsearch, template: str) -> bool:
    """Check whether a template with exactly this name exists."""
    resp = client.options(ignore_status=404).indices.get_template(name=template)
    return template in resp.body


def remove_template(client: Elasticsearch, template: str) -> Action:
    """Delete a template. Deleting a missing one raises ``NotFoundError``."""
    client.indices.delete_template(name=template)
    logger.info("template_removed", template=template)
    return Action.REMOVED
