"""Idempotent index and template updaters."""

from esupdater.updaters.index import (
    create_index,
    create_index_with_settings,
    is_index_exist,
    update_settings,
)
from esupdater.updaters.template import (
    create_template,
    create_template_with_json,
    is_template_exist,
    remove_template,
)

__all__ = [
    "create_index",
    "create_index_with_settings",
    "create_template",
    "create_template_with_json",
    "is_index_exist",
    "is_template_exist",
    "remove_template",
    "update_settings",
]
