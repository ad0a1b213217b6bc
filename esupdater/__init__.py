"""esupdater — idempotent Elasticsearch index and template setup."""

from esupdater.bootstrap import bootstrap
from esupdater.errors import (
    AcknowledgmentError,
    ESUpdaterError,
    InvalidResourceError,
    MissingResourceError,
)
from esupdater.models import Action, ActionResult, BootstrapReport, ResourceKind
from esupdater.updaters import (
    create_index,
    create_index_with_settings,
    create_template,
    create_template_with_json,
    is_index_exist,
    is_template_exist,
    remove_template,
    update_settings,
)

__all__ = [
    "AcknowledgmentError",
    "Action",
    "ActionResult",
    "BootstrapReport",
    "ESUpdaterError",
    "InvalidResourceError",
    "MissingResourceError",
    "ResourceKind",
    "bootstrap",
    "create_index",
    "create_index_with_settings",
    "create_template",
    "create_template_with_json",
    "is_index_exist",
    "is_template_exist",
    "remove_template",
    "update_settings",
]
