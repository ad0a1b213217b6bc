"""Bring a cluster up to date with a set of templates and indices.

Templates go first so that they apply to the indices created after them.
Each index is then created if missing and gets its update settings pushed.
Names are given explicitly; the resource root is never scanned.

Usage:
    esupdater bootstrap -i twitter -t tweet
"""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

import structlog
from elasticsearch import Elasticsearch

from esupdater.models import BootstrapReport, ResourceKind
from esupdater.updaters.index import create_index, update_settings
from esupdater.updaters.template import create_template

logger: structlog.stdlib.BoundLogger = structlog.get_logger()


def bootstrap(
    client: Elasticsearch,
    indices: Iterable[str] = (),
    templates: Iterable[str] = (),
    root: str | Path | None = None,
    force: bool = False,
) -> BootstrapReport:
    """Create templates then indices. The first failure stops the run."""
    report = BootstrapReport()
    logger.info("bootstrap_starting")

    for template in templates:
        action = create_template(client, template, force=force, root=root)
        report.record(ResourceKind.TEMPLATE, template, action, "create_template")

    for index in indices:
        action = create_index(client, index, root=root)
        report.record(ResourceKind.INDEX, index, action, "create_index")
        action = update_settings(client, index, root=root)
        report.record(ResourceKind.INDEX, index, action, "update_settings")

    logger.info(
        "bootstrap_complete",
        changed=len(report.changed),
        skipped=len(report.skipped),
    )
    return report

