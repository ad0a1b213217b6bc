"""esupdater data models.

Outcomes of the index and template operations, and the report
returned by a bootstrap run.
"""

from enum import Enum

from pydantic import BaseModel, Field


class ResourceKind(str, Enum):
    INDEX = "index"
    TEMPLATE = "template"


class Action(str, Enum):
    CREATED = "created"
    SKIPPED = "skipped"
    REPLACED = "replaced"
    UPDATED = "updated"
    REMOVED = "removed"


class ActionResult(BaseModel):
    """What a single operation did to one index or template."""

    kind: ResourceKind
    name: str
    action: Action
    operation: str


class BootstrapReport(BaseModel):
    """Ordered results of a bootstrap run."""

    results: list[ActionResult] = Field(default_factory=list)

    def record(self, kind: ResourceKind, name: str, action: Action, operation: str) -> ActionResult:
        result = ActionResult(kind=kind, name=name, action=action, operation=operation)
        self.results.append(result)
        return result

    @property
    def changed(self) -> list[ActionResult]:
        """Results that modified the cluster."""
        return [r for r in self.results if r.action != Action.SKIPPED]

    @property
    def skipped(self) -> list[ActionResult]:
        return [r for r in self.results if r.action == Action.SKIPPED]
