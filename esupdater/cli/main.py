"""esupdater CLI — manage indices and templates from the command line."""

from __future__ import annotations

import sys
import tomllib
from importlib import metadata
from pathlib import Path

import click
import structlog
from elasticsearch import ApiError, TransportError

from esupdater.bootstrap import bootstrap as run_bootstrap
from esupdater.config.settings import close_es_client, get_es_client, get_settings
from esupdater.errors import ESUpdaterError
from esupdater.updaters import (
    create_index,
    create_template,
    is_index_exist,
    is_template_exist,
    remove_template,
    update_settings,
)

logger: structlog.stdlib.BoundLogger = structlog.get_logger()


def _run(fn, *args, **kwargs):
    """Call an updater with the shared client, closing it on exit.

    Library and client errors become a message and exit status 1.
    """
    try:
        return fn(get_es_client(), *args, **kwargs)
    except (ESUpdaterError, ApiError, TransportError, ValueError) as e:
        logger.error("command_failed", error=str(e), error_type=type(e).__name__)
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)
    finally:
        close_es_client()


@click.group()
@click.option(
    "--root",
    "-r",
    default=None,
    type=click.Path(file_okay=False, path_type=Path),
    help="Resource root (default: ESUPDATER_CONFIG_DIR or ./es).",
)
@click.pass_context
def cli(ctx: click.Context, root: Path | None) -> None:
    """esupdater — create Elasticsearch indices and templates from JSON files."""
    get_settings()  # trigger logging config
    ctx.ensure_object(dict)
    ctx.obj["root"] = root


@cli.command()
def version() -> None:
    """Print the esupdater version."""
    try:
        ver = metadata.version("esupdater")
    except metadata.PackageNotFoundError:
        # Fallback: read directly from pyproject.toml (dev / editable installs)
        pyproject = Path(__file__).resolve().parents[2] / "pyproject.toml"
        with pyproject.open("rb") as f:
            ver = tomllib.load(f)["project"]["version"]
    click.echo(f"esupdater v{ver}")


# ------------------------------------------------------------------
# Index commands
# ------------------------------------------------------------------


@cli.command("create-index")
@click.argument("index")
@click.pass_context
def create_index_cmd(ctx: click.Context, index: str) -> None:
    """Create INDEX if it does not exist, with its _settings.json."""
    action = _run(create_index, index, root=ctx.obj["root"])
    click.echo(f"Index [{index}]: {action.value}")


@cli.command("update-settings")
@click.argument("index")
@click.pass_context
def update_settings_cmd(ctx: click.Context, index: str) -> None:
    """Push _update_settings.json to INDEX."""
    action = _run(update_settings, index, root=ctx.obj["root"])
    click.echo(f"Index [{index}] settings: {action.value}")


# ------------------------------------------------------------------
# Template commands
# ------------------------------------------------------------------


@cli.command("create-template")
@click.argument("template")
@click.option("--force", "-f", is_flag=True, help="Replace the template if it exists.")
@click.pass_context
def create_template_cmd(ctx: click.Context, template: str, force: bool) -> None:
    """Create TEMPLATE from _template/TEMPLATE.json."""
    action = _run(create_template, template, force=force, root=ctx.obj["root"])
    click.echo(f"Template [{template}]: {action.value}")


@cli.command("remove-template")
@click.argument("template")
def remove_template_cmd(template: str) -> None:
    """Delete TEMPLATE from the cluster."""
    action = _run(remove_template, template)
    click.echo(f"Template [{template}]: {action.value}")


@cli.command()
@click.argument("kind", type=click.Choice(["index", "template"]))
@click.argument("name")
def exists(kind: str, name: str) -> None:
    """Check whether an index or template exists. Exit status 2 if not."""
    check = is_index_exist if kind == "index" else is_template_exist
    found = _run(check, name)
    click.echo(f"{kind.capitalize()} [{name}]: {'exists' if found else 'missing'}")
    if not found:
        sys.exit(2)


# ------------------------------------------------------------------
# Bootstrap
# ------------------------------------------------------------------


@cli.command()
@click.option("--index", "-i", "indices", multiple=True, help="Index to create (repeatable).")
@click.option("--template", "-t", "templates", multiple=True, help="Template to create (repeatable).")
@click.option("--force", "-f", is_flag=True, help="Replace existing templates.")
@click.pass_context
def bootstrap(ctx: click.Context, indices: tuple[str, ...], templates: tuple[str, ...], force: bool) -> None:
    """Create templates, then indices, in one run."""
    if not indices and not templates:
        raise click.UsageError("Give at least one --index or --template.")

    report = _run(
        run_bootstrap,
        indices=indices,
        templates=templates,
        root=ctx.obj["root"],
        force=force,
    )
    for result in report.results:
        click.echo(f"  {result.kind.value:<9} {result.name:<30} {result.operation:<16} {result.action.value}")
    click.echo(f"{len(report.changed)} changed, {len(report.skipped)} unchanged")


def main() -> None:
    cli(obj={})


if __name__ == "__main__":
    main()
