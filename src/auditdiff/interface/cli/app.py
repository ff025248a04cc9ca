"""
CLI application.

Commands:
    auditdiff diff BEFORE AFTER     diff two JSON snapshots
    auditdiff config validate       validate the auditor configuration
"""

import json
import logging
from pathlib import Path
from typing import Any, List, Optional

import typer
from rich.markup import escape

from auditdiff.application.diff import ObjectDiffChecker
from auditdiff.domain.config import AuditorConfig, IgnoreCollectionOrder
from auditdiff.domain.errors import AuditDiffError, SnapshotLoadError
from auditdiff.infrastructure.config import ConfigRepository
from auditdiff.infrastructure.excel_report import write_change_report
from auditdiff.infrastructure.logging_config import setup_logging
from auditdiff.interface.cli.formatters import ChangeFormatter, ConfigFormatter, console

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="auditdiff",
    help="Field-level change detection for audit trails.",
    add_completion=False,
    rich_markup_mode="rich",
    no_args_is_help=True,
)
config_app = typer.Typer(help="Configuration commands.", no_args_is_help=True)
app.add_typer(config_app, name="config")


@app.callback()
def main_callback(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
    log_file: Optional[Path] = typer.Option(None, "--log-file", help="Also log to this file."),
):
    """
    AuditDiff - compare two object snapshots and report field-level changes.

    Configuration is read from [bold]<config-dir>/auditor_config.json[/bold];
    CLI options override it.
    """
    setup_logging(
        level=logging.DEBUG if verbose else logging.WARNING,
        log_file=str(log_file) if log_file else None,
    )


def load_snapshot(path: Path) -> Any:
    """
    Load a JSON snapshot; a file containing ``null`` is an absent snapshot.

    Raises:
        SnapshotLoadError: If the file cannot be read or parsed
    """
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except OSError as e:
        raise SnapshotLoadError(f"Cannot read snapshot {path}: {e}") from e
    except json.JSONDecodeError as e:
        raise SnapshotLoadError(f"Invalid JSON in snapshot {path}: {e}") from e


def _apply_overrides(
    config: AuditorConfig, ignore_order: bool, id_fields: Optional[List[str]]
) -> AuditorConfig:
    if not ignore_order and not id_fields:
        return config
    current = config.ignore_collection_order
    order = IgnoreCollectionOrder(
        enabled=ignore_order or current.enabled,
        fields=id_fields or current.fields,
    )
    return config.model_copy(update={"ignore_collection_order": order})


@app.command("diff")
def diff_command(
    before: Path = typer.Argument(..., help="JSON file with the previous state."),
    after: Path = typer.Argument(..., help="JSON file with the updated state."),
    config_dir: Path = typer.Option(
        Path("config"), "--config-dir", "-c", help="Directory containing auditor_config.json."
    ),
    ignore_order: bool = typer.Option(
        False, "--ignore-order", help="Match collection members regardless of position."
    ),
    id_field: Optional[List[str]] = typer.Option(
        None, "--id-field", help="Identifier field for unordered matching (repeatable)."
    ),
    as_json: bool = typer.Option(False, "--json", help="Print changes as JSON."),
    excel: Optional[Path] = typer.Option(None, "--excel", help="Write an Excel change report."),
):
    """
    Diff two JSON snapshots and report every field-level change.
    """
    try:
        config = ConfigRepository(config_dir).load_or_default()
        config = _apply_overrides(config, ignore_order, id_field)
        changes = ObjectDiffChecker(config).diff(load_snapshot(before), load_snapshot(after))
    except AuditDiffError as e:
        logger.error("Diff failed: %s", e)
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    formatter = ChangeFormatter()
    if as_json:
        typer.echo(formatter.render_json(changes))
    else:
        formatter.display_changes_table(changes, title=f"{before.name} → {after.name}")

    if excel:
        path = write_change_report(changes, excel)
        if not as_json:
            console.print(f"Report written to {path}")


@config_app.command("validate")
def config_validate(
    config_dir: Path = typer.Option(
        Path("config"), "--config-dir", "-c", help="Directory containing auditor_config.json."
    ),
):
    """
    Validate the auditor configuration and print a summary.
    """
    repository = ConfigRepository(config_dir)
    try:
        config = repository.load_auditor_config()
    except AuditDiffError as e:
        logger.error("Config validation failed: %s", e)
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    ConfigFormatter().display_summary(config, str(config_dir))
    console.print("[green]Configuration is valid.[/green]")
