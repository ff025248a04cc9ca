"""
CLI result formatters.

Separates display of change records and configuration from command logic.
"""

from __future__ import annotations

import json
from typing import Sequence

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from auditdiff.domain.config import AuditorConfig
from auditdiff.domain.element import Element, EventType

console = Console()

CHANGE_STYLES = {
    EventType.CREATED: "green",
    EventType.UPDATED: "yellow",
    EventType.DELETED: "red",
}


class ChangeFormatter:
    """Renders change records as a rich table or JSON."""

    def display_changes_table(self, changes: Sequence[Element], title: str = "Changes") -> None:
        if not changes:
            console.print("[green]No changes detected.[/green]")
            return

        table = Table(title=title)
        table.add_column("Field", style="cyan", no_wrap=True)
        table.add_column("Path", style="blue")
        table.add_column("Change")
        table.add_column("Previous")
        table.add_column("Updated")

        for change in sorted(changes, key=lambda c: (c.fqdn or "", c.name or "")):
            change_type = change.change_type
            style = CHANGE_STYLES.get(change_type, "white")
            table.add_row(
                change.name,
                change.fqdn or "",
                f"[{style}]{change_type.value if change_type else '-'}[/{style}]",
                "" if change.previous_value is None else str(change.previous_value),
                "" if change.updated_value is None else str(change.updated_value),
            )

        console.print(table)
        console.print(f"{len(changes)} change(s)")

    def render_json(self, changes: Sequence[Element]) -> str:
        return json.dumps([change.to_dict() for change in changes], indent=2, ensure_ascii=False)


class ConfigFormatter:
    """Renders a configuration summary panel."""

    def display_summary(self, config: AuditorConfig, source: str) -> None:
        order = config.ignore_collection_order
        settings = config.diff_settings
        lines = [
            f"[bold]Source:[/bold] {source}",
            f"[bold]Application:[/bold] {config.application_name or '-'}",
            f"[bold]Bucket capacity:[/bold] {config.bucket_capacity}",
            f"[bold]Ignore collection order:[/bold] {'yes' if order.enabled else 'no'}",
            f"[bold]Identifier fields:[/bold] {', '.join(order.fields)}",
            f"[bold]Parallel processing:[/bold] "
            f"{'on' if settings.enable_parallel_processing else 'off'}"
            f" (max {settings.max_parallel_buckets} workers)",
        ]
        console.print(Panel("\n".join(lines), title="Auditor Configuration"))
