"""Renderers for report rows and terminal helpers."""

import json
from dataclasses import asdict
from itertools import groupby
from typing import List, Sequence

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ..client.models import ReportRow

console = Console()


def _by_contest(rows: Sequence[ReportRow]):
    """Group consecutive rows of the same contest, keeping their order."""
    for _, group in groupby(rows, key=lambda r: r.contest_id):
        yield list(group)


def render_json(rows: Sequence[ReportRow]) -> str:
    """Encode rows as a JSON array."""
    return json.dumps([asdict(r) for r in rows], indent=2, ensure_ascii=False)


def render_text(rows: Sequence[ReportRow]) -> str:
    """Tab-separated listing with a header line per contest."""
    blocks = []
    for group in _by_contest(rows):
        head = group[0]
        lines = [f"# {head.contest}\t{head.contest_id}\t{head.contest_url}"]
        for row in group:
            lines.append(
                "\t".join(
                    [str(row.run_id), row.submitted_at, row.user, row.problem, row.result]
                )
            )
        blocks.append("\n".join(lines))
    return "\n\n".join(blocks)


def create_table(title: str, headers: list) -> Table:
    """Create a formatted table for display."""
    table = Table(title=title, show_header=True, header_style="bold cyan")
    for header in headers:
        table.add_column(header)
    return table


def format_result_color(result: str) -> str:
    """Format a run result with appropriate color."""
    status = result.split(" ", 1)[0].upper()
    text = escape(result)

    if status == "OK":
        return f"[green]{text}[/green]"
    elif status in ["WA", "RT", "CE", "PE", "SE", "SV", "DQ", "RJ"]:
        return f"[red]{text}[/red]"
    elif status in ["TL", "ML", "WT"]:
        return f"[magenta]{text}[/magenta]"
    elif status in ["AC", "PT", "PD", "CD", "RU", "CG", "AV", "PR"]:
        return f"[yellow]{text}[/yellow]"
    else:
        return text


def print_tables(rows: List[ReportRow]) -> None:
    """Print one table per contest."""
    if not rows:
        console.print("[yellow]No runs found.[/yellow]")
        return

    for group in _by_contest(rows):
        head = group[0]
        table = create_table(
            f"{escape(head.contest)} ({head.contest_id})",
            ["Run", "Submitted", "User", "Problem", "Result"],
        )
        for row in group:
            table.add_row(
                str(row.run_id),
                row.submitted_at,
                escape(row.user),
                escape(row.problem),
                format_result_color(row.result),
            )
        console.print(table)
        console.print(f"[dim]{escape(head.contest_url)}[/dim]\n")
