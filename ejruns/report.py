"""Collect runs from several contests into report rows."""

from typing import Iterable, List

from rich.console import Console
from rich.markup import escape

from .client import EjudgeClient, EjrunsError, ReportRow, Run


console = Console(stderr=True)

CONTEST_VIEW_PATH = "/ej/contest/"


def contest_url(base_url: str, contest_id: int) -> str:
    """Public page of a contest on the ejudge server."""
    return f"{base_url.rstrip('/')}{CONTEST_VIEW_PATH}{contest_id}"


def sort_runs(runs: Iterable[Run]) -> List[Run]:
    """Newest first; simultaneous submissions by descending run id."""
    return sorted(runs, key=lambda r: (r.run_time_us, r.run_id), reverse=True)


def normalize_run(run: Run, contest_name: str, contest_id: int, url: str) -> ReportRow:
    """Flatten a run into a report row, applying the field fallbacks."""
    return ReportRow(
        contest=contest_name,
        contest_id=contest_id,
        run_id=run.run_id,
        submitted_at=run.submitted_at,
        user=run.user,
        problem=run.problem,
        result=f"{run.status} {run.score}",
        contest_url=url,
    )


def collect_rows(
    client: EjudgeClient,
    contest_ids: Iterable[int],
    filter_expr: str = "",
    page_size: int = 0,
    field_mask: int = 0,
) -> List[ReportRow]:
    """
    Fetch and normalize runs for every contest, in the given order.

    A contest whose name or runs cannot be fetched is reported on stderr
    and left out; the remaining contests are still processed.
    """
    rows: List[ReportRow] = []

    for contest_id in contest_ids:
        try:
            contest_name = client.fetch_contest_name(contest_id)
            runs = client.list_runs(contest_id, filter_expr, page_size, field_mask)
        except EjrunsError as e:
            console.print(f"[red]contest {contest_id}: {escape(str(e))}[/red]")
            continue

        url = contest_url(client.base_url, contest_id)
        for run in sort_runs(runs):
            rows.append(normalize_run(run, contest_name, contest_id, url))

    return rows
