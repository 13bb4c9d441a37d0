"""Tests for report renderers."""

import json

from ejruns.client.models import ReportRow
from ejruns.utils.terminal import format_result_color, print_tables, render_json, render_text


def _row(contest_id, run_id, result="OK 100", contest="Finals"):
    return ReportRow(
        contest=contest,
        contest_id=contest_id,
        run_id=run_id,
        submitted_at="2023-11-14T22:13:20Z",
        user="jdoe",
        problem="A",
        result=result,
        contest_url=f"https://judge/ej/contest/{contest_id}",
    )


def test_render_json_keeps_field_order():
    text = render_json([_row(1, 5, contest="Финал")])
    data = json.loads(text)

    assert list(data[0]) == [
        "contest",
        "contest_id",
        "run_id",
        "submitted_at",
        "user",
        "problem",
        "result",
        "contest_url",
    ]
    assert "Финал" in text


def test_render_json_empty():
    assert render_json([]) == "[]"


def test_render_text_groups_by_contest():
    rows = [_row(1, 5), _row(1, 4, "WA 0"), _row(2, 9, contest="Open")]

    assert render_text(rows) == (
        "# Finals\t1\thttps://judge/ej/contest/1\n"
        "5\t2023-11-14T22:13:20Z\tjdoe\tA\tOK 100\n"
        "4\t2023-11-14T22:13:20Z\tjdoe\tA\tWA 0\n"
        "\n"
        "# Open\t2\thttps://judge/ej/contest/2\n"
        "9\t2023-11-14T22:13:20Z\tjdoe\tA\tOK 100"
    )


def test_format_result_color():
    assert format_result_color("OK 100") == "[green]OK 100[/green]"
    assert format_result_color("WA 0") == "[red]WA 0[/red]"
    assert format_result_color("TL 0") == "[magenta]TL 0[/magenta]"
    assert format_result_color("PD 0") == "[yellow]PD 0[/yellow]"
    assert format_result_color("Unknown 0") == "Unknown 0"


def test_print_tables_without_rows(capsys):
    print_tables([])

    assert "No runs found." in capsys.readouterr().out
