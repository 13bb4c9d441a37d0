"""Immutable settings for a single report invocation."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ReportSettings:
    """
    Everything the report needs, resolved once by the CLI.
    page_size <= 0 lets the server choose the page, field_mask 0 means unset.
    """

    base_url: str
    token: str = ""
    filter_expr: str = ""
    page_size: int = 200
    field_mask: int = 0
