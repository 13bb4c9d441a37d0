"""Utility functions."""

from .terminal import (
    create_table,
    format_result_color,
    print_tables,
    render_json,
    render_text,
)

__all__ = [
    "create_table",
    "format_result_color",
    "print_tables",
    "render_json",
    "render_text",
]
