"""Configuration management."""

from .settings import ReportSettings
from .global_config import GlobalConfig
from .contest_ids import parse_contest_ids

__all__ = ["ReportSettings", "GlobalConfig", "parse_contest_ids"]
