"""Data models for ejudge master API entities."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import List, Optional


@dataclass
class ApiError:
    """Structured error attached to an ok=false reply."""

    log_id: str = ""
    message: str = ""
    num: int = 0
    symbol: str = ""

    @classmethod
    def from_dict(cls, data: Optional[dict]) -> Optional["ApiError"]:
        if not isinstance(data, dict):
            return None
        return cls(
            log_id=str(data.get("log_id") or ""),
            message=str(data.get("message") or ""),
            num=int(data.get("num") or 0),
            symbol=str(data.get("symbol") or ""),
        )

    def format(self) -> str:
        """Collapse the error into a single line."""
        parts = [self.message]
        if self.symbol:
            parts.append(f"symbol={self.symbol}")
        if self.num:
            parts.append(f"num={self.num}")
        if self.log_id:
            parts.append(f"log_id={self.log_id}")
        return " ".join(parts)


def format_api_error(error: Optional[ApiError]) -> str:
    """Format an API error, tolerating a reply without one."""
    if error is None:
        return "unknown API error"
    return error.format()


@dataclass
class Contest:
    """Represents a contest."""

    id: int
    name: str

    @classmethod
    def from_dict(cls, contest_id: int, data: dict) -> "Contest":
        name = data.get("name") or ""
        if not name:
            name = f"contest {contest_id}"
        return cls(id=int(data.get("id") or contest_id), name=name)


@dataclass(frozen=True)
class Run:
    """One submission record as returned by list-runs-json."""

    run_id: int = 0
    contest_id: int = 0
    user_login: str = ""
    user_name: str = ""
    prob_id: int = 0
    prob_name: str = ""
    status_str: str = ""
    status_desc: str = ""
    score_str: str = ""
    raw_score: int = 0
    saved_score: int = 0
    lang_name: str = ""
    test: int = 0
    tests_passed: int = 0
    run_time: int = 0
    run_time_us: int = 0

    @classmethod
    def from_dict(cls, data: dict) -> "Run":
        """Build a run, keeping only known fields and filling gaps with zero values."""
        values = {}
        for name, f in cls.__dataclass_fields__.items():
            raw = data.get(name)
            if raw is None:
                continue
            values[name] = f.type(raw) if f.type in (int, str) else raw
        return cls(**values)

    @property
    def user(self) -> str:
        return self.user_login or self.user_name

    @property
    def problem(self) -> str:
        if self.prob_name:
            return self.prob_name
        return str(self.prob_id) if self.prob_id else ""

    @property
    def status(self) -> str:
        return self.status_str or self.status_desc

    @property
    def score(self) -> str:
        return self.score_str or str(self.saved_score)

    @property
    def submitted_at(self) -> str:
        """Submission time as RFC3339 in UTC, empty when the server did not set it."""
        if self.run_time_us <= 0:
            return ""
        moment = datetime.fromtimestamp(self.run_time_us // 1_000_000, tz=timezone.utc)
        return moment.strftime("%Y-%m-%dT%H:%M:%SZ")


@dataclass
class RunPage:
    """One windowed slice of a contest's runs."""

    runs: List[Run] = field(default_factory=list)
    first_run: int = 0
    last_run: int = 0
    filtered_runs: int = 0


@dataclass(frozen=True)
class ReportRow:
    """A run attributed to its contest, ready for rendering."""

    contest: str
    contest_id: int
    run_id: int
    submitted_at: str
    user: str
    problem: str
    result: str
    contest_url: str
