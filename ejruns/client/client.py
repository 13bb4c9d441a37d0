"""HTTP client for the ejudge master JSON API."""

from typing import List, Optional

import requests
from rich.console import Console

from .exceptions import (
    ApiResponseError,
    ConfigurationError,
    DecodeError,
    HTTPStatusError,
    TransportError,
)
from .models import ApiError, Contest, Run, RunPage, format_api_error


console = Console(stderr=True)

LIST_RUNS_PATH = "/ej/api/v1/master/list-runs-json"
CONTEST_STATUS_PATH = "/ej/api/v1/master/contest-status-json"
REQUEST_TIMEOUT = 30


class EjudgeClient:
    """Read-only client for contest and run listings."""

    def __init__(self, base_url: str, token: str = "", debug: bool = False):
        self.base_url = (base_url or "").rstrip("/")
        self.token = token
        self.debug = debug
        self.session = requests.Session()

        if self.token:
            self.session.headers["Authorization"] = self.token

    def _get(self, path: str, params: Optional[dict] = None) -> dict:
        """Make GET request and decode the JSON object in the body."""
        if not self.base_url:
            raise ConfigurationError("base URL is required")

        url = f"{self.base_url}{path}"
        try:
            response = self.session.get(url, params=params, timeout=REQUEST_TIMEOUT)
        except requests.RequestException as e:
            raise TransportError(f"perform request: {e}") from e

        if response.status_code != 200:
            raise HTTPStatusError(response.status_code)

        try:
            data = response.json()
        except ValueError as e:
            raise DecodeError(f"decode response: {e}") from e

        if not isinstance(data, dict):
            raise DecodeError(
                f"decode response: expected JSON object, got {type(data).__name__}"
            )
        return data

    def _reply_error(self, contest_id: int, reply: dict) -> ApiResponseError:
        try:
            api_error = ApiError.from_dict(reply.get("error"))
        except (TypeError, ValueError) as e:
            raise DecodeError(f"decode response: malformed API error: {e}") from e
        return ApiResponseError(
            f"contest {contest_id}: {format_api_error(api_error)}", api_error
        )

    def fetch_contest_name(self, contest_id: int) -> str:
        """Resolve the display name of a contest."""
        reply = self._get(CONTEST_STATUS_PATH, params={"contest_id": str(contest_id)})

        if not reply.get("ok"):
            raise self._reply_error(contest_id, reply)

        result = reply.get("result")
        if result is None:
            raise ApiResponseError(f"contest {contest_id}: empty response")
        contest_data = None
        if isinstance(result, dict):
            contest_data = result.get("contest") or {}
        if not isinstance(contest_data, dict):
            raise DecodeError(f"decode response: malformed contest status for {contest_id}")

        try:
            contest = Contest.from_dict(contest_id, contest_data)
        except (TypeError, ValueError) as e:
            raise DecodeError(f"decode response: {e}") from e
        return contest.name

    def _parse_page(self, result) -> RunPage:
        if not isinstance(result, dict):
            raise DecodeError("decode response: result is not an object")

        runs = result.get("runs") or []
        if not isinstance(runs, list):
            raise DecodeError("decode response: runs is not a list")

        try:
            page = RunPage(
                runs=[Run.from_dict(item) for item in runs],
                first_run=int(result.get("first_run") or 0),
                last_run=int(result.get("last_run") or 0),
                filtered_runs=int(result.get("filtered_runs") or 0),
            )
        except (AttributeError, TypeError, ValueError) as e:
            raise DecodeError(f"decode response: {e}") from e

        # Timestamps must be representable as a calendar date
        for run in page.runs:
            try:
                run.submitted_at
            except (OverflowError, ValueError, OSError) as e:
                raise DecodeError(
                    f"decode response: run {run.run_id} has bad run_time_us "
                    f"{run.run_time_us}: {e}"
                ) from e
        return page

    def list_runs(
        self,
        contest_id: int,
        filter_expr: str = "",
        page_size: int = 0,
        field_mask: int = 0,
    ) -> List[Run]:
        """
        Fetch every run of a contest, one page at a time.
        With page_size <= 0 the server picks the window and a single page is fetched.
        """
        all_runs: List[Run] = []
        first = 1

        while True:
            params = {"contest_id": str(contest_id)}
            if filter_expr:
                params["filter_expr"] = filter_expr
            if page_size > 0:
                params["first_run"] = str(first)
                params["last_run"] = str(first + page_size - 1)
            if field_mask > 0:
                params["field_mask"] = str(field_mask)

            if self.debug:
                console.print(
                    f"[cyan]DEBUG: contest {contest_id}: fetching runs from {first}[/cyan]"
                )

            reply = self._get(LIST_RUNS_PATH, params=params)
            if not reply.get("ok"):
                raise self._reply_error(contest_id, reply)

            result = reply.get("result")
            if result is None:
                break

            page = self._parse_page(result)
            all_runs.extend(page.runs)

            if self.debug:
                console.print(
                    f"[cyan]DEBUG: contest {contest_id}: got {len(page.runs)} runs "
                    f"(first_run={page.first_run}, last_run={page.last_run}, "
                    f"filtered_runs={page.filtered_runs})[/cyan]"
                )

            if not page.runs:
                break

            # Server made no progress
            if page.last_run <= page.first_run:
                break
            first = page.last_run + 1
            if page.filtered_runs > 0 and len(all_runs) >= page.filtered_runs:
                break
            # Without a window the cursor is never sent, a repeat would refetch the same page
            if page_size <= 0:
                break

        return all_runs
