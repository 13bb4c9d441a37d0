"""Shared pytest fixtures for ejruns tests."""

from unittest.mock import Mock

import pytest

from ejruns.client import EjudgeClient
from ejruns.client.client import CONTEST_STATUS_PATH, LIST_RUNS_PATH


BASE_URL = "https://judge.example.org/"


def make_response(payload=None, status_code=200, invalid_json=False):
    """Build a stand-in for requests.Response."""
    response = Mock()
    response.status_code = status_code
    if invalid_json:
        response.json.side_effect = ValueError("Expecting value: line 1 column 1 (char 0)")
    else:
        response.json.return_value = payload
    return response


def run_dict(run_id, ts=0, **extra):
    """Minimal list-runs entry."""
    data = {
        "run_id": run_id,
        "run_time_us": ts,
        "user_login": f"user{run_id}",
        "prob_name": "A",
        "status_str": "OK",
        "score_str": "100",
    }
    data.update(extra)
    return data


class FakeEjudge:
    """In-memory ejudge master API serving contest status and paged runs."""

    def __init__(self):
        self.contests = {}
        self.runs = {}
        self.failing = {}
        self.requests = []

    def add_contest(self, contest_id, name, runs=()):
        self.contests[contest_id] = name
        self.runs[contest_id] = list(runs)

    def fail_contest(self, contest_id, error):
        self.failing[contest_id] = error

    def get(self, url, params=None, timeout=None):
        params = dict(params or {})
        self.requests.append((url, params))
        contest_id = int(params["contest_id"])

        if contest_id in self.failing:
            return make_response({"ok": False, "error": self.failing[contest_id]})

        if url.endswith(CONTEST_STATUS_PATH):
            if contest_id not in self.contests:
                return make_response(
                    {"ok": False, "error": {"message": "contest not found", "num": 13}}
                )
            return make_response(
                {
                    "ok": True,
                    "result": {
                        "contest": {"id": contest_id, "name": self.contests[contest_id]}
                    },
                }
            )

        assert url.endswith(LIST_RUNS_PATH)
        runs = self.runs.get(contest_id, [])
        if "first_run" in params:
            first = int(params["first_run"])
            last = min(int(params["last_run"]), len(runs))
        else:
            first, last = 1, len(runs)
        page = runs[first - 1:last]
        return make_response(
            {
                "ok": True,
                "result": {
                    "runs": page,
                    "first_run": first,
                    "last_run": last,
                    "filtered_runs": len(runs),
                },
            }
        )

    def run_requests(self):
        return [params for url, params in self.requests if url.endswith(LIST_RUNS_PATH)]


@pytest.fixture
def fake_api():
    return FakeEjudge()


@pytest.fixture
def client(fake_api, monkeypatch):
    client = EjudgeClient(BASE_URL, "secret-token")
    monkeypatch.setattr(client.session, "get", fake_api.get)
    return client
