"""Shared fixtures for changegate tests."""

import json
from typing import Callable, Dict, List

import httpx
import pytest

RUNNER_VARS = [
    "GITHUB_OUTPUT",
    "GITHUB_EVENT_NAME",
    "GITHUB_REPOSITORY",
    "GITHUB_PR_NUMBER",
    "GITHUB_EVENT_BEFORE",
    "GITHUB_EVENT_AFTER",
    "GITHUB_TOKEN",
    "GITHUB_API_URL",
    "CHANGEGATE_HTTP_TIMEOUT",
    "LOG_LEVEL",
]


@pytest.fixture(autouse=True)
def clean_runner_env(monkeypatch):
    """Keep the real runner's environment out of the tests."""
    for name in RUNNER_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def output_file(tmp_path):
    path = tmp_path / "github_output"
    path.touch()
    return path


@pytest.fixture
def pr_env(output_file) -> Dict[str, str]:
    return {
        "GITHUB_OUTPUT": str(output_file),
        "GITHUB_EVENT_NAME": "pull_request",
        "GITHUB_REPOSITORY": "org/repo",
        "GITHUB_PR_NUMBER": "42",
    }


@pytest.fixture
def push_env(output_file) -> Dict[str, str]:
    return {
        "GITHUB_OUTPUT": str(output_file),
        "GITHUB_EVENT_NAME": "push",
        "GITHUB_REPOSITORY": "org/repo",
        "GITHUB_EVENT_BEFORE": "aaa111",
        "GITHUB_EVENT_AFTER": "bbb222",
    }


def pr_files_payload(filenames: List[str]) -> List[dict]:
    return [{"filename": name, "status": "modified"} for name in filenames]


def compare_payload(filenames: List[str]) -> dict:
    return {"status": "ahead", "files": pr_files_payload(filenames)}


@pytest.fixture
def github_api() -> Callable[..., httpx.MockTransport]:
    """Build a MockTransport serving canned PR and compare listings.

    The transport records every request it sees on ``transport.requests``.
    """

    def make(pr_files=None, compare_files=None, status_code=200, body=None):
        requests: List[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            requests.append(request)
            if status_code != 200:
                return httpx.Response(status_code, text=body or json.dumps({"message": "Not Found"}))
            if request.url.path == "/repos/org/repo/pulls/42/files":
                return httpx.Response(200, json=pr_files_payload(pr_files or []))
            if request.url.path == "/repos/org/repo/compare/aaa111...bbb222":
                return httpx.Response(200, json=compare_payload(compare_files or []))
            return httpx.Response(404, json={"message": "Not Found"})

        transport = httpx.MockTransport(handler)
        transport.requests = requests
        return transport

    return make
