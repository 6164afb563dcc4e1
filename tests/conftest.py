from __future__ import annotations

import pytest

_RUNNER_ENV_VARS = (
    "INPUT_FROM",
    "INPUT_TO",
    "INPUT_MESSAGE",
    "GITHUB_TOKEN",
    "GITHUB_API_URL",
    "GITHUB_REPOSITORY",
    "GITHUB_SHA",
    "GITHUB_OUTPUT",
    "MERGE_BRANCH_HTTP_TIMEOUT",
)


@pytest.fixture(autouse=True)
def clean_runner_env(monkeypatch):
    """Keep the host's Actions variables out of the tests."""
    for name in _RUNNER_ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture()
def output_file(tmp_path, monkeypatch):
    path = tmp_path / "github_output"
    path.write_text("", encoding="utf-8")
    monkeypatch.setenv("GITHUB_OUTPUT", str(path))
    return path


@pytest.fixture()
def action_env(monkeypatch, output_file):
    """Runner environment of a push-triggered workflow."""
    monkeypatch.setenv("GITHUB_TOKEN", "token")
    monkeypatch.setenv("GITHUB_REPOSITORY", "owner/repo")
    monkeypatch.setenv("GITHUB_SHA", "abcdef0")
    monkeypatch.setenv("GITHUB_API_URL", "https://api.github.com")
    return output_file
