"""Tests for the merge-branch command line."""

from __future__ import annotations

import importlib
import json

import pytest
from typer.testing import CliRunner

from merge_branch_action.cli import app
from merge_branch_action.merge.models import Branch, Commit
from tests.fakes import FakeClient, FakeRepository, refs

runner = CliRunner()


@pytest.fixture()
def client(monkeypatch) -> FakeClient:
    repository = FakeRepository(
        references=refs("refs/heads/branch-from", "refs/tags/1.0.0"),
        branches={"branch-to": Branch(name="branch-to", sha="456789")},
    )
    fake = FakeClient(repository=repository)
    for module_name in ("merge_branch_action.cli.commands.merge", "merge_branch_action.cli.commands.resolve"):
        monkeypatch.setattr(importlib.import_module(module_name), "build_github_client", fake.factory)
    return fake


def test_run_merges_and_publishes_sha(action_env, client) -> None:
    client.repository.merge_result = Commit(sha="123456")

    result = runner.invoke(app, ["run", "--from", "branch-from", "--to", "branch-to", "--message", "some message"])

    assert result.exit_code == 0
    assert "::notice::Branch merged successfully." in result.stdout
    assert "\n123456\n" in action_env.read_text(encoding="utf-8")
    assert client.repository.merge_calls == [("branch-to", "refs/heads/branch-from", "some message")]


def test_run_reads_inputs_from_environment(action_env, client, monkeypatch) -> None:
    monkeypatch.setenv("INPUT_FROM", "1.0.0")
    monkeypatch.setenv("INPUT_TO", "branch-to")

    result = runner.invoke(app, ["run"])

    assert result.exit_code == 0
    assert "::notice::Nothing to merge" in result.stdout
    assert "\n456789\n" in action_env.read_text(encoding="utf-8")
    assert client.repository.merge_calls == [("branch-to", "refs/tags/1.0.0", None)]


def test_run_failure_emits_error_and_exits_1(action_env, client) -> None:
    result = runner.invoke(app, ["run", "--from", "unknown", "--to", "branch-to"])

    assert result.exit_code == 1
    assert "::error::Source reference not found: unknown" in result.stdout
    assert action_env.read_text(encoding="utf-8") == ""


def test_run_without_target(action_env, client) -> None:
    result = runner.invoke(app, ["run", "--from", "branch-from"])

    assert result.exit_code == 1
    assert "Input required and not supplied: to" in result.stdout


def test_resolve_json(action_env, client) -> None:
    result = runner.invoke(app, ["resolve", "1.0.0", "--json"])

    assert result.exit_code == 0
    assert json.loads(result.stdout) == {"ref": "refs/tags/1.0.0", "sha": "sha-1"}


def test_resolve_table(action_env, client) -> None:
    result = runner.invoke(app, ["resolve", "BRANCH-FROM"])

    assert result.exit_code == 0
    assert "refs/heads/branch-from" in result.stdout


def test_resolve_not_found(action_env, client) -> None:
    result = runner.invoke(app, ["resolve", "nothing"])

    assert result.exit_code == 1
    assert client.closed


def test_resolve_requires_token(action_env, client, monkeypatch) -> None:
    monkeypatch.delenv("GITHUB_TOKEN")

    result = runner.invoke(app, ["resolve", "main"])

    assert result.exit_code == 1
    assert client.environments == []
