"""Tests for reference resolution."""

from __future__ import annotations

import pytest

from merge_branch_action.errors import ConfigurationError
from merge_branch_action.merge.models import Branch
from merge_branch_action.merge.resolver import (
    ReferenceResolver,
    branch_ref_path,
    candidate_paths,
    commit_ref_path,
    tag_ref_path,
)
from tests.fakes import FakeRepository, refs


@pytest.fixture()
def repository() -> FakeRepository:
    return FakeRepository(
        references=refs(
            "refs/heads/main",
            "refs/heads/BRANCH-name",
            "refs/tags/1.0.0",
            "refs/commits/123456",
        )
    )


@pytest.mark.parametrize("name", ["main", "Feature/X", "1.0.0", "abc123"])
def test_ref_paths_preserve_case(name: str) -> None:
    assert branch_ref_path(name) == "refs/heads/" + name
    assert tag_ref_path(name) == "refs/tags/" + name
    assert commit_ref_path(name) == "refs/commits/" + name


def test_candidate_paths_are_lowercased_in_priority_order() -> None:
    assert candidate_paths("Main") == (
        "refs/heads/main",
        "refs/tags/main",
        "refs/commits/main",
        "main",
    )


@pytest.mark.parametrize(
    ("name", "expected"),
    [
        ("refs/heads/main", "refs/heads/main"),
        ("main", "refs/heads/main"),
        ("branch-name", "refs/heads/BRANCH-name"),
        ("BRANCH-NAME", "refs/heads/BRANCH-name"),
        ("1.0.0", "refs/tags/1.0.0"),
        ("refs/tags/1.0.0", "refs/tags/1.0.0"),
        ("refs/commits/123456", "refs/commits/123456"),
        ("123456", "refs/commits/123456"),
    ],
)
def test_resolve_any_is_case_insensitive(repository: FakeRepository, name: str, expected: str) -> None:
    reference = ReferenceResolver(repository).resolve_any(name)

    assert reference is not None
    assert reference.ref == expected


def test_resolve_any_unknown_name(repository: FakeRepository) -> None:
    assert ReferenceResolver(repository).resolve_any("does-not-exist") is None


def test_resolve_any_does_not_prefix_match(repository: FakeRepository) -> None:
    resolver = ReferenceResolver(repository)

    assert resolver.resolve_any("ma") is None
    assert resolver.resolve_any("heads/main") is None
    assert resolver.resolve_any("12345") is None


def test_resolve_any_empty_reference_set() -> None:
    assert ReferenceResolver(FakeRepository()).resolve_any("main") is None


@pytest.mark.parametrize("name", [None, "", "   "])
def test_resolve_any_rejects_missing_name_before_lookup(name) -> None:
    repository = FakeRepository(references=refs("refs/heads/main"))

    with pytest.raises(ConfigurationError):
        ReferenceResolver(repository).resolve_any(name)
    assert repository.list_calls == 0


def test_branch_wins_over_tag_with_same_name() -> None:
    repository = FakeRepository(references=refs("refs/tags/release", "refs/heads/release"))

    reference = ReferenceResolver(repository).resolve_any("release")

    assert reference is not None
    assert reference.ref == "refs/heads/release"


def test_tag_wins_over_literal_match() -> None:
    repository = FakeRepository(references=refs("v1", "refs/tags/v1"))

    reference = ReferenceResolver(repository).resolve_any("v1")

    assert reference is not None
    assert reference.ref == "refs/tags/v1"


def test_case_colliding_branches_resolve_to_first_listed() -> None:
    repository = FakeRepository(references=refs("refs/heads/Dev", "refs/heads/dev"))

    reference = ReferenceResolver(repository).resolve_any("dev")

    assert reference is not None
    assert reference.ref == "refs/heads/Dev"


def test_resolve_any_lists_references_once_per_call(repository: FakeRepository) -> None:
    resolver = ReferenceResolver(repository)

    resolver.resolve_any("main")
    resolver.resolve_any("1.0.0")

    assert repository.list_calls == 2


def test_resolve_branch_queries_branch_directly() -> None:
    branch = Branch(name="develop", sha="456789")
    repository = FakeRepository(branches={"develop": branch})

    assert ReferenceResolver(repository).resolve_branch("develop") == branch
    assert repository.branch_calls == ["develop"]
    assert repository.list_calls == 0


def test_resolve_branch_missing() -> None:
    assert ReferenceResolver(FakeRepository()).resolve_branch("nope") is None


def test_resolve_branch_rejects_missing_name() -> None:
    repository = FakeRepository()

    with pytest.raises(ConfigurationError):
        ReferenceResolver(repository).resolve_branch(None)
    assert repository.branch_calls == []
