"""Tests for contributions.report.aggregate covering the three override passes.

Run with:
    pytest tests/test_aggregate.py --maxfail=1 -v --cov=contributions.report.aggregate --cov-report=term-missing
"""

from unittest.mock import MagicMock, patch

from contributions.report import aggregate
from contributions.report.settings import GoogleSourceMapping, ReportSettings, resolve_settings
from contributions.retrieval.collectors import PullRequestRecord, RepositoryNameError
from contributions.retrieval.http_client import GraphQLClient, GraphQLQueryError


def _pr(name, merged=True, stars=0):
    return PullRequestRecord(owner_and_name=name, merged=merged, closed=True, star_count=stars)


def test_is_own_repo_requires_owner_boundary():
    assert aggregate.is_own_repo("op/self", "op")
    assert not aggregate.is_own_repo("opx/repo", "op")


def test_pull_request_pass_scenario(capsys):
    stars = {}
    records = [_pr("a/b", stars=50), _pr("a/b", merged=False, stars=999), _pr("op/self", stars=10)]
    aggregate.apply_pull_requests(stars, records, "op")
    assert stars == {"a/b": 50}
    out = capsys.readouterr().out
    assert "skipping own repo: op/self" in out
    assert "skipping not merged repo: a/b" in out


def test_unmerged_only_creates_no_entry():
    stars = {}
    aggregate.apply_pull_requests(stars, [_pr("x/y", merged=False, stars=3)], "op")
    assert stars == {}


@patch("contributions.report.aggregate.resolve_stars")
def test_google_mirror_failure_uses_fallback(mock_resolve, capsys):
    mock_resolve.side_effect = GraphQLQueryError("boom")
    stars = {"golang/build": 5}
    aggregate.apply_google_mirrors(stars, MagicMock(), [GoogleSourceMapping("build", "golang/build")], 1000)
    assert stars == {"golang/build": 1000}
    assert "[warn]" in capsys.readouterr().out


@patch("contributions.report.aggregate.resolve_stars", return_value=42)
def test_google_mirror_overrides_pull_request_stars(mock_resolve):
    stars = {"golang/go": 1}
    aggregate.apply_google_mirrors(stars, MagicMock(), [GoogleSourceMapping("go", "golang/go")], 1000)
    assert stars == {"golang/go": 42}


@patch("contributions.report.aggregate.resolve_stars")
def test_additional_repos_fallback_and_override(mock_resolve):
    mock_resolve.side_effect = [RepositoryNameError("bad"), 7]
    stars = {"cue-lang/cue": 3}
    aggregate.apply_additional_repos(stars, MagicMock(), ["cue-lang/cue", "x/y"], 100)
    assert stars == {"cue-lang/cue": 100, "x/y": 7}


@patch("contributions.report.aggregate.resolve_stars")
def test_aggregate_runs_passes_in_order(mock_resolve):
    mock_resolve.side_effect = lambda client, name: {"golang/go": 120000}.get(name, 10)
    settings = ReportSettings(
        account="op",
        google_repos=(GoogleSourceMapping("go", "golang/go"),),
        additional_repos=("a/b",),
        output_path="out.md",
    )
    records = [_pr("golang/go", stars=1), _pr("a/b", stars=50), _pr("c/d", stars=8)]
    stars = aggregate.aggregate_repository_stars(MagicMock(), records, settings)
    assert stars == {"golang/go": 120000, "a/b": 10, "c/d": 8}


def test_default_settings_tables_are_ordered():
    settings = resolve_settings()
    assert [m.github_owner_and_name for m in settings.google_repos] == [
        "golang/build",
        "golang/go",
        "golang/net",
        "golang/mod",
        "protocolbuffers/protobuf-go",
        "golang/tools",
        "golang/text",
        "golang/vulndb",
        "golang/website",
    ]
    assert settings.additional_repos == ("cue-lang/cue", "cognitedata/cognite-sdk-python")
    assert settings.account == "tylitianrui"


@patch("contributions.report.aggregate.resolve_stars", side_effect=GraphQLQueryError("down"))
def test_default_settings_fall_back_when_every_lookup_fails(mock_resolve):
    settings = resolve_settings()
    records = [_pr("golang/build", stars=3), _pr("cue-lang/cue", stars=4), _pr("x/y", stars=5)]
    stars = aggregate.aggregate_repository_stars(MagicMock(), records, settings)
    assert stars["golang/build"] == 1000
    assert stars["protocolbuffers/protobuf-go"] == 1000
    assert stars["cue-lang/cue"] == 100
    assert stars["cognitedata/cognite-sdk-python"] == 100
    assert stars["x/y"] == 5
    assert len(stars) == 12


def test_malformed_response_body_degrades_to_fallback():
    session = MagicMock()
    session.headers = {}
    resp = MagicMock()
    resp.status_code = 200
    resp.json.return_value = ["not", "a", "dict"]
    session.post.return_value = resp
    client = GraphQLClient("tok", url="https://example.test/graphql", session=session)

    stars = {}
    aggregate.apply_google_mirrors(stars, client, [GoogleSourceMapping("build", "golang/build")], 1000)
    assert stars == {"golang/build": 1000}
