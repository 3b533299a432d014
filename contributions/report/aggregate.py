"""Merge pull request history and static allow-lists into one star mapping.

Each ``apply_*`` pass mutates the same dict and is last-write-wins, so the
static lists applied later always override star counts taken from pull
requests.
"""

from __future__ import annotations

from typing import Dict, Iterable

from contributions.retrieval.collectors import (
    PullRequestRecord,
    RepositoryNameError,
    resolve_stars,
)
from contributions.retrieval.http_client import GraphQLClient, GraphQLQueryError

from .settings import GoogleSourceMapping, ReportSettings


def is_own_repo(owner_and_name: str, account: str) -> bool:
    """Return True when the repository lives under the operator's account."""
    return owner_and_name.startswith(f"{account}/")


def apply_pull_requests(stars: Dict[str, int],
                        records: Iterable[PullRequestRecord],
                        account: str) -> None:
    """Record merged pull requests to repositories outside ``account``."""
    for record in records:
        name = record.owner_and_name
        if is_own_repo(name, account):
            print(f"[info] skipping own repo: {name}")
            continue
        if not record.merged:
            print(f"[info] skipping not merged repo: {name}")
            continue
        stars[name] = record.star_count


def _stars_or_fallback(client: GraphQLClient, owner_and_name: str, fallback: int) -> int:
    try:
        return resolve_stars(client, owner_and_name)
    except (GraphQLQueryError, RepositoryNameError) as exc:
        print(f"[warn] failed to get repository {owner_and_name!r} stars: {exc}")
        return fallback


def apply_google_mirrors(stars: Dict[str, int],
                         client: GraphQLClient,
                         mirrors: Iterable[GoogleSourceMapping],
                         fallback: int) -> None:
    for mirror in mirrors:
        name = mirror.github_owner_and_name
        stars[name] = _stars_or_fallback(client, name, fallback)


def apply_additional_repos(stars: Dict[str, int],
                           client: GraphQLClient,
                           names: Iterable[str],
                           fallback: int) -> None:
    for name in names:
        stars[name] = _stars_or_fallback(client, name, fallback)


def aggregate_repository_stars(client: GraphQLClient,
                               records: Iterable[PullRequestRecord],
                               settings: ReportSettings) -> Dict[str, int]:
    """Run the pull request, Google mirror and additional repo passes in order."""
    stars: Dict[str, int] = {}
    apply_pull_requests(stars, records, settings.account)
    apply_google_mirrors(stars, client, settings.google_repos, settings.google_fallback_stars)
    apply_additional_repos(stars, client, settings.additional_repos, settings.additional_fallback_stars)
    return stars


__all__ = [
    "is_own_repo",
    "apply_pull_requests",
    "apply_google_mirrors",
    "apply_additional_repos",
    "aggregate_repository_stars",
]
