"""Data collection helpers for the viewer's pull requests and repository stars."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional, Tuple

from .config import PER_PAGE
from .http_client import GraphQLClient, GraphQLQueryError

PageFetcher = Callable[[Optional[str]], Tuple[List[Any], Optional[str], bool]]


class RepositoryNameError(ValueError):
    """Raised when a repository identifier is not in ``owner/name`` form."""


@dataclass(frozen=True)
class PullRequestRecord:
    """One pull request edge, reduced to the fields the report needs."""

    owner_and_name: str
    merged: bool
    closed: bool
    star_count: int

    @classmethod
    def from_edge(cls, edge: Dict[str, Any]) -> "PullRequestRecord":
        node = (edge or {}).get("node") or {}
        repo = node.get("repository") or {}
        return cls(
            owner_and_name=repo.get("nameWithOwner") or "",
            merged=bool(node.get("merged")),
            closed=bool(node.get("closed")),
            star_count=int(repo.get("stargazerCount") or 0),
        )


PULL_REQUESTS_QUERY = """
query ViewerPullRequests($first:Int!, $after:String) {
  viewer {
    pullRequests(states:[MERGED, CLOSED], orderBy:{field:CREATED_AT, direction:ASC}, first:$first, after:$after) {
      pageInfo {
        endCursor
        hasNextPage
      }
      totalCount
      edges {
        node {
          repository {
            nameWithOwner
            stargazerCount
          }
          merged
          closed
        }
      }
    }
  }
}
"""

REPOSITORY_STARS_QUERY = """
query RepositoryStars($owner:String!, $name:String!) {
  repository(owner:$owner, name:$name) {
    stargazerCount
  }
}
"""


def paginate(fetch_page: PageFetcher) -> List[Any]:
    """Follow a cursor until the API reports no further pages.

    ``fetch_page`` receives the previous page's end cursor (``None`` for the
    first page) and returns ``(items, next_cursor, has_more)``.
    """
    results: List[Any] = []
    cursor: Optional[str] = None
    while True:
        items, next_cursor, has_more = fetch_page(cursor)
        results.extend(items)
        if not has_more:
            break
        if not next_cursor:
            raise GraphQLQueryError("page reported more results without an end cursor")
        cursor = next_cursor
    return results


def fetch_all_pull_requests(client: GraphQLClient) -> List[PullRequestRecord]:
    """Return every MERGED or CLOSED pull request authored by the viewer."""

    def fetch_page(cursor: Optional[str]) -> Tuple[List[PullRequestRecord], Optional[str], bool]:
        try:
            data = client.query(PULL_REQUESTS_QUERY, {"first": PER_PAGE, "after": cursor})
        except GraphQLQueryError as exc:
            raise GraphQLQueryError(f"query: {exc}", status=exc.status) from exc

        connection = ((data.get("viewer") or {}).get("pullRequests")) or {}
        page_info = connection.get("pageInfo") or {}
        edges = connection.get("edges") or []
        records = [PullRequestRecord.from_edge(edge) for edge in edges]
        return records, page_info.get("endCursor"), bool(page_info.get("hasNextPage"))

    return paginate(fetch_page)


def split_owner_and_name(owner_and_name: str) -> Tuple[str, str]:
    """Split ``owner/name`` into its two non-empty parts."""
    parts = owner_and_name.split("/")
    if len(parts) != 2 or not all(parts):
        raise RepositoryNameError(f"repo {owner_and_name} must have format 'owner/name'")
    return parts[0], parts[1]


def resolve_stars(client: GraphQLClient, owner_and_name: str) -> int:
    """Fetch the stargazer count for a single repository."""
    owner, name = split_owner_and_name(owner_and_name)
    try:
        data = client.query(REPOSITORY_STARS_QUERY, {"owner": owner, "name": name})
    except GraphQLQueryError as exc:
        raise GraphQLQueryError(f"query: {exc}", status=exc.status) from exc

    repository = data.get("repository")
    if not isinstance(repository, dict) or not repository:
        raise GraphQLQueryError(f"query: repository {owner_and_name} not found")
    return int(repository.get("stargazerCount") or 0)


__all__ = [
    "PageFetcher",
    "RepositoryNameError",
    "PullRequestRecord",
    "PULL_REQUESTS_QUERY",
    "REPOSITORY_STARS_QUERY",
    "paginate",
    "fetch_all_pull_requests",
    "split_owner_and_name",
    "resolve_stars",
]
