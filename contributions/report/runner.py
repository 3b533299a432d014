"""Entry point wiring authentication, retrieval, aggregation and rendering."""

from __future__ import annotations

import sys

from contributions.auth import build_client, require_github_token
from contributions.retrieval.collectors import fetch_all_pull_requests
from contributions.retrieval.http_client import GraphQLQueryError

from .aggregate import aggregate_repository_stars
from .render import render_document, sort_repositories, write_report
from .settings import resolve_settings


def main() -> int:
    """Generate the contributions document; exits with status 1 on fatal errors."""
    settings = resolve_settings()
    token = require_github_token()
    client = build_client(token)

    try:
        pull_requests = fetch_all_pull_requests(client)
    except GraphQLQueryError as exc:
        print(f"[error] failed to get merged pull requests: {exc}")
        sys.exit(1)
    print(f"[info] total pull requests: {len(pull_requests)}")

    stars = aggregate_repository_stars(client, pull_requests, settings)
    repositories = sort_repositories(stars)
    print(f"[info] total contributed projects: {len(repositories)}")

    text = render_document(repositories, settings.google_repos, settings.account)
    try:
        write_report(settings.output_path, text)
    except OSError as exc:
        print(f"[error] write {settings.output_path}: {exc}")
        sys.exit(1)
    print(f"[info] wrote {settings.output_path}")
    return 0


__all__ = ["main"]
