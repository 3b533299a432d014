"""Markdown rendering for the contributions document."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, List

from .settings import GoogleSourceMapping

BANNER = """<!---
Code generated by run_report.py; DO NOT EDIT.

To update the doc run:
GITHUB_TOKEN=<YOUR_TOKEN> python run_report.py
-->

# Open Source Projects I've Ever Contributed
"""

GOOGLE_SECTION_HEADER = """
## Go Google Git Repositories

_links pointed to a log with my contributions_

"""

GITHUB_SECTION_HEADER = """
## GitHub Projects

_sorted by stars descending_

"""


@dataclass(frozen=True)
class AggregatedRepository:
    owner_and_name: str
    star_count: int

    @property
    def url(self) -> str:
        return f"https://github.com/{self.owner_and_name}"


def sort_repositories(stars: Dict[str, int]) -> List[AggregatedRepository]:
    """Order by star count descending; equal counts fall back to owner/name."""
    repositories = [AggregatedRepository(name, count) for name, count in stars.items()]
    return sorted(repositories, key=lambda repo: (-repo.star_count, repo.owner_and_name))


def render_document(repositories: Iterable[AggregatedRepository],
                    mirrors: Iterable[GoogleSourceMapping],
                    account: str) -> str:
    lines = [BANNER, GOOGLE_SECTION_HEADER]
    for mirror in mirrors:
        lines.append(f"* [{mirror.source_repo}]({mirror.log_url(account)})\n")
    lines.append(GITHUB_SECTION_HEADER)
    for repo in repositories:
        lines.append(f"* [{repo.owner_and_name}]({repo.url})\n")
    return "".join(lines)


def write_report(path: str, text: str) -> None:
    """Overwrite ``path`` with ``text``; OSError is left to the caller."""
    with open(path, "w", encoding="utf-8") as f:
        f.write(text)


__all__ = [
    "AggregatedRepository",
    "sort_repositories",
    "render_document",
    "write_report",
]
