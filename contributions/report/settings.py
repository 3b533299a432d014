"""Static repository tables and resolved settings for the contributions report."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from contributions.retrieval.config import OUTPUT_PATH

OPERATOR_ACCOUNT = "tylitianrui"
GOOGLE_MIRROR_FALLBACK_STARS = 1000
ADDITIONAL_REPO_FALLBACK_STARS = 100


@dataclass(frozen=True)
class GoogleSourceMapping:
    """A go.googlesource.com repository and its read-only GitHub mirror."""

    source_repo: str
    github_owner_and_name: str

    def log_url(self, account: str) -> str:
        return f"https://go.googlesource.com/{self.source_repo}/+log?author={account}"


# Go Google Git repositories contributed to via Gerrit.
GOOGLE_GITHUB_REPOS: Tuple[GoogleSourceMapping, ...] = (
    GoogleSourceMapping("build", "golang/build"),
    GoogleSourceMapping("go", "golang/go"),
    GoogleSourceMapping("net", "golang/net"),
    GoogleSourceMapping("mod", "golang/mod"),
    GoogleSourceMapping("protobuf", "protocolbuffers/protobuf-go"),
    GoogleSourceMapping("tools", "golang/tools"),
    GoogleSourceMapping("text", "golang/text"),
    GoogleSourceMapping("vulndb", "golang/vulndb"),
    GoogleSourceMapping("website", "golang/website"),
)

# Pull requests here show as closed: the upstream is reviewed in Gerrit and
# GitHub only mirrors the main branch.
ADDITIONAL_GITHUB_REPOS: Tuple[str, ...] = (
    "cue-lang/cue",  # https://review.gerrithub.io/q/project:cue-lang%252Fcue
    "cognitedata/cognite-sdk-python",
)


@dataclass(frozen=True)
class ReportSettings:
    """Resolved runtime settings for one report generation run."""

    account: str
    google_repos: Tuple[GoogleSourceMapping, ...]
    additional_repos: Tuple[str, ...]
    output_path: str
    google_fallback_stars: int = GOOGLE_MIRROR_FALLBACK_STARS
    additional_fallback_stars: int = ADDITIONAL_REPO_FALLBACK_STARS


def resolve_settings() -> ReportSettings:
    return ReportSettings(
        account=OPERATOR_ACCOUNT,
        google_repos=GOOGLE_GITHUB_REPOS,
        additional_repos=ADDITIONAL_GITHUB_REPOS,
        output_path=OUTPUT_PATH,
    )


__all__ = [
    "OPERATOR_ACCOUNT",
    "GOOGLE_MIRROR_FALLBACK_STARS",
    "ADDITIONAL_REPO_FALLBACK_STARS",
    "GoogleSourceMapping",
    "GOOGLE_GITHUB_REPOS",
    "ADDITIONAL_GITHUB_REPOS",
    "ReportSettings",
    "resolve_settings",
]
