"""Central configuration constants for the GitHub GraphQL retrieval layer."""

from __future__ import annotations

import os

TOKEN_ENV_VAR = "GITHUB_TOKEN"
USER_AGENT = "oss-contributions-report/1.0"
GRAPHQL_URL = os.getenv("GITHUB_GRAPHQL_URL", "https://api.github.com/graphql")
PER_PAGE = 100
REQUEST_TIMEOUT = int(os.getenv("REQUEST_TIMEOUT", "90"))
OUTPUT_PATH = os.getenv("CONTRIBUTIONS_FILE", "CONTRIBUTIONS.md")

__all__ = [
    "TOKEN_ENV_VAR",
    "USER_AGENT",
    "GRAPHQL_URL",
    "PER_PAGE",
    "REQUEST_TIMEOUT",
    "OUTPUT_PATH",
]
