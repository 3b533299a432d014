"""Utilities for reading the GitHub access token and building a client."""

from __future__ import annotations

import os
import sys
from typing import Optional

from contributions.retrieval.config import TOKEN_ENV_VAR
from contributions.retrieval.http_client import GraphQLClient


def load_github_token(env_var: str = TOKEN_ENV_VAR) -> Optional[str]:
    """Return the token from the environment; None when empty or unset."""
    token = (os.getenv(env_var) or "").strip()
    return token or None


def require_github_token(env_var: str = TOKEN_ENV_VAR) -> str:
    """Return the token or exit the process with status 1."""
    token = load_github_token(env_var)
    if not token:
        print(f"[error] env variable '{env_var}' must be non-empty")
        sys.exit(1)
    return token


def build_client(token: str) -> GraphQLClient:
    return GraphQLClient(token)


__all__ = ["load_github_token", "require_github_token", "build_client"]
