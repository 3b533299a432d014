"""GraphQL client for the GitHub v4 API; every request is attempted once."""

from __future__ import annotations

from typing import Any, Dict, Optional

import requests

from .config import GRAPHQL_URL, REQUEST_TIMEOUT, USER_AGENT


class GraphQLQueryError(RuntimeError):
    """Raised when a GraphQL request fails at the transport or schema level."""

    def __init__(self, message: str, *, status: Optional[int] = None) -> None:
        super().__init__(message)
        self.status = status


def log_http_error(resp: requests.Response, url: str) -> None:
    """Print a short, human-readable message when GitHub returns an error."""
    try:
        body = resp.json()
    except ValueError:
        body = {"text": (resp.text or "")[:300]}
    if not isinstance(body, dict):
        body = {"text": str(body)[:300]}
    msg = body.get("message") or body.get("error") or body.get("text")
    print(f"[error] HTTP {resp.status_code} for {url}\n  -> {msg}")


class GraphQLClient:
    """Authenticated wrapper around a requests session for GraphQL queries."""

    def __init__(
        self,
        token: str,
        url: str = GRAPHQL_URL,
        timeout: float = REQUEST_TIMEOUT,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.url = url
        self.timeout = timeout
        self.session = session or requests.Session()
        self.session.headers.update(
            {
                "Accept": "application/vnd.github+json",
                "User-Agent": USER_AGENT,
                "Content-Type": "application/json",
                "Authorization": f"Bearer {token}",
            }
        )

    def query(self, query: str, variables: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        """Execute a single GraphQL request and return its ``data`` payload."""
        payload = {"query": query, "variables": variables or {}}
        try:
            resp = self.session.post(self.url, json=payload, timeout=self.timeout)
        except requests.RequestException as exc:
            raise GraphQLQueryError(f"request failed: {exc}") from exc

        if resp.status_code != 200:
            log_http_error(resp, self.url)
            raise GraphQLQueryError(
                f"HTTP {resp.status_code} from {self.url}", status=resp.status_code
            )

        try:
            data = resp.json()
        except ValueError as exc:
            raise GraphQLQueryError(f"invalid JSON response: {exc}", status=200) from exc

        if not isinstance(data, dict):
            raise GraphQLQueryError("unexpected response body", status=200)

        if data.get("errors"):
            messages = ", ".join(
                [str(err.get("message")) for err in data["errors"] if isinstance(err, dict)]
            )
            raise GraphQLQueryError(f"GraphQL error: {messages or data['errors']}", status=200)
        payload_data = data.get("data") or {}
        if not isinstance(payload_data, dict):
            raise GraphQLQueryError("unexpected data payload", status=200)
        return payload_data


__all__ = [
    "GraphQLQueryError",
    "GraphQLClient",
    "log_http_error",
]
