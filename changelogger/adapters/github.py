"""GitHub GraphQL API adapter."""

import logging
from datetime import datetime
from typing import Any, Dict, List

import requests

from changelogger.adapters.base import IssueTrackerClient
from changelogger.errors import TrackerQueryError
from changelogger.models import ChangeItem, Milestone

logger = logging.getLogger(__name__)

MILESTONE_LIMIT = 10
ITEM_LIMIT = 100
LABEL_LIMIT = 100

_ITEM_FIELDS = f"""
            nodes {{
              closed
              title
              url
              labels(first: {LABEL_LIMIT}) {{
                nodes {{
                  name
                }}
              }}
            }}"""

MILESTONES_QUERY = f"""
query($repo_name: String!, $owner: String!) {{
  repository(name: $repo_name, owner: $owner) {{
    milestones(first: {MILESTONE_LIMIT}, orderBy: {{direction: DESC, field: DUE_DATE}}) {{
      nodes {{
        dueOn
        title
        issues(first: {ITEM_LIMIT}) {{{_ITEM_FIELDS}
        }}
        pullRequests(first: {ITEM_LIMIT}) {{{_ITEM_FIELDS}
        }}
      }}
    }}
  }}
}}
"""


def _parse_iso(s: Any) -> datetime | None:
    """Parse an ISO 8601 timestamp; None when missing or unparseable."""
    if not isinstance(s, str) or not s:
        return None
    try:
        return datetime.fromisoformat(s.replace("Z", "+00:00"))
    except ValueError:
        logger.debug("Ignoring unparseable due date %r", s)
        return None


def _nodes(data: Dict[str, Any] | None, key: str) -> List[Dict[str, Any]]:
    connection = (data or {}).get(key) or {}
    return [n for n in (connection.get("nodes") or []) if isinstance(n, dict)]


def _item_from_api(data: Dict[str, Any]) -> ChangeItem:
    labels = frozenset(lb["name"] for lb in _nodes(data, "labels") if "name" in lb)
    return ChangeItem(
        title=data.get("title") or "",
        url=data.get("url") or "",
        closed=bool(data.get("closed")),
        labels=labels,
    )


def _milestone_from_api(data: Dict[str, Any]) -> Milestone:
    return Milestone(
        title=data.get("title") or "",
        due_on=_parse_iso(data.get("dueOn")),
        issues=tuple(_item_from_api(d) for d in _nodes(data, "issues")),
        pull_requests=tuple(_item_from_api(d) for d in _nodes(data, "pullRequests")),
    )


class GitHubAdapter(IssueTrackerClient):
    """GitHub GraphQL implementation (one query per run, no pagination)."""

    def __init__(
        self,
        token: str,
        api_url: str = "https://api.github.com",
        user_agent: str = "Changelogger CLI",
        timeout: int = 30,
    ) -> None:
        self._graphql_url = f"{api_url.rstrip('/')}/graphql"
        self._timeout = timeout
        self._session = requests.Session()
        self._session.headers["Authorization"] = f"bearer {token}"
        self._session.headers["User-Agent"] = user_agent

    def _query(self, query: str, variables: Dict[str, Any]) -> Dict[str, Any]:
        try:
            resp = self._session.request(
                "POST",
                self._graphql_url,
                json={"query": query, "variables": variables},
                timeout=self._timeout,
            )
        except requests.RequestException as e:
            raise TrackerQueryError(f"GraphQL request failed: {e}") from e
        if resp.status_code >= 400:
            msg = resp.text or resp.reason or str(resp.status_code)
            try:
                error_body = resp.json()
            except ValueError:
                error_body = None
            if isinstance(error_body, dict):
                msg = error_body.get("message", msg)
            raise TrackerQueryError(f"{resp.status_code}: {msg}")
        try:
            body = resp.json()
        except ValueError as e:
            raise TrackerQueryError(f"GraphQL response is not JSON: {e}") from e
        if not isinstance(body, dict):
            raise TrackerQueryError(f"Unexpected GraphQL response: {body!r}")
        if body.get("errors"):
            raise TrackerQueryError(repr(body["errors"]))
        return body.get("data") or {}

    def fetch_milestones(self, owner: str, repo_name: str) -> List[Milestone]:
        logger.info("Fetching milestones for %s/%s", owner, repo_name)
        data = self._query(MILESTONES_QUERY, {"owner": owner, "repo_name": repo_name})
        repository = data.get("repository")
        if repository is None:
            raise TrackerQueryError(f"Repository not found: {owner}/{repo_name}")
        milestones = [_milestone_from_api(d) for d in _nodes(repository, "milestones")]
        logger.debug("Fetched %d milestone(s)", len(milestones))
        return milestones

    def close(self) -> None:
        self._session.close()
