"""Issue tracker adapters."""

from changelogger.adapters.base import IssueTrackerClient
from changelogger.adapters.github import GitHubAdapter

__all__ = ["IssueTrackerClient", "GitHubAdapter"]
