"""Abstract base for issue tracker clients."""

from abc import ABC, abstractmethod
from typing import List

from changelogger.models import Milestone


class IssueTrackerClient(ABC):
    """Interface for trackers that list milestones with their issues and PRs."""

    @abstractmethod
    def fetch_milestones(self, owner: str, repo_name: str) -> List[Milestone]:
        """Return the most recently due milestones, due date descending.

        Raises TrackerQueryError when the tracker reports a failure.
        """
        ...

    def close(self) -> None:
        """Release network resources. Override if needed."""
        return None
