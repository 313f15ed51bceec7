"""Milestone model."""

from datetime import datetime
from typing import Tuple

from pydantic import BaseModel, ConfigDict, Field

from changelogger.models.change_item import ChangeItem


class Milestone(BaseModel):
    """Tracker milestone with its issues and pull requests.

    ``due_on`` is None when the tracker has no (or an unparseable) due date.
    """

    model_config = ConfigDict(frozen=True)

    title: str
    due_on: datetime | None = None
    issues: Tuple[ChangeItem, ...] = Field(default_factory=tuple)
    pull_requests: Tuple[ChangeItem, ...] = Field(default_factory=tuple)
