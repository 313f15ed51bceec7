"""Issue or pull request as seen by the changelog."""

from typing import FrozenSet

from pydantic import BaseModel, ConfigDict, Field


class ChangeItem(BaseModel):
    """Closed-or-open issue or pull request with its label names.

    Labels are compared exactly (case-sensitive).
    """

    model_config = ConfigDict(frozen=True)

    title: str
    url: str
    closed: bool = False
    labels: FrozenSet[str] = Field(default_factory=frozenset)
