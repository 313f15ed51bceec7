"""Pick the milestone a changelog is written for."""

from datetime import datetime, timezone
from typing import Sequence

from changelogger.errors import NotFoundError
from changelogger.models import Milestone


def _as_utc(value: datetime) -> datetime:
    """Treat naive datetimes as UTC so they compare with tracker dates."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def find_milestone_with_title(milestones: Sequence[Milestone], title: str) -> Milestone:
    """Return the first milestone whose title equals ``title`` ignoring case."""
    wanted = title.casefold()
    for milestone in milestones:
        if milestone.title.casefold() == wanted:
            return milestone
    raise NotFoundError(f"No milestone titled {title!r}")


def recently_completed_milestone(milestones: Sequence[Milestone], now: datetime) -> Milestone:
    """Return the first milestone (in tracker order) due before ``now``.

    Milestones without a due date never qualify. With the tracker's due date
    descending order this is the most recently completed milestone.
    """
    now = _as_utc(now)
    for milestone in milestones:
        if milestone.due_on is not None and _as_utc(milestone.due_on) < now:
            return milestone
    raise NotFoundError("No milestone is due in the past")


def select_milestone(
    milestones: Sequence[Milestone],
    name: str | None = None,
    now: datetime | None = None,
) -> Milestone:
    """Select by exact title when ``name`` is given, otherwise by recency."""
    if name is not None:
        return find_milestone_with_title(milestones, name)
    return recently_completed_milestone(milestones, now or datetime.now(timezone.utc))
