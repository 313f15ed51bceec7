"""Sort closed issues and pull requests into changelog categories."""

from typing import Iterable

from changelogger.models import Category, ChangeItem, ChangeSet, Milestone

SECURITY_LABEL = "security"
DEPENDENCIES_LABEL = "dependencies"


def category_for(item: ChangeItem) -> Category:
    """Category by label; security wins over dependencies."""
    if SECURITY_LABEL in item.labels:
        return Category.SECURITY
    if DEPENDENCIES_LABEL in item.labels:
        return Category.DEPENDENCIES
    return Category.REGULAR


def classify(items: Iterable[ChangeItem]) -> ChangeSet:
    """Group closed items by category, keeping input order. Open items are
    skipped."""
    changes = ChangeSet()
    for item in items:
        if not item.closed:
            continue
        changes.add(category_for(item), item)
    return changes


def classify_milestone(milestone: Milestone) -> ChangeSet:
    """Classify a milestone's issues, then its pull requests."""
    changes = classify(milestone.issues)
    changes.extend(classify(milestone.pull_requests))
    return changes
