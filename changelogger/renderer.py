"""Render a classified milestone as plain-text changelog."""

from typing import Iterable, List

from changelogger.dependencies import extract_dependency_name
from changelogger.models import Category, ChangeItem, ChangeSet

# Categories listed item by item, in output order
LISTED_CATEGORIES = (Category.REGULAR, Category.SECURITY)


def bumped_dependencies(items: Iterable[ChangeItem]) -> List[str]:
    """Sorted unique dependency names from bump titles."""
    return sorted({extract_dependency_name(item.title) for item in items})


def render(milestone_title: str, changes: ChangeSet) -> str:
    """Render the changelog for one milestone.

    Output: title, dash underline, blank line; then ``* title: url`` plus a
    blank line for each regular and security item (sorted by title); then a
    single ``* Bumped a, b.`` line for dependency updates.
    """
    lines = [milestone_title, "-" * len(milestone_title), ""]
    for category in LISTED_CATEGORIES:
        for item in sorted(changes[category], key=lambda i: i.title):
            lines.append(f"* {item.title}: {item.url}")
            lines.append("")
    names = bumped_dependencies(changes[Category.DEPENDENCIES])
    lines.append(f"* Bumped {', '.join(names)}.")
    return "\n".join(lines) + "\n"
