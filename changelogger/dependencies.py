"""Dependency names from dependency-update titles ("Bump X from Y to Z")."""

import re

from changelogger.errors import MalformedTitleError

BUMP_PATTERN = re.compile(r"Bump (.*?) from")


def extract_dependency_name(title: str) -> str:
    """Return ``X`` from a title containing "Bump X from".

    Raises MalformedTitleError when the title has no such phrase.
    """
    match = BUMP_PATTERN.search(title)
    if match is None:
        raise MalformedTitleError(title)
    return match.group(1)
