"""Errors raised while building a changelog.

Every error is fatal: the CLI logs it and exits non-zero without printing
a partial changelog.
"""


class ChangelogError(Exception):
    """Base class for all changelogger failures."""

    pass


class MissingArgumentError(ChangelogError):
    """Raised when a required CLI argument is absent or malformed."""

    pass


class ConfigError(ChangelogError):
    """Raised when required configuration (e.g. the API token) is missing."""

    pass


class TrackerQueryError(ChangelogError):
    """Raised when the issue tracker reports a failed query."""

    pass


class NotFoundError(ChangelogError):
    """Raised when no milestone matches the selection rule."""

    pass


class MalformedTitleError(ChangelogError):
    """Raised when a dependency title does not follow "Bump X from Y to Z"."""

    def __init__(self, title: str) -> None:
        super().__init__(f"Dependency title does not match 'Bump <name> from': {title!r}")
        self.title = title
