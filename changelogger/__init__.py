"""Changelogger: milestone changelogs from a GitHub issue tracker."""

__version__ = "0.1.0"
