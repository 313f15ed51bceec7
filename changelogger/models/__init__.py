"""Data models for milestones and changelog entries (Pydantic)."""

from changelogger.models.change_item import ChangeItem
from changelogger.models.change_set import Category, ChangeSet
from changelogger.models.milestone import Milestone

__all__ = ["Category", "ChangeItem", "ChangeSet", "Milestone"]
