"""Changes grouped by changelog category."""

from enum import Enum
from typing import List

from pydantic import BaseModel, Field

from changelogger.models.change_item import ChangeItem


class Category(str, Enum):
    """Changelog section an item is filed under."""

    REGULAR = "regular"
    SECURITY = "security"
    DEPENDENCIES = "dependencies"


class ChangeSet(BaseModel):
    """Items per category, in classification order."""

    regular: List[ChangeItem] = Field(default_factory=list)
    security: List[ChangeItem] = Field(default_factory=list)
    dependencies: List[ChangeItem] = Field(default_factory=list)

    def __getitem__(self, category: Category) -> List[ChangeItem]:
        return getattr(self, Category(category).value)

    def add(self, category: Category, item: ChangeItem) -> None:
        """Append item to the given category."""
        self[category].append(item)

    def extend(self, other: "ChangeSet") -> None:
        """Append every category of ``other`` after this set's items."""
        for category in Category:
            self[category].extend(other[category])

    def all_items(self) -> List[ChangeItem]:
        """Items of every category (regular, security, dependencies)."""
        return [item for category in Category for item in self[category]]
