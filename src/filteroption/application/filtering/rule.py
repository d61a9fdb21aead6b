"""Application filtering – ShowDeletedRule."""
from __future__ import annotations

from enum import Enum


class ShowDeletedRule(str, Enum):
    """Visibility rule for soft-deleted rows, as sent in ``?show=``."""

    HIDE_DELETED = ""
    SHOW_DELETED_ONLY = "deleted"
    SHOW_ALL = "all"

    @classmethod
    def parse(cls, value: str) -> "ShowDeletedRule | str":
        """Return the matching rule, or *value* unchanged when it is unknown."""
        try:
            return cls(value)
        except ValueError:
            return value


__all__ = ["ShowDeletedRule"]
