"""
Review-related enums.
"""

from enum import Enum


class ReviewSortPolicy(str, Enum):
    """Orderings offered for a review list."""

    NEWEST = "newest"
    OLDEST = "oldest"
    HIGHEST = "highest"
    LOWEST = "lowest"
