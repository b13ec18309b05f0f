"""
Review service module.
"""

from .aggregator import ReviewAggregator
from .service import ReviewService, rating_label

__all__ = [
    "ReviewAggregator",
    "ReviewService",
    "rating_label",
]
