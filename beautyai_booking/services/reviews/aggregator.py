"""
Rating statistics and ordering over review collections.
"""

from typing import Iterable, List, Sequence

from ...core.enums import ReviewSortPolicy
from ...core.models import RatingBucket, RatingSummary, ReviewRecord

STAR_VALUES = (5, 4, 3, 2, 1)


class ReviewAggregator:
    """Pure computations over an ordered collection of reviews."""

    @staticmethod
    def summarize(reviews: Iterable[ReviewRecord]) -> RatingSummary:
        """
        Compute the average rating and per-star distribution.

        Args:
            reviews: Reviews to summarize; may be empty

        Returns:
            RatingSummary with zero values when there are no reviews
        """
        ratings = [review.rating for review in reviews]
        total = len(ratings)
        average = sum(ratings) / total if total else 0.0

        distribution = {}
        for star in STAR_VALUES:
            count = ratings.count(star)
            percentage = count / total * 100 if total else 0.0
            distribution[star] = RatingBucket(count=count, percentage=percentage)

        return RatingSummary(average=average, total=total, distribution=distribution)

    @staticmethod
    def sort(reviews: Sequence[ReviewRecord], policy: ReviewSortPolicy) -> List[ReviewRecord]:
        """
        Return reviews ordered by ``policy``.

        The sort is stable: reviews that compare equal keep their input order.
        """
        policy = ReviewSortPolicy(policy)
        if policy is ReviewSortPolicy.NEWEST:
            return sorted(reviews, key=lambda r: r.created_at, reverse=True)
        if policy is ReviewSortPolicy.OLDEST:
            return sorted(reviews, key=lambda r: r.created_at)
        if policy is ReviewSortPolicy.HIGHEST:
            return sorted(reviews, key=lambda r: r.rating, reverse=True)
        return sorted(reviews, key=lambda r: r.rating)
