"""
Review service for submitting and listing professional reviews.
"""

import asyncio
import logging
import uuid
from datetime import datetime, timezone
from typing import Dict, List, Optional

from ...core.enums import ReviewSortPolicy
from ...core.exceptions import ReviewValidationError
from ...core.models import RatingSummary, ReviewRecord
from .aggregator import ReviewAggregator

logger = logging.getLogger(__name__)

MAX_COMMENT_LENGTH = 500

RATING_LABELS = {
    1: "Poor",
    2: "Fair",
    3: "Good",
    4: "Very Good",
    5: "Excellent",
}


def rating_label(rating: int) -> Optional[str]:
    """Human-readable label for a star rating, or None when out of range."""
    return RATING_LABELS.get(rating)


class ReviewService:
    """Keeps reviews per professional and serves sorted lists and summaries."""

    def __init__(self, reviews: Optional[List[ReviewRecord]] = None):
        self._reviews: Dict[str, List[ReviewRecord]] = {}
        self._lock = asyncio.Lock()
        for review in reviews or []:
            self._reviews.setdefault(review.professional_id, []).append(review)

    async def submit_review(
        self,
        *,
        booking_id: str,
        customer_id: str,
        professional_id: str,
        rating: int,
        comment: str = "",
    ) -> ReviewRecord:
        """Validate and store a new review."""
        if rating not in RATING_LABELS:
            raise ReviewValidationError("Please select a rating between 1 and 5")
        comment = (comment or "").strip()
        if len(comment) > MAX_COMMENT_LENGTH:
            raise ReviewValidationError(
                f"Review comment must be at most {MAX_COMMENT_LENGTH} characters"
            )

        review = ReviewRecord(
            id=f"review_{uuid.uuid4().hex[:12]}",
            booking_id=booking_id,
            customer_id=customer_id,
            professional_id=professional_id,
            rating=rating,
            comment=comment,
            created_at=datetime.now(timezone.utc),
        )
        async with self._lock:
            self._reviews.setdefault(professional_id, []).append(review)

        logger.info(f"reviews: stored {review.id} for {professional_id} ({rating} stars)")
        return review

    async def list_reviews(
        self, professional_id: str, policy: ReviewSortPolicy = ReviewSortPolicy.NEWEST
    ) -> List[ReviewRecord]:
        async with self._lock:
            reviews = list(self._reviews.get(professional_id, []))
        return ReviewAggregator.sort(reviews, policy)

    async def summarize(self, professional_id: str) -> RatingSummary:
        async with self._lock:
            reviews = list(self._reviews.get(professional_id, []))
        return ReviewAggregator.summarize(reviews)
