"""
Dashboard service for professional-facing business summaries.
"""

from decimal import Decimal
from typing import Sequence

from ...core.models import DailyAnalytics, DashboardSummary, ReviewRecord
from ..reviews import ReviewAggregator


class DashboardService:
    """Combines daily analytics and reviews into dashboard totals."""

    @staticmethod
    def summarize(
        professional_id: str,
        analytics: Sequence[DailyAnalytics],
        reviews: Sequence[ReviewRecord],
    ) -> DashboardSummary:
        days = [day for day in analytics if day.professional_id == professional_id]
        own_reviews = [r for r in reviews if r.professional_id == professional_id]

        avg_rating = sum(day.avg_rating for day in days) / len(days) if days else 0.0

        return DashboardSummary(
            professional_id=professional_id,
            total_revenue=sum((day.revenue for day in days), Decimal("0")),
            total_bookings=sum(day.bookings for day in days),
            total_customers=sum(day.new_customers for day in days),
            avg_rating=avg_rating,
            reviews=ReviewAggregator.summarize(own_reviews),
        )
