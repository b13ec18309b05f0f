"""
Tests for the professional dashboard summary.
"""

from decimal import Decimal

import pytest
from beautyai_booking.services.dashboard import DashboardService


class TestDashboardService:
    """Test DashboardService.summarize."""

    def test_totals_from_catalog(self, catalog):
        summary = DashboardService.summarize(
            "prof_1", catalog.get_analytics("prof_1"), catalog.get_reviews()
        )

        assert summary.total_revenue == Decimal("3340")
        assert summary.total_bookings == 19
        assert summary.total_customers == 14
        assert summary.avg_rating == pytest.approx(4.81, abs=0.01)
        assert summary.reviews.total == 3
        assert summary.reviews.bucket(5).count == 2

    def test_ignores_other_professionals(self, catalog, review_factory, jan):
        reviews = [review_factory("x", 1, jan(1), professional_id="prof_2")]

        summary = DashboardService.summarize("prof_1", catalog.get_analytics("prof_1"), reviews)

        assert summary.reviews.total == 0

    def test_empty_inputs(self):
        summary = DashboardService.summarize("prof_1", [], [])

        assert summary.total_revenue == 0
        assert summary.total_bookings == 0
        assert summary.avg_rating == 0
        assert summary.reviews.average == 0
