"""
Review and professional dashboard handler.
"""

from typing import List

from fastapi import APIRouter, HTTPException, status

from ...core.enums import ReviewSortPolicy
from ...core.models import DashboardSummary, RatingSummary, ReviewRecord
from ...services.dashboard import DashboardService
from ...services.notifications import ShareOutcome
from ...services.reviews import ReviewAggregator
from ..dependencies import AppServices
from ..schemas import ReviewCollectionRequest, ReviewSubmitRequest


class ReviewHandler:
    """Handler for review statistics, review submission and dashboards."""

    def __init__(self, services: AppServices):
        self.services = services
        self.router = APIRouter()
        self._setup_routes()

    def _setup_routes(self):
        """Setup review routes."""

        @self.router.post("/reviews/summary", response_model=RatingSummary)
        async def summarize_reviews(body: ReviewCollectionRequest):
            return ReviewAggregator.summarize(body.reviews)

        @self.router.post("/reviews/sort", response_model=List[ReviewRecord])
        async def sort_reviews(
            body: ReviewCollectionRequest, policy: ReviewSortPolicy = ReviewSortPolicy.NEWEST
        ):
            return ReviewAggregator.sort(body.reviews, policy)

        @self.router.post(
            "/reviews", response_model=ReviewRecord, status_code=status.HTTP_201_CREATED
        )
        async def submit_review(body: ReviewSubmitRequest):
            return await self.services.reviews.submit_review(**body.model_dump())

        @self.router.get(
            "/professionals/{professional_id}/reviews", response_model=List[ReviewRecord]
        )
        async def list_reviews(
            professional_id: str, sort: ReviewSortPolicy = ReviewSortPolicy.NEWEST
        ):
            return await self.services.reviews.list_reviews(professional_id, sort)

        @self.router.get(
            "/professionals/{professional_id}/dashboard", response_model=DashboardSummary
        )
        async def dashboard(professional_id: str):
            professional = await self.services.catalog.get_professional(professional_id)
            if professional is None:
                raise HTTPException(status_code=404, detail="Professional not found")
            reviews = await self.services.reviews.list_reviews(professional_id)
            return DashboardService.summarize(
                professional_id, self.services.catalog.get_analytics(professional_id), reviews
            )

        @self.router.post("/professionals/{professional_id}/share")
        async def share_profile(professional_id: str):
            professional = await self.services.catalog.get_professional(professional_id)
            if professional is None:
                raise HTTPException(status_code=404, detail="Professional not found")
            outcome: ShareOutcome = await self.services.sharing.share_profile(professional)
            return {
                "outcome": outcome.value,
                "url": self.services.sharing.profile_url(professional_id),
            }
