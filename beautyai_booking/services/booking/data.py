"""
Catalog data provider for services, professionals and marketplace fixtures.
"""

import asyncio
from datetime import datetime
from typing import Dict, List, Optional

from ...core.models import DailyAnalytics, Professional, ReviewRecord, Service


class CatalogDataProvider:
    """Provides catalog data for the booking system."""

    PROFESSIONALS = [
        {
            "id": "prof_1",
            "user_id": "user1",
            "business_name": "Glamour Studio by Sarah",
            "description": "Specializing in bridal makeup and special occasion styling",
            "location": "Downtown, NYC",
            "avatar": "https://images.unsplash.com/photo-1494790108755-2616b9c5e8e1?w=150&h=150&fit=crop&crop=face",
            "rating": 4.9,
            "review_count": 127,
            "verified": True,
            "specialties": ["Bridal Makeup", "Special Events", "Airbrush"],
            "price_range": "$80-150",
            "availability": True,
            "created_at": "2024-01-15",
        },
    ]

    SERVICES = [
        {
            "id": "service_1",
            "professional_id": "prof_1",
            "name": "Bridal Makeup Package",
            "description": "Complete bridal makeup including consultation, trial session, wedding day application, and touch-up kit.",
            "duration": 180,
            "price": 150.0,
            "category": "Makeup",
            "images": ["https://images.unsplash.com/photo-1522337360788-8b13dee7a37e?w=400&h=300&fit=crop"],
            "active": True,
            "created_at": "2024-01-15",
        },
        {
            "id": "service_2",
            "professional_id": "prof_1",
            "name": "Special Event Makeup",
            "description": "Professional makeup for parties, photoshoots, and special occasions.",
            "duration": 90,
            "price": 80.0,
            "category": "Makeup",
            "images": ["https://images.unsplash.com/photo-1487412720507-e7ab37603c6f?w=400&h=300&fit=crop"],
            "active": True,
            "created_at": "2024-01-15",
        },
        {
            "id": "service_3",
            "professional_id": "prof_1",
            "name": "Airbrush Makeup",
            "description": "Long-lasting airbrush makeup perfect for photography and special events.",
            "duration": 75,
            "price": 100.0,
            "category": "Makeup",
            "images": ["https://images.unsplash.com/photo-1596462502278-27bfdc403348?w=400&h=300&fit=crop"],
            "active": False,
            "created_at": "2024-01-15",
        },
    ]

    TIME_SLOTS = [
        "9:00 AM", "10:00 AM", "11:00 AM", "1:00 PM",
        "2:00 PM", "3:00 PM", "4:00 PM", "5:00 PM",
    ]

    REVIEWS = [
        {
            "id": "review_1",
            "booking_id": "booking_1",
            "customer_id": "customer_1",
            "professional_id": "prof_1",
            "rating": 5,
            "comment": "Amazing work! Sarah made me look absolutely stunning for my wedding.",
            "created_at": "2024-01-10T00:00:00+00:00",
        },
        {
            "id": "review_2",
            "booking_id": "booking_2",
            "customer_id": "customer_2",
            "professional_id": "prof_1",
            "rating": 5,
            "comment": "Professional service and beautiful results. Will definitely book again.",
            "created_at": "2024-01-08T00:00:00+00:00",
        },
        {
            "id": "review_3",
            "booking_id": "booking_3",
            "customer_id": "customer_3",
            "professional_id": "prof_1",
            "rating": 4,
            "comment": "Great experience overall. The makeup lasted through the entire event.",
            "created_at": "2024-01-05T00:00:00+00:00",
        },
    ]

    ANALYTICS = [
        {"professional_id": "prof_1", "date": "2024-01-15", "revenue": 450, "bookings": 3, "new_customers": 2, "avg_rating": 4.8},
        {"professional_id": "prof_1", "date": "2024-01-14", "revenue": 320, "bookings": 2, "new_customers": 1, "avg_rating": 4.9},
        {"professional_id": "prof_1", "date": "2024-01-13", "revenue": 680, "bookings": 4, "new_customers": 3, "avg_rating": 4.7},
        {"professional_id": "prof_1", "date": "2024-01-12", "revenue": 230, "bookings": 1, "new_customers": 1, "avg_rating": 5.0},
        {"professional_id": "prof_1", "date": "2024-01-11", "revenue": 560, "bookings": 3, "new_customers": 2, "avg_rating": 4.8},
        {"professional_id": "prof_1", "date": "2024-01-10", "revenue": 380, "bookings": 2, "new_customers": 1, "avg_rating": 4.9},
        {"professional_id": "prof_1", "date": "2024-01-09", "revenue": 720, "bookings": 4, "new_customers": 4, "avg_rating": 4.6},
    ]

    def __init__(self, load_delay_seconds: float = 0.0):
        self.load_delay_seconds = load_delay_seconds
        self._services: Dict[str, Service] = {s["id"]: Service(**s) for s in self.SERVICES}
        self._professionals: Dict[str, Professional] = {
            p["id"]: Professional(**p) for p in self.PROFESSIONALS
        }

    async def _simulate_latency(self) -> None:
        if self.load_delay_seconds > 0:
            await asyncio.sleep(self.load_delay_seconds)

    async def get_service(self, service_id: str) -> Optional[Service]:
        """Find a service by identifier."""
        await self._simulate_latency()
        return self._services.get(service_id)

    async def get_professional(self, professional_id: str) -> Optional[Professional]:
        """Find a professional by identifier."""
        await self._simulate_latency()
        return self._professionals.get(professional_id)

    def get_time_slots(self, service_id: str) -> List[str]:
        """Get bookable time slot labels for a service."""
        return list(self.TIME_SLOTS)

    def get_reviews(self) -> List[ReviewRecord]:
        return [
            ReviewRecord(**{**r, "created_at": datetime.fromisoformat(r["created_at"])})
            for r in self.REVIEWS
        ]

    def get_analytics(self, professional_id: str) -> List[DailyAnalytics]:
        return [
            DailyAnalytics(**row)
            for row in self.ANALYTICS
            if row["professional_id"] == professional_id
        ]
