"""Canonical review data model."""

from dataclasses import dataclass, field
from datetime import date
from typing import Dict, Any, List

from .raw_review import RawReviewCategory


REVIEW_STATUSES = ('pending', 'approved', 'rejected')
REVIEW_CATEGORIES = ('cleanliness', 'communication', 'location', 'value', 'amenities', 'overall')
REVIEW_CHANNELS = ('airbnb', 'booking', 'vrbo', 'direct', 'google', 'hostaway')


@dataclass(frozen=True)
class Review:
    """Normalized, application-facing review.

    Derived fresh from a RawReview on every load and never persisted;
    moderation state lives in the status overlay instead.
    """

    id: str
    property_id: str
    property_name: str
    guest_name: str
    rating: int
    title: str
    content: str
    date: date
    channel: str = 'hostaway'
    category: str = 'overall'
    status: str = 'pending'
    helpful: int = 0
    verified_stay: bool = True
    stay_duration: int = 1
    category_ratings: List[RawReviewCategory] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        """Convert review to a JSON-ready dictionary."""
        return {
            'id': self.id,
            'propertyId': self.property_id,
            'propertyName': self.property_name,
            'guestName': self.guest_name,
            'rating': self.rating,
            'title': self.title,
            'content': self.content,
            'date': self.date.isoformat(),
            'channel': self.channel,
            'category': self.category,
            'status': self.status,
            'helpful': self.helpful,
            'verifiedStay': self.verified_stay,
            'stayDuration': self.stay_duration,
            'categoryRatings': [c.to_dict() for c in self.category_ratings],
        }

    def is_rated(self) -> bool:
        """Check if the review carries a usable star rating."""
        return self.rating > 0
