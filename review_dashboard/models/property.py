"""Property and property metrics data models."""

from dataclasses import dataclass, field
from typing import Dict, Any


@dataclass
class Property:
    """A listing in the property catalog."""

    id: str
    name: str
    location: str = ''
    type: str = 'apartment'
    average_rating: float = 0.0
    total_reviews: int = 0
    approved_reviews: int = 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            'id': self.id,
            'name': self.name,
            'location': self.location,
            'type': self.type,
            'averageRating': self.average_rating,
            'totalReviews': self.total_reviews,
            'approvedReviews': self.approved_reviews,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Property':
        return cls(
            id=data.get('id', ''),
            name=data.get('name', ''),
            location=data.get('location', ''),
            type=data.get('type', 'apartment'),
            average_rating=float(data.get('averageRating', 0.0)),
            total_reviews=int(data.get('totalReviews', 0)),
            approved_reviews=int(data.get('approvedReviews', 0))
        )


@dataclass
class PropertyMetrics:
    """Aggregate statistics for one property, recomputed on demand."""

    property_id: str
    average_rating: float = 0.0
    total_reviews: int = 0
    approved_reviews: int = 0
    channel_breakdown: Dict[str, int] = field(default_factory=dict)
    category_ratings: Dict[str, float] = field(default_factory=dict)
    recent_trend: str = 'stable'  # "up", "down" or "stable"
    response_rate: int = 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            'propertyId': self.property_id,
            'averageRating': self.average_rating,
            'totalReviews': self.total_reviews,
            'approvedReviews': self.approved_reviews,
            'channelBreakdown': dict(self.channel_breakdown),
            'categoryRatings': dict(self.category_ratings),
            'recentTrend': self.recent_trend,
            'responseRate': self.response_rate,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'PropertyMetrics':
        return cls(
            property_id=data.get('propertyId', ''),
            average_rating=float(data.get('averageRating', 0.0)),
            total_reviews=int(data.get('totalReviews', 0)),
            approved_reviews=int(data.get('approvedReviews', 0)),
            channel_breakdown=dict(data.get('channelBreakdown') or {}),
            category_ratings=dict(data.get('categoryRatings') or {}),
            recent_trend=data.get('recentTrend', 'stable'),
            response_rate=int(data.get('responseRate', 0))
        )


@dataclass
class OverviewStats:
    """Headline numbers across every loaded review."""

    total_reviews: int = 0
    average_rating: float = 0.0
    response_rate: int = 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            'totalReviews': self.total_reviews,
            'averageRating': self.average_rating,
            'responseRate': self.response_rate,
        }
