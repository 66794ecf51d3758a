"""Provider-shaped review data model."""

import math
from dataclasses import dataclass, field
from typing import Optional, Dict, Any, List


def _to_int(value: Any) -> Optional[int]:
    """Convert a JSON number to int; None for anything else, including NaN and infinity."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    if isinstance(value, float) and not math.isfinite(value):
        return None
    return int(value)


def _to_text(value: Any) -> Optional[str]:
    return value if isinstance(value, str) else None


@dataclass(frozen=True)
class RawReviewCategory:
    """One category score from the provider, on a 0-10 scale."""

    category: str
    rating: int

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'RawReviewCategory':
        """Create a category entry, defaulting a missing rating to 0."""
        rating = _to_int(data.get('rating'))
        return cls(
            category=str(data.get('category') or ''),
            rating=rating if rating is not None else 0
        )

    def to_dict(self) -> Dict[str, Any]:
        return {'category': self.category, 'rating': self.rating}


@dataclass(frozen=True)
class RawReview:
    """Review record exactly as the review provider serves it."""

    id: int
    type: str = 'guest-to-host'
    rating: Optional[int] = None
    public_review: str = ''
    review_category: List[RawReviewCategory] = field(default_factory=list)
    submitted_at: Optional[str] = None
    guest_name: Optional[str] = None
    listing_name: Optional[str] = None
    status: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'RawReview':
        """Create RawReview instance from provider JSON.

        Every optional key falls back to a documented default rather than
        raising, so partial payloads still load.
        """
        categories = data.get('reviewCategory')
        if not isinstance(categories, list):
            categories = []

        review_id = data.get('id')
        if isinstance(review_id, str) and review_id.strip().isdigit():
            review_id = int(review_id)

        return cls(
            id=_to_int(review_id) or 0,
            type=_to_text(data.get('type')) or 'guest-to-host',
            rating=_to_int(data.get('rating')),
            public_review=_to_text(data.get('publicReview')) or '',
            review_category=[RawReviewCategory.from_dict(c) for c in categories
                             if isinstance(c, dict)],
            submitted_at=_to_text(data.get('submittedAt')),
            guest_name=_to_text(data.get('guestName')),
            listing_name=_to_text(data.get('listingName')),
            status=_to_text(data.get('status'))
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert back to the provider's camelCase wire shape."""
        data = {
            'id': self.id,
            'type': self.type,
            'rating': self.rating,
            'publicReview': self.public_review,
            'reviewCategory': [c.to_dict() for c in self.review_category],
            'submittedAt': self.submitted_at,
            'guestName': self.guest_name,
            'listingName': self.listing_name,
        }
        if self.status is not None:
            data['status'] = self.status
        return data
