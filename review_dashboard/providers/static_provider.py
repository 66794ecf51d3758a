"""Review provider serving the bundled sample data."""

from typing import Any, Dict, List, Optional

from ..models import RawReview, Property
from .base_provider import ReviewProvider
from .sample_data import SAMPLE_REVIEWS, SAMPLE_PROPERTIES


class StaticReviewProvider(ReviewProvider):
    """Serves a fixed, in-memory set of reviews and properties."""

    def __init__(self, reviews: Optional[List[Dict[str, Any]]] = None,
                 properties: Optional[List[Dict[str, Any]]] = None):
        """Initialize provider.

        Args:
            reviews: Raw review dicts, defaults to the bundled sample reviews
            properties: Property dicts, defaults to the bundled catalog
        """
        super().__init__('static')
        self._reviews = [RawReview.from_dict(r) for r in (reviews if reviews is not None else SAMPLE_REVIEWS)]
        self._properties = [Property.from_dict(p) for p in
                            (properties if properties is not None else SAMPLE_PROPERTIES)]

    def fetch_reviews(self) -> List[RawReview]:
        self.logger.debug(f"Serving {len(self._reviews)} static reviews")
        return list(self._reviews)

    def fetch_review(self, review_id: int) -> Optional[RawReview]:
        for review in self._reviews:
            if review.id == review_id:
                return review
        return None

    def fetch_properties(self) -> List[Property]:
        return list(self._properties)

