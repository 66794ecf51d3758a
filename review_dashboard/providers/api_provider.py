"""Review provider backed by the review API."""

from typing import List, Optional

from ..models import RawReview, Property
from ..utils.exceptions import NotFoundException
from .api_client import ReviewApiClient
from .base_provider import ReviewProvider


class ApiReviewProvider(ReviewProvider):
    """Fetches reviews and properties over HTTP."""

    def __init__(self, client: ReviewApiClient):
        super().__init__('api')
        self.client = client

    def fetch_reviews(self) -> List[RawReview]:
        reviews = self.parse_envelope(self.client.get_reviews())
        self.logger.info(f"Fetched {len(reviews)} reviews from {self.client.base_url}")
        return reviews

    def fetch_review(self, review_id: int) -> Optional[RawReview]:
        try:
            return self.client.get_review(review_id)
        except NotFoundException:
            return None

    def fetch_properties(self) -> List[Property]:
        return self.client.get_properties()
