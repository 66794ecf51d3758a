"""Main review dashboard orchestrator."""

from dataclasses import replace
from typing import Dict, List, Optional
import random

from .config import Config
from .models import Review, Property, PropertyMetrics, OverviewStats, REVIEW_STATUSES
from .providers import ReviewProvider, StaticReviewProvider, ReviewApiClient, ApiReviewProvider, PROPERTY_IDS
from .persistence import StatusOverlay, create_overlay
from .analysis import (normalize_all, compute_metrics, compute_all_metrics, compute_overview,
                       rating_distribution, ReviewCriteria, filter_reviews, sort_reviews,
                       public_reviews)
from .analysis.normalizer import REVIEW_ID_PREFIX
from .utils.exceptions import ValidationException
from .utils.logger import get_component_logger, log_execution_time


logger = get_component_logger('Dashboard')


class ReviewDashboard:
    """Coordinates the provider, normalizer, status overlay and analysis layers."""

    def __init__(self, provider: ReviewProvider, overlay: StatusOverlay,
                 property_ids: Optional[List[str]] = None,
                 api_client: Optional[ReviewApiClient] = None,
                 rng: Optional[random.Random] = None):
        """Initialize the dashboard.

        Args:
            provider: Source of raw reviews and the property catalog
            overlay: Approval overlay, shared with whoever else moderates
            property_ids: Property ids reported by the all-properties metrics
            api_client: When given, status changes are pushed to the review API first
            rng: Random source for presentation-only review fields
        """
        self.provider = provider
        self.overlay = overlay
        self.property_ids = list(property_ids or PROPERTY_IDS)
        self.api_client = api_client
        self.rng = rng
        # Rejections only last for this dashboard's lifetime
        self._session_statuses: Dict[str, str] = {}

    @log_execution_time(logger, "Review load")
    def load_reviews(self) -> List[Review]:
        """Fetch, normalize and merge reviews with the status overlay.

        Returns:
            Reviews whose status is the effective status
        """
        raws = self.provider.fetch_reviews()
        reviews = normalize_all(raws, rng=self.rng)
        merged = [replace(r, status=self.resolve_status(r)) for r in reviews]
        logger.info(f"Loaded {len(merged)} reviews from provider '{self.provider.name}'")
        return merged

    def resolve_status(self, review: Review) -> str:
        """Overlay approval first, then this session's moderation, then the review's own status."""
        if self.overlay.is_approved(review.id):
            return 'approved'
        return self._session_statuses.get(review.id, review.status)

    def properties(self) -> List[Property]:
        return self.provider.fetch_properties()

    def filter(self, criteria: ReviewCriteria, sort_by: Optional[str] = None) -> List[Review]:
        """Filter loaded reviews, optionally sorting the result."""
        reviews = filter_reviews(self.load_reviews(), criteria)
        if sort_by:
            reviews = sort_reviews(reviews, sort_by)
        return reviews

    def public_reviews(self, property_id: Optional[str] = None, sort_by: str = 'newest') -> List[Review]:
        return public_reviews(self.load_reviews(), self.overlay, property_id, sort_by)

    def public_summary(self, property_id: Optional[str] = None, sort_by: str = 'newest') -> Dict:
        """Approved reviews with their average rating and star distribution."""
        reviews = self.public_reviews(property_id, sort_by)
        overview = compute_overview(reviews)
        return {
            'reviews': reviews,
            'averageRating': overview.average_rating,
            'totalReviews': overview.total_reviews,
            'distribution': rating_distribution(reviews),
        }

    def property_metrics(self, property_id: str) -> PropertyMetrics:
        return compute_metrics(property_id, self.load_reviews(), self.overlay)

    def all_property_metrics(self) -> List[PropertyMetrics]:
        return compute_all_metrics(self.property_ids, self.load_reviews(), self.overlay)

    def overview(self) -> OverviewStats:
        return compute_overview(self.load_reviews())

    def set_status(self, review_id: str, status: str) -> str:
        """Moderate a review.

        Approval is written to the overlay; 'rejected' and 'pending' clear
        it and are otherwise only remembered for this dashboard's lifetime.

        Args:
            review_id: Provider id or review id
            status: 'approved', 'rejected' or 'pending'

        Returns:
            The canonical review id that was updated

        Raises:
            ValidationException: If status is not a known review status
        """
        if status not in REVIEW_STATUSES:
            raise ValidationException('Status must be approved, rejected, or pending')

        review_id = canonical_review_id(review_id)
        self._push_status(review_id, status)

        if status == 'approved':
            self.overlay.approve(review_id)
        else:
            self.overlay.reject(review_id)
        self._session_statuses[review_id] = status
        return review_id

    def approve(self, review_id: str) -> str:
        """Approve a review so it shows on public listings."""
        return self.set_status(review_id, 'approved')

    def reject(self, review_id: str) -> str:
        """Reject a review; only the loss of approval survives a restart."""
        return self.set_status(review_id, 'rejected')

    def clear(self) -> None:
        """Drop every approval and session status."""
        self.overlay.clear()
        self._session_statuses.clear()

    def _push_status(self, review_id: str, status: str) -> None:
        if self.api_client is None:
            return
        self.api_client.update_review_status(review_id[len(REVIEW_ID_PREFIX):], status)


def canonical_review_id(review_id: str) -> str:
    """Accept either a provider id ('7453') or a review id ('hostaway-7453').

    Raises:
        ValidationException: If the id is empty
    """
    review_id = str(review_id).strip()
    if not review_id:
        raise ValidationException("Review id must not be empty")
    if review_id.startswith(REVIEW_ID_PREFIX):
        return review_id
    return f"{REVIEW_ID_PREFIX}{review_id}"


def create_dashboard(config: Config, use_api: bool = False) -> ReviewDashboard:
    """Create a dashboard from configuration.

    Args:
        config: Configuration instance
        use_api: Read reviews through the review API instead of the bundled sample data

    Returns:
        Configured ReviewDashboard
    """
    settings = config.settings
    overlay = create_overlay(settings.storage.backend, settings.storage.overlay_file)

    if use_api:
        client = ReviewApiClient.from_settings(settings.client, settings.auth.api_keys)
        return ReviewDashboard(ApiReviewProvider(client), overlay, api_client=client)

    return ReviewDashboard(StaticReviewProvider(), overlay)
