"""Review service backing the HTTP API."""

from typing import Any, Dict, List, Optional

from ..dashboard import ReviewDashboard, canonical_review_id
from ..models import RawReview
from ..utils.exceptions import NotFoundException, ValidationException
from ..utils.logger import get_component_logger


class ReviewService:
    """Shapes dashboard data into the API's wire format."""

    def __init__(self, dashboard: ReviewDashboard):
        self.dashboard = dashboard
        self.logger = get_component_logger('web.review_service')

    def _status_by_id(self) -> Dict[str, str]:
        return {review.id: review.status for review in self.dashboard.load_reviews()}

    def list_raw_reviews(self, property_filter: Optional[str] = None) -> Dict[str, Any]:
        """Provider-shaped reviews, each stamped with its effective status.

        Args:
            property_filter: Case-insensitive substring of the listing name

        Returns:
            `{status: 'success', result: [...]}` envelope
        """
        statuses = self._status_by_id()
        result = []

        for raw in self.dashboard.provider.fetch_reviews():
            if property_filter and property_filter.lower() not in (raw.listing_name or '').lower():
                continue
            data = raw.to_dict()
            data['status'] = statuses.get(canonical_review_id(str(raw.id)), 'pending')
            result.append(data)

        return {'status': 'success', 'result': result}

    def get_raw_review(self, review_id: str) -> Dict[str, Any]:
        """Single provider-shaped review.

        Raises:
            NotFoundException: If the id is not numeric or unknown
        """
        try:
            numeric_id = int(review_id)
        except ValueError as e:
            raise NotFoundException('Review not found') from e

        raw: Optional[RawReview] = self.dashboard.provider.fetch_review(numeric_id)
        if raw is None:
            raise NotFoundException('Review not found')
        return raw.to_dict()

    def list_properties(self) -> List[Dict[str, Any]]:
        return [p.to_dict() for p in self.dashboard.properties()]

    def property_metrics(self, property_id: str) -> Dict[str, Any]:
        return self.dashboard.property_metrics(property_id).to_dict()

    def all_property_metrics(self) -> List[Dict[str, Any]]:
        return [m.to_dict() for m in self.dashboard.all_property_metrics()]

    def update_status(self, review_id: str, body: Any) -> Dict[str, Any]:
        """Apply a PATCH status update.

        Raises:
            ValidationException: If the body has no valid status
        """
        status = body.get('status') if isinstance(body, dict) else None
        if not isinstance(status, str):
            raise ValidationException('Status must be approved, rejected, or pending')

        self.dashboard.set_status(review_id, status)
        self.logger.info(f"Review {review_id} status set to {status}")

        return {
            'success': True,
            'message': f"Review status updated to {status}",
            'reviewId': review_id,
            'newStatus': status
        }
