"""Filtering and sorting of normalized reviews."""

from dataclasses import dataclass
from datetime import date
from typing import Any, Callable, Dict, List, Mapping, Optional, Sequence

from ..models import Review, REVIEW_STATUSES, REVIEW_CATEGORIES, REVIEW_CHANNELS
from ..persistence.status_overlay import StatusOverlay, effective_status
from ..utils.exceptions import ValidationException


SORT_KEYS = ('newest', 'oldest', 'highest', 'lowest', 'helpful')


@dataclass
class ReviewCriteria:
    """Optional filters, combined with logical AND."""

    property: Optional[str] = None
    channel: Optional[str] = None
    rating: Optional[int] = None
    status: Optional[str] = None
    category: Optional[str] = None
    date_from: Optional[date] = None
    date_to: Optional[date] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> 'ReviewCriteria':
        """Build criteria from query-string style values.

        Blank values are treated as absent.

        Raises:
            ValidationException: If a value is malformed or outside its vocabulary
        """
        def text(key: str) -> Optional[str]:
            value = data.get(key)
            if value is None or str(value).strip() == '':
                return None
            return str(value).strip()

        rating = text('rating')
        if rating is not None:
            try:
                rating = int(rating)
            except ValueError as e:
                raise ValidationException(f"rating must be an integer, got '{rating}'") from e

        status = text('status')
        if status is not None and status not in REVIEW_STATUSES:
            raise ValidationException(f"status must be one of {', '.join(REVIEW_STATUSES)}")

        channel = text('channel')
        if channel is not None and channel not in REVIEW_CHANNELS:
            raise ValidationException(f"channel must be one of {', '.join(REVIEW_CHANNELS)}")

        category = text('category')
        if category is not None and category not in REVIEW_CATEGORIES:
            raise ValidationException(f"category must be one of {', '.join(REVIEW_CATEGORIES)}")

        return cls(
            property=text('property'),
            channel=channel,
            rating=rating,
            status=status,
            category=category,
            date_from=_parse_date(text('dateFrom'), 'dateFrom'),
            date_to=_parse_date(text('dateTo'), 'dateTo')
        )


def _parse_date(value: Optional[str], name: str) -> Optional[date]:
    if value is None:
        return None
    try:
        return date.fromisoformat(value)
    except ValueError as e:
        raise ValidationException(f"{name} must be an ISO date (YYYY-MM-DD), got '{value}'") from e


def matches(review: Review, criteria: ReviewCriteria, overlay: Optional[StatusOverlay] = None) -> bool:
    """Check one review against every criterion that is set."""
    if criteria.property is not None and review.property_id != criteria.property:
        return False
    if criteria.channel is not None and review.channel != criteria.channel:
        return False
    if criteria.rating is not None and review.rating != criteria.rating:
        return False
    if criteria.status is not None:
        status = effective_status(review, overlay) if overlay is not None else review.status
        if status != criteria.status:
            return False
    if criteria.category is not None and review.category != criteria.category:
        return False
    if criteria.date_from is not None and review.date < criteria.date_from:
        return False
    if criteria.date_to is not None and review.date > criteria.date_to:
        return False
    return True


def filter_reviews(reviews: Sequence[Review], criteria: ReviewCriteria,
                   overlay: Optional[StatusOverlay] = None) -> List[Review]:
    """Return the reviews matching criteria, in their original order.

    Args:
        reviews: Normalized reviews
        criteria: Filters to apply
        overlay: When given, the status filter compares effective status

    Returns:
        Matching reviews
    """
    return [r for r in reviews if matches(r, criteria, overlay)]


_SORTERS: Dict[str, Callable[[List[Review]], List[Review]]] = {
    'newest': lambda items: sorted(items, key=lambda r: r.date, reverse=True),
    'oldest': lambda items: sorted(items, key=lambda r: r.date),
    'highest': lambda items: sorted(items, key=lambda r: r.rating, reverse=True),
    'lowest': lambda items: sorted(items, key=lambda r: r.rating),
    'helpful': lambda items: sorted(items, key=lambda r: r.helpful, reverse=True),
}


def sort_reviews(reviews: Sequence[Review], sort_by: str = 'newest') -> List[Review]:
    """Sort reviews for listing. Ties keep their original relative order.

    Raises:
        ValidationException: If sort_by is not a known sort key
    """
    sorter = _SORTERS.get(sort_by)
    if sorter is None:
        raise ValidationException(f"sort must be one of {', '.join(SORT_KEYS)}")
    return sorter(list(reviews))


def public_reviews(reviews: Sequence[Review], overlay: StatusOverlay,
                   property_id: Optional[str] = None, sort_by: str = 'newest') -> List[Review]:
    """Approved reviews for the public listing page.

    Args:
        reviews: Normalized reviews
        overlay: Approval overlay; approval there wins over each review's status
        property_id: Restrict to one property when given
        sort_by: One of SORT_KEYS

    Returns:
        Approved reviews, sorted
    """
    criteria = ReviewCriteria(property=property_id, status='approved')
    return sort_reviews(filter_reviews(reviews, criteria, overlay), sort_by)
