"""Review analysis utilities for calculating property metrics."""

from collections import Counter
from typing import Dict, List, Optional, Sequence

from ..models import Review, PropertyMetrics, OverviewStats
from ..persistence.status_overlay import StatusOverlay, effective_status
from ..utils.helpers import round_half_up


def average_rating(reviews: Sequence[Review]) -> float:
    """
    Mean star rating of the rated reviews, on the 1-5 scale.

    Args:
        reviews: Normalized reviews

    Returns:
        Average rounded to 1 decimal, or 0 when no review is rated
    """
    ratings = [r.rating for r in reviews if r.is_rated()]
    if not ratings:
        return 0.0
    return round_half_up(sum(ratings) / len(ratings), 1)


def calculate_channel_breakdown(reviews: Sequence[Review]) -> Dict[str, int]:
    """Count reviews per channel; only observed channels appear."""
    return dict(Counter(r.channel for r in reviews))


def calculate_category_ratings(reviews: Sequence[Review]) -> Dict[str, float]:
    """
    Average every category score across the reviews.

    Raw 0-10 category scores are halved onto the 5-point scale before
    averaging. Only categories seen in at least one review appear.

    Args:
        reviews: Normalized reviews carrying their raw category scores

    Returns:
        Mapping of category name to average, rounded to 1 decimal
    """
    sums: Dict[str, float] = {}
    counts: Dict[str, int] = {}

    for review in reviews:
        for entry in review.category_ratings:
            sums[entry.category] = sums.get(entry.category, 0.0) + entry.rating / 2
            counts[entry.category] = counts.get(entry.category, 0) + 1

    return {category: round_half_up(sums[category] / counts[category], 1) for category in sums}


def compute_metrics(property_id: str, reviews: Sequence[Review],
                    overlay: StatusOverlay) -> PropertyMetrics:
    """
    Compute metrics for one property.

    Args:
        property_id: Property to aggregate
        reviews: All normalized reviews; other properties' reviews are ignored
        overlay: Approval overlay used to resolve approved counts

    Returns:
        PropertyMetrics, zeroed when the property has no reviews
    """
    property_reviews = [r for r in reviews if r.property_id == property_id]

    if not property_reviews:
        return PropertyMetrics(property_id=property_id)

    approved = sum(1 for r in property_reviews if effective_status(r, overlay) == 'approved')

    return PropertyMetrics(
        property_id=property_id,
        average_rating=average_rating(property_reviews),
        total_reviews=len(property_reviews),
        approved_reviews=approved,
        channel_breakdown=calculate_channel_breakdown(property_reviews),
        category_ratings=calculate_category_ratings(property_reviews),
        # No response tracking or historical window in this data source
        recent_trend='stable',
        response_rate=100
    )


def compute_all_metrics(property_ids: Sequence[str], reviews: Sequence[Review],
                        overlay: StatusOverlay) -> List[PropertyMetrics]:
    """Compute metrics for each property id, in the given order."""
    return [compute_metrics(property_id, reviews, overlay) for property_id in property_ids]


def compute_overview(reviews: Sequence[Review], responded_ids: Optional[Sequence[str]] = None) -> OverviewStats:
    """
    Headline statistics across every review.

    Args:
        reviews: Normalized reviews
        responded_ids: Ids of reviews that carry an owner response

    Returns:
        OverviewStats with total count, average rating and response rate
    """
    if not reviews:
        return OverviewStats()

    responded = set(responded_ids or [])
    responses = sum(1 for r in reviews if r.id in responded)

    return OverviewStats(
        total_reviews=len(reviews),
        average_rating=average_rating(reviews),
        response_rate=int(round_half_up(responses / len(reviews) * 100))
    )


def rating_distribution(reviews: Sequence[Review]) -> Dict[int, int]:
    """Count reviews per star value; keys 1 through 5 are always present."""
    distribution = {stars: 0 for stars in range(1, 6)}
    for review in reviews:
        if review.rating in distribution:
            distribution[review.rating] += 1
    return distribution
