"""Normalization of provider reviews into canonical reviews.

Normalization never raises: every missing or malformed optional field
falls back to a fixed default so a partial provider record still yields
a usable Review.
"""

import random
from datetime import date
from typing import Any, Dict, List, Optional, Sequence

from ..models import RawReview, RawReviewCategory, Review
from ..utils.helpers import round_half_up, clamp, slugify, parse_submitted_date
from ..utils.logger import get_component_logger


logger = get_component_logger('analysis.normalizer')

REVIEW_ID_PREFIX = 'hostaway-'
SOURCE_CHANNEL = 'hostaway'

# Checked in order; first substring hit wins
PROPERTY_LOOKUP = [
    ('downtown luxury loft', 'prop-1'),
    ('cozy brooklyn apartment', 'prop-2'),
    ('modern studio space', 'prop-3'),
    ('shoreditch heights', 'prop-1'),
]

CATEGORY_MAP = {
    'cleanliness': 'cleanliness',
    'communication': 'communication',
    'location': 'location',
    'value': 'value',
    'respect_house_rules': 'amenities',
    'amenities': 'amenities',
}


def overall_rating(categories: Sequence[RawReviewCategory]) -> int:
    """Derive a star rating from category scores.

    Mean of the 0-10 category ratings, halved and rounded. Not clamped,
    so an empty list gives 0.
    """
    if not categories:
        return 0
    total = sum(c.rating for c in categories)
    return int(round_half_up((total / len(categories)) / 2))


def star_rating(raw: RawReview) -> int:
    """Convert a raw review's rating to the 1-5 scale."""
    if raw.rating is not None:
        return clamp(int(round_half_up(raw.rating / 2)), 1, 5)
    return overall_rating(raw.review_category)


def primary_category(categories: Sequence[RawReviewCategory]) -> str:
    """Pick the highest-rated category, first occurrence winning ties."""
    if not categories:
        return 'overall'

    highest = categories[0]
    for current in categories[1:]:
        if current.rating > highest.rating:
            highest = current

    return CATEGORY_MAP.get(highest.category, 'overall')


def generate_property_id(listing_name: Optional[str]) -> str:
    """Map a listing name onto a property id.

    Args:
        listing_name: Provider listing name

    Returns:
        Catalog id for known listings, otherwise a 'prop-<slug>' id
    """
    if not listing_name:
        return 'prop-unknown'

    lowered = listing_name.lower()
    for fragment, property_id in PROPERTY_LOOKUP:
        if fragment in lowered:
            return property_id

    return f"prop-{slugify(listing_name)}"


def normalize(raw: RawReview, rng: Optional[random.Random] = None,
              today: Optional[date] = None) -> Review:
    """Transform a provider review into the canonical Review shape.

    The provider's own status is ignored; every review starts pending and
    moderation is owned by the status overlay.

    Args:
        raw: Provider review
        rng: Random source for the presentation-only helpful/stay fields
        today: Fallback date when the review has no usable timestamp

    Returns:
        Normalized Review
    """
    rng = rng or random
    review_date = parse_submitted_date(raw.submitted_at) or today or date.today()

    return Review(
        id=f"{REVIEW_ID_PREFIX}{raw.id}",
        property_id=generate_property_id(raw.listing_name),
        property_name=raw.listing_name or 'Unknown Property',
        guest_name=raw.guest_name or 'Anonymous',
        rating=star_rating(raw),
        title='Guest Review' if raw.type == 'guest-to-host' else 'Host Review',
        content=raw.public_review or 'No review content available',
        date=review_date,
        channel=SOURCE_CHANNEL,
        category=primary_category(raw.review_category),
        status='pending',
        helpful=rng.randint(1, 10),
        verified_stay=True,
        stay_duration=rng.randint(1, 7),
        category_ratings=list(raw.review_category)
    )


def normalize_all(raws: Sequence[RawReview], rng: Optional[random.Random] = None) -> List[Review]:
    """Normalize a batch of provider reviews, preserving order."""
    reviews = [normalize(raw, rng=rng) for raw in raws]
    logger.debug(f"Normalized {len(reviews)} reviews")
    return reviews


def normalize_response(envelope: Dict[str, Any], rng: Optional[random.Random] = None) -> List[Review]:
    """Normalize a `{status, result}` provider response.

    Returns:
        Normalized reviews, or an empty list for a non-success response
    """
    if not isinstance(envelope, dict) or envelope.get('status') != 'success':
        return []
    result = envelope.get('result')
    if not isinstance(result, list):
        return []

    raws = [RawReview.from_dict(item) for item in result if isinstance(item, dict)]
    return normalize_all(raws, rng=rng)
