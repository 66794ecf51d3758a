from .normalizer import (normalize, normalize_all, normalize_response, generate_property_id,
                         primary_category, overall_rating)
from .metrics import (compute_metrics, compute_all_metrics, compute_overview, rating_distribution,
                      average_rating)
from .query import ReviewCriteria, filter_reviews, sort_reviews, public_reviews, SORT_KEYS

__all__ = ['normalize', 'normalize_all', 'normalize_response', 'generate_property_id',
           'primary_category', 'overall_rating', 'compute_metrics', 'compute_all_metrics',
           'compute_overview', 'rating_distribution', 'average_rating', 'ReviewCriteria',
           'filter_reviews', 'sort_reviews', 'public_reviews', 'SORT_KEYS']
