from .raw_review import RawReview, RawReviewCategory
from .review import Review, REVIEW_STATUSES, REVIEW_CATEGORIES, REVIEW_CHANNELS
from .property import Property, PropertyMetrics, OverviewStats

__all__ = ['RawReview', 'RawReviewCategory', 'Review', 'REVIEW_STATUSES', 'REVIEW_CATEGORIES',
           'REVIEW_CHANNELS', 'Property', 'PropertyMetrics', 'OverviewStats']
