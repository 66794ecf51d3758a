from .base_provider import ReviewProvider
from .static_provider import StaticReviewProvider
from .api_client import ReviewApiClient
from .api_provider import ApiReviewProvider
from .sample_data import PROPERTY_IDS

__all__ = ['ReviewProvider', 'StaticReviewProvider', 'ReviewApiClient', 'ApiReviewProvider',
           'PROPERTY_IDS']
