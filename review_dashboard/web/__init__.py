from .app import create_app
from .review_service import ReviewService

__all__ = ['create_app', 'ReviewService']
