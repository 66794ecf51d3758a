"""Base review provider with common functionality."""

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

from ..models import RawReview, Property
from ..utils.logger import get_component_logger


class ReviewProvider(ABC):
    """Abstract base class for all review sources."""

    def __init__(self, name: str):
        """Initialize provider.

        Args:
            name: Short provider name used in log output
        """
        self.name = name
        self.logger = get_component_logger(f'providers.{name}')

    @abstractmethod
    def fetch_reviews(self) -> List[RawReview]:
        """Return every raw review the provider knows about."""

    @abstractmethod
    def fetch_review(self, review_id: int) -> Optional[RawReview]:
        """Return one raw review, or None if the id is unknown."""

    @abstractmethod
    def fetch_properties(self) -> List[Property]:
        """Return the property catalog."""

    def parse_envelope(self, envelope: Dict[str, Any]) -> List[RawReview]:
        """Unpack a `{status, result}` review response.

        Args:
            envelope: Decoded JSON response body

        Returns:
            Raw reviews, or an empty list when the response is not a success
        """
        if not isinstance(envelope, dict) or envelope.get('status') != 'success':
            self.logger.warning(f"Provider '{self.name}' returned a non-success response")
            return []

        result = envelope.get('result')
        if not isinstance(result, list):
            self.logger.warning(f"Provider '{self.name}' response has no result list")
            return []

        return [RawReview.from_dict(item) for item in result if isinstance(item, dict)]
