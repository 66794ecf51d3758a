"""HTTP client for the review API."""

from typing import Any, Dict, List, Optional

import requests

from ..config.settings import ClientSettings, DEFAULT_API_KEYS
from ..models import RawReview, Property, PropertyMetrics
from ..utils.exceptions import (AuthenticationException, NotFoundException,
                                ValidationException, TransportException)
from ..utils.helpers import mask_api_key
from ..utils.logger import get_component_logger


class ReviewApiClient:
    """Thin authenticated wrapper around the review API endpoints.

    Every call sends the API key in the configured header. HTTP failures
    are mapped onto the dashboard exception hierarchy; nothing is retried.
    """

    def __init__(self, base_url: str = 'http://localhost:3001',
                 api_key: str = 'demo-api-key-12345',
                 api_key_header: str = 'X-API-Key',
                 timeout: float = 10.0,
                 valid_api_keys: Optional[List[str]] = None,
                 session: Optional[requests.Session] = None):
        """Initialize client.

        Args:
            base_url: API root, including any route prefix
            api_key: Key sent with every request
            api_key_header: Header carrying the key
            timeout: Per-request timeout in seconds
            valid_api_keys: Keys accepted locally before a request is sent
            session: Optional preconfigured requests session
        """
        self.base_url = base_url.rstrip('/')
        self.api_key = api_key
        self.api_key_header = api_key_header
        self.timeout = timeout
        self.valid_api_keys = list(valid_api_keys or DEFAULT_API_KEYS)
        self.session = session or requests.Session()
        self.logger = get_component_logger('providers.api_client')

    @classmethod
    def from_settings(cls, settings: ClientSettings,
                      valid_api_keys: Optional[List[str]] = None) -> 'ReviewApiClient':
        """Create a client from the `client` configuration section."""
        return cls(
            base_url=settings.base_url,
            api_key=settings.api_key,
            api_key_header=settings.api_key_header,
            timeout=settings.timeout,
            valid_api_keys=valid_api_keys
        )

    @property
    def masked_api_key(self) -> str:
        return mask_api_key(self.api_key)

    def set_api_key(self, api_key: str) -> None:
        self.api_key = api_key

    def _request(self, method: str, endpoint: str, **kwargs) -> Any:
        """Send a request and decode the JSON body.

        Raises:
            AuthenticationException: Key rejected locally, 401 or 403
            NotFoundException: 404
            ValidationException: 400
            TransportException: Connection failure, timeout or other non-2xx status
        """
        if self.api_key not in self.valid_api_keys:
            raise AuthenticationException('Invalid API key')

        url = f"{self.base_url}{endpoint}"
        headers = {
            'Content-Type': 'application/json',
            self.api_key_header: self.api_key,
        }

        try:
            response = self.session.request(method, url, headers=headers,
                                            timeout=self.timeout, **kwargs)
        except requests.exceptions.RequestException as e:
            self.logger.error(f"{method} {url} failed: {e}")
            raise TransportException(f"Could not reach review API at {url}: {e}") from e

        status = response.status_code
        if status == 401:
            raise AuthenticationException('Unauthorized: Invalid API key')
        if status == 403:
            raise AuthenticationException('Forbidden: API key does not have permission for this resource')
        if status == 404:
            raise NotFoundException(self._error_message(response, 'Resource not found'))
        if status == 400:
            raise ValidationException(self._error_message(response, 'Bad request'))
        if status == 429:
            raise TransportException('Rate limit exceeded: Too many requests')
        if not response.ok:
            raise TransportException(f"HTTP {status}: {response.reason}")

        try:
            return response.json()
        except ValueError as e:
            raise TransportException(f"Invalid JSON from {url}: {e}") from e

    @staticmethod
    def _error_message(response: requests.Response, default: str) -> str:
        try:
            body = response.json()
        except ValueError:
            return default
        if isinstance(body, dict):
            return body.get('message') or body.get('error') or default
        return default

    def health_check(self) -> Dict[str, Any]:
        return self._request('GET', '/health')

    def test_api_key(self) -> Dict[str, Any]:
        """Check the configured key against the API without raising.

        Returns:
            Dict with 'valid' flag and a human-readable 'message'
        """
        try:
            self.health_check()
            return {'valid': True, 'message': 'API key is valid'}
        except (AuthenticationException, TransportException, NotFoundException,
                ValidationException) as e:
            return {'valid': False, 'message': str(e)}

    def get_reviews(self) -> Dict[str, Any]:
        """Fetch the `{status, result}` review envelope."""
        return self._request('GET', '/reviews')

    def get_reviews_by_property(self, property_name: str) -> Dict[str, Any]:
        """Fetch reviews whose listing name contains the given text."""
        return self._request('GET', '/reviews', params={'property': property_name})

    def get_review(self, review_id: int) -> RawReview:
        return RawReview.from_dict(self._request('GET', f'/reviews/{review_id}'))

    def get_properties(self) -> List[Property]:
        return [Property.from_dict(p) for p in self._request('GET', '/properties')]

    def get_property_metrics(self, property_id: str) -> PropertyMetrics:
        return PropertyMetrics.from_dict(self._request('GET', f'/properties/{property_id}/metrics'))

    def get_all_property_metrics(self) -> List[PropertyMetrics]:
        return [PropertyMetrics.from_dict(m) for m in self._request('GET', '/properties/metrics')]

    def update_review_status(self, review_id: str, status: str) -> Dict[str, Any]:
        """Set a review's server-side status ('approved', 'rejected' or 'pending')."""
        return self._request('PATCH', f'/reviews/{review_id}/status', json={'status': status})
