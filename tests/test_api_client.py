"""
Tests for the review API client
"""
from unittest.mock import Mock

import pytest
import requests

from review_dashboard.models import RawReview, PropertyMetrics
from review_dashboard.providers import ReviewApiClient, ApiReviewProvider
from review_dashboard.utils.exceptions import (AuthenticationException, NotFoundException,
                                               ValidationException, TransportException)

from factories import API_KEY


def make_response(status_code=200, body=None, reason='OK'):
    response = Mock(spec=requests.Response)
    response.status_code = status_code
    response.ok = status_code < 400
    response.reason = reason
    if isinstance(body, Exception):
        response.json.side_effect = body
    else:
        response.json.return_value = body
    return response


@pytest.fixture
def session():
    return Mock(spec=requests.Session)


@pytest.fixture
def api_client(session):
    return ReviewApiClient(base_url='http://reviews.test/api/', api_key=API_KEY, session=session)


class TestRequests:

    def test_key_header_and_url(self, api_client, session):
        session.request.return_value = make_response(body={'status': 'healthy'})

        assert api_client.health_check() == {'status': 'healthy'}

        args, kwargs = session.request.call_args
        assert args == ('GET', 'http://reviews.test/api/health')
        assert kwargs['headers']['X-API-Key'] == API_KEY
        assert kwargs['timeout'] == 10.0

    def test_property_filter_is_a_query_param(self, api_client, session):
        session.request.return_value = make_response(body={'status': 'success', 'result': []})

        api_client.get_reviews_by_property('Brooklyn')

        assert session.request.call_args[1]['params'] == {'property': 'Brooklyn'}

    def test_status_update_is_a_patch(self, api_client, session):
        session.request.return_value = make_response(body={'success': True})

        api_client.update_review_status('7453', 'approved')

        args, kwargs = session.request.call_args
        assert args == ('PATCH', 'http://reviews.test/api/reviews/7453/status')
        assert kwargs['json'] == {'status': 'approved'}

    def test_typed_responses(self, api_client, session):
        session.request.return_value = make_response(body={'id': 7453, 'rating': None})
        assert api_client.get_review(7453) == RawReview(id=7453)

        session.request.return_value = make_response(body={'propertyId': 'prop-1', 'totalReviews': 6})
        metrics = api_client.get_property_metrics('prop-1')
        assert metrics == PropertyMetrics(property_id='prop-1', total_reviews=6)


class TestErrorMapping:

    def test_unknown_key_is_rejected_locally(self, session):
        api_client = ReviewApiClient(api_key='bogus', session=session)

        with pytest.raises(AuthenticationException, match='Invalid API key'):
            api_client.get_reviews()
        session.request.assert_not_called()

    @pytest.mark.parametrize("status_code, exception", [
        (401, AuthenticationException),
        (403, AuthenticationException),
        (404, NotFoundException),
        (400, ValidationException),
        (429, TransportException),
        (500, TransportException),
    ])
    def test_status_codes(self, api_client, session, status_code, exception):
        session.request.return_value = make_response(status_code, body={'error': 'nope'},
                                                     reason='Error')
        with pytest.raises(exception):
            api_client.get_reviews()

    def test_not_found_uses_server_message(self, api_client, session):
        session.request.return_value = make_response(404, body={'error': 'Review not found'})

        with pytest.raises(NotFoundException, match='Review not found'):
            api_client.get_review(1)

    def test_connection_failure(self, api_client, session):
        session.request.side_effect = requests.exceptions.ConnectionError('refused')

        with pytest.raises(TransportException):
            api_client.get_reviews()

    def test_invalid_json(self, api_client, session):
        session.request.return_value = make_response(body=ValueError('not json'))

        with pytest.raises(TransportException):
            api_client.get_reviews()

    def test_api_key_check(self, api_client, session):
        session.request.return_value = make_response(401)
        assert api_client.test_api_key()['valid'] is False

        session.request.return_value = make_response(body={'status': 'healthy'})
        assert api_client.test_api_key() == {'valid': True, 'message': 'API key is valid'}


def test_masked_key(api_client):
    assert api_client.masked_api_key == 'demo...2345'


class TestApiProvider:

    def test_fetch_reviews_unwraps_envelope(self, api_client, session):
        session.request.return_value = make_response(body={
            'status': 'success',
            'result': [{'id': 1, 'rating': 8}, {'id': 2}],
        })

        reviews = ApiReviewProvider(api_client).fetch_reviews()

        assert [r.id for r in reviews] == [1, 2]
        assert reviews[0].rating == 8

    def test_failed_envelope_is_empty(self, api_client, session):
        session.request.return_value = make_response(body={'status': 'error'})
        assert ApiReviewProvider(api_client).fetch_reviews() == []

    def test_missing_review_is_none(self, api_client, session):
        session.request.return_value = make_response(404, body={'error': 'Review not found'})
        assert ApiReviewProvider(api_client).fetch_review(9999) is None
