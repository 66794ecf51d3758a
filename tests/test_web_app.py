"""
Tests for the review HTTP API
"""
import pytest

from review_dashboard.web import create_app

from factories import API_KEY


class TestAuthentication:

    def test_health_is_open(self, client):
        response = client.get('/health')
        data = response.get_json()

        assert response.status_code == 200
        assert data['status'] == 'healthy'
        assert data['service'] == 'Mockaway API'
        assert data['version'] == '1.0.0'
        assert 'timestamp' in data

    def test_missing_key(self, client):
        response = client.get('/reviews')

        assert response.status_code == 401
        assert response.get_json()['error'] == 'API key required'

    def test_invalid_key(self, client):
        response = client.get('/reviews', headers={'X-API-Key': 'nope'})

        assert response.status_code == 401
        assert response.get_json()['error'] == 'Invalid API key'

    def test_bearer_token(self, client):
        response = client.get('/properties', headers={'Authorization': f'Bearer {API_KEY}'})
        assert response.status_code == 200

    def test_every_demo_key_is_accepted(self, client):
        for key in ('demo-api-key-12345', 'test-api-key-67890',
                    'dev-api-key-abcdef', 'prod-api-key-xyz789'):
            assert client.get('/properties', headers={'X-API-Key': key}).status_code == 200


class TestReviews:

    def test_list(self, client, auth_headers):
        data = client.get('/reviews', headers=auth_headers).get_json()

        assert data['status'] == 'success'
        assert len(data['result']) == 14
        assert data['result'][0]['id'] == 7453
        assert data['result'][0]['status'] == 'pending'

    def test_property_filter_matches_listing_substring(self, client, auth_headers):
        data = client.get('/reviews?property=brooklyn', headers=auth_headers).get_json()

        assert len(data['result']) == 4
        assert all('Brooklyn' in r['listingName'] for r in data['result'])

    def test_single_review(self, client, auth_headers):
        response = client.get('/reviews/7453', headers=auth_headers)

        assert response.status_code == 200
        assert response.get_json()['listingName'] == '2B N1 A - 29 Shoreditch Heights'

    @pytest.mark.parametrize("review_id", ['9999', 'abc'])
    def test_unknown_review(self, client, auth_headers, review_id):
        response = client.get(f'/reviews/{review_id}', headers=auth_headers)

        assert response.status_code == 404
        assert response.get_json() == {'error': 'Review not found'}


class TestStatusUpdate:

    def test_approve(self, client, auth_headers):
        response = client.patch('/reviews/7454/status', json={'status': 'approved'},
                                headers=auth_headers)

        assert response.status_code == 200
        assert response.get_json() == {
            'success': True,
            'message': 'Review status updated to approved',
            'reviewId': '7454',
            'newStatus': 'approved',
        }

        listed = client.get('/reviews', headers=auth_headers).get_json()['result']
        assert {r['id']: r['status'] for r in listed}[7454] == 'approved'

        metrics = client.get('/properties/prop-1/metrics', headers=auth_headers).get_json()
        assert metrics['approvedReviews'] == 1

    def test_reject_after_approve(self, client, auth_headers):
        client.patch('/reviews/7454/status', json={'status': 'approved'}, headers=auth_headers)
        client.patch('/reviews/7454/status', json={'status': 'rejected'}, headers=auth_headers)

        listed = client.get('/reviews', headers=auth_headers).get_json()['result']
        assert {r['id']: r['status'] for r in listed}[7454] == 'rejected'

        metrics = client.get('/properties/prop-1/metrics', headers=auth_headers).get_json()
        assert metrics['approvedReviews'] == 0

    @pytest.mark.parametrize("body", [{'status': 'published'}, {}, {'status': 5}])
    def test_invalid_status(self, client, auth_headers, body):
        response = client.patch('/reviews/7454/status', json=body, headers=auth_headers)

        assert response.status_code == 400
        assert response.get_json() == {
            'error': 'Invalid status',
            'message': 'Status must be approved, rejected, or pending'
        }

    def test_requires_key(self, client):
        response = client.patch('/reviews/7454/status', json={'status': 'approved'})
        assert response.status_code == 401


class TestProperties:

    def test_catalog(self, client, auth_headers):
        data = client.get('/properties', headers=auth_headers).get_json()

        assert [p['id'] for p in data] == ['prop-1', 'prop-2', 'prop-3']
        assert data[0] == {
            'id': 'prop-1',
            'name': 'Downtown Luxury Loft',
            'location': 'Manhattan, NYC',
            'type': 'loft',
            'averageRating': 4.8,
            'totalReviews': 127,
            'approvedReviews': 98,
        }

    def test_all_metrics(self, client, auth_headers):
        data = client.get('/properties/metrics', headers=auth_headers).get_json()

        assert [m['propertyId'] for m in data] == ['prop-1', 'prop-2', 'prop-3']
        assert [m['totalReviews'] for m in data] == [6, 4, 4]

    def test_metrics_shape(self, client, auth_headers):
        data = client.get('/properties/prop-2/metrics', headers=auth_headers).get_json()

        assert set(data) == {'propertyId', 'averageRating', 'totalReviews', 'approvedReviews',
                             'channelBreakdown', 'categoryRatings', 'recentTrend', 'responseRate'}
        assert data['channelBreakdown'] == {'hostaway': 4}
        assert data['recentTrend'] == 'stable'

    def test_unknown_property_metrics_are_zeroed(self, client, auth_headers):
        data = client.get('/properties/prop-404/metrics', headers=auth_headers).get_json()

        assert data['totalReviews'] == 0
        assert data['averageRating'] == 0.0
        assert data['responseRate'] == 0


class TestDashboardEndpoints:

    def test_filtered_reviews(self, client, auth_headers):
        data = client.get('/dashboard/reviews?property=prop-3&sort=oldest',
                          headers=auth_headers).get_json()

        assert data['total'] == 4
        assert [r['propertyId'] for r in data['reviews']] == ['prop-3'] * 4
        dates = [r['date'] for r in data['reviews']]
        assert dates == sorted(dates)

    def test_bad_filter(self, client, auth_headers):
        response = client.get('/dashboard/reviews?rating=high', headers=auth_headers)

        assert response.status_code == 400
        assert response.get_json()['error'] == 'Invalid request'

    def test_overview(self, client, auth_headers):
        data = client.get('/dashboard/overview', headers=auth_headers).get_json()

        assert data['totalReviews'] == 14
        assert data['responseRate'] == 0

    def test_public_reviews(self, client, auth_headers):
        client.patch('/reviews/7453/status', json={'status': 'approved'}, headers=auth_headers)

        data = client.get('/public/reviews', headers=auth_headers).get_json()

        assert data['totalReviews'] == 1
        assert data['reviews'][0]['id'] == 'hostaway-7453'
        assert data['averageRating'] == 5.0
        assert data['distribution'] == {'1': 0, '2': 0, '3': 0, '4': 0, '5': 1}

    def test_blank_sort_uses_default_order(self, client, auth_headers):
        public = client.get('/public/reviews?sort=', headers=auth_headers)
        dashboard = client.get('/dashboard/reviews?sort=', headers=auth_headers)

        assert public.status_code == 200
        assert dashboard.status_code == 200

    def test_unknown_sort_is_rejected(self, client, auth_headers):
        response = client.get('/public/reviews?sort=random', headers=auth_headers)
        assert response.status_code == 400


class TestErrors:

    def test_unknown_route(self, client, auth_headers):
        response = client.get('/nope', headers=auth_headers)

        assert response.status_code == 404
        assert response.get_json() == {'error': 'Endpoint not found'}

    def test_unknown_route_without_key_is_unauthorized(self, client):
        response = client.get('/nope')

        assert response.status_code == 401
        assert response.get_json()['error'] == 'API key required'

    def test_wrong_method(self, client, auth_headers):
        response = client.delete('/reviews/7453', headers=auth_headers)
        assert response.status_code == 405


def test_route_prefix(config, dashboard, auth_headers):
    config.settings.server.api_prefix = '/api/mockaway'
    client = create_app(config, dashboard=dashboard).test_client()

    assert client.get('/api/mockaway/health').status_code == 200
    assert client.get('/api/mockaway/reviews', headers=auth_headers).status_code == 200
    assert client.get('/reviews', headers=auth_headers).status_code == 404


def test_key_check_covers_unknown_paths_under_prefix(config, dashboard):
    config.settings.server.api_prefix = '/api/mockaway'
    client = create_app(config, dashboard=dashboard).test_client()

    assert client.get('/api/mockaway/nope').status_code == 401
    assert client.get('/elsewhere').status_code == 404
