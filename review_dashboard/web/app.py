"""Flask API for the review dashboard."""

from datetime import datetime, timezone
from typing import Optional
import logging

from flask import Flask, Blueprint, current_app, request, jsonify
from flask_cors import CORS

from ..config import Config
from ..dashboard import ReviewDashboard, create_dashboard
from ..analysis import ReviewCriteria
from ..utils.exceptions import (DashboardException, NotFoundException, ValidationException,
                                TransportException)
from .review_service import ReviewService


logger = logging.getLogger(__name__)

api = Blueprint('api', __name__)


def _service() -> ReviewService:
    return current_app.extensions['review_service']


def _extract_api_key() -> Optional[str]:
    """Read the key from X-API-Key, falling back to an Authorization bearer token."""
    api_key = request.headers.get('X-API-Key')
    if api_key:
        return api_key

    authorization = request.headers.get('Authorization', '')
    if authorization:
        return authorization.replace('Bearer ', '', 1).strip() or None
    return None


def validate_api_key():
    """Reject requests under the API prefix without a valid API key.

    Runs for every path under the prefix, matched or not, so unknown
    endpoints answer 401 before 404. The health check is open.
    """
    if request.endpoint == 'api.health_check' or request.method == 'OPTIONS':
        return None

    prefix = current_app.config['API_PREFIX']
    if prefix and request.path != prefix and not request.path.startswith(prefix + '/'):
        return None

    api_key = _extract_api_key()

    if not api_key:
        return jsonify({
            'error': 'API key required',
            'message': 'Please provide an API key in the X-API-Key header or Authorization header'
        }), 401

    if api_key not in current_app.config['API_KEYS']:
        logger.warning(f"Rejected request to {request.path} with an invalid API key")
        return jsonify({
            'error': 'Invalid API key',
            'message': 'The provided API key is not valid'
        }), 401

    return None


# API routes
@api.route('/health', methods=['GET'])
def health_check():
    """Health check endpoint."""
    return jsonify({
        'status': 'healthy',
        'timestamp': datetime.now(timezone.utc).isoformat(),
        'service': current_app.config['SERVICE_NAME'],
        'version': current_app.config['SERVICE_VERSION']
    })


@api.route('/reviews', methods=['GET'])
def list_reviews():
    """List provider-shaped reviews, optionally filtered by listing name."""
    return jsonify(_service().list_raw_reviews(request.args.get('property')))


@api.route('/reviews/<review_id>', methods=['GET'])
def get_review(review_id):
    """Get a single provider-shaped review."""
    return jsonify(_service().get_raw_review(review_id))


@api.route('/reviews/<review_id>/status', methods=['PATCH'])
def update_review_status(review_id):
    """Approve, reject or reset a review."""
    try:
        result = _service().update_status(review_id, request.get_json(silent=True))
    except ValidationException as e:
        return jsonify({'error': 'Invalid status', 'message': str(e)}), 400

    return jsonify(result)


@api.route('/properties', methods=['GET'])
def list_properties():
    """List the property catalog."""
    return jsonify(_service().list_properties())


@api.route('/properties/metrics', methods=['GET'])
def all_property_metrics():
    """Metrics for every catalog property."""
    return jsonify(_service().all_property_metrics())


@api.route('/properties/<property_id>/metrics', methods=['GET'])
def property_metrics(property_id):
    """Metrics for one property."""
    return jsonify(_service().property_metrics(property_id))


@api.route('/dashboard/reviews', methods=['GET'])
def dashboard_reviews():
    """Normalized reviews merged with approvals, filtered and optionally sorted."""
    criteria = ReviewCriteria.from_dict(request.args)
    reviews = _service().dashboard.filter(criteria, sort_by=request.args.get('sort'))

    return jsonify({
        'reviews': [r.to_dict() for r in reviews],
        'total': len(reviews)
    })


@api.route('/dashboard/overview', methods=['GET'])
def dashboard_overview():
    """Headline numbers across all reviews."""
    return jsonify(_service().dashboard.overview().to_dict())


@api.route('/public/reviews', methods=['GET'])
def public_reviews():
    """Approved reviews for the public listing page."""
    summary = _service().dashboard.public_summary(
        property_id=request.args.get('property') or None,
        sort_by=request.args.get('sort') or 'newest'
    )

    return jsonify({
        'reviews': [r.to_dict() for r in summary['reviews']],
        'averageRating': summary['averageRating'],
        'totalReviews': summary['totalReviews'],
        'distribution': {str(stars): count for stars, count in summary['distribution'].items()}
    })


def register_error_handlers(app: Flask) -> None:
    """Map dashboard exceptions and HTTP errors onto JSON responses."""

    @app.errorhandler(NotFoundException)
    def handle_not_found(error):
        return jsonify({'error': str(error)}), 404

    @app.errorhandler(ValidationException)
    def handle_validation(error):
        return jsonify({'error': 'Invalid request', 'message': str(error)}), 400

    @app.errorhandler(TransportException)
    def handle_transport(error):
        logger.error(f"Upstream review API failure: {error}")
        return jsonify({'error': 'Review source unavailable', 'message': str(error)}), 502

    @app.errorhandler(DashboardException)
    def handle_dashboard_error(error):
        logger.error(f"Review API error: {error}")
        return jsonify({'error': 'Internal server error'}), 500

    @app.errorhandler(404)
    def not_found(error):
        return jsonify({'error': 'Endpoint not found'}), 404

    @app.errorhandler(405)
    def method_not_allowed(error):
        return jsonify({'error': 'Method not allowed'}), 405

    @app.errorhandler(500)
    def internal_error(error):
        return jsonify({'error': 'Internal server error'}), 500


def create_app(config: Optional[Config] = None,
               dashboard: Optional[ReviewDashboard] = None) -> Flask:
    """Create the review API application.

    Args:
        config: Configuration instance, defaults to built-in settings
        dashboard: Dashboard to serve, built from config when None

    Returns:
        Configured Flask app
    """
    config = config or Config()
    settings = config.settings

    app = Flask(__name__)
    app.config['API_KEYS'] = list(settings.auth.api_keys)
    app.config['SERVICE_NAME'] = settings.server.service_name
    app.config['SERVICE_VERSION'] = settings.server.version
    app.config['API_PREFIX'] = (settings.server.api_prefix or '').rstrip('/')
    CORS(app)  # Enable CORS for all domains

    dashboard = dashboard or create_dashboard(config)
    app.extensions['review_service'] = ReviewService(dashboard)

    app.before_request(validate_api_key)
    app.register_blueprint(api, url_prefix=settings.server.api_prefix or None)
    register_error_handlers(app)

    logger.info(f"{settings.server.service_name} app created "
                f"(prefix: '{settings.server.api_prefix or '/'}', "
                f"{len(settings.auth.api_keys)} API keys)")
    return app
