"""
Review Dashboard - Command line entry point

Serves the review API, lists and moderates reviews, prints property
metrics and exports CSV reports from the bundled sample data or a
running review API.
"""

import argparse
import json
import os
import sys
from typing import List, Optional

from .analysis import ReviewCriteria, SORT_KEYS
from .config import Config
from .dashboard import create_dashboard
from .models import REVIEW_STATUSES
from .persistence import CSVExporter
from .utils import setup_logging, DashboardException


COMMANDS = ['serve', 'reviews', 'metrics', 'overview', 'approve', 'reject', 'clear', 'export']


def parse_arguments(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments.

    Returns:
        Parsed arguments namespace
    """
    parser = argparse.ArgumentParser(
        description="Moderate property reviews and report property metrics",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python main.py serve --port 3001
  python main.py reviews --property prop-1 --status pending
  python main.py approve 7454
  python main.py metrics
  python main.py metrics --property prop-2 --remote
  python main.py export --status approved --output-dir exports

Configuration:
  Create a config.yaml file to customize server, auth, storage and client settings.
  Use --config to specify a different configuration file.
        """
    )

    parser.add_argument(
        "command",
        choices=COMMANDS,
        help="Action to run"
    )
    parser.add_argument(
        "review_id",
        nargs="?",
        help="Review id for approve/reject (e.g. 7454 or hostaway-7454)"
    )
    parser.add_argument(
        "--config",
        type=str,
        default="config.yaml",
        help="Configuration file path (default: config.yaml)"
    )
    parser.add_argument(
        "--overlay-file",
        type=str,
        help="Approval overlay file (overrides config)"
    )
    parser.add_argument(
        "--remote",
        action="store_true",
        help="Read reviews from the review API configured under 'client'"
    )
    parser.add_argument(
        "--property",
        type=str,
        help="Property id to filter reviews or metrics by"
    )
    parser.add_argument(
        "--status",
        type=str,
        choices=list(REVIEW_STATUSES),
        help="Only list reviews with this status"
    )
    parser.add_argument(
        "--sort",
        type=str,
        choices=list(SORT_KEYS),
        help="Sort order for listed reviews"
    )
    parser.add_argument(
        "--output-dir",
        type=str,
        default=".",
        help="Directory for reviews.csv and metrics.csv (export only)"
    )
    parser.add_argument(
        "--host",
        type=str,
        help="Server host (overrides config)"
    )
    parser.add_argument(
        "--port",
        type=int,
        help="Server port (overrides config)"
    )
    parser.add_argument(
        "--log-level",
        type=str,
        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'],
        help="Logging level (overrides config, default: INFO)"
    )

    return parser.parse_args(argv)


def validate_arguments(args: argparse.Namespace) -> None:
    """Validate command line arguments.

    Raises:
        ValueError: If arguments are invalid
    """
    if args.command in ('approve', 'reject') and not args.review_id:
        raise ValueError(f"'{args.command}' needs a review id")

    if args.port is not None and not (0 < args.port < 65536):
        raise ValueError("Port must be between 1 and 65535")


def load_config(args: argparse.Namespace) -> Config:
    """Load the configuration file and apply command line overrides."""
    config = Config.from_file(args.config)
    if args.overlay_file:
        config.settings.storage.overlay_file = args.overlay_file
    if args.log_level:
        config.settings.logging.level = args.log_level
    return config


def run_server(args: argparse.Namespace, config: Config) -> None:
    """Start the review API development server."""
    from .web import create_app

    if args.host:
        config.settings.server.host = args.host
    if args.port:
        config.settings.server.port = args.port

    server = config.settings.server
    app = create_app(config)

    print("=" * 60)
    print(f"{server.service_name} v{server.version}")
    print("=" * 60)
    print(f"Listening on http://{server.host}:{server.port}{server.api_prefix}")
    print(f"Health check: http://{server.host}:{server.port}{server.api_prefix}/health")
    print("=" * 60)

    app.run(debug=server.debug, host=server.host, port=server.port)


def run_command(args: argparse.Namespace, config: Config) -> None:
    """Run a dashboard command and print its result as JSON."""
    dashboard = create_dashboard(config, use_api=args.remote)

    if args.command == 'reviews':
        criteria = ReviewCriteria(property=args.property, status=args.status)
        reviews = dashboard.filter(criteria, sort_by=args.sort)
        print(json.dumps([r.to_dict() for r in reviews], indent=2))
        print(f"\n{len(reviews)} reviews")

    elif args.command == 'metrics':
        if args.property:
            print(json.dumps(dashboard.property_metrics(args.property).to_dict(), indent=2))
        else:
            print(json.dumps([m.to_dict() for m in dashboard.all_property_metrics()], indent=2))

    elif args.command == 'overview':
        print(json.dumps(dashboard.overview().to_dict(), indent=2))

    elif args.command == 'approve':
        review_id = dashboard.approve(args.review_id)
        print(f"Approved {review_id}")

    elif args.command == 'reject':
        review_id = dashboard.reject(args.review_id)
        print(f"Rejected {review_id}")

    elif args.command == 'clear':
        dashboard.clear()
        print("Cleared all approvals")

    elif args.command == 'export':
        exporter = CSVExporter(os.path.join(args.output_dir, 'reviews.csv'),
                               os.path.join(args.output_dir, 'metrics.csv'))
        criteria = ReviewCriteria(property=args.property, status=args.status)
        review_count = exporter.write_reviews(dashboard.filter(criteria, sort_by=args.sort))
        metrics_count = exporter.write_metrics(dashboard.all_property_metrics())
        print(f"Exported {review_count} reviews and {metrics_count} properties to {args.output_dir}")


def main(argv: Optional[List[str]] = None):
    """Main entry point for the review dashboard."""
    try:
        args = parse_arguments(argv)
        validate_arguments(args)

        config = load_config(args)
        logging_settings = config.settings.logging
        setup_logging(logging_settings.level, logging_settings.file, logging_settings.format)

        if args.command == 'serve':
            run_server(args, config)
        else:
            run_command(args, config)

    except KeyboardInterrupt:
        print("\nInterrupted by user.")
        sys.exit(1)

    except DashboardException as e:
        print(f"\nCommand failed: {e}")
        sys.exit(1)

    except ValueError as e:
        print(f"\nInvalid arguments: {e}")
        print("\nUse --help for usage information.")
        sys.exit(1)


if __name__ == "__main__":
    main()
