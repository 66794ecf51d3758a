"""
Review Dashboard - Entry Point

Moderates property reviews, serves the review API and reports property
metrics. See `python main.py --help` for commands.
"""

from review_dashboard.cli import main


if __name__ == "__main__":
    main()
