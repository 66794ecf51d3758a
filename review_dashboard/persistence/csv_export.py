"""CSV export for reviews and property metrics."""

import os
from typing import Any, Dict, List, Sequence
import logging

import pandas as pd

from ..models import Review, PropertyMetrics
from ..utils.exceptions import PersistenceException


class CSVExporter:
    """Writes dashboard data to CSV files, replacing previous exports."""

    def __init__(self, reviews_filename: str = 'reviews.csv',
                 metrics_filename: str = 'metrics.csv'):
        """Initialize CSV exporter with file paths.

        Args:
            reviews_filename: Filename for review rows
            metrics_filename: Filename for property metrics rows
        """
        self.reviews_filename = reviews_filename
        self.metrics_filename = metrics_filename
        self.logger = logging.getLogger(__name__)

    def write_reviews(self, reviews: Sequence[Review]) -> int:
        """Write reviews to CSV, one row per review.

        Category scores are flattened into `category_<name>` columns.

        Args:
            reviews: Normalized reviews, already merged with the overlay

        Returns:
            Number of rows written

        Raises:
            PersistenceException: If writing fails
        """
        rows = [self._review_row(review) for review in reviews]
        columns = ['id', 'propertyId', 'propertyName', 'guestName', 'rating', 'title',
                   'content', 'date', 'channel', 'category', 'status', 'helpful',
                   'verifiedStay', 'stayDuration']
        return self._write(rows, columns, self.reviews_filename, 'reviews')

    def write_metrics(self, metrics: Sequence[PropertyMetrics]) -> int:
        """Write property metrics to CSV, one row per property.

        Channel counts become `channel_<name>` columns and category
        averages `category_<name>` columns.

        Raises:
            PersistenceException: If writing fails
        """
        rows = []
        for item in metrics:
            row = {
                'propertyId': item.property_id,
                'averageRating': item.average_rating,
                'totalReviews': item.total_reviews,
                'approvedReviews': item.approved_reviews,
                'recentTrend': item.recent_trend,
                'responseRate': item.response_rate,
            }
            row.update({f'channel_{name}': count for name, count in item.channel_breakdown.items()})
            row.update({f'category_{name}': value for name, value in item.category_ratings.items()})
            rows.append(row)

        columns = ['propertyId', 'averageRating', 'totalReviews', 'approvedReviews',
                   'recentTrend', 'responseRate']
        return self._write(rows, columns, self.metrics_filename, 'property metrics')

    @staticmethod
    def _review_row(review: Review) -> Dict[str, Any]:
        row = review.to_dict()
        category_ratings = row.pop('categoryRatings')
        for entry in category_ratings:
            row[f"category_{entry['category']}"] = entry['rating']
        return row

    def _write(self, rows: List[Dict[str, Any]], columns: List[str],
               filename: str, label: str) -> int:
        try:
            directory = os.path.dirname(filename)
            if directory:
                os.makedirs(directory, exist_ok=True)

            # Keep the base columns even when there are no rows
            df = pd.DataFrame(rows)
            extra = [column for column in df.columns if column not in columns]
            df = df.reindex(columns=columns + sorted(extra))
            df.to_csv(filename, index=False, encoding='utf-8-sig')

            self.logger.info(f"Wrote {len(rows)} {label} to {filename}")
            return len(rows)

        except OSError as e:
            raise PersistenceException(f"Failed to write {label} to {filename}: {e}") from e
