"""
Tests for CSV export
"""
import pandas as pd

from review_dashboard.models import PropertyMetrics
from review_dashboard.persistence import CSVExporter

from factories import make_review, categories


def test_reviews_flatten_category_scores(tmp_path):
    exporter = CSVExporter(str(tmp_path / 'reviews.csv'), str(tmp_path / 'metrics.csv'))
    reviews = [
        make_review(id='hostaway-1', category_ratings=categories(('cleanliness', 10))),
        make_review(id='hostaway-2', category_ratings=categories(('value', 6))),
    ]

    assert exporter.write_reviews(reviews) == 2

    df = pd.read_csv(tmp_path / 'reviews.csv', encoding='utf-8-sig')
    assert list(df['id']) == ['hostaway-1', 'hostaway-2']
    assert df.loc[0, 'category_cleanliness'] == 10
    assert pd.isna(df.loc[1, 'category_cleanliness'])
    assert 'categoryRatings' not in df.columns


def test_empty_export_keeps_header(tmp_path):
    path = tmp_path / 'out' / 'reviews.csv'
    exporter = CSVExporter(str(path))

    assert exporter.write_reviews([]) == 0
    assert list(pd.read_csv(path, encoding='utf-8-sig').columns)[:3] == ['id', 'propertyId', 'propertyName']


def test_metrics_columns(tmp_path):
    exporter = CSVExporter(metrics_filename=str(tmp_path / 'metrics.csv'))
    metrics = [
        PropertyMetrics(property_id='prop-1', average_rating=4.5, total_reviews=2,
                        channel_breakdown={'hostaway': 2}, category_ratings={'location': 4.0}),
        PropertyMetrics(property_id='prop-3'),
    ]

    assert exporter.write_metrics(metrics) == 2

    df = pd.read_csv(tmp_path / 'metrics.csv', encoding='utf-8-sig')
    assert list(df['propertyId']) == ['prop-1', 'prop-3']
    assert df.loc[0, 'channel_hostaway'] == 2
    assert df.loc[0, 'category_location'] == 4.0
    assert list(df['totalReviews']) == [2, 0]
