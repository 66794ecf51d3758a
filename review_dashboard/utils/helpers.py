"""Utility functions for the review dashboard."""

import re
from datetime import date
from decimal import Decimal, ROUND_HALF_UP
from typing import Optional


def round_half_up(value: float, digits: int = 0) -> float:
    """Round a number with halves going up (4.5 -> 5, 4.45 -> 4.5).

    Python's built-in round() rounds halves to even, which would turn
    a 9/10 rating into 4 stars instead of 5.

    Args:
        value: Number to round
        digits: Number of decimal places to keep

    Returns:
        Rounded value
    """
    quantum = Decimal(1).scaleb(-digits)
    return float(Decimal(str(value)).quantize(quantum, rounding=ROUND_HALF_UP))


def clamp(value: int, lowest: int, highest: int) -> int:
    """Clamp an integer into the inclusive [lowest, highest] range."""
    return max(lowest, min(highest, value))


def slugify(text: str, max_length: int = 20) -> str:
    """Turn a listing name into a short slug.

    Lowercases, strips everything except letters, digits and whitespace,
    collapses whitespace runs into hyphens and truncates.

    Args:
        text: Raw listing name
        max_length: Maximum slug length

    Returns:
        Slug string
    """
    normalized = re.sub(r'[^a-z0-9\s]', '', text.lower())
    normalized = re.sub(r'\s+', '-', normalized)
    return normalized[:max_length]


def parse_submitted_date(submitted_at: Optional[str]) -> Optional[date]:
    """Extract the calendar date from a provider timestamp.

    Args:
        submitted_at: Timestamp like '2024-01-20 22:45:14'

    Returns:
        The date portion, or None if missing or unparseable
    """
    if not submitted_at or not submitted_at.strip():
        return None

    date_part = submitted_at.split()[0]
    try:
        return date.fromisoformat(date_part)
    except ValueError:
        return None


def mask_api_key(api_key: str) -> str:
    """Mask an API key for display, keeping the first and last 4 characters."""
    if not api_key or len(api_key) <= 8:
        return '***'
    return f"{api_key[:4]}...{api_key[-4:]}"
