"""Approval status overlay for reviews."""

from typing import List
import logging

from ..models.review import Review
from ..utils.exceptions import PersistenceException
from .stores import KeyValueStore, MemoryStore, JsonFileStore


APPROVED = 'approved'


class StatusOverlay:
    """Durable set of approved review ids.

    Membership in the overlay always wins over a review's own status.
    Only approval is persisted: rejecting a review removes it from the
    set, so "rejected" and "never approved" look the same once reloaded.
    """

    def __init__(self, store: KeyValueStore):
        """Initialize the overlay.

        Args:
            store: Key-value store holding one entry per approved review id
        """
        self.store = store
        self.logger = logging.getLogger(__name__)

    def is_approved(self, review_id: str) -> bool:
        """Check if a review id is in the approved set.

        Unreadable storage reads as an empty overlay.
        """
        try:
            return self.store.get(review_id) == APPROVED
        except PersistenceException as e:
            self.logger.warning(f"Status overlay unreadable, treating as empty: {e}")
            return False

    def approve(self, review_id: str) -> None:
        """Add a review id to the approved set. Idempotent."""
        if self.is_approved(review_id):
            return

        try:
            self.store.set(review_id, APPROVED)
            self.logger.info(f"Approved review {review_id}")
        except PersistenceException as e:
            self.logger.error(f"Failed to approve review {review_id}: {e}")

    def reject(self, review_id: str) -> None:
        """Remove a review id from the approved set. Idempotent."""
        try:
            self.store.delete(review_id)
            self.logger.info(f"Rejected review {review_id}")
        except PersistenceException as e:
            self.logger.error(f"Failed to reject review {review_id}: {e}")

    def clear(self) -> None:
        """Remove every approval."""
        try:
            self.store.clear()
            self.logger.info("Cleared all review approvals")
        except PersistenceException as e:
            self.logger.error(f"Failed to clear approvals: {e}")

    def approved_ids(self) -> List[str]:
        """Return all approved review ids."""
        try:
            return [key for key in self.store.keys() if self.store.get(key) == APPROVED]
        except PersistenceException as e:
            self.logger.warning(f"Status overlay unreadable, treating as empty: {e}")
            return []


def effective_status(review: Review, overlay: StatusOverlay) -> str:
    """Resolve the status used for filtering and visibility.

    Args:
        review: Normalized review
        overlay: Approval overlay

    Returns:
        'approved' if the overlay holds the review, otherwise the review's own status
    """
    return APPROVED if overlay.is_approved(review.id) else review.status


def create_overlay(backend: str = 'json', overlay_file: str = 'approved_reviews.json') -> StatusOverlay:
    """Build a status overlay for the configured storage backend.

    Args:
        backend: 'json' for a file-backed overlay, 'memory' for a process-local one
        overlay_file: File path used by the json backend

    Returns:
        StatusOverlay instance
    """
    if backend == 'memory':
        return StatusOverlay(MemoryStore())
    return StatusOverlay(JsonFileStore(overlay_file))
