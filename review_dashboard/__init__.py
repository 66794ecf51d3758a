"""Property review moderation and metrics backend."""

from .dashboard import ReviewDashboard, create_dashboard

__version__ = '1.0.0'

__all__ = ['ReviewDashboard', 'create_dashboard', '__version__']
