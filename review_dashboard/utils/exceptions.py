"""Custom exceptions for the review dashboard."""


class DashboardException(Exception):
    """Base exception for review dashboard errors."""
    pass


class AuthenticationException(DashboardException):
    """Exception raised when an API key is missing or invalid."""
    pass


class NotFoundException(DashboardException):
    """Exception raised when a review or property does not exist."""
    pass


class ValidationException(DashboardException):
    """Exception raised when a request carries invalid values."""
    pass


class TransportException(DashboardException):
    """Exception raised when the review API cannot be reached."""
    pass


class PersistenceException(DashboardException):
    """Exception raised when status overlay persistence fails."""
    pass


class ConfigurationException(DashboardException):
    """Exception raised when configuration is invalid."""
    pass
