from .logger import setup_logging, get_component_logger
from .helpers import round_half_up, clamp, slugify, parse_submitted_date, mask_api_key
from .exceptions import (DashboardException, AuthenticationException, NotFoundException,
                         ValidationException, TransportException, PersistenceException,
                         ConfigurationException)

__all__ = ['setup_logging', 'get_component_logger', 'round_half_up', 'clamp', 'slugify',
           'parse_submitted_date', 'mask_api_key',
           'DashboardException', 'AuthenticationException', 'NotFoundException',
           'ValidationException', 'TransportException', 'PersistenceException',
           'ConfigurationException']
