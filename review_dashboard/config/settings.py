"""Configuration settings for the review dashboard."""

import os
import yaml
from dataclasses import dataclass, field
from typing import List, Optional
from pathlib import Path

from ..utils.exceptions import ConfigurationException


DEFAULT_API_KEYS = [
    'demo-api-key-12345',
    'test-api-key-67890',
    'dev-api-key-abcdef',
    'prod-api-key-xyz789',
]


@dataclass
class ServerSettings:
    """HTTP API server settings."""
    host: str = '0.0.0.0'
    port: int = 3001
    debug: bool = False
    api_prefix: str = ''
    service_name: str = 'Mockaway API'
    version: str = '1.0.0'


@dataclass
class AuthSettings:
    """API key allow-list."""
    api_keys: List[str] = field(default_factory=lambda: list(DEFAULT_API_KEYS))


@dataclass
class StorageSettings:
    """Status overlay storage configuration."""
    backend: str = 'json'  # "json" or "memory"
    overlay_file: str = 'approved_reviews.json'


@dataclass
class ClientSettings:
    """Review API client configuration."""
    base_url: str = 'http://localhost:3001'
    api_key: str = 'demo-api-key-12345'
    api_key_header: str = 'X-API-Key'
    timeout: float = 10.0


@dataclass
class LoggingSettings:
    """Logging configuration."""
    level: str = 'INFO'
    file: Optional[str] = None
    format: str = '%(asctime)s [%(levelname)s] %(name)s: %(message)s'


@dataclass
class DashboardSettings:
    """Complete dashboard configuration."""
    server: ServerSettings = field(default_factory=ServerSettings)
    auth: AuthSettings = field(default_factory=AuthSettings)
    storage: StorageSettings = field(default_factory=StorageSettings)
    client: ClientSettings = field(default_factory=ClientSettings)
    logging: LoggingSettings = field(default_factory=LoggingSettings)


class Config:
    """Configuration manager for the dashboard."""

    def __init__(self, settings: Optional[DashboardSettings] = None):
        self.settings = settings or DashboardSettings()

    @classmethod
    def from_file(cls, config_path: str) -> 'Config':
        """Load configuration from YAML file."""
        config_file = Path(config_path)

        if not config_file.exists():
            # Create default config file if it doesn't exist
            default_config = cls()
            default_config.save_to_file(config_path)
            return default_config

        try:
            with open(config_file, 'r') as f:
                config_data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigurationException(f"Invalid YAML in {config_path}: {e}") from e

        if not isinstance(config_data, dict):
            raise ConfigurationException(f"Configuration in {config_path} must be a mapping")

        settings = DashboardSettings()

        # Load server settings
        if 'server' in config_data:
            server_data = config_data['server'] or {}
            settings.server = ServerSettings(
                host=server_data.get('host', settings.server.host),
                port=int(server_data.get('port', settings.server.port)),
                debug=server_data.get('debug', settings.server.debug),
                api_prefix=server_data.get('api_prefix', settings.server.api_prefix) or '',
                service_name=server_data.get('service_name', settings.server.service_name),
                version=server_data.get('version', settings.server.version)
            )

        # Load auth settings
        if 'auth' in config_data:
            auth_data = config_data['auth'] or {}
            api_keys = auth_data.get('api_keys', settings.auth.api_keys)
            if not isinstance(api_keys, list) or not api_keys:
                raise ConfigurationException("auth.api_keys must be a non-empty list")
            settings.auth = AuthSettings(api_keys=[str(key) for key in api_keys])

        # Load storage settings
        if 'storage' in config_data:
            storage_data = config_data['storage'] or {}
            settings.storage = StorageSettings(
                backend=storage_data.get('backend', settings.storage.backend),
                overlay_file=storage_data.get('overlay_file', settings.storage.overlay_file)
            )

        # Load client settings
        if 'client' in config_data:
            client_data = config_data['client'] or {}
            settings.client = ClientSettings(
                base_url=client_data.get('base_url', settings.client.base_url),
                api_key=client_data.get('api_key', settings.client.api_key),
                api_key_header=client_data.get('api_key_header', settings.client.api_key_header),
                timeout=float(client_data.get('timeout', settings.client.timeout))
            )

        # Load logging settings
        if 'logging' in config_data:
            logging_data = config_data['logging'] or {}
            settings.logging = LoggingSettings(
                level=logging_data.get('level', settings.logging.level),
                file=logging_data.get('file', settings.logging.file),
                format=logging_data.get('format', settings.logging.format)
            )

        config = cls(settings)
        config.validate()
        return config

    @classmethod
    def from_env(cls) -> 'Config':
        """Load configuration from environment variables."""
        settings = DashboardSettings()

        # Server settings from env
        if os.getenv('REVIEW_API_HOST'):
            settings.server.host = os.getenv('REVIEW_API_HOST')
        if os.getenv('REVIEW_API_PORT'):
            settings.server.port = int(os.getenv('REVIEW_API_PORT'))
        if os.getenv('REVIEW_API_KEYS'):
            settings.auth.api_keys = [key.strip() for key in os.getenv('REVIEW_API_KEYS').split(',')
                                      if key.strip()]

        # Storage settings from env
        if os.getenv('REVIEW_OVERLAY_FILE'):
            settings.storage.overlay_file = os.getenv('REVIEW_OVERLAY_FILE')

        # Client settings from env
        if os.getenv('REVIEW_API_BASE_URL'):
            settings.client.base_url = os.getenv('REVIEW_API_BASE_URL')
        if os.getenv('REVIEW_API_KEY'):
            settings.client.api_key = os.getenv('REVIEW_API_KEY')

        if os.getenv('LOG_LEVEL'):
            settings.logging.level = os.getenv('LOG_LEVEL')

        config = cls(settings)
        config.validate()
        return config

    def validate(self) -> None:
        """Check values that would otherwise fail late at runtime.

        Raises:
            ConfigurationException: If a setting is out of range
        """
        if self.settings.storage.backend not in ('json', 'memory'):
            raise ConfigurationException(
                f"storage.backend must be 'json' or 'memory', got '{self.settings.storage.backend}'"
            )
        if not (0 < self.settings.server.port < 65536):
            raise ConfigurationException(f"server.port out of range: {self.settings.server.port}")
        if not self.settings.auth.api_keys:
            raise ConfigurationException("At least one API key must be configured")

    def save_to_file(self, config_path: str) -> None:
        """Save current configuration to YAML file."""
        config_data = {
            'server': {
                'host': self.settings.server.host,
                'port': self.settings.server.port,
                'debug': self.settings.server.debug,
                'api_prefix': self.settings.server.api_prefix,
                'service_name': self.settings.server.service_name,
                'version': self.settings.server.version
            },
            'auth': {
                'api_keys': list(self.settings.auth.api_keys)
            },
            'storage': {
                'backend': self.settings.storage.backend,
                'overlay_file': self.settings.storage.overlay_file
            },
            'client': {
                'base_url': self.settings.client.base_url,
                'api_key': self.settings.client.api_key,
                'api_key_header': self.settings.client.api_key_header,
                'timeout': self.settings.client.timeout
            },
            'logging': {
                'level': self.settings.logging.level,
                'file': self.settings.logging.file,
                'format': self.settings.logging.format
            }
        }

        with open(config_path, 'w') as f:
            yaml.dump(config_data, f, default_flow_style=False, indent=2)
