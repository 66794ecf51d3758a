from .settings import (Config, DashboardSettings, ServerSettings, AuthSettings,
                       StorageSettings, ClientSettings, LoggingSettings, DEFAULT_API_KEYS)

__all__ = ['Config', 'DashboardSettings', 'ServerSettings', 'AuthSettings',
           'StorageSettings', 'ClientSettings', 'LoggingSettings', 'DEFAULT_API_KEYS']
