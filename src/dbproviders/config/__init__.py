"""Database kinds, connection value objects and validated settings.

Quick start::

    from dbproviders.config import get_settings

    settings = get_settings()
    print(settings.database_type)        # DatabaseKind.SQLITE
    connection = settings.connection_config()

Architecture::

    components.py     DatabaseKind + ConnectionConfig + ProviderSettings
    settings.py       DatabaseSettings (pydantic-settings) + get_settings() cache
"""

from .components import (
    CLIENT_SERVER_RETRY_ATTEMPTS,
    ConnectionConfig,
    DatabaseKind,
    ProviderSettings,
)
from .settings import (
    DatabaseSettings,
    clear_settings_cache,
    get_settings,
)

__all__ = [
    # Components
    "CLIENT_SERVER_RETRY_ATTEMPTS",
    "ConnectionConfig",
    "DatabaseKind",
    "ProviderSettings",
    # Settings
    "DatabaseSettings",
    "get_settings",
    "clear_settings_cache",
]
