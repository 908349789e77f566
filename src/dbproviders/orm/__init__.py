"""SQLAlchemy side of the provider layer.

Modules
-------
session     create_provider_engine, ProviderSession, session_factory
options     DatabaseOptionsBuilder (provider options + service registry)
context     BaseDatabaseContextFactory, SessionContextFactory
"""

from __future__ import annotations

from dbproviders.orm.session import ProviderSession, create_provider_engine, session_factory
from dbproviders.orm.options import DatabaseOptionsBuilder
from dbproviders.orm.context import BaseDatabaseContextFactory, SessionContextFactory

__all__ = [
    "BaseDatabaseContextFactory",
    "DatabaseOptionsBuilder",
    "ProviderSession",
    "SessionContextFactory",
    "create_provider_engine",
    "session_factory",
]
