"""SQLAlchemy engine factory and session helpers.

This module provides:

* ``create_provider_engine`` -- Create a SA engine tuned for a ``DatabaseKind``.
* ``ProviderSession``        -- A pre-configured ``Session`` subclass.
* ``session_factory``        -- ``sessionmaker`` producing ``ProviderSession``.

Tags:
    orm, sqlalchemy, session, engine

Doc-Types:
    api-reference
"""

from __future__ import annotations

from typing import Any

from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker

from dbproviders.config.components import DatabaseKind
from dbproviders.logging import get_logger

logger = get_logger(__name__)


def create_provider_engine(
    kind: DatabaseKind,
    url: str,
    *,
    echo: bool = False,
    pool_size: int | None = None,
    max_overflow: int | None = None,
    pool_timeout: int | None = None,
    **kwargs: Any,
) -> Engine:
    """Create a SQLAlchemy engine with per-engine defaults.

    Parameters
    ----------
    kind:
        Database engine the URL points at.
    url:
        Database URL (``sqlite:///…``, ``postgresql://…``, ``mysql+pymysql://…``)
    echo:
        If ``True``, log all SQL.
    pool_size, max_overflow, pool_timeout:
        Connection pool parameters (ignored for SQLite).
    **kwargs:
        Extra arguments forwarded to ``sqlalchemy.create_engine``.
    """
    from sqlalchemy import create_engine

    if DatabaseKind(kind).is_file_based:
        kwargs.setdefault("connect_args", {"check_same_thread": False})
        engine = create_engine(url, echo=echo, **kwargs)

        from sqlalchemy import event

        # Foreign keys are off by default in SQLite
        @event.listens_for(engine, "connect")
        def _set_sqlite_pragma(dbapi_connection: Any, _rec: Any) -> None:
            cursor = dbapi_connection.cursor()
            cursor.execute("PRAGMA foreign_keys=ON")
            cursor.close()

        logger.debug(
            "engine.created",
            kind=DatabaseKind(kind).value,
            url=engine.url.render_as_string(hide_password=True),
        )
        return engine

    pool_kwargs: dict[str, Any] = {"pool_pre_ping": True}
    if pool_size is not None:
        pool_kwargs["pool_size"] = pool_size
    if max_overflow is not None:
        pool_kwargs["max_overflow"] = max_overflow
    if pool_timeout is not None:
        pool_kwargs["pool_timeout"] = pool_timeout

    engine = create_engine(url, echo=echo, **pool_kwargs, **kwargs)
    logger.debug(
        "engine.created",
        kind=DatabaseKind(kind).value,
        url=engine.url.render_as_string(hide_password=True),
        **pool_kwargs,
    )
    return engine


class ProviderSession(Session):
    """Pre-configured session with ``expire_on_commit=False``.

    Prevents lazy-load surprises after commit.
    """

    def __init__(self, bind: Engine | None = None, **kwargs: Any) -> None:
        kwargs.setdefault("expire_on_commit", False)
        super().__init__(bind=bind, **kwargs)


def session_factory(engine: Engine) -> sessionmaker[ProviderSession]:
    """Return a ``sessionmaker`` bound to *engine* that produces ``ProviderSession`` instances."""
    return sessionmaker(bind=engine, class_=ProviderSession)
