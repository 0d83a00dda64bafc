from fastapi import Request
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.orm import declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

from warehouse_api.config import Settings

# Base class for models
Base = declarative_base()


def create_db_engine(settings: Settings) -> Engine:
    """
    Create the SQLAlchemy engine (and its connection pool) for the given settings.

    PostgreSQL connections get a server-side statement_timeout so a stuck
    query is aborted instead of holding a pooled connection indefinitely.
    """
    url = make_url(settings.DATABASE_URL)

    if url.get_backend_name() == "sqlite":
        kwargs = {"connect_args": {"check_same_thread": False}}
        if url.database in (None, "", ":memory:"):
            kwargs["poolclass"] = StaticPool
        return create_engine(url, **kwargs)

    connect_args = {}
    if url.get_backend_name() == "postgresql" and settings.DB_STATEMENT_TIMEOUT_MS > 0:
        connect_args["options"] = f"-c statement_timeout={settings.DB_STATEMENT_TIMEOUT_MS}"

    return create_engine(
        url,
        pool_size=settings.DB_POOL_SIZE,
        max_overflow=settings.DB_MAX_OVERFLOW,
        pool_pre_ping=True,
        connect_args=connect_args,
    )


def create_session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


def get_db(request: Request):
    """
    Dependency to get database session.
    Yields a session bound to the application's pool and closes it after use.
    """
    db = request.app.state.session_factory()
    try:
        yield db
    finally:
        db.close()
