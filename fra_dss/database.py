"""Database engine factory and session management."""

import ssl
from collections.abc import AsyncGenerator
from urllib.parse import parse_qs, urlencode, urlparse, urlunparse

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase
from sqlalchemy.pool import StaticPool

from fra_dss.config import settings


class Base(DeclarativeBase):
    """SQLAlchemy declarative base."""

    pass


def get_engine_url_and_connect_args(url: str) -> tuple[str, dict]:
    """
    Split a configured URL into what create_async_engine accepts.

    asyncpg rejects sslmode/ssl query params, so they are dropped; Supabase
    poolers get an SSL context without certificate verification instead.
    """
    connect_args: dict = {}
    if url.startswith("sqlite"):
        connect_args["check_same_thread"] = False
        return url, connect_args
    if "sslmode=" in url or "ssl=" in url:
        parsed = urlparse(url)
        query = parse_qs(parsed.query)
        query.pop("sslmode", None)
        query.pop("ssl", None)
        url = urlunparse(parsed._replace(query=urlencode(query, doseq=True)))
    if "supabase" in url:
        ctx = ssl.create_default_context()
        ctx.check_hostname = False
        ctx.verify_mode = ssl.CERT_NONE
        connect_args["ssl"] = ctx
    return url, connect_args


def build_engine(url: str | None = None) -> AsyncEngine:
    """Engine for the decision_rules database; SQLite URLs share one connection."""
    db_url, connect_args = get_engine_url_and_connect_args(url or settings.database_url)
    if db_url.startswith("sqlite"):
        return create_async_engine(db_url, connect_args=connect_args, poolclass=StaticPool)
    return create_async_engine(
        db_url,
        echo=settings.log_level == "DEBUG",
        connect_args=connect_args,
        pool_size=settings.db_pool_size,
        pool_pre_ping=True,
    )


def build_session_maker(bind: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(
        bind,
        class_=AsyncSession,
        expire_on_commit=False,
        autocommit=False,
        autoflush=False,
    )


engine = build_engine()
async_session_maker = build_session_maker(engine)


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """Dependency for database sessions."""
    async with async_session_maker() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()
