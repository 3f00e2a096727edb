"""Database configuration and models."""

import uuid
from datetime import datetime, timezone
from typing import Optional

from loguru import logger
from sqlalchemy import Column, DateTime, String, Text
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import declarative_base

from .environment import get_config_service

Base = declarative_base()


def _new_id() -> str:
    return uuid.uuid4().hex


def _utcnow() -> datetime:
    return datetime.now(timezone.utc).replace(tzinfo=None)


# References between tables are plain indexed columns: they are checked when a
# record is created and never re-validated afterwards.


class User(Base):
    """User model."""

    __tablename__ = "users"

    id = Column(String(32), primary_key=True, default=_new_id)
    name = Column(String, nullable=False)
    email = Column(String, unique=True, index=True, nullable=False)
    password = Column(String, nullable=False)
    created_at = Column(DateTime, default=_utcnow)
    updated_at = Column(DateTime, default=_utcnow, onupdate=_utcnow)

    def __repr__(self) -> str:
        return f"<User id={self.id} email={self.email}>"


class Post(Base):
    """Blog post model."""

    __tablename__ = "posts"

    id = Column(String(32), primary_key=True, default=_new_id)
    title = Column(String, nullable=False)
    content = Column(Text, nullable=False)
    author_id = Column(String(32), index=True, nullable=False)
    created_at = Column(DateTime, default=_utcnow)
    updated_at = Column(DateTime, default=_utcnow, onupdate=_utcnow)

    def __repr__(self) -> str:
        return f"<Post id={self.id} author_id={self.author_id}>"


class Comment(Base):
    """Comment on a blog post."""

    __tablename__ = "comments"

    id = Column(String(32), primary_key=True, default=_new_id)
    text = Column(Text, nullable=False)
    author_id = Column(String(32), index=True, nullable=False)
    post_id = Column(String(32), index=True, nullable=False)
    created_at = Column(DateTime, default=_utcnow)
    updated_at = Column(DateTime, default=_utcnow, onupdate=_utcnow)

    def __repr__(self) -> str:
        return f"<Comment id={self.id} post_id={self.post_id}>"


_engine: Optional[AsyncEngine] = None
_session_maker: Optional[async_sessionmaker] = None


def get_engine() -> AsyncEngine:
    """Get the process-wide async engine, creating it on first use."""
    global _engine
    if _engine is None:
        settings = get_config_service().get_database_settings()
        _engine = create_async_engine(settings.connection_url, echo=settings.echo)
    return _engine


def get_session_maker() -> async_sessionmaker:
    """Get the session factory bound to the process-wide engine."""
    global _session_maker
    if _session_maker is None:
        _session_maker = create_session_maker(get_engine())
    return _session_maker


def create_session_maker(engine: AsyncEngine) -> async_sessionmaker:
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )


async def init_models(engine: Optional[AsyncEngine] = None) -> None:
    """Create all tables that do not exist yet."""
    engine = engine or get_engine()
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Database tables initialized")


async def dispose_engine() -> None:
    """Close every pooled connection of the process-wide engine."""
    global _engine, _session_maker
    if _engine is not None:
        await _engine.dispose()
        logger.info("Database engine disposed")
    _engine = None
    _session_maker = None
