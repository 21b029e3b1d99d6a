"""Engine/session helpers for the SQL backend."""
from __future__ import annotations

from contextlib import contextmanager
from functools import lru_cache
from typing import Iterator

from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker, Session

from filebase.core.config import get_settings

Base = declarative_base()


def _resolve_url(url: str | None) -> str:
    value = (url or get_settings().database_url or "").strip()
    if not value:
        raise RuntimeError("DATABASE_URL must be configured to use the SQL backend.")
    return value


@lru_cache
def _engine_for(url: str):
    return create_engine(url, future=True, pool_pre_ping=True)


def get_engine(url: str | None = None):
    return _engine_for(_resolve_url(url))


@lru_cache
def _sessionmaker_for(url: str):
    return sessionmaker(bind=_engine_for(url), autoflush=False, autocommit=False, future=True)


@contextmanager
def get_session(url: str | None = None) -> Iterator[Session]:
    session: Session = _sessionmaker_for(_resolve_url(url))()
    try:
        yield session
    finally:
        session.close()
