from __future__ import annotations
from typing import Any, Dict, Iterator

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

from .settings import settings


DEFAULT_DATABASE_URL = "sqlite:///./pathwayz.db"
_IN_MEMORY_URLS = ("sqlite://", "sqlite:///:memory:")

Base = declarative_base()


def make_engine(url: str) -> Engine:
	"""SQLite connections are shared across request threads; an in-memory
	database is pinned to one connection so every session sees the same tables."""
	kwargs: Dict[str, Any] = {}
	if url.startswith("sqlite"):
		kwargs["connect_args"] = {"check_same_thread": False}
		if url in _IN_MEMORY_URLS:
			kwargs["poolclass"] = StaticPool
	return create_engine(url, future=True, **kwargs)


def make_sessionmaker(bind: Engine) -> sessionmaker:
	return sessionmaker(autocommit=False, autoflush=False, bind=bind, future=True)


def create_tables(bind: Engine) -> None:
	# Importing models registers the collection tables on Base.metadata
	from . import models  # noqa: F401

	Base.metadata.create_all(bind=bind)


engine = make_engine(settings.database_url or DEFAULT_DATABASE_URL)
SessionLocal = make_sessionmaker(engine)


def get_db() -> Iterator[Session]:
	db = SessionLocal()
	try:
		yield db
	finally:
		db.close()
