"""Shared test fixtures: an in-memory SQLite database and a fast password hasher."""

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from userpanel.core.security import BcryptPasswordHasher
from userpanel.models import Base

# Lowest bcrypt cost; keeps hashing real but fast.
FAST_ROUNDS = 4


def make_test_database() -> tuple[Engine, sessionmaker]:
    """Create a fresh in-memory database with all tables; sessions share one connection."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    factory = sessionmaker(bind=engine, autocommit=False, autoflush=False)
    return engine, factory


def fast_hasher() -> BcryptPasswordHasher:
    return BcryptPasswordHasher(rounds=FAST_ROUNDS)
