"""
Database configuration and session management for SQLAlchemy.
"""

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, declarative_base
from journal_prompts.core.config import DATABASE_URL


def build_engine(url: str = DATABASE_URL):
    """
    Creates a SQLAlchemy engine. SQLite connections are shared across threads
    because FastAPI runs sync dependencies in a worker pool.
    """
    connect_args = {"check_same_thread": False} if url.startswith("sqlite") else {}
    return create_engine(url, connect_args=connect_args)


# Engine & Session
engine = build_engine()
SessionLocal = sessionmaker(
    autocommit=False, autoflush=False, expire_on_commit=False, bind=engine
)

# Declarative Base
Base = declarative_base()