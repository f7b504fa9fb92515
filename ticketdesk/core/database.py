# ticketdesk/core/database.py
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool
from ticketdesk.core.config import get_settings

Base = declarative_base()


def make_engine(url: str) -> Engine:
    """Engine for ``url``; SQLite gets thread-safe connect args.

    An in-memory SQLite database lives in one connection, so it is shared
    through a ``StaticPool`` or every session would see an empty schema.
    """
    if not url.startswith("sqlite"):
        return create_engine(url)
    kwargs = {"connect_args": {"check_same_thread": False}}
    if url in ("sqlite://", "sqlite:///:memory:"):
        kwargs["poolclass"] = StaticPool
    return create_engine(url, **kwargs)


engine = make_engine(get_settings().DATABASE_URL)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def init_db(bind: Engine = engine) -> None:
    # models register on Base when imported
    import ticketdesk.ticket.models  # noqa: F401

    Base.metadata.create_all(bind=bind)


# One session per request
def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
