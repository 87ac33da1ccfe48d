from sqlmodel import SQLModel, create_engine, Session
from vocabdecks.core.config import settings
import logging

logger = logging.getLogger(__name__)


def normalize_database_url(url: str) -> str:
    """SQLAlchemy expects postgresql:// rather than the postgres:// alias."""
    if url.startswith("postgres://"):
        return url.replace("postgres://", "postgresql://", 1)
    return url


def build_engine(db_url: str):
    """Create an engine with pool options suited to the backend."""
    db_url = normalize_database_url(db_url)
    if db_url.startswith("sqlite"):
        # SQLite connections are shared across the threadpool FastAPI runs sync work on
        return create_engine(
            db_url,
            echo=settings.sql_echo,
            connect_args={"check_same_thread": False},
        )
    return create_engine(
        db_url,
        echo=settings.sql_echo,
        pool_pre_ping=True,  # Verify connections before using
        pool_size=5,
        max_overflow=10,
    )


logger.info(f"Connecting to database: {normalize_database_url(settings.database_url)[:20]}...")

engine = build_engine(settings.database_url)


def get_session():
    """Dependency for getting database sessions."""
    with Session(engine) as session:
        yield session


def save(session: Session, instance):
    """Add, commit and refresh a row. Rolls back and re-raises if the commit fails."""
    session.add(instance)
    try:
        session.commit()
    except Exception as e:
        session.rollback()
        logger.error(f"Error saving {type(instance).__name__}: {str(e)}")
        raise
    session.refresh(instance)
    return instance


def init_db():
    """Initialize database tables."""
    # Import models so they are registered on SQLModel.metadata
    from vocabdecks import models  # noqa: F401

    SQLModel.metadata.create_all(engine)
