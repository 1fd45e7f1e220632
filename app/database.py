from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool
import logging

from app.config import STORE_URL

logger = logging.getLogger(__name__)

Base = declarative_base()


# ------------------------------------------------------------------------------
# ENGINE & SESSION
# ------------------------------------------------------------------------------
def create_memory_engine() -> Engine:
    """
    Create an in-memory SQLite engine.

    StaticPool keeps a single connection alive for the lifetime of the
    engine; an in-memory database lives exactly as long as its connection.
    """
    engine = create_engine(
        STORE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    init_db(engine)
    return engine


def create_session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(autocommit=False, autoflush=False, expire_on_commit=False, bind=engine)


# ------------------------------------------------------------------------------
# INITIALIZATION
# ------------------------------------------------------------------------------
def init_db(engine: Engine):
    """Create tables on a freshly created engine."""
    from app.models import string_record  # ensure models are imported
    try:
        Base.metadata.create_all(bind=engine)
        logger.debug("String store tables created")
    except Exception as e:
        logger.error(f"String store initialization failed: {e}")
        raise
