from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker
import logging

from .config import settings

logger = logging.getLogger(__name__)

engine = create_engine(
    settings.DATABASE_URL,
    connect_args={"check_same_thread": False} if settings.DATABASE_URL.startswith("sqlite") else {},
)
SessionLocal = sessionmaker(bind=engine, autocommit=False, autoflush=False)
Base = declarative_base()

def init_db():
    # Import models so they are registered on Base.metadata
    from .models import Guardian, ErrorLog  # noqa: F401
    Base.metadata.create_all(bind=engine)
    logger.info("Database initialized: tables=%s", ", ".join(sorted(Base.metadata.tables)))

def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
