import logging
import os
from sqlmodel import Session, SQLModel, create_engine

logger = logging.getLogger(__name__)

# Get database URL from environment, default to SQLite for local dev
db_path = os.getenv("DATABASE_PATH", "./remember_her.db")
env = os.getenv("ENV", "dev").lower()

if os.getenv("DATABASE_URL"):
    DATABASE_URL = os.getenv("DATABASE_URL")
else:
    # Guard against SQLite fallback in production
    if env in ("prod", "production"):
        raise RuntimeError(
            "DATABASE_URL missing in production; refusing to start with SQLite. "
            "Please configure DATABASE_URL environment variable."
        )
    DATABASE_URL = f"sqlite:///{db_path}"

# Hosted Postgres often hands out postgres://, SQLAlchemy needs postgresql://
if DATABASE_URL.startswith("postgres://"):
    DATABASE_URL = DATABASE_URL.replace("postgres://", "postgresql://", 1)

db_driver = DATABASE_URL.split(":", 1)[0] if ":" in DATABASE_URL else "unknown"
logger.info(f"DB_URL_DRIVER={db_driver}")

connect_args = {"check_same_thread": False} if DATABASE_URL.startswith("sqlite") else {}
engine = create_engine(DATABASE_URL, echo=False, connect_args=connect_args)


def create_db_and_tables():
    """Create database and tables if they don't exist.
    This is safe to call multiple times - it won't wipe existing data.
    """
    SQLModel.metadata.create_all(engine)


def get_session():
    """Get database session."""
    with Session(engine) as session:
        yield session
