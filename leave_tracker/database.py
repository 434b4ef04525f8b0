from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, declarative_base
from leave_tracker.core.config import settings

DATABASE_URL = settings.database_url

if DATABASE_URL.startswith("sqlite"):
    engine = create_engine(
        DATABASE_URL, connect_args={"check_same_thread": False}
    )
else:
    engine = create_engine(DATABASE_URL)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()

def get_db():
    """
    Session Provider: Provides a database session per request.
    Commits are issued by the repository.
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()

def init_db():
    """
    Registers all storage models and initializes the database schema.
    Called during the application startup lifespan.
    """
    from leave_tracker.models import (  # noqa: F401
        leave_entry, carryover, leave_quota, public_holiday, payroll_record
    )
    Base.metadata.create_all(bind=engine)
