from typing import Generator
from sqlalchemy.orm import Session
from student_manager.core.database import SessionLocal


def get_db() -> Generator[Session, None, None]:
    """
    Dependency providing a database session per request.
    The session is closed when the request finishes, which discards
    anything that was not committed.
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
