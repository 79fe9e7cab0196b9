import logging
from typing import Optional
from sqlalchemy.orm import Session
from student_manager.core.database import SessionLocal, create_database_tables
from student_manager.core.logging import setup_logging
from student_manager.models.student import Student

logger = logging.getLogger(__name__)

SAMPLE_STUDENTS = [
    {
        "first_name": "Jane",
        "last_name": "Doe",
        "social_security_number": "19900101-2020",
        "email": "jane@doe.com",
    },
    {
        "first_name": "John",
        "last_name": "Doe",
        "social_security_number": "19881224-1234",
        "email": "john@doe.com",
    },
    {
        "first_name": "Anna",
        "last_name": "Svensson",
        "social_security_number": "20010315-4567",
        "email": "anna@svensson.se",
    },
]


def seed_data(db: Optional[Session] = None) -> int:
    """
    Insert the sample students into an empty table.

    Returns the number of students inserted (0 when data already exists).
    """
    owns_session = db is None
    if owns_session:
        db = SessionLocal()
    try:
        # Skip if data already exists to avoid duplicate SSNs
        if db.query(Student).first():
            logger.info("Database already contains data. Skipping seed.")
            return 0

        logger.info("Seeding data...")
        db.add_all([Student(**fields) for fields in SAMPLE_STUDENTS])
        db.commit()

        logger.info(f"Seeded {len(SAMPLE_STUDENTS)} students")
        return len(SAMPLE_STUDENTS)
    except Exception as e:
        logger.error(f"Error seeding data: {e}")
        db.rollback()
        raise
    finally:
        if owns_session:
            db.close()


if __name__ == "__main__":
    setup_logging()
    create_database_tables()
    seed_data()
