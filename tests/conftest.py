import os

# Must be set before the application modules create their engine
os.environ["DATABASE_URL"] = "sqlite://"

import pytest

from student_manager.core.database import SessionLocal, create_database_tables, drop_database_tables


@pytest.fixture(autouse=True)
def reset_db():
    """Give every test an empty students table."""
    create_database_tables()
    yield
    drop_database_tables()


@pytest.fixture
def db():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def jane():
    return {
        "firstName": "Jane",
        "lastName": "Doe",
        "socialSecurityNumber": "19900101-2020",
        "email": "jane@doe.com",
    }
