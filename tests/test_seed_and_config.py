from student_manager.core.config import Settings
from student_manager.core.database import check_database_connection
from student_manager.models.student import Student
from student_manager.seed import SAMPLE_STUDENTS, seed_data


def test_seed_inserts_once(db):
    assert seed_data(db) == len(SAMPLE_STUDENTS)
    assert seed_data(db) == 0
    assert db.query(Student).count() == len(SAMPLE_STUDENTS)


def test_database_url_built_from_components(monkeypatch):
    monkeypatch.delenv('DATABASE_URL', raising=False)
    s = Settings(
        _env_file=None,
        POSTGRES_USER='u',
        POSTGRES_PASSWORD='p',
        POSTGRES_HOST='db',
        POSTGRES_PORT='5433',
        POSTGRES_DB='school',
    )
    assert s.DATABASE_URL == 'postgresql://u:p@db:5433/school'
    assert not s.is_sqlite


def test_explicit_database_url_wins(monkeypatch):
    monkeypatch.setenv('DATABASE_URL', 'sqlite:///./students.db')
    s = Settings(_env_file=None)
    assert s.DATABASE_URL == 'sqlite:///./students.db'
    assert s.is_sqlite


def test_cors_origins_from_json_string(monkeypatch):
    monkeypatch.setenv('BACKEND_CORS_ORIGINS', '["http://example.org"]')
    s = Settings(_env_file=None)
    assert s.BACKEND_CORS_ORIGINS == ['http://example.org']


def test_database_connection_check():
    assert check_database_connection() is True
