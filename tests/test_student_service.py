import pytest
from sqlalchemy.exc import IntegrityError

from student_manager.models.student import Student
from student_manager.schemas.student import StudentCreate, StudentUpdate
from student_manager.services.student import student as crud_student


def _jane():
    return StudentCreate(
        first_name='Jane',
        last_name='Doe',
        social_security_number='19900101-2020',
        email='jane@doe.com',
    )


def test_create_and_get(db):
    created = crud_student.create_student(db, _jane())
    assert created.id is not None
    fetched = crud_student.get_student(db, created.id)
    assert fetched.social_security_number == '19900101-2020'
    assert crud_student.get_student(db, created.id + 100) is None


def test_update_overwrites_all_fields(db):
    created = crud_student.create_student(db, _jane())
    update = StudentUpdate(
        id=created.id,
        first_name='Janet',
        last_name='Smith',
        social_security_number='19900101-2010',
        email='janet@smith.com',
    )
    crud_student.update_student(db, created, update)
    db.expire_all()
    stored = crud_student.get_student(db, created.id)
    assert (stored.first_name, stored.last_name, stored.social_security_number, stored.email) == (
        'Janet', 'Smith', '19900101-2010', 'janet@smith.com'
    )


def test_delete(db):
    created = crud_student.create_student(db, _jane())
    crud_student.delete_student(db, created)
    assert crud_student.get_students(db) == []


def test_duplicate_ssn_raises(db):
    crud_student.create_student(db, _jane())
    with pytest.raises(IntegrityError):
        crud_student.create_student(db, _jane())
    db.rollback()
    assert db.query(Student).count() == 1


def test_schema_accepts_camel_case_and_field_names():
    by_alias = StudentCreate.model_validate({
        'firstName': 'Jane',
        'lastName': 'Doe',
        'socialSecurityNumber': '19900101-2020',
        'email': 'jane@doe.com',
    })
    assert by_alias == _jane()
    dumped = by_alias.model_dump(by_alias=True)
    assert set(dumped) == {'firstName', 'lastName', 'socialSecurityNumber', 'email'}
