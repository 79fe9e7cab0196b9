import logging
from sqlalchemy.orm import Session
from student_manager.models.student import Student
from student_manager.schemas.student import StudentCreate, StudentUpdate
from typing import List, Optional

logger = logging.getLogger(__name__)


def get_student(db: Session, student_id: int) -> Optional[Student]:
    """Fetch one student by primary key"""
    return db.query(Student).filter(Student.id == student_id).first()


def get_students(db: Session) -> List[Student]:
    """Fetch every student in storage order"""
    return db.query(Student).all()


def create_student(db: Session, student: StudentCreate) -> Student:
    """Insert a new student; the id is assigned by the database"""
    db_student = Student(
        first_name=student.first_name,
        last_name=student.last_name,
        social_security_number=student.social_security_number,
        email=student.email
    )
    db.add(db_student)
    db.commit()
    db.refresh(db_student)
    logger.info(f"Created student {db_student.id}")
    return db_student


def update_student(db: Session, db_student: Student, student: StudentUpdate) -> Student:
    """Overwrite the stored fields of an existing student"""
    db_student.first_name = student.first_name
    db_student.last_name = student.last_name
    db_student.social_security_number = student.social_security_number
    db_student.email = student.email
    db.commit()
    logger.info(f"Updated student {db_student.id}")
    return db_student


def delete_student(db: Session, db_student: Student) -> None:
    """Remove a student"""
    db.delete(db_student)
    db.commit()
    logger.info(f"Deleted student {db_student.id}")
