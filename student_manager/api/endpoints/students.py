from fastapi import APIRouter, Depends, Path, Response, status
from sqlalchemy.orm import Session
from typing import Annotated, List
import logging

from student_manager.api.deps import get_db
from student_manager.core.config import settings
from student_manager.core.exceptions import BadRequestException, NotFoundException
from student_manager.services.student import student as crud_student
from student_manager.schemas.student import Student, StudentCreate, StudentUpdate

logger = logging.getLogger(__name__)

router = APIRouter()

# Ids are 32-bit INTEGER primary keys
StudentId = Annotated[int, Path(ge=-2**31, le=2**31 - 1)]


def _get_student_or_404(db: Session, student_id: int):
    student = crud_student.get_student(db, student_id=student_id)
    if student is None:
        logger.info(f"Student {student_id} not found")
        raise NotFoundException(f"Student {student_id} not found")
    return student


# POST /students
# {
#   "firstName": "Jane",
#   "lastName": "Doe",
#   "socialSecurityNumber": "19900101-2020",
#   "email": "jane@doe.com"
# }
@router.post("", response_model=Student, status_code=status.HTTP_201_CREATED)
def create_student(
    student: StudentCreate,
    response: Response,
    db: Session = Depends(get_db)
):
    """
    Create a student.

    All four fields are required; **socialSecurityNumber** is at most
    13 characters and must be unique.
    """
    db_student = crud_student.create_student(db=db, student=student)
    response.headers["Location"] = f"{settings.API_PREFIX}/students/{db_student.id}"
    return db_student


@router.get("", response_model=List[Student])
def get_students(db: Session = Depends(get_db)):
    """
    List every student
    """
    return crud_student.get_students(db)


@router.get("/{student_id}", response_model=Student)
def get_student(
    student_id: StudentId,
    db: Session = Depends(get_db)
):
    return _get_student_or_404(db, student_id)


# PUT /students/1
# {
#   "id": 1,
#   "firstName": "Jane",
#   "lastName": "Doe",
#   "socialSecurityNumber": "19900101-2010",
#   "email": "jane@outlook.com"
# }
@router.put("/{student_id}", status_code=status.HTTP_204_NO_CONTENT)
def update_student(
    student_id: StudentId,
    student: StudentUpdate,
    db: Session = Depends(get_db)
):
    """
    Overwrite a student. The id in the body must match the id in the path.
    """
    if student.id != student_id:
        raise BadRequestException(
            "Student id in body does not match the path",
            details={"path_id": student_id, "body_id": student.id}
        )

    db_student = _get_student_or_404(db, student_id)
    crud_student.update_student(db=db, db_student=db_student, student=student)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/{student_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_student(
    student_id: StudentId,
    db: Session = Depends(get_db)
):
    db_student = _get_student_or_404(db, student_id)
    crud_student.delete_student(db=db, db_student=db_student)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
