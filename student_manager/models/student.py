from sqlalchemy import CHAR, Column, Integer, String
from student_manager.core.database import Base


class Student(Base):
    __tablename__ = "students"

    id = Column(Integer, primary_key=True, index=True)
    first_name = Column(String(50), nullable=False)
    last_name = Column(String(50), nullable=False)
    social_security_number = Column(CHAR(13), unique=True, index=True, nullable=False)
    email = Column(String(50), nullable=False)

    def __repr__(self):
        return f"<Student id={self.id} ssn={self.social_security_number!r}>"
