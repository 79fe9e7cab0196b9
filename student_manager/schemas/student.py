from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class StudentBase(BaseModel):
    first_name: str = Field(..., min_length=1, max_length=50)
    last_name: str = Field(..., min_length=1, max_length=50)
    social_security_number: str = Field(..., min_length=1, max_length=13)
    email: str = Field(..., min_length=1, max_length=50)

    # JSON uses camelCase (firstName, socialSecurityNumber, ...)
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class StudentCreate(StudentBase):
    pass


class StudentUpdate(StudentBase):
    id: int


class StudentInDB(StudentBase):
    id: int

    model_config = ConfigDict(from_attributes=True)


class Student(StudentInDB):
    pass
