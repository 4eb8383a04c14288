from pydantic import BaseModel, ConfigDict, EmailStr
from typing import Optional


class TeacherBase(BaseModel):
    name: str
    email: EmailStr


class TeacherCreate(TeacherBase):
    pass


class TeacherUpdate(BaseModel):
    name: Optional[str] = None
    email: Optional[EmailStr] = None


class Teacher(TeacherBase):
    model_config = ConfigDict(from_attributes=True)

    id: int
