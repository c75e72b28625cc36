from pydantic import BaseModel, Field

from schemas.school_schema import RecordId


class TeacherUpdate(BaseModel):
    name: str = Field(min_length=1, max_length=255)
    specialization: str = ""
    school_id: str


class TeacherCreate(TeacherUpdate):
    id: RecordId


class TeacherSchema(BaseModel):
    id: str
    name: str
    specialization: str
    school_id: str

    class Config:
        from_attributes = True
        frozen = True
