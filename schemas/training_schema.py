from pydantic import BaseModel, Field

from schemas.school_schema import RecordId


class TrainingUpdate(BaseModel):
    hours: int = Field(gt=0)
    description: str = ""
    school_id: str


class TrainingCreate(TrainingUpdate):
    id: RecordId


class TrainingSchema(BaseModel):
    id: str
    hours: int
    description: str
    school_id: str

    class Config:
        from_attributes = True
        frozen = True
