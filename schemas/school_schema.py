from typing import Annotated

from pydantic import BaseModel, Field, field_validator

# ids travel as single URL path segments
RecordId = Annotated[str, Field(min_length=1, max_length=100, pattern=r"^[^/\\]+$")]

# fixed paths under /schools that an id would shadow, and dot segments
RESERVED_SCHOOL_IDS = {"location", ".", ".."}


class SchoolBase(BaseModel):
    name: str = Field(min_length=1, max_length=255)
    location: str = ""
    country: str | None = None
    state: str | None = None
    city: str | None = None
    video_url: str | None = None


class SchoolCreate(SchoolBase):
    id: RecordId

    @field_validator("id")
    @classmethod
    def id_not_reserved(cls, value: str) -> str:
        if value.lower() in RESERVED_SCHOOL_IDS:
            raise ValueError(f"'{value}' is reserved and cannot be used as a school id")
        return value


class SchoolUpdate(SchoolBase):
    pass


class SchoolSchema(BaseModel):
    id: str
    name: str
    location: str = ""
    country: str | None = None
    state: str | None = None
    city: str | None = None
    video_url: str | None = None

    class Config:
        from_attributes = True
        frozen = True
