from pydantic import BaseModel, Field


class ReviewCreate(BaseModel):
    reviewer_name: str = Field(min_length=1, max_length=255)
    rating: int = Field(ge=1, le=5)
    comment: str = ""


class ReviewSchema(BaseModel):
    # no identifier on the wire: reviews are addressed by list position
    reviewer_name: str
    rating: int
    comment: str
    school_id: str

    class Config:
        from_attributes = True
        frozen = True
