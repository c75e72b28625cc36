from pydantic import BaseModel

from schemas.review_schema import ReviewSchema
from schemas.school_schema import SchoolSchema
from schemas.teacher_schema import TeacherSchema
from schemas.training_schema import TrainingSchema


class SchoolCardSchema(BaseModel):
    school: SchoolSchema
    display_location: str
    thumbnail_url: str
    location_route: str | None = None


class BreadcrumbSchema(BaseModel):
    label: str
    path: str


class LocationListingSchema(BaseModel):
    route: str
    breadcrumbs: list[BreadcrumbSchema]
    schools: list[SchoolCardSchema]


class SchoolDetailSchema(BaseModel):
    card: SchoolCardSchema
    teachers: list[TeacherSchema]
    trainings: list[TrainingSchema]
    reviews: list[ReviewSchema]
