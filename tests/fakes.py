import asyncio
import fnmatch

from jose import jwt

from catalog.errors import NotFoundError, StoreUnavailableError
from schemas.review_schema import ReviewSchema
from schemas.school_schema import SchoolSchema
from schemas.teacher_schema import TeacherSchema
from schemas.training_schema import TrainingSchema


def make_token(principal: str, issuer: str = "https://id.test") -> str:
    return jwt.encode({"sub": principal, "iss": issuer}, "test-secret", algorithm="HS256")


def school(school_id: str, name: str | None = None, **fields) -> SchoolSchema:
    return SchoolSchema(id=school_id, name=name or school_id.upper(), **fields)


class FakeStore:
    """In-memory record store with per-school failure injection."""

    def __init__(self, schools, trainings=None, *, failing=(), fail_listing=False, failing_parts=()):
        self.schools = list(schools)
        self.trainings = trainings or {}
        self.failing = set(failing)
        self.fail_listing = fail_listing
        self.failing_parts = set(failing_parts)
        self.training_calls: list[str] = []
        self.location_calls: list[tuple] = []

    async def list_schools(self, name_query: str = ""):
        if self.fail_listing:
            raise StoreUnavailableError("listSchools: connection refused", method="listSchools")
        return [s for s in self.schools if name_query.lower() in s.name.lower()]

    async def get_schools_by_location(self, country=None, state=None, city=None):
        self.location_calls.append((country, state, city))
        if self.fail_listing:
            raise StoreUnavailableError("getSchoolsByLocation: connection refused", method="getSchoolsByLocation")
        return [
            s for s in self.schools
            if (country is None or s.country == country)
            and (state is None or s.state == state)
            and (city is None or s.city == city)
        ]

    async def get_trainings_by_school(self, school_id: str):
        self.training_calls.append(school_id)
        await asyncio.sleep(0)
        if school_id in self.failing:
            raise StoreUnavailableError(f"getTrainingsBySchool: {school_id} timed out", method="getTrainingsBySchool")
        return [
            TrainingSchema(id=f"{school_id}-{i}", hours=hours, description="", school_id=school_id)
            for i, hours in enumerate(self.trainings.get(school_id, []))
        ]

    def _fail_if(self, part: str, op: str):
        if part in self.failing_parts:
            raise StoreUnavailableError(f"{op}: connection reset", method=op)

    async def get_school(self, school_id: str):
        for s in self.schools:
            if s.id == school_id:
                return s
        raise NotFoundError(f"getSchool: {school_id} not found", method="getSchool")

    async def get_teachers_by_school(self, school_id: str):
        self._fail_if("teachers", "getTeachersBySchool")
        return [TeacherSchema(id=f"{school_id}-t", name="Anand", specialization="Hatha", school_id=school_id)]

    async def get_reviews_for_school(self, school_id: str):
        self._fail_if("reviews", "getReviewsForSchool")
        return [ReviewSchema(reviewer_name="Mia", rating=5, comment="", school_id=school_id)]


class FakeRedis:
    """The slice of redis.Redis the directory cache uses, with TTLs recorded."""

    def __init__(self):
        self.values: dict[str, str] = {}
        self.ttls: dict[str, int] = {}

    def get(self, key):
        return self.values.get(key)

    def setex(self, key, ttl, value):
        self.values[key] = value
        self.ttls[key] = ttl

    def scan_iter(self, match="*"):
        return iter([k for k in self.values if fnmatch.fnmatchcase(k, match)])

    def delete(self, *keys):
        for key in keys:
            self.values.pop(key, None)
            self.ttls.pop(key, None)
        return len(keys)
