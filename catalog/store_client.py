"""
Record store clients.

``RecordStoreClient`` is the async contract the catalog queries are written
against. ``HttpRecordStoreClient`` talks to the directory API over HTTP;
``SqlRecordStoreClient`` calls the CRUD layer in-process. Both take the
caller's identity at construction time.
"""

import os
from typing import Callable, Protocol, TypeVar
from urllib.parse import quote

import httpx
from dotenv import load_dotenv
from fastapi import HTTPException
from pydantic import ValidationError
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from starlette.concurrency import run_in_threadpool

import crud.review as review_crud
import crud.school as school_crud
import crud.teacher as teacher_crud
import crud.training as training_crud
from catalog.errors import StoreError, StoreUnavailableError, error_for_status
from schemas.review_schema import ReviewCreate, ReviewSchema
from schemas.school_schema import SchoolCreate, SchoolSchema, SchoolUpdate
from schemas.teacher_schema import TeacherCreate, TeacherSchema
from schemas.training_schema import TrainingCreate, TrainingSchema
from schemas.user_schema import Identity

load_dotenv()

STORE_BASE_URL = os.getenv("STORE_BASE_URL", "http://localhost:8000")
STORE_TIMEOUT = float(os.getenv("STORE_TIMEOUT", "10"))

T = TypeVar("T")


class RecordStoreClient(Protocol):
    async def list_schools(self, name_query: str = "") -> list[SchoolSchema]: ...

    async def get_schools_by_location(
        self,
        country: str | None = None,
        state: str | None = None,
        city: str | None = None,
    ) -> list[SchoolSchema]: ...

    async def get_school(self, school_id: str) -> SchoolSchema: ...

    async def get_trainings_by_school(self, school_id: str) -> list[TrainingSchema]: ...

    async def get_teachers_by_school(self, school_id: str) -> list[TeacherSchema]: ...

    async def get_reviews_for_school(self, school_id: str) -> list[ReviewSchema]: ...

    async def create_school(self, payload: SchoolCreate) -> SchoolSchema: ...

    async def update_school(self, school_id: str, payload: SchoolUpdate) -> SchoolSchema: ...

    async def delete_school(self, school_id: str) -> None: ...

    async def add_teacher(self, payload: TeacherCreate) -> TeacherSchema: ...

    async def delete_teacher(self, teacher_id: str) -> None: ...

    async def add_training(self, payload: TrainingCreate) -> TrainingSchema: ...

    async def delete_training(self, training_id: str) -> None: ...

    async def add_review(self, school_id: str, payload: ReviewCreate) -> ReviewSchema: ...


def _segment(record_id: str) -> str:
    return quote(record_id, safe="")


def _parse(op: str, schema, payload, *, many: bool = False):
    try:
        if many:
            return [schema.model_validate(item) for item in payload]
        return schema.model_validate(payload)
    except (ValidationError, TypeError) as e:
        raise StoreError(f"{op}: unexpected response payload: {e}", method=op) from e


def _drop_none(params: dict) -> dict:
    return {k: v for k, v in params.items() if v is not None}


class HttpRecordStoreClient:
    def __init__(
        self,
        base_url: str = STORE_BASE_URL,
        *,
        token: str | None = None,
        timeout: float = STORE_TIMEOUT,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        headers = {"Authorization": f"Bearer {token}"} if token else {}
        self._client = httpx.AsyncClient(
            base_url=base_url,
            headers=headers,
            timeout=timeout,
            transport=transport,
        )

    async def __aenter__(self) -> "HttpRecordStoreClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    async def _request(self, method: str, path: str, *, op: str, **kwargs) -> httpx.Response:
        try:
            response = await self._client.request(method, path, **kwargs)
        except httpx.RequestError as e:
            raise StoreUnavailableError(f"{op}: {e}", method=op) from e

        if response.is_error:
            try:
                detail = response.json().get("detail", response.text)
            except ValueError:
                detail = response.text
            raise error_for_status(response.status_code, f"{op}: {detail}", method=op)
        return response

    async def list_schools(self, name_query: str = "") -> list[SchoolSchema]:
        r = await self._request("GET", "/schools", op="listSchools", params={"q": name_query})
        return _parse("listSchools", SchoolSchema, r.json(), many=True)

    async def get_schools_by_location(
        self,
        country: str | None = None,
        state: str | None = None,
        city: str | None = None,
    ) -> list[SchoolSchema]:
        params = _drop_none({"country": country, "state": state, "city": city})
        r = await self._request("GET", "/schools/location", op="getSchoolsByLocation", params=params)
        return _parse("getSchoolsByLocation", SchoolSchema, r.json(), many=True)

    async def get_school(self, school_id: str) -> SchoolSchema:
        r = await self._request("GET", f"/schools/{_segment(school_id)}", op="getSchool")
        return _parse("getSchool", SchoolSchema, r.json())

    async def get_trainings_by_school(self, school_id: str) -> list[TrainingSchema]:
        r = await self._request("GET", f"/schools/{_segment(school_id)}/trainings", op="getTrainingsBySchool")
        return _parse("getTrainingsBySchool", TrainingSchema, r.json(), many=True)

    async def get_teachers_by_school(self, school_id: str) -> list[TeacherSchema]:
        r = await self._request("GET", f"/schools/{_segment(school_id)}/teachers", op="getTeachersBySchool")
        return _parse("getTeachersBySchool", TeacherSchema, r.json(), many=True)

    async def get_reviews_for_school(self, school_id: str) -> list[ReviewSchema]:
        r = await self._request("GET", f"/schools/{_segment(school_id)}/reviews", op="getReviewsForSchool")
        return _parse("getReviewsForSchool", ReviewSchema, r.json(), many=True)

    async def create_school(self, payload: SchoolCreate) -> SchoolSchema:
        r = await self._request("POST", "/schools", op="createSchool", json=payload.model_dump())
        return _parse("createSchool", SchoolSchema, r.json())

    async def update_school(self, school_id: str, payload: SchoolUpdate) -> SchoolSchema:
        r = await self._request("PUT", f"/schools/{_segment(school_id)}", op="updateSchool", json=payload.model_dump())
        return _parse("updateSchool", SchoolSchema, r.json())

    async def delete_school(self, school_id: str) -> None:
        await self._request("DELETE", f"/schools/{_segment(school_id)}", op="deleteSchool")

    async def add_teacher(self, payload: TeacherCreate) -> TeacherSchema:
        r = await self._request("POST", "/teachers", op="addTeacher", json=payload.model_dump())
        return _parse("addTeacher", TeacherSchema, r.json())

    async def delete_teacher(self, teacher_id: str) -> None:
        await self._request("DELETE", f"/teachers/{_segment(teacher_id)}", op="deleteTeacher")

    async def add_training(self, payload: TrainingCreate) -> TrainingSchema:
        r = await self._request("POST", "/trainings", op="addTraining", json=payload.model_dump())
        return _parse("addTraining", TrainingSchema, r.json())

    async def delete_training(self, training_id: str) -> None:
        await self._request("DELETE", f"/trainings/{_segment(training_id)}", op="deleteTraining")

    async def add_review(self, school_id: str, payload: ReviewCreate) -> ReviewSchema:
        r = await self._request("POST", f"/schools/{_segment(school_id)}/reviews", op="addReview", json=payload.model_dump())
        return _parse("addReview", ReviewSchema, r.json())


class SqlRecordStoreClient:
    """
    In-process client over the CRUD functions.

    Every call opens its own session inside the threadpool, so concurrent
    calls never share a session.
    """

    def __init__(self, session_factory: Callable[[], Session], identity: Identity | None = None):
        self._session_factory = session_factory
        self._identity = identity or Identity.anonymous()

    async def _call(self, op: str, fn: Callable[[Session], T]) -> T:
        def run() -> T:
            db = self._session_factory()
            try:
                return fn(db)
            finally:
                db.close()

        try:
            return await run_in_threadpool(run)
        except HTTPException as e:
            raise error_for_status(e.status_code, f"{op}: {e.detail}", method=op) from e
        except SQLAlchemyError as e:
            raise StoreUnavailableError(f"{op}: {e}", method=op) from e

    async def list_schools(self, name_query: str = "") -> list[SchoolSchema]:
        return await self._call(
            "listSchools",
            lambda db: [SchoolSchema.model_validate(s) for s in school_crud.search_schools_by_name(db, name_query)],
        )

    async def get_schools_by_location(
        self,
        country: str | None = None,
        state: str | None = None,
        city: str | None = None,
    ) -> list[SchoolSchema]:
        return await self._call(
            "getSchoolsByLocation",
            lambda db: [
                SchoolSchema.model_validate(s)
                for s in school_crud.get_schools_by_location(db, country, state, city)
            ],
        )

    async def get_school(self, school_id: str) -> SchoolSchema:
        return await self._call(
            "getSchool",
            lambda db: SchoolSchema.model_validate(school_crud.get_school_by_id(db, school_id)),
        )

    async def get_trainings_by_school(self, school_id: str) -> list[TrainingSchema]:
        return await self._call(
            "getTrainingsBySchool",
            lambda db: [TrainingSchema.model_validate(t) for t in training_crud.get_trainings_by_school(db, school_id)],
        )

    async def get_teachers_by_school(self, school_id: str) -> list[TeacherSchema]:
        return await self._call(
            "getTeachersBySchool",
            lambda db: [TeacherSchema.model_validate(t) for t in teacher_crud.get_teachers_by_school(db, school_id)],
        )

    async def get_reviews_for_school(self, school_id: str) -> list[ReviewSchema]:
        return await self._call(
            "getReviewsForSchool",
            lambda db: [ReviewSchema.model_validate(r) for r in review_crud.get_reviews_for_school(db, school_id)],
        )

    async def create_school(self, payload: SchoolCreate) -> SchoolSchema:
        return await self._call(
            "createSchool",
            lambda db: SchoolSchema.model_validate(school_crud.create_school(db, self._identity, payload)),
        )

    async def update_school(self, school_id: str, payload: SchoolUpdate) -> SchoolSchema:
        return await self._call(
            "updateSchool",
            lambda db: SchoolSchema.model_validate(school_crud.update_school(db, self._identity, school_id, payload)),
        )

    async def delete_school(self, school_id: str) -> None:
        await self._call("deleteSchool", lambda db: school_crud.delete_school(db, self._identity, school_id))

    async def add_teacher(self, payload: TeacherCreate) -> TeacherSchema:
        return await self._call(
            "addTeacher",
            lambda db: TeacherSchema.model_validate(teacher_crud.add_teacher(db, self._identity, payload)),
        )

    async def delete_teacher(self, teacher_id: str) -> None:
        await self._call("deleteTeacher", lambda db: teacher_crud.delete_teacher(db, self._identity, teacher_id))

    async def add_training(self, payload: TrainingCreate) -> TrainingSchema:
        return await self._call(
            "addTraining",
            lambda db: TrainingSchema.model_validate(training_crud.add_training(db, self._identity, payload)),
        )

    async def delete_training(self, training_id: str) -> None:
        await self._call("deleteTraining", lambda db: training_crud.delete_training(db, self._identity, training_id))

    async def add_review(self, school_id: str, payload: ReviewCreate) -> ReviewSchema:
        return await self._call(
            "addReview",
            lambda db: ReviewSchema.model_validate(review_crud.add_review(db, self._identity, school_id, payload)),
        )
