import httpx
import pytest

from catalog.errors import DuplicateIdError, NotFoundError, StoreError, StoreUnavailableError, UnauthorizedError
from catalog.query import filter_by_hours
from catalog.similarity import similar_schools
from catalog.store_client import HttpRecordStoreClient
from main import app
from schemas.review_schema import ReviewCreate
from schemas.school_schema import SchoolCreate
from schemas.training_schema import TrainingCreate
from tests.fakes import make_token

pytestmark = pytest.mark.anyio


def _client(principal: str | None = None) -> HttpRecordStoreClient:
    token = make_token(principal) if principal else None
    return HttpRecordStoreClient("http://directory.test", token=token, transport=httpx.ASGITransport(app=app))


async def test_admin_writes_then_core_queries_over_http():
    async with _client("admin-1") as store:
        for sid, name, hours in [("a", "Ashram", 200), ("b", "Bali", 300), ("c", "Centre", 200)]:
            await store.create_school(SchoolCreate(id=sid, name=name, country="India"))
            await store.add_training(TrainingCreate(id=f"{sid}-t", hours=hours, school_id=sid))

        assert [s.id for s in await filter_by_hours(store, {200})] == ["a", "c"]
        assert [s.id for s in await similar_schools(store, "a", limit=1)] == ["c"]
        assert [s.id for s in await store.get_schools_by_location("India", None, None)] == ["a", "b", "c"]


async def test_domain_errors_are_typed():
    async with _client("admin-1") as admin:
        await admin.create_school(SchoolCreate(id="a", name="Ashram"))
        with pytest.raises(DuplicateIdError):
            await admin.create_school(SchoolCreate(id="a", name="Ashram"))
        with pytest.raises(NotFoundError):
            await admin.get_school("missing")

    async with _client() as anonymous:
        with pytest.raises(UnauthorizedError):
            await anonymous.delete_school("a")
        with pytest.raises(UnauthorizedError):
            await anonymous.add_review("a", ReviewCreate(reviewer_name="Mia", rating=5))

    async with _client("visitor-7") as visitor:
        review = await visitor.add_review("a", ReviewCreate(reviewer_name="Mia", rating=5))
        assert review.school_id == "a"
        assert [r.reviewer_name for r in await visitor.get_reviews_for_school("a")] == ["Mia"]


async def test_transport_failure_is_store_unavailable():
    def refuse(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    store = HttpRecordStoreClient("http://directory.test", transport=httpx.MockTransport(refuse))
    async with store:
        with pytest.raises(StoreUnavailableError):
            await filter_by_hours(store, {200})


@pytest.mark.parametrize("school_id", ["plain", "yoga#1", "a?b", "100% pure", "école"])
async def test_ids_with_url_characters_reach_their_own_records(school_id):
    async with _client("admin-1") as store:
        await store.create_school(SchoolCreate(id=school_id, name="Ashram"))
        await store.add_training(TrainingCreate(id=f"{school_id}-t", hours=200, school_id=school_id))
        await store.add_review(school_id, ReviewCreate(reviewer_name="Mia", rating=4))

        assert (await store.get_school(school_id)).id == school_id
        assert [t.hours for t in await store.get_trainings_by_school(school_id)] == [200]
        assert [r.rating for r in await store.get_reviews_for_school(school_id)] == [4]
        assert [s.id for s in await filter_by_hours(store, {200})] == [school_id]

        await store.delete_training(f"{school_id}-t")
        await store.delete_school(school_id)
        with pytest.raises(NotFoundError):
            await store.get_school(school_id)


async def test_unexpected_payload_is_a_store_error():
    async with _client() as store:
        # /schools/location answers with a list, never a single school
        with pytest.raises(StoreError):
            await store.get_school("location")


async def test_anonymous_http_write_maps_401_to_unauthorized():
    seen = []

    def deny(request: httpx.Request) -> httpx.Response:
        seen.append("authorization" in request.headers)
        return httpx.Response(401, json={"detail": "Unauthorized: sign in required"})

    store = HttpRecordStoreClient("http://directory.test", transport=httpx.MockTransport(deny))
    async with store:
        with pytest.raises(UnauthorizedError) as exc:
            await store.create_school(SchoolCreate(id="a", name="Ashram"))

    assert seen == [False]
    assert exc.value.method == "createSchool"
    assert "sign in required" in exc.value.message
