import asyncio
from typing import Awaitable, TypeVar

from fastapi import APIRouter, Depends, Query
from redis import Redis
from starlette.concurrency import run_in_threadpool

from catalog.location import build_location_breadcrumbs, build_location_route, format_location
from catalog.query import filter_by_hours, schools_by_location
from catalog.similarity import DEFAULT_LIMIT, similar_schools
from catalog.store_client import RecordStoreClient, SqlRecordStoreClient
from catalog.thumbnails import school_thumbnail
from schemas.directory_schema import (
    BreadcrumbSchema,
    LocationListingSchema,
    SchoolCardSchema,
    SchoolDetailSchema,
)
from schemas.school_schema import SchoolSchema
from schemas.user_schema import Identity
from utils.app_logger import get_logger
from utils.database import SessionLocal
from utils.jwt_utils import get_identity
from utils.redis_utils import DIRECTORY_CACHE_TTL, cache_get, cache_set, get_redis_client

directory_router = APIRouter()

log = get_logger("directory")

SIMILAR_CACHE_TTL = 2 * DIRECTORY_CACHE_TTL

T = TypeVar("T")


def get_store(identity: Identity = Depends(get_identity)) -> RecordStoreClient:
    return SqlRecordStoreClient(SessionLocal, identity)


def to_card(school: SchoolSchema) -> SchoolCardSchema:
    route = build_location_route(school.country, school.state, school.city) if school.country else None
    return SchoolCardSchema(
        school=school,
        display_location=format_location(school),
        thumbnail_url=school_thumbnail(school.id),
        location_route=route,
    )


async def _or_empty(call: Awaitable[list[T]], what: str) -> list[T]:
    try:
        return await call
    except Exception as e:
        log.warning("%s unavailable, showing none: %r", what, e)
        return []


@directory_router.get("/schools", response_model=list[SchoolCardSchema])
async def directory_schools(
    hours: list[int] = Query(default=[], description="예: ?hours=200&hours=300"),
    store: RecordStoreClient = Depends(get_store),
    cache: Redis | None = Depends(get_redis_client),
):
    key = "hours:" + ",".join(str(h) for h in sorted(set(hours)))
    cached = await run_in_threadpool(cache_get, cache, key)
    if cached is not None:
        return cached

    cards = [to_card(s) for s in await filter_by_hours(store, hours)]
    await run_in_threadpool(cache_set, cache, key, [c.model_dump() for c in cards])
    return cards


@directory_router.get("/location", response_model=LocationListingSchema)
async def directory_location(
    country: str | None = None,
    state: str | None = None,
    city: str | None = None,
    store: RecordStoreClient = Depends(get_store),
):
    schools = await schools_by_location(store, country, state, city)
    return LocationListingSchema(
        route=build_location_route(country, state, city),
        breadcrumbs=[BreadcrumbSchema(label=b.label, path=b.path) for b in build_location_breadcrumbs(country, state, city)],
        schools=[to_card(s) for s in schools],
    )


@directory_router.get("/schools/{school_id}", response_model=SchoolDetailSchema)
async def directory_school_detail(school_id: str, store: RecordStoreClient = Depends(get_store)):
    school, teachers, trainings, reviews = await asyncio.gather(
        store.get_school(school_id),
        _or_empty(store.get_teachers_by_school(school_id), "teachers"),
        _or_empty(store.get_trainings_by_school(school_id), "trainings"),
        store.get_reviews_for_school(school_id),
    )
    return SchoolDetailSchema(card=to_card(school), teachers=teachers, trainings=trainings, reviews=reviews)


@directory_router.get("/schools/{school_id}/similar", response_model=list[SchoolCardSchema])
async def directory_similar_schools(
    school_id: str,
    limit: int = Query(DEFAULT_LIMIT, ge=0, le=50),
    store: RecordStoreClient = Depends(get_store),
    cache: Redis | None = Depends(get_redis_client),
):
    key = f"similar:{school_id}:{limit}"
    cached = await run_in_threadpool(cache_get, cache, key)
    if cached is not None:
        return cached

    cards = [to_card(s) for s in await similar_schools(store, school_id, limit)]
    await run_in_threadpool(cache_set, cache, key, [c.model_dump() for c in cards], ttl=SIMILAR_CACHE_TTL)
    return cards
