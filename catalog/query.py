"""Directory queries: the training-hour filter and the location listing."""

import asyncio
from collections.abc import Iterable, Sequence

from catalog.diagnostics import log_backend_call_failure
from catalog.store_client import RecordStoreClient
from schemas.school_schema import SchoolSchema
from schemas.training_schema import TrainingSchema
from utils.app_logger import get_logger

log = get_logger("catalog.query")


async def gather_trainings(
    store: RecordStoreClient,
    schools: Sequence[SchoolSchema],
) -> list[list[TrainingSchema]]:
    """
    Fetch every school's trainings concurrently.

    The result lines up with ``schools``. A school whose fetch failed gets an
    empty list instead of failing the whole batch.
    """
    results = await asyncio.gather(
        *(store.get_trainings_by_school(school.id) for school in schools),
        return_exceptions=True,
    )

    trainings: list[list[TrainingSchema]] = []
    for school, result in zip(schools, results):
        if isinstance(result, BaseException):
            if not isinstance(result, Exception):
                raise result
            log.warning("trainings unavailable for school %s: %r", school.id, result)
            trainings.append([])
        else:
            trainings.append(list(result))
    return trainings


async def list_all_schools(store: RecordStoreClient) -> list[SchoolSchema]:
    try:
        return await store.list_schools("")
    except Exception as e:
        log_backend_call_failure("listSchools", e)
        raise


async def filter_by_hours(
    store: RecordStoreClient,
    selected_hours: Iterable[int],
) -> list[SchoolSchema]:
    """
    Schools offering at least one training whose hours are in ``selected_hours``.

    With no hours selected the full listing comes back untouched and no
    per-school calls are made. Listing order is kept.
    """
    selected = set(selected_hours)
    schools = await list_all_schools(store)

    if not selected:
        return schools

    trainings = await gather_trainings(store, schools)
    return [
        school
        for school, school_trainings in zip(schools, trainings)
        if any(t.hours in selected for t in school_trainings)
    ]


async def schools_by_location(
    store: RecordStoreClient,
    country: str | None = None,
    state: str | None = None,
    city: str | None = None,
) -> list[SchoolSchema]:
    # the store does the matching; omitted levels are wildcards
    try:
        return await store.get_schools_by_location(country or None, state or None, city or None)
    except Exception as e:
        log_backend_call_failure("getSchoolsByLocation", e)
        raise
