"""Similar-school ranking by overlapping training hours."""

from collections.abc import Iterable, Set

from catalog.query import gather_trainings, list_all_schools
from catalog.store_client import RecordStoreClient
from schemas.school_schema import SchoolSchema
from schemas.training_schema import TrainingSchema
from utils.app_logger import get_logger

log = get_logger("catalog.similarity")

DEFAULT_LIMIT = 4


def match_score(reference_hours: Set[int], trainings: Iterable[TrainingSchema]) -> int:
    """Number of trainings whose hours appear in ``reference_hours``.

    Duplicates count once each: reference {200, 300} against trainings
    [200, 200, 500] scores 2.
    """
    return sum(1 for t in trainings if t.hours in reference_hours)


async def similar_schools(
    store: RecordStoreClient,
    school_id: str,
    limit: int = DEFAULT_LIMIT,
) -> list[SchoolSchema]:
    if limit <= 0:
        return []

    others = [s for s in await list_all_schools(store) if s.id != school_id]
    if not others:
        return []

    try:
        reference = await store.get_trainings_by_school(school_id)
    except Exception as e:
        log.warning("trainings unavailable for reference school %s, ranking skipped: %r", school_id, e)
        return others[:limit]

    reference_hours = {t.hours for t in reference}
    trainings = await gather_trainings(store, others)
    scores = [match_score(reference_hours, school_trainings) for school_trainings in trainings]

    # sorted() is stable, so equal scores keep listing order
    ranked = sorted(zip(others, scores), key=lambda pair: pair[1], reverse=True)
    return [school for school, _ in ranked[:limit]]
