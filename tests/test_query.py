import pytest

from catalog.errors import StoreUnavailableError
from catalog.query import filter_by_hours, gather_trainings, schools_by_location
from tests.fakes import FakeStore, school

pytestmark = pytest.mark.anyio


def _ids(schools):
    return [s.id for s in schools]


async def test_no_hours_returns_everything_without_detail_calls():
    store = FakeStore([school("c"), school("a"), school("b")], {"a": [200]})

    result = await filter_by_hours(store, set())

    assert _ids(result) == ["c", "a", "b"]
    assert store.training_calls == []


async def test_keeps_only_schools_with_a_matching_training():
    store = FakeStore([school("a"), school("b"), school("c")], {"a": [200], "b": [300], "c": []})

    assert _ids(await filter_by_hours(store, {200})) == ["a"]
    assert _ids(await filter_by_hours(store, [300, 200])) == ["a", "b"]
    assert await filter_by_hours(store, {500}) == []


async def test_every_school_fetched_once_when_filtering():
    store = FakeStore([school("a"), school("b"), school("c")], {"a": [200]})

    await filter_by_hours(store, {200})

    assert sorted(store.training_calls) == ["a", "b", "c"]


async def test_one_failing_school_does_not_fail_the_filter():
    store = FakeStore(
        [school("a"), school("b"), school("c")],
        {"a": [200], "b": [200], "c": [200]},
        failing={"b"},
    )

    assert _ids(await filter_by_hours(store, {200})) == ["a", "c"]


async def test_listing_failure_propagates():
    store = FakeStore([school("a")], fail_listing=True)

    with pytest.raises(StoreUnavailableError):
        await filter_by_hours(store, {200})
    with pytest.raises(StoreUnavailableError):
        await filter_by_hours(store, set())


async def test_gather_trainings_lines_up_with_schools():
    store = FakeStore([school("a"), school("b")], {"a": [200, 300]}, failing={"b"})

    trainings = await gather_trainings(store, store.schools)

    assert [[t.hours for t in ts] for ts in trainings] == [[200, 300], []]


async def test_location_query_delegates_with_wildcards():
    india = school("a", country="India", state="Goa")
    store = FakeStore([india, school("b", country="Indonesia")])

    assert _ids(await schools_by_location(store, "India")) == ["a"]
    assert _ids(await schools_by_location(store, "", "", "")) == ["a", "b"]
    assert store.location_calls == [("India", None, None), (None, None, None)]


async def test_location_failure_propagates():
    store = FakeStore([], fail_listing=True)

    with pytest.raises(StoreUnavailableError):
        await schools_by_location(store, "India")
