"""Sort Engine tests - read-only ordering by column and direction.

Tests cover:
    - Ascending and descending by name and by timezone
    - Case-insensitive comparison
    - Stability of ties in both directions
    - Idempotence
    - Unsortable columns return store order
    - Input sequence never mutated
"""

from city_search.core.domain_types import SortColumn, SortDirection, SortState
from city_search.core.result_store import ResultStore
from city_search.core.sort_engine import sort_records
from tests.services.fake_fetcher import make_record


def _names(records) -> list[str]:
    return [r.name for r in records]


def _store(*records) -> ResultStore:
    store = ResultStore()
    store.extend(records)
    return store


def test_sort_by_name_ascending():
    records = [make_record("Paris"), make_record("Berlin"), make_record("London")]
    result = sort_records(records, SortState(SortColumn.NAME, SortDirection.ASC))
    assert _names(result) == ["Berlin", "London", "Paris"]


def test_sort_by_name_descending():
    records = [make_record("Paris"), make_record("Berlin"), make_record("London")]
    result = sort_records(records, SortState(SortColumn.NAME, SortDirection.DESC))
    assert _names(result) == ["Paris", "London", "Berlin"]


def test_sort_by_timezone_ascending():
    records = [
        make_record("A", timezone="Europe/Paris"),
        make_record("B", timezone="America/New_York"),
        make_record("C", timezone="Asia/Tokyo"),
    ]
    result = sort_records(records, SortState(SortColumn.TIMEZONE))
    assert _names(result) == ["B", "C", "A"]


def test_sort_by_timezone_descending():
    records = [
        make_record("A", timezone="Europe/Paris"),
        make_record("B", timezone="America/New_York"),
        make_record("C", timezone="Asia/Tokyo"),
    ]
    result = sort_records(
        records, SortState(SortColumn.TIMEZONE, SortDirection.DESC),
    )
    assert _names(result) == ["A", "C", "B"]


def test_sort_ignores_case():
    records = [make_record("london"), make_record("Berlin"), make_record("amsterdam")]
    result = sort_records(records, SortState(SortColumn.NAME))
    assert _names(result) == ["amsterdam", "Berlin", "london"]


def test_ties_keep_store_order_ascending():
    records = [
        make_record("X1", timezone="Europe/London"),
        make_record("X2", timezone="Asia/Tokyo"),
        make_record("X3", timezone="Europe/London"),
        make_record("X4", timezone="Europe/London"),
    ]
    result = sort_records(records, SortState(SortColumn.TIMEZONE))
    assert _names(result) == ["X2", "X1", "X3", "X4"]


def test_ties_keep_store_order_descending():
    records = [
        make_record("X1", timezone="Europe/London"),
        make_record("X2", timezone="Asia/Tokyo"),
        make_record("X3", timezone="Europe/London"),
    ]
    result = sort_records(
        records, SortState(SortColumn.TIMEZONE, SortDirection.DESC),
    )
    assert _names(result) == ["X1", "X3", "X2"]


def test_duplicate_names_keep_store_order():
    first = make_record("Springfield", record_id="a")
    second = make_record("Springfield", record_id="b")
    result = sort_records([first, second], SortState(SortColumn.NAME, SortDirection.DESC))
    assert [r.id for r in result] == ["a", "b"]


def test_sort_is_idempotent():
    records = [
        make_record("b", timezone="Z"), make_record("A", timezone="Z"),
        make_record("a", timezone="Y"), make_record("C", timezone="Y"),
    ]
    for column in (SortColumn.NAME, SortColumn.TIMEZONE):
        for direction in (SortDirection.ASC, SortDirection.DESC):
            state = SortState(column, direction)
            once = sort_records(records, state)
            assert sort_records(once, state) == once


def test_unsortable_column_returns_store_order():
    records = [make_record("Paris"), make_record("Berlin"), make_record("London")]
    for column in (SortColumn.POPULATION, SortColumn.COORDINATES, SortColumn.COUNTRY_NAME):
        result = sort_records(records, SortState(column, SortDirection.DESC))
        assert _names(result) == ["Paris", "Berlin", "London"]


def test_sort_does_not_mutate_store():
    store = _store(make_record("Paris"), make_record("Berlin"))
    sort_records(store, SortState(SortColumn.NAME))
    assert store.names() == ["Paris", "Berlin"]


def test_sort_empty_store():
    assert sort_records(ResultStore(), SortState()) == []
