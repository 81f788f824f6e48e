from __future__ import annotations

import pytest

from catalog import ALL_CATEGORY
from search import filter_records, matches_category, matches_query
from conftest import make_record

QUERIES = ["", "Rabbana", "allah", "ALLAH", "رَبِّ", "neraka", "zzz-no-match", "Ya Tuhan"]


def test_all_and_empty_query_returns_catalog(catalog) -> None:
    result = filter_records(catalog.records, "", ALL_CATEGORY)
    assert result == list(catalog.records)
    assert len(result) == 40


def test_rabbana(catalog) -> None:
    result = filter_records(catalog.records, "Rabbana", ALL_CATEGORY)
    assert [r.id for r in result] == [2, 6, 10, 15, 19, 23, 27, 31, 35, 39]
    for r in result:
        assert "rabbana" in r.transliteration.lower() or "rabbana" in r.translation.lower() or "Rabbana" in r.primary_text


def test_category_only(catalog) -> None:
    result = filter_records(catalog.records, "", "Ibadah")
    assert [r.id for r in result] == [1, 17]
    assert [r.id for r in filter_records(catalog.records, "", "Perlindungan")] == [12, 13, 23, 31, 37]


def test_no_match_is_empty(catalog) -> None:
    for cat in catalog.categories:
        assert filter_records(catalog.records, "zzz-no-match", cat) == []


def test_arabic_is_verbatim(catalog) -> None:
    ids = [r.id for r in filter_records(catalog.records, "رَبِّ", ALL_CATEGORY)]
    assert ids == [4, 8, 13, 14, 17, 21, 25, 29, 33, 37]
    # unvoweled form does not match voweled text
    assert filter_records(catalog.records, "رب", ALL_CATEGORY) != filter_records(catalog.records, "رَبِّ", ALL_CATEGORY)


def test_case_insensitive_latin_fields() -> None:
    r = make_record(1, transliteration="Allahumma ballighni Ramadan", translation="Ya Allah, sampaikanlah aku")
    assert matches_query(r, "RAMADAN")
    assert matches_query(r, "sampaikanLAH")
    assert not matches_query(r, "Syaaban")


def test_category_is_case_sensitive() -> None:
    r = make_record(1, "Ibadah")
    assert matches_category(r, "Ibadah")
    assert matches_category(r, ALL_CATEGORY)
    assert not matches_category(r, "ibadah")


def test_unknown_category_yields_nothing(catalog) -> None:
    assert filter_records(catalog.records, "", "Tiada") == []


@pytest.mark.parametrize("query", QUERIES)
def test_result_is_exactly_the_matching_records(catalog, query) -> None:
    for cat in catalog.categories:
        result = filter_records(catalog.records, query, cat)
        ids = {r.id for r in result}
        for r in catalog.records:
            both = matches_category(r, cat) and matches_query(r, query)
            assert both == (r.id in ids)
        # stable: catalog order preserved
        assert [r.id for r in result] == sorted(ids)


@pytest.mark.parametrize("query", QUERIES)
def test_filter_is_idempotent(catalog, query) -> None:
    for cat in ("Am", "Hidayah", ALL_CATEGORY):
        once = filter_records(catalog.records, query, cat)
        assert filter_records(once, query, cat) == once


def test_filter_does_not_touch_input(catalog) -> None:
    before = list(catalog.records)
    filter_records(catalog.records, "allah", "Am")
    assert list(catalog.records) == before
