from __future__ import annotations

from typing import Iterable, List

from catalog import ALL_CATEGORY, Record


# -----------------------------
# PREDICATES
# -----------------------------
def matches_category(record: Record, category: str) -> bool:
    return category == ALL_CATEGORY or record.category == category


def matches_query(record: Record, query: str) -> bool:
    """Arabic is matched verbatim; the Latin-script fields ignore case."""
    if query in record.primary_text:
        return True
    q = query.lower()
    return q in record.transliteration.lower() or q in record.translation.lower()


# -----------------------------
# FILTER
# -----------------------------
def filter_records(records: Iterable[Record], query: str = "", category: str = ALL_CATEGORY) -> List[Record]:
    """Records matching both the category and the query, in catalog order."""
    return [r for r in records if matches_category(r, category) and matches_query(r, query)]
