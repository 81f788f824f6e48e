"""Interaction state for the list page and the transitions that change it.

State is an immutable value; every transition returns a new one. A single
optional ``hovered_fragment`` means at most one word tooltip can be open
across the whole page.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import List, Optional

from catalog import ALL_CATEGORY, Catalog, Record
from search import filter_records


@dataclass(frozen=True)
class FragmentRef:
    record_id: int
    index: int


@dataclass(frozen=True)
class InteractionState:
    query: str = ""
    category: str = ALL_CATEGORY
    hovered_record: Optional[int] = None
    hovered_fragment: Optional[FragmentRef] = None


# -----------------------------
# TRANSITIONS
# -----------------------------
def set_query(state: InteractionState, query: str) -> InteractionState:
    return replace(state, query=query)


def set_category(state: InteractionState, category: str) -> InteractionState:
    return replace(state, category=category)


def enter_record(state: InteractionState, record_id: int) -> InteractionState:
    return replace(state, hovered_record=record_id)


def leave_record(state: InteractionState, record_id: Optional[int] = None) -> InteractionState:
    if record_id is not None and state.hovered_record != record_id:
        return state
    return replace(state, hovered_record=None)


def enter_fragment(state: InteractionState, record_id: int, index: int) -> InteractionState:
    return replace(state, hovered_fragment=FragmentRef(record_id, index))


def leave_fragment(state: InteractionState, record_id: Optional[int] = None, index: Optional[int] = None) -> InteractionState:
    """Clear the open tooltip. A leave for a word that is no longer open is ignored."""
    frag = state.hovered_fragment
    if frag is None:
        return state
    if record_id is not None and index is not None and frag != FragmentRef(record_id, index):
        return state
    return replace(state, hovered_fragment=None)


def toggle_fragment(state: InteractionState, record_id: int, index: int) -> InteractionState:
    """Click handler for a word button: open it, or close it when already open."""
    if state.hovered_fragment == FragmentRef(record_id, index):
        return leave_fragment(state)
    return enter_record(enter_fragment(state, record_id, index), record_id)


# -----------------------------
# QUERIES
# -----------------------------
def is_fragment_active(state: InteractionState, record_id: int, index: int) -> bool:
    return state.hovered_fragment == FragmentRef(record_id, index)


def active_gloss(state: InteractionState, catalog: Catalog) -> Optional[str]:
    """Meaning of the open word, if any."""
    frag = state.hovered_fragment
    if frag is None:
        return None
    record = catalog.get(frag.record_id)
    if record is None:
        return None
    gloss = record.gloss_at(frag.index)
    return gloss.meaning if gloss else None


@dataclass(frozen=True)
class ListView:
    records: List[Record]
    total: int
    categories: List[str]

    @property
    def is_empty(self) -> bool:
        return not self.records


def derive_view(catalog: Catalog, state: InteractionState) -> ListView:
    return ListView(
        records=filter_records(catalog.records, state.query, state.category),
        total=len(catalog),
        categories=catalog.categories,
    )


# -----------------------------
# SESSION STORAGE
# -----------------------------
def state_to_dict(state: InteractionState) -> dict:
    frag = state.hovered_fragment
    return {
        "query": state.query,
        "category": state.category,
        "hovered_record": state.hovered_record,
        "hovered_fragment": [frag.record_id, frag.index] if frag else None,
    }


def state_from_dict(d: dict) -> InteractionState:
    frag = d.get("hovered_fragment")
    return InteractionState(
        query=d.get("query", ""),
        category=d.get("category", ALL_CATEGORY),
        hovered_record=d.get("hovered_record"),
        hovered_fragment=FragmentRef(frag[0], frag[1]) if frag else None,
    )
