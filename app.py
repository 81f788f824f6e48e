# app.py
# Run:
#   pip install -e .
#   streamlit run app.py

from __future__ import annotations

import logging
from typing import Callable

import streamlit as st

from catalog import ALL_CATEGORY, Catalog, CatalogError, Record, load_catalog
from clipboard import BrowserClipboard, copy_record
from config import settings
from interaction import (
    InteractionState,
    active_gloss,
    derive_view,
    enter_record,
    is_fragment_active,
    leave_record,
    set_category,
    set_query,
    state_from_dict,
    state_to_dict,
    toggle_fragment,
)
from render import (
    PAGE_CSS,
    SEARCH_PLACEHOLDER,
    card_html,
    empty_state_html,
    footer_html,
    header_html,
    stats_html,
)

logging.basicConfig(level=settings.log_level)
logger = logging.getLogger(__name__)


# -----------------------------
# DATA
# -----------------------------
@st.cache_resource
def get_catalog() -> Catalog:
    return load_catalog(settings.catalog_path)


# -----------------------------
# STATE
# -----------------------------
def get_state() -> InteractionState:
    return state_from_dict(st.session_state.view)


def apply(transition: Callable[..., InteractionState], *args) -> None:
    """All changes to the view state go through a named transition."""
    st.session_state.view = state_to_dict(transition(get_state(), *args))


def on_query_change() -> None:
    # typing elsewhere leaves the focused card
    apply(leave_record)
    apply(set_query, st.session_state.search_box)


def on_category_change() -> None:
    apply(leave_record)
    apply(set_category, st.session_state.category_box)


# -----------------------------
# STREAMLIT CONFIG + STATE INIT
# -----------------------------
st.set_page_config(page_title=settings.page_title, page_icon="🤲", layout="wide")

if "view" not in st.session_state:
    st.session_state.view = state_to_dict(InteractionState())

try:
    catalog = get_catalog()
except CatalogError as exc:
    logger.error("Cannot start: %s", exc)
    st.error(f"Katalog doa tidak dapat dimuatkan: {exc}")
    st.stop()

clipboard = BrowserClipboard(enabled=settings.clipboard_enabled)

st.markdown(PAGE_CSS, unsafe_allow_html=True)


# -----------------------------
# UI COMPONENTS
# -----------------------------
def search_bar(state: InteractionState, categories) -> None:
    c1, c2 = st.columns([4, 1])
    with c1:
        st.text_input(
            "Cari",
            value=state.query,
            key="search_box",
            placeholder=SEARCH_PLACEHOLDER,
            on_change=on_query_change,
            label_visibility="collapsed",
        )
    with c2:
        index = categories.index(state.category) if state.category in categories else 0
        st.selectbox(
            "Kategori",
            categories,
            index=index,
            key="category_box",
            format_func=lambda c: settings.all_label if c == ALL_CATEGORY else c,
            on_change=on_category_change,
            label_visibility="collapsed",
        )


def word_buttons(record: Record, state: InteractionState) -> None:
    open_here = state.hovered_fragment is not None and state.hovered_fragment.record_id == record.id
    with st.expander("Kata demi kata", expanded=open_here):
        cols = st.columns(min(len(record.glosses), 6))
        # right-to-left, like the Arabic line above
        for i, g in enumerate(record.glosses):
            with cols[(len(cols) - 1) - (i % len(cols))]:
                active = is_fragment_active(state, record.id, i)
                label = f"✓ {g.fragment}" if active else g.fragment
                if st.button(label, key=f"word_{record.id}_{i}", use_container_width=True):
                    apply(toggle_fragment, record.id, i)
                    st.rerun()
        if open_here:
            st.info(active_gloss(state, catalog))


def dua_card(record: Record, state: InteractionState) -> None:
    st.markdown(card_html(record, state), unsafe_allow_html=True)

    if record.has_glosses:
        word_buttons(record, state)

    if st.button("📋 Salin Doa", key=f"copy_{record.id}", on_click=apply, args=(enter_record, record.id)):
        if copy_record(record, clipboard):
            st.info("Menyalin doa ke papan keratan…")
        else:
            st.warning("Gagal menyalin. Akses papan keratan tidak dibenarkan.")


# -----------------------------
# PAGE
# -----------------------------
def page_list() -> None:
    st.markdown(header_html(settings.page_title), unsafe_allow_html=True)

    state = get_state()
    view = derive_view(catalog, state)
    search_bar(state, view.categories)

    st.markdown(stats_html(len(view.records), view.total), unsafe_allow_html=True)

    if view.is_empty:
        st.markdown(empty_state_html(), unsafe_allow_html=True)
    else:
        cols = st.columns(2)
        for idx, record in enumerate(view.records):
            with cols[idx % 2]:
                dua_card(record, state)

    st.markdown(footer_html(), unsafe_allow_html=True)


page_list()
