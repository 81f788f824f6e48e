"""HTML fragments for the list page.

Everything here is a pure string builder so the page layout can be checked
without a running Streamlit server. All catalog text goes through ``esc``.
"""

from __future__ import annotations

from typing import Optional

from catalog import Record
from interaction import InteractionState

SUBTITLE = "Kumpulan doa-doa mustajab dengan makna dalam Bahasa Melayu"
SEARCH_PLACEHOLDER = "Cari doa (Arab, transliterasi, atau Melayu)..."
COPY_HINT = "Klik untuk salin"
EMPTY_TITLE = "Tiada doa dijumpai"
EMPTY_HINT = "Cuba cari dengan kata kunci yang berbeza atau tukar kategori"
FOOTER_QUOTE = (
    "“Dan apabila hamba-hamba-Ku bertanya kepadamu tentang Aku, maka (jawablah), "
    "bahawasanya Aku adalah dekat. Aku mengabulkan permohonan orang yang berdoa "
    "apabila ia memohon kepada-Ku.”"
)
FOOTER_SOURCE = "- Al-Quran, Surah Al-Baqarah: 186"


PAGE_CSS = """
<style>
.block-container { padding-top: 2.0rem; padding-bottom: 2.0rem; max-width: 1100px; }

.hero {
  background: linear-gradient(90deg, #16a34a, #2563eb);
  color: #fff; border-radius: 18px; padding: 28px 20px; text-align: center; margin-bottom: 1.2rem;
}
.hero .h1 { font-size: 2.3rem; font-weight: 900; margin: 0 0 0.3rem 0; }
.hero .sub { font-size: 1.1rem; color: #dcfce7; }

.stats { text-align: center; margin: 0.6rem 0 1.2rem 0; font-size: 1.05rem; color: #4b5563; }
.stats b.shown { color: #16a34a; }

.dua-card {
  border: 1px solid #e5e7eb; border-left: 4px solid #22c55e; border-radius: 12px;
  padding: 16px 18px; background: #fff; color: #111827; margin-bottom: 0.4rem;
}
.dua-card.focused { box-shadow: 0 10px 24px rgba(0,0,0,.12); }
.dua-head { display:flex; justify-content:space-between; align-items:center; gap: 8px; }
.dua-title { font-size: 1.1rem; font-weight: 700; color: #15803d; }
.chip { font-size: 0.75rem; padding: 2px 8px; border-radius: 999px; margin-left: 4px; }
.chip.cat { background: #dbeafe; color: #1e40af; }
.chip.src { background: #dcfce7; color: #166534; }

.arabic {
  direction: rtl; text-align: right; font-family: 'Amiri', serif; font-size: 1.6rem;
  line-height: 2.4; color: #166534; background: linear-gradient(90deg, #f0fdf4, #eff6ff);
  border: 1px solid #dcfce7; border-radius: 10px; padding: 12px 14px; margin: 12px 0;
}
.arabic .word { position: relative; display: inline-block; padding: 0 4px; border-radius: 4px; cursor: pointer; }
.arabic .word:hover, .arabic .word.active { background: rgba(187,247,208,.6); }
.arabic .gloss {
  visibility: hidden; position: absolute; bottom: 100%; left: 50%; transform: translateX(-50%);
  background: #1f2937; color: #fff; font-family: sans-serif; font-size: 0.8rem; line-height: 1.3;
  padding: 3px 8px; border-radius: 4px; white-space: nowrap; z-index: 20;
}
.arabic .word:hover .gloss, .arabic .word.active .gloss { visibility: visible; }

.label { font-size: 0.8rem; font-weight: 600; margin-bottom: 2px; }
.translit { background: #eff6ff; border: 1px solid #dbeafe; border-radius: 10px; padding: 8px 12px; margin-bottom: 10px; }
.translit .label { color: #1d4ed8; }
.translit p { font-style: italic; color: #1e40af; margin: 0; }
.maksud { position: relative; border: 2px solid #bbf7d0; border-radius: 10px; padding: 10px 12px; }
.maksud .label { color: #15803d; }
.maksud p { color: #1f2937; margin: 0; }
.copy-hint {
  position: absolute; top: 6px; right: 8px; background: #16a34a; color: #fff;
  font-size: 0.7rem; padding: 2px 6px; border-radius: 4px;
}

.empty { text-align: center; padding: 48px 0; }
.empty .icon { font-size: 3.5rem; }
.empty h3 { color: #4b5563; }
.empty p { color: #6b7280; }

.footer { background: #166534; color: #fff; border-radius: 14px; padding: 22px; text-align: center; margin-top: 2rem; }
.footer .src { color: #bbf7d0; }
</style>
"""


def esc(text: str) -> str:
    return (
        text.replace("&", "&amp;")
        .replace("<", "&lt;")
        .replace(">", "&gt;")
        .replace('"', "&quot;")
    )


# -----------------------------
# PAGE PIECES
# -----------------------------
def header_html(title: str) -> str:
    return (
        '<div class="hero">'
        f'<div class="h1">📖 {esc(title)} ❤️</div>'
        f'<div class="sub">{esc(SUBTITLE)}</div>'
        "</div>"
    )


def stats_html(shown: int, total: int) -> str:
    return (
        '<div class="stats">'
        f'Menunjukkan <b class="shown">{shown}</b> daripada <b>{total}</b> doa'
        "</div>"
    )


def empty_state_html() -> str:
    return (
        '<div class="empty">'
        '<div class="icon">🤲</div>'
        f"<h3>{EMPTY_TITLE}</h3>"
        f"<p>{EMPTY_HINT}</p>"
        "</div>"
    )


def footer_html() -> str:
    return (
        '<div class="footer">'
        f"<p>{esc(FOOTER_QUOTE)}</p>"
        f'<p class="src">{esc(FOOTER_SOURCE)}</p>'
        "</div>"
    )


# -----------------------------
# CARD
# -----------------------------
def arabic_html(record: Record, active_index: Optional[int] = None) -> str:
    """Arabic block. Words get hover tooltips only when the record has glosses."""
    if not record.has_glosses:
        return f'<div class="arabic" dir="rtl">{esc(record.primary_text)}</div>'

    spans = []
    for i, g in enumerate(record.glosses):
        cls = "word active" if i == active_index else "word"
        spans.append(
            f'<span class="{cls}" data-index="{i}">{esc(g.fragment)}'
            f'<span class="gloss">{esc(g.meaning)}</span></span>'
        )
    return f'<div class="arabic" dir="rtl">{" ".join(spans)}</div>'


def card_html(record: Record, state: InteractionState) -> str:
    focused = state.hovered_record == record.id
    frag = state.hovered_fragment
    active_index = frag.index if frag and frag.record_id == record.id else None

    hint = f'<div class="copy-hint">{COPY_HINT}</div>' if focused else ""
    source = f'<span class="chip src">{esc(record.citation)}</span>' if record.citation else ""
    return (
        f'<div class="dua-card{" focused" if focused else ""}" id="doa-{record.id}">'
        '<div class="dua-head">'
        f'<div class="dua-title">Doa {record.id}</div>'
        f'<div><span class="chip cat">{esc(record.category)}</span>{source}</div>'
        "</div>"
        f"{arabic_html(record, active_index)}"
        '<div class="translit"><div class="label">Transliterasi:</div>'
        f"<p>{esc(record.transliteration)}</p></div>"
        '<div class="maksud"><div class="label">Maksud:</div>'
        f"<p>{esc(record.translation)}</p>{hint}</div>"
        "</div>"
    )
