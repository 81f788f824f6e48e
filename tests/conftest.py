from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Make the flat modules importable when running tests from the repo root.
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from catalog import Catalog, Gloss, Record, load_catalog  # noqa: E402

CATALOG_PATH = ROOT / "data" / "duas.json"


@pytest.fixture(scope="session")
def catalog() -> Catalog:
    return load_catalog(CATALOG_PATH)


def make_record(id: int, category: str = "Am", **kwargs) -> Record:
    fields = {
        "id": id,
        "primary_text": f"نص {id}",
        "transliteration": f"Nass {id}",
        "translation": f"Terjemahan {id}",
        "category": category,
        "citation": "Muslim",
    }
    fields.update(kwargs)
    return Record(**fields)


@pytest.fixture
def small_catalog() -> Catalog:
    return Catalog(
        records=(
            make_record(1, "Ibadah", glosses=(Gloss(fragment="نص", meaning="teks"), Gloss(fragment="1", meaning="satu"))),
            make_record(2, "Am"),
            make_record(3, "Ibadah"),
        )
    )
