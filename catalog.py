"""Catalog of supplications loaded from the bundled JSON file.

The catalog is read once, validated, and never mutated afterwards. Category
labels are free text; the filter list is derived from whatever the data holds.
"""

from __future__ import annotations

import json
import logging
from functools import cached_property
from pathlib import Path
from typing import Dict, List, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

logger = logging.getLogger(__name__)

ALL_CATEGORY = "All"


class CatalogError(ValueError):
    """The catalog file is missing, unreadable or structurally invalid."""


# -----------------------------
# MODELS
# -----------------------------
class Gloss(BaseModel):
    model_config = ConfigDict(frozen=True)

    fragment: str = Field(..., min_length=1)
    meaning: str = Field(..., min_length=1)


class Record(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: int = Field(..., gt=0)
    primary_text: str = Field(..., min_length=1)
    transliteration: str = Field(..., min_length=1)
    translation: str = Field(..., min_length=1)
    category: str = Field(..., min_length=1)
    citation: str = ""
    glosses: Tuple[Gloss, ...] = ()

    @property
    def has_glosses(self) -> bool:
        return bool(self.glosses)

    def gloss_at(self, index: int) -> Optional[Gloss]:
        if 0 <= index < len(self.glosses):
            return self.glosses[index]
        return None

    def glosses_match_text(self) -> bool:
        """True when the fragments, space-joined, rebuild the Arabic text."""
        if not self.glosses:
            return True
        joined = " ".join(g.fragment for g in self.glosses)
        return joined.split() == self.primary_text.split()


class Catalog(BaseModel):
    model_config = ConfigDict(frozen=True)

    records: Tuple[Record, ...] = Field(..., min_length=1)

    @model_validator(mode="after")
    def _unique_ids(self) -> "Catalog":
        seen = set()
        for r in self.records:
            if r.id in seen:
                raise ValueError(f"duplicate record id {r.id}")
            seen.add(r.id)
        return self

    def __len__(self) -> int:
        return len(self.records)

    @cached_property
    def categories(self) -> List[str]:
        return derive_categories(self.records)

    @cached_property
    def records_by_id(self) -> Dict[int, Record]:
        return {r.id: r for r in self.records}

    def get(self, record_id: int) -> Optional[Record]:
        return self.records_by_id.get(record_id)


# -----------------------------
# HELPERS
# -----------------------------
def dedupe_keep_order(items: List[str]) -> List[str]:
    seen = set()
    out: List[str] = []
    for x in items:
        if x not in seen:
            out.append(x)
            seen.add(x)
    return out


def derive_categories(records) -> List[str]:
    """Sentinel first, then each category in the order it first appears."""
    return [ALL_CATEGORY] + dedupe_keep_order([r.category for r in records])


# -----------------------------
# LOADING
# -----------------------------
def parse_catalog(raw: object) -> Catalog:
    if isinstance(raw, list):
        raw = {"records": raw}
    try:
        catalog = Catalog.model_validate(raw)
    except ValidationError as exc:
        raise CatalogError(f"invalid catalog: {exc}") from exc

    for r in catalog.records:
        if not r.glosses_match_text():
            logger.warning("Glosses of record %d do not rebuild its text", r.id)
    return catalog


def load_catalog(path: Union[str, Path]) -> Catalog:
    path = Path(path)
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError as exc:
        raise CatalogError(f"catalog not found: {path}") from exc
    except OSError as exc:
        raise CatalogError(f"catalog cannot be read: {path}: {exc}") from exc
    except UnicodeDecodeError as exc:
        raise CatalogError(f"catalog is not UTF-8: {path}: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise CatalogError(f"catalog is not valid JSON: {path}: {exc}") from exc

    catalog = parse_catalog(raw)
    logger.info(
        "Loaded %d records in %d categories from %s",
        len(catalog),
        len(catalog.categories) - 1,
        path,
    )
    return catalog
