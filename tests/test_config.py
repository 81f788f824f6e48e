from __future__ import annotations

from pathlib import Path

import pytest

from config import DATA_DIR, Settings


def test_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    for var in ("DOA_CATALOG_PATH", "DOA_PAGE_TITLE", "DOA_CLIPBOARD_ENABLED", "DOA_LOG_LEVEL", "DOA_ALL_LABEL"):
        monkeypatch.delenv(var, raising=False)
    cfg = Settings(_env_file=None)
    assert cfg.catalog_path == DATA_DIR / "duas.json"
    assert cfg.page_title == "40 Doa Pilihan"
    assert cfg.all_label == "Semua"
    assert cfg.clipboard_enabled is True
    assert cfg.log_level == "INFO"


def test_env_overrides(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("DOA_CATALOG_PATH", str(tmp_path / "x.json"))
    monkeypatch.setenv("DOA_CLIPBOARD_ENABLED", "no")
    monkeypatch.setenv("DOA_LOG_LEVEL", "DEBUG")

    cfg = Settings(_env_file=None)

    assert cfg.catalog_path == tmp_path / "x.json"
    assert cfg.clipboard_enabled is False
    assert cfg.log_level == "DEBUG"
