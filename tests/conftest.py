from __future__ import annotations

import pytest


@pytest.fixture(autouse=True)
def home(tmp_path_factory, monkeypatch):
    """Keep the developer's global ninny config out of every test."""
    h = tmp_path_factory.mktemp("home")
    monkeypatch.setenv("HOME", str(h))
    return h


@pytest.fixture
def write_ini(tmp_path):
    def _write(text: str, name: str = "doc.ini"):
        p = tmp_path / name
        p.write_text(text, encoding="utf-8")
        return p

    return _write
