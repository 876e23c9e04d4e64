import json

import pytest

from services.catalog import DEFAULT_CATALOG, load_catalog


def test_default_catalog():
    catalog = load_catalog()
    assert len(catalog) == len(DEFAULT_CATALOG)
    assert catalog[0].name == "Java"
    assert catalog[0].category == "backend"


def test_catalog_from_file(tmp_path):
    path = tmp_path / "topics.json"
    path.write_text(json.dumps([{"name": "Elixir", "category": "backend"}]), encoding="utf-8")
    catalog = load_catalog(str(path))
    assert [e.name for e in catalog] == ["Elixir"]


def test_duplicate_names_rejected(tmp_path):
    path = tmp_path / "topics.json"
    path.write_text(json.dumps([{"name": "Go"}, {"name": "go"}]), encoding="utf-8")
    with pytest.raises(ValueError):
        load_catalog(str(path))
