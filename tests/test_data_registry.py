import os
import pytest
from pathlib import Path

from pyradlen.io.data_registry import (
    get_data_path,
    load_lookup_table,
    load_material_dictionary,
)

# ------------------------------
# Tests for get_data_path

def test_get_data_path_installed():
    path = get_data_path("elements.json")
    assert Path(path).name == "elements.json"
    assert os.path.exists(path)

def test_get_data_path_fallback(monkeypatch):
    # Force fallback branch by making importlib.resources.files fail.
    def fake_files(pkg):
        raise TypeError("fail")
    monkeypatch.setattr("importlib.resources.files", fake_files)
    expected = os.path.abspath(
        os.path.join(os.path.dirname(__file__), "..", "pyradlen", "data", "materials.json")
    )
    result = get_data_path("materials.json")
    assert Path(result).name == "materials.json"
    if os.path.exists(expected):
        assert Path(result) == Path(expected)

def test_get_data_path_not_a_file(monkeypatch):
    class FakeEntry:
        def is_file(self):
            return False
    class FakeFiles:
        def joinpath(self, subpath):
            return FakeEntry()
    monkeypatch.setattr("importlib.resources.files", lambda pkg: FakeFiles())
    monkeypatch.setattr("pyradlen.io.data_registry.os.path.exists", lambda path: False)
    with pytest.raises(FileNotFoundError, match="Cannot find data file 'elements.json'"):
        get_data_path("elements.json")

def test_get_data_path_missing():
    with pytest.raises(FileNotFoundError, match="missing.json"):
        get_data_path("missing.json")

# ------------------------------
# Tests for load_lookup_table

def test_load_lookup_table():
    table = load_lookup_table()
    assert table["Lead"] == {"symbol": "Pb", "atomic_number": 82, "atomic_mass": 207.2}
    assert table["Hydrogen"]["atomic_mass"] == 1.008
    numbers = sorted(v["atomic_number"] for v in table.values())
    assert numbers == list(range(1, 93))

def test_load_lookup_table_redirected(monkeypatch, tmp_path):
    elements_file = tmp_path / "elements.json"
    elements_file.write_text('{"Carbon": {"symbol": "C", "atomic_number": 6, "atomic_mass": 12.011}}')
    monkeypatch.setattr("pyradlen.io.data_registry.get_data_path", lambda filename: str(elements_file))
    table = load_lookup_table()
    assert list(table) == ["Carbon"]

def test_load_lookup_table_invalid_json(monkeypatch, tmp_path):
    bad_file = tmp_path / "elements.json"
    bad_file.write_text("not a valid json")
    monkeypatch.setattr("pyradlen.io.data_registry.get_data_path", lambda filename: str(bad_file))
    with pytest.raises(ValueError):
        load_lookup_table()

# ------------------------------
# Tests for load_material_dictionary

def test_load_material_dictionary():
    materials = load_material_dictionary()
    assert "water" in materials
    for name, record in materials.items():
        assert record["density"] > 0, name
        total = sum(row[2] for row in record["composition"])
        assert total == pytest.approx(100.0, abs=1e-2), name
