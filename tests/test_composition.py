import json
import numpy as np
import pandas as pd
import pytest

from pyradlen.errors import (
    EmptyCompositionError,
    InvalidAtomicNumberError,
    InvalidAtomicMassError,
    MalformedCompositionError,
    UnknownMaterialError,
)
from pyradlen.io.composition import CompositionTable, ElementEntry
from pyradlen.physics.radiation_length import composite_radiation_length

def write_file(tmp_path, content, name="material.dat"):
    path = tmp_path / name
    path.write_text(content)
    return path

@pytest.fixture
def plastic():
    return CompositionTable({(1, 1.008): 0.3, (6, 12.012): 0.6, (8, 16.002): 0.1}, name="plastic")

# ------------------------------
# Construction

def test_construction_from_mapping(plastic):
    assert len(plastic) == 3
    assert plastic[(6, 12.012)] == 0.6
    assert (1, 1.008) in plastic
    assert (2, 4.0) not in plastic
    assert "bogus" not in plastic
    assert plastic.name == "plastic"

def test_keys_are_element_entries(plastic):
    keys = list(plastic.keys())
    assert all(isinstance(k, ElementEntry) for k in keys)
    assert keys[0].atomic_number == 1
    assert keys[0].atomic_mass == 1.008
    assert str(keys[0]) == "Z=1, A=1.008"

def test_entries_sorted_by_atomic_number():
    table = CompositionTable()
    table.add(8, 15.999, 0.5)
    table.add(1, 1.008, 0.2)
    table.add(6, 12.011, 0.3)
    assert [e.atomic_number for e, _ in table.entries()] == [1, 6, 8]

def test_integral_float_atomic_number_accepted():
    table = CompositionTable({(6.0, 12.011): 1.0})
    entry = next(iter(table))
    assert entry.atomic_number == 6
    assert isinstance(entry.atomic_number, int)

def test_duplicate_entry_last_write_wins():
    table = CompositionTable()
    table.add(6, 12.011, 0.4)
    table.add(6, 12.011, 0.6)
    assert len(table) == 1
    assert table[(6, 12.011)] == 0.6

def test_invalid_atomic_number_rejected():
    with pytest.raises(InvalidAtomicNumberError):
        CompositionTable({(0, 1.0): 1.0})

def test_invalid_atomic_mass_rejected():
    with pytest.raises(InvalidAtomicMassError):
        CompositionTable({(1, -1.0): 1.0})

@pytest.mark.parametrize("fraction", [0, -0.1, 1.01, float("nan"), "0.5"])
def test_invalid_fraction_rejected(fraction):
    with pytest.raises(MalformedCompositionError):
        CompositionTable().add(1, 1.008, fraction)

def test_invalid_key_rejected():
    with pytest.raises(MalformedCompositionError, match="\\(Z, A\\) pairs"):
        CompositionTable({6: 1.0})

def test_getitem_missing_raises_key_error(plastic):
    with pytest.raises(KeyError):
        plastic[(26, 55.845)]

@pytest.mark.parametrize("key", [6, "C", None])
def test_getitem_non_pair_key_raises_key_error(plastic, key):
    assert key not in plastic
    with pytest.raises(KeyError):
        plastic[key]

def test_total_fraction_and_normalized():
    table = CompositionTable({(1, 1.008): 0.2, (8, 15.999): 0.6})
    assert table.total_fraction == pytest.approx(0.8)
    normalized = table.normalized()
    assert normalized.total_fraction == pytest.approx(1.0)
    assert normalized[(1, 1.008)] == pytest.approx(0.25)
    # original untouched
    assert table[(1, 1.008)] == 0.2

def test_normalized_empty_raises():
    with pytest.raises(EmptyCompositionError):
        CompositionTable().normalized()

def test_radiation_length_method(plastic):
    assert plastic.radiation_length() == composite_radiation_length(plastic)

def test_equality(plastic):
    same = CompositionTable({(8, 16.002): 0.1, (6, 12.012): 0.6, (1, 1.008): 0.3})
    assert plastic == same
    assert plastic != CompositionTable({(1, 1.008): 1.0})

def test_repr(plastic):
    assert repr(plastic) == "<CompositionTable 'plastic' entries=3, total_fraction=1>"

# ------------------------------
# Serialization

def test_to_dict_and_from_dict(plastic):
    data = plastic.to_dict()
    assert data["name"] == "plastic"
    assert data["composition"][0] == {"atomic_number": 1, "atomic_mass": 1.008, "mass_fraction": 0.3}
    restored = CompositionTable.from_dict(data)
    assert restored == plastic

def test_from_dict_missing_composition():
    with pytest.raises(MalformedCompositionError, match="composition"):
        CompositionTable.from_dict({"name": "x"})

def test_from_dict_missing_entry_fields():
    data = {"composition": [{"atomic_number": 1, "atomic_mass": 1.008}]}
    with pytest.raises(MalformedCompositionError, match="mass_fraction"):
        CompositionTable.from_dict(data)

def test_json_roundtrip(plastic):
    restored = CompositionTable.from_json(plastic.to_json())
    assert restored == plastic
    assert json.loads(plastic.to_json())["name"] == "plastic"

def test_save_and_load(tmp_path, plastic):
    path = tmp_path / "plastic.json"
    plastic.save(path)
    assert CompositionTable.load(path) == plastic

def test_to_dataframe(plastic):
    df = plastic.to_dataframe()
    assert isinstance(df, pd.DataFrame)
    assert list(df.columns) == ["atomic_number", "atomic_mass", "mass_fraction"]
    assert list(df["atomic_number"]) == [1, 6, 8]
    np.testing.assert_allclose(df["mass_fraction"], [0.3, 0.6, 0.1])

def test_from_rows_divides_percentages():
    table = CompositionTable.from_rows([(1, 1.008, 11.1894), (8, 15.999, 88.8106)], name="water")
    assert table[(1, 1.008)] == pytest.approx(0.111894)
    assert table.name == "water"

def test_from_material():
    water = CompositionTable.from_material("water")
    assert len(water) == 2
    assert water.total_fraction == pytest.approx(1.0)

def test_from_material_unknown():
    with pytest.raises(UnknownMaterialError):
        CompositionTable.from_material("unobtainium")

# ------------------------------
# Text files

def test_from_txt_valid(tmp_path):
    path = write_file(tmp_path, "1\t 1.008\t\t30\n6\t12.012\t\t60\n8\t16.002\t\t10\n")
    table = CompositionTable.from_txt(path)
    assert len(table) == 3
    assert table[(1, 1.008)] == pytest.approx(0.30)
    assert table[(6, 12.012)] == pytest.approx(0.60)
    assert table[(8, 16.002)] == pytest.approx(0.10)
    assert table.name == str(path)

def test_from_txt_skips_comments_and_blank_lines(tmp_path):
    content = "# Z  A  %\n\n1 1.008 30   # hydrogen\n   \n6 12.012 70\n"
    table = CompositionTable.from_txt(write_file(tmp_path, content))
    assert len(table) == 2

def test_from_txt_non_numeric_row_reports_line(tmp_path):
    path = write_file(tmp_path, "1 1.008 30\nC 12.012 60\n8 16.002 10\n")
    with pytest.raises(MalformedCompositionError, match="line 2") as excinfo:
        CompositionTable.from_txt(path)
    assert excinfo.value.line_number == 2
    assert excinfo.value.path == str(path)

def test_from_txt_wrong_column_count(tmp_path):
    path = write_file(tmp_path, "1 1.008 30\n6 12.012\n")
    with pytest.raises(MalformedCompositionError, match="Expected 3 columns"):
        CompositionTable.from_txt(path)

def test_from_txt_invalid_atomic_number(tmp_path):
    path = write_file(tmp_path, "0 1.008 100\n")
    with pytest.raises(MalformedCompositionError, match="line 1"):
        CompositionTable.from_txt(path)

def test_from_txt_fraction_above_hundred_percent(tmp_path):
    path = write_file(tmp_path, "1 1.008 130\n")
    with pytest.raises(MalformedCompositionError, match="Mass fraction"):
        CompositionTable.from_txt(path)

def test_from_txt_empty_file(tmp_path):
    path = write_file(tmp_path, "# nothing here\n\n")
    with pytest.raises(EmptyCompositionError):
        CompositionTable.from_txt(path)

def test_from_txt_not_utf8(tmp_path):
    path = tmp_path / "latin1.dat"
    path.write_bytes(b"1 1.008 30\n6 12.012 70 \xb5\n")
    with pytest.raises(MalformedCompositionError, match="not valid UTF-8") as excinfo:
        CompositionTable.from_txt(path)
    assert excinfo.value.path == str(path)
    assert str(path) in str(excinfo.value)

def test_from_txt_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        CompositionTable.from_txt(tmp_path / "missing.dat")

def test_to_txt_roundtrip(tmp_path, plastic):
    path = tmp_path / "out.dat"
    plastic.to_txt(path)
    restored = CompositionTable.from_txt(path)
    assert list(restored.keys()) == [e for e, _ in plastic.entries()]
    for entry, fraction in plastic.entries():
        assert restored[entry] == pytest.approx(fraction)
