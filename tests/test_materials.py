import warnings
import pandas as pd
import pytest

from pyradlen.errors import UnknownMaterialError
from pyradlen.io.composition import CompositionTable
from pyradlen.io.materials import Material, MaterialDictionary

@pytest.fixture(scope="module")
def materials():
    return MaterialDictionary()

def test_dictionary_contents(materials):
    assert len(materials) == 23
    assert "water" in materials
    assert "PbWO4" in materials
    assert "unobtainium" not in materials
    assert 42 not in materials
    assert materials.names() == sorted(materials.names())
    assert list(materials) == materials.names()

def test_get_material(materials):
    lead = materials["Lead"]
    assert isinstance(lead, Material)
    assert lead.name == "lead"
    assert lead.density == 11.35
    assert isinstance(lead.composition, CompositionTable)

def test_unknown_material(materials):
    with pytest.raises(UnknownMaterialError, match="Unknown material: 'unobtainium'"):
        materials.get("unobtainium")
    # also a KeyError and a ValueError
    with pytest.raises(KeyError):
        materials["unobtainium"]
    with pytest.raises(ValueError):
        materials["unobtainium"]

@pytest.mark.parametrize("name, x0, tol", [
    ("lead", 6.37, 0.02),
    ("water", 36.08, 0.05),
    ("pbwo4", 7.39, 0.03),
    ("air", 36.62, 0.15),
])
def test_material_radiation_lengths(materials, name, x0, tol):
    material = materials[name]
    assert material.radiation_length == pytest.approx(x0, abs=tol)
    assert material.radiation_length_cm == pytest.approx(material.radiation_length / material.density)

def test_lead_radiation_length_cm(materials):
    assert materials["lead"].radiation_length_cm == pytest.approx(0.561, abs=2e-3)

def test_all_materials_complete(materials):
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        for name in materials:
            assert materials[name].radiation_length > 0

def test_to_dataframe(materials):
    df = materials.to_dataframe()
    assert isinstance(df, pd.DataFrame)
    assert len(df) == len(materials)
    assert list(df.columns) == ["name", "description", "density", "radiation_length", "radiation_length_cm"]
    assert (df["radiation_length"] > 0).all()

def test_display(materials, capsys):
    materials.display()
    out = capsys.readouterr().out
    assert "Printing Material Dictionary" in out
    assert "pbwo4" in out
    assert "X0 [g/cm2]" in out

def test_custom_records():
    records = {"Foil": {"description": "test foil", "density": 2.0, "composition": [[13, 26.98, 100.0]]}}
    materials = MaterialDictionary(records)
    assert materials.names() == ["Foil"]
    assert materials["foil"].radiation_length_cm == pytest.approx(materials["foil"].radiation_length / 2.0)

def test_record_missing_fields():
    with pytest.raises(ValueError, match="missing field\\(s\\): density"):
        MaterialDictionary({"x": {"description": "d", "composition": [[1, 1.008, 100]]}})

def test_record_non_positive_density():
    with pytest.raises(ValueError, match="non-positive density"):
        MaterialDictionary({"x": {"description": "d", "density": 0, "composition": [[1, 1.008, 100]]}})
