import json

import pytest

from surveycorr.exceptions import (
    DescriptorParseError,
    InputUnavailableError,
    SchemaInferenceError,
    UnknownColumnError,
)
from surveycorr.loaders import load_dataset, load_field_descriptor, load_registry
from surveycorr.types import Field, Scale


@pytest.fixture
def csv_file(tmp_path):
    path = tmp_path / "survey.csv"
    path.write_text("age,region,q1\n21,1,3\n35,2,N/A\n47,2,5\n", encoding="utf-8")
    return path


@pytest.fixture
def descriptor_file(tmp_path):
    path = tmp_path / "fields.json"
    path.write_text(json.dumps([
        {"name": "age", "scale": "ordinal"},
        {"name": "region", "scale": "nominal"},
        {"name": "q1", "scale": "ordinal", "factor": True},
    ]), encoding="utf-8")
    return path


# -------------------------------
# Tests for load_dataset
# -------------------------------

def test_load_dataset(csv_file):
    dataset = load_dataset(csv_file)
    assert list(dataset.columns) == ["age", "region", "q1"]
    assert dataset.shape == (3, 3)

def test_load_dataset_header_only(tmp_path):
    path = tmp_path / "empty.csv"
    path.write_text("a,b\n", encoding="utf-8")
    assert load_dataset(path).shape == (0, 2)

def test_load_dataset_missing_file(tmp_path):
    with pytest.raises(InputUnavailableError, match="missing.csv"):
        load_dataset(tmp_path / "missing.csv")

def test_load_dataset_directory(tmp_path):
    with pytest.raises(InputUnavailableError):
        load_dataset(tmp_path)

def test_load_dataset_empty_file(tmp_path):
    path = tmp_path / "empty.csv"
    path.write_text("", encoding="utf-8")
    with pytest.raises(SchemaInferenceError):
        load_dataset(path)

def test_load_dataset_ragged_rows(tmp_path):
    path = tmp_path / "ragged.csv"
    path.write_text("a,b\n1,2\n3,4,5,6\n", encoding="utf-8")
    with pytest.raises(SchemaInferenceError, match="ragged.csv"):
        load_dataset(path)

# -------------------------------
# Tests for load_field_descriptor / load_registry
# -------------------------------

def test_load_field_descriptor(descriptor_file):
    fields = load_field_descriptor(descriptor_file)
    assert fields[1] == Field("region", Scale.NOMINAL)
    assert fields[2].factor is True

def test_load_field_descriptor_missing(tmp_path):
    with pytest.raises(InputUnavailableError, match="fields.json"):
        load_field_descriptor(tmp_path / "fields.json")

def test_load_field_descriptor_invalid_json(tmp_path):
    path = tmp_path / "fields.json"
    path.write_text('[{"name": "a", "scale": ', encoding="utf-8")
    with pytest.raises(DescriptorParseError, match="Invalid field descriptor"):
        load_field_descriptor(path)

def test_load_field_descriptor_not_an_array(tmp_path):
    path = tmp_path / "fields.json"
    path.write_text('{"name": "a", "scale": "ordinal"}', encoding="utf-8")
    with pytest.raises(DescriptorParseError, match="expected a JSON array"):
        load_field_descriptor(path)

def test_load_field_descriptor_bad_scale(tmp_path):
    path = tmp_path / "fields.json"
    path.write_text('[{"name": "a", "scale": "interval"}]', encoding="utf-8")
    with pytest.raises(DescriptorParseError, match="interval"):
        load_field_descriptor(path)

def test_load_registry_checks_columns(descriptor_file):
    registry = load_registry(descriptor_file, columns=["age", "region", "q1"])
    assert registry.resolve("region") is Scale.NOMINAL
    with pytest.raises(UnknownColumnError, match="q1"):
        load_registry(descriptor_file, columns=["age", "region"])
