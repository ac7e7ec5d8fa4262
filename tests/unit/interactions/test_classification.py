import logging

import pytest

from surveycorr.exceptions import DescriptorParseError, UnknownColumnError
from surveycorr.interactions import FieldRegistry, parse_field_records
from surveycorr.types import Field, Scale


@pytest.fixture
def records():
    return [
        {"name": "age", "scale": "ordinal", "factor": True},
        {"name": "region", "scale": "nominal"},
        {"name": "income", "scale": "Ordinal", "factor": True},
    ]


# -------------------------------
# Tests for parse_field_records
# -------------------------------

def test_parse_field_records(records):
    fields = parse_field_records(records)
    assert fields == [
        Field("age", Scale.ORDINAL, True),
        Field("region", Scale.NOMINAL, False),
        Field("income", Scale.ORDINAL, True),
    ]

def test_parse_field_records_passes_fields_through():
    field = Field("x", Scale.NOMINAL)
    assert parse_field_records([field]) == [field]

def test_parse_field_records_empty():
    assert parse_field_records([]) == []

@pytest.mark.parametrize("bad_records", [
    {"name": "a", "scale": "ordinal"},
    "a,b",
    42,
    [{"scale": "ordinal"}],
    [{"name": "a"}],
    [{"name": 3, "scale": "ordinal"}],
    [["a", "ordinal"]],
    [{"name": "a", "scale": "ordinal", "factor": "yes"}],
])
def test_parse_field_records_malformed(bad_records):
    with pytest.raises(DescriptorParseError):
        parse_field_records(bad_records)

def test_parse_field_records_unknown_scale():
    with pytest.raises(DescriptorParseError, match="Unknown scale 'ratio'"):
        parse_field_records([{"name": "a", "scale": "ratio"}])

def test_parse_field_records_duplicate_name():
    with pytest.raises(DescriptorParseError, match="more than once"):
        parse_field_records([
            {"name": "a", "scale": "ordinal"},
            {"name": "a", "scale": "nominal"},
        ])

# -------------------------------
# Tests for FieldRegistry
# -------------------------------

def test_registry_resolve_and_default(records):
    registry = FieldRegistry.from_records(records)
    assert registry.resolve("region") is Scale.NOMINAL
    assert registry.resolve("age") is Scale.ORDINAL
    assert registry.resolve("unlisted") is Scale.ORDINAL

def test_registry_custom_default_scale(records):
    registry = FieldRegistry.from_records(records, default_scale="nominal")
    assert registry.default_scale is Scale.NOMINAL
    assert registry.resolve("unlisted") is Scale.NOMINAL

def test_registry_group_preserves_column_order(records):
    registry = FieldRegistry.from_records(records)
    columns = ["income", "region", "extra", "age"]
    assert registry.group(columns, Scale.ORDINAL) == ["income", "extra", "age"]
    assert registry.group(columns, "nominal") == ["region"]

def test_registry_groups_partition_columns(records):
    registry = FieldRegistry.from_records(records)
    columns = ["age", "region", "income", "extra"]
    ordinal = registry.group(columns, Scale.ORDINAL)
    nominal = registry.group(columns, Scale.NOMINAL)
    assert not set(ordinal) & set(nominal)
    assert sorted(ordinal + nominal) == sorted(columns)

def test_registry_factor_columns(records):
    registry = FieldRegistry.from_records(records)
    assert registry.factor_columns(["region", "income", "age"]) == ["income", "age"]

def test_registry_container_protocol(records):
    registry = FieldRegistry.from_records(records)
    assert len(registry) == 3
    assert "age" in registry
    assert "extra" not in registry
    assert [f.name for f in registry] == ["age", "region", "income"]

def test_registry_fields_are_read_only(records):
    registry = FieldRegistry.from_records(records)
    with pytest.raises(TypeError):
        registry.fields["new"] = Field("new", Scale.NOMINAL)

def test_registry_check_columns_unknown(records):
    with pytest.raises(UnknownColumnError, match="'income'") as exc:
        FieldRegistry.from_records(records, columns=["age", "region"])
    assert exc.value.column == "income"

def test_registry_check_columns_warns_unclassified(records, caplog):
    with caplog.at_level(logging.WARNING, logger="surveycorr"):
        FieldRegistry.from_records(
            records, columns=["age", "region", "income", "extra"]
        )
    assert "extra" in caplog.text
    assert "ordinal" in caplog.text

def test_registry_check_columns_silent_when_complete(records, caplog):
    with caplog.at_level(logging.WARNING, logger="surveycorr"):
        FieldRegistry.from_records(records, columns=["age", "region", "income"])
    assert caplog.records == []
