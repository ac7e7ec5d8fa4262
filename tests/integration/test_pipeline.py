import json
import logging
import math

import pandas as pd
import pytest

from surveycorr import AnalysisConfig, build_report, generate_report
from surveycorr.exceptions import (
    DescriptorParseError,
    InputUnavailableError,
    OutputWriteError,
    UnknownColumnError,
)
from surveycorr.interactions import FieldRegistry, StatisticsBackend, corr_matrices
from surveycorr.types import NOT_APPLICABLE, DisplayConfig


def write_csv(path, text):
    path.write_text(text, encoding="utf-8")
    return path


def write_descriptor(path, records):
    path.write_text(json.dumps(records), encoding="utf-8")
    return path


@pytest.fixture
def numeric_csv(tmp_path):
    return write_csv(
        tmp_path / "survey.csv",
        "q1,q2,q3\n1,2,5\n2,3,3\n3,5,4\n4,4,1\n5,6,2\n",
    )


@pytest.fixture
def mixed_csv(tmp_path):
    return write_csv(
        tmp_path / "mixed.csv",
        "age,income,region\n21,1200,1\n35,2500,2\n47,N/A,2\n52,4100,3\n29,1800,1\n",
    )


# -------------------------------
# Scenario: one matrix without descriptor
# -------------------------------

def test_numeric_dataset_one_matrix(numeric_csv):
    matrices = corr_matrices(pd.read_csv(numeric_csv))
    assert list(matrices) == ["pearson"]
    matrix = matrices["pearson"]
    assert matrix.shape == (3, 3)
    cells = [(i, j) for i in range(3) for j in range(3)]
    assert all(matrix.iloc[i, i] is NOT_APPLICABLE for i in range(3))
    populated = [matrix.iloc[i, j] for i, j in cells if i != j]
    assert len(populated) == 6
    assert all(not math.isnan(cell.coefficient) for cell in populated)

def test_generate_report_without_descriptor(numeric_csv):
    output = generate_report(numeric_csv)
    assert output == numeric_csv.with_name("survey.csv.md")
    document = output.read_text(encoding="utf-8")
    assert document.startswith("# survey.csv\n")
    assert "## Descriptive statistics" in document
    assert "## Pearson" in document
    assert "## Kendall" not in document
    assert document.count("N/A") == 3

# -------------------------------
# Scenario: ordinal / nominal partition
# -------------------------------

def test_classified_dataset_two_matrices(mixed_csv, tmp_path):
    descriptor = write_descriptor(tmp_path / "fields.json", [
        {"name": "age", "scale": "ordinal"},
        {"name": "income", "scale": "ordinal"},
        {"name": "region", "scale": "nominal"},
    ])
    output = generate_report(mixed_csv, descriptor)
    document = output.read_text(encoding="utf-8")
    assert document.index("## Pearson") < document.index("## Kendall")
    assert "## Factor loadings" not in document

    registry = FieldRegistry.from_records(json.loads(descriptor.read_text()))
    matrices = corr_matrices(pd.read_csv(mixed_csv), registry=registry)
    assert matrices["pearson"].shape == (2, 2)
    assert matrices["kendall"].shape == (1, 1)
    assert matrices["kendall"].iloc[0, 0] is NOT_APPLICABLE

def test_matrices_partition_columns(mixed_csv):
    registry = FieldRegistry.from_records([{"name": "region", "scale": "nominal"}])
    matrices = corr_matrices(pd.read_csv(mixed_csv), registry=registry)
    labels = list(matrices["pearson"].columns) + list(matrices["kendall"].columns)
    assert sorted(labels) == ["age", "income", "region"]

def test_factor_section_with_designated_columns(tmp_path):
    rows = ["a,b,c,d"] + [
        f"{i % 5 + 1},{min(5, i % 5 + 1 + i % 2)},"
        f"{(i // 5) % 5 + 1},{min(5, (i // 5) % 5 + 1 + (i % 3 == 0))}"
        for i in range(50)
    ]
    source = write_csv(tmp_path / "items.csv", "\n".join(rows) + "\n")
    descriptor = write_descriptor(tmp_path / "fields.json", [
        {"name": n, "scale": "ordinal", "factor": True} for n in "abcd"
    ])
    document = generate_report(source, descriptor).read_text(encoding="utf-8")
    assert "## Factor loadings" in document
    assert "- **factors**: 2" in document

# -------------------------------
# Scenario: unknown descriptor column
# -------------------------------

def test_unknown_descriptor_column_writes_nothing(numeric_csv, tmp_path):
    descriptor = write_descriptor(tmp_path / "fields.json", [
        {"name": "q1", "scale": "ordinal"},
        {"name": "salary", "scale": "ordinal"},
    ])
    with pytest.raises(UnknownColumnError, match="salary"):
        generate_report(numeric_csv, descriptor)
    assert not numeric_csv.with_name("survey.csv.md").exists()

# -------------------------------
# Scenario: "N/A" cells are substituted with 0.0
# -------------------------------

def test_not_numeric_cell_is_zero(mixed_csv):
    raw = pd.read_csv(mixed_csv)
    substituted = raw.copy()
    substituted["income"] = [1200, 2500, 0, 4100, 1800]
    expected = corr_matrices(substituted)["pearson"].loc["age", "income"]
    result = corr_matrices(raw)["pearson"].loc["age", "income"]
    assert result.coefficient == pytest.approx(expected.coefficient)
    assert result.significance == pytest.approx(expected.significance)

# -------------------------------
# Determinism and configuration
# -------------------------------

def test_generate_report_is_idempotent(numeric_csv):
    first = generate_report(numeric_csv).read_text(encoding="utf-8")
    second = generate_report(numeric_csv).read_text(encoding="utf-8")
    assert first == second

@pytest.mark.parametrize("config", [
    AnalysisConfig(provider="delegated"),
    AnalysisConfig(n_jobs=4),
    AnalysisConfig(reuse_symmetric=True),
])
def test_report_variants_match_default(numeric_csv, config):
    dataset = pd.read_csv(numeric_csv)
    expected = build_report(dataset).render_markdown()
    assert build_report(dataset, config=config).render_markdown() == expected

def test_emphasis_marks_significant_positive_cells(numeric_csv):
    dataset = pd.read_csv(numeric_csv)
    plain = build_report(dataset).render_markdown()
    bold = build_report(dataset, AnalysisConfig(emphasize=True)).render_markdown()
    assert "**r: " not in plain
    assert "**r: 0.9" in bold

def test_delegated_provider_uses_backend(numeric_csv):
    backend = StatisticsBackend()
    generate_report(numeric_csv, config=AnalysisConfig(provider="delegated", backend=backend))
    assert backend.calls == 6

def test_display_config_reaches_renderer(numeric_csv):
    config = AnalysisConfig(display=DisplayConfig(hide_shape_info=False))
    document = generate_report(numeric_csv, config=config).read_text(encoding="utf-8")
    assert "shape: (3, 3)" in document

@pytest.mark.parametrize("kwargs", [
    {"provider": "remote"},
    {"default_method": "spearman"},
    {"significance_level": 1.5},
    {"n_jobs": 0},
    {"n_factors": 0},
])
def test_analysis_config_validation(kwargs):
    with pytest.raises(ValueError):
        AnalysisConfig(**kwargs)

def test_verbose_logs_progress(numeric_csv, caplog):
    caplog.set_level(logging.INFO)
    generate_report(numeric_csv, verbose=True)
    assert "Report written to" in caplog.text
    assert logging.getLogger("surveycorr").level == logging.WARNING

# -------------------------------
# Failures
# -------------------------------

def test_missing_source(tmp_path):
    with pytest.raises(InputUnavailableError):
        generate_report(tmp_path / "absent.csv")
    assert not (tmp_path / "absent.csv.md").exists()

def test_malformed_descriptor(numeric_csv, tmp_path):
    descriptor = tmp_path / "fields.json"
    descriptor.write_text("not json", encoding="utf-8")
    with pytest.raises(DescriptorParseError):
        generate_report(numeric_csv, descriptor)
    assert not numeric_csv.with_name("survey.csv.md").exists()

def test_unwritable_output(numeric_csv):
    numeric_csv.with_name("survey.csv.md").mkdir()
    with pytest.raises(OutputWriteError, match="survey.csv.md"):
        generate_report(numeric_csv)
