import pandas as pd
import pytest

from surveycorr.reports.utils import normalize_table
from surveycorr.types import TableResult


def test_normalize_table_dict():
    result = normalize_table({"a": [1, 2], "b": [3, 4]})
    assert isinstance(result, TableResult)
    assert result.table.shape == (2, 2)
    assert result.title is None

def test_normalize_table_columns_sequence():
    result = normalize_table([[1, 2, 3], [4, 5, 6]])
    assert result.table.shape == (3, 2)

def test_normalize_table_passes_table_result_through():
    tr = TableResult(pd.DataFrame({"a": [1]}), title="t")
    assert normalize_table(tr) is tr

def test_normalize_table_copies_dataframe():
    df = pd.DataFrame({"a": [1]})
    result = normalize_table(df)
    result.table.loc[0, "a"] = 5
    assert df.loc[0, "a"] == 1

def test_normalize_table_rejects_multiindex_rows():
    df = pd.DataFrame(
        {"v": [1, 2]},
        index=pd.MultiIndex.from_tuples([("a", 1), ("a", 2)]),
    )
    with pytest.raises(ValueError, match="MultiIndex in rows"):
        normalize_table(df)

def test_normalize_table_rejects_multiindex_columns():
    df = pd.DataFrame([[1, 2]], columns=pd.MultiIndex.from_tuples([("a", 1), ("a", 2)]))
    with pytest.raises(ValueError, match="MultiIndex in columns"):
        normalize_table(df)
