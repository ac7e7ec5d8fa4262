import pytest
import pandas as pd

from surveycorr._utils import (
    validate_columns_exist,
    validate_lengths_match,
    validate_string_flag,
    validate_unique_column_names,
)
from surveycorr.exceptions import SurveyCorrError, UnknownColumnError


# tests for validate_string_flag

def test_validate_string_flag_positive_case():
    validate_string_flag(arg="A", supported_values=["A", "B", "C"],
                         err_msg="my_error_message")

def test_validate_string_flag_negative_case():
    with pytest.raises(ValueError, match="my_error_message"):
        validate_string_flag(arg="D", supported_values=["A", "B", "C"],
                             err_msg="my_error_message")

# tests for validate_lengths_match

def test_validate_lengths_match_positive_case():
    validate_lengths_match(array1=[1, 2, 3], array2=[3, 4, 5],
                           err_msg="my_error_message")

def test_validate_lengths_match_negative_case():
    with pytest.raises(ValueError, match="my_error_message"):
        validate_lengths_match(array1=[1, 2, 3], array2=[4, 5],
                               err_msg="my_error_message")

# tests for validate_unique_column_names

def test_validate_unique_column_names_positive_case():
    df = pd.DataFrame([[1, 2, 3]], columns=["col1", "col2", "col3"])
    validate_unique_column_names(df, err_msg="my_error_message")

def test_validate_unique_column_names_negative_case():
    df = pd.DataFrame([[1, 2, 3]], columns=["col1", "col2", "col1"])
    with pytest.raises(ValueError, match="my_error_message"):
        validate_unique_column_names(df, err_msg="my_error_message")

# tests for validate_columns_exist

def test_validate_columns_exist_positive_case():
    df = pd.DataFrame({"a": [1], "b": [2]})
    validate_columns_exist(df, ["b", "a"])

def test_validate_columns_exist_negative_case():
    df = pd.DataFrame({"a": [1]})
    with pytest.raises(UnknownColumnError, match="Column 'zz' is missing") as exc:
        validate_columns_exist(df, ["a", "zz"], err_msg="Column '{}' is missing")
    assert exc.value.column == "zz"

def test_unknown_column_error_is_lookup_and_domain_error():
    err = UnknownColumnError("x")
    assert isinstance(err, LookupError)
    assert isinstance(err, SurveyCorrError)
    assert "x" in str(err)
