import os
import pytest
from pathlib import Path
from surveycorr._utils import (
    convert_filepath,
    enable_io_logs,
    report_path_for,
    validate_path,
)
import logging

logger = logging.getLogger("test_logger")

is_root = hasattr(os, "geteuid") and os.geteuid() == 0


# -------------------------------
# Tests for convert_filepath
# -------------------------------

def test_convert_filepath_with_dir(tmp_path):
    tmp_dir = Path(tmp_path) / "folder"
    result = convert_filepath(tmp_dir, "default.md")
    assert result == tmp_dir / "default.md"

def test_convert_filepath_with_file(tmp_path):
    tmp_file = Path(tmp_path) / "file.md"
    result = convert_filepath(tmp_file, "default.md")
    assert result == tmp_file

# -------------------------------
# Tests for report_path_for
# -------------------------------

@pytest.mark.parametrize("source, expected", [
    ("survey.csv", "survey.csv.md"),
    ("data/answers.csv", "data/answers.csv.md"),
    ("noext", "noext.md"),
])
def test_report_path_for_appends_md(source, expected):
    assert report_path_for(source) == Path(expected)

# -------------------------------
# Tests for validate_path
# -------------------------------

def test_validate_path_overwrite_error(tmp_path):
    file_path = tmp_path / "file.md"
    file_path.write_text("test")
    with pytest.raises(FileExistsError):
        validate_path(file_path, overwrite_check=True)

def test_validate_path_existing_file_allowed_without_overwrite_check(tmp_path):
    file_path = tmp_path / "file.md"
    file_path.write_text("test")
    validate_path(file_path, overwrite_check=False)

def test_validate_path_rejects_directory(tmp_path):
    directory = tmp_path / "report.md"
    directory.mkdir()
    with pytest.raises(IsADirectoryError):
        validate_path(directory, overwrite_check=False)

def test_validate_path_missing_directory(tmp_path):
    with pytest.raises(FileNotFoundError, match="does not exist"):
        validate_path(tmp_path / "new_dir" / "r.md")
    assert not (tmp_path / "new_dir").exists()

@pytest.mark.skipif(is_root, reason="root ignores directory permissions")
def test_validate_path_permission_error(tmp_path):
    protected_dir = tmp_path / "protected"
    protected_dir.mkdir()
    os.chmod(protected_dir, 0o500)
    try:
        with pytest.raises(PermissionError):
            validate_path(protected_dir / "out.md", overwrite_check=False)
    finally:
        os.chmod(protected_dir, 0o700)

# -------------------------------
# Tests for enable_io_logs
# -------------------------------

def test_enable_io_logs_logs_permission_error(caplog):
    @enable_io_logs()
    def raise_permission():
        raise PermissionError("nope")

    with caplog.at_level(logging.DEBUG, logger="surveycorr"):
        with pytest.raises(PermissionError):
            raise_permission()
    assert "Permission denied" in caplog.text

def test_enable_io_logs_logs_file_exists_error(caplog):
    @enable_io_logs()
    def raise_exists():
        raise FileExistsError("already there")

    with caplog.at_level(logging.DEBUG, logger="surveycorr"):
        with pytest.raises(FileExistsError):
            raise_exists()
    assert "File already exists" in caplog.text

def test_enable_io_logs_logs_generic_exception(caplog):
    @enable_io_logs(logger)
    def raise_generic():
        raise IsADirectoryError("is a dir")

    with caplog.at_level(logging.DEBUG):
        with pytest.raises(IsADirectoryError):
            raise_generic()
    assert "IO error in raise_generic" in caplog.text

def test_enable_io_logs_returns_result():
    @enable_io_logs(logger)
    def fn(a, b=1):
        return a + b

    assert fn(2, b=3) == 5

def test_enable_io_logs_does_not_log_above_debug(caplog):
    @enable_io_logs(logger)
    def raise_permission():
        raise PermissionError("nope")

    with caplog.at_level(logging.INFO):
        with pytest.raises(PermissionError):
            raise_permission()
    assert caplog.records == []
