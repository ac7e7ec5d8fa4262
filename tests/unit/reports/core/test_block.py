import pandas as pd
import pytest

from surveycorr.reports import Block, BlockConfig
from surveycorr.types import TableResult


@pytest.fixture
def block():
    return Block(BlockConfig(
        title="Pearson",
        description="Matrix of survey items.",
        metrics=[{"name": "columns", "value": 3}],
        tables=[{"q1": [1, 2]}],
    ))


def test_block_normalizes_tables(block):
    assert all(isinstance(t, TableResult) for t in block.block_config.tables)

def test_block_from_dict():
    block = Block({"title": "Kendall", "tables": [pd.DataFrame({"a": [1]})]})
    assert block.block_config.title == "Kendall"
    assert isinstance(block.block_config.tables[0], TableResult)

def test_block_default_is_empty():
    block = Block()
    assert block.block_config.tables == []
    assert block.block_config.metrics == []
    assert block.typename == "Block"

def test_block_rejects_other_config():
    with pytest.raises(ValueError, match="block_config"):
        Block(42)

# -------------------------------
# Metrics
# -------------------------------

def test_add_metric(block):
    block.add_metric("rows", 10, description="answers")
    assert block.block_config.metrics[-1] == {
        "name": "rows", "value": 10, "description": "answers"
    }

def test_add_metric_unhashable(block):
    with pytest.raises(TypeError, match="hashable"):
        block.add_metric("rows", [1, 2])

def test_remove_metric(block):
    removed = block.remove_metric(0)
    assert removed["name"] == "columns"
    assert block.block_config.metrics == []

def test_remove_metric_out_of_range(block):
    with pytest.raises(IndexError, match="No metric at index 5"):
        block.remove_metric(5)

# -------------------------------
# Tables
# -------------------------------

def test_add_table_sets_title_and_description(block):
    block.add_table({"q2": [3]}, title="Extra", description="more")
    table = block.block_config.tables[-1]
    assert table.title == "Extra"
    assert table.description == "more"

def test_add_table_keeps_table_result_title(block):
    block.add_table(TableResult(pd.DataFrame({"a": [1]}), title="Own"))
    assert block.block_config.tables[-1].title == "Own"

def test_insert_table_position(block):
    block.insert_table(0, {"first": [0]})
    assert list(block.block_config.tables[0].table.columns) == ["first"]

def test_remove_table(block):
    removed = block.remove_table(0)
    assert list(removed.table.columns) == ["q1"]
    with pytest.raises(IndexError, match="No table at index 0"):
        block.remove_table(0)

# -------------------------------
# Rendering
# -------------------------------

def test_block_render_markdown(block):
    document = block.render_markdown()
    lines = document.splitlines()
    assert lines[0] == "## Pearson"
    assert "Matrix of survey items." in lines
    assert "- **columns**: 3" in lines
    assert document.endswith("\n")
