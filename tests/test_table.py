import io

import pytest

from zoomcsv.table import CsvTable

SAMPLE = (
    "Name,Email,Guest\r\n"
    "Ann,ann@example.com,No\r\n"
    '"Lee, Bo",bo@example.com,Yes\r\n'
    "Short\r\n"
)


@pytest.fixture
def table():
    return CsvTable(io.StringIO(SAMPLE))


def test_counts(table):
    assert table.row_count() == 3
    assert table.col_count() == 3


def test_header(table):
    assert table.header() == ["Name", "Email", "Guest"]


def test_header_is_a_copy(table):
    table.header().append("extra")
    assert table.col_count() == len(table.header())


def test_cell_lookup(table):
    assert table.cell("Email", 0) == "ann@example.com"
    assert table.cell("Name", 1) == "Lee, Bo"
    assert table.cell("Guest", 1) == "Yes"


def test_short_row_gives_empty(table):
    assert table.cell("Name", 2) == "Short"
    assert table.cell("Email", 2) == ""


def test_unknown_column(table):
    with pytest.raises(KeyError):
        table.cell("Phone", 0)


@pytest.mark.parametrize("row", [3, 10, -1])
def test_row_out_of_range(table, row):
    with pytest.raises(IndexError):
        table.cell("Name", row)


def test_empty_input():
    with pytest.raises(ValueError):
        CsvTable(io.StringIO(""))


def test_header_only():
    tbl = CsvTable(io.StringIO("A,B\n"))
    assert tbl.row_count() == 0
    assert tbl.col_count() == 2


def test_duplicate_column_last_wins():
    tbl = CsvTable(io.StringIO("X,X\nfirst,second\n"))
    assert tbl.cell("X", 0) == "second"


def test_custom_delimiter():
    tbl = CsvTable(io.StringIO("A;B\n1,5;2\n"), ";")
    assert tbl.cell("A", 0) == "1,5"
    assert tbl.cell("B", 0) == "2"