from nfl_stats_parser.core.table import GenericTable


def test_from_rows_converts_cells_to_strings():
    table = GenericTable.from_rows([["Rk", "Team"], [1, "Team A"]])
    assert table.rows == (("Rk", "Team"), ("1", "Team A"))


def test_from_rows_maps_none_to_empty_string():
    table = GenericTable.from_rows([["Rk", "Team"], [None, "Team A"]])
    assert table.data_rows == [("", "Team A")]
    assert "None" not in table.rows[1]


def test_row_widths_in_table_order():
    table = GenericTable.from_rows([["a", "b", "c"], ["1", "2", "3"], ["1"]])
    assert table.row_widths() == [3, 1]
    assert table.column_count == 3
    assert table.header == ("a", "b", "c")


def test_empty_table():
    table = GenericTable.from_rows([])
    assert table.row_count == 0
    assert table.column_count == 0
    assert table.header == ()
