import logging

import pytest

from nfl_stats_parser import constants
from nfl_stats_parser.core.normalizer import CanonicalRecord, normalize
from nfl_stats_parser.core.schema_registry import canonical_columns
from nfl_stats_parser.core.table import GenericTable
from nfl_stats_parser.exceptions import ShapeMismatch, UnknownCategory, UnknownRoleVariant


SCORING_ROW = ["1", "Team A", "16", "28.5", "456", "20", "15", "2", "1", "1", "0", "0", "45", "45", "5", "1", "2"]


def test_every_category_produces_canonical_keys(make_table, category_roles):
    for category, role in category_roles:
        result = normalize(make_table(category, role), category, role, 2019, "REG")

        expected = canonical_columns(category, role) + constants.METADATA_FIELDS
        assert len(result.records) == 2
        for record in result.records:
            assert list(record.keys()) == expected
        assert list(result.columns) == expected
        assert result.diagnostics == ()


def test_scoring_end_to_end():
    header = [name.upper() for name in canonical_columns("SCORING", "offense")]
    table = GenericTable.from_rows([header, SCORING_ROW])

    result = normalize(table, "SCORING", "offense", 2019, "REG")

    assert len(result.records) == 1
    record = result.records[0]
    assert record["rank"] == 1
    assert record["team"] == "Team A"
    assert record["games"] == 16
    assert record["pts_game"] == 28.5
    assert record["pts_total"] == 456
    assert record["two_point_converted"] == 2
    assert record["stat"] == "SCORING"
    assert record["role"] == "offense"
    assert record["season"] == 2019
    assert record["season_type"] == "REG"


def test_scoring_raw_layout_drops_duplicate_columns():
    header = ["Rk", "Team", "G", "Pts/G", "Pts", "TD", "XP"] + ["X"] * 12
    raw_row = SCORING_ROW[:5] + ["38", "44"] + SCORING_ROW[5:]
    table = GenericTable.from_rows([header, raw_row])

    record = normalize(table, "SCORING", "defense", 2018, "POST").records[0]

    assert record["td_rush"] == 20
    assert record["td_rec"] == 15
    assert record["two_point_converted"] == 2
    assert 38 not in record.values()
    assert record.role == "defense"
    assert record.season_type == "POST"


def test_game_stats_transforms(make_table):
    record = normalize(make_table("GAME_STATS", "offense"), "GAME_STATS", "offense", 2019, "REG").records[0]

    assert record["time_of_poss"] == pytest.approx(31.75)
    assert record["plays_scrimmage"] == 1234.0
    assert record["penalty_yds"] == 1234.0
    assert record["third_pct"] == pytest.approx(0.45)
    assert record["fourth_pct"] == pytest.approx(0.45)
    assert record["turnover_ratio"] == 12
    assert record["team"] == "Team A"
    assert "top_min" not in record
    assert "top_sec" not in record


def test_game_stats_defense_has_no_turnover_ratio(make_table):
    offense = normalize(make_table("GAME_STATS", "offense"), "GAME_STATS", "offense", 2019, "REG")
    defense = normalize(make_table("GAME_STATS", "defense"), "GAME_STATS", "defense", 2019, "REG")

    assert all("turnover_ratio" in record for record in offense.records)
    assert all("turnover_ratio" not in record for record in defense.records)


@pytest.mark.parametrize(
    "category, column",
    [("TEAM_PASSING", "pass_yds"), ("RUSHING", "rush_yds"), ("TEAM_RECEIVING", "rec_yds"), ("OFFENSIVE_LINE", "rush_yds")],
)
def test_yards_columns_strip_thousands_separator(make_table, category, column):
    record = normalize(make_table(category, "offense"), category, "offense", 2019, "REG").records[0]
    assert record[column] == 1234.0
    assert isinstance(record[column], float)


def test_percentage_columns_are_ratios(make_table):
    passing = normalize(make_table("TEAM_PASSING", "offense"), "TEAM_PASSING", "offense", 2019, "REG").records[0]
    assert passing["pass_comp_pct"] == pytest.approx(0.45)
    assert passing["pass_first_pct"] == pytest.approx(0.45)

    receiving = normalize(make_table("TEAM_RECEIVING", "defense"), "TEAM_RECEIVING", "defense", 2019, "REG").records[0]
    assert receiving["rec_first_pct"] == pytest.approx(0.45)


def test_text_column_left_as_string():
    header = [name for name in canonical_columns("TEAM_PASSING", "offense")]
    row_a = ["1", "Team A", "16", "25.1", "401", "350", "560", "62.5", "35.0", "4,123", "7.4",
             "257.7", "30", "10", "200", "35.7", "75T", "50", "10", "30", "98.7"]
    row_b = ["2", "Team B", "16", "22.0", "352", "330", "540", "61.1", "33.8", "3,900", "7.2",
             "243.8", "25", "12", "190", "35.2", "66", "45", "8", "35", "90.1"]

    result = normalize(GenericTable.from_rows([header, row_a, row_b]), "TEAM_PASSING", "offense", 2016, "REG")

    assert [r["pass_long"] for r in result.records] == ["75T", "66"]
    assert [r["pass_rating"] for r in result.records] == [98.7, 90.1]
    assert [r["pass_yds"] for r in result.records] == [4123.0, 3900.0]
    assert [r["pass_comp_pct"] for r in result.records] == pytest.approx([0.625, 0.611])


def test_malformed_duration_drops_row(make_table, caplog):
    table = make_table("GAME_STATS", "offense", n_rows=3)
    rows = [list(row) for row in table.rows]
    time_idx = canonical_columns("GAME_STATS", "offense").index("time_of_poss")
    rows[2][time_idx] = "abc"

    with caplog.at_level(logging.WARNING, logger="nfl_stats_parser.core.normalizer"):
        result = normalize(GenericTable.from_rows(rows), "GAME_STATS", "offense", 2019, "REG")

    assert [r["rank"] for r in result.records] == [1, 3]
    assert result.skipped_rows == 1
    diagnostic = result.diagnostics[0]
    assert diagnostic.row_index == 2
    assert diagnostic.column == "time_of_poss"
    assert diagnostic.value == "abc"
    assert "MM:SS" in diagnostic.error
    assert "Skipping GAME_STATS row 2" in caplog.text


def test_malformed_numeric_drops_row(make_table):
    table = make_table("RUSHING", "defense", n_rows=2)
    rows = [list(row) for row in table.rows]
    columns = canonical_columns("RUSHING", "defense")
    rows[1][columns.index("rush_yds")] = "n/a"
    rows[1][columns.index("rush_first_pct")] = "--"

    result = normalize(GenericTable.from_rows(rows), "RUSHING", "defense", 2019, "REG")

    assert len(result.records) == 1
    assert result.records[0]["rank"] == 2
    assert result.skipped_rows == 1
    assert {d.column for d in result.diagnostics} == {"rush_yds", "rush_first_pct"}


def test_records_keep_source_order(make_table):
    table = make_table("OFFENSIVE_LINE", "offense", n_rows=5)
    rows = [list(row) for row in table.rows]
    rows[1][0], rows[5][0] = "5", "1"

    result = normalize(GenericTable.from_rows(rows), "OFFENSIVE_LINE", "offense", 2019, "REG")
    assert [r["rank"] for r in result.records] == [5, 2, 3, 4, 1]


def test_header_only_table_gives_no_records(make_table):
    table = make_table("RUSHING", "offense", n_rows=0)
    result = normalize(table, "RUSHING", "offense", 2019, "REG")
    assert result.records == ()
    assert result.to_dataframe().empty


def test_shape_mismatch_aborts():
    table = GenericTable.from_rows([["a"] * 15, ["1"] * 15])
    with pytest.raises(ShapeMismatch):
        normalize(table, "TEAM_PASSING", "offense", 2019, "REG")


def test_game_stats_defense_width_rejects_offense_table(make_table):
    with pytest.raises(ShapeMismatch):
        normalize(make_table("GAME_STATS", "offense"), "GAME_STATS", "defense", 2019, "REG")


def test_unknown_category_and_role(make_table):
    table = make_table("RUSHING", "offense")
    with pytest.raises(UnknownCategory):
        normalize(table, "PUNTING", "offense", 2019, "REG")
    with pytest.raises(UnknownRoleVariant):
        normalize(table, "RUSHING", "special", 2019, "REG")


def test_records_are_immutable(make_table):
    record = normalize(make_table("RUSHING", "offense"), "RUSHING", "offense", 2019, "REG").records[0]

    assert isinstance(record, CanonicalRecord)
    with pytest.raises(TypeError):
        record["rank"] = 99
    assert record.stat == "RUSHING"
    assert record.season == 2019


def test_to_dataframe(make_table):
    result = normalize(make_table("TEAM_RECEIVING", "offense", n_rows=3), "TEAM_RECEIVING", "offense", 2019, "REG")
    df = result.to_dataframe()

    assert df.shape == (3, 16 + 4)
    assert list(df.columns) == list(result.columns)
    assert df["rank"].tolist() == [1, 2, 3]
    assert set(df["stat"]) == {"TEAM_RECEIVING"}


def _passing_table(make_table, pass_att_cells):
    position = canonical_columns("TEAM_PASSING", "offense").index("pass_att")
    rows = [list(row) for row in make_table("TEAM_PASSING", "offense", n_rows=len(pass_att_cells)).rows]
    for row, cell in zip(rows[1:], pass_att_cells):
        row[position] = cell
    return GenericTable.from_rows(rows)


def test_counting_column_with_thousands_separator_is_int(make_table):
    result = normalize(_passing_table(make_table, ["1,024", "540"]), "TEAM_PASSING", "offense", 2019, "REG")

    assert [r["pass_att"] for r in result.records] == [1024, 540]
    assert all(type(r["pass_att"]) is int for r in result.records)
    assert result.diagnostics == ()
    assert result.to_dataframe()["pass_att"].dtype == "Int64"


def test_missing_cell_keeps_int_column_in_dataframe(make_table):
    result = normalize(_passing_table(make_table, ["", "540"]), "TEAM_PASSING", "offense", 2019, "REG")

    assert [r["pass_att"] for r in result.records] == [None, 540]
    assert result.diagnostics == ()

    column = result.to_dataframe()["pass_att"]
    assert column.dtype == "Int64"
    assert column.isna().tolist() == [True, False]
    assert column.iloc[1] == 540


def test_none_cells_count_as_missing(make_table):
    result = normalize(_passing_table(make_table, [None, "540"]), "TEAM_PASSING", "offense", 2019, "REG")

    assert [r["pass_att"] for r in result.records] == [None, 540]


def test_to_dataframe_is_a_copy(make_table):
    result = normalize(make_table("RUSHING", "offense"), "RUSHING", "offense", 2019, "REG")
    df = result.to_dataframe()
    df["rank"] = 0

    assert result.to_dataframe()["rank"].tolist() == [1, 2]
