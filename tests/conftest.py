import pytest

from nfl_stats_parser import constants
from nfl_stats_parser.core.schema_registry import TransformKind, lookup
from nfl_stats_parser.core.table import GenericTable


SAMPLE_CELLS = {
    TransformKind.IDENTITY: "Team A",
    TransformKind.DURATION_MM_SS: "31:45",
    TransformKind.PERCENTAGE: "45",
    TransformKind.COMMA_STRIPPED_NUMERIC: "1,234",
    TransformKind.NUMERIC: "2.5",
    TransformKind.AUTO: "12",
}


def sample_row(category, role, rank="1"):
    """One well-formed data row of schema width"""
    row = [SAMPLE_CELLS[spec.transform] for spec in lookup(category, role)]
    row[0] = rank
    return row


def sample_table(category, role, n_rows=2, raw_scoring=False):
    """Header + n_rows data rows; raw_scoring adds the two extra SCORING columns"""
    specs = lookup(category, role)
    header = [spec.canonical_name.upper() for spec in specs]
    rows = [sample_row(category, role, rank=str(i + 1)) for i in range(n_rows)]

    if raw_scoring:
        header = header[:5] + ["TD", "XP"] + header[5:]
        rows = [row[:5] + ["99", "98"] + row[5:] for row in rows]

    return GenericTable.from_rows([header] + rows)


@pytest.fixture
def make_table():
    return sample_table


@pytest.fixture
def category_roles():
    return [(category, role) for category in constants.SUPPORTED_STATS for role in constants.ROLES]


STATS_PAGE_HTML = """
<html>
<body>
<div id="nav"><a href="/">NFL</a></div>
<table id="result">
  <thead>
    <tr><th colspan="2">Team</th><th colspan="3">Points</th><th colspan="12">Touchdowns</th></tr>
    <tr>
      <th>Rk</th><th>Team</th><th>G</th><th>Pts/G</th><th>Pts</th>
      <th>Rush</th><th>Rec</th><th>PR</th><th>KR</th><th>Int</th><th>Fum</th>
      <th>FG</th><th>XP</th><th>XPM</th><th>FGM</th><th>Saf</th><th>2PT</th>
    </tr>
  </thead>
  <tbody>
    <tr>
      <td>1</td><td><a href="/teams/a">Team A</a></td><td>16</td><td>28.5</td><td>456</td>
      <td>20</td><td>15</td><td>2</td><td>1</td><td>1</td><td>0</td>
      <td>0</td><td>45</td><td>45</td><td>5</td><td>1</td><td>2</td>
    </tr>
    <tr>
      <td>2</td><td>Team B</td><td>16</td><td>25.0</td><td>400</td>
      <td>18</td><td>14</td><td>0</td><td>0</td><td>2</td><td>1</td>
      <td>0</td><td>40</td><td>39</td><td>12</td><td>0</td><td>1</td>
    </tr>
  </tbody>
</table>
</body>
</html>
"""


@pytest.fixture
def stats_page_html():
    return STATS_PAGE_HTML
