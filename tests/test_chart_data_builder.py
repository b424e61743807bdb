"""Tests for DataTable serialization of chart inputs."""

from __future__ import annotations

import pytest

from seer.charting.builder import ChartDataBuilder, camelize, format_colors, js_literal, js_string
from seer.charting.errors import AccessorNotFoundError, MissingInputError
from seer.charting.schema import ColumnChartOptions

pytestmark = pytest.mark.unit


def _constant(value: object):
    return lambda _record: value


@pytest.fixture
def builder() -> ChartDataBuilder:
    return ChartDataBuilder([0, 1, 2, 3], [[1, 2, 3], [3, 4, 5]])


def test_build_columns_declares_axis_plus_one_column_per_category(builder: ChartDataBuilder) -> None:
    """Emit N+1 columns, the first one being the string axis column."""

    columns = builder.build_columns(str).splitlines()

    assert len(columns) == 5
    assert columns[0].strip() == "Seer.chartsData[chartIndex].addColumn('string', 'Date');"
    for line, label in zip(columns[1:], ("0", "1", "2", "3")):
        assert line.strip() == f"Seer.chartsData[chartIndex].addColumn('number', '{label}');"


def test_data_rows_is_first_seen_union_of_labels(builder: ChartDataBuilder) -> None:
    """Row labels are deduplicated across series in first-seen order."""

    assert builder.data_rows(str) == ["1", "2", "3", "4", "5"]


def test_build_rows_adds_rows_and_label_cells(builder: ChartDataBuilder) -> None:
    """Declare the row count and bind each label into column 0."""

    rows = [line.strip() for line in builder.build_rows("__str__").splitlines()]

    assert rows[0] == "Seer.chartsData[chartIndex].addRows(5);"
    assert rows[1:] == [
        "Seer.chartsData[chartIndex].setCell(0, 0, '1');",
        "Seer.chartsData[chartIndex].setCell(1, 0, '2');",
        "Seer.chartsData[chartIndex].setCell(2, 0, '3');",
        "Seer.chartsData[chartIndex].setCell(3, 0, '4');",
        "Seer.chartsData[chartIndex].setCell(4, 0, '5');",
    ]


def test_build_cells_emits_one_assignment_per_record(builder: ChartDataBuilder) -> None:
    """Cells are addressed at (record index, series index + 1)."""

    cells = [line.strip() for line in builder.build_cells(_constant(3)).splitlines()]

    assert cells == [
        "Seer.chartsData[chartIndex].setCell(0, 1, 3);",
        "Seer.chartsData[chartIndex].setCell(1, 1, 3);",
        "Seer.chartsData[chartIndex].setCell(2, 1, 3);",
        "Seer.chartsData[chartIndex].setCell(0, 2, 3);",
        "Seer.chartsData[chartIndex].setCell(1, 2, 3);",
        "Seer.chartsData[chartIndex].setCell(2, 2, 3);",
    ]


def test_build_cells_calls_named_methods_on_records(builder: ChartDataBuilder) -> None:
    """A string accessor naming a method is looked up and called."""

    cells = builder.build_cells("bit_length")

    assert "setCell(0, 1, 1);" in cells
    assert "setCell(2, 2, 3);" in cells


def test_ragged_series_keep_record_position_as_row_index() -> None:
    """A shorter series fills rows by position, not by matching labels."""

    builder = ChartDataBuilder(["a", "b"], [["x", "y", "z"], ["z"]])

    rows = builder.build_rows(str)
    cells = builder.build_cells(_constant(1))

    assert "addRows(3);" in rows
    assert "setCell(0, 2, 1);" in cells
    assert "setCell(2, 2, 1);" not in cells
    assert len(cells.splitlines()) == 4


def test_default_accessors_use_record_protocols(products, sales) -> None:
    """Without accessors, records are read through label() and value()."""

    builder = ChartDataBuilder(products, sales)

    assert builder.data_rows(None) == ["Mon", "Tue"]
    assert "setCell(1, 2, 11);" in builder.build_cells(None)
    assert "addColumn('number', 'Gizmo');" in builder.build_columns("name")


def test_missing_accessor_raises(builder: ChartDataBuilder) -> None:
    """Fail immediately when a record lacks the requested accessor."""

    with pytest.raises(AccessorNotFoundError) as excinfo:
        builder.build_cells("quantity")
    assert excinfo.value.accessor == "quantity"


def test_missing_collections_raise() -> None:
    """Reject missing inputs explicitly instead of failing mid-iteration."""

    with pytest.raises(MissingInputError):
        ChartDataBuilder(None, [[1]])
    with pytest.raises(MissingInputError):
        ChartDataBuilder([1], None)


def test_build_options_emits_defaults_and_skips_unset() -> None:
    """Defaults are present; options without a value or default are absent."""

    rendered = ChartDataBuilder.build_options(ColumnChartOptions())

    assert "colors: ['324F69','919E4B','A34D4D','BEC8BE','B9A272','8D6047']" in rendered
    assert "height: 350" in rendered
    assert "width: 550" in rendered
    assert "legend: 'bottom'" in rendered
    assert "is3D: false" in rendered
    assert "title" not in rendered
    assert "isStacked" not in rendered


def test_build_options_quotes_only_string_options() -> None:
    """String options are quoted; numbers and booleans are bare literals."""

    options = ColumnChartOptions(title="Widget Quantities", title_x="Widgets", is_stacked=True, max=100, on_select="f")
    rendered = ChartDataBuilder.build_options(options)

    assert "title: 'Widget Quantities'" in rendered
    assert "titleX: 'Widgets'" in rendered
    assert "isStacked: true" in rendered
    assert "max: 100" in rendered
    assert "onSelect" not in rendered


@pytest.mark.parametrize(
    ("name", "expected"),
    [("is_3_d", "is3D"), ("axis_background_color", "axisBackgroundColor"), ("height", "height")],
)
def test_camelize(name: str, expected: str) -> None:
    assert camelize(name) == expected


def test_format_colors_passes_through_3d_literals() -> None:
    literal = "[{color:'#990000', darker:'#660000'}]"

    assert format_colors(literal) == literal
    assert format_colors("#990000") == "['990000']"


def test_js_helpers_escape_and_render_literals() -> None:
    assert js_string("it's") == "'it\\'s'"
    assert js_string("</script>") == "'<\\/script>'"
    assert js_literal(None) == "null"
    assert js_literal(False) == "false"
    assert js_literal(2.5) == "2.5"
    assert js_literal(float("nan")) == "null"


def test_data_rows_keep_labels_of_different_types_apart() -> None:
    """The integer 1 and the string "1" are distinct row labels."""

    builder = ChartDataBuilder(["a"], [[1, "1", 1]])

    assert builder.data_rows(lambda record: record) == [1, "1"]
    assert "addRows(2);" in builder.build_rows(lambda record: record)


def test_row_count_and_label_cells_share_a_precomputed_domain() -> None:
    """Row statements can be built from one pass over the label accessor."""

    calls: list[object] = []

    def label(record: object) -> object:
        calls.append(record)
        return record

    builder = ChartDataBuilder(["a"], [["x", "y"]])
    rows = builder.data_rows(label)

    assert builder.build_row_count(rows).strip() == "Seer.chartsData[chartIndex].addRows(2);"
    assert "setCell(1, 0, 'y');" in builder.build_label_cells(rows)
    assert len(calls) == 2
