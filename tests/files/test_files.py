"""Tests for CSV and summary file handling."""

import io
import json
from pathlib import Path

import pytest

from tabstats.analysis import missing_stats
from tabstats.core.errors import MalformedInputError, NothingToExportError
from tabstats.core.rows import ColumnRole, classify_columns
from tabstats.core.summary import Summary
from tabstats.io import coerce_cell, export_summary, load_csv, save_csv

CSV_TEXT = """PassengerId,Survived,Name,Sex,Age,Fare,Cabin,Alone
1,0,"Braund, Mr. Owen",male,22,7.25,,false
2,1,"Cumings, Mrs. John",female,38,71.2833,C85,FALSE

3,1,"Heikkinen, Miss. Laina",female,,7.925,,true
"""


class TestCoerceCell:
    """Tests for coerce_cell function."""

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("", None),
            ("true", True),
            ("FALSE", False),
            ("42", 42),
            ("-7", -7),
            ("3.5", 3.5),
            ("22.0", 22),
            ("1e3", 1000),
            (".5", 0.5),
            (" true", True),
            ("False ", False),
            (" 5", 5),
            ("male", "male"),
            ("C85", "C85"),
            ("1,000", "1,000"),
        ],
    )
    def test_coercion(self, text: str, expected) -> None:
        """Test conversion of raw cells."""
        result = coerce_cell(text)
        assert result == expected
        assert type(result) is type(expected)


class TestLoadCsv:
    """Tests for load_csv function."""

    def test_load_types(self) -> None:
        """Test per-cell typing of a loaded file."""
        rows = load_csv(io.StringIO(CSV_TEXT))

        assert len(rows) == 3
        assert rows[0] == {
            "PassengerId": 1,
            "Survived": 0,
            "Name": "Braund, Mr. Owen",
            "Sex": "male",
            "Age": 22,
            "Fare": 7.25,
            "Cabin": None,
            "Alone": False,
        }
        assert rows[2]["Age"] is None

    def test_roles_after_load(self) -> None:
        """Test loaded rows classify as expected."""
        roles = classify_columns(load_csv(io.StringIO(CSV_TEXT)))

        assert roles["Age"] == ColumnRole.NUMERIC
        assert roles["Name"] == ColumnRole.CATEGORICAL
        assert roles["Cabin"] == ColumnRole.CATEGORICAL
        assert roles["Alone"] == ColumnRole.CATEGORICAL

    def test_load_from_path(self, tmp_path: Path) -> None:
        """Test loading from a file path."""
        path = tmp_path / "train.csv"
        path.write_text(CSV_TEXT, encoding="utf-8")
        assert len(load_csv(path)) == 3

    def test_empty_file(self, tmp_path: Path) -> None:
        """Test an empty file loads as no rows."""
        path = tmp_path / "empty.csv"
        path.write_text("", encoding="utf-8")
        assert load_csv(path) == []

    def test_header_only(self) -> None:
        """Test a header without data loads as no rows."""
        assert load_csv(io.StringIO("a,b\n")) == []

    def test_unterminated_quote(self) -> None:
        """Test a quote left open to the end of input."""
        with pytest.raises(MalformedInputError):
            load_csv(io.StringIO('a,b\n1,"oops\n'))

    def test_not_utf8(self, tmp_path: Path) -> None:
        """Test a file in another encoding."""
        path = tmp_path / "latin.csv"
        path.write_bytes(b"\xff\xfeName\nJos\xe9\n")

        with pytest.raises(MalformedInputError, match="latin.csv"):
            load_csv(path)


class TestSaveCsv:
    """Tests for save_csv function."""

    def test_round_trip(self, tmp_path: Path) -> None:
        """Test written rows load back with the same values."""
        path = tmp_path / "merged.csv"
        rows = load_csv(io.StringIO(CSV_TEXT))

        save_csv(rows, path)

        assert load_csv(path) == rows

    def test_column_order_from_first_row(self) -> None:
        """Test header order and blanks for absent keys."""
        buffer = io.StringIO()
        save_csv([{"b": 1, "a": None}, {"a": "x"}, {"a": "y", "b": 2, "extra": 9}], buffer)

        lines = buffer.getvalue().splitlines()
        assert lines == ["b,a", "1,", ",x", "2,y"]

    def test_empty_rows(self, tmp_path: Path) -> None:
        """Test exporting nothing is refused."""
        with pytest.raises(NothingToExportError):
            save_csv([], tmp_path / "out.csv")


class TestExportSummary:
    """Tests for export_summary function."""

    def test_writes_json(self, tmp_path: Path, age_sex_rows: list[dict]) -> None:
        """Test the exported file holds the summary."""
        summary = Summary().with_missing(missing_stats(age_sex_rows))
        path = export_summary(summary, tmp_path / "summary.json")

        data = json.loads(path.read_text(encoding="utf-8"))
        assert data == {
            "missing": [
                {"column": "Age", "percent_missing": 33.33},
                {"column": "Sex", "percent_missing": 0.0},
            ]
        }

    def test_empty_summary(self, tmp_path: Path) -> None:
        """Test an empty summary is refused."""
        with pytest.raises(NothingToExportError):
            export_summary(Summary(), tmp_path / "summary.json")
        assert not (tmp_path / "summary.json").exists()
