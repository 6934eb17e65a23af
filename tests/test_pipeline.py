"""Tests for the end-to-end analysis pipeline."""

import io

import pytest

from tabstats.core.errors import EmptyInputError
from tabstats.core.rows import ColumnRole
from tabstats.io import load_csv
from tabstats.pipeline import AnalysisReport, run_analysis


class TestRunAnalysis:
    """Tests for run_analysis function."""

    def test_default_sections(self, passenger_rows: list[dict]) -> None:
        """Test missing and numeric sections without categorical columns."""
        report = run_analysis(passenger_rows)

        assert isinstance(report, AnalysisReport)
        assert report.shape == (6, 7)
        assert report.roles["Sex"] == ColumnRole.CATEGORICAL
        assert report.summary.sections == ["missing", "numeric"]

    def test_categorical_section(self, passenger_rows: list[dict]) -> None:
        """Test requested categorical columns are cross-tabulated."""
        report = run_analysis(passenger_rows, categorical_columns=["Sex"])

        assert report.summary.sections == ["missing", "numeric", "categorical"]
        assert report.summary.categorical["Sex"]["female | Survived:1"] == 3

    def test_histograms_and_counts(self, passenger_rows: list[dict]) -> None:
        """Test configured histogram and count-chart columns."""
        report = run_analysis(passenger_rows)

        assert set(report.histograms) == {"Age", "Fare"}
        assert report.histograms["Age"].total == 4
        assert report.histograms["Fare"].total == 6
        assert report.value_counts["Sex"] == {"male": 3, "female": 3}
        assert report.value_counts["Pclass"] == {"3": 4, "1": 2}

    def test_histogram_columns_override(self, passenger_rows: list[dict]) -> None:
        """Test choosing histogram columns, unknown ones skipped."""
        report = run_analysis(passenger_rows, histogram_columns=["Fare", "Cabin"])
        assert list(report.histograms) == ["Fare"]

    def test_order_independent(self, passenger_rows: list[dict]) -> None:
        """Test repeated runs over the same rows agree."""
        first = run_analysis(passenger_rows, categorical_columns=["Sex", "Embarked"])
        second = run_analysis(passenger_rows, categorical_columns=["Sex", "Embarked"])
        assert first.to_dict() == second.to_dict()

    def test_to_dict(self, age_sex_rows: list[dict]) -> None:
        """Test the report dictionary."""
        data = run_analysis(age_sex_rows).to_dict()

        assert data["shape"] == {"rows": 3, "columns": 2}
        assert data["roles"] == {"Age": "numeric", "Sex": "categorical"}
        assert data["summary"]["numeric"]["Age"]["median"] == 22
        assert data["histograms"]["Age"]["total"] == 2
        assert data["value_counts"] == {"Sex": {"male": 1, "female": 2}}

    def test_empty_raises(self) -> None:
        """Test that an empty row set is rejected."""
        with pytest.raises(EmptyInputError):
            run_analysis([])

    def test_overflowing_cell(self) -> None:
        """Test a numeric cell beyond float range is skipped everywhere."""
        rows = load_csv(io.StringIO("Age,Fare\n22,1e400\n30,5\n"))
        report = run_analysis(rows)

        assert report.roles["Fare"] == ColumnRole.NUMERIC
        fare = report.summary.numeric["Fare"]
        assert fare.count == 1
        assert fare.std == "0.00"
        assert report.histograms["Fare"].total == 1
        assert report.histograms["Age"].total == 2
