"""Tests for numeric column statistics."""

import math

import numpy as np
import pytest

from tabstats.analysis.numeric import (
    NumericStats,
    numeric_stats,
    rank_quantile,
    summarize_values,
)
from tabstats.core.errors import EmptyInputError


class TestNumericStats:
    """Tests for numeric_stats function."""

    def test_age_example(self, age_sex_rows: list[dict]) -> None:
        """Test the two-value Age column."""
        stats = numeric_stats(age_sex_rows)

        assert list(stats) == ["Age"]
        age = stats["Age"]
        assert age.count == 2
        assert age.mean == "30.00"
        assert age.std == "8.00"
        assert age.min == 22
        assert age.max == 38
        # floor(0.5 * 1) = 0, so the median is the lower value
        assert age.median == 22
        assert age.q1 == 22
        assert age.q3 == 22

    def test_only_numeric_columns(self, passenger_rows: list[dict]) -> None:
        """Test that categorical columns are not summarized."""
        stats = numeric_stats(passenger_rows)
        assert list(stats) == ["PassengerId", "Survived", "Pclass", "Age", "Fare"]

    def test_nan_and_malformed_excluded(self) -> None:
        """Test that NaN and strings are skipped, not fatal."""
        rows = [{"X": 1.0}, {"X": math.nan}, {"X": "n/a"}, {"X": None}, {"X": 3.0}]
        stats = numeric_stats(rows)["X"]

        assert stats.count == 2
        assert stats.mean == "2.00"

    def test_column_without_values_omitted(self) -> None:
        """Test that an all-invalid numeric column is left out."""
        rows = [{"X": math.nan, "Y": 1}, {"X": None, "Y": 2}]
        assert list(numeric_stats(rows)) == ["Y"]

    def test_empty_raises(self) -> None:
        """Test that an empty row set is rejected."""
        with pytest.raises(EmptyInputError):
            numeric_stats([])

    def test_quartile_ordering(self) -> None:
        """Test min <= q1 <= median <= q3 <= max over random samples."""
        rng = np.random.default_rng(42)
        for size in (1, 2, 3, 7, 50, 333):
            rows = [{"V": float(v)} for v in rng.normal(10, 4, size)]
            s = numeric_stats(rows)["V"]
            assert s.min <= s.q1 <= s.median <= s.q3 <= s.max

    def test_to_dict_keys(self, age_sex_rows: list[dict]) -> None:
        """Test the export keys."""
        d = numeric_stats(age_sex_rows)["Age"].to_dict()
        assert d == {
            "count": 2,
            "mean": "30.00",
            "std": "8.00",
            "min": 22,
            "q1": 22,
            "median": 22,
            "q3": 22,
            "max": 38,
        }


class TestSummarizeValues:
    """Tests for summarize_values function."""

    def test_rank_quartiles(self) -> None:
        """Test quartiles index the sorted sample without interpolation."""
        s = summarize_values("V", [9, 1, 8, 2, 7, 3, 6, 4, 5])

        # n = 9: ranks floor(2.0)=2, floor(4.0)=4, floor(6.0)=6
        assert (s.min, s.q1, s.median, s.q3, s.max) == (1, 3, 5, 7, 9)

    def test_population_std(self) -> None:
        """Test the divisor is n, not n - 1."""
        s = summarize_values("V", [2, 4, 4, 4, 5, 5, 7, 9])
        assert s.mean == "5.00"
        assert s.std == "2.00"

    def test_single_value(self) -> None:
        """Test a one-value sample."""
        s = summarize_values("V", [3.5])
        assert s.count == 1
        assert s.std == "0.00"
        assert s.min == s.q1 == s.median == s.q3 == s.max == 3.5

    def test_raw_precision_kept(self) -> None:
        """Test that extremes and quartiles are not rounded."""
        s = summarize_values("V", [0.123456, 0.654321])
        assert s.min == 0.123456
        assert s.max == 0.654321
        assert s.mean == "0.39"

    def test_empty_raises(self) -> None:
        """Test that an empty sample is rejected."""
        with pytest.raises(ValueError):
            summarize_values("V", [])

    def test_format_for_display(self) -> None:
        """Test the display string."""
        text = summarize_values("Fare", [1, 2, 3]).format_for_display()
        assert "**Fare** (n=3)" in text
        assert "Mean: 2.00" in text


class TestRankQuantile:
    """Tests for rank_quantile function."""

    def test_indexes(self) -> None:
        """Test index selection for a four-value sample."""
        values = [10, 20, 30, 40]
        # floor(p * 3): 0, 1, 2
        assert rank_quantile(values, 0.25) == 10
        assert rank_quantile(values, 0.5) == 20
        assert rank_quantile(values, 0.75) == 30

    def test_stats_type(self) -> None:
        """Test that summaries are NumericStats."""
        assert isinstance(summarize_values("V", [1]), NumericStats)
