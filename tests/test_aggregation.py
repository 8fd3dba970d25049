"""Tests for the series split, range filtering and range totals."""

import datetime as dt

import pandas as pd
import pytest

from conftest import make_frame
from score_dashboard.data.aggregation import compute_totals, latest_records, recompute, split_series
from score_dashboard.data.filters import apply_range_filter, serialize_range
from score_dashboard.data.models import AggregateTotals, DateTimeRange, empty_record_frame

DAY = dt.date(2024, 5, 1)


def _absent(value) -> bool:
    return pd.isna(value)


class TestSplitSeries:
    """Operation A: aligned, gap-preserving fun / tired columns."""

    def test_scenario_fun_tired_zero(self, sample_frame):
        series = split_series(sample_frame)

        assert series["fun"].iloc[0] == 10
        assert _absent(series["fun"].iloc[1])
        assert _absent(series["fun"].iloc[2])
        assert _absent(series["tired"].iloc[0])
        assert series["tired"].iloc[1] == 5
        assert _absent(series["tired"].iloc[2])

    def test_series_are_aligned_with_records(self, sample_frame):
        series = split_series(sample_frame)

        assert len(series) == len(sample_frame)
        assert series["created_at"].tolist() == sample_frame["created_at"].tolist()

    def test_series_are_pointwise_disjoint(self):
        frame = make_frame(*[(i, f"2024-05-01T00:{i:02d}:00", score) for i, score in enumerate([3, -2, 0, 7, -9, 0, 1])])

        series = split_series(frame)

        both_present = series["fun"].notna() & series["tired"].notna()
        assert not both_present.any()
        neither = series["fun"].isna() & series["tired"].isna()
        assert neither.tolist() == (frame["score"] == 0).tolist()

    def test_absent_points_are_not_zero(self):
        frame = make_frame((1, "2024-05-01T00:00:00", -4))

        series = split_series(frame)

        assert series["fun"].isna().all()
        assert (series["fun"].fillna(-1) != 0).all()

    def test_empty_record_set(self):
        series = split_series(empty_record_frame())

        assert series.empty
        assert list(series.columns) == ["created_at", "fun", "tired"]

    def test_input_is_not_mutated(self, sample_frame):
        before = sample_frame.copy()

        split_series(sample_frame)

        pd.testing.assert_frame_equal(sample_frame, before)


class TestComputeTotals:
    """Operation B: inclusive range totals, zero counts toward fun."""

    def test_scenario_unfiltered_totals(self, sample_frame):
        assert compute_totals(sample_frame) == AggregateTotals(fun=10, tired=5)

    def test_unfiltered_total_equals_sum_of_magnitudes(self):
        scores = [4, -7, 0, 12, -1, -1, 3]
        frame = make_frame(*[(i, f"2024-05-01T0{i}:00:00", s) for i, s in enumerate(scores)])

        totals = compute_totals(frame)

        assert totals.fun + totals.tired == sum(abs(s) for s in scores)
        assert totals.total == sum(abs(s) for s in scores)

    def test_zero_score_counts_toward_fun_but_adds_nothing(self):
        frame = make_frame((1, "2024-05-01T00:00:00", 0))

        assert compute_totals(frame) == AggregateTotals(fun=0, tired=0)

    def test_inverted_range_is_empty(self, sample_frame):
        inverted = DateTimeRange(start_date=DAY, end_date=DAY, start_hour=12, end_hour=3)

        assert compute_totals(sample_frame, inverted) == AggregateTotals(fun=0, tired=0)

    def test_inverted_dates_are_empty(self, sample_frame):
        inverted = DateTimeRange(start_date=dt.date(2024, 5, 2), end_date=DAY)

        assert compute_totals(sample_frame, inverted) == AggregateTotals()

    def test_range_is_evaluated_in_jst(self):
        # 2024-05-01T15:30Z is 2024-05-02 00:30 JST
        frame = make_frame((1, "2024-05-01T15:30:00", 6), (2, "2024-05-01T14:30:00", -2))

        next_day_jst = DateTimeRange(start_date=dt.date(2024, 5, 2), end_date=dt.date(2024, 5, 2))
        same_day_jst = DateTimeRange(start_date=DAY, end_date=DAY)

        assert compute_totals(frame, next_day_jst) == AggregateTotals(fun=6, tired=0)
        assert compute_totals(frame, same_day_jst) == AggregateTotals(fun=0, tired=2)

    def test_bounds_are_inclusive(self):
        # 10:00:00 JST and 12:59:59 JST are exactly the range ends
        frame = make_frame(
            (1, "2024-05-01T01:00:00", 1),
            (2, "2024-05-01T03:59:59", 2),
            (3, "2024-05-01T00:59:59", 100),
            (4, "2024-05-01T04:00:00", 100),
        )
        window = DateTimeRange(start_date=DAY, end_date=DAY, start_hour=10, end_hour=12)

        assert compute_totals(frame, window) == AggregateTotals(fun=3, tired=0)

    def test_fractional_seconds_in_last_second_of_end_hour_are_included(self):
        # 03:59:59.5Z is 12:59:59.5 JST, inside the 12 o'clock hour
        frame = make_frame((1, "2024-05-01T03:59:59.500000", 7), (2, "2024-05-01T04:00:00.000001", 100))
        window = DateTimeRange(start_date=DAY, end_date=DAY, start_hour=12, end_hour=12)

        assert compute_totals(frame, window) == AggregateTotals(fun=7, tired=0)

    def test_fractional_seconds_at_end_of_full_day_are_included(self):
        # 14:59:59.999Z is 23:59:59.999 JST on the same day
        frame = make_frame((1, "2024-05-01T14:59:59.999", -3))
        window = DateTimeRange(start_date=DAY, end_date=DAY)

        assert compute_totals(frame, window) == AggregateTotals(fun=0, tired=3)

    def test_idempotent(self, sample_frame):
        window = DateTimeRange(start_date=DAY, end_date=DAY)
        before = sample_frame.copy()

        first = compute_totals(sample_frame, window)
        second = compute_totals(sample_frame, window)

        assert first == second
        pd.testing.assert_frame_equal(sample_frame, before)

    def test_recompute_is_compute_totals(self, sample_frame):
        assert recompute(sample_frame) == compute_totals(sample_frame)

    def test_empty_record_set(self):
        assert compute_totals(empty_record_frame(), DateTimeRange.today()) == AggregateTotals()

    def test_fun_share(self):
        assert AggregateTotals(fun=3, tired=1).fun_share == pytest.approx(75.0)
        assert AggregateTotals().fun_share is None


class TestApplyRangeFilter:
    def test_none_range_keeps_everything(self, sample_frame):
        filtered = apply_range_filter(sample_frame, None)

        assert len(filtered) == len(sample_frame)
        assert filtered.attrs["applied_range"] is None

    def test_records_applied_range(self, sample_frame):
        window = DateTimeRange(start_date=DAY, end_date=DAY, start_hour=9, end_hour=10)

        filtered = apply_range_filter(sample_frame, window)

        # 01:00Z and 02:00Z are 10:00 and 11:00 JST; only the first is before 10:59:59
        assert filtered["id"].tolist() == [1]
        assert filtered.attrs["applied_range"] == serialize_range(window)

    def test_serialize_range(self):
        window = DateTimeRange(start_date=DAY, end_date=dt.date(2024, 5, 3), start_hour=6, end_hour=18)

        assert serialize_range(window) == {
            "start_date": "2024-05-01",
            "end_date": "2024-05-03",
            "start_hour": 6,
            "end_hour": 18,
            "start": "2024-05-01T06:00:00+09:00",
            "end": "2024-05-03T18:59:59+09:00",
        }


class TestLatestRecords:
    def test_newest_first_limited_to_five(self):
        frame = make_frame(*[(i, f"2024-05-01T00:0{i}:00", i) for i in range(8)])

        latest = latest_records(frame)

        assert [r.id for r in latest] == [7, 6, 5, 4, 3]

    def test_fewer_records_than_limit(self, sample_frame):
        assert [r.id for r in latest_records(sample_frame)] == [3, 2, 1]

    def test_empty(self):
        assert latest_records(empty_record_frame()) == []
