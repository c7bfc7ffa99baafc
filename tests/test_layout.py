import unittest

import pendulum

from roadmap.model.date_axis import DateAxis
from roadmap.model.timeline_item import NormalizedTimelineItem
from roadmap.service.layout import (
    color_bucket,
    compute_axis,
    month_tick_positions,
    position_bar,
    today_marker_percent,
)
from roadmap.service.normalize import normalize_item


def _item(start: str, end: str, completion: float = 0) -> NormalizedTimelineItem:
    normalized = normalize_item(
        {"initiative": "Item", "start": start, "delivery": end, "completion": completion}
    )
    assert normalized is not None
    return normalized


def _axis(start: pendulum.Date, end: pendulum.Date) -> DateAxis:
    return {
        "axis_start": start,
        "axis_end": end,
        "total_days": start.diff(end).in_days() + 1,
        "month_ticks": [],
    }


class ComputeAxisTests(unittest.TestCase):
    def test_single_month_layout(self) -> None:
        today = pendulum.date(2025, 1, 15)
        item = _item("2025-01-10", "2025-01-20", completion=50)
        axis = compute_axis([item], today)

        self.assertEqual(axis["axis_start"], pendulum.date(2025, 1, 1))
        self.assertEqual(axis["axis_end"], pendulum.date(2025, 1, 31))
        self.assertEqual(axis["total_days"], 31)

        bar = position_bar(item, axis)
        self.assertAlmostEqual(bar["left_percent"], 9 / 31 * 100)
        self.assertAlmostEqual(bar["left_percent"], 29.03, places=2)
        self.assertAlmostEqual(bar["width_percent"], 10 / 31 * 100)
        self.assertAlmostEqual(bar["width_percent"], 32.26, places=2)
        self.assertEqual(color_bucket(item["completion_percent"]), "on-track")

    def test_axis_always_contains_today(self) -> None:
        today = pendulum.date(2025, 6, 10)
        axis = compute_axis([_item("2024-03-05", "2024-04-20")], today)
        self.assertEqual(axis["axis_start"], pendulum.date(2024, 3, 1))
        self.assertEqual(axis["axis_end"], pendulum.date(2025, 6, 30))
        self.assertLessEqual(axis["axis_start"], today)
        self.assertGreaterEqual(axis["axis_end"], today)

    def test_axis_extends_back_to_today(self) -> None:
        today = pendulum.date(2024, 11, 3)
        axis = compute_axis([_item("2025-02-01", "2025-02-10")], today)
        self.assertEqual(axis["axis_start"], pendulum.date(2024, 11, 1))
        self.assertEqual(axis["axis_end"], pendulum.date(2025, 2, 28))

    def test_degenerate_axis_without_dates(self) -> None:
        today = pendulum.date(2025, 1, 15)
        for items in ([], [_item("soon", "later")]):
            with self.subTest(items=items):
                axis = compute_axis(items, today)
                self.assertEqual(axis["total_days"], 0)
                self.assertEqual(axis["month_ticks"], [])
                self.assertIsNone(today_marker_percent(axis, today))
                self.assertEqual(month_tick_positions(axis), [])

    def test_unparseable_dates_do_not_affect_range(self) -> None:
        today = pendulum.date(2025, 1, 15)
        axis = compute_axis(
            [_item("2025-01-10", "2025-01-20"), _item("someday", "whenever")], today
        )
        self.assertEqual(axis["axis_start"], pendulum.date(2025, 1, 1))
        self.assertEqual(axis["total_days"], 31)

    def test_each_parseable_date_counts_on_its_own(self) -> None:
        today = pendulum.date(2025, 1, 15)
        axis = compute_axis(
            [_item("2025-01-10", "2025-01-20"), _item("2020-01-01", "whenever")], today
        )
        self.assertEqual(axis["axis_start"], pendulum.date(2020, 1, 1))
        self.assertEqual(axis["axis_end"], pendulum.date(2025, 1, 31))

    def test_month_ticks(self) -> None:
        today = pendulum.date(2025, 2, 14)
        axis = compute_axis([_item("2025-01-10", "2025-03-05")], today)

        self.assertEqual(axis["total_days"], 90)
        ticks = month_tick_positions(axis)
        self.assertEqual([tick["label"] for tick in ticks], ["Jan 2025", "Feb 2025", "Mar 2025"])
        self.assertAlmostEqual(ticks[0]["left_percent"], 0.0)
        self.assertAlmostEqual(ticks[1]["left_percent"], 31 / 90 * 100)
        self.assertAlmostEqual(ticks[2]["left_percent"], 59 / 90 * 100)


class PositionBarTests(unittest.TestCase):
    def setUp(self) -> None:
        self.axis = _axis(pendulum.date(2025, 1, 1), pendulum.date(2025, 1, 31))

    def test_zero_bar_for_unparseable_dates(self) -> None:
        bar = position_bar(_item("2025-01-10", "not a date"), self.axis)
        self.assertEqual(bar, {"left_percent": 0.0, "width_percent": 0.0})

    def test_zero_bar_for_empty_axis(self) -> None:
        axis = _axis(pendulum.date(2025, 1, 1), pendulum.date(2025, 1, 1))
        axis["total_days"] = 0
        bar = position_bar(_item("2025-01-10", "2025-01-20"), axis)
        self.assertEqual(bar, {"left_percent": 0.0, "width_percent": 0.0})

    def test_reversed_dates_have_no_width(self) -> None:
        bar = position_bar(_item("2025-01-20", "2025-01-10"), self.axis)
        self.assertEqual(bar["width_percent"], 0.0)

    def test_single_day_item(self) -> None:
        bar = position_bar(_item("2025-01-16", "2025-01-16"), self.axis)
        self.assertAlmostEqual(bar["left_percent"], 15 / 31 * 100)
        self.assertEqual(bar["width_percent"], 0.0)

    def test_bar_stays_inside_axis(self) -> None:
        bar = position_bar(_item("2025-01-20", "2025-04-30"), self.axis)
        self.assertGreaterEqual(bar["left_percent"], 0.0)
        self.assertLessEqual(bar["left_percent"] + bar["width_percent"], 100.0 + 1e-9)

        bar = position_bar(_item("2024-12-01", "2025-01-05"), self.axis)
        self.assertEqual(bar["left_percent"], 0.0)

    def test_bars_within_computed_axis(self) -> None:
        today = pendulum.date(2025, 3, 1)
        items = [
            _item("2025-01-10", "2025-03-05"),
            _item("2024-12-24", "2025-01-02"),
            _item("2025-04-01", "2025-04-30"),
        ]
        axis = compute_axis(items, today)
        for item in items:
            bar = position_bar(item, axis)
            self.assertGreaterEqual(bar["left_percent"], 0.0)
            self.assertGreaterEqual(bar["width_percent"], 0.0)
            self.assertLessEqual(bar["left_percent"] + bar["width_percent"], 100.0 + 1e-9)


class TodayMarkerTests(unittest.TestCase):
    def setUp(self) -> None:
        self.axis = _axis(pendulum.date(2026, 1, 1), pendulum.date(2026, 3, 31))

    def test_today_before_axis_is_pinned_to_start(self) -> None:
        self.assertEqual(today_marker_percent(self.axis, pendulum.date(2025, 6, 1)), 0.0)

    def test_today_after_axis_is_pinned_to_end(self) -> None:
        self.assertEqual(today_marker_percent(self.axis, pendulum.date(2026, 5, 1)), 100.0)

    def test_today_inside_axis(self) -> None:
        self.assertEqual(today_marker_percent(self.axis, pendulum.date(2026, 1, 1)), 0.0)
        self.assertAlmostEqual(
            today_marker_percent(self.axis, pendulum.date(2026, 2, 14)), 44 / 90 * 100
        )


class ColorBucketTests(unittest.TestCase):
    def test_thresholds(self) -> None:
        cases = {
            100: "complete",
            90: "complete",
            89.9: "on-track",
            50: "on-track",
            49.99: "at-risk",
            0.1: "at-risk",
            0: "not-started",
            -5: "not-started",
        }
        for completion, bucket in cases.items():
            with self.subTest(completion=completion):
                self.assertEqual(color_bucket(completion), bucket)


if __name__ == "__main__":
    unittest.main()
