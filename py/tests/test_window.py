from __future__ import annotations

import unittest
from datetime import datetime, time, timedelta, timezone

from sparkline_svg import MIXED_AXIS_TYPES, ComputedDatapoint, SparklineError, dry_run, render_chart

# 200x50 viewport with 2 units of padding: x spans 2..198, y spans 2..48.
GEOMETRY = {"width": 200, "height": 50, "padding": 2}


def _dry_run(raw, **window):  # type: ignore[no-untyped-def]
    return dry_run(raw, window=window, **GEOMETRY)


class WindowTests(unittest.TestCase):
    def test_window_drops_samples_outside_its_bounds(self) -> None:
        self.assertEqual(
            _dry_run([2, 2, 2], min=1),
            [
                ComputedDatapoint(source=(1, 2), computed=(2.0, 25.0)),
                ComputedDatapoint(source=(2, 2), computed=(198.0, 25.0)),
            ],
        )
        self.assertEqual(
            _dry_run([2, 2, 2], max=1),
            [
                ComputedDatapoint(source=(0, 2), computed=(2.0, 25.0)),
                ComputedDatapoint(source=(1, 2), computed=(198.0, 25.0)),
            ],
        )
        self.assertEqual(
            _dry_run([2, 2, 2, 2, 2, 2, 2], min=1, max=2),
            [
                ComputedDatapoint(source=(1, 2), computed=(2.0, 25.0)),
                ComputedDatapoint(source=(2, 2), computed=(198.0, 25.0)),
            ],
        )

    def test_window_with_pairs(self) -> None:
        self.assertEqual(
            _dry_run([(1, 2), (2, 2), (3, 2)], min=2),
            [
                ComputedDatapoint(source=(2, 2), computed=(2.0, 25.0)),
                ComputedDatapoint(source=(3, 2), computed=(198.0, 25.0)),
            ],
        )

    def test_hole_on_the_left(self) -> None:
        self.assertEqual(
            _dry_run([2, 2], min=-1),
            [
                ComputedDatapoint(source=(0, 2), computed=(100.0, 25.0)),
                ComputedDatapoint(source=(1, 2), computed=(198.0, 25.0)),
            ],
        )

    def test_hole_on_the_right(self) -> None:
        self.assertEqual(
            _dry_run([2, 2], max=2),
            [
                ComputedDatapoint(source=(0, 2), computed=(2.0, 25.0)),
                ComputedDatapoint(source=(1, 2), computed=(100.0, 25.0)),
            ],
        )

    def test_temporal_window(self) -> None:
        now = datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)
        later = now + timedelta(seconds=1)
        self.assertEqual(
            _dry_run([(now, 1), (later, 2)], min=now - timedelta(seconds=1)),
            [
                ComputedDatapoint(source=(now, 1), computed=(100.0, 48.0)),
                ComputedDatapoint(source=(later, 2), computed=(198.0, 2.0)),
            ],
        )

    def test_window_of_another_kind_fails(self) -> None:
        now = datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)
        raw = [(now, 1), (now + timedelta(seconds=1), 2)]
        with self.assertRaises(SparklineError) as ctx:
            _dry_run(raw, min=time(12, 0))
        self.assertEqual(ctx.exception.kind, MIXED_AXIS_TYPES)

        result = render_chart(raw, window={"min": time(12, 0)})
        assert result.error is not None
        self.assertEqual(result.error.kind, MIXED_AXIS_TYPES)

    def test_window_excluding_every_sample(self) -> None:
        self.assertEqual(_dry_run([1, 2, 3, 4, 5], min=-5, max=-1), [])
        result = render_chart([1, 2, 3, 4, 5], window={"min": -5, "max": -1})
        assert result.svg is not None
        self.assertIn(">No data</text>", result.svg)

    def test_single_bound_beyond_every_sample_keeps_nothing(self) -> None:
        cases = [
            ([1, 2, 3, 4, 5], {"max": -1}),
            ([(0, 1), (4, 5)], {"min": 10}),
            ([1, 2, 3, 4, 5], {"min": 3, "max": 1}),
        ]
        for raw, window in cases:
            with self.subTest(window=window):
                self.assertEqual(_dry_run(raw, **window), [])
                result = render_chart(raw, window=window)
                assert result.svg is not None
                self.assertIn(">No data</text>", result.svg)
                self.assertNotIn("<circle", result.svg)

    def test_zero_width_window_around_a_negative_sample(self) -> None:
        self.assertEqual(
            _dry_run([(-5, 1)], min=-5, max=-5),
            [ComputedDatapoint(source=(-5, 1), computed=(100.0, 25.0))],
        )

    def test_bounds_are_inclusive(self) -> None:
        computed = _dry_run([(0, 1), (5, 2), (10, 3)], min=5, max=10)
        self.assertEqual([point.source for point in computed], [(5, 2), (10, 3)])


if __name__ == "__main__":
    unittest.main()
