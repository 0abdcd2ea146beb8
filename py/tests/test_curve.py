from __future__ import annotations

import unittest

from sparkline_svg.curve import CurveTo, MoveTo, build_path, format_number, path_to_string
from sparkline_svg.mapper import ViewportPoint


def _on_segment(point: ViewportPoint, start: ViewportPoint, end: ViewportPoint) -> bool:
    cross = (end.x - start.x) * (point.y - start.y) - (end.y - start.y) * (point.x - start.x)
    return abs(cross) < 1e-9


class BuildPathTests(unittest.TestCase):
    def test_no_points_no_path(self) -> None:
        self.assertEqual(build_path([], 0.2), [])

    def test_single_point_has_no_curve(self) -> None:
        commands = build_path([ViewportPoint(1, 2)], 0.2)
        self.assertEqual(commands, [MoveTo(ViewportPoint(1, 2))])

    def test_one_curve_per_consecutive_pair(self) -> None:
        points = [ViewportPoint(float(i), float(i % 3)) for i in range(6)]
        commands = build_path(points, 0.2)
        self.assertIsInstance(commands[0], MoveTo)
        self.assertEqual(len(commands), 6)
        self.assertTrue(all(isinstance(command, CurveTo) for command in commands[1:]))
        self.assertEqual([command.end for command in commands[1:]], points[1:])

    def test_two_points_use_the_segment_itself_as_tangent(self) -> None:
        commands = build_path([ViewportPoint(0, 0), ViewportPoint(10, 0)], 0.2)
        self.assertEqual(path_to_string(commands), "M0.0,0.0C2.0,0.0 8.0,0.0 10.0,0.0")

    def test_three_point_curve(self) -> None:
        points = [ViewportPoint(10, 50), ViewportPoint(20, 30), ViewportPoint(30, 50)]
        self.assertEqual(
            path_to_string(build_path(points, 0.2)),
            "M10.0,50.0C12.0,46.0 16.0,30.0 20.0,30.0C24.0,30.0 28.0,46.0 30.0,50.0",
        )

    def test_zero_smoothing_collapses_control_points_onto_the_segment(self) -> None:
        points = [ViewportPoint(6, 80), ViewportPoint(40, 12.5), ViewportPoint(90, 60), ViewportPoint(194, 6)]
        commands = build_path(points, 0)
        for start, command in zip(points, commands[1:]):
            with self.subTest(start=start):
                self.assertTrue(_on_segment(command.cp1, start, command.end))
                self.assertTrue(_on_segment(command.cp2, start, command.end))
                self.assertAlmostEqual(command.cp1.x, start.x)
                self.assertAlmostEqual(command.cp2.y, command.end.y)

    def test_large_smoothing_is_accepted(self) -> None:
        commands = build_path([ViewportPoint(0, 0), ViewportPoint(10, 10), ViewportPoint(20, 0)], 3.0)
        self.assertEqual(len(commands), 3)


class FormatNumberTests(unittest.TestCase):
    def test_rounds_to_three_decimals(self) -> None:
        self.assertEqual(format_number(1.23456), "1.235")
        self.assertEqual(format_number(2), "2.0")
        self.assertEqual(format_number(30.000000000000004), "30.0")

    def test_negative_zero_is_normalized(self) -> None:
        self.assertEqual(format_number(-0.0001), "0.0")


if __name__ == "__main__":
    unittest.main()
