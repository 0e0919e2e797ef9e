import math
import sys
import unittest
from datetime import timezone
from pathlib import Path

ROOT = Path(__file__).resolve().parents[2]
sys.path.insert(0, str(ROOT / "packages" / "renderer"))
sys.path.insert(0, str(ROOT / "packages" / "scene"))

from asciiclock_renderer import AsciiRenderer
from asciiclock_scene import ClockFace, ClockGeometry, ClockTime, Line, World, clock_time, direction, hand_angles


class DirectionTests(unittest.TestCase):
    def test_up(self):
        dx, dy = direction(0)
        self.assertAlmostEqual(dx, 0.0)
        self.assertAlmostEqual(dy, -1.0)

    def test_right(self):
        dx, dy = direction(90)
        self.assertAlmostEqual(dx, 1.0)
        self.assertAlmostEqual(dy, 0.0)

    def test_down(self):
        dx, dy = direction(180)
        self.assertAlmostEqual(dx, 0.0)
        self.assertAlmostEqual(dy, 1.0)


class HandAngleTests(unittest.TestCase):
    def test_noon_points_up(self):
        angles = hand_angles(ClockTime(hour=12, minute=0, second=0))
        self.assertEqual(angles.hour, 0)
        self.assertEqual(angles.minute, 0)
        self.assertEqual(angles.second, 0)

    def test_half_minute(self):
        angles = hand_angles(ClockTime(hour=12, minute=0, second=30))
        self.assertEqual(angles.second, 180)
        self.assertEqual(angles.minute, 3)

    def test_hour_ignores_seconds(self):
        a = hand_angles(ClockTime(hour=3, minute=30, second=0))
        b = hand_angles(ClockTime(hour=3, minute=30, second=59))
        self.assertEqual(a.hour, 105)
        self.assertEqual(a.hour, b.hour)

    def test_minute_fraction(self):
        angles = hand_angles(ClockTime(hour=1, minute=15, second=30))
        self.assertAlmostEqual(angles.minute, 93.0)
        self.assertAlmostEqual(angles.hour, 37.5)


class ClockTimeTests(unittest.TestCase):
    def test_epoch_is_twelve(self):
        self.assertEqual(clock_time(30, timezone.utc), ClockTime(hour=12, minute=0, second=30))

    def test_afternoon_uses_twelve_hour_form(self):
        # 1970-01-01 15:45:10 UTC
        self.assertEqual(clock_time(15 * 3600 + 45 * 60 + 10, timezone.utc), ClockTime(hour=3, minute=45, second=10))

    def test_noon(self):
        self.assertEqual(clock_time(12 * 3600, timezone.utc).hour, 12)


class LineTests(unittest.TestCase):
    def test_does_not_plot_anchor(self):
        renderer = AsciiRenderer(10, 10)
        world = World()
        world.add_child(Line(5, 5, angle=90, length=3, brightness=0.5))
        renderer.render(world)
        self.assertEqual(renderer.buffer.get(5, 5), 0.0)
        self.assertEqual(
            sorted(renderer.buffer.lit_cells()),
            [(6, 5, 0.5), (7, 5, 0.5), (8, 5, 0.5)],
        )

    def test_upward_line(self):
        renderer = AsciiRenderer(10, 10)
        world = World()
        world.add_child(Line(4, 6, angle=0, length=2, brightness=1.0))
        renderer.render(world)
        self.assertEqual(sorted(renderer.buffer.lit_cells()), [(4, 4, 1.0), (4, 5, 1.0)])


class ClockFaceTests(unittest.TestCase):
    def _render(self, timestamp, width=60, height=60, geometry=None):
        renderer = AsciiRenderer(width, height)
        world = World()
        face = ClockFace(timestamp, tz=timezone.utc, geometry=geometry)
        world.add_child(face)
        renderer.render(world)
        return renderer, face

    def test_spawns_three_hands_in_order(self):
        _, face = self._render(30)
        self.assertEqual(len(face.children), 3)
        self.assertEqual([c.length for c in face.children], [10, 15, 20])
        self.assertEqual([c.brightness for c in face.children], [0.75, 0.5, 0.25])
        self.assertTrue(all((c.x, c.y) == (30, 30) for c in face.children))

    def test_center_uses_ceiling(self):
        face = ClockFace(0)
        self.assertEqual(face.center((61, 59)), (31, 30))

    def test_face_pixels_on_circle(self):
        renderer, _ = self._render(30)
        face_cells = [(x, y) for x, y, v in renderer.buffer.lit_cells() if v == 1.0]
        self.assertGreater(len(face_cells), 80)
        for x, y in face_cells:
            self.assertLessEqual(abs(math.hypot(x - 30, y - 30) - 22), 0.75)

    def test_second_hand_tip_at_half_minute(self):
        renderer, _ = self._render(30)
        self.assertEqual(renderer.buffer.get(30, 50), 0.25)
        for y in range(31, 51):
            self.assertEqual(renderer.buffer.get(30, y), 0.25)
        self.assertEqual(renderer.buffer.get(30, 51), 0.0)

    def test_hour_hand_tip_at_midnight(self):
        renderer, _ = self._render(30)
        self.assertEqual(renderer.buffer.get(30, 20), 0.75)

    def test_custom_radius(self):
        renderer, _ = self._render(0, width=20, height=20, geometry=ClockGeometry(radius=5))
        face_cells = [(x, y) for x, y, v in renderer.buffer.lit_cells() if v == 1.0]
        for x, y in face_cells:
            self.assertLessEqual(abs(math.hypot(x - 10, y - 10) - 5), 0.75)

    def test_small_grid_does_not_fail(self):
        renderer, face = self._render(30, width=10, height=10)
        self.assertEqual(len(face.children), 3)
        self.assertEqual(renderer.buffer.size(), (10, 10))


if __name__ == "__main__":
    unittest.main()
