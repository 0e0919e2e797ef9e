import json
import sys
import tempfile
import unittest
from pathlib import Path

ROOT = Path(__file__).resolve().parents[2]
sys.path.insert(0, str(ROOT / "packages" / "core"))
sys.path.insert(0, str(ROOT / "packages" / "renderer"))
sys.path.insert(0, str(ROOT / "packages" / "scene"))

from asciiclock_core.config import AppConfig, load_config, save_config


class ConfigTests(unittest.TestCase):
    def test_load_default_when_missing(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "missing.json"
            cfg = load_config(path)
            self.assertIsInstance(cfg, AppConfig)
            self.assertEqual((cfg.grid.width, cfg.grid.height), (60, 60))
            self.assertEqual(cfg.clock.radius, 22.0)
            self.assertEqual(cfg.clock.timezone, "UTC")
            self.assertEqual(cfg.render.clip, "discard")

    def test_save_and_reload(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "nested" / "config.json"
            cfg = load_config(path)
            cfg.grid.width = 40
            cfg.server.poll_ms = 1500
            cfg.render.clip = "clamp"
            save_config(cfg, path)
            reloaded = load_config(path)
            self.assertEqual(reloaded.grid.width, 40)
            self.assertEqual(reloaded.server.poll_ms, 1500)
            self.assertEqual(reloaded.render.clip, "clamp")

    def test_normalizes_values(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "config.json"
            raw = {
                "grid": {"width": 0, "height": -5},
                "clock": {"angle_step": 0, "timezone": ""},
                "render": {"clip": "wrap"},
                "server": {"poll_ms": 10, "port": 99999},
                "unknown": {"x": 1},
            }
            path.write_text(json.dumps(raw), encoding="utf-8")
            cfg = load_config(path)
            self.assertEqual((cfg.grid.width, cfg.grid.height), (1, 1))
            self.assertEqual(cfg.clock.angle_step, 0.01)
            self.assertEqual(cfg.clock.timezone, "UTC")
            self.assertEqual(cfg.render.clip, "discard")
            self.assertEqual(cfg.server.poll_ms, 200)
            self.assertEqual(cfg.server.port, 65535)

    def test_unknown_keys_ignored(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "config.json"
            path.write_text(json.dumps({"grid": {"depth": 3, "width": 30}}), encoding="utf-8")
            cfg = load_config(path)
            self.assertEqual(cfg.grid.width, 30)
            self.assertFalse(hasattr(cfg.grid, "depth"))

    def test_bad_field_values_fall_back_to_defaults(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "config.json"
            raw = {
                "config_version": "v2",
                "grid": {"width": "wide", "height": None},
                "clock": {"radius": "22", "angle_step": [0.5]},
                "server": {"port": {"n": 1}, "poll_ms": "1000"},
            }
            path.write_text(json.dumps(raw), encoding="utf-8")
            cfg = load_config(path)
            self.assertEqual((cfg.grid.width, cfg.grid.height), (60, 60))
            self.assertEqual(cfg.clock.radius, 22.0)
            self.assertEqual(cfg.clock.angle_step, 0.01)
            self.assertEqual(cfg.server.port, 8000)
            self.assertEqual(cfg.server.poll_ms, 1000)
            self.assertEqual(cfg.config_version, 1)

    def test_corrupt_file_falls_back(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "config.json"
            path.write_text("{not json", encoding="utf-8")
            cfg = load_config(path)
            self.assertEqual(cfg.grid.width, 60)


if __name__ == "__main__":
    unittest.main()
