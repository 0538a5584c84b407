import sys
import unittest
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[1] / "src"))

from folder_organizer.config import DEFAULT_CONFIG, merge_config  # noqa: E402


class ConfigTests(unittest.TestCase):
    def test_merge_config_defaults(self) -> None:
        self.assertEqual(merge_config(), DEFAULT_CONFIG)
        self.assertIsNot(merge_config(), DEFAULT_CONFIG)

    def test_merge_config_ignores_none(self) -> None:
        cfg = merge_config({"max_collision_attempts": None, "log_path": "run.jsonl"})
        self.assertEqual(cfg["max_collision_attempts"], 10000)
        self.assertEqual(cfg["log_path"], "run.jsonl")


if __name__ == "__main__":
    unittest.main()
