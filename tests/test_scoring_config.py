import os
import sys
import tempfile
import unittest
from pathlib import Path
from unittest.mock import patch

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from interview_coach.core.config.scoring import (  # noqa: E402
    get_scoring_config,
    get_scoring_value,
    reset_scoring_config,
    scoring_config_path,
)

class ScoringConfigTests(unittest.TestCase):
    def test_loader_and_value_lookup(self):
        config = get_scoring_config()
        self.assertIsInstance(config, dict)
        self.assertEqual(get_scoring_value("ats.weights.sections"), 0.25)
        self.assertEqual(get_scoring_value("answer_quality.off_topic_max_chars"), 100)

    def test_ats_weights_sum_to_one(self):
        weights = get_scoring_value("ats.weights")
        self.assertEqual(
            set(weights), {"sections", "keywords", "bullets", "length", "formatting", "consistency"}
        )
        self.assertAlmostEqual(sum(weights.values()), 1.0)

    def test_jd_match_weights_sum_to_one_hundred(self):
        self.assertEqual(sum(get_scoring_value("jd_match.weights").values()), 100)

    def test_relevance_caps_are_ordered(self):
        self.assertEqual(get_scoring_value("evaluation.relevance_caps"), [[2, 2], [4, 4]])

    def test_missing_path_returns_default(self):
        self.assertIsNone(get_scoring_value("ats.weights.unknown"))
        self.assertEqual(get_scoring_value("nope.nothing", 7), 7)
        self.assertEqual(get_scoring_value("", "fallback"), "fallback")
        self.assertEqual(get_scoring_value("ats.weights.sections.deeper", 1), 1)


class ScoringConfigOverrideTests(unittest.TestCase):
    def tearDown(self):
        reset_scoring_config()

    def load_from(self, content):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "scoring.yaml"
            path.write_text(content, encoding="utf-8")
            with patch.dict(os.environ, {"SCORING_CONFIG_PATH": str(path)}):
                reset_scoring_config()
                self.assertEqual(scoring_config_path(), path)
                return get_scoring_config()

    def test_override_path_is_used(self):
        sections = "".join(f"{name}: {{}}\n" for name in ("ats", "jd_match", "answer_quality", "evaluation", "fallback"))
        config = self.load_from("version: 9\n" + sections)
        self.assertEqual(config["version"], 9)

    def test_missing_sections_are_rejected(self):
        with self.assertRaises(RuntimeError):
            self.load_from("version: 1\nats: {}\n")

    def test_invalid_yaml_is_rejected(self):
        with self.assertRaises(RuntimeError):
            self.load_from("ats: [unclosed\n")

    def test_missing_file_is_rejected(self):
        with patch.dict(os.environ, {"SCORING_CONFIG_PATH": "/nonexistent/scoring.yaml"}):
            reset_scoring_config()
            with self.assertRaises(RuntimeError):
                get_scoring_config()

if __name__ == "__main__":
    unittest.main()
