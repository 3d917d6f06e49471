import sys
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from interview_coach.rules import RULES_VERSION, lexicon, patterns  # noqa: E402


class RulesTableTests(unittest.TestCase):
    def test_rules_version_is_semver(self):
        self.assertRegex(RULES_VERSION, r"^\d+\.\d+\.\d+$")

    def test_required_sections_are_known_sections(self):
        self.assertTrue(set(lexicon.REQUIRED_SECTIONS) <= set(lexicon.SECTION_NAMES))
        self.assertEqual(set(patterns.SECTION_PATTERNS), set(lexicon.SECTION_NAMES))

    def test_word_tables_are_lower_case(self):
        for table in (lexicon.ACHIEVEMENT_VERBS, lexicon.SKILL_DICTIONARY, tuple(lexicon.STOP_WORDS)):
            for word in table:
                self.assertEqual(word, word.lower())

    def test_bullet_verbs_extend_achievement_verbs(self):
        self.assertEqual(lexicon.BULLET_ACTION_VERBS[: len(lexicon.ACHIEVEMENT_VERBS)], lexicon.ACHIEVEMENT_VERBS)
        self.assertEqual(len(lexicon.ACHIEVEMENT_VERBS), 16)

    def test_star_components(self):
        self.assertEqual(list(lexicon.STAR_KEYWORDS), ["situation", "task", "action", "result"])

    def test_tense_patterns_match_whole_words(self):
        self.assertTrue(patterns.PRESENT_TENSE_RE.search("she manages releases"))
        self.assertIsNone(patterns.PRESENT_TENSE_RE.search("leadership workflow"))
        self.assertTrue(patterns.PAST_TENSE_RE.search("We built it"))

    def test_y_counts_as_vowel_in_gibberish_patterns(self):
        self.assertTrue(patterns.VOWEL_RE.search("myth"))
        for word in ("python", "system", "syntax"):
            with self.subTest(word=word):
                self.assertIsNone(patterns.CONSONANT_CLUSTER_RE.search(word))
        self.assertTrue(patterns.CONSONANT_CLUSTER_RE.search("rhythm"))
        self.assertTrue(patterns.CONSONANT_SANDWICH_RE.match("strystr"))

    def test_metric_pattern(self):
        for text in ("grew 25%", "saved $300", "10 users", "3x faster", "2 years"):
            with self.subTest(text=text):
                self.assertTrue(patterns.METRIC_RE.search(text))
        self.assertIsNone(patterns.METRIC_RE.search("no numbers here"))


if __name__ == "__main__":
    unittest.main()
