import sys
import unittest
from pathlib import Path
from unittest.mock import patch

from pydantic import ValidationError

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from resume_analyzer.core.config.scoring import get_scoring_config, get_scoring_value  # noqa: E402
from resume_analyzer.features import rubric as rubric_module  # noqa: E402
from resume_analyzer.features.rubric import MAX_MATCHES, MAX_MISSING, build_rubric, load_rubric  # noqa: E402
from resume_analyzer.features.score_bands import score_band  # noqa: E402
from resume_analyzer.schemas.analysis import AnalysisResult  # noqa: E402


class ScoringConfigTests(unittest.TestCase):
    def test_loader_and_value_lookup(self):
        config = get_scoring_config()
        self.assertIsInstance(config, dict)
        self.assertEqual(get_scoring_value("structure.points.email"), 15)
        self.assertEqual(get_scoring_value("formatting.excessive_caps.ratio"), 0.15)
        self.assertEqual(get_scoring_value("structure.points.unknown", 7), 7)
        self.assertIsNone(get_scoring_value(""))

    def test_rubric_reflects_config(self):
        rubric = load_rubric()
        self.assertEqual(rubric.structure.section_points, 40)
        self.assertEqual(rubric.content.action_verb_cap, 25)
        self.assertEqual(rubric.formatting.base, 60)
        self.assertEqual(rubric.suggestions.score_threshold, 70)
        self.assertEqual(rubric.keywords.missing, 10)
        self.assertEqual(len(rubric.structure.sections), 8)
        self.assertEqual(len(rubric.content.action_verbs), 16)

    def test_score_bands(self):
        self.assertEqual(score_band(80), "success")
        self.assertEqual(score_band(79), "warning")
        self.assertEqual(score_band(60), "warning")
        self.assertEqual(score_band(59), "destructive")

    def test_keyword_limits_above_result_bounds_are_rejected(self):
        overrides = {
            "keywords.matches_limit": MAX_MATCHES + 5,
            "keywords.missing_limit": MAX_MISSING + 1,
            "keywords.resume_only_limit": -1,
        }
        for path, value in overrides.items():
            with self.subTest(path=path):
                def fake_value(key, default=None, _path=path, _value=value):
                    return _value if key == _path else default

                with patch.object(rubric_module, "get_scoring_value", side_effect=fake_value):
                    with self.assertRaises(RuntimeError) as ctx:
                        build_rubric()
                self.assertIn(path, str(ctx.exception))

    def test_result_schema_bounds_follow_rubric_maximums(self):
        limits = load_rubric().keywords
        self.assertLessEqual(limits.matches, MAX_MATCHES)
        self.assertLessEqual(limits.missing, MAX_MISSING)
        scores = {"overall_score": 50, "structure_score": 50, "content_score": 50, "formatting_score": 50}
        AnalysisResult(keyword_matches=["python"] * MAX_MATCHES, missing_keywords=["java"] * MAX_MISSING, **scores)
        with self.assertRaises(ValidationError):
            AnalysisResult(keyword_matches=["python"] * (MAX_MATCHES + 1), **scores)
        with self.assertRaises(ValidationError):
            AnalysisResult(missing_keywords=["java"] * (MAX_MISSING + 1), **scores)


if __name__ == "__main__":
    unittest.main()
