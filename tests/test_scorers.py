import sys
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from resume_analyzer.features import (  # noqa: E402
    build_content_report,
    build_formatting_report,
    build_structure_report,
    clamp_score,
    score_content,
    score_formatting,
    score_structure,
)
from resume_analyzer.features.rubric import ACTION_VERBS, PROFESSIONAL_TERMS  # noqa: E402
from resume_samples import FULL_RESUME, SCENARIO_A_RESUME  # noqa: E402


class ClampScoreTests(unittest.TestCase):
    def test_rounds_half_up_and_bounds(self):
        self.assertEqual(clamp_score(2.5), 3)
        self.assertEqual(clamp_score(37.5), 38)
        self.assertEqual(clamp_score(38.3), 38)
        self.assertEqual(clamp_score(-4), 0)
        self.assertEqual(clamp_score(104.2), 100)


class StructureScoreTests(unittest.TestCase):
    def test_bare_sentence_scores_low(self):
        report = build_structure_report(SCENARIO_A_RESUME)
        self.assertEqual(report.sections_found, ["experience"])
        self.assertFalse(report.has_email)
        self.assertFalse(report.has_phone)
        self.assertFalse(report.has_bullets)
        self.assertFalse(report.has_dates)
        self.assertEqual(report.score, 5)

    def test_complete_resume_reaches_maximum(self):
        report = build_structure_report(FULL_RESUME)
        self.assertEqual(len(report.sections_found), 8)
        self.assertTrue(report.has_email)
        self.assertTrue(report.has_phone)
        self.assertTrue(report.has_bullets)
        self.assertTrue(report.has_dates)
        self.assertEqual(report.score, 100)

    def test_partial_sections_and_contact(self):
        self.assertEqual(score_structure("Education and skills listed below\nContact: someone@example.org"), 25)

    def test_phone_requires_ten_digits(self):
        self.assertTrue(build_structure_report("call +44-7911123456").has_phone)
        self.assertFalse(build_structure_report("call 555 123 4567").has_phone)

    def test_year_range(self):
        self.assertTrue(build_structure_report("since 1999").has_dates)
        self.assertFalse(build_structure_report("in 2150 or 1850").has_dates)


class ContentScoreTests(unittest.TestCase):
    def test_short_text_with_verbs_and_number(self):
        report = build_content_report(SCENARIO_A_RESUME)
        self.assertEqual(report.word_count, 13)
        self.assertEqual(report.action_verbs_found, ["developed", "implemented"])
        self.assertTrue(report.has_numbers)
        self.assertEqual(report.professional_terms_found, ["experience"])
        # 0 + 6.25 + 20 + 3.75
        self.assertEqual(report.score, 30)

    def test_word_count_bands(self):
        fifty = build_content_report("word " * 50)
        self.assertEqual(fifty.word_count, 50)
        self.assertEqual(fifty.score, 0)
        self.assertEqual(score_content("alpha " * 150), 15)
        self.assertEqual(score_content("alpha " * 300), 25)
        self.assertEqual(score_content("alpha " * 900), 15)

    def test_word_count_boundaries(self):
        expected = {99: 0, 100: 15, 199: 15, 200: 25, 800: 25, 801: 15}
        for words, points in expected.items():
            with self.subTest(words=words):
                self.assertEqual(score_content("alpha " * words), points)

    def test_coverage_is_capped(self):
        text = " ".join(ACTION_VERBS + PROFESSIONAL_TERMS) + " 42% " + "filler " * 200
        self.assertEqual(score_content(text), 100)

    def test_number_must_stand_alone(self):
        self.assertFalse(build_content_report("version v2 only").has_numbers)
        self.assertTrue(build_content_report("grew revenue 100%").has_numbers)


class FormattingScoreTests(unittest.TestCase):
    def test_single_sentence(self):
        report = build_formatting_report(SCENARIO_A_RESUME)
        self.assertTrue(report.has_capitalization)
        self.assertFalse(report.has_blank_lines)
        self.assertFalse(report.has_organization)
        self.assertFalse(report.too_many_capitals)
        self.assertEqual(report.average_line_length, 87)
        self.assertEqual(report.score, 80)

    def test_bulleted_sections(self):
        text = "Experience summary for the role\n\n- Built services for payments\n- Managed the platform team\n"
        report = build_formatting_report(text)
        self.assertTrue(report.has_blank_lines)
        self.assertTrue(report.has_organization)
        self.assertAlmostEqual(report.average_line_length, 17.4)
        self.assertEqual(report.score, 90)

    def test_all_caps_penalty(self):
        self.assertEqual(score_formatting("SENIOR ENGINEER WITH MANY YEARS"), 65)

    def test_organization_and_caps_penalty_can_both_apply(self):
        report = build_formatting_report("- ALL CAPS BULLET\n- ANOTHER ONE HERE\n")
        self.assertTrue(report.has_organization)
        self.assertTrue(report.too_many_capitals)
        self.assertEqual(report.score, 65)

    def test_plain_lowercase_text_keeps_base(self):
        self.assertEqual(score_formatting("plain text"), 60)

    def test_crlf_bullets_do_not_count_as_organized(self):
        self.assertFalse(build_formatting_report("Summary\r\n- item one\r\nnext").has_organization)
        self.assertTrue(build_formatting_report("Summary\n- item one\nnext").has_organization)

    def test_capital_ratio_boundary(self):
        # one 100-character line: no line-length bonus, capitalization bonus applies
        at_limit = build_formatting_report("A" * 15 + "a" * 85)
        self.assertFalse(at_limit.too_many_capitals)
        self.assertEqual(at_limit.score, 70)

        over_limit = build_formatting_report("A" * 16 + "a" * 84)
        self.assertTrue(over_limit.too_many_capitals)
        self.assertEqual(over_limit.score, 55)

    def test_line_length_bonus_is_exclusive(self):
        expected = {20: 60, 21: 70, 99: 70, 100: 60}
        for length, score in expected.items():
            with self.subTest(length=length):
                report = build_formatting_report("a" * length)
                self.assertEqual(report.average_line_length, length)
                self.assertEqual(report.score, score)


if __name__ == "__main__":
    unittest.main()
