import unittest

from gpakit.core.scales import GradingMode, is_parseable_token, precision_for, resolve_score


class LetterScaleTests(unittest.TestCase):
    def test_grade_points(self):
        self.assertEqual(resolve_score("A+", GradingMode.CREDIT_WEIGHTED_LETTER), 4.0)
        self.assertEqual(resolve_score("B+", GradingMode.CREDIT_WEIGHTED_LETTER), 3.3)
        self.assertEqual(resolve_score(" a- ", GradingMode.CREDIT_WEIGHTED_LETTER), 3.7)
        self.assertEqual(resolve_score("F", GradingMode.CREDIT_WEIGHTED_LETTER), 0.0)

    def test_unknown_letter(self):
        self.assertEqual(resolve_score("Z", GradingMode.CREDIT_WEIGHTED_LETTER), 0)
        self.assertEqual(resolve_score(None, GradingMode.CREDIT_WEIGHTED_LETTER), 0)

    def test_percentage_letters(self):
        self.assertEqual(resolve_score("A+", GradingMode.RAW_PERCENTAGE_LETTER), 97)
        self.assertEqual(resolve_score("B+", GradingMode.RAW_PERCENTAGE_LETTER), 87)
        self.assertEqual(resolve_score("D-", GradingMode.RAW_PERCENTAGE_LETTER), 60)


class NumericScaleTests(unittest.TestCase):
    def test_missed_questions(self):
        self.assertEqual(resolve_score("3", GradingMode.PERCENTAGE_FROM_MISSED, 20), 85.0)
        self.assertEqual(resolve_score(0, GradingMode.PERCENTAGE_FROM_MISSED, 12), 100.0)

    def test_missed_questions_out_of_range(self):
        self.assertEqual(resolve_score("25", GradingMode.PERCENTAGE_FROM_MISSED, 20), 0)
        self.assertEqual(resolve_score("-1", GradingMode.PERCENTAGE_FROM_MISSED, 20), 0)
        self.assertEqual(resolve_score("3", GradingMode.PERCENTAGE_FROM_MISSED, 0), 0)
        self.assertEqual(resolve_score("abc", GradingMode.PERCENTAGE_FROM_MISSED, 20), 0)

    def test_sgpa(self):
        self.assertEqual(resolve_score("8.5", GradingMode.RAW_SGPA), 8.5)
        self.assertEqual(resolve_score(10, GradingMode.RAW_SGPA), 10.0)
        self.assertEqual(resolve_score("12", GradingMode.RAW_SGPA), 0)
        self.assertEqual(resolve_score("-1", GradingMode.RAW_SGPA), 0)

    def test_raw_percentage(self):
        self.assertEqual(resolve_score("72.5", GradingMode.RAW_PERCENTAGE), 72.5)
        self.assertEqual(resolve_score("140", GradingMode.RAW_PERCENTAGE), 0)

    def test_unknown_mode(self):
        with self.assertRaises(ValueError):
            resolve_score("A", "letters")


class TokenTests(unittest.TestCase):
    def test_letter_tokens(self):
        self.assertTrue(is_parseable_token("Z", GradingMode.CREDIT_WEIGHTED_LETTER))
        self.assertFalse(is_parseable_token("", GradingMode.CREDIT_WEIGHTED_LETTER))
        self.assertFalse(is_parseable_token("   ", GradingMode.RAW_PERCENTAGE_LETTER))

    def test_numeric_tokens(self):
        self.assertTrue(is_parseable_token("3", GradingMode.PERCENTAGE_FROM_MISSED))
        self.assertTrue(is_parseable_token(12, GradingMode.RAW_SGPA))
        self.assertFalse(is_parseable_token("abc", GradingMode.RAW_SGPA))
        self.assertFalse(is_parseable_token(float("nan"), GradingMode.RAW_SGPA))

    def test_precision(self):
        self.assertEqual(precision_for(GradingMode.CREDIT_WEIGHTED_LETTER), 3)
        self.assertEqual(precision_for(GradingMode.RAW_SGPA), 2)
        self.assertEqual(precision_for(GradingMode.PERCENTAGE_FROM_MISSED), 2)


if __name__ == "__main__":
    unittest.main()
