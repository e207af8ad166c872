import unittest

from gpakit.core.bands import (
    cgpa_band,
    final_exam_difficulty,
    gpa_letter,
    percentage_letter,
    performance_label,
    planning_status,
    should_celebrate,
)
from gpakit.core.conversion import convert_scale_to_four_point


class BandTests(unittest.TestCase):
    def test_gpa_letters(self):
        self.assertEqual(gpa_letter(3.73), "A")
        self.assertEqual(gpa_letter(3.5), "B+")
        self.assertEqual(gpa_letter(1.0), "D")
        self.assertEqual(gpa_letter(0.5), "F")

    def test_percentage_letters(self):
        self.assertEqual(percentage_letter(97), "A+")
        self.assertEqual(percentage_letter(85), "B")
        self.assertEqual(percentage_letter(62), "D-")
        self.assertEqual(percentage_letter(40), "F")

    def test_performance(self):
        self.assertEqual(performance_label(3.8), "Excellent")
        self.assertEqual(performance_label(2.6), "Satisfactory")
        self.assertEqual(performance_label(1.2), "Poor")

    def test_cgpa_band(self):
        self.assertEqual(cgpa_band(9.6), ("Outstanding", "First Class with Distinction"))
        self.assertEqual(cgpa_band(7.8), ("Very Good", "First Class"))
        self.assertEqual(cgpa_band(5.2), ("Average", "Second Class"))
        self.assertEqual(cgpa_band(3.0), ("Poor", "Fail"))

    def test_celebration(self):
        self.assertTrue(should_celebrate(3.9, 3, 3.8, 3))
        self.assertFalse(should_celebrate(3.9, 2, 3.8, 3))
        self.assertFalse(should_celebrate(3.7, 5, 3.8, 3))

    def test_final_exam_difficulty(self):
        self.assertEqual(final_exam_difficulty(0), "Target Already Achieved")
        self.assertEqual(final_exam_difficulty(0.1), "Very Achievable")
        self.assertEqual(final_exam_difficulty(70), "Very Achievable")
        self.assertEqual(final_exam_difficulty(85), "Challenging")
        self.assertEqual(final_exam_difficulty(100), "Very Difficult")
        self.assertEqual(final_exam_difficulty(100.5), "May Not Be Achievable")

    def test_planning_status(self):
        self.assertEqual(planning_status(True, False), "On Track")
        self.assertEqual(planning_status(False, True), "Needs Improvement")
        self.assertEqual(planning_status(False, False), "Revise Plan")


class ConversionTests(unittest.TestCase):
    def test_clamped_to_scale(self):
        self.assertEqual(convert_scale_to_four_point(10.0), 4.0)
        self.assertEqual(convert_scale_to_four_point(0.75), 0.0)
        self.assertEqual(convert_scale_to_four_point(0.2), 0.0)

    def test_linear_region(self):
        self.assertAlmostEqual(convert_scale_to_four_point(3.0), 1.0, places=6)
        self.assertAlmostEqual(convert_scale_to_four_point(8.76), 3.56, places=2)


if __name__ == "__main__":
    unittest.main()
