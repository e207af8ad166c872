from typing import List, Tuple


GPA_LETTER_BANDS: List[Tuple[float, str]] = [
    (3.7, "A"),
    (3.3, "B+"),
    (3.0, "B"),
    (2.7, "B-"),
    (2.3, "C+"),
    (2.0, "C"),
    (1.7, "C-"),
    (1.3, "D+"),
    (1.0, "D"),
]

PERFORMANCE_BANDS: List[Tuple[float, str]] = [
    (3.7, "Excellent"),
    (3.0, "Good"),
    (2.5, "Satisfactory"),
    (2.0, "Needs Improvement"),
]

PERCENTAGE_LETTER_BANDS: List[Tuple[float, str]] = [
    (97, "A+"),
    (93, "A"),
    (90, "A-"),
    (87, "B+"),
    (83, "B"),
    (80, "B-"),
    (77, "C+"),
    (73, "C"),
    (70, "C-"),
    (67, "D+"),
    (65, "D"),
    (60, "D-"),
]

CGPA_LABEL_BANDS: List[Tuple[float, str]] = [
    (9.5, "Outstanding"),
    (8.5, "Excellent"),
    (7.5, "Very Good"),
    (6.5, "Good"),
    (5.5, "Above Average"),
    (5.0, "Average"),
    (4.0, "Below Average"),
]

CGPA_CLASS_BANDS: List[Tuple[float, str]] = [
    (8.5, "First Class with Distinction"),
    (6.5, "First Class"),
    (5.0, "Second Class"),
    (4.0, "Pass Class"),
]


FINAL_EXAM_DIFFICULTY_BANDS: List[Tuple[float, str]] = [
    (0, "Target Already Achieved"),
    (70, "Very Achievable"),
    (85, "Challenging"),
    (100, "Very Difficult"),
]


def _band(value: float, bands: List[Tuple[float, str]], fallback: str) -> str:
    for low, label in bands:
        if value >= low:
            return label
    return fallback


def gpa_letter(gpa: float) -> str:
    return _band(gpa, GPA_LETTER_BANDS, "F")


def performance_label(gpa: float) -> str:
    return _band(gpa, PERFORMANCE_BANDS, "Poor")


def percentage_letter(percentage: float) -> str:
    return _band(percentage, PERCENTAGE_LETTER_BANDS, "F")


def final_exam_difficulty(required: float) -> str:
    for high, label in FINAL_EXAM_DIFFICULTY_BANDS:
        if required <= high:
            return label
    return "May Not Be Achievable"


def planning_status(on_track: bool, achievable: bool) -> str:
    if on_track:
        return "On Track"
    return "Needs Improvement" if achievable else "Revise Plan"


def cgpa_band(cgpa: float) -> Tuple[str, str]:
    """(label, class) for a 10-point CGPA, e.g. ("Very Good", "First Class")."""
    return _band(cgpa, CGPA_LABEL_BANDS, "Poor"), _band(cgpa, CGPA_CLASS_BANDS, "Fail")


def should_celebrate(score: float, counted: int, threshold: float, min_entries: int) -> bool:
    return score >= threshold and counted >= min_entries
