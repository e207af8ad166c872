import math
from enum import Enum
from typing import Dict, Optional, Union

from gpakit.config.settings import settings


GradeToken = Union[str, int, float, None]


class GradingMode(str, Enum):
    """How an entry's grade token is turned into a score.

    The weight attached to the entry changes meaning with the mode too:
    credit hours for the letter and SGPA modes, total questions for
    PERCENTAGE_FROM_MISSED and assignment weight for the percentage modes.
    """

    CREDIT_WEIGHTED_LETTER = "credit_weighted_letter"
    PERCENTAGE_FROM_MISSED = "percentage_from_missed"
    RAW_PERCENTAGE_LETTER = "raw_percentage_letter"
    RAW_PERCENTAGE = "raw_percentage"
    RAW_SGPA = "raw_sgpa"


LETTER_POINTS: Dict[str, float] = {
    "A+": 4.0,
    "A": 4.0,
    "A-": 3.7,
    "B+": 3.3,
    "B": 3.0,
    "B-": 2.7,
    "C+": 2.3,
    "C": 2.0,
    "C-": 1.7,
    "D+": 1.3,
    "D": 1.0,
    "D-": 0.7,
    "F": 0.0,
}

LETTER_PERCENTAGES: Dict[str, float] = {
    "A+": 97,
    "A": 93,
    "A-": 90,
    "B+": 87,
    "B": 83,
    "B-": 80,
    "C+": 77,
    "C": 73,
    "C-": 70,
    "D+": 67,
    "D": 65,
    "D-": 60,
    "F": 0,
}

MAX_GPA = 4.0
MAX_PERCENTAGE = 100.0
MAX_SGPA = 10.0

_LETTER_MODES = (GradingMode.CREDIT_WEIGHTED_LETTER, GradingMode.RAW_PERCENTAGE_LETTER)


def parse_number(token: GradeToken) -> Optional[float]:
    if token is None or isinstance(token, bool):
        return None
    if isinstance(token, (int, float)):
        value = float(token)
    else:
        text = str(token).strip()
        if not text:
            return None
        try:
            value = float(text)
        except ValueError:
            return None
    if not math.isfinite(value):
        return None
    return value


def _letter_value(token: GradeToken, table: Dict[str, float]) -> float:
    if not isinstance(token, str):
        return 0.0
    return float(table.get(token.strip().upper(), 0.0))


def _in_range(value: Optional[float], upper: float) -> float:
    if value is None or value < 0 or value > upper:
        return 0.0
    return value


def missed_to_percentage(total_questions: Optional[float], missed: GradeToken) -> float:
    total = total_questions or 0
    missed_count = parse_number(missed)
    if missed_count is None or total <= 0 or not 0 <= missed_count <= total:
        return 0.0
    return round(((total - missed_count) / total) * 100, settings.percentage_precision)


def resolve_score(token: GradeToken, mode: GradingMode, aux_weight: Optional[float] = None) -> float:
    """Convert a grade token to a score on the mode's scale.

    Unknown letters and out-of-range or unparseable numbers resolve to 0.0.
    ``aux_weight`` is the total question count and is only read in
    PERCENTAGE_FROM_MISSED mode.
    """
    mode = GradingMode(mode)
    if mode is GradingMode.CREDIT_WEIGHTED_LETTER:
        return _letter_value(token, LETTER_POINTS)
    if mode is GradingMode.RAW_PERCENTAGE_LETTER:
        return _letter_value(token, LETTER_PERCENTAGES)
    if mode is GradingMode.PERCENTAGE_FROM_MISSED:
        return missed_to_percentage(aux_weight, token)
    if mode is GradingMode.RAW_PERCENTAGE:
        return _in_range(parse_number(token), MAX_PERCENTAGE)
    return _in_range(parse_number(token), MAX_SGPA)


def is_parseable_token(token: GradeToken, mode: GradingMode) -> bool:
    """True when the token is filled in well enough for the entry to count.

    Letter modes only need a non-blank string; an unknown letter still
    counts and contributes zero. Numeric modes need a finite number.
    """
    if GradingMode(mode) in _LETTER_MODES:
        return isinstance(token, str) and bool(token.strip())
    return parse_number(token) is not None


def precision_for(mode: GradingMode) -> int:
    mode = GradingMode(mode)
    if mode is GradingMode.CREDIT_WEIGHTED_LETTER:
        return settings.gpa_precision
    if mode is GradingMode.RAW_SGPA:
        return settings.sgpa_precision
    return settings.percentage_precision


def scale_maximum(mode: GradingMode) -> float:
    mode = GradingMode(mode)
    if mode is GradingMode.CREDIT_WEIGHTED_LETTER:
        return MAX_GPA
    if mode is GradingMode.RAW_SGPA:
        return MAX_SGPA
    return MAX_PERCENTAGE
