import logging
from dataclasses import dataclass
from enum import Enum

from gpakit.config.settings import settings
from gpakit.core.scales import MAX_GPA, MAX_PERCENTAGE


logger = logging.getLogger(__name__)

# float noise around exact boundaries (e.g. 100.00000000000001) must not flip the status
STATUS_PRECISION = 9


class TargetStatus(str, Enum):
    ALREADY_MET = "already_met"
    ACHIEVABLE = "achievable"
    UNACHIEVABLE = "unachievable"


@dataclass(frozen=True)
class TargetOutcome:
    required: float
    display: float
    status: TargetStatus

    @property
    def achievable(self) -> bool:
        return self.status is not TargetStatus.UNACHIEVABLE


def required_final_score(current_grade: float, final_weight: float, target_grade: float) -> float:
    """
    Score needed on a final exam worth final_weight percent of the course.
    required = (target - current * (100 - final_weight) / 100) / (final_weight / 100)

    The result is not clamped; it can be negative or above 100.
    """
    if final_weight <= 0:
        raise ValueError("final_weight must be greater than 0")
    current_weighted = current_grade * (100 - final_weight) / 100
    return (target_grade - current_weighted) / (final_weight / 100)


def required_future_score(
    current_score: float,
    current_weight: float,
    target_score: float,
    future_weight: float,
) -> float:
    """
    Average needed over future_weight more credits to finish at target_score.
    required = (target * (current_weight + future_weight) - current * current_weight) / future_weight
    """
    if future_weight <= 0:
        raise ValueError("future_weight must be greater than 0")
    needed_points = target_score * (current_weight + future_weight) - current_score * current_weight
    return needed_points / future_weight


def _clamp(value: float, upper: float) -> float:
    return max(0.0, min(upper, value))


def assess_final_exam_target(
    current_grade: float,
    final_weight: float,
    target_grade: float,
    *,
    round_to: int = 1,
) -> TargetOutcome:
    required = required_final_score(current_grade, final_weight, target_grade)
    settled = round(required, STATUS_PRECISION)
    if settled <= 0:
        status = TargetStatus.ALREADY_MET
    elif settled > MAX_PERCENTAGE:
        status = TargetStatus.UNACHIEVABLE
    else:
        status = TargetStatus.ACHIEVABLE
    logger.debug("Final exam target %.2f needs %.2f (%s)", target_grade, required, status.value)
    return TargetOutcome(required, round(_clamp(required, MAX_PERCENTAGE), round_to), status)


def assess_future_target(
    current_score: float,
    current_weight: float,
    target_score: float,
    future_weight: float,
    *,
    maximum: float = MAX_GPA,
    round_to: int = settings.gpa_precision,
) -> TargetOutcome:
    required = required_future_score(current_score, current_weight, target_score, future_weight)
    settled = round(required, STATUS_PRECISION)
    if settled < 0:
        status = TargetStatus.ALREADY_MET
    elif settled > maximum:
        status = TargetStatus.UNACHIEVABLE
    else:
        status = TargetStatus.ACHIEVABLE
    logger.debug("Future target %.3f needs %.3f (%s)", target_score, required, status.value)
    return TargetOutcome(required, round(_clamp(required, maximum), round_to), status)
