from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

from gpakit.config.settings import settings
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
from gpakit.core.gpa import EMPTY, Aggregate, aggregate, aggregate_groups, counted_entries, simple_average
from gpakit.core.scales import GradingMode, scale_maximum
from gpakit.core.targets import TargetOutcome, TargetStatus, assess_final_exam_target, assess_future_target
from gpakit.state.session_state import CalculationSession

COURSE_TYPE_BONUS: Dict[str, float] = {
    "regular": 0.0,
    "honors": 0.5,
    "ap": 1.0,
    "ib": 1.0,
}


def _require_mode(session: CalculationSession, *modes: GradingMode) -> None:
    if session.mode not in modes:
        allowed = ", ".join(m.value for m in modes)
        raise ValueError(f"Session mode {session.mode.value} not supported here; expected {allowed}")


@dataclass(frozen=True)
class CollegeGpaResult:
    current: Aggregate
    cumulative: Aggregate
    counted: int

    @property
    def letter(self) -> str:
        return gpa_letter(self.cumulative.score)

    @property
    def celebrate(self) -> bool:
        return should_celebrate(self.cumulative.score, self.counted, settings.celebrate_gpa, 3)


@dataclass(frozen=True)
class SemesterGpaResult:
    gpa: Aggregate
    counted: int

    @property
    def letter(self) -> str:
        return gpa_letter(self.gpa.score)

    @property
    def celebrate(self) -> bool:
        return should_celebrate(self.gpa.score, self.counted, settings.celebrate_gpa, 3)


@dataclass(frozen=True)
class HighSchoolGpaResult:
    unweighted: Aggregate
    weighted: Aggregate
    counted: int


@dataclass(frozen=True)
class MiddleSchoolGpaResult:
    gpa: Aggregate
    counted: int

    @property
    def performance(self) -> str:
        return performance_label(self.gpa.score)

    @property
    def celebrate(self) -> bool:
        return should_celebrate(self.gpa.score, self.counted, settings.celebrate_gpa, 4)


@dataclass(frozen=True)
class EzGraderResult:
    average: Aggregate
    counted: int

    @property
    def letter(self) -> str:
        return percentage_letter(self.average.score)

    @property
    def celebrate(self) -> bool:
        return should_celebrate(self.average.score, self.counted, settings.celebrate_percentage, 2)


@dataclass(frozen=True)
class FinalGradeResult:
    current: Aggregate
    counted: int
    target: Optional[TargetOutcome] = None

    @property
    def letter(self) -> str:
        return percentage_letter(self.current.score)

    @property
    def difficulty(self) -> Optional[str]:
        if self.target is None:
            return None
        if self.target.status is TargetStatus.UNACHIEVABLE:
            return final_exam_difficulty(self.target.required)
        return final_exam_difficulty(self.target.display)

    @property
    def celebrate(self) -> bool:
        if self.target is None or self.counted < 2:
            return False
        return self.target.achievable and self.target.display <= settings.celebrate_final_required


@dataclass(frozen=True)
class SemesterSummary:
    name: str
    result: Aggregate


@dataclass(frozen=True)
class CumulativeGpaResult:
    semesters: List[SemesterSummary] = field(default_factory=list)
    overall: Aggregate = EMPTY

    @property
    def counted_semesters(self) -> List[SemesterSummary]:
        return [s for s in self.semesters if not s.result.is_empty]

    @property
    def best(self) -> Optional[SemesterSummary]:
        counted = self.counted_semesters
        return max(counted, key=lambda s: s.result.score) if counted else None

    @property
    def worst(self) -> Optional[SemesterSummary]:
        counted = self.counted_semesters
        return min(counted, key=lambda s: s.result.score) if counted else None

    @property
    def celebrate(self) -> bool:
        return should_celebrate(
            self.overall.score, len(self.counted_semesters), settings.celebrate_gpa, 2
        )


@dataclass(frozen=True)
class PlanningResult:
    projected: Aggregate
    planned_credits: float
    target_gpa: float
    counted: int = 0
    target: Optional[TargetOutcome] = None

    @property
    def on_track(self) -> bool:
        return not self.projected.is_empty and self.projected.score >= self.target_gpa

    @property
    def status(self) -> str:
        return planning_status(self.on_track, self.target is None or self.target.achievable)

    @property
    def celebrate(self) -> bool:
        return self.on_track and self.counted >= 3


@dataclass(frozen=True)
class CgpaResult:
    cgpa: Aggregate
    four_point_estimate: float
    band: Tuple[str, str]
    counted: int = 0

    @property
    def celebrate(self) -> bool:
        return should_celebrate(self.cgpa.score, self.counted, settings.celebrate_cgpa, 3)


def semester_gpa(session: CalculationSession) -> SemesterGpaResult:
    _require_mode(session, GradingMode.CREDIT_WEIGHTED_LETTER)
    counted = counted_entries(session.entries)
    return SemesterGpaResult(aggregate(counted, round_to=settings.gpa_precision), len(counted))


def college_gpa(session: CalculationSession) -> CollegeGpaResult:
    """Current GPA over every entry, blended with the session's prior record."""
    _require_mode(session, GradingMode.CREDIT_WEIGHTED_LETTER)
    counted = counted_entries(session.entries)
    current = aggregate(counted, round_to=settings.gpa_precision)
    cumulative = aggregate_groups([current], session.prior, round_to=settings.gpa_precision)
    return CollegeGpaResult(current, cumulative, len(counted))


def high_school_gpa(session: CalculationSession) -> HighSchoolGpaResult:
    """
    Unweighted GPA on the 4.0 table, and a weighted GPA where Honors adds
    0.5 and AP/IB add 1.0 to each course's points. Unknown course types
    get no bonus.
    """
    _require_mode(session, GradingMode.CREDIT_WEIGHTED_LETTER)
    counted = counted_entries(session.entries)
    unweighted = aggregate(counted, round_to=settings.gpa_precision)
    if not counted:
        return HighSchoolGpaResult(EMPTY, EMPTY, 0)

    boosted_points = 0.0
    for entry in counted:
        bonus = COURSE_TYPE_BONUS.get((entry.course_type or "").strip().lower(), 0.0)
        boosted_points += (entry.derived_score + bonus) * entry.weight
    total = unweighted.total_weight
    weighted = Aggregate(round(boosted_points / total, settings.gpa_precision), total, boosted_points)
    return HighSchoolGpaResult(unweighted, weighted, len(counted))


def middle_school_gpa(session: CalculationSession, *, use_credits: bool = False) -> MiddleSchoolGpaResult:
    _require_mode(session, GradingMode.CREDIT_WEIGHTED_LETTER)
    if use_credits:
        counted = counted_entries(session.entries)
        return MiddleSchoolGpaResult(aggregate(counted, round_to=settings.gpa_precision), len(counted))
    # total_weight is the number of graded courses here
    result = simple_average(session.entries, round_to=settings.gpa_precision)
    return MiddleSchoolGpaResult(result, int(result.total_weight))


def ez_grader(session: CalculationSession) -> EzGraderResult:
    """Average percentage across tests, each weighted by its question count."""
    _require_mode(session, GradingMode.PERCENTAGE_FROM_MISSED)
    counted = counted_entries(session.entries)
    return EzGraderResult(aggregate(counted, round_to=settings.percentage_precision), len(counted))


def final_grade(
    session: CalculationSession,
    target_grade: float = settings.default_target_grade,
    final_weight: float = settings.default_final_weight,
) -> FinalGradeResult:
    _require_mode(session, GradingMode.RAW_PERCENTAGE_LETTER, GradingMode.RAW_PERCENTAGE)
    counted = counted_entries(session.entries)
    current = aggregate(counted, round_to=settings.percentage_precision)
    if not counted:
        return FinalGradeResult(current, 0)
    # the unrounded grade feeds the solver
    exact = current.quality_points / current.total_weight
    outcome = assess_final_exam_target(exact, final_weight, target_grade)
    return FinalGradeResult(current, len(counted), outcome)


def cumulative_gpa(session: CalculationSession) -> CumulativeGpaResult:
    _require_mode(session, GradingMode.CREDIT_WEIGHTED_LETTER)
    semesters = [
        SemesterSummary(group.name, aggregate(group.entries, round_to=settings.gpa_precision))
        for group in session.groups
    ]
    overall = aggregate_groups([s.result for s in semesters], session.prior, round_to=settings.gpa_precision)
    return CumulativeGpaResult(semesters, overall)


def next_term_target(
    result: CumulativeGpaResult,
    target_gpa: float = settings.default_target_gpa,
    future_credits: float = settings.next_term_credits,
) -> TargetOutcome:
    """GPA needed next term, over future_credits credits, to reach target_gpa overall."""
    overall = result.overall
    current = overall.quality_points / overall.total_weight if overall.total_weight else 0.0
    return assess_future_target(current, overall.total_weight, target_gpa, future_credits)


def gpa_planning(
    session: CalculationSession,
    current_gpa: float,
    current_credits: float,
    target_gpa: float = settings.default_target_gpa,
) -> PlanningResult:
    """
    Project the final GPA from the current record plus planned courses, and
    solve for the average the planned credits need to reach target_gpa.
    """
    _require_mode(session, GradingMode.CREDIT_WEIGHTED_LETTER)
    counted = counted_entries(session.entries)
    planned = aggregate(counted, round_to=settings.gpa_precision)
    current = Aggregate.of(current_gpa, current_credits) if current_credits > 0 else EMPTY
    projected = aggregate_groups([current, planned], round_to=settings.gpa_precision)

    target = None
    if planned.total_weight > 0 and target_gpa > 0:
        target = assess_future_target(
            current_gpa,
            max(current_credits, 0.0),
            target_gpa,
            planned.total_weight,
            maximum=scale_maximum(session.mode),
        )
    return PlanningResult(projected, planned.total_weight, target_gpa, len(counted), target)


def sgpa_to_cgpa(session: CalculationSession) -> CgpaResult:
    _require_mode(session, GradingMode.RAW_SGPA)
    counted = counted_entries(session.entries)
    cgpa = aggregate(counted, round_to=settings.sgpa_precision)
    estimate = round(convert_scale_to_four_point(cgpa.score), settings.gpa_precision) if not cgpa.is_empty else 0.0
    return CgpaResult(cgpa, estimate, cgpa_band(cgpa.score), len(counted))

