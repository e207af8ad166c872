import logging
from dataclasses import dataclass
from typing import Iterable, List, Optional

from gpakit.core.scales import GradeToken, GradingMode, is_parseable_token, precision_for, resolve_score


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GradeEntry:
    identifier: str
    label: str = ""
    weight: float = 0.0
    grade_token: GradeToken = ""
    mode: GradingMode = GradingMode.CREDIT_WEIGHTED_LETTER
    course_type: str = "regular"

    @property
    def derived_score(self) -> float:
        return resolve_score(self.grade_token, self.mode, self.weight)


@dataclass(frozen=True)
class Aggregate:
    score: float
    total_weight: float
    points: Optional[float] = None

    @classmethod
    def of(cls, score: float, weight: float) -> "Aggregate":
        return cls(score, weight, score * weight)

    @property
    def quality_points(self) -> float:
        """Unrounded score * weight; falls back to the rounded score."""
        if self.points is not None:
            return self.points
        return self.score * self.total_weight

    @property
    def is_empty(self) -> bool:
        return self.total_weight <= 0


EMPTY = Aggregate(0.0, 0.0, 0.0)


def is_counted(entry: GradeEntry) -> bool:
    return (
        bool(entry.label and entry.label.strip())
        and is_parseable_token(entry.grade_token, entry.mode)
        and (entry.weight or 0) > 0
    )


def counted_entries(entries: Iterable[GradeEntry]) -> List[GradeEntry]:
    entries = list(entries)
    valid = [e for e in entries if is_counted(e)]
    if len(valid) != len(entries):
        logger.debug("Excluded %d incomplete entries", len(entries) - len(valid))
    return valid


def aggregate(entries: Iterable[GradeEntry], *, round_to: Optional[int] = None) -> Aggregate:
    """
    Weighted mean of the counted entries.
    score = Σ(derived_score * weight) / Σ(weight)

    Precision defaults to the grading mode of the entries.
    """
    valid = counted_entries(entries)
    if not valid:
        return EMPTY

    weighted_sum = 0.0
    total_weight = 0.0
    for entry in valid:
        weighted_sum += entry.derived_score * entry.weight
        total_weight += entry.weight

    if round_to is None:
        round_to = precision_for(valid[0].mode)
    return Aggregate(round(weighted_sum / total_weight, round_to), total_weight, weighted_sum)


def aggregate_groups(
    groups: Iterable[Aggregate],
    prior: Optional[Aggregate] = None,
    *,
    round_to: Optional[int] = None,
    mode: GradingMode = GradingMode.CREDIT_WEIGHTED_LETTER,
) -> Aggregate:
    """
    Combine already reduced groups (and an optional prior record) as
    pseudo-entries of one weighted mean. Groups without weight are skipped.

    Precision defaults to the one of ``mode``: 3 places for GPA groups,
    2 for SGPA and percentage groups.
    """
    parts = list(groups)
    if prior is not None:
        parts.append(prior)

    weighted_sum = 0.0
    total_weight = 0.0
    for part in parts:
        if part.total_weight <= 0:
            continue
        weighted_sum += part.quality_points
        total_weight += part.total_weight

    if total_weight == 0:
        return EMPTY
    if round_to is None:
        round_to = precision_for(mode)
    return Aggregate(round(weighted_sum / total_weight, round_to), total_weight, weighted_sum)


def simple_average(entries: Iterable[GradeEntry], *, round_to: Optional[int] = None) -> Aggregate:
    """Unweighted mean over entries with a label and a grade; weight is ignored.

    ``total_weight`` of the result is the number of averaged entries, not a
    weight sum, so feeding it to aggregate_groups weights it by course count.
    """
    valid = [
        e for e in entries
        if e.label and e.label.strip() and is_parseable_token(e.grade_token, e.mode)
    ]
    if not valid:
        return EMPTY

    total = sum(e.derived_score for e in valid)
    if round_to is None:
        round_to = precision_for(valid[0].mode)
    return Aggregate(round(total / len(valid), round_to), float(len(valid)), total)
