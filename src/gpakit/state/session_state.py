import logging
import uuid
from dataclasses import dataclass, field, replace
from typing import List, Optional

from gpakit.config.settings import settings
from gpakit.core.gpa import Aggregate, GradeEntry, aggregate
from gpakit.core.scales import GradingMode, parse_number


logger = logging.getLogger(__name__)

EDITABLE_FIELDS = ("label", "weight", "grade_token", "course_type")


class SessionStateError(Exception):
    pass


def _new_identifier() -> str:
    return uuid.uuid4().hex


@dataclass
class GradeGroup:
    name: str
    entries: List[GradeEntry] = field(default_factory=list)

    @property
    def aggregate(self) -> Aggregate:
        return aggregate(self.entries)

    def find(self, identifier: str) -> int:
        for index, entry in enumerate(self.entries):
            if entry.identifier == identifier:
                return index
        raise SessionStateError(f"Unknown entry: {identifier}")


@dataclass
class CalculationSession:
    """Caller-owned calculator state: groups of entries plus an optional prior record.

    A new session starts with one group of empty entries. The engine never
    keeps a reference to it; every calculation reads it afresh.
    """

    mode: GradingMode = GradingMode.CREDIT_WEIGHTED_LETTER
    groups: List[GradeGroup] = field(default_factory=list)
    prior: Optional[Aggregate] = None
    entries_per_group: int = settings.entries_per_group
    default_weight: float = 0.0

    def __post_init__(self) -> None:
        self.mode = GradingMode(self.mode)
        if not self.groups:
            self.add_group()

    @property
    def entries(self) -> List[GradeEntry]:
        return [entry for group in self.groups for entry in group.entries]

    @property
    def group_aggregates(self) -> List[Aggregate]:
        return [group.aggregate for group in self.groups]

    def group(self, index: int) -> GradeGroup:
        if not 0 <= index < len(self.groups):
            raise SessionStateError(f"Unknown group index: {index}")
        return self.groups[index]

    def _new_entry(self) -> GradeEntry:
        return GradeEntry(identifier=_new_identifier(), weight=self.default_weight, mode=self.mode)

    def add_group(self, name: Optional[str] = None) -> GradeGroup:
        group = GradeGroup(
            name=name or f"Semester {len(self.groups) + 1}",
            entries=[self._new_entry() for _ in range(self.entries_per_group)],
        )
        self.groups.append(group)
        logger.debug("Added group %r", group.name)
        return group

    def add_entry(self, group_index: int = 0) -> GradeEntry:
        entry = self._new_entry()
        self.group(group_index).entries.append(entry)
        return entry

    def update_entry(self, group_index: int, identifier: str, **changes) -> GradeEntry:
        unknown = [name for name in changes if name not in EDITABLE_FIELDS]
        if unknown:
            raise SessionStateError(f"Cannot update fields: {', '.join(unknown)}")
        if "weight" in changes:
            changes["weight"] = parse_number(changes["weight"]) or 0.0

        group = self.group(group_index)
        position = group.find(identifier)
        updated = replace(group.entries[position], **changes)
        group.entries[position] = updated
        return updated

    def remove_entry(self, group_index: int, identifier: str) -> bool:
        group = self.group(group_index)
        position = group.find(identifier)
        if len(group.entries) <= 1:
            return False
        del group.entries[position]
        return True

    def remove_group(self, group_index: int) -> bool:
        self.group(group_index)
        if len(self.groups) <= 1:
            return False
        removed = self.groups.pop(group_index)
        logger.debug("Removed group %r", removed.name)
        return True

    def set_prior(self, score: Optional[float], weight: Optional[float]) -> None:
        score = parse_number(score) or 0.0
        weight = parse_number(weight) or 0.0
        self.prior = Aggregate.of(score, weight) if weight > 0 else None

    def reset(self) -> None:
        self.groups = []
        self.prior = None
        self.add_group()
