import math
from dataclasses import dataclass, field
from typing import Any, List

from .config import (
    ALLOWED_BREAK_DURATIONS,
    ALLOWED_SESSION_DURATIONS,
    DAILY_HOURS_RANGE,
    DAYS,
    DIFFICULTY_WEIGHTS,
    EXAM_PRIORITY_RANGE,
    WEEKLY_HOURS_RANGE,
)
from .models.timetable import Preferences, Subject


@dataclass(slots=True)
class ValidationIssue:
    code: str
    message: str
    field_path: str

    def as_dict(self) -> dict[str, Any]:
        return {"code": self.code, "message": self.message, "field_path": self.field_path}


@dataclass(slots=True)
class ValidationReport:
    """Aggregated validation errors."""

    errors: list[ValidationIssue] = field(default_factory=list)

    def add_error(self, *, code: str, message: str, field_path: str) -> None:
        self.errors.append(ValidationIssue(code=code, message=message, field_path=field_path))

    def extend(self, other: "ValidationReport") -> None:
        self.errors.extend(other.errors)

    @property
    def ok(self) -> bool:
        return not self.errors

    def as_dict(self) -> dict[str, Any]:
        return {"errors": [issue.as_dict() for issue in self.errors]}


class ScheduleValidationError(Exception):
    """Raised by the controller when a request fails precondition checks."""

    def __init__(self, report: ValidationReport):
        self.report = report
        codes = ", ".join(sorted({issue.code for issue in report.errors}))
        super().__init__(f"Invalid schedule request ({codes})")


def validate_schedule_request(subjects: List[Subject], preferences: Preferences) -> ValidationReport:
    report = ValidationReport()

    if not subjects:
        report.add_error(
            code="EMPTY_SUBJECTS",
            message="Please add at least one subject before generating a timetable",
            field_path="$.subjects",
        )

    seen_names: set[str] = set()
    for idx, subject in enumerate(subjects):
        path = f"$.subjects[{idx}]"
        name = subject.name.strip()
        if not name:
            report.add_error(
                code="MISSING_REQUIRED_FIELD",
                message="Subject name is required",
                field_path=f"{path}.name",
            )
        elif name.lower() in seen_names:
            report.add_error(
                code="DUPLICATE_SUBJECT_NAME",
                message=f"Duplicate subject name: {name}",
                field_path=f"{path}.name",
            )
        seen_names.add(name.lower())

        low, high = WEEKLY_HOURS_RANGE
        if not low <= subject.weekly_hours <= high:
            report.add_error(
                code="OUT_OF_RANGE",
                message=f"weekly_hours must be between {low} and {high}",
                field_path=f"{path}.weekly_hours",
            )

        if subject.difficulty not in DIFFICULTY_WEIGHTS:
            report.add_error(
                code="INVALID_ENUM_VALUE",
                message=f"difficulty must be one of: {', '.join(DIFFICULTY_WEIGHTS)}",
                field_path=f"{path}.difficulty",
            )

        low, high = EXAM_PRIORITY_RANGE
        if not low <= subject.exam_priority <= high:
            report.add_error(
                code="OUT_OF_RANGE",
                message=f"exam_priority must be between {low} and {high}",
                field_path=f"{path}.exam_priority",
            )

    report.extend(validate_preferences(preferences))
    return report


def validate_preferences(preferences: Preferences) -> ValidationReport:
    report = ValidationReport()

    low, high = DAILY_HOURS_RANGE
    # huge budgets overflow to inf minutes and have no session count
    finite_budget = math.isfinite(preferences.daily_minutes)
    if not low <= preferences.daily_hours <= high:
        report.add_error(
            code="OUT_OF_RANGE",
            message=f"daily_hours must be between {low} and {high}",
            field_path="$.preferences.daily_hours",
        )
    if preferences.session_duration not in ALLOWED_SESSION_DURATIONS:
        report.add_error(
            code="INVALID_ENUM_VALUE",
            message=f"session_duration must be one of: {', '.join(map(str, ALLOWED_SESSION_DURATIONS))}",
            field_path="$.preferences.session_duration",
        )
    if preferences.break_duration not in ALLOWED_BREAK_DURATIONS:
        report.add_error(
            code="INVALID_ENUM_VALUE",
            message=f"break_duration must be one of: {', '.join(map(str, ALLOWED_BREAK_DURATIONS))}",
            field_path="$.preferences.break_duration",
        )
    if finite_budget and preferences.session_duration > 0 and preferences.max_sessions_per_day == 0:
        report.add_error(
            code="ZERO_DAILY_CAPACITY",
            message="session_duration is longer than the daily study budget",
            field_path="$.preferences",
        )
    return report


def validate_day_index(day_of_week: int) -> ValidationReport:
    report = ValidationReport()
    if not 0 <= day_of_week < len(DAYS):
        report.add_error(
            code="INVALID_DAY",
            message="Invalid day. Use 0-6 (Monday-Sunday)",
            field_path="$.day_of_week",
        )
    return report
