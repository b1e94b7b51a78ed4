from pydantic import BaseModel, Field, computed_field
from typing import List, Dict, Optional, Literal

from ..config import (
    BREAK_COLOR,
    BREAK_LABEL,
    DEFAULT_BREAK_DURATION,
    DEFAULT_DAILY_HOURS,
    DEFAULT_SESSION_DURATION,
    DEFAULT_SUBJECT_COLOR,
)


class Subject(BaseModel):
    id: Optional[str] = None
    name: str
    weekly_hours: float = Field(allow_inf_nan=False)
    difficulty: str = "medium"  # easy, medium, hard
    exam_priority: int = 0  # 0-10 scale
    color: str = DEFAULT_SUBJECT_COLOR


class Preferences(BaseModel):
    daily_hours: float = Field(default=DEFAULT_DAILY_HOURS, allow_inf_nan=False)
    session_duration: int = DEFAULT_SESSION_DURATION  # minutes
    break_duration: int = DEFAULT_BREAK_DURATION  # minutes

    @property
    def daily_minutes(self) -> float:
        return self.daily_hours * 60

    @property
    def max_sessions_per_day(self) -> int:
        if self.session_duration <= 0:
            return 0
        return int(self.daily_minutes // self.session_duration)


class Session(BaseModel):
    type: Literal["study", "break"]
    subject: str
    subject_id: Optional[str] = None
    difficulty: Optional[str] = None
    start_time: str  # 12-hour clock, e.g. "8:25 AM"
    end_time: str
    duration: int  # minutes
    completed: bool = False
    color: str = DEFAULT_SUBJECT_COLOR

    @classmethod
    def study(cls, subject_name: str, subject_id: Optional[str], difficulty: Optional[str],
              color: str, start_time: str, end_time: str, duration: int) -> "Session":
        return cls(
            type="study",
            subject=subject_name,
            subject_id=subject_id,
            difficulty=difficulty,
            start_time=start_time,
            end_time=end_time,
            duration=duration,
            completed=False,
            color=color,
        )

    @classmethod
    def rest(cls, start_time: str, end_time: str, duration: int) -> "Session":
        return cls(
            type="break",
            subject=BREAK_LABEL,
            start_time=start_time,
            end_time=end_time,
            duration=duration,
            color=BREAK_COLOR,
        )


class Day(BaseModel):
    day_of_week: int  # 0=Monday ... 6=Sunday
    day_name: str
    sessions: List[Session] = []

    # Totals are always derived from the session list; incoming values are ignored.
    @computed_field
    @property
    def total_study_minutes(self) -> int:
        return sum(s.duration for s in self.sessions if s.type == "study")

    @computed_field
    @property
    def total_break_minutes(self) -> int:
        return sum(s.duration for s in self.sessions if s.type == "break")

    @property
    def study_sessions(self) -> List[Session]:
        return [s for s in self.sessions if s.type == "study"]


class SubjectSummary(BaseModel):
    subject: str
    subject_id: Optional[str] = None
    priority: float
    sessions_needed: int
    sessions_placed: int
    sessions_dropped: int


class ScheduleSummary(BaseModel):
    max_sessions_per_day: int
    weekly_capacity: int
    total_sessions_needed: int
    total_sessions_placed: int
    total_study_minutes: int
    total_break_minutes: int
    saturated: bool
    subjects: List[SubjectSummary]


class GenerateRequest(BaseModel):
    subjects: List[Subject]
    preferences: Preferences = Field(default_factory=Preferences)
    seed: Optional[int] = None


class GenerateResponse(BaseModel):
    days: List[Day]
    summary: ScheduleSummary


class RegenerateDayRequest(BaseModel):
    day: Optional[Day] = None
    subjects: List[Subject]
    preferences: Preferences = Field(default_factory=Preferences)
    seed: Optional[int] = None


class SessionUpdateRequest(BaseModel):
    day: Day
    completed: bool


class WeekdaysResponse(BaseModel):
    days: Dict[int, str]
