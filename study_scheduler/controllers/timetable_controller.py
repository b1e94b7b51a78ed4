import logging
import random
from typing import List, Optional

from ..config import DAYS
from ..models.timetable import (
    Day,
    GenerateResponse,
    Preferences,
    Subject,
)
from ..scheduler import generate, regenerate_day, summarize_schedule
from ..validation import (
    ScheduleValidationError,
    validate_day_index,
    validate_schedule_request,
)

logger = logging.getLogger(__name__)


class SessionNotFoundError(LookupError):
    pass


class TimetableController:

    @staticmethod
    def generate_timetable(
        subjects: List[Subject],
        preferences: Preferences,
        seed: Optional[int] = None
    ) -> GenerateResponse:
        """
        Generate a full week of study and break sessions.

        Inputs are validated first; the scheduler itself never fails, so any
        shortfall (sessions that did not fit the weekly capacity) is reported
        in the summary instead.
        """
        report = validate_schedule_request(subjects, preferences)
        if not report.ok:
            raise ScheduleValidationError(report)

        rng = random.Random(seed)
        days = generate(subjects, preferences, rng=rng)
        summary = summarize_schedule(days, subjects, preferences)

        logger.info(
            "Generated timetable for %d subjects: %d/%d sessions placed",
            len(subjects),
            summary.total_sessions_placed,
            summary.total_sessions_needed,
        )
        if summary.saturated:
            logger.warning(
                "Weekly capacity of %d sessions is too small; %d sessions were not scheduled",
                summary.weekly_capacity,
                summary.total_sessions_needed - summary.total_sessions_placed,
            )

        return GenerateResponse(days=days, summary=summary)

    @staticmethod
    def regenerate_day(
        day_of_week: int,
        day: Optional[Day],
        subjects: List[Subject],
        preferences: Preferences,
        seed: Optional[int] = None
    ) -> Day:
        """Reshuffle one day's sessions without touching the rest of the week"""
        report = validate_day_index(day_of_week)
        report.extend(validate_schedule_request(subjects, preferences))
        if not report.ok:
            raise ScheduleValidationError(report)

        # Start from an empty day when the caller has no stored one yet
        if day is None:
            day = Day(day_of_week=day_of_week, day_name=DAYS[day_of_week], sessions=[])

        sessions = regenerate_day(day, subjects, preferences, rng=random.Random(seed))
        logger.info("Timetable regenerated for %s", DAYS[day_of_week])
        return Day(day_of_week=day_of_week, day_name=DAYS[day_of_week], sessions=sessions)

    @staticmethod
    def update_session(day: Day, index: int, completed: bool) -> Day:
        """Mark one session as completed or not; totals follow the new session list"""
        if not 0 <= index < len(day.sessions):
            raise SessionNotFoundError(f"Session {index} not found on {day.day_name}")

        sessions = list(day.sessions)
        sessions[index] = sessions[index].model_copy(update={"completed": completed})

        logger.info(
            "Session %d on %s marked as %s",
            index,
            day.day_name,
            "completed" if completed else "incomplete",
        )
        return day.model_copy(update={"sessions": sessions})

    @staticmethod
    def weekdays() -> dict:
        return dict(enumerate(DAYS))
