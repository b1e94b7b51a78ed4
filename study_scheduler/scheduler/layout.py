from typing import Iterable, List

from pydantic import BaseModel

from ..config import DAY_START_HOUR, DAYS
from ..models.timetable import Day, Preferences, Session, Subject
from .priority import difficulty_weight
from .time_utils import add_minutes, format_time


def coerce(model: type[BaseModel], value):
    """Accept either a model instance or its plain-dict form."""
    if isinstance(value, model):
        return value
    return model.model_validate(value)


def coerce_subjects(subjects: Iterable) -> List[Subject]:
    return [coerce(Subject, subject) for subject in subjects or []]


def empty_week() -> List[Day]:
    return [Day(day_of_week=index, day_name=name, sessions=[]) for index, name in enumerate(DAYS)]


def layout_sessions(
    studies: List[Session],
    preferences: Preferences,
    day_start_hour: int = DAY_START_HOUR,
) -> List[Session]:
    """Lay out study sessions back to back with one break between each pair.

    Every timestamp is recomputed from ``day_start_hour``; no break follows the
    last study session.
    """
    sessions: List[Session] = []
    hour, minute = day_start_hour, 0
    for idx, study in enumerate(studies):
        end_hour, end_minute = add_minutes(hour, minute, preferences.session_duration)
        sessions.append(
            study.model_copy(
                update={
                    "start_time": format_time(hour, minute),
                    "end_time": format_time(end_hour, end_minute),
                    "duration": preferences.session_duration,
                }
            )
        )
        hour, minute = end_hour, end_minute

        if idx < len(studies) - 1:
            break_hour, break_minute = add_minutes(hour, minute, preferences.break_duration)
            sessions.append(
                Session.rest(
                    start_time=format_time(hour, minute),
                    end_time=format_time(break_hour, break_minute),
                    duration=preferences.break_duration,
                )
            )
            hour, minute = break_hour, break_minute
    return sessions


def rebuild_day(day: Day, preferences: Preferences, day_start_hour: int = DAY_START_HOUR) -> Day:
    """Return a copy of ``day`` with studies ordered hardest first and re-timed.

    Breaks and provisional timestamps of the input are discarded.
    """
    # sorted() is stable: equal difficulties keep their placement order
    studies = sorted(day.study_sessions, key=lambda s: difficulty_weight(s.difficulty), reverse=True)
    return Day(
        day_of_week=day.day_of_week,
        day_name=day.day_name,
        sessions=layout_sessions(studies, preferences, day_start_hour),
    )
