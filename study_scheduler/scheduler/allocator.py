import logging
import random
from collections import Counter
from dataclasses import dataclass
from typing import Iterable, List, Optional

from ..config import DAY_START_HOUR
from ..models.timetable import (
    Day,
    Preferences,
    ScheduleSummary,
    Session,
    Subject,
    SubjectSummary,
)
from .layout import coerce, coerce_subjects, empty_week, rebuild_day
from .priority import score, sessions_needed
from .time_utils import add_minutes, format_time, parse_time

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SessionToken:
    subject_id: Optional[str]
    subject: str
    color: str
    difficulty: str
    priority: float


def build_session_pool(subjects: List[Subject], session_duration: int) -> List[SessionToken]:
    """Flat pool of tokens, subjects visited in descending priority."""
    enriched = [(subject, score(subject), sessions_needed(subject, session_duration)) for subject in subjects]
    enriched.sort(key=lambda item: item[1], reverse=True)

    pool: List[SessionToken] = []
    for subject, priority, needed in enriched:
        token = SessionToken(
            subject_id=subject.id,
            subject=subject.name,
            color=subject.color,
            difficulty=subject.difficulty,
            priority=priority,
        )
        pool.extend([token] * needed)
    return pool


def order_pool(pool: List[SessionToken], rng: random.Random) -> List[SessionToken]:
    """Shuffle the pool, then stable-sort it by descending priority."""
    ordered = list(pool)
    rng.shuffle(ordered)
    ordered.sort(key=lambda token: token.priority, reverse=True)
    return ordered


def _pick_day(study_counts: List[int], max_sessions_per_day: int) -> Optional[int]:
    target = None
    for index, count in enumerate(study_counts):
        if count >= max_sessions_per_day:
            continue
        # strict comparison keeps the first (earliest) day on ties
        if target is None or count < study_counts[target]:
            target = index
    return target


def _place_token(day: Day, token: SessionToken, study_count: int, preferences: Preferences,
                 max_sessions_per_day: int, day_start_hour: int) -> None:
    if day.sessions:
        hour, minute = parse_time(day.sessions[-1].end_time)
    else:
        hour, minute = day_start_hour, 0

    end_hour, end_minute = add_minutes(hour, minute, preferences.session_duration)
    day.sessions.append(
        Session.study(
            subject_name=token.subject,
            subject_id=token.subject_id,
            difficulty=token.difficulty,
            color=token.color,
            start_time=format_time(hour, minute),
            end_time=format_time(end_hour, end_minute),
            duration=preferences.session_duration,
        )
    )

    if study_count < max_sessions_per_day - 1:
        break_hour, break_minute = add_minutes(end_hour, end_minute, preferences.break_duration)
        day.sessions.append(
            Session.rest(
                start_time=format_time(end_hour, end_minute),
                end_time=format_time(break_hour, break_minute),
                duration=preferences.break_duration,
            )
        )


def generate(
    subjects: Iterable,
    preferences,
    rng: Optional[random.Random] = None,
    day_start_hour: int = DAY_START_HOUR,
) -> List[Day]:
    """Generate a seven-day timetable, Monday first.

    Tokens are placed highest priority first onto the least-loaded day that
    still has room; each day is then reordered hardest first and re-timed.
    """
    subjects = coerce_subjects(subjects)
    preferences = coerce(Preferences, preferences)
    rng = rng or random.Random()

    max_sessions_per_day = preferences.max_sessions_per_day
    if max_sessions_per_day == 0:
        logger.warning(
            "Session length %d min exceeds daily budget of %s min; no study sessions fit",
            preferences.session_duration,
            preferences.daily_minutes,
        )

    pool = order_pool(build_session_pool(subjects, preferences.session_duration), rng)
    timetable = empty_week()
    study_counts = [0] * len(timetable)
    dropped = 0

    for token in pool:
        target = _pick_day(study_counts, max_sessions_per_day)
        if target is None:
            dropped += 1
            continue
        _place_token(
            timetable[target],
            token,
            study_counts[target],
            preferences,
            max_sessions_per_day,
            day_start_hour,
        )
        study_counts[target] += 1

    if dropped:
        logger.warning("Weekly capacity exhausted: dropped %d of %d session tokens", dropped, len(pool))
    logger.debug("Placed %d study sessions across %d days", len(pool) - dropped, len(timetable))

    return [rebuild_day(day, preferences, day_start_hour) for day in timetable]


def summarize_schedule(days: Iterable, subjects: Iterable, preferences) -> ScheduleSummary:
    """Compare required sessions against what was actually placed."""
    days = [coerce(Day, day) for day in days]
    subjects = coerce_subjects(subjects)
    preferences = coerce(Preferences, preferences)

    placed_by_id: Counter = Counter()
    placed_by_name: Counter = Counter()
    for day in days:
        for session in day.study_sessions:
            if session.subject_id is not None:
                placed_by_id[session.subject_id] += 1
            else:
                placed_by_name[session.subject] += 1

    rows: List[SubjectSummary] = []
    for subject in sorted(subjects, key=score, reverse=True):
        needed = sessions_needed(subject, preferences.session_duration)
        if subject.id is not None:
            placed = placed_by_id.get(subject.id, 0)
        else:
            placed = placed_by_name.get(subject.name, 0)
        rows.append(
            SubjectSummary(
                subject=subject.name,
                subject_id=subject.id,
                priority=round(score(subject), 4),
                sessions_needed=needed,
                sessions_placed=placed,
                sessions_dropped=max(0, needed - placed),
            )
        )

    total_needed = sum(row.sessions_needed for row in rows)
    total_placed = sum(len(day.study_sessions) for day in days)
    return ScheduleSummary(
        max_sessions_per_day=preferences.max_sessions_per_day,
        weekly_capacity=preferences.max_sessions_per_day * len(days),
        total_sessions_needed=total_needed,
        total_sessions_placed=total_placed,
        total_study_minutes=sum(day.total_study_minutes for day in days),
        total_break_minutes=sum(day.total_break_minutes for day in days),
        saturated=any(row.sessions_dropped for row in rows),
        subjects=rows,
    )
