import logging
import random
from typing import Iterable, List, Optional

from ..config import DAY_START_HOUR
from ..models.timetable import Day, Preferences, Session
from .layout import coerce, coerce_subjects, layout_sessions

logger = logging.getLogger(__name__)


def regenerate_day(
    day,
    subjects: Iterable,
    preferences,
    rng: Optional[random.Random] = None,
    day_start_hour: int = DAY_START_HOUR,
) -> List[Session]:
    """Return fresh sessions for ``day`` from a shuffled subject list.

    Unlike :func:`~study_scheduler.scheduler.allocator.generate` this ignores
    priority and weekly hours: each subject gets at most one session, up to the
    daily capacity, in random order.
    """
    day = coerce(Day, day)
    subjects = coerce_subjects(subjects)
    preferences = coerce(Preferences, preferences)
    rng = rng or random.Random()

    shuffled = list(subjects)
    rng.shuffle(shuffled)

    slots = min(preferences.max_sessions_per_day, len(shuffled))
    studies: List[Session] = []
    for i in range(slots):
        subject = shuffled[i % len(shuffled)]
        studies.append(
            Session.study(
                subject_name=subject.name,
                subject_id=subject.id,
                difficulty=subject.difficulty,
                color=subject.color,
                start_time="",
                end_time="",
                duration=preferences.session_duration,
            )
        )

    logger.debug("Regenerated %s with %d study sessions", day.day_name, slots)
    return layout_sessions(studies, preferences, day_start_hour)
