import math
from typing import Any

from ..config import DIFFICULTY_WEIGHTS


def difficulty_weight(difficulty: Any) -> float:
    """Weight of a difficulty label; unknown labels count as easy."""
    return DIFFICULTY_WEIGHTS.get(difficulty, 1.0)


def score(subject) -> float:
    """Scheduling priority of a subject, higher is placed first.

    Combines difficulty, exam urgency and requested weekly load. The load term
    saturates at 20 weekly hours so very large subjects stop dominating.
    """
    exam_priority = subject.exam_priority or 0
    exam_weight = 1 + 0.2 * exam_priority
    hours_weight = min(subject.weekly_hours / 10, 2)
    return difficulty_weight(subject.difficulty) * exam_weight * hours_weight


def sessions_needed(subject, session_duration: int) -> int:
    """Number of study sessions covering the subject's weekly hours, rounded up."""
    if session_duration <= 0 or subject.weekly_hours <= 0:
        return 0
    weekly_minutes = round(subject.weekly_hours * 60, 6)
    return math.ceil(weekly_minutes / session_duration)
