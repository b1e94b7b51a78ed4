from .allocator import SessionToken, build_session_pool, generate, order_pool, summarize_schedule
from .layout import layout_sessions, rebuild_day
from .priority import difficulty_weight, score, sessions_needed
from .regenerator import regenerate_day
from .time_utils import add_minutes, format_time, parse_time

__all__ = [
    "SessionToken",
    "add_minutes",
    "build_session_pool",
    "difficulty_weight",
    "format_time",
    "generate",
    "layout_sessions",
    "order_pool",
    "parse_time",
    "rebuild_day",
    "regenerate_day",
    "score",
    "sessions_needed",
    "summarize_schedule",
]
