from __future__ import annotations

import logging
import random

from study_scheduler.models.timetable import Day, Preferences, Session, Subject
from study_scheduler.scheduler import (
    build_session_pool,
    generate,
    order_pool,
    rebuild_day,
    summarize_schedule,
)


def _study(name: str, difficulty: str, subject_id: str | None = None) -> Session:
    return Session.study(
        subject_name=name,
        subject_id=subject_id,
        difficulty=difficulty,
        color="#000000",
        start_time="3:00 PM",
        end_time="3:25 PM",
        duration=25,
    )


def test_single_subject_spreads_over_least_loaded_days() -> None:
    subjects = [Subject(id="m", name="Math", weekly_hours=5, difficulty="hard", exam_priority=5)]
    prefs = Preferences(daily_hours=4, session_duration=25, break_duration=5)

    days = generate(subjects, prefs, rng=random.Random(1))

    assert [day.day_of_week for day in days] == list(range(7))
    assert [day.day_name for day in days][:2] == ["Monday", "Tuesday"]
    # 12 sessions: one per day, then the remaining five from Monday on
    assert [len(day.study_sessions) for day in days] == [2, 2, 2, 2, 2, 1, 1]

    monday = days[0]
    assert [(s.type, s.start_time, s.end_time) for s in monday.sessions] == [
        ("study", "8:00 AM", "8:25 AM"),
        ("break", "8:25 AM", "8:30 AM"),
        ("study", "8:30 AM", "8:55 AM"),
    ]
    assert monday.total_study_minutes == 50
    assert monday.total_break_minutes == 5
    assert days[6].sessions[-1].type == "study"
    assert days[6].total_break_minutes == 0


def test_study_sessions_carry_subject_fields() -> None:
    subjects = [Subject(id="b", name="Biology", weekly_hours=1, difficulty="easy", color="#10B981")]
    days = generate(subjects, Preferences(daily_hours=2, session_duration=60), rng=random.Random(0))

    study = days[0].sessions[0]
    assert study.subject == "Biology"
    assert study.subject_id == "b"
    assert study.color == "#10B981"
    assert study.duration == 60
    assert study.completed is False


def test_pool_is_priority_ordered_after_shuffle() -> None:
    subjects = [
        Subject(name="Easy", weekly_hours=2, difficulty="easy"),
        Subject(name="Hard", weekly_hours=2, difficulty="hard", exam_priority=3),
        Subject(name="Mid", weekly_hours=2, difficulty="medium"),
    ]
    pool = build_session_pool(subjects, 60)
    assert len(pool) == 6

    ordered = order_pool(pool, random.Random(7))
    priorities = [token.priority for token in ordered]
    assert priorities == sorted(priorities, reverse=True)
    assert [token.subject for token in ordered] == ["Hard", "Hard", "Mid", "Mid", "Easy", "Easy"]


def test_equal_priority_order_varies_between_shuffles() -> None:
    subjects = [
        Subject(name="A", weekly_hours=5, difficulty="medium"),
        Subject(name="B", weekly_hours=5, difficulty="medium"),
    ]
    pool = build_session_pool(subjects, 25)
    orders = {tuple(t.subject for t in order_pool(pool, random.Random(seed))) for seed in range(20)}
    assert len(orders) > 1


def test_same_seed_same_layout() -> None:
    subjects = [
        Subject(id="1", name="Math", weekly_hours=6, difficulty="hard"),
        Subject(id="2", name="Physics", weekly_hours=6, difficulty="hard"),
        Subject(id="3", name="Art", weekly_hours=3, difficulty="easy"),
    ]
    prefs = Preferences(daily_hours=2, session_duration=45, break_duration=10)

    first = [day.model_dump() for day in generate(subjects, prefs, rng=random.Random(42))]
    second = [day.model_dump() for day in generate(subjects, prefs, rng=random.Random(42))]
    assert first == second


def test_hard_subjects_are_scheduled_earlier_in_the_day() -> None:
    subjects = [
        Subject(name="Easy", weekly_hours=7, difficulty="easy", exam_priority=10),
        Subject(name="Hard", weekly_hours=7, difficulty="hard"),
        Subject(name="Mid", weekly_hours=7, difficulty="medium"),
    ]
    days = generate(subjects, Preferences(daily_hours=4, session_duration=60), rng=random.Random(3))

    weights = {"easy": 1, "medium": 2, "hard": 3}
    for day in days:
        order = [weights[s.difficulty] for s in day.study_sessions]
        assert order == sorted(order, reverse=True)


def test_plain_dict_inputs_are_accepted() -> None:
    days = generate(
        [{"name": "Math", "weekly_hours": 2, "difficulty": "hard"}],
        {"daily_hours": 1, "session_duration": 60, "break_duration": 5},
        rng=random.Random(0),
    )
    assert sum(len(day.study_sessions) for day in days) == 2


def test_empty_subjects_give_seven_empty_days() -> None:
    days = generate([], Preferences())
    assert len(days) == 7
    assert all(day.sessions == [] for day in days)
    assert all(day.total_study_minutes == 0 and day.total_break_minutes == 0 for day in days)


def test_zero_capacity_places_nothing_and_warns(caplog) -> None:
    subjects = [Subject(name="Math", weekly_hours=5, difficulty="hard")]
    prefs = Preferences(daily_hours=1, session_duration=90, break_duration=5)

    with caplog.at_level(logging.WARNING, logger="study_scheduler.scheduler.allocator"):
        days = generate(subjects, prefs, rng=random.Random(0))

    assert all(day.sessions == [] for day in days)
    assert "no study sessions fit" in caplog.text


def test_saturation_drops_lower_priority_tokens() -> None:
    subjects = [
        Subject(id="low", name="Low", weekly_hours=5, difficulty="easy"),
        Subject(id="high", name="High", weekly_hours=5, difficulty="hard", exam_priority=10),
    ]
    prefs = Preferences(daily_hours=1, session_duration=60, break_duration=5)

    days = generate(subjects, prefs, rng=random.Random(11))
    summary = summarize_schedule(days, subjects, prefs)

    assert summary.weekly_capacity == 7
    assert summary.total_sessions_needed == 10
    assert summary.total_sessions_placed == 7
    assert summary.saturated is True
    by_id = {row.subject_id: row for row in summary.subjects}
    assert by_id["high"].sessions_placed == 5
    assert by_id["low"].sessions_placed == 2
    assert by_id["low"].sessions_dropped == 3
    assert [row.subject_id for row in summary.subjects] == ["high", "low"]


def test_summary_without_shortfall() -> None:
    subjects = [Subject(name="Math", weekly_hours=5, difficulty="hard", exam_priority=5)]
    prefs = Preferences(daily_hours=4, session_duration=25, break_duration=5)

    days = generate(subjects, prefs, rng=random.Random(5))
    summary = summarize_schedule(days, subjects, prefs)

    assert summary.saturated is False
    assert summary.subjects[0].sessions_needed == 12
    assert summary.subjects[0].sessions_placed == 12
    assert summary.subjects[0].priority == 2.0
    assert summary.total_study_minutes == 300
    assert summary.total_break_minutes == 5 * 5


def test_rebuild_day_orders_by_difficulty_and_retimes() -> None:
    provisional = Day(
        day_of_week=2,
        day_name="Wednesday",
        sessions=[
            _study("Art", "easy"),
            Session.rest(start_time="3:25 PM", end_time="3:30 PM", duration=5),
            _study("Math", "hard", "m"),
            _study("Chem", "medium"),
            _study("Physics", "hard", "p"),
            Session.rest(start_time="4:00 PM", end_time="4:05 PM", duration=5),
        ],
    )
    prefs = Preferences(daily_hours=4, session_duration=25, break_duration=10)

    rebuilt = rebuild_day(provisional, prefs)

    assert [(s.type, s.subject) for s in rebuilt.sessions] == [
        ("study", "Math"),
        ("break", "Break"),
        ("study", "Physics"),
        ("break", "Break"),
        ("study", "Chem"),
        ("break", "Break"),
        ("study", "Art"),
    ]
    assert rebuilt.sessions[0].start_time == "8:00 AM"
    assert rebuilt.sessions[-1].end_time == "10:10 AM"
    assert rebuilt.total_study_minutes == 100
    assert rebuilt.total_break_minutes == 30
    # input untouched
    assert provisional.sessions[0].start_time == "3:00 PM"
