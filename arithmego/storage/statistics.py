"""Recorded game sessions and the aggregates computed from them."""

from __future__ import annotations

import json
import re
import uuid
from dataclasses import asdict, dataclass, field, fields
from datetime import datetime, timezone
from typing import Any

from arithmego.storage.paths import atomic_write, statistics_path

_ZERO_TIME = datetime(1, 1, 1, tzinfo=timezone.utc)


@dataclass
class QuestionRecord:
    """One answered or skipped question."""

    question: str = ""
    operation: str = ""
    correct_answer: int = 0
    user_answer: int = 0
    correct: bool = False
    skipped: bool = False
    response_time_ms: int = 0
    points_earned: int = 0


@dataclass
class SessionRecord:
    """One completed game session."""

    id: str = ""
    timestamp: datetime = _ZERO_TIME
    mode: str = ""
    difficulty: str = ""
    duration_seconds: int = 0
    questions_attempted: int = 0
    questions_correct: int = 0
    questions_wrong: int = 0
    questions_skipped: int = 0
    score: int = 0
    best_streak: int = 0
    avg_response_time_ms: int = 0
    questions: list[QuestionRecord] = field(default_factory=list)


@dataclass
class Statistics:
    """Every recorded session."""

    sessions: list[SessionRecord] = field(default_factory=list)


@dataclass
class OperationStats:
    """Accuracy for one operation."""

    correct: int = 0
    total: int = 0
    accuracy: float = 0.0


@dataclass
class Aggregates:
    """Statistics computed across all sessions."""

    total_sessions: int = 0
    total_questions: int = 0
    total_correct: int = 0
    overall_accuracy: float = 0.0
    best_streak_ever: int = 0
    avg_response_time_ms: int = 0
    by_operation: dict[str, OperationStats] = field(default_factory=dict)
    by_mode: dict[str, int] = field(default_factory=dict)


def new_session_record(mode: str, difficulty: str, duration_seconds: int) -> SessionRecord:
    """Return a new record with a fresh ID and the current time.

    Raises ValueError if ``mode`` or ``difficulty`` is empty or the duration is negative.
    """
    if mode == "":
        raise ValueError("mode cannot be empty")
    if difficulty == "":
        raise ValueError("difficulty cannot be empty")
    if duration_seconds < 0:
        raise ValueError("duration cannot be negative")
    return SessionRecord(
        id=str(uuid.uuid4()),
        timestamp=datetime.now().astimezone(),
        mode=mode,
        difficulty=difficulty,
        duration_seconds=duration_seconds,
    )


def _parse_timestamp(text: Any) -> datetime:
    if not isinstance(text, str):
        raise ValueError("timestamp must be a string")
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    text = re.sub(r"\.(\d+)", lambda m: "." + (m.group(1) + "000000")[:6], text, count=1)
    parsed = datetime.fromisoformat(text)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def _fill(cls: type, data: Any, skip: frozenset[str] = frozenset()) -> dict[str, Any]:
    if not isinstance(data, dict):
        raise ValueError(f"{cls.__name__} must be a JSON object")
    values: dict[str, Any] = {}
    for f in fields(cls):
        if f.name in skip or data.get(f.name) is None:
            continue
        value = data[f.name]
        if f.type in ("int", int):
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError(f"field {f.name!r} must be an integer")
        elif f.type in ("str", str):
            if not isinstance(value, str):
                raise ValueError(f"field {f.name!r} must be a string")
        elif f.type in ("bool", bool):
            if not isinstance(value, bool):
                raise ValueError(f"field {f.name!r} must be a boolean")
        values[f.name] = value
    return values


def _question_from_dict(data: Any) -> QuestionRecord:
    return QuestionRecord(**_fill(QuestionRecord, data))


def _session_from_dict(data: Any) -> SessionRecord:
    values = _fill(SessionRecord, data, frozenset({"timestamp", "questions"}))
    if data.get("timestamp") is not None:
        values["timestamp"] = _parse_timestamp(data["timestamp"])
    questions = data.get("questions") or []
    if not isinstance(questions, list):
        raise ValueError("questions must be a list")
    values["questions"] = [_question_from_dict(q) for q in questions]
    return SessionRecord(**values)


def _session_to_dict(record: SessionRecord) -> dict[str, Any]:
    data = asdict(record)
    data["timestamp"] = record.timestamp.isoformat()
    return data


def load() -> Statistics:
    """Read the statistics file; a missing file gives empty statistics.

    Raises ValueError if the file is not valid statistics JSON.
    """
    try:
        raw = statistics_path().read_bytes()
    except FileNotFoundError:
        return Statistics()

    data = json.loads(raw)
    if not isinstance(data, dict):
        raise ValueError("statistics must be a JSON object")
    sessions = data.get("sessions") or []
    if not isinstance(sessions, list):
        raise ValueError("sessions must be a list")
    return Statistics(sessions=[_session_from_dict(s) for s in sessions])


def save(stats: Statistics) -> None:
    """Write the statistics file atomically."""
    payload = {"sessions": [_session_to_dict(s) for s in stats.sessions]}
    data = json.dumps(payload, indent=2, ensure_ascii=False).encode("utf-8")
    atomic_write(statistics_path(), data)


def add_session(record: SessionRecord) -> None:
    """Append ``record`` to the stored statistics and save them."""
    stats = load()
    stats.sessions.append(record)
    save(stats)


def compute_aggregates(stats: Statistics) -> Aggregates:
    """Compute totals, accuracy, best streak and per-operation and per-mode figures."""
    agg = Aggregates()
    total_response_time = 0
    questions_with_time = 0

    for session in stats.sessions:
        agg.total_sessions += 1
        agg.total_questions += session.questions_attempted
        agg.total_correct += session.questions_correct
        agg.best_streak_ever = max(agg.best_streak_ever, session.best_streak)
        agg.by_mode[session.mode] = agg.by_mode.get(session.mode, 0) + 1

        for q in session.questions:
            op_stats = agg.by_operation.setdefault(q.operation, OperationStats())
            if not q.skipped:
                op_stats.total += 1
                if q.correct:
                    op_stats.correct += 1
            if q.response_time_ms > 0:
                total_response_time += q.response_time_ms
                questions_with_time += 1

    if agg.total_questions > 0:
        agg.overall_accuracy = agg.total_correct / agg.total_questions * 100
    if questions_with_time > 0:
        agg.avg_response_time_ms = total_response_time // questions_with_time
    for op_stats in agg.by_operation.values():
        if op_stats.total > 0:
            op_stats.accuracy = op_stats.correct / op_stats.total * 100
    return agg