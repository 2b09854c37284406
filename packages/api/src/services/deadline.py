# This project was developed with assistance from AI tools.
"""Deadline urgency evaluation.

Maps a project deadline and the current time to the human-facing text,
urgency flag and days-left count shown on project cards, and to the
three-tier urgency level used to style deadline displays.
"""

import logging
from collections.abc import Iterable
from datetime import UTC, date, datetime

from ..schemas.deadline import DeadlineEvaluation, UpcomingDeadline, UrgencyLevel
from .dates import days_remaining, ensure_tz, format_date, parse_timestamp

logger = logging.getLogger(__name__)

# Deadlines this many days out (or fewer) are flagged urgent
NEAR_TERM_DAYS = 7

# Days-left thresholds for urgency tiers
HIGH_URGENCY_DAYS = 3
MEDIUM_URGENCY_DAYS = 7

_NO_DEADLINE = DeadlineEvaluation(text="No deadline", is_urgent=False, days_left=None)


def evaluate_deadline(
    deadline: datetime | date | str | None,
    now: datetime | None = None,
) -> DeadlineEvaluation:
    """Classify a deadline relative to ``now``.

    Args:
        deadline: Deadline as a datetime, date, ISO-8601 string, or None.
        now: Override current time (for testing).

    Returns:
        DeadlineEvaluation. ``days_left`` is None only when there is no
        deadline.

    Raises:
        DeadlineValidationError: If ``deadline`` is a string that is not
            ISO-8601.
    """
    deadline_at = parse_timestamp(deadline)
    if deadline_at is None:
        return _NO_DEADLINE.model_copy()

    now = ensure_tz(now) if now is not None else datetime.now(UTC)
    days_left = days_remaining(deadline_at, now)

    if deadline_at < now:
        return DeadlineEvaluation(
            text=f"Overdue by {abs(days_left)} days",
            is_urgent=True,
            days_left=days_left,
        )

    if days_left <= NEAR_TERM_DAYS:
        if days_left == 0:
            text = "Due today"
        elif days_left == 1:
            text = "Due tomorrow"
        else:
            text = f"{days_left} days left"
        return DeadlineEvaluation(text=text, is_urgent=True, days_left=days_left)

    return DeadlineEvaluation(
        text=f"{format_date(deadline_at)} ({days_left} days)",
        is_urgent=False,
        days_left=days_left,
    )


def urgency_level(days_left: int | None) -> UrgencyLevel:
    """Display tier for a days-left count.

    Overdue deadlines have ``days_left <= 0`` and always land in the highest
    tier.
    """
    if days_left is None:
        return UrgencyLevel.NORMAL
    if days_left <= HIGH_URGENCY_DAYS:
        return UrgencyLevel.HIGH
    if days_left <= MEDIUM_URGENCY_DAYS:
        return UrgencyLevel.MEDIUM
    return UrgencyLevel.NORMAL


def upcoming_deadlines(
    projects: Iterable,
    *,
    now: datetime | None = None,
    limit: int | None = None,
) -> list[UpcomingDeadline]:
    """Build the dashboard deadline list.

    Projects without a deadline are skipped. Entries are ordered by days
    left, most overdue first.

    Args:
        projects: Objects exposing ``id``, ``name`` and ``deadline``.
        now: Override current time (for testing).
        limit: Maximum number of entries to return.
    """
    now = ensure_tz(now) if now is not None else datetime.now(UTC)

    entries: list[UpcomingDeadline] = []
    for project in projects:
        deadline_at = parse_timestamp(project.deadline)
        if deadline_at is None:
            continue
        evaluation = evaluate_deadline(deadline_at, now)
        entries.append(
            UpcomingDeadline(
                project_id=project.id,
                project_name=project.name,
                deadline=deadline_at,
                evaluation=evaluation,
                urgency=urgency_level(evaluation.days_left),
            )
        )

    entries.sort(key=lambda e: (e.evaluation.days_left, e.deadline))
    if limit is not None:
        entries = entries[:limit]

    logger.debug("Built %d upcoming deadline(s)", len(entries))
    return entries
