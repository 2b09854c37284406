# This project was developed with assistance from AI tools.
"""Deadline evaluation schemas."""

import enum
from datetime import datetime

from pydantic import BaseModel


class UrgencyLevel(str, enum.Enum):
    HIGH = "high"
    MEDIUM = "medium"
    NORMAL = "normal"


class DeadlineEvaluation(BaseModel):
    """Human-facing deadline classification."""

    text: str
    is_urgent: bool
    days_left: int | None = None


class DeadlineEvaluateRequest(BaseModel):
    deadline: datetime | None = None
    now: datetime | None = None


class DeadlineEvaluateResponse(DeadlineEvaluation):
    urgency: UrgencyLevel


class UpcomingDeadline(BaseModel):
    """A project deadline entry for the dashboard list."""

    project_id: int | str
    project_name: str
    deadline: datetime
    evaluation: DeadlineEvaluation
    urgency: UrgencyLevel
