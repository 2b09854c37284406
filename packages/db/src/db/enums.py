# This project was developed with assistance from AI tools.
"""
Domain enums for the permit document lifecycle.

Shared domain types used by the progress services and the Pydantic
schemas (api package).
"""

import enum


class DocumentCategory(str, enum.Enum):
    SITE_PLAN = "site_plan"
    FACILITY_PLAN = "facility_plan"
    EGRESS_PLAN = "egress_plan"
    STRUCTURAL_PLANS = "structural_plans"
    COMMODITIES = "commodities"
    FIRE_PROTECTION = "fire_protection"
    SPECIAL_INSPECTION = "special_inspection"
    COVER_LETTER = "cover_letter"

    @classmethod
    def progress_categories(cls) -> frozenset["DocumentCategory"]:
        """Categories that count toward overall project progress.

        The cover letter is generated for the submission package rather than
        uploaded and reviewed, so it is not tracked.
        """
        return frozenset(c for c in cls if c is not cls.COVER_LETTER)


class DocumentStatus(str, enum.Enum):
    NOT_SUBMITTED = "not_submitted"
    PENDING_REVIEW = "pending_review"
    APPROVED = "approved"
    REJECTED = "rejected"


class ProjectStatus(str, enum.Enum):
    """Authoritative project status, changed only by explicit actions."""

    NOT_STARTED = "not_started"
    IN_PROGRESS = "in_progress"
    READY_FOR_SUBMISSION = "ready_for_submission"
    UNDER_REVIEW = "under_review"
    APPROVED = "approved"
    REJECTED = "rejected"

    @classmethod
    def pre_submission_statuses(cls) -> frozenset["ProjectStatus"]:
        """Statuses a project can hold before it is submitted to the authority."""
        return frozenset({cls.NOT_STARTED, cls.IN_PROGRESS, cls.READY_FOR_SUBMISSION})


class SuggestedStatus(str, enum.Enum):
    """Status derived from document progress. Advisory only."""

    NOT_STARTED = "not_started"
    IN_PROGRESS = "in_progress"
    READY_FOR_SUBMISSION = "ready_for_submission"
