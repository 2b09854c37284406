# This project was developed with assistance from AI tools.
"""Document progress and project status derivation.

Turns a project's documents into per-category completion state, an overall
completion percentage, and a suggested project status. The suggestion is
advisory: it never reads or writes the project's stored status. Callers that
want a single status to display go through ``reconcile_status``.

When several documents share a category, the category keeps the best status
seen (approved > pending review > not submitted / rejected). An approved
category is never downgraded by another document, so the result does not
depend on document order.
"""

import logging
from collections.abc import Iterable
from datetime import datetime

from db.enums import DocumentCategory, DocumentStatus, ProjectStatus, SuggestedStatus

from ..schemas.progress import CategoryProgress, CategoryProgressDetail, ProjectSummary
from .checklist import get_checklist
from .deadline import evaluate_deadline, urgency_level
from .labels import format_document_category

logger = logging.getLogger(__name__)

# Status rank and the progress value it contributes
_STATUS_RANK: dict[DocumentStatus, int] = {
    DocumentStatus.NOT_SUBMITTED: 0,
    DocumentStatus.REJECTED: 0,
    DocumentStatus.PENDING_REVIEW: 1,
    DocumentStatus.APPROVED: 2,
}

_RANK_PROGRESS: dict[int, CategoryProgress] = {
    0: CategoryProgress(complete=False, progress=0),
    1: CategoryProgress(complete=False, progress=50),
    2: CategoryProgress(complete=True, progress=100),
}


class DocumentValidationError(ValueError):
    """Raised when a document carries a value outside the fixed enumerations."""

    def __init__(self, field: str, value: object):
        self.field = field
        self.value = value
        super().__init__(f"Invalid document {field}: {value!r}")


def _coerce_category(value: object) -> DocumentCategory:
    try:
        return DocumentCategory(value)
    except ValueError:
        logger.warning("Rejecting document with unknown category %r", value)
        raise DocumentValidationError("category", value) from None


def _coerce_status(value: object) -> DocumentStatus:
    try:
        return DocumentStatus(value)
    except ValueError:
        logger.warning("Rejecting document with unknown status %r", value)
        raise DocumentValidationError("status", value) from None


def _tracked(categories: Iterable | None) -> list[DocumentCategory]:
    if categories is None:
        categories = DocumentCategory.progress_categories()
    tracked = {_coerce_category(c) for c in categories}
    # Enum declaration order keeps output stable
    return [c for c in DocumentCategory if c in tracked]


def compute_category_progress(
    documents: Iterable,
    categories: Iterable | None = None,
) -> dict[DocumentCategory, CategoryProgress]:
    """Per-category completion state for a set of documents.

    Args:
        documents: Objects exposing ``category`` and ``status``.
        categories: Tracked categories. Defaults to
            ``DocumentCategory.progress_categories()``.

    Returns:
        Mapping of every tracked category to its CategoryProgress.
        Categories with no documents are ``{complete: False, progress: 0}``.

    Raises:
        DocumentValidationError: If a document's category or status is not
            one of the known values.
    """
    tracked = _tracked(categories)
    best_rank: dict[DocumentCategory, int] = {c: 0 for c in tracked}

    for doc in documents:
        category = _coerce_category(doc.category)
        status = _coerce_status(doc.status)
        if category not in best_rank:
            continue
        rank = _STATUS_RANK[status]
        if rank > best_rank[category]:
            best_rank[category] = rank

    return {c: _RANK_PROGRESS[rank].model_copy() for c, rank in best_rank.items()}


def overall_progress(
    documents: Iterable,
    categories: Iterable | None = None,
) -> int:
    """Rounded mean of per-category progress across the tracked set.

    Untouched categories count as 0. An empty category set yields 0.
    """
    progress = compute_category_progress(documents, categories)
    return mean_progress(progress)


def mean_progress(progress: dict[DocumentCategory, CategoryProgress]) -> int:
    """Rounded mean of already computed category progress values."""
    if not progress:
        return 0
    total = sum(p.progress for p in progress.values())
    count = len(progress)
    # Round half up in integer arithmetic
    return (2 * total + count) // (2 * count)


def suggest_project_status(progress: int) -> SuggestedStatus:
    """Suggested pre-submission status for an overall progress value.

    Only covers not-yet-submitted states. ``under_review``, ``approved`` and
    ``rejected`` come from explicit submission and review actions.
    """
    if not 0 <= progress <= 100:
        raise ValueError(f"Progress must be between 0 and 100, got {progress}")
    if progress == 100:
        return SuggestedStatus.READY_FOR_SUBMISSION
    if progress > 0:
        return SuggestedStatus.IN_PROGRESS
    return SuggestedStatus.NOT_STARTED


def can_submit(progress: int) -> bool:
    """Whether the submit-to-authority action should be offered."""
    return progress == 100


def reconcile_status(stored: ProjectStatus, suggested: SuggestedStatus) -> ProjectStatus:
    """Pick the status to display for a project.

    A stored status set by submission or review (under review, approved,
    rejected) always wins. Before submission the document-derived suggestion
    is used.
    """
    stored = ProjectStatus(stored)
    if stored not in ProjectStatus.pre_submission_statuses():
        return stored
    return ProjectStatus(SuggestedStatus(suggested).value)


def summarize_project(
    project,
    documents: Iterable,
    *,
    now: datetime | None = None,
) -> ProjectSummary:
    """Aggregate progress, suggested status and deadline for one project.

    Args:
        project: Object exposing ``id``, ``name``, ``status`` and ``deadline``.
        documents: The project's documents.
        now: Override current time (for testing).
    """
    progress = compute_category_progress(documents)
    overall = mean_progress(progress)
    deadline = evaluate_deadline(project.deadline, now)

    details = [
        CategoryProgressDetail(
            category=category,
            label=format_document_category(category),
            checklist_item_count=len(get_checklist(category).items),
            complete=state.complete,
            progress=state.progress,
        )
        for category, state in progress.items()
    ]

    logger.debug(
        "Project %s: %d%% across %d categories", project.id, overall, len(details)
    )

    return ProjectSummary(
        project_id=project.id,
        project_name=project.name,
        stored_status=ProjectStatus(project.status),
        suggested_status=suggest_project_status(overall),
        overall_progress=overall,
        can_submit=can_submit(overall),
        categories=details,
        deadline=deadline,
        urgency=urgency_level(deadline.days_left),
    )
