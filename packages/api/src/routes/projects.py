# This project was developed with assistance from AI tools.
"""Project progress and deadline routes.

Stateless: callers post the project and document snapshot they hold and get
the derived values back.
"""

import logging

from fastapi import APIRouter

from ..schemas.deadline import DeadlineEvaluateRequest, DeadlineEvaluateResponse
from ..schemas.progress import (
    DeadlinesRequest,
    DeadlinesResponse,
    ProgressRequest,
    ProgressResponse,
    ProjectSummary,
    ProjectSummaryRequest,
)
from ..services.deadline import evaluate_deadline, upcoming_deadlines, urgency_level
from ..services.progress import (
    can_submit,
    compute_category_progress,
    mean_progress,
    suggest_project_status,
    summarize_project,
)

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/projects/progress", response_model=ProgressResponse)
async def project_progress(body: ProgressRequest) -> ProgressResponse:
    """Per-category and overall progress for a document set."""
    categories = compute_category_progress(body.documents, body.categories)
    overall = mean_progress(categories)
    return ProgressResponse(
        categories=categories,
        overall_progress=overall,
        suggested_status=suggest_project_status(overall),
        can_submit=can_submit(overall),
    )


@router.post("/projects/summary", response_model=ProjectSummary)
async def project_summary(body: ProjectSummaryRequest) -> ProjectSummary:
    """Progress, suggested status and deadline for a single project."""
    return summarize_project(body.project, body.documents, now=body.now)


@router.post("/projects/deadlines", response_model=DeadlinesResponse)
async def project_deadlines(body: DeadlinesRequest) -> DeadlinesResponse:
    """Dashboard deadline list, most pressing first."""
    entries = upcoming_deadlines(body.projects, now=body.now, limit=body.limit)
    return DeadlinesResponse(data=entries, count=len(entries))


@router.post("/deadlines/evaluate", response_model=DeadlineEvaluateResponse)
async def deadline_evaluate(body: DeadlineEvaluateRequest) -> DeadlineEvaluateResponse:
    evaluation = evaluate_deadline(body.deadline, body.now)
    return DeadlineEvaluateResponse(
        **evaluation.model_dump(),
        urgency=urgency_level(evaluation.days_left),
    )
