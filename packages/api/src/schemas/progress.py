# This project was developed with assistance from AI tools.
"""Document progress request/response schemas."""

from datetime import datetime
from typing import Literal

from db.enums import DocumentCategory, DocumentStatus, ProjectStatus, SuggestedStatus
from pydantic import BaseModel, Field

from .deadline import DeadlineEvaluation, UpcomingDeadline, UrgencyLevel


class ProjectDocument(BaseModel):
    """Document record as supplied by the storage service."""

    id: int | str
    category: DocumentCategory
    status: DocumentStatus = DocumentStatus.NOT_SUBMITTED
    file_name: str | None = None


class ProjectRecord(BaseModel):
    """Project record as supplied by the storage service."""

    id: int | str
    name: str
    status: ProjectStatus = ProjectStatus.NOT_STARTED
    deadline: datetime | None = None


class CategoryProgress(BaseModel):
    """Completion state of one tracked category."""

    complete: bool = False
    progress: Literal[0, 50, 100] = 0


class CategoryProgressDetail(CategoryProgress):
    """Category progress with display metadata."""

    category: DocumentCategory
    label: str
    checklist_item_count: int


class ProgressRequest(BaseModel):
    documents: list[ProjectDocument] = Field(default_factory=list)
    categories: list[DocumentCategory] | None = Field(
        default=None,
        description="Tracked categories. Defaults to every category except the cover letter.",
    )


class ProgressResponse(BaseModel):
    categories: dict[DocumentCategory, CategoryProgress]
    overall_progress: int
    suggested_status: SuggestedStatus
    can_submit: bool


class ProjectSummaryRequest(BaseModel):
    project: ProjectRecord
    documents: list[ProjectDocument] = Field(default_factory=list)
    now: datetime | None = None


class ProjectSummary(BaseModel):
    """Aggregated progress and deadline summary for a project.

    ``stored_status`` is the authoritative status; ``suggested_status`` is
    derived from documents. Callers reconcile the two explicitly.
    """

    project_id: int | str
    project_name: str
    stored_status: ProjectStatus
    suggested_status: SuggestedStatus
    overall_progress: int
    can_submit: bool
    categories: list[CategoryProgressDetail]
    deadline: DeadlineEvaluation
    urgency: UrgencyLevel


class DeadlinesRequest(BaseModel):
    projects: list[ProjectRecord] = Field(default_factory=list)
    limit: int | None = Field(default=None, ge=1)
    now: datetime | None = None


class DeadlinesResponse(BaseModel):
    data: list[UpcomingDeadline]
    count: int
