# This project was developed with assistance from AI tools.
"""Document category catalog routes."""

from db.enums import DocumentCategory
from fastapi import APIRouter

from ..schemas.checklist import CategoryChecklist, CategoryInfo
from ..services.checklist import get_checklist
from ..services.labels import format_document_category, get_category_description

router = APIRouter()


@router.get("", response_model=list[CategoryInfo])
async def list_categories() -> list[CategoryInfo]:
    """Every document category with its label, description and checklist."""
    return [
        CategoryInfo(
            category=category.value,
            label=format_document_category(category),
            description=get_category_description(category),
            checklist=get_checklist(category),
        )
        for category in DocumentCategory
    ]


@router.get("/{category}/checklist", response_model=CategoryChecklist)
async def category_checklist(category: str) -> CategoryChecklist:
    """Checklist for a category. Unknown keys get the generic checklist."""
    return get_checklist(category)
