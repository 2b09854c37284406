# This project was developed with assistance from AI tools.
"""Category checklist schemas."""

from pydantic import BaseModel


class ChecklistItem(BaseModel):
    """A single sub-requirement a reviewer verifies within a category."""

    id: str
    label: str
    checked: bool = False


class CategoryChecklist(BaseModel):
    """Ordered checklist for one document category."""

    title: str
    items: list[ChecklistItem]


class CategoryInfo(BaseModel):
    """Catalog entry describing a document category."""

    category: str
    label: str
    description: str
    checklist: CategoryChecklist
