# This project was developed with assistance from AI tools.
"""Human-readable labels and descriptions for categories and statuses."""

from db.enums import DocumentCategory, DocumentStatus, ProjectStatus

_UNKNOWN_STATUS = "Unknown Status"
_DEFAULT_CATEGORY_DESCRIPTION = "Document for High-Piled Storage Permit"

CATEGORY_DESCRIPTIONS: dict[DocumentCategory, str] = {
    DocumentCategory.SITE_PLAN: (
        "Dimensioned site plan showing streets, building location, fire hydrants, "
        "and fire department access roadways."
    ),
    DocumentCategory.FACILITY_PLAN: (
        "Dimensioned floor plan showing proposed and existing racking, "
        "fire department access doors, etc."
    ),
    DocumentCategory.EGRESS_PLAN: (
        "Floor plan showing means of egress components "
        "(aisles, exit access doors, exit doors, etc)."
    ),
    DocumentCategory.STRUCTURAL_PLANS: (
        "Racking plan, shelf dimensions, structural calculations stamped by a "
        "licensed engineer."
    ),
    DocumentCategory.COMMODITIES: "Description of commodities stored and their placement method.",
    DocumentCategory.FIRE_PROTECTION: (
        "Information about existing fire protection systems including type of "
        "sprinkler system."
    ),
    DocumentCategory.SPECIAL_INSPECTION: (
        "Special Inspection Agreement with 'Storage Racks' marked as requiring inspection."
    ),
    DocumentCategory.COVER_LETTER: (
        "Auto-generated comprehensive overview for municipal submission."
    ),
}

DOCUMENT_STATUS_LABELS: dict[DocumentStatus, str] = {
    DocumentStatus.NOT_SUBMITTED: "Not Submitted",
    DocumentStatus.PENDING_REVIEW: "In Review",
    DocumentStatus.APPROVED: "Approved",
    DocumentStatus.REJECTED: "Rejected",
}

PROJECT_STATUS_LABELS: dict[ProjectStatus, str] = {
    ProjectStatus.NOT_STARTED: "Not Started",
    ProjectStatus.IN_PROGRESS: "In Progress",
    ProjectStatus.READY_FOR_SUBMISSION: "Ready for Submission",
    ProjectStatus.UNDER_REVIEW: "Under Review",
    ProjectStatus.APPROVED: "Approved",
    ProjectStatus.REJECTED: "Rejected",
}


def _lookup(enum_cls, mapping: dict, value, default: str) -> str:
    try:
        return mapping.get(enum_cls(value), default)
    except ValueError:
        return default


def format_document_category(category: DocumentCategory | str) -> str:
    """``structural_plans`` -> ``Structural Plans``."""
    key = category.value if isinstance(category, DocumentCategory) else str(category)
    return " ".join(word[:1].upper() + word[1:] for word in key.split("_"))


def get_category_description(category: DocumentCategory | str) -> str:
    return _lookup(DocumentCategory, CATEGORY_DESCRIPTIONS, category, _DEFAULT_CATEGORY_DESCRIPTION)


def get_document_status_label(status: DocumentStatus | str) -> str:
    return _lookup(DocumentStatus, DOCUMENT_STATUS_LABELS, status, _UNKNOWN_STATUS)


def get_project_status_label(status: ProjectStatus | str) -> str:
    return _lookup(ProjectStatus, PROJECT_STATUS_LABELS, status, _UNKNOWN_STATUS)
