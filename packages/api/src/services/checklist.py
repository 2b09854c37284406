# This project was developed with assistance from AI tools.
"""Category checklist registry.

Static catalog of the review checklist for each document category. Lookup is
total: categories missing from the catalog get a generated generic checklist.
"""

import re
from types import MappingProxyType

from db.enums import DocumentCategory

from ..schemas.checklist import CategoryChecklist, ChecklistItem


def _checklist(title: str, items: list[tuple[str, str]]) -> CategoryChecklist:
    return CategoryChecklist(
        title=title,
        items=[ChecklistItem(id=item_id, label=label) for item_id, label in items],
    )


CATEGORY_CHECKLISTS: MappingProxyType[DocumentCategory, CategoryChecklist] = MappingProxyType(
    {
        DocumentCategory.SITE_PLAN: _checklist(
            "Site Plan Checklist",
            [
                ("site_streets", "Streets and overall building outline"),
                ("site_hydrants", "Fire hydrant locations"),
                ("site_access", "Fire department access roadways"),
                ("site_key_plan", "Key plan showing project area"),
                ("site_address", "Correct building address and suite/subaddress"),
            ],
        ),
        DocumentCategory.FACILITY_PLAN: _checklist(
            "Building/Floor Plan Checklist",
            [
                ("facility_racking", "Proposed racking layout and any existing racks"),
                ("facility_doors", "Fire department access doors"),
                ("facility_valves", "Fire department hose valves"),
                ("facility_pump", "Fire pump / riser room"),
                ("facility_water", "Valves controlling sprinkler water supply"),
                ("facility_smoke", "Smoke removal and curtain board systems"),
                ("facility_extinguishers", "Portable fire extinguishers"),
            ],
        ),
        DocumentCategory.EGRESS_PLAN: _checklist(
            "Egress Plan Checklist",
            [
                ("egress_aisles", "Aisle layout with widths shown"),
                ("egress_exits", "Exit access doors, exit doors, and exit discharge points"),
                (
                    "egress_deadend",
                    "Dead-end aisles ≤ 20 ft in Group M, ≤ 50 ft in other occupancies",
                ),
                ("egress_signs", "Exit sign locations (IBC 1013)"),
                (
                    "egress_lighting",
                    "Emergency egress lighting (avg 1 fc / min 0.1 fc at floor)",
                ),
            ],
        ),
        DocumentCategory.STRUCTURAL_PLANS: _checklist(
            "Racking/Structural Plan Checklist",
            [
                ("structural_aisles", "Aisle widths dimensioned"),
                ("structural_types", "Rack types and heights identified"),
                ("structural_volume", "Maximum pile volume for each storage array"),
                ("structural_shelves", "Shelf type (solid, slatted, wire grid, or open)"),
                ("structural_flue", "Transverse and longitudinal flue space dimensions"),
                ("structural_tiers", "Number of tiers"),
                (
                    "structural_height",
                    "Floor-to-top-shelf height and floor-to-top-of-storage height",
                ),
                (
                    "structural_clearances",
                    "Clearances to sprinkler deflectors, bottom of joists, and roof deck",
                ),
                ("structural_calcs", "Signed and sealed by a licensed structural engineer"),
                ("structural_seismic", "Seismic design per ASCE 7 § 15.5.3"),
                ("structural_anchors", "Load combinations and anchor design included"),
                (
                    "structural_inspection",
                    '"Storage Racks (IBC 1705.12.7)" box checked in inspection agreement',
                ),
            ],
        ),
        DocumentCategory.COMMODITIES: _checklist(
            "Commodity Description Checklist",
            [
                ("commodity_class", "Commodity class per IFC Table 3203.8"),
                (
                    "commodity_packaging",
                    "Packaging method (loose, boxed, shrink-wrapped, bins, banded, etc.)",
                ),
            ],
        ),
        DocumentCategory.FIRE_PROTECTION: _checklist(
            "Fire Protection Checklist",
            [
                ("fire_system", "Sprinkler system type and NFPA standard"),
                ("fire_density", "Design density / curve"),
                ("fire_head", "Sprinkler head type (ESFR, CMSA, etc.)"),
                ("fire_detection", "Detection system description"),
                ("fire_smoke", "Smoke removal / curtain board specifications"),
                ("fire_hydraulic", "Photo of hydraulic calculation placard"),
                ("fire_compliance", "Conformance with IFC §§ 3206–3209"),
                (
                    "fire_hose",
                    "1½ in. hose outlet at each fire department access door "
                    "(NFPA 13 § 8.17.5)",
                ),
            ],
        ),
        DocumentCategory.SPECIAL_INSPECTION: _checklist(
            "Special Inspection Checklist",
            [
                ("special_agency", "Inspection agency named"),
                ("special_signatures", "Required signatures and stamp complete"),
            ],
        ),
        DocumentCategory.COVER_LETTER: _checklist(
            "Cover Letter Checklist",
            [
                ("cover_header", "Proper header and contact information"),
                ("cover_project", "Project details correctly stated"),
                ("cover_documents", "Lists all documents included in submission"),
                ("cover_signature", "Includes signature block"),
                ("cover_valuation", "Valuation includes rack materials (new or used) + labor"),
                ("cover_permits", "Separate electrical permit listed if wiring needed"),
            ],
        ),
    }
)

_WORD_START = re.compile(r"\b\w")

_GENERIC_ITEMS: tuple[tuple[str, str], ...] = (
    ("general_complete", "Document is complete"),
    ("general_legible", "Document is legible"),
    ("general_accurate", "Information appears accurate"),
)


def _title_words(key: str) -> str:
    """``fire_protection`` -> ``Fire Protection``."""
    return _WORD_START.sub(lambda m: m.group().upper(), key.replace("_", " "))


def get_checklist(category: DocumentCategory | str) -> CategoryChecklist:
    """Return the checklist for a category. Never raises.

    Unknown categories get a generic three-item checklist titled after the
    category key. The result is a copy; callers may toggle ``checked``
    without touching the catalog.
    """
    key = category.value if isinstance(category, DocumentCategory) else str(category)
    try:
        known = CATEGORY_CHECKLISTS[DocumentCategory(key)]
    except ValueError:
        return _checklist(f"{_title_words(key)} Checklist", list(_GENERIC_ITEMS))
    return known.model_copy(deep=True)


def list_checklists() -> list[CategoryChecklist]:
    """All catalog checklists in category order."""
    return [get_checklist(category) for category in DocumentCategory]
