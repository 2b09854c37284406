# This project was developed with assistance from AI tools.
__version__ = "0.1.0"

from .enums import (
    DocumentCategory,
    DocumentStatus,
    ProjectStatus,
    SuggestedStatus,
)

__all__ = [
    "__version__",
    # Enums
    "DocumentCategory",
    "DocumentStatus",
    "ProjectStatus",
    "SuggestedStatus",
]
