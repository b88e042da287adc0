"""Controller layer: mediates between UI widgets and the user store.

This package contains:
- directory: DirectoryController, the UI-independent command handlers
- Event handler mixins that route Textual events to the controller
"""

from controller.directory import DirectoryController, DirectorySurface
from controller.form import FormEventsMixin
from controller.pagination import PaginationEventsMixin
from controller.search import SearchEventsMixin
from controller.table import RowActionEventsMixin, SortEventsMixin

__all__ = [
    # Commands
    "DirectoryController",
    "DirectorySurface",
    # Event mixins
    "FormEventsMixin",
    "PaginationEventsMixin",
    "RowActionEventsMixin",
    "SearchEventsMixin",
    "SortEventsMixin",
]
