"""Project catalog — classify directories and group them by model.

Rules:
    Category -- Known model keys, in classification priority order
    classify -- Directory name -> Category | None (first matching rule wins)
    format_category / parse_label -- Key <-> display label

Grouping:
    Grouping -- Frozen model -> projects mapping plus sorted model index
    build_grouping -- Classify a list of names into a Grouping
    scan_directories -- Directory entry names at a scan root
    ProjectCatalog -- Build-once, thread-safe holder for a root's Grouping
"""

from projdash.catalog.mapping import (
    Grouping,
    ProjectCatalog,
    build_grouping,
    scan_directories,
)
from projdash.catalog.rules import (
    DEFAULT_RULES,
    Category,
    Rule,
    classify,
    format_category,
    parse_label,
)

__all__ = [
    "DEFAULT_RULES",
    "Category",
    "Grouping",
    "ProjectCatalog",
    "Rule",
    "build_grouping",
    "classify",
    "format_category",
    "parse_label",
    "scan_directories",
]
