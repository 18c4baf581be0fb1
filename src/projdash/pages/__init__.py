"""Dashboard pages.

IndexPage -- Categories in sorted order, each with its project links
assemble_index -- Build an IndexPage from a Grouping and a link function
render_index -- Render an IndexPage to an HTML Response
"""

from projdash.pages.index import (
    CategorySection,
    IndexPage,
    ProjectLink,
    assemble_index,
    render_index,
)

__all__ = [
    "CategorySection",
    "IndexPage",
    "ProjectLink",
    "assemble_index",
    "render_index",
]
