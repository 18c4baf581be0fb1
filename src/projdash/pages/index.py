"""Index page assembly.

Turns a Grouping into plain data for the template: models in sorted
order, projects in scan order, one href per project. Links come from the
resolver's link scheme so every href resolves back to its directory.
"""

from collections.abc import Callable
from dataclasses import dataclass

from kida import Environment

from projdash.catalog.mapping import Grouping
from projdash.catalog.rules import format_category
from projdash.http.response import Response
from projdash.templating.integration import INDEX_TEMPLATE, render_template

type LinkFor = Callable[[Grouping, int, int], str]


@dataclass(frozen=True, slots=True)
class ProjectLink:
    name: str
    position: int
    href: str


@dataclass(frozen=True, slots=True)
class CategorySection:
    key: str
    label: str
    position: int
    projects: tuple[ProjectLink, ...]


@dataclass(frozen=True, slots=True)
class IndexPage:
    title: str
    sections: tuple[CategorySection, ...]

    @property
    def is_empty(self) -> bool:
        return not self.sections

    @property
    def hrefs(self) -> tuple[str, ...]:
        """Every generated link, in page order."""
        return tuple(p.href for s in self.sections for p in s.projects)


def assemble_index(grouping: Grouping, link_for: LinkFor, *, title: str = "") -> IndexPage:
    """Build the page data for *grouping*.

    Args:
        grouping: The frozen project grouping.
        link_for: ``(grouping, model_idx, proj_idx) -> href``, usually
            ``RouteResolver.link``.
        title: Page heading and ``<title>``.
    """
    sections = tuple(
        CategorySection(
            key=str(key),
            label=format_category(key),
            position=model_idx,
            projects=tuple(
                ProjectLink(name, proj_idx, link_for(grouping, model_idx, proj_idx))
                for proj_idx, name in enumerate(grouping.projects(key))
            ),
        )
        for model_idx, key in enumerate(grouping.categories)
    )
    return IndexPage(title=title, sections=sections)


def render_index(env: Environment, page: IndexPage) -> Response:
    """Render *page* with the bundled index template."""
    body = render_template(env, INDEX_TEMPLATE, {"page": page})
    return Response(body=body, content_type="text/html; charset=utf-8")
