"""Tests for projdash.pages.index — page assembly and rendering."""

from projdash.catalog.mapping import Grouping, build_grouping
from projdash.config import DashboardConfig
from projdash.pages.index import assemble_index, render_index
from projdash.routing import resolver_for
from projdash.templating.integration import create_environment


class TestAssembleIndex:
    def test_sections_in_sorted_order(self, grouping: Grouping) -> None:
        page = assemble_index(grouping, resolver_for("index").link, title="T")
        assert [s.key for s in page.sections] == ["gemini3pro", "glm4.6"]
        assert [s.label for s in page.sections] == ["Gemini-3-Pro", "GLM-4.6"]
        assert [s.position for s in page.sections] == [0, 1]

    def test_projects_in_grouping_order(self, grouping: Grouping) -> None:
        page = assemble_index(grouping, resolver_for("index").link)
        gemini = page.sections[0]
        assert [p.name for p in gemini.projects] == ["foo-gemini3pro-1", "bar-gemini3pro-2"]
        assert [p.href for p in gemini.projects] == ["/p/0-0/", "/p/0-1/"]

    def test_one_link_per_directory(self) -> None:
        g = build_grouping(["a-glm4.6", "b-glm4.6", "c-gemini3pro", "d-gpt5.1medium"])
        for scheme in ("index", "label", "both"):
            page = assemble_index(g, resolver_for(scheme).link)
            assert len(page.hrefs) == g.project_count
            assert len(set(page.hrefs)) == len(page.hrefs)

    def test_index_links_resolve_to_their_directory(self) -> None:
        g = build_grouping(["a-glm4.6", "b-glm4.6", "c-gemini3pro"])
        resolver = resolver_for("index")
        page = assemble_index(g, resolver.link)
        for section in page.sections:
            for project in section.projects:
                assert resolver.resolve(project.href, g).directory == project.name

    def test_label_links(self) -> None:
        g = build_grouping(["a-glm4.6", "b-glm4.6"])
        page = assemble_index(g, resolver_for("label").link)
        assert page.hrefs == ("/GLM-4.6/", "/b-glm4.6/")

    def test_empty(self) -> None:
        page = assemble_index(build_grouping([]), resolver_for("index").link, title="T")
        assert page.is_empty
        assert page.sections == ()
        assert page.hrefs == ()


class TestRenderIndex:
    def test_renders_links(self, grouping: Grouping) -> None:
        env = create_environment(DashboardConfig())
        page = assemble_index(grouping, resolver_for("index").link, title="Project Dashboard")
        response = render_index(env, page)

        assert response.status == 200
        assert response.content_type == "text/html; charset=utf-8"
        assert "<title>Project Dashboard</title>" in response.text
        assert 'href="/p/0-0/"' in response.text
        assert 'href="/p/0-1/"' in response.text
        assert 'href="/p/1-0/"' in response.text
        assert "Gemini-3-Pro" in response.text
        assert response.text.count('class="category"') == 2
        assert response.text.count('class="project-link"') == 3

    def test_real_names_not_exposed(self, grouping: Grouping) -> None:
        env = create_environment(DashboardConfig())
        response = render_index(env, assemble_index(grouping, resolver_for("index").link))
        for name in ("foo-gemini3pro-1", "bar-gemini3pro-2", "baz-glm4.6-x"):
            assert name not in response.text

    def test_empty_state(self) -> None:
        env = create_environment(DashboardConfig())
        response = render_index(env, assemble_index(build_grouping([]), resolver_for("index").link))
        assert response.status == 200
        assert 'class="category"' not in response.text
        assert "No projects found." in response.text

    def test_title_is_escaped(self, grouping: Grouping) -> None:
        env = create_environment(DashboardConfig())
        page = assemble_index(grouping, resolver_for("index").link, title="<b>x</b>")
        assert "<b>x</b>" not in render_index(env, page).text
