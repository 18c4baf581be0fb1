"""Shared fixtures: a scan root laid out like a real projects folder."""

from pathlib import Path

import pytest

from projdash.catalog.mapping import Grouping, build_grouping


@pytest.fixture
def projects_root(tmp_path: Path) -> Path:
    """Scan root with three classified projects and some noise.

    Layout::

        foo-gemini3pro-1/   index.html, readme.md
        bar-gemini3pro-2/   readme.md, docs/index.html, assets/
        baz-glm4.6-x/       readme.md
        scratch/            (unclassified)
        notes-glm4.6.txt    (a file, never a project)
    """
    root = tmp_path / "projects"
    root.mkdir()

    foo = root / "foo-gemini3pro-1"
    foo.mkdir()
    (foo / "index.html").write_text("<h1>foo</h1>")
    (foo / "readme.md").write_text("# foo")

    bar = root / "bar-gemini3pro-2"
    bar.mkdir()
    (bar / "readme.md").write_text("# bar")
    (bar / "docs").mkdir()
    (bar / "docs" / "index.html").write_text("<h1>bar docs</h1>")
    (bar / "assets").mkdir()
    (bar / "assets" / "app.js").write_text("console.log('bar');")

    baz = root / "baz-glm4.6-x"
    baz.mkdir()
    (baz / "readme.md").write_text("# baz")

    (root / "scratch").mkdir()
    (root / "notes-glm4.6.txt").write_text("not a project")

    return root


@pytest.fixture
def grouping() -> Grouping:
    """The example grouping with a fixed scan order."""
    return build_grouping(["foo-gemini3pro-1", "bar-gemini3pro-2", "baz-glm4.6-x"])
