"""Addressing schemes for project URLs.

A scheme knows both directions: turning a request path into a
``Rewrite`` and turning a (model, project) position into the link the
index page emits. Keeping both in one class is what guarantees every
generated link resolves back to its own directory.
"""

from __future__ import annotations

import re
from typing import Protocol
from urllib.parse import quote

from projdash.catalog.mapping import Grouping
from projdash.catalog.rules import format_category, parse_label
from projdash.routing.resolver import Rewrite

_INDEX_PAIR_RE = re.compile(r"/p/([0-9]+)-([0-9]+)(/.*)")


class AddressingScheme(Protocol):
    """Protocol for a project addressing scheme."""

    name: str

    def resolve(self, path: str, grouping: Grouping) -> Rewrite | None:
        """Rewrite target for *path*, or ``None`` when the scheme does not apply."""
        ...

    def link(self, grouping: Grouping, model_idx: int, proj_idx: int) -> str:
        """Href for the project at (*model_idx*, *proj_idx*)."""
        ...


class IndexPairScheme:
    """``/p/<model_idx>-<proj_idx><subpath>``.

    Indices are positions in the sorted model index and in that model's
    project list, so real directory names never appear in URLs. Both must
    resolve; anything else (including a missing subpath, as in ``/p/0-1``)
    is left for the static delegate.
    """

    name = "index"

    __slots__ = ()

    def resolve(self, path: str, grouping: Grouping) -> Rewrite | None:
        match = _INDEX_PAIR_RE.fullmatch(path)
        if match is None:
            return None
        try:
            model_idx, proj_idx = int(match[1]), int(match[2])
        except ValueError:
            # digit runs past the int conversion limit are out of range anyway
            return None
        directory = grouping.lookup(model_idx, proj_idx)
        if directory is None:
            return None
        return Rewrite(directory, match[3])

    def link(self, grouping: Grouping, model_idx: int, proj_idx: int) -> str:
        return f"/p/{model_idx}-{proj_idx}/"


class LabelScheme:
    """``/<Category-Label><subpath>``, e.g. ``/GLM-4.6/readme.md``.

    Only the first project of a model is reachable by label. Links for the
    others point at the directory itself, which the static delegate serves
    as an ordinary path.
    """

    name = "label"

    __slots__ = ()

    def resolve(self, path: str, grouping: Grouping) -> Rewrite | None:
        if not path.startswith("/"):
            return None
        segment, slash, rest = path[1:].partition("/")
        if not segment:
            return None
        key = parse_label(segment, grouping.categories)
        if key is None:
            return None
        projects = grouping.projects(key)
        if not projects:
            return None
        return Rewrite(projects[0], f"/{rest}" if slash else "/")

    def link(self, grouping: Grouping, model_idx: int, proj_idx: int) -> str:
        key = grouping.categories[model_idx]
        if proj_idx == 0:
            return f"/{format_category(key)}/"
        return f"/{quote(grouping.projects(key)[proj_idx])}/"
