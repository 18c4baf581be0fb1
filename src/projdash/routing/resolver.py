"""Route resolution over a project grouping.

``RouteResolver.resolve`` is total: every path maps to exactly one of
``RenderIndex``, ``Rewrite`` or ``PassThrough``. Malformed or out of range
project paths are not errors; they pass through and the static delegate
decides whether the literal path exists.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING

from projdash.errors import ConfigurationError

if TYPE_CHECKING:
    from projdash.catalog.mapping import Grouping
    from projdash.routing.schemes import AddressingScheme

logger = logging.getLogger("projdash.routing")

INDEX_PATH = "/"


@dataclass(frozen=True, slots=True)
class RenderIndex:
    """Render the dashboard index page."""


@dataclass(frozen=True, slots=True)
class PassThrough:
    """Hand the request to the static delegate unchanged."""


@dataclass(frozen=True, slots=True)
class Rewrite:
    """Serve *subpath* inside project *directory*."""

    directory: str
    subpath: str = "/"

    @property
    def path(self) -> str:
        """The rewritten request path, ``/<directory><subpath>``."""
        return f"/{self.directory}{self.subpath}"


type RouteDecision = RenderIndex | Rewrite | PassThrough

RENDER_INDEX = RenderIndex()
PASS_THROUGH = PassThrough()


class RouteResolver:
    """Resolve request paths using an ordered tuple of schemes.

    The first scheme is also the one that generates index page links.

    Usage::

        resolver = RouteResolver((IndexPairScheme(),))
        resolver.resolve("/p/0-1/readme.md", grouping)
    """

    __slots__ = ("schemes",)

    def __init__(self, schemes: Sequence[AddressingScheme]) -> None:
        if not schemes:
            msg = "RouteResolver needs at least one addressing scheme"
            raise ConfigurationError(msg)
        self.schemes: tuple[AddressingScheme, ...] = tuple(schemes)

    @property
    def link_scheme(self) -> AddressingScheme:
        return self.schemes[0]

    def resolve(self, path: str, grouping: Grouping) -> RouteDecision:
        if path == INDEX_PATH:
            return RENDER_INDEX
        for scheme in self.schemes:
            target = scheme.resolve(path, grouping)
            if target is not None:
                logger.debug("%s -> %s (%s scheme)", path, target.path, scheme.name)
                return target
        return PASS_THROUGH

    def link(self, grouping: Grouping, model_idx: int, proj_idx: int) -> str:
        """Href for a project, produced by the link scheme."""
        return self.link_scheme.link(grouping, model_idx, proj_idx)


def resolver_for(scheme: str) -> RouteResolver:
    """Build the resolver for a configured scheme name.

    ``"both"`` keeps the two schemes on disjoint paths: index pairs live
    under ``/p/`` and are tried first, labels cover the rest.
    """
    from projdash.routing.schemes import IndexPairScheme, LabelScheme

    if scheme == "index":
        return RouteResolver((IndexPairScheme(),))
    if scheme == "label":
        return RouteResolver((LabelScheme(),))
    if scheme == "both":
        return RouteResolver((IndexPairScheme(), LabelScheme()))
    msg = f"Unknown addressing scheme {scheme!r}"
    raise ConfigurationError(msg)
