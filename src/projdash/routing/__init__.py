"""Project routing — map request paths onto project directories.

Decisions:
    RenderIndex -- The dashboard index page
    Rewrite -- Serve (directory, subpath) through the static delegate
    PassThrough -- Serve the literal path through the static delegate

Schemes:
    IndexPairScheme -- /p/<model>-<project>/<rest> (obfuscated)
    LabelScheme -- /<Category-Label>/<rest> (first project of a model only)

RouteResolver -- Consults schemes in order over a Grouping
"""

from projdash.routing.resolver import (
    PassThrough,
    RenderIndex,
    Rewrite,
    RouteDecision,
    RouteResolver,
    resolver_for,
)
from projdash.routing.schemes import AddressingScheme, IndexPairScheme, LabelScheme

__all__ = [
    "AddressingScheme",
    "IndexPairScheme",
    "LabelScheme",
    "PassThrough",
    "RenderIndex",
    "Rewrite",
    "RouteDecision",
    "RouteResolver",
    "resolver_for",
]
