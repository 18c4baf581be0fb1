"""Kida environment setup.

Creates the kida Environment once during ``Dashboard._freeze()``; it is
passed through the request pipeline and never modified afterwards.
"""

from kida import Environment, PackageLoader

from projdash.config import DashboardConfig

INDEX_TEMPLATE = "index.html"


def create_environment(config: DashboardConfig) -> Environment:
    """Create a kida Environment serving the package's bundled templates."""
    return Environment(
        loader=PackageLoader("projdash", "templates"),
        autoescape=True,
        auto_reload=config.debug,
        trim_blocks=True,
        lstrip_blocks=True,
    )


def render_template(env: Environment, name: str, context: dict[str, object]) -> str:
    """Render a full template to string."""
    template = env.get_template(name)
    return template.render(context)
