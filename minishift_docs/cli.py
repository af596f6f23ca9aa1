"""Cyclopts CLI entrypoint for building the Minishift documentation site.

The ``docs`` console script defined here renders the Markdown sources into
static HTML, prints the topic-map sidebar for a single page, and prints a
page's table of contents. Typical usage is ``docs build`` locally or in CI,
with ``docs nav`` and ``docs toc`` kept for checking a topic map or a page
while editing.

Examples
--------
Build the site with the default configuration:

>>> from minishift_docs.cli import main
>>> main()  # doctest: +SKIP

Print the sidebar for one page:

>>> from minishift_docs.cli import app
>>> app(["nav", "--page", "/guides/setup.html"])  # doctest: +SKIP
"""

from __future__ import annotations

import typing as typ
from pathlib import Path

import cyclopts
from cyclopts import App, Parameter

from ._constants import DEFAULT_SITE_CONFIG, DEFAULT_TOPIC_MAP
from .config import load_site_config
from .generator import HtmlContentRenderer, SiteBuilder
from .navigation import render_navigation_menu

app = App(name="docs", config=cyclopts.config.Env("INPUT_", command=False))  # type: ignore[unknown-argument]


def _format_path(path: Path) -> str:
    """Return a cwd-relative path when possible, otherwise the absolute path."""
    if path.is_absolute():
        try:
            return str(path.relative_to(Path.cwd()))
        except ValueError:  # pragma: no cover - fallback for different roots
            return str(path)
    return str(path)


@app.command(help="Render the Markdown sources into the static site.")
def build(
    *,
    config: typ.Annotated[
        Path, Parameter(help="Path to site config", env_var="INPUT_CONFIG")
    ] = DEFAULT_SITE_CONFIG,
    environment: typ.Annotated[
        str | None,
        Parameter(
            help="Override the configured environment",
            env_var="INPUT_ENVIRONMENT",
        ),
    ] = None,
) -> None:
    """Build every page described by the site configuration.

    Parameters
    ----------
    config : Path, optional
        Path to the ``site.yaml`` configuration file (overridable via
        ``INPUT_CONFIG``).
    environment : str or None, optional
        Environment whose toggles apply, e.g. ``build`` in CI; defaults to
        the file's ``environment`` key.

    Returns
    -------
    None
        Writes the rendered site and prints each generated path.
    """
    site_config = load_site_config(config, environment=environment)
    for path in SiteBuilder(site_config).run():
        print(f"wrote {_format_path(path)}")


@app.command(help="Print the sidebar navigation fragment for a page.")
def nav(
    *,
    page: typ.Annotated[
        str, Parameter(help="URL of the current page", env_var="INPUT_PAGE")
    ] = "/",
    topic_map: typ.Annotated[
        Path, Parameter(help="Path to the topic map", env_var="INPUT_TOPIC_MAP")
    ] = DEFAULT_TOPIC_MAP,
) -> None:
    """Render the topic-map navigation as it appears on ``page``."""
    print(render_navigation_menu(page, topic_map_path=topic_map), end="")


@app.command(help="Print the table of contents for a Markdown page.")
def toc(file: Path) -> None:
    """Render the heading outline of ``file`` as nested HTML lists."""
    print(HtmlContentRenderer().toc_for_file(file), end="")


def main() -> None:
    """Invoke the Cyclopts application that powers the ``docs`` console command."""
    app()


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    main()
