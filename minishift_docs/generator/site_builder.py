"""Ordered build pipeline that turns the source tree into the static site.

:class:`SiteBuilder` runs a fixed sequence of steps before any page renders:
it builds the markdown renderer from the site configuration, prepares the
layout environment, collects the source files, and finally renders or copies
each file into the output directory. Each step is an ordinary method, so
callers and tests can run them individually.

Example
-------
>>> from pathlib import Path
>>> from minishift_docs.config import load_site_config
>>> from minishift_docs.generator import SiteBuilder
>>> config = load_site_config(Path("config/site.yaml"))  # doctest: +SKIP
>>> SiteBuilder(config).run()  # doctest: +SKIP
[PosixPath('build/index.html'), ...]
"""

from __future__ import annotations

import datetime as dt
import shutil
import typing as typ
from pathlib import Path, PurePosixPath

from jinja2 import ChoiceLoader, Environment, FileSystemLoader, select_autoescape

from minishift_docs._constants import MARKDOWN_SUFFIXES
from minishift_docs.navigation import render_navigation_menu

from .front_matter import split_front_matter
from .renderer import HtmlContentRenderer

if typ.TYPE_CHECKING:
    from minishift_docs.config import SiteConfig

LAYOUTS_DIRNAME = "layouts"
TARGET_SUFFIXES = (".html", ".xml", ".json", ".txt")


class SiteBuilder:
    """Render markdown pages and copy static assets into the output tree."""

    def __init__(
        self, config: SiteConfig, *, templates_dir: Path | None = None
    ) -> None:
        """Initialize the builder for one build session.

        Parameters
        ----------
        config : SiteConfig
            Resolved site configuration; every step reads its options from
            here rather than from module state.
        templates_dir : Path, optional
            Fallback layout directory; defaults to the package templates.
            Layouts in ``<source_dir>/layouts`` take precedence.
        """
        self.config = config
        default_templates = Path(__file__).resolve().parents[1] / "templates"
        self.templates_dir = templates_dir or default_templates
        self.renderer: HtmlContentRenderer | None = None
        self.env: Environment | None = None

    def run(self) -> list[Path]:
        """Run every build step in order and return the written paths.

        Raises
        ------
        FileNotFoundError
            If the source directory, a layout's topic map, or a layout
            template is missing.
        TopicMapError
            If the topic map cannot be parsed for a page that uses a layout.
        """
        self.configure_markdown()
        self.load_layouts()
        sources = self.collect_pages()
        self.config.output_dir.mkdir(parents=True, exist_ok=True)
        return [self.render_page(source) for source in sources]

    def configure_markdown(self) -> HtmlContentRenderer:
        """Create the markdown renderer from the configured options."""
        self.renderer = HtmlContentRenderer(self.config.markdown, self.config.syntax)
        return self.renderer

    def load_layouts(self) -> Environment:
        """Create the Jinja environment used to wrap rendered pages."""
        self.env = Environment(
            loader=ChoiceLoader(
                [
                    FileSystemLoader(str(self.config.source_dir / LAYOUTS_DIRNAME)),
                    FileSystemLoader(str(self.templates_dir)),
                ]
            ),
            autoescape=select_autoescape(["html", "xml", "jinja"]),
            trim_blocks=True,
            lstrip_blocks=True,
        )
        return self.env

    def collect_pages(self) -> list[Path]:
        """Return every source file in a stable order, skipping layouts."""
        source_dir = self.config.source_dir
        if not source_dir.is_dir():
            msg = f"Source directory '{source_dir}' not found."
            raise FileNotFoundError(msg)
        layouts_dir = source_dir / LAYOUTS_DIRNAME
        return sorted(
            path
            for path in source_dir.rglob("*")
            if path.is_file() and layouts_dir not in path.parents
        )

    def render_page(self, source: Path) -> Path:
        """Render a markdown source or copy a static file; return the output."""
        relative = source.relative_to(self.config.source_dir)
        if source.suffix not in MARKDOWN_SUFFIXES:
            output_path = self.config.output_dir / relative
            output_path.parent.mkdir(parents=True, exist_ok=True)
            shutil.copyfile(source, output_path)
            return output_path

        renderer = self.renderer or self.configure_markdown()
        env = self.env or self.load_layouts()
        target = page_target(relative)
        url = f"/{target.as_posix()}"
        front_matter, body = split_front_matter(source.read_text(encoding="utf-8"))
        content = renderer.markdown(body)

        layout = front_matter.get("layout", self.config.layout_for(url))
        if layout:
            context = {
                "content": content,
                "title": front_matter.get("title") or _default_title(target),
                "current_url": url,
                "navigation": render_navigation_menu(
                    url, topic_map_path=self.config.topic_map
                ),
                "toc": renderer.toc(body),
                "pygments_css": renderer.stylesheet,
                "asciidoc_attributes": self.config.asciidoc_attributes,
                "environment": self.config.environment_options,
                "generated_at": dt.datetime.now(dt.UTC),
                "page": front_matter,
            }
            html = env.get_template(str(layout)).render(**context)
        else:
            html = content
        if not html.endswith("\n"):
            html += "\n"

        output_path = self.config.output_dir / target
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(html, encoding="utf-8")
        return output_path


def page_target(relative: Path) -> PurePosixPath:
    """Map a markdown source path to its output path.

    ``guide.md`` becomes ``guide.html`` while ``feed.xml.md`` keeps its inner
    extension and becomes ``feed.xml``.

    >>> page_target(Path("guides/setup.md")).as_posix()
    'guides/setup.html'
    >>> page_target(Path("feed.xml.md")).as_posix()
    'feed.xml'
    """
    stem = PurePosixPath(relative.as_posix()).with_suffix("")
    if stem.suffix in TARGET_SUFFIXES:
        return stem
    return stem.with_name(f"{stem.name}.html")


def _default_title(target: PurePosixPath) -> str:
    name = target.stem
    if name == "index" and target.parent.name:
        name = target.parent.name
    return name.replace("-", " ").replace("_", " ").title()


__all__ = ["SiteBuilder", "page_target"]
