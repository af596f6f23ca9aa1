"""Render the documentation sidebar from the topic map.

:class:`NavigationRenderer` turns a :class:`~minishift_docs.topic_map.TopicMap`
into the ``<li>`` fragment that the page layout drops into its sidebar. Direct
topics become plain links; grouped topics become collapsible lists whose
state reflects whether the page being rendered is one of their children.

The markup uses the class names the site theme's stylesheet and collapse
script expect (``nav-header``, ``nav-tertiary``, ``list-unstyled``,
``collapse``/``in`` and the Font Awesome caret icons).

Examples
--------
>>> from minishift_docs.navigation import normalize_page_url
>>> normalize_page_url("/guides/")
'/guides/index.html'
>>> normalize_page_url("/guides/setup.html")
'/guides/setup.html'
"""

from __future__ import annotations

import dataclasses as dc
import typing as typ
from pathlib import Path

from jinja2 import Environment, FileSystemLoader

from ._constants import DEFAULT_TOPIC_MAP, HTML_SUFFIX, INDEX_FILE
from .topic_map import load_topic_map

if typ.TYPE_CHECKING:
    from .topic_map import Topic, TopicMap

CARET_CLOSED = "fa-caret-right"
CARET_OPEN = "fa-caret-down"


@dc.dataclass(slots=True)
class NavEntry:
    """Sub-topic link inside a collapsible group."""

    name: str
    href: str
    active: bool = False


@dc.dataclass(slots=True)
class NavItem:
    """Top-level sidebar item passed to the navigation template.

    ``entries`` is ``None`` for direct links and a list for groups.
    """

    index: int
    name: str
    href: str | None = None
    entries: list[NavEntry] | None = None
    expanded: bool = False

    @property
    def caret(self) -> str:
        """Return the Font Awesome caret class for the group state."""
        return CARET_OPEN if self.expanded else CARET_CLOSED


def normalize_page_url(url: str) -> str:
    """Treat URLs that do not end in ``html`` as directory indexes."""
    if url.endswith(HTML_SUFFIX):
        return url
    return f"{url}{INDEX_FILE}"


class NavigationRenderer:
    """Render topic-map navigation for a given page."""

    def __init__(
        self, topic_map: TopicMap, *, templates_dir: Path | None = None
    ) -> None:
        """Initialize the renderer and its Jinja environment.

        Parameters
        ----------
        topic_map : TopicMap
            Loaded topic map; it is read but never mutated.
        templates_dir : Path, optional
            Directory containing ``navigation_menu.jinja``; defaults to the
            package templates.
        """
        self.topic_map = topic_map
        self.templates_dir = templates_dir or Path(__file__).parent / "templates"
        self.env = Environment(
            loader=FileSystemLoader(self.templates_dir),
            autoescape=True,
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self.template = self.env.get_template("navigation_menu.jinja")

    def build_items(self, current_url: str) -> list[NavItem]:
        """Return sidebar items in declaration order with active state applied."""
        page_url = normalize_page_url(current_url)
        return [
            self._build_item(index, topic, page_url)
            for index, topic in enumerate(self.topic_map.topics)
        ]

    def render(self, current_url: str) -> str:
        """Render the navigation fragment for the page at ``current_url``.

        Parameters
        ----------
        current_url : str
            URL path of the page being rendered, e.g. ``/guides/setup.html``
            or ``/guides/``.

        Returns
        -------
        str
            Concatenated ``<li>`` markup for every top-level topic.
        """
        return self.template.render(items=self.build_items(current_url))

    @staticmethod
    def _build_item(index: int, topic: Topic, page_url: str) -> NavItem:
        if not topic.is_group:
            return NavItem(index=index, name=topic.name, href=topic.url)

        entries: list[NavEntry] = []
        expanded = False
        for subtopic in topic.topics:
            href = subtopic.url(typ.cast("str", topic.directory))
            active = href == page_url
            expanded = expanded or active
            entries.append(NavEntry(name=subtopic.name, href=href, active=active))
        return NavItem(index=index, name=topic.name, entries=entries, expanded=expanded)


def render_navigation_menu(
    current_url: str, *, topic_map_path: Path = DEFAULT_TOPIC_MAP
) -> str:
    """Load the topic map fresh and render the sidebar for ``current_url``.

    Load errors propagate unchanged; there is no partial render.
    """
    topic_map = load_topic_map(topic_map_path)
    return NavigationRenderer(topic_map).render(current_url)


__all__ = [
    "CARET_CLOSED",
    "CARET_OPEN",
    "NavEntry",
    "NavItem",
    "NavigationRenderer",
    "normalize_page_url",
    "render_navigation_menu",
]
