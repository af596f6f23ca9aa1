"""Typed dataclasses describing minishift_docs site configuration."""

from __future__ import annotations

import dataclasses as dc
import fnmatch
from pathlib import Path

from minishift_docs._constants import DEFAULT_TOPIC_MAP


class SiteConfigError(ValueError):
    """Raised when the site configuration is invalid or incomplete."""


@dc.dataclass(slots=True)
class MarkdownOptions:
    """Markdown features enabled for every rendered page."""

    autolink: bool = True
    fenced_code_blocks: bool = True
    no_intra_emphasis: bool = True
    strikethrough: bool = True
    tables: bool = True
    hard_wrap: bool = False
    with_toc_data: bool = True


@dc.dataclass(slots=True)
class SyntaxOptions:
    """Pygments highlighting applied to fenced code blocks."""

    line_numbers: bool = True
    pygments_style: str = "default"


@dc.dataclass(slots=True)
class PageRule:
    """Layout override for pages whose URL matches ``pattern``.

    A ``layout`` of ``None`` writes the page without any layout.
    """

    pattern: str
    layout: str | None

    def matches(self, url: str) -> bool:
        """Return True when ``url`` matches the rule's glob pattern."""
        return fnmatch.fnmatchcase(url, self.pattern)


@dc.dataclass(slots=True)
class EnvironmentOptions:
    """Feature toggles for the development and build environments."""

    livereload: bool = False
    minify_css: bool = False
    minify_javascript: bool = False


def _default_rules() -> list[PageRule]:
    return [
        PageRule(pattern="/*.xml", layout=None),
        PageRule(pattern="/*.json", layout=None),
        PageRule(pattern="/*.txt", layout=None),
    ]


def _default_environments() -> dict[str, EnvironmentOptions]:
    return {
        "development": EnvironmentOptions(livereload=True),
        "build": EnvironmentOptions(),
    }


@dc.dataclass(slots=True)
class SiteConfig:
    """Fully resolved site configuration for one build session."""

    source_dir: Path = Path("source")
    output_dir: Path = Path("build")
    topic_map: Path = DEFAULT_TOPIC_MAP
    layout: str = "layout.jinja"
    environment: str = "development"
    markdown: MarkdownOptions = dc.field(default_factory=MarkdownOptions)
    syntax: SyntaxOptions = dc.field(default_factory=SyntaxOptions)
    asciidoc_attributes: list[str] = dc.field(
        default_factory=lambda: ["icons=font"]
    )
    pages: list[PageRule] = dc.field(default_factory=_default_rules)
    environments: dict[str, EnvironmentOptions] = dc.field(
        default_factory=_default_environments
    )

    def layout_for(self, url: str) -> str | None:
        """Return the layout for ``url``; the first matching rule wins."""
        for rule in self.pages:
            if rule.matches(url):
                return rule.layout
        return self.layout

    @property
    def environment_options(self) -> EnvironmentOptions:
        """Return the toggles for the active environment."""
        try:
            return self.environments[self.environment]
        except KeyError as exc:
            available = ", ".join(sorted(self.environments))
            msg = (
                f"Unknown environment '{self.environment}'. "
                f"Known environments: {available}"
            )
            raise SiteConfigError(msg) from exc


__all__ = [
    "EnvironmentOptions",
    "MarkdownOptions",
    "PageRule",
    "SiteConfig",
    "SiteConfigError",
    "SyntaxOptions",
]
