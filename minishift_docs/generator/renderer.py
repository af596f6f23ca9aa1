"""Utilities for rendering markdown, highlighted code, and tables of contents."""

from __future__ import annotations

import typing as typ
from pathlib import Path

from markdown import Markdown
from pygments.formatters.html import HtmlFormatter

from minishift_docs.config import MarkdownOptions, SyntaxOptions

from .extensions import AutolinkExtension, StrikethroughExtension
from .front_matter import strip_front_matter

if typ.TYPE_CHECKING:
    from markdown.extensions import Extension
else:  # pragma: no cover - type-checking fallback
    Extension = typ.Any

HAML_MARKDOWN_FILTER = ":markdown\n"


class HtmlContentRenderer:
    """Render page markdown with the site's configured feature set."""

    def __init__(
        self,
        options: MarkdownOptions | None = None,
        syntax: SyntaxOptions | None = None,
    ) -> None:
        """Initialize a renderer from explicit markdown and syntax options.

        Parameters
        ----------
        options : MarkdownOptions, optional
            Markdown features to enable; defaults to ``MarkdownOptions()``.
        syntax : SyntaxOptions, optional
            Pygments style and line-number settings for code blocks.
        """
        self.options = options or MarkdownOptions()
        self.syntax = syntax or SyntaxOptions()
        self._formatter = HtmlFormatter(
            style=self.syntax.pygments_style, cssclass="codehilite"
        )

    @property
    def stylesheet(self) -> str:
        """Return the CSS used for highlighted code blocks."""
        return self._formatter.get_style_defs(".codehilite")

    @property
    def extensions(self) -> list[Extension | str]:
        """Return the Python-Markdown extensions implied by the options."""
        extensions: list[Extension | str] = ["codehilite", "sane_lists"]
        if self.options.fenced_code_blocks:
            extensions.append("fenced_code")
        if self.options.tables:
            extensions.append("tables")
        if self.options.hard_wrap:
            extensions.append("nl2br")
        if self.options.with_toc_data:
            extensions.append("toc")
        if not self.options.no_intra_emphasis:
            extensions.append("legacy_em")
        if self.options.strikethrough:
            extensions.append(StrikethroughExtension())
        if self.options.autolink:
            extensions.append(AutolinkExtension())
        return extensions

    def markdown(self, text: str) -> str:
        """Render markdown into HTML using the configured extensions."""
        if not text.strip():
            return ""
        return self._build_markdown(self.extensions).convert(text)

    def toc(self, text: str) -> str:
        """Return table-of-contents HTML for a page's markdown source.

        Front matter blocks, HAML ``:markdown`` filter lines, and tab
        characters are removed first so pages written as HAML with an
        embedded markdown filter still yield their headings.
        """
        cleaned = strip_front_matter(text)
        cleaned = cleaned.replace(HAML_MARKDOWN_FILTER, "").replace("\t", "")
        md = self._build_markdown(["toc"])
        md.convert(cleaned)
        return typ.cast("str", getattr(md, "toc", ""))

    def toc_for_file(self, path: Path) -> str:
        """Read ``path`` and return its table-of-contents HTML."""
        return self.toc(path.read_text(encoding="utf-8"))

    def _build_markdown(self, extensions: list[Extension | str]) -> Markdown:
        return Markdown(
            extensions=extensions,
            extension_configs={
                "codehilite": {
                    "linenums": self.syntax.line_numbers,
                    "guess_lang": False,
                    "css_class": "codehilite",
                    "pygments_style": self.syntax.pygments_style,
                }
            },
        )


__all__ = ["HtmlContentRenderer"]
