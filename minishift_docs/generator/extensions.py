"""Markdown extensions for features Python-Markdown does not ship.

The site's pages rely on GitHub-style ``~~strikethrough~~`` and on bare URLs
turning into links. Both are small inline processors registered on the
``markdown.Markdown`` instance built by
:class:`~minishift_docs.generator.renderer.HtmlContentRenderer`.
"""

from __future__ import annotations

import typing as typ
import xml.etree.ElementTree as etree

from markdown.extensions import Extension
from markdown.inlinepatterns import InlineProcessor, SimpleTagInlineProcessor
from markdown.util import AtomicString

if typ.TYPE_CHECKING:
    import re

    from markdown import Markdown
else:  # pragma: no cover - type-checking fallback
    Markdown = typ.Any

STRIKETHROUGH_PATTERN = r"(~~)(.+?)~~"
BARE_URL_PATTERN = (
    r"(?<![\w/<\"'(\[=])"
    r"((?:https?|ftp)://[^\s<>\"']+[^\s<>\"'.,;:!?)\]])"
)


class StrikethroughExtension(Extension):
    """Render ``~~text~~`` as ``<del>text</del>``."""

    def extendMarkdown(self, md: Markdown) -> None:  # type: ignore[override]  # noqa: N802
        """Register the strikethrough inline processor."""
        processor = SimpleTagInlineProcessor(STRIKETHROUGH_PATTERN, "del")
        md.inlinePatterns.register(processor, "minishift_strikethrough", 55)


class BareUrlInlineProcessor(InlineProcessor):
    """Wrap bare ``http(s)``/``ftp`` URLs in anchors."""

    ANCESTOR_EXCLUDES = ("a",)

    def handleMatch(  # type: ignore[override]  # noqa: N802
        self, m: re.Match[str], data: str
    ) -> tuple[etree.Element, int, int]:
        """Return an anchor element spanning the matched URL."""
        url = m.group(1)
        element = etree.Element("a")
        element.set("href", url)
        element.text = AtomicString(url)
        return element, m.start(0), m.end(0)


class AutolinkExtension(Extension):
    """Turn bare URLs in paragraph text into links."""

    def extendMarkdown(self, md: Markdown) -> None:  # type: ignore[override]  # noqa: N802
        """Register the bare-URL inline processor below the built-in autolink."""
        processor = BareUrlInlineProcessor(BARE_URL_PATTERN, md)
        md.inlinePatterns.register(processor, "minishift_autolink", 110)


__all__ = [
    "AutolinkExtension",
    "BareUrlInlineProcessor",
    "StrikethroughExtension",
]
