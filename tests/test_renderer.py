"""Unit tests for markdown rendering and the table-of-contents helper.

These tests check that each :class:`~minishift_docs.config.MarkdownOptions`
flag maps to the expected Python-Markdown behaviour, that both fence styles
are highlighted, and that ``toc`` ignores front matter and
HAML filter noise.
"""

from __future__ import annotations

import typing as typ

from bs4 import BeautifulSoup

from minishift_docs.config import MarkdownOptions, SyntaxOptions
from minishift_docs.generator import HtmlContentRenderer

if typ.TYPE_CHECKING:
    from pathlib import Path


def _soup(html: str) -> BeautifulSoup:
    return BeautifulSoup(html, "html.parser")


def test_default_options_enable_tables_and_fenced_code() -> None:
    """Tables and fenced code render with the default feature set."""
    renderer = HtmlContentRenderer()
    html = renderer.markdown(
        "| a | b |\n|---|---|\n| 1 | 2 |\n\n```python\nprint('hi')\n```\n"
    )
    soup = _soup(html)
    assert soup.find("table") is not None, "expected a rendered table"
    block = soup.select_one("div.codehilite")
    assert block is not None, "expected a highlighted code block"
    assert "print" in block.get_text()


def test_disabled_tables_render_as_text() -> None:
    """Turning off ``tables`` leaves pipe syntax as paragraph text."""
    renderer = HtmlContentRenderer(MarkdownOptions(tables=False))
    html = renderer.markdown("| a | b |\n|---|---|\n| 1 | 2 |\n")
    assert "<table" not in html


def test_heading_ids_follow_toc_data_flag() -> None:
    """Headings carry anchor ids only when ``with_toc_data`` is enabled."""
    with_ids = HtmlContentRenderer().markdown("## Getting Started\n")
    without_ids = HtmlContentRenderer(MarkdownOptions(with_toc_data=False)).markdown(
        "## Getting Started\n"
    )
    assert _soup(with_ids).find("h2").get("id") == "getting-started"
    assert _soup(without_ids).find("h2").get("id") is None


def test_strikethrough() -> None:
    """Double tildes become ``<del>`` when strikethrough is on."""
    html = HtmlContentRenderer().markdown("This is ~~gone~~ now.\n")
    assert _soup(html).find("del").get_text() == "gone"
    plain = HtmlContentRenderer(MarkdownOptions(strikethrough=False)).markdown(
        "This is ~~gone~~ now.\n"
    )
    assert "<del>" not in plain


def test_autolink_wraps_bare_urls_only() -> None:
    """Bare URLs become links while existing links and code are untouched."""
    html = HtmlContentRenderer().markdown(
        "See https://docs.okd.io/latest/ for details.\n\n"
        "[Release notes](https://github.com/minishift/minishift/releases)\n\n"
        "`https://example.invalid/in-code`\n"
    )
    soup = _soup(html)
    hrefs = [anchor.get("href") for anchor in soup.find_all("a")]
    assert hrefs == [
        "https://docs.okd.io/latest/",
        "https://github.com/minishift/minishift/releases",
    ]
    assert soup.find("code").find("a") is None


def test_hard_wrap_inserts_line_breaks() -> None:
    """Single newlines become ``<br>`` when ``hard_wrap`` is on."""
    text = "first line\nsecond line\n"
    assert "<br" not in HtmlContentRenderer().markdown(text)
    wrapped = HtmlContentRenderer(MarkdownOptions(hard_wrap=True)).markdown(text)
    assert "<br" in wrapped


def test_intra_word_emphasis() -> None:
    """Underscores inside words stay literal unless intra emphasis is allowed."""
    text = "use minishift_start_flags here\n"
    assert "<em>" not in HtmlContentRenderer().markdown(text)
    legacy = HtmlContentRenderer(MarkdownOptions(no_intra_emphasis=False))
    assert "<em>" in legacy.markdown(text)


def test_tilde_and_backtick_fences_are_both_highlighted() -> None:
    """Each fence style produces its own highlighted block, in order."""
    html = HtmlContentRenderer(syntax=SyntaxOptions(line_numbers=False)).markdown(
        "~~~python\nx = 1\n~~~\n\n```bash\nls\n```\n"
    )
    blocks = _soup(html).select("div.codehilite")
    assert [block.get_text().strip() for block in blocks] == ["x = 1", "ls"]
    assert blocks[0].select_one(".mi") is not None, "expected python number tokens"


def test_disabled_fences_leave_source_untouched() -> None:
    """Without fenced code blocks the fence text is not rewritten."""
    renderer = HtmlContentRenderer(MarkdownOptions(fenced_code_blocks=False))
    html = renderer.markdown("  ```bash,ignore\n  ls\n  ```\n")
    assert "bash,ignore" in html, "expected the fence label to survive verbatim"
    assert _soup(html).select_one("div.codehilite") is None


def test_empty_markdown_renders_nothing() -> None:
    """Whitespace-only sources render to an empty string."""
    assert HtmlContentRenderer().markdown("  \n\n") == ""


def test_toc_skips_front_matter_and_haml_noise() -> None:
    """The TOC lists headings from the body only."""
    source = (
        "---\n"
        "title: Installing\n"
        "---\n"
        ":markdown\n"
        "\t## Prerequisites\n"
        "Text.\n\n"
        "### Hypervisor\n"
        "More.\n"
    )
    soup = _soup(HtmlContentRenderer().toc(source))
    labels = [anchor.get_text() for anchor in soup.find_all("a")]
    assert labels == ["Prerequisites", "Hypervisor"]
    assert soup.find("a").get("href") == "#prerequisites"


def test_toc_for_file(tmp_path: Path) -> None:
    """``toc_for_file`` reads the page from disk."""
    page = tmp_path / "page.md"
    page.write_text("# Title\n\n## Section\n", encoding="utf-8")
    html = HtmlContentRenderer().toc_for_file(page)
    assert 'href="#section"' in html


def test_stylesheet_targets_codehilite() -> None:
    """The Pygments CSS is scoped to ``.codehilite``."""
    assert ".codehilite" in HtmlContentRenderer().stylesheet
