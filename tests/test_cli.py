"""Tests for the ``docs`` command-line entry points.

The commands are called as plain functions, as the build scripts do through
Cyclopts, and their printed output is captured with ``capsys``.
"""

from __future__ import annotations

from pathlib import Path

import pytest
from bs4 import BeautifulSoup

from minishift_docs import cli


def _write_site(tmp_path: Path) -> Path:
    source = tmp_path / "source"
    source.mkdir()
    (source / "index.md").write_text("## Hello\nWorld.\n", encoding="utf-8")
    topic_map = tmp_path / "_topic_map.yml"
    topic_map.write_text("Topics:\n  - Name: Home\n    File: index\n", encoding="utf-8")
    config_path = tmp_path / "site.yaml"
    config_path.write_text(
        f"""
source_dir: {source}
output_dir: {tmp_path / "build"}
topic_map: {topic_map}
        """.strip()
        + "\n",
        encoding="utf-8",
    )
    return config_path


def test_build_prints_written_paths(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    """``docs build`` renders the site and reports each file."""
    config_path = _write_site(tmp_path)
    cli.build(config=config_path, environment="build")
    out = capsys.readouterr().out.splitlines()
    assert out == [f"wrote {tmp_path / 'build' / 'index.html'}"]
    assert (tmp_path / "build" / "index.html").exists()


def test_build_rejects_unknown_environment(tmp_path: Path) -> None:
    """An environment missing from the config stops the build."""
    config_path = _write_site(tmp_path)
    with pytest.raises(ValueError, match="Unknown environment"):
        cli.build(config=config_path, environment="staging")


def test_nav_prints_fragment(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    """``docs nav`` prints the sidebar for the requested page."""
    topic_map = tmp_path / "_topic_map.yml"
    topic_map.write_text(
        "Topics:\n"
        "  - Name: Guides\n"
        "    Dir: guides\n"
        "    Topics:\n"
        "      - Name: Setup\n"
        "        File: setup\n",
        encoding="utf-8",
    )
    cli.nav(page="/guides/setup.html", topic_map=topic_map)
    soup = BeautifulSoup(capsys.readouterr().out, "html.parser")
    assert soup.select_one("a.active").get("href") == "/guides/setup.html"


def test_toc_prints_outline(
    tmp_path: Path,
    capsys: pytest.CaptureFixture[str],
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    """``docs toc`` prints the heading outline without reading site config."""
    monkeypatch.chdir(tmp_path)
    assert not (tmp_path / "config").exists(), "expected no site config nearby"
    page = tmp_path / "page.md"
    page.write_text("## Alpha\n\n## Beta\n", encoding="utf-8")
    cli.toc(page)
    soup = BeautifulSoup(capsys.readouterr().out, "html.parser")
    assert [a.get_text() for a in soup.find_all("a")] == ["Alpha", "Beta"]


def test_format_path_relative_to_cwd(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    """Paths under the working directory are shown relative to it."""
    monkeypatch.chdir(tmp_path)
    assert cli._format_path(tmp_path / "build" / "index.html") == str(
        Path("build") / "index.html"
    )
    assert cli._format_path(Path("relative.html")) == "relative.html"
