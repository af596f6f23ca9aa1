"""Split YAML front matter from page sources."""

from __future__ import annotations

import re
import typing as typ

from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

LEADING_FRONT_MATTER = re.compile(r"\A---[ \t]*\n(.*?\n)?---[ \t]*(?:\n|\Z)", re.DOTALL)
ANY_FRONT_MATTER = re.compile(
    r"^(---\s*\n.*?\n?)^(---\s*$\n?)", re.MULTILINE | re.DOTALL
)


class FrontMatterError(ValueError):
    """Raised when a page's front matter is not a YAML mapping."""


def split_front_matter(text: str) -> tuple[dict[str, typ.Any], str]:
    """Return the front matter mapping and the remaining page body.

    Pages without a leading ``---`` block yield an empty mapping and the text
    unchanged.

    Raises
    ------
    FrontMatterError
        If the block is not valid YAML or does not decode to a mapping.
    """
    match = LEADING_FRONT_MATTER.match(text)
    if not match:
        return {}, text
    loader = YAML(typ="safe")
    loader.version = (1, 2)
    try:
        loaded = loader.load(match.group(1) or "") or {}
    except YAMLError as exc:
        msg = f"Front matter is not valid YAML: {exc}"
        raise FrontMatterError(msg) from exc
    if not isinstance(loaded, dict):
        msg = "Front matter must be a mapping."
        raise FrontMatterError(msg)
    return dict(loaded), text[match.end() :]


def strip_front_matter(text: str) -> str:
    """Remove every ``---`` delimited block, matching the TOC helper's input."""
    return ANY_FRONT_MATTER.sub("", text)


__all__ = ["FrontMatterError", "split_front_matter", "strip_front_matter"]
