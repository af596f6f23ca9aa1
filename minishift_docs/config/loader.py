"""Load site configuration YAML into typed dataclasses."""

from __future__ import annotations

import typing as typ
from pathlib import Path

from ruamel.yaml import YAML

from .helpers import (
    _as_mapping,
    _build_environments,
    _build_markdown_options,
    _build_page_rules,
    _build_syntax_options,
    _normalize_attributes,
    _optional_str,
)
from .models import SiteConfig, SiteConfigError


def load_site_config(path: Path, *, environment: str | None = None) -> SiteConfig:
    """Load the YAML configuration describing how the site is built.

    Parameters
    ----------
    path : Path
        Filesystem path to the YAML configuration file (for example,
        ``config/site.yaml``).
    environment : str, optional
        Active environment overriding the file's ``environment`` key.

    Returns
    -------
    SiteConfig
        Parsed configuration with defaults applied for absent keys.

    Raises
    ------
    FileNotFoundError
        If the configuration file does not exist at ``path``.
    TypeError
        If the top-level YAML structure is not a mapping.
    SiteConfigError
        If a section has the wrong shape, an option is unknown, or the active
        environment is not defined.
    YAMLError
        If the YAML content cannot be parsed by the underlying loader.

    Examples
    --------
    >>> from pathlib import Path
    >>> from minishift_docs.config import load_site_config
    >>> config = load_site_config(Path("config/site.yaml"))  # doctest: +SKIP
    >>> config.layout_for("/sitemap.xml") is None  # doctest: +SKIP
    True
    """
    if not path.exists():
        msg = f"Configuration file '{path}' not found."
        raise FileNotFoundError(msg)

    loader = YAML(typ="safe")
    loader.version = (1, 2)
    with path.open("r", encoding="utf-8") as handle:
        loaded = loader.load(handle) or {}
    if not isinstance(loaded, dict):
        msg = "Top-level YAML structure must be a mapping."
        raise TypeError(msg)
    raw: dict[str, typ.Any] = dict(loaded)
    base = SiteConfig()

    asciidoc = _as_mapping(raw.get("asciidoc"), "asciidoc")
    pages_raw = raw.get("pages")
    config = SiteConfig(
        source_dir=Path(raw.get("source_dir", base.source_dir)),
        output_dir=Path(raw.get("output_dir", base.output_dir)),
        topic_map=Path(raw.get("topic_map", base.topic_map)),
        layout=_optional_str(raw.get("layout")) or base.layout,
        environment=(
            environment or _optional_str(raw.get("environment")) or base.environment
        ),
        markdown=_build_markdown_options(_as_mapping(raw.get("markdown"), "markdown")),
        syntax=_build_syntax_options(_as_mapping(raw.get("syntax"), "syntax")),
        asciidoc_attributes=(
            _normalize_attributes(asciidoc["attributes"])
            if "attributes" in asciidoc
            else base.asciidoc_attributes
        ),
        pages=base.pages if pages_raw is None else _build_page_rules(pages_raw),
        environments=_build_environments(
            _as_mapping(raw.get("environments"), "environments"), base.environments
        ),
    )
    if config.environment not in config.environments:
        available = ", ".join(sorted(config.environments))
        msg = (
            f"Unknown environment '{config.environment}'. "
            f"Known environments: {available}"
        )
        raise SiteConfigError(msg)
    return config


__all__ = ["load_site_config"]
