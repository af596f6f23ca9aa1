"""Load and validate site configuration YAML for minishift documentation builds.

This subpackage parses the project's ``config/site.yaml`` file, applies
defaults for every absent key, and produces typed dataclasses
(:class:`SiteConfig`, :class:`MarkdownOptions`, etc.) that the build pipeline
passes explicitly to each step. The primary entry point is
:func:`load_site_config`.

Examples
--------
>>> from pathlib import Path
>>> from minishift_docs.config import load_site_config
>>> site = load_site_config(Path("config/site.yaml"))  # doctest: +SKIP
>>> site.markdown.tables  # doctest: +SKIP
True
"""

from .loader import load_site_config
from .models import (
    EnvironmentOptions,
    MarkdownOptions,
    PageRule,
    SiteConfig,
    SiteConfigError,
    SyntaxOptions,
)

__all__ = [
    "EnvironmentOptions",
    "MarkdownOptions",
    "PageRule",
    "SiteConfig",
    "SiteConfigError",
    "SyntaxOptions",
    "load_site_config",
]
