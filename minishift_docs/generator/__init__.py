"""Utilities for rendering markdown pages and building the static site."""

from .extensions import AutolinkExtension, StrikethroughExtension
from .front_matter import FrontMatterError, split_front_matter
from .renderer import HtmlContentRenderer
from .site_builder import SiteBuilder

__all__ = [
    "AutolinkExtension",
    "FrontMatterError",
    "HtmlContentRenderer",
    "SiteBuilder",
    "StrikethroughExtension",
    "split_front_matter",
]
