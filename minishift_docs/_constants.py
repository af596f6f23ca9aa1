"""Common literal values used across minishift_docs.

These constants keep default paths and URL suffixes centralized so the
navigation renderer, the build pipeline, and tests agree on them.

Examples
--------
>>> from minishift_docs import _constants
>>> _constants.DEFAULT_TOPIC_MAP.as_posix()
'build/_topic_map.yml'
>>> _constants.INDEX_FILE
'index.html'
"""

from pathlib import Path

DEFAULT_SITE_CONFIG = Path("config/site.yaml")
DEFAULT_TOPIC_MAP = Path("build/_topic_map.yml")
HTML_SUFFIX = "html"
INDEX_FILE = "index.html"
MARKDOWN_SUFFIXES = (".md", ".markdown")
