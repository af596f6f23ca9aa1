"""Build the Minishift documentation site.

This package exposes the CLI entry points used by ``uv run docs`` to render
the Markdown sources, print the topic-map sidebar for a page, and emit a
page's table of contents.

Exports
-------
- ``app``: Cyclopts application entry for subcommands.
- ``main``: Convenience function that invokes the Cyclopts app.

Examples
--------
>>> from minishift_docs import main
>>> main()  # doctest: +SKIP
>>> from minishift_docs import app
>>> callable(app)
True
"""

from __future__ import annotations

from .cli import app, main

__all__ = ["app", "main"]
