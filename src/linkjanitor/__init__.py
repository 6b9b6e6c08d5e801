"""Keep Markdown link reference definitions in sync with note links."""

__version__ = "0.3.0"
