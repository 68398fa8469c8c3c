"""Common literal values used across docs_md.

These constants keep the documentation-root sentinel, size limits, and the
tag deny-list in one place so the converter, link rewriter, route mapper, and
tests agree on them.

Examples
--------
>>> from docs_md import _constants
>>> _constants.DOCS_BASE
'/DOCS-BASE/'
>>> _constants.MAX_HTML_SIZE
5000000
"""

DOCS_BASE = "/DOCS-BASE/"
MAX_HTML_SIZE = 5_000_000
DROPPED_TAGS = frozenset({"script", "iframe", "object", "embed", "style", "link"})
EXTERNAL_PREFIXES = ("http://", "https://", "mailto:", "tel:", "//")
