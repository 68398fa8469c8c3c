"""Tests for rewriting internal documentation routes into relative links."""

from __future__ import annotations

import pytest

from docs_md.links import FALLBACK_TARGET, resolve_link_target, rewrite_docs_link


@pytest.mark.parametrize(
    ("href", "depth", "expected"),
    [
        ("/DOCS-BASE/tutorial/", 1, "../tutorial.md"),
        ("/DOCS-BASE/tutorial/", 0, "tutorial.md"),
        ("/DOCS-BASE/", 0, "index.md"),
        ("/DOCS-BASE/", 2, "../../index.md"),
        ("/DOCS-BASE/reference/foundations/str", 2, "../../reference/foundations/str.md"),
        (
            "/DOCS-BASE/reference/foundations/str/#methods",
            0,
            "reference/foundations/str.md#methods",
        ),
        ("/DOCS-BASE/a/b?x=1#frag", 1, "../a/b.md?x=1#frag"),
        ("/DOCS-BASE/#top", 1, "../index.md#top"),
    ],
)
def test_rewrites_internal_routes(href: str, depth: int, expected: str) -> None:
    assert rewrite_docs_link(href, depth) == expected, (
        f"{href!r} at depth {depth} should map to {expected!r}"
    )


@pytest.mark.parametrize(
    "href",
    [
        "https://typst.app/docs/",
        "http://example.com",
        "mailto:team@example.com",
        "tel:+44123",
        "#local-anchor",
        "//cdn.example.com/x.js",
        "/other/path",
        "relative/page",
    ],
)
def test_leaves_external_targets_unchanged(href: str) -> None:
    assert rewrite_docs_link(href, 3) == href, "non-docs targets must pass through"


def test_refuses_to_rewrite_traversal() -> None:
    href = "/DOCS-BASE/../secret"
    assert rewrite_docs_link(href, 1) == href, "traversal routes are not rewritten"


def test_missing_href_uses_fallback_target() -> None:
    assert resolve_link_target(None, 4) == FALLBACK_TARGET == "#"
    assert resolve_link_target("/DOCS-BASE/x", 1) == "../x.md"


def test_rewriting_is_deterministic() -> None:
    samples = [("/DOCS-BASE/guides/page/", d) for d in range(4)]
    first = [rewrite_docs_link(href, depth) for href, depth in samples]
    second = [rewrite_docs_link(href, depth) for href, depth in samples]
    assert first == second, "same inputs must always yield the same link"
    assert all(link.endswith("guides/page.md") for link in first)
