"""Route each node to the most specific renderer available.

Dispatch order: tables go to the structural table renderer; paragraphs,
headings, lists, and blockquotes go to their dedicated renderers; everything
else goes to the generic :class:`StandardRenderer`. A :class:`Root` is
rendered child by child so tables nested at the top level still get
structural treatment.

Examples
--------
>>> from docs_md.html_to_md.ast import Paragraph, Text
>>> CompositeRenderer().render_many([Paragraph([Text("Hello")])])
'Hello'
"""

from __future__ import annotations

import typing as typ

from docs_md.html_to_md.ast import Blockquote, Heading, List, Paragraph, Root, Table

from .base import BlockResult
from .compositor import compose
from .fast import BlockquoteRenderer, HeadingRenderer, ListRenderer, ParagraphRenderer
from .standard import StandardRenderer
from .table import TableRenderer

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from docs_md.html_to_md.ast import Node

    from .base import NodeRenderer, RenderResult


class CompositeRenderer:
    """Composite rendering strategy over a fixed set of node renderers.

    Parameters
    ----------
    table, paragraph, heading, list_renderer, blockquote, standard : NodeRenderer, optional
        Replacement renderers; defaults are used for any left unset.
    """

    def __init__(
        self,
        *,
        table: NodeRenderer | None = None,
        paragraph: NodeRenderer | None = None,
        heading: NodeRenderer | None = None,
        list_renderer: NodeRenderer | None = None,
        blockquote: NodeRenderer | None = None,
        standard: NodeRenderer | None = None,
    ) -> None:
        self.table = table or TableRenderer()
        self.paragraph = paragraph or ParagraphRenderer()
        self.heading = heading or HeadingRenderer()
        self.list_renderer = list_renderer or ListRenderer()
        self.blockquote = blockquote or BlockquoteRenderer()
        self.standard = standard or StandardRenderer()

    def renderer_for(self, node: Node) -> NodeRenderer:
        """Return the renderer responsible for ``node``."""
        match node:
            case Table():
                return self.table
            case Paragraph():
                return self.paragraph
            case Heading():
                return self.heading
            case List():
                return self.list_renderer
            case Blockquote():
                return self.blockquote
            case _:
                return self.standard

    def render(self, node: Node) -> RenderResult:
        """Render one node; raises ``RenderError`` when its renderer fails."""
        if isinstance(node, Root):
            text = self.render_many(node.children)
            return BlockResult(text.split("\n") if text else [])
        return self.renderer_for(node).render(node)

    def render_many(self, nodes: cabc.Iterable[Node]) -> str:
        """Render ``nodes`` individually and compose the results."""
        return compose([self.render(node) for node in nodes])


__all__ = ["CompositeRenderer"]
