"""Documentation export schema: entries, bodies, and typed body content."""

from __future__ import annotations

from .content import (
    BodyContent,
    CategoryContent,
    CategoryItem,
    FuncContent,
    GroupContent,
    HtmlContent,
    ParamContent,
    SymbolEntry,
    SymbolsContent,
    TypeContent,
    UnknownContent,
    decode_body_content,
)
from .loader import entry_from_mapping, load_entries
from .models import (
    Body,
    Entry,
    InvalidContentError,
    MissingFieldError,
    OutlineItem,
    SchemaError,
    UnsafeRouteError,
    route_depth,
)

__all__ = [
    "Body",
    "BodyContent",
    "CategoryContent",
    "CategoryItem",
    "Entry",
    "FuncContent",
    "GroupContent",
    "HtmlContent",
    "InvalidContentError",
    "MissingFieldError",
    "OutlineItem",
    "ParamContent",
    "SchemaError",
    "SymbolEntry",
    "SymbolsContent",
    "TypeContent",
    "UnknownContent",
    "UnsafeRouteError",
    "decode_body_content",
    "entry_from_mapping",
    "load_entries",
    "route_depth",
]
