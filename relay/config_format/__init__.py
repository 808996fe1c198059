from .resolver import (
    FormatPolicy,
    ResolvedFormat,
    FORMAT_POLICIES,
    JSON_SOURCES,
    resolve,
)
from .rewriter import rewrite, rewrite_api_url
from .source import fetch_source_document

__all__ = [
    "FormatPolicy",
    "ResolvedFormat",
    "FORMAT_POLICIES",
    "JSON_SOURCES",
    "resolve",
    "rewrite",
    "rewrite_api_url",
    "fetch_source_document",
]
