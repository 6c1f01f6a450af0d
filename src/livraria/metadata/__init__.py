# ABOUTME: Metadata package: record type, parser, and inbound catalog sources.
# ABOUTME: Exports BookRecord and the parsing entry point used throughout Livraria.

from livraria.metadata.parser import parse_catalog_text
from livraria.metadata.provider import BookSearchSource
from livraria.metadata.types import BookRecord

__all__ = [
    "BookRecord",
    "BookSearchSource",
    "parse_catalog_text",
]
