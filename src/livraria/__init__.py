# ABOUTME: Livraria - ingests book descriptions from a text-generation source into a catalog.
# ABOUTME: Normalizes records and upserts books, authors, genres, and publishers transactionally.

__version__ = "0.1.0"
