"""
Database package for the Hotel Club reservation system.

This package provides the document store:
- connection: Store access and transactions (get_store, init_store, init_db)
- schema: Document collections and defaults
- seed: Initial seed data

For convenience, the main functions are re-exported from this module.
"""

from database.connection import DocumentStore, get_store, init_store, init_db
from database.schema import COLLECTIONS, empty_document, normalize_document
from database.seed import seed_database

__all__ = [
    # Connection
    'DocumentStore',
    'get_store',
    'init_store',
    'init_db',
    # Schema
    'COLLECTIONS',
    'empty_document',
    'normalize_document',
    # Seed
    'seed_database',
]
