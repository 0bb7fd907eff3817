"""Entities organized by business concept.

Each entity package keeps its domain model (entity.py), persistence model
(table.py) and data access (repository.py) side by side.
"""

from .book import Book, BookInput, BookRepository, BookTable, BookUpdate

__all__ = ["Book", "BookInput", "BookRepository", "BookTable", "BookUpdate"]
