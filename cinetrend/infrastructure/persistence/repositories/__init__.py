"""
Implementations SQLModel des repositories.

Ce module contient l'implementation concrete de ISearchCountStore
(core/ports/repositories.py), utilisant SQLModel/SQLAlchemy.
"""

from cinetrend.infrastructure.persistence.repositories.search_count_repository import (
    SQLModelSearchCountStore,
)

__all__ = [
    "SQLModelSearchCountStore",
]
