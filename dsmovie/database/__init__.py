"""
Database module for DSMovie.

This module provides database models, connection management, pagination
types and the repositories the services work against.
"""

from dsmovie.database.models import Base, Movie, Score, User, Role
from dsmovie.database.connection import DatabaseManager, get_db_manager
from dsmovie.database.init_db import init_database, seed_database, verify_schema
from dsmovie.database.pagination import Page, PageRequest
from dsmovie.database.errors import RepositoryError, EntityNotFoundError, IntegrityConflictError

__all__ = [
    # Models
    'Base',
    'Movie',
    'Score',
    'User',
    'Role',
    # Connection
    'DatabaseManager',
    'get_db_manager',
    # Initialization
    'init_database',
    'seed_database',
    'verify_schema',
    # Pagination
    'Page',
    'PageRequest',
    # Errors
    'RepositoryError',
    'EntityNotFoundError',
    'IntegrityConflictError',
]
