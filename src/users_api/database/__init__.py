"""
Database module for the Users API
"""

from .connection import get_engine, init_database, check_database_connection

__all__ = ["get_engine", "init_database", "check_database_connection"]
