"""Database module for the finance data layer."""

from finance_data.db.base import Base, import_models
from finance_data.db.engine import create_db_engine
from finance_data.db.session import create_session_factory

__all__ = ["Base", "create_db_engine", "create_session_factory", "import_models"]
