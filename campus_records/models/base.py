"""
Base model configuration for SQLAlchemy ORM.

All model classes inherit from ``Base`` so that table creation picks them
up from a single metadata object.
"""

from sqlalchemy.orm import declarative_base

Base = declarative_base()
