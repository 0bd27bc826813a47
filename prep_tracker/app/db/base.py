"""
Declarative base shared by all models
"""
import uuid

from sqlalchemy.orm import declarative_base

Base = declarative_base()


def new_id() -> str:
    """Opaque primary key assigned at insert time."""
    return str(uuid.uuid4())
