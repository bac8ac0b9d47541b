"""SQLAlchemy declarative base for userhub_auth models.

Auth tables live on their own metadata; the application creates them
alongside its own tables at startup.
"""

from sqlalchemy.orm import DeclarativeBase


class AuthBase(DeclarativeBase):
    """Declarative base for userhub_auth models."""
