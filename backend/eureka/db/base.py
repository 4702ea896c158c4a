"""Declarative Base — the one MetaData every Eureka table is registered on.

Invariants:
    - Every ORM model subclasses Base, so Base.metadata is the complete schema
      for create_all and for alembic autogenerate
    - Constraint and index names are deterministic (naming convention below),
      so migrations can drop or alter them by name on any backend
"""

from sqlalchemy import MetaData
from sqlalchemy.orm import DeclarativeBase

NAMING_CONVENTION = {
    "ix": "ix_%(table_name)s_%(column_0_name)s",
    "uq": "uq_%(table_name)s_%(column_0_name)s",
    "ck": "ck_%(table_name)s_%(constraint_name)s",
    "fk": "fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s",
}


class Base(DeclarativeBase):
    metadata = MetaData(naming_convention=NAMING_CONVENTION)
