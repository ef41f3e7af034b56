"""
Failure types raised by the catalog data-access layer.
Lookups that match nothing return None; everything below means the query itself failed.
"""

from typing import Optional


class CatalogError(Exception):
    """Base class for catalog data-access failures."""


class QueryExecutionError(CatalogError):
    """The database rejected or failed to run a statement."""

    def __init__(self, message: str, statement: Optional[str] = None, original: Optional[BaseException] = None):
        super().__init__(message)
        self.statement = statement
        self.original = original


class ConstraintViolationError(QueryExecutionError):
    """A statement violated a table constraint (unique, foreign key, not null, check)."""


class EmailAlreadyRegisteredError(ConstraintViolationError):
    """A user with the same email already exists."""

    def __init__(self, email: str, statement: Optional[str] = None, original: Optional[BaseException] = None):
        super().__init__(f"User with email {email} already exists", statement=statement, original=original)
        self.email = email
