"""Database error mapping — SQLAlchemy exceptions become client-safe DatabaseErrors."""

import pytest
from sqlalchemy.exc import IntegrityError, OperationalError, SQLAlchemyError

from eureka.infrastructure.database import to_database_error


@pytest.mark.parametrize("exc,operation", [
    (IntegrityError("INSERT", {}, Exception("UNIQUE")), "commit"),
    (OperationalError("SELECT", {}, Exception("gone")), "execute"),
    (SQLAlchemyError("other"), "unknown"),
])
def test_mapping(exc, operation):
    error = to_database_error(exc)
    assert error.operation == operation
    assert error.http_status == 500
    assert "UNIQUE" not in error.message
