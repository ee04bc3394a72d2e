"""Error Hierarchy: status codes and the REST error envelope.

Tests:
    - Every error maps to its HTTP status
    - to_response() is {"message", "code"} and never carries internals
    - ErrorContext only carries timestamp, entity and entity id
"""

from dataclasses import fields

from gastromed.core.errors import (
    AuthenticationError, ConstraintError, ErrorContext, InvalidRequestError,
    PermissionDeniedError, PersistenceError, ResourceNotFoundError,
)


def test_not_found_message_names_the_entity():
    err = ResourceNotFoundError("Patient", "p-1")
    assert err.http_status == 404
    assert err.to_response() == {"message": "Patient not found", "code": "RESOURCE_NOT_FOUND"}
    assert err.context.entity_id == "p-1"


def test_client_error_statuses():
    assert InvalidRequestError("Search query is required").http_status == 400
    assert AuthenticationError().http_status == 401
    assert AuthenticationError().message == "Invalid credentials"
    assert PermissionDeniedError("manage_users").http_status == 403


def test_persistence_errors_are_generic_500s():
    err = PersistenceError("insert")
    assert err.http_status == 500
    assert err.to_response()["message"] == "Database operation failed"


def test_constraint_error_is_a_persistence_error():
    err = ConstraintError("insert")
    assert isinstance(err, PersistenceError)
    assert err.code == "CONSTRAINT_VIOLATION"
    assert err.http_status == 500


def test_error_context_fields():
    assert [f.name for f in fields(ErrorContext)] == ["timestamp", "entity", "entity_id"]
