"""Error hierarchy: status codes and the flat {"error": ...} envelope."""

from inventory.core.errors import (
    DatabaseError, ErrorCategory, PayloadValidationError, ResourceNotFoundError,
)


def test_not_found_message_is_fixed_per_entity():
    err = ResourceNotFoundError("Maintenance log", "12")
    assert err.http_status == 404
    assert err.category == ErrorCategory.RESOURCE_NOT_FOUND
    assert err.to_response() == {"error": "Maintenance log not found"}
    assert err.context.entity_id == "12"


def test_database_error_keeps_driver_message_verbatim():
    err = DatabaseError('duplicate key value violates unique constraint "users_email_key"', "commit")
    assert err.http_status == 500
    assert err.to_response() == {
        "error": 'duplicate key value violates unique constraint "users_email_key"',
    }
    assert err.operation == "commit"


def test_payload_validation_is_400():
    assert PayloadValidationError("bad").http_status == 400
