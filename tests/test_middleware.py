"""
Tests for request logging middleware helpers
"""

import pytest

from users_api.middleware import operation_name_from_document, sanitize_query_params


@pytest.mark.unit
class TestSanitizeQueryParams:
    def test_redacts_sensitive_keys(self):
        sanitized = sanitize_query_params({"access_token": "abc", "page": "2"})

        assert sanitized == {"access_token": "[REDACTED]", "page": "2"}

    def test_match_is_case_insensitive(self):
        assert sanitize_query_params({"X-Api-Key": "k"}) == {"X-Api-Key": "[REDACTED]"}


@pytest.mark.unit
class TestOperationName:
    def test_explicit_operation_name_wins(self):
        assert operation_name_from_document("Users", "query Other { users { id } }") == "Users"

    def test_named_query(self):
        assert operation_name_from_document(None, "query Users { users { id } }") == "Users"

    def test_named_mutation_is_prefixed(self):
        doc = 'mutation Remove { deleteUser(id: "1") { id } }'

        assert operation_name_from_document(None, doc) == "mutation:Remove"

    def test_anonymous_operation(self):
        assert operation_name_from_document(None, "{ users { id } }") == "unnamed_operation"

    def test_introspection(self):
        assert operation_name_from_document(None, "{ __schema { types { name } } }") == (
            "__introspection"
        )

    def test_missing_query(self):
        assert operation_name_from_document(None, None) is None
