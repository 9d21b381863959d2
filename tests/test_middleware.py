"""
Tests for request logging middleware helpers
"""

import pytest

from blogql.middleware import operation_name_from_payload, sanitize_query_params


def test_sanitize_redacts_sensitive_keys():
    params = {"password": "pw", "Authorization": "Bearer x", "q": "hello"}

    assert sanitize_query_params(params) == {
        "password": "[REDACTED]",
        "Authorization": "[REDACTED]",
        "q": "hello",
    }


@pytest.mark.parametrize(
    "payload, expected",
    [
        ({"operationName": "GetUsers", "query": "query Other { users { id } }"}, "GetUsers"),
        ({"query": "query ListUsers { users { id } }"}, "ListUsers"),
        ({"query": "mutation CreateUser { createUser { id } }"}, "mutation:CreateUser"),
        ({"query": "{ users { id } }"}, "unnamed_operation"),
        ({"query": "mutation { createUser { id } }"}, "mutation:unnamed_operation"),
        ({"query": "query IntrospectionQuery { __schema { types { name } } }"}, "__introspection"),
        ({}, None),
    ],
)
def test_operation_name_from_payload(payload, expected):
    assert operation_name_from_payload(payload) == expected
