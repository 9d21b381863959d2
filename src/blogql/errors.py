"""
Client-facing GraphQL errors raised by resolvers.

Each error carries a stable ``extensions["code"]`` so clients can branch on
the failure kind rather than parse messages.
"""

from typing import Any

from graphql import GraphQLError


class BlogqlError(GraphQLError):
    """Base class for errors that are part of the API contract."""

    code = "INTERNAL"

    def __init__(self, message: str, **extensions: Any):
        super().__init__(message, extensions={"code": self.code, **extensions})


class NotFoundError(BlogqlError):
    """A lookup by identifier matched no document."""

    code = "NOT_FOUND"

    def __init__(self, kind: str, id: str):
        super().__init__(f"{kind} with ID {id} not found", kind=kind, id=id)
        self.kind = kind
        self.id = id


class InvalidArgumentError(BlogqlError):
    """An argument could not be accepted, typically a malformed identifier."""

    code = "INVALID_ARGUMENT"

    def __init__(self, argument: str, value: Any, reason: str | None = None):
        message = reason or f"Invalid identifier for '{argument}': {value!r}"
        super().__init__(message, argument=argument, value=str(value))
        self.argument = argument
        self.value = value


class AlreadyExistsError(BlogqlError):
    """A uniqueness constraint was violated on creation."""

    code = "ALREADY_EXISTS"

    def __init__(self, kind: str, field: str, value: str):
        super().__init__(f"{kind} with {field} {value} already exists", kind=kind, field=field)
        self.kind = kind
        self.field = field
