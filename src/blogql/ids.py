"""
Identifier coercion between client strings and MongoDB ObjectIds
"""

from collections.abc import Iterable

from bson import ObjectId

from .errors import InvalidArgumentError


def parse_object_id(value: str, argument: str = "id") -> ObjectId:
    """Coerce a client-supplied identifier string into an ObjectId.

    Raises:
        InvalidArgumentError: If the value is not a 24-character hex ObjectId
    """
    if isinstance(value, ObjectId):
        return value
    if not isinstance(value, str) or not ObjectId.is_valid(value):
        raise InvalidArgumentError(argument, value)
    return ObjectId(value)


def parse_object_ids(values: Iterable[str] | None, argument: str) -> list[ObjectId]:
    """Coerce every entry of an identifier list, failing on the first bad one."""
    if not values:
        return []
    return [parse_object_id(value, argument) for value in values]


def format_object_id(value: ObjectId | str) -> str:
    return str(value)


def format_optional_object_id(value: ObjectId | str | None) -> str | None:
    return str(value) if value is not None else None
