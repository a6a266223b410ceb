"""Custom exception classes for the metadata package."""
from __future__ import annotations


class ListProviderError(Exception):
    """Raised when a list provider is unknown or cannot answer a lookup."""
    def __init__(self, message: str, list_id: str | None = None) -> None:
        super().__init__(message)
        self.list_id = list_id


class UnsupportedFieldTypeError(ValueError):
    """Raised when a field type is outside the supported set."""


class NumericParseError(ValueError):
    """Raised when a numeric field value is not a base-10 integer."""
    def __init__(self, message: str, value: str | None = None) -> None:
        super().__init__(message)
        self.value = value


class FieldValueError(TypeError):
    """Raised when a value does not match the shape of its field type."""
