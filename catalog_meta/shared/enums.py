"""Common enumerations used across the metadata package."""
from __future__ import annotations

from enum import Enum
from typing import Union

from catalog_meta.shared.errors import UnsupportedFieldTypeError


class FieldType(str, Enum):
    """Closed set of metadata field types."""

    BOOLEAN = "boolean"
    DATE = "date"
    DURATION = "duration"
    ITERABLE_TEXT = "iterable_text"
    MIXED_TEXT = "mixed_text"
    LONG = "long"
    TEXT = "text"
    TEXT_LONG = "text_long"
    START_DATE = "start_date"
    ORDERED_TEXT = "ordered_text"

    @classmethod
    def parse(cls, raw: Union["FieldType", str, None]) -> "FieldType":
        """
        Resolve a field type from an enum member or its name/value.

        Raw strings usually come from configuration files, so both
        "ITERABLE_TEXT" and "iterable_text" are accepted.
        """
        if isinstance(raw, cls):
            return raw
        if isinstance(raw, str):
            key = raw.strip().lower()
            for member in cls:
                if member.value == key:
                    return member
        raise UnsupportedFieldTypeError(f"Unknown metadata type! {raw!r}")

    @property
    def is_multi_valued(self) -> bool:
        return self in (FieldType.ITERABLE_TEXT, FieldType.MIXED_TEXT)

    @property
    def accepts_pattern(self) -> bool:
        return self in (FieldType.DATE, FieldType.START_DATE)
