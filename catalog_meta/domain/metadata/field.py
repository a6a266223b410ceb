"""Typed metadata field descriptor."""
from __future__ import annotations

import datetime as dt
from typing import Any, Dict, List, Optional, Union

from catalog_meta.shared.enums import FieldType
from catalog_meta.shared.errors import FieldValueError


FieldValue = Union[bool, int, str, dt.datetime, List[str]]

_STRING_TYPES = {
    FieldType.TEXT,
    FieldType.TEXT_LONG,
    FieldType.ORDERED_TEXT,
    FieldType.START_DATE,
}
_INTEGER_TYPES = {FieldType.DURATION, FieldType.LONG}


def _coerce_value(field_type: FieldType, value: Any) -> FieldValue:
    """Check value against field_type and return the form stored on the field."""
    if field_type is FieldType.BOOLEAN and isinstance(value, bool):
        return value
    if field_type is FieldType.DATE and isinstance(value, dt.datetime):
        return value
    if field_type in _INTEGER_TYPES and isinstance(value, int) and not isinstance(value, bool):
        return value
    if field_type in _STRING_TYPES and isinstance(value, str):
        return value
    if field_type.is_multi_valued and not isinstance(value, (str, bytes)):
        try:
            items = list(value)
        except TypeError:
            items = None
        if items is not None and all(isinstance(item, str) for item in items):
            return items
    raise FieldValueError(
        f"Value of type {type(value).__name__} does not fit a {field_type.value} field"
    )


class MetadataField:
    """
    One catalog attribute: descriptor plus an optional value.

    The value always has the runtime shape of ``type`` (see ``set_value``).
    ``pattern`` only survives on date fields and ``delimiter`` only on
    multi-valued text fields.
    """

    def __init__(
        self,
        input_id: str,
        type: Union[FieldType, str],  # pylint: disable=redefined-builtin
        label: str = "",
        *,
        output_id: Optional[str] = None,
        value: Any = None,
        read_only: bool = False,
        required: bool = False,
        order: Optional[int] = None,
        namespace: Optional[str] = None,
        pattern: Optional[str] = None,
        delimiter: Optional[str] = None,
        list_provider_id: Optional[str] = None,
        collection_id: Optional[str] = None,
        translatable: Optional[bool] = None,
        collection: Optional[Dict[str, str]] = None,
    ) -> None:
        self.input_id = input_id
        self.output_id = output_id or input_id
        self.type = FieldType.parse(type)
        self.label = label
        self.read_only = read_only
        self.required = required
        self.order = order
        self.namespace = namespace
        self.pattern = pattern if self.type.accepts_pattern else None
        self.delimiter = delimiter if self.type.is_multi_valued else None
        self.list_provider_id = list_provider_id
        self.collection_id = collection_id
        self.translatable = translatable
        self.collection = dict(collection) if collection is not None else None
        self._value: Optional[FieldValue] = None
        self.updated = False
        if value is not None:
            self._value = _coerce_value(self.type, value)

    # ----- value -----

    @property
    def value(self) -> Optional[FieldValue]:
        """The current value; list values are returned as a copy, use set_value to change them."""
        if isinstance(self._value, list):
            return list(self._value)
        return self._value

    def set_value(self, value: Any) -> None:
        """
        Assign a value, marking the field as updated.

        None clears the value. Anything that does not match the field type
        raises FieldValueError and leaves the field untouched.
        """
        self._value = None if value is None else _coerce_value(self.type, value)
        self.updated = True

    @property
    def has_value(self) -> bool:
        return self._value is not None

    # ----- copies -----

    def copy(self) -> "MetadataField":
        """Independent copy; list values and the option collection are duplicated."""
        copied = MetadataField(
            self.input_id,
            self.type,
            self.label,
            output_id=self.output_id,
            read_only=self.read_only,
            required=self.required,
            order=self.order,
            namespace=self.namespace,
            pattern=self.pattern,
            delimiter=self.delimiter,
            list_provider_id=self.list_provider_id,
            collection_id=self.collection_id,
            translatable=self.translatable,
            collection=self.collection,
        )
        value = self._value
        if isinstance(value, list):
            value = list(value)
        copied._value = value
        copied.updated = self.updated
        return copied

    # ----- factories -----

    @classmethod
    def boolean(cls, input_id: str, label: str = "", **kwargs: Any) -> "MetadataField":
        return cls(input_id, FieldType.BOOLEAN, label, **kwargs)

    @classmethod
    def date(cls, input_id: str, label: str = "", **kwargs: Any) -> "MetadataField":
        return cls(input_id, FieldType.DATE, label, **kwargs)

    @classmethod
    def start_date(cls, input_id: str, label: str = "", **kwargs: Any) -> "MetadataField":
        return cls(input_id, FieldType.START_DATE, label, **kwargs)

    @classmethod
    def duration(cls, input_id: str, label: str = "", **kwargs: Any) -> "MetadataField":
        return cls(input_id, FieldType.DURATION, label, **kwargs)

    @classmethod
    def iterable_text(cls, input_id: str, label: str = "", **kwargs: Any) -> "MetadataField":
        return cls(input_id, FieldType.ITERABLE_TEXT, label, **kwargs)

    @classmethod
    def mixed_text(cls, input_id: str, label: str = "", **kwargs: Any) -> "MetadataField":
        return cls(input_id, FieldType.MIXED_TEXT, label, **kwargs)

    @classmethod
    def long(cls, input_id: str, label: str = "", **kwargs: Any) -> "MetadataField":
        return cls(input_id, FieldType.LONG, label, **kwargs)

    @classmethod
    def text(cls, input_id: str, label: str = "", **kwargs: Any) -> "MetadataField":
        return cls(input_id, FieldType.TEXT, label, **kwargs)

    @classmethod
    def text_long(cls, input_id: str, label: str = "", **kwargs: Any) -> "MetadataField":
        return cls(input_id, FieldType.TEXT_LONG, label, **kwargs)

    @classmethod
    def ordered_text(cls, input_id: str, label: str = "", **kwargs: Any) -> "MetadataField":
        return cls(input_id, FieldType.ORDERED_TEXT, label, **kwargs)

    @classmethod
    def from_dict(cls, raw: Dict[str, Any]) -> "MetadataField":
        """
        Build a field template from a configuration mapping.

        Keys mirror the constructor arguments; ``id`` is accepted for
        ``input_id``. An unknown ``type`` raises UnsupportedFieldTypeError.
        """
        data = dict(raw)
        alias = data.pop("id", None)
        input_id = data.pop("input_id", None) or alias
        field_type = data.pop("type")
        label = data.pop("label", input_id)
        return cls(input_id, field_type, label, **data)

    def __repr__(self) -> str:
        return (
            f"MetadataField(input_id={self.input_id!r}, type={self.type.value!r}, "
            f"value={self._value!r})"
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MetadataField):
            return NotImplemented
        return self._state() == other._state()

    def __hash__(self) -> int:
        return hash((self.input_id, self.output_id, self.type))

    def _state(self) -> tuple:
        value = tuple(self._value) if isinstance(self._value, list) else self._value
        collection = tuple(sorted(self.collection.items())) if self.collection else self.collection
        return (
            self.input_id, self.output_id, self.type, self.label, self.read_only,
            self.required, self.order, self.namespace, self.pattern, self.delimiter,
            self.list_provider_id, self.collection_id, self.translatable, collection, value,
        )

