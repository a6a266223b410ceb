"""Ordered collection of metadata fields."""
from __future__ import annotations

from typing import Dict, List

from catalog_meta.domain.metadata.field import MetadataField
from catalog_meta.shared.errors import FieldValueError


class MetadataCollection:
    """
    Fields of one catalog in display order.

    Fields without an ``order`` keep their insertion order. Fields with an
    ``order`` are placed at that index, lowest order first, so later entries
    do not push earlier ones to the right. Equal orders keep their
    arrival order. An index past the end appends.
    """

    def __init__(self) -> None:
        self._fields: List[MetadataField] = []

    @property
    def fields(self) -> List[MetadataField]:
        return list(self._fields)

    @property
    def input_fields(self) -> Dict[str, MetadataField]:
        return {f.input_id: f for f in self._fields}

    @property
    def output_fields(self) -> Dict[str, MetadataField]:
        return {f.output_id: f for f in self._fields}

    def put_field(self, field: MetadataField) -> None:
        """Add a built field, replacing any field with the same input id."""
        if field is None:
            raise ValueError("The metadata field must not be None.")
        self._remove_input_id(field.input_id)

        ordered: List[MetadataField] = []
        unordered: List[MetadataField] = []
        for existing in self._fields + [field]:
            (unordered if existing.order is None else ordered).append(existing)
        ordered.sort(key=lambda f: f.order)

        arranged = list(unordered)
        placed: Dict[int, int] = {}
        for ordered_field in ordered:
            # equal orders keep their arrival order
            index = max(ordered_field.order, 0) + placed.get(ordered_field.order, 0)
            placed[ordered_field.order] = placed.get(ordered_field.order, 0) + 1
            arranged.insert(min(index, len(arranged)), ordered_field)
        self._fields = arranged

    def remove_field(self, field: MetadataField) -> None:
        if field is None:
            raise ValueError("The metadata field must not be None.")
        self._remove_input_id(field.input_id)

    def _remove_input_id(self, input_id: str) -> None:
        self._fields = [f for f in self._fields if f.input_id != input_id]

    def update_string_field(self, current: MetadataField, value: str) -> None:
        """Set a new string value on a text-valued field and put it back."""
        if current.value is not None and not isinstance(current.value, str):
            raise FieldValueError(
                f"Unable to update the non string metadata field {current.input_id!r}"
            )
        current.set_value(value)
        self.put_field(current)

    def is_updated(self) -> bool:
        return any(f.updated for f in self._fields)

    def get_copy(self) -> "MetadataCollection":
        """
        New collection of the same class with an independent copy of every field.
        """
        copied = type(self)()
        copied._fields = [field.copy() for field in self._fields]
        return copied

    def __len__(self) -> int:
        return len(self._fields)

    def __iter__(self):
        return iter(list(self._fields))

    def __contains__(self, input_id: object) -> bool:
        return any(f.input_id == input_id for f in self._fields)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({[f.input_id for f in self._fields]!r})"
