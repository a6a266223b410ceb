"""Materialization of Dublin Core metadata fields from templates and raw values."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Sequence, Union

from catalog_meta.domain.encoding.w3cdtf import decode_date
from catalog_meta.domain.listproviders.service import ListProvidersService, ResourceListQuery
from catalog_meta.domain.metadata.collection import MetadataCollection
from catalog_meta.domain.metadata.field import MetadataField
from catalog_meta.domain.metadata.parsing import (
    filter_blank,
    parse_boolean,
    parse_duration,
    parse_long,
    select_values,
)
from catalog_meta.infra.config.settings import settings
from catalog_meta.shared.enums import FieldType
from catalog_meta.shared.errors import ListProviderError, UnsupportedFieldTypeError
from catalog_meta.shared.logging import get_logger
from catalog_meta.shared.registry import Registry


logger = get_logger(__name__)

RawValues = Union[None, str, Sequence[Optional[str]]]


@dataclass
class Vocabulary:
    """What the list provider service knows about a field's option list."""

    translatable: Optional[bool] = None
    collection: Optional[Dict[str, str]] = None


FieldBuilder = Callable[[MetadataField, List[str], Vocabulary], MetadataField]

field_builders: Registry[FieldBuilder] = Registry(name="FieldBuilders")


# ----- list provider lookups (failures collapse to None) -----

def _lookup_default(
    template: MetadataField, list_providers: Optional[ListProvidersService]
) -> Optional[str]:
    if list_providers is None or not template.list_provider_id:
        return None
    try:
        return list_providers.get_default(template.list_provider_id)
    except ListProviderError as exc:
        # The default is optional, the field goes on without it
        logger.debug("No default for list provider %s: %s", template.list_provider_id, exc)
        return None


def _lookup_translatable(
    template: MetadataField, list_providers: Optional[ListProvidersService]
) -> Optional[bool]:
    if list_providers is None or not template.list_provider_id:
        return None
    try:
        return bool(list_providers.is_translatable(template.list_provider_id))
    except ListProviderError as exc:
        logger.debug(
            "Unable to read is-translatable of list provider %s: %s",
            template.list_provider_id, exc,
        )
        return None


def _lookup_collection(
    template: MetadataField, list_providers: Optional[ListProvidersService]
) -> Optional[Dict[str, str]]:
    if list_providers is None or not template.list_provider_id:
        return None
    try:
        collection = list_providers.get_list(
            template.list_provider_id, ResourceListQuery.empty(), True
        )
    except ListProviderError as exc:
        logger.warning("Unable to set collection on metadata because %s", exc)
        return None
    return dict(collection) if collection is not None else None


def lookup_vocabulary(
    template: MetadataField, list_providers: Optional[ListProvidersService]
) -> Vocabulary:
    """Ask the service for translatability and options; each lookup fails on its own."""
    return Vocabulary(
        translatable=_lookup_translatable(template, list_providers),
        collection=_lookup_collection(template, list_providers),
    )


# ----- per type builders -----

def _builds(*field_types: FieldType) -> Callable[[FieldBuilder], FieldBuilder]:
    def decorator(builder: FieldBuilder) -> FieldBuilder:
        for field_type in field_types:
            field_builders.register(field_type.value, builder)
        return builder
    return decorator


def _new_field(template: MetadataField, vocabulary: Vocabulary, **extra) -> MetadataField:
    return MetadataField(
        template.input_id,
        template.type,
        template.label,
        output_id=template.output_id,
        read_only=template.read_only,
        required=template.required,
        order=template.order,
        namespace=template.namespace,
        list_provider_id=template.list_provider_id,
        collection_id=template.collection_id,
        translatable=vocabulary.translatable,
        collection=vocabulary.collection,
        **extra,
    )


@_builds(FieldType.BOOLEAN)
def _build_boolean(template: MetadataField, values: List[str], vocabulary: Vocabulary) -> MetadataField:
    field = _new_field(template, vocabulary)
    if values:
        field.set_value(parse_boolean(values[-1]))
    return field


@_builds(FieldType.DATE)
def _build_date(template: MetadataField, values: List[str], vocabulary: Vocabulary) -> MetadataField:
    # The template keeps its own pattern, the default only goes to the new field.
    field = _new_field(template, vocabulary, pattern=template.pattern or settings.default_date_pattern)
    if values:
        decoded = decode_date(values[-1])
        if decoded is None:
            logger.debug("Unable to decode date '%s' of field %s.", values[-1], template.input_id)
        else:
            field.set_value(decoded)
    return field


@_builds(FieldType.START_DATE)
def _build_start_date(template: MetadataField, values: List[str], vocabulary: Vocabulary) -> MetadataField:
    field = _new_field(template, vocabulary, pattern=template.pattern or settings.default_date_pattern)
    if values:
        field.set_value(values[-1])
    return field


@_builds(FieldType.DURATION)
def _build_duration(template: MetadataField, values: List[str], vocabulary: Vocabulary) -> MetadataField:
    field = _new_field(template, vocabulary)
    if values:
        duration = parse_duration(values[-1])
        if duration is not None:
            field.set_value(duration)
    return field


@_builds(FieldType.ITERABLE_TEXT, FieldType.MIXED_TEXT)
def _build_iterable_text(template: MetadataField, values: List[str], vocabulary: Vocabulary) -> MetadataField:
    field = _new_field(template, vocabulary, delimiter=template.delimiter)
    if values:
        field.set_value(list(values))
    return field


@_builds(FieldType.LONG)
def _build_long(template: MetadataField, values: List[str], vocabulary: Vocabulary) -> MetadataField:
    field = _new_field(template, vocabulary)
    if values:
        # NumericParseError propagates to the caller
        field.set_value(parse_long(values[-1]))
    return field


@_builds(FieldType.TEXT, FieldType.TEXT_LONG, FieldType.ORDERED_TEXT)
def _build_text(template: MetadataField, values: List[str], vocabulary: Vocabulary) -> MetadataField:
    field = _new_field(template, vocabulary)
    if values:
        field.set_value(values[-1])
    return field


_missing_builders = [t.value for t in FieldType if t.value not in field_builders]
if _missing_builders:
    raise RuntimeError(f"No field builder registered for {_missing_builders}")


# ----- materialization -----

def _as_list(values: RawValues) -> List[Optional[str]]:
    if values is None:
        return []
    if isinstance(values, str):
        return [values]
    return list(values)


def materialize_field(
    template: MetadataField,
    values: RawValues = None,
    list_providers: Optional[ListProvidersService] = None,
) -> MetadataField:
    """
    Build a new, typed and populated field from a template.

    Steps: drop blank values; fall back to the list provider default when
    nothing is left; keep only the last value for single-valued types;
    attach translatability and option list; coerce the value per type.
    List provider failures are swallowed. A malformed LONG value raises
    NumericParseError and an unknown type UnsupportedFieldTypeError.
    The template and the caller's values are not modified.
    """
    field_type = FieldType.parse(template.type)
    builder = field_builders.get(field_type.value)
    if builder is None:
        raise UnsupportedFieldTypeError(f"Unknown metadata type! {field_type.value}")

    filtered = filter_blank(_as_list(values))

    default = _lookup_default(template, list_providers)
    if not filtered and default is not None and default.strip():
        filtered = [default]

    selected = select_values(field_type, filtered)
    vocabulary = lookup_vocabulary(template, list_providers)
    return builder(template, selected, vocabulary)


class DublinCoreMetadataCollection(MetadataCollection):
    """Metadata collection that materializes fields from templates."""

    def add_field(
        self,
        field: MetadataField,
        values: RawValues = None,
        list_providers: Optional[ListProvidersService] = None,
    ) -> MetadataField:
        """
        Materialize ``field`` with ``values`` and put the result in the collection.

        ``values`` may be None, one string or a sequence of strings.
        Returns the field that was added.
        """
        materialized = materialize_field(field, values, list_providers)
        self.put_field(materialized)
        return materialized
