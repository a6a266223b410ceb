"""In-memory list provider service."""
from __future__ import annotations

from itertools import islice
from typing import Dict, List, Optional

from catalog_meta.domain.listproviders.loader import ListProviderDefinition
from catalog_meta.domain.listproviders.service import ResourceListQuery
from catalog_meta.infra.config.settings import settings
from catalog_meta.shared.errors import ListProviderError
from catalog_meta.shared.logging import get_logger
from catalog_meta.shared.registry import Registry


logger = get_logger(__name__)


class InMemoryListProvidersService:
    """
    ListProvidersService over definitions held in a Registry.

    Used by tests and by deployments that ship their vocabularies as JSON
    files (see loader.load_list_providers).
    """

    def __init__(self, definitions: Optional[List[ListProviderDefinition]] = None) -> None:
        self._providers: Registry[ListProviderDefinition] = Registry(name="ListProviders")
        for definition in definitions or []:
            self.register(definition)

    def register(self, definition: ListProviderDefinition) -> ListProviderDefinition:
        if definition.id in self._providers:
            logger.info("Replacing list provider %s", definition.id)
        return self._providers.register(definition.id, definition)

    def unregister(self, list_id: str) -> None:
        self._providers.unregister(list_id)

    def list_ids(self) -> List[str]:
        return self._providers.names()

    def _require(self, list_id: str) -> ListProviderDefinition:
        definition = self._providers.get(list_id)
        if definition is None:
            raise ListProviderError(f"No list provider registered for {list_id!r}", list_id=list_id)
        return definition

    # ----- ListProvidersService -----

    def is_translatable(self, list_id: str) -> bool:
        return self._require(list_id).translatable

    def get_default(self, list_id: str) -> Optional[str]:
        return self._require(list_id).default

    def get_list(
        self, list_id: str, query: ResourceListQuery, translate: bool
    ) -> Optional[Dict[str, str]]:
        definition = self._require(list_id)
        query = query or ResourceListQuery.empty()

        labels = dict(definition.options)
        if translate and definition.translatable:
            translated = definition.translations.get(settings.locale, {})
            labels = {key: translated.get(key, label) for key, label in labels.items()}

        key_filter = (query.filters.get("key") or "").lower()
        label_filter = (query.filters.get("label") or "").lower()
        items = (
            (key, label)
            for key, label in labels.items()
            if key_filter in key.lower() and label_filter in label.lower()
        )

        start = max(query.offset or 0, 0)
        stop = start + query.limit if query.limit is not None and query.limit >= 0 else None
        return dict(islice(items, start, stop))
