"""Contract of the list provider (vocabulary) service consumed by metadata code."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Optional, Protocol


@dataclass
class ResourceListQuery:
    """Paging and filtering options for a list lookup."""

    limit: Optional[int] = None
    offset: Optional[int] = None
    filters: Dict[str, str] = field(default_factory=dict)

    @classmethod
    def empty(cls) -> "ResourceListQuery":
        return cls()


class ListProvidersService(Protocol):
    """
    Minimal contract used while materializing fields.

    Every method raises ListProviderError when the list is unknown or the
    backing store is unavailable:
      - is_translatable(list_id) -> whether option labels are translation keys
      - get_default(list_id) -> default option key, or None
      - get_list(list_id, query, translate) -> {key: label}, or None
    """
    def is_translatable(self, list_id: str) -> bool: ...
    def get_default(self, list_id: str) -> Optional[str]: ...
    def get_list(
        self, list_id: str, query: ResourceListQuery, translate: bool
    ) -> Optional[Dict[str, str]]: ...
