"""Loading list provider definitions from JSON files."""
from __future__ import annotations

import json
from pathlib import Path
from typing import TYPE_CHECKING, Dict, List, Optional

from pydantic import BaseModel, Field, ValidationError

from catalog_meta.infra.config.settings import settings
from catalog_meta.shared.errors import ListProviderError
from catalog_meta.shared.logging import get_logger

if TYPE_CHECKING:
    from catalog_meta.domain.listproviders.memory import InMemoryListProvidersService


logger = get_logger(__name__)


class ListProviderDefinition(BaseModel):
    """One vocabulary: option keys with their labels."""

    id: str
    options: Dict[str, str] = Field(default_factory=dict)
    default: Optional[str] = None
    translatable: bool = False
    # locale -> option key -> label
    translations: Dict[str, Dict[str, str]] = Field(default_factory=dict)


def _read_definitions(path: Path) -> List[ListProviderDefinition]:
    try:
        with path.open("r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as exc:
        raise ListProviderError(f"{path}: unreadable list provider file ({exc})") from exc

    raw_items = data.get("providers") if isinstance(data, dict) and "providers" in data else [data]
    if not isinstance(raw_items, list):
        raise ListProviderError(f"{path}: 'providers' must be a list")

    definitions: List[ListProviderDefinition] = []
    for raw in raw_items:
        try:
            definitions.append(ListProviderDefinition.model_validate(raw))
        except ValidationError as exc:
            raise ListProviderError(f"{path}: invalid list provider definition ({exc})") from exc
    return definitions


def load_list_providers(path: Optional[str | Path] = None) -> "InMemoryListProvidersService":
    """
    Build an in-memory service from every *.json file in a directory.

    Files are read in name order, so a later file overrides an earlier
    definition with the same id. A missing directory gives an empty service.
    """
    # pylint: disable=import-outside-toplevel
    from catalog_meta.domain.listproviders.memory import InMemoryListProvidersService

    service = InMemoryListProvidersService()
    root = Path(path) if path else settings.list_providers_root
    if not root.exists() or not root.is_dir():
        logger.warning("List providers directory not found at %s", root)
        return service

    for json_file in sorted(root.glob("*.json")):
        for definition in _read_definitions(json_file):
            service.register(definition)
    logger.info("Loaded %d list providers from %s", len(service.list_ids()), root)
    return service
