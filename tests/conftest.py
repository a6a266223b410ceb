"""Pytest configuration and fixtures for test suite."""
# pylint: disable=redefined-outer-name
import sys
from pathlib import Path
from typing import Dict, List, Optional

import pytest

# Put the project root first on sys.path so catalog_meta.* imports work without installing
PROJECT_ROOT = Path(__file__).resolve().parents[1]
ROOT_STR = str(PROJECT_ROOT)
if ROOT_STR in sys.path:
    sys.path.remove(ROOT_STR)
sys.path.insert(0, ROOT_STR)

from catalog_meta.domain.listproviders.loader import ListProviderDefinition  # noqa: E402
from catalog_meta.domain.listproviders.memory import InMemoryListProvidersService  # noqa: E402
from catalog_meta.shared.errors import ListProviderError  # noqa: E402


@pytest.fixture
def mock_settings(tmp_path):
    """Overrides settings with test values and restores them afterwards."""
    # pylint: disable=import-outside-toplevel
    from catalog_meta.infra.config.settings import DEFAULT_DATE_PATTERN, settings

    keys_to_update = [
        "env", "is_dev", "is_prod", "assets_root", "list_providers_root",
        "default_date_pattern", "locale", "log_value_max_length",
    ]
    original_values = {key: getattr(settings, key) for key in keys_to_update}

    settings.env = "test"
    settings.is_dev = True
    settings.is_prod = False
    settings.assets_root = tmp_path / "assets"
    settings.list_providers_root = settings.assets_root / "list_providers"
    settings.default_date_pattern = DEFAULT_DATE_PATTERN
    settings.locale = "en"
    settings.log_value_max_length = 200
    settings.list_providers_root.mkdir(parents=True, exist_ok=True)

    yield settings

    for key, value in original_values.items():
        setattr(settings, key, value)


@pytest.fixture
def list_providers():
    """In-memory list provider service with a few vocabularies."""
    return InMemoryListProvidersService([
        ListProviderDefinition(
            id="LANGUAGES",
            options={"eng": "LANGUAGES.ENGLISH", "deu": "LANGUAGES.GERMAN", "fra": "LANGUAGES.FRENCH"},
            default="eng",
            translatable=True,
            translations={
                "en": {"eng": "English", "deu": "German"},
                "de": {"eng": "Englisch", "deu": "Deutsch", "fra": "Franzoesisch"},
            },
        ),
        ListProviderDefinition(
            id="LICENSES",
            options={"CC-BY": "Creative Commons BY", "ALLRIGHTS": "All rights reserved"},
        ),
        ListProviderDefinition(
            id="BLANK_DEFAULT",
            options={"a": "A"},
            default="   ",
        ),
    ])


class FailingListProviders:
    """
    List provider service that fails selected lookups.

    Every call is recorded in ``calls`` so tests can check which lookups
    were attempted.
    """

    def __init__(
        self,
        fail: Optional[List[str]] = None,
        default: Optional[str] = None,
        translatable: bool = True,
        options: Optional[Dict[str, str]] = None,
    ) -> None:
        self.fail = set(fail or [])
        self.default = default
        self.translatable = translatable
        self.options = options
        self.calls: List[str] = []

    def _maybe_fail(self, name: str, list_id: str) -> None:
        self.calls.append(name)
        if name in self.fail:
            raise ListProviderError(f"{name} failed for {list_id}", list_id=list_id)

    def is_translatable(self, list_id):
        self._maybe_fail("is_translatable", list_id)
        return self.translatable

    def get_default(self, list_id):
        self._maybe_fail("get_default", list_id)
        return self.default

    def get_list(self, list_id, query, translate):  # pylint: disable=unused-argument
        self._maybe_fail("get_list", list_id)
        return self.options


@pytest.fixture
def failing_list_providers():
    """Factory for FailingListProviders instances."""
    return FailingListProviders
