"""Unit tests for provider selection."""

import pytest

from sonic.util.di import (
    PersistenceProvider,
    ProdConfigProvider,
    ProdPersistenceProvider,
    get_provider,
    mockable_components,
)
from tests.di import MockPersistenceProvider, build_test_container


class TestProviderSelection:
    """Tests for get_provider and build_test_container."""

    def test_concrete_provider_used_as_is(self):
        assert get_provider(ProdConfigProvider, use_mock=True) is ProdConfigProvider

    def test_component_resolves_by_mock_flag(self):
        assert get_provider(PersistenceProvider) is ProdPersistenceProvider
        assert get_provider(PersistenceProvider, use_mock=True) is MockPersistenceProvider

    def test_mockable_components(self):
        assert mockable_components() == {"persistence"}

    def test_unknown_component_rejected(self):
        with pytest.raises(ValueError):
            build_test_container(unmock={"bluetooth"})
