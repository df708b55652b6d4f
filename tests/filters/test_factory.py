"""
Tests for FilterFactory.
"""

import pytest

from cardfilter.cards import sample_cards
from cardfilter.core.config.models import FilterConfig
from cardfilter.core.exceptions import (
    ConfigurationError, ErrorCode, FilterDefinitionError, UnknownFilterError
)
from cardfilter.filters.base import Filter, builder
from cardfilter.filters.cost import CostFilter
from cardfilter.filters.factory import FilterFactory
from cardfilter.filters.leader import LeaderFilter
from cardfilter.filters.meta import MetaFilter
from cardfilter.filters.version import VersionFilter


class NameFilter(Filter):
    """Accept cards whose name is in a list, for registration tests."""

    name = "Name Filter"
    description = "Cards with an accepted name"

    def __init__(self):
        super().__init__()
        self.names = []

    @builder
    def add_name(self, value):
        self.names.append(value)
        return self

    def evaluate(self, card) -> bool:
        return card.name in self.names


class TestCreateFilter:
    """Test single filter creation."""

    def test_create_cost_filter(self):
        filter_obj = FilterFactory.create_filter('cost', {'max_cost': 50})
        assert isinstance(filter_obj, CostFilter)
        assert filter_obj.max_cost == 50.0
        assert filter_obj.min_cost == 0.0

    def test_create_version_filter(self):
        filter_obj = FilterFactory.create_filter('version', {'versions': [1, 3]})
        assert isinstance(filter_obj, VersionFilter)
        assert filter_obj.versions == [1, 3]

    def test_create_without_config(self):
        assert FilterFactory.create_filter('leader').leaders == []

    def test_unknown_filter_type(self):
        with pytest.raises(UnknownFilterError) as exc_info:
            FilterFactory.create_filter('colour')
        assert exc_info.value.error_code == ErrorCode.FILTER_UNKNOWN_TYPE
        assert "cost" in exc_info.value.message

    def test_unknown_option(self):
        with pytest.raises(ConfigurationError) as exc_info:
            FilterFactory.create_filter('cost', {'maximum': 50})
        assert exc_info.value.error_code == ErrorCode.CONFIG_INVALID_VALUE
        assert exc_info.value.context.user_context['config_key'] == 'maximum'


class TestCreateMetaFilter:
    """Test composed filter creation."""

    def test_components_follow_list_order(self):
        meta = FilterFactory.create_meta_filter([
            {'type': 'version', 'config': {'versions': [1, 3]}},
            {'type': 'cost', 'config': {'max_cost': 50}},
        ])
        assert isinstance(meta, MetaFilter)
        assert [type(c) for c in meta.components] == [VersionFilter, CostFilter]
        assert [card.id for card in sample_cards() if meta.evaluate(card)] == [0, 1, 2]

    def test_missing_type(self):
        with pytest.raises(ConfigurationError, match="missing 'type'"):
            FilterFactory.create_meta_filter([{'config': {}}])

    def test_duplicate_types(self):
        with pytest.raises(FilterDefinitionError):
            FilterFactory.create_meta_filter([{'type': 'cost'}, {'type': 'cost'}])

    def test_empty_list(self):
        with pytest.raises(FilterDefinitionError):
            FilterFactory.create_meta_filter([])

    def test_bad_value(self):
        """Test unparsable option values surface as configuration errors."""
        with pytest.raises(ConfigurationError) as exc_info:
            FilterFactory.create_meta_filter([{'type': 'cost', 'config': {'max_cost': 'lots'}}])
        assert isinstance(exc_info.value.cause, ValueError)

    def test_non_mapping_options(self):
        with pytest.raises(ConfigurationError, match="must be a mapping") as exc_info:
            FilterFactory.create_meta_filter([{'type': 'cost', 'config': ['max_cost', 50]}])
        assert exc_info.value.error_code == ErrorCode.CONFIG_INVALID_VALUE

    def test_non_mapping_entry(self):
        with pytest.raises(ConfigurationError, match="Filter configuration 1 must be a mapping"):
            FilterFactory.create_meta_filter([{'type': 'cost'}, 7])


class TestCreateFromConfig:
    """Test building the composed filter from FilterConfig."""

    def test_default_config_is_cost_only(self):
        meta = FilterFactory.create_from_config(FilterConfig())
        assert [type(c) for c in meta.components] == [CostFilter]
        assert [card.id for card in sample_cards() if meta.evaluate(card)] == [0, 1, 2, 3, 4]

    def test_full_config(self):
        meta = FilterFactory.create_from_config(
            FilterConfig(max_cost=50, versions=[1, 3], leaders=[1])
        )
        assert [type(c) for c in meta.components] == [CostFilter, VersionFilter, LeaderFilter]
        assert [card.id for card in sample_cards() if meta.evaluate(card)] == [2]

    def test_empty_versions_keeps_filter(self):
        """Test an explicitly empty versions list rejects every card."""
        meta = FilterFactory.create_from_config(FilterConfig(versions=[]))
        assert len(meta) == 2
        assert not any(meta.evaluate(card) for card in sample_cards())


class TestRegistry:
    """Test filter registration and discovery."""

    def test_available_filters(self):
        info = FilterFactory.get_available_filters()
        assert set(info) == {'empty', 'cost', 'version', 'leader'}
        assert info['cost']['builders'] == ['with_max', 'with_min']
        assert info['cost']['options'] == ['max_cost', 'min_cost']
        assert info['version']['name'] == "Version Filter"

    def test_register_and_unregister(self):
        FilterFactory.register_filter('name', NameFilter, {'names': ('add_name', True)})
        try:
            filter_obj = FilterFactory.create_filter('name', {'names': ['Card3']})
            assert [card.id for card in sample_cards() if filter_obj.evaluate(card)] == [2]
        finally:
            FilterFactory.unregister_filter('name')

        assert 'name' not in FilterFactory.FILTER_REGISTRY
        assert 'name' not in FilterFactory.CONFIG_KEYS

    def test_register_rejects_non_filter(self):
        with pytest.raises(ValueError):
            FilterFactory.register_filter('bad', dict)
