"""
Filter Factory for creating filter instances from configuration.

Configuration values are applied through each filter's builder methods, so
a filter built from a config dictionary is configured exactly as if the
builder calls had been written by hand.
"""

import logging
from typing import Any, Dict, List, Mapping, Optional, Tuple, Type

from cardfilter.core.config.models import FilterConfig
from cardfilter.core.exceptions import (
    CardFilterError, ConfigurationError, ErrorCode, UnknownFilterError, config_error
)
from .base import Filter
from .cost import CostFilter
from .empty import EmptyFilter
from .leader import LeaderFilter
from .meta import MetaFilter, compose
from .version import VersionFilter

logger = logging.getLogger(__name__)

# config key -> (builder name, value is a list applied item by item)
ConfigKeys = Dict[str, Tuple[str, bool]]


class FilterFactory:
    """
    Factory class for creating filters and composed filters from configuration.
    """

    # Registry of available filter types
    FILTER_REGISTRY: Dict[str, Type[Filter]] = {
        'empty': EmptyFilter,
        'cost': CostFilter,
        'version': VersionFilter,
        'leader': LeaderFilter,
    }

    CONFIG_KEYS: Dict[str, ConfigKeys] = {
        'empty': {},
        'cost': {'min_cost': ('with_min', False), 'max_cost': ('with_max', False)},
        'version': {'versions': ('add', True)},
        'leader': {'leaders': ('add_leader', True)},
    }

    @classmethod
    def _filter_class(cls, filter_type: str) -> Type[Filter]:
        if filter_type not in cls.FILTER_REGISTRY:
            raise UnknownFilterError(filter_type, list(cls.FILTER_REGISTRY))
        return cls.FILTER_REGISTRY[filter_type]

    @classmethod
    def _configure(cls, target: Filter, filter_type: str, config: Mapping[str, Any]) -> None:
        """Apply a config mapping to ``target`` through its builder methods."""
        if not isinstance(config, Mapping):
            raise config_error(
                f"Options for filter type '{filter_type}' must be a mapping, "
                f"got {type(config).__name__}",
                error_code=ErrorCode.CONFIG_INVALID_VALUE
            )

        keys = cls.CONFIG_KEYS.get(filter_type, {})
        for key, value in config.items():
            if key not in keys:
                raise config_error(
                    f"Unknown option '{key}' for filter type '{filter_type}'",
                    key=key,
                    error_code=ErrorCode.CONFIG_INVALID_VALUE,
                    config_value=value
                )
            method_name, is_list = keys[key]
            method = getattr(target, method_name)
            for item in (value if is_list else [value]):
                method(item)

    @classmethod
    def create_filter(cls, filter_type: str, config: Optional[Mapping[str, Any]] = None) -> Filter:
        """
        Create a single configured filter.

        Args:
            filter_type: Registered filter type name
            config: Option values for the filter

        Returns:
            Filter instance

        Raises:
            UnknownFilterError: If filter type is unknown
            ConfigurationError: If an option is not understood
        """
        filter_instance = cls._filter_class(filter_type)()
        cls._configure(filter_instance, filter_type, config or {})
        return filter_instance

    @classmethod
    def create_meta_filter(cls, filter_configs: List[Mapping[str, Any]]) -> MetaFilter:
        """
        Create a composed filter from a list of filter configurations.

        Each entry has a ``type`` and an optional ``config`` mapping. The
        filter types are composed in list order.

        Raises:
            ConfigurationError: If an entry is malformed
            FilterDefinitionError: If the types cannot be composed
        """
        filter_types = []
        for i, filter_config in enumerate(filter_configs):
            if not isinstance(filter_config, Mapping):
                raise config_error(
                    f"Filter configuration {i} must be a mapping, got {type(filter_config).__name__}",
                    error_code=ErrorCode.CONFIG_INVALID_VALUE
                )
            if 'type' not in filter_config:
                raise ConfigurationError(
                    f"Filter configuration {i} missing 'type' field",
                    error_code=ErrorCode.CONFIG_INVALID_VALUE
                )
            filter_types.append(filter_config['type'])

        meta_filter = compose(*(cls._filter_class(t) for t in filter_types))()

        for i, (filter_type, filter_config) in enumerate(zip(filter_types, filter_configs)):
            try:
                cls._configure(meta_filter, filter_type, filter_config.get('config') or {})
            except CardFilterError:
                raise
            except (TypeError, ValueError) as e:
                raise ConfigurationError(
                    f"Error configuring filter {i} ({filter_type}): {e}",
                    error_code=ErrorCode.CONFIG_INVALID_VALUE,
                    cause=e
                ) from e

        logger.info(f"Created filter: {meta_filter.name}")
        return meta_filter

    @classmethod
    def create_from_config(cls, config: FilterConfig) -> MetaFilter:
        """
        Create the composed filter described by a FilterConfig.

        The cost filter is always present; version and leader filters are
        added only when their accepted lists are configured.
        """
        cost_config: Dict[str, Any] = {'min_cost': config.min_cost}
        if config.max_cost is not None:
            cost_config['max_cost'] = config.max_cost

        filter_configs: List[Dict[str, Any]] = [{'type': 'cost', 'config': cost_config}]
        if config.versions is not None:
            filter_configs.append({'type': 'version', 'config': {'versions': config.versions}})
        if config.leaders is not None:
            filter_configs.append({'type': 'leader', 'config': {'leaders': config.leaders}})

        return cls.create_meta_filter(filter_configs)

    @classmethod
    def get_available_filters(cls) -> Dict[str, Dict[str, Any]]:
        """
        Get information about all available filter types.

        Returns:
            Dictionary mapping filter types to name, description, builders
            and config options
        """
        filter_info = {}
        for filter_type, filter_class in cls.FILTER_REGISTRY.items():
            instance = filter_class()
            filter_info[filter_type] = {
                'name': instance.name,
                'description': instance.description,
                'builders': list(filter_class.builder_names()),
                'options': sorted(cls.CONFIG_KEYS.get(filter_type, {})),
            }
        return filter_info

    @classmethod
    def register_filter(
        cls,
        filter_type: str,
        filter_class: Type[Filter],
        config_keys: Optional[ConfigKeys] = None
    ) -> None:
        """
        Register a new filter type.

        Args:
            filter_type: Name of the filter type
            filter_class: Filter class to register
            config_keys: Mapping of config option to (builder name, is list)
        """
        if not (isinstance(filter_class, type) and issubclass(filter_class, Filter)):
            raise ValueError("Filter class must inherit from Filter")

        cls.FILTER_REGISTRY[filter_type] = filter_class
        cls.CONFIG_KEYS[filter_type] = dict(config_keys or {})

    @classmethod
    def unregister_filter(cls, filter_type: str) -> None:
        """Unregister a filter type."""
        cls.FILTER_REGISTRY.pop(filter_type, None)
        cls.CONFIG_KEYS.pop(filter_type, None)
