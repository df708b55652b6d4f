"""
Composed filters.

A MetaFilter class is defined from a fixed, ordered list of filter classes.
Each instance owns one instance of every listed filter and accepts a card
only when all of them do. The builder methods of every component are
generated on the composed class, so configuration chains on the composed
filter directly:

    CardFilter = compose(CostFilter, VersionFilter)

    card_filter = CardFilter()
    card_filter.add(1).add(3)
    card_filter.with_max(50)

The same class can be written as a subclass:

    class CardFilter(MetaFilter, filters=(CostFilter, VersionFilter)):
        pass

Definition problems (no component types, duplicate types, builder name
clashes) raise FilterDefinitionError when the class is created.
"""

import functools
import types
from contextlib import ExitStack, contextmanager
from typing import Callable, Dict, Iterator, List, Optional, Sequence, Tuple, Type

from cardfilter.cards import Card
from cardfilter.core.exceptions import ErrorCode, definition_error
from .base import Filter, FilterResult, builder


def _delegate(method_name: str, filter_type: Type[Filter]) -> Callable:
    """Build a composed-filter method forwarding to one component's builder."""
    target = getattr(filter_type, method_name)

    def delegate(self, *args, **kwargs):
        getattr(self.component(filter_type), method_name)(*args, **kwargs)
        return self

    functools.update_wrapper(delegate, target)
    return builder(delegate)


def _check_filter_types(cls_name: str, filter_types: Sequence[type]) -> Dict[str, Type[Filter]]:
    """Validate a component list and map each builder name to its owner."""
    if not filter_types:
        raise definition_error(f"{cls_name} must compose at least one filter type")

    for filter_type in filter_types:
        if not (isinstance(filter_type, type) and issubclass(filter_type, Filter)):
            raise definition_error(f"{cls_name}: {filter_type!r} is not a Filter subclass")

    if len(set(filter_types)) != len(filter_types):
        names = [t.__name__ for t in filter_types]
        raise definition_error(f"{cls_name}: duplicate filter types in {names}")

    owners: Dict[str, Type[Filter]] = {}
    for filter_type in filter_types:
        for method_name in filter_type.builder_names():
            if method_name in owners:
                raise definition_error(
                    f"{cls_name}: builder '{method_name}' is defined by both "
                    f"{owners[method_name].__name__} and {filter_type.__name__}",
                    error_code=ErrorCode.FILTER_BUILDER_COLLISION
                )
            if hasattr(MetaFilter, method_name):
                raise definition_error(
                    f"{cls_name}: builder '{method_name}' of {filter_type.__name__} "
                    f"shadows a MetaFilter attribute",
                    error_code=ErrorCode.FILTER_BUILDER_COLLISION
                )
            owners[method_name] = filter_type
    return owners


class MetaFilter(Filter):
    """
    Logical AND over a fixed list of component filters.

    Components are evaluated in declaration order and evaluation stops at
    the first component that rejects the card.
    """

    filter_types: Tuple[Type[Filter], ...] = ()

    def __init_subclass__(cls, filters: Optional[Sequence[Type[Filter]]] = None, **kwargs):
        super().__init_subclass__(**kwargs)
        if filters is None:
            return

        filters = tuple(filters)
        owners = _check_filter_types(cls.__name__, filters)
        for method_name, filter_type in owners.items():
            if method_name in cls.__dict__:
                raise definition_error(
                    f"{cls.__name__}: builder '{method_name}' of {filter_type.__name__} "
                    f"clashes with a method defined on the class",
                    error_code=ErrorCode.FILTER_BUILDER_COLLISION
                )
            setattr(cls, method_name, _delegate(method_name, filter_type))
        cls.filter_types = filters

    def __init__(self):
        if not self.filter_types:
            raise definition_error(
                f"{self.__class__.__name__} has no filter types; define it with compose() "
                f"or the 'filters' class keyword"
            )
        super().__init__()
        self._components: Tuple[Filter, ...] = tuple(filter_type() for filter_type in self.filter_types)
        self._by_type: Dict[Type[Filter], Filter] = dict(zip(self.filter_types, self._components))

    @property
    def name(self) -> str:
        return " AND ".join(component.name for component in self._components)

    @property
    def description(self) -> str:
        return "; ".join(component.description for component in self._components)

    @property
    def components(self) -> Tuple[Filter, ...]:
        """Component instances in declaration order."""
        return self._components

    def component(self, filter_type: Type[Filter]) -> Filter:
        """
        Return the owned instance of a component type.

        Raises:
            KeyError: If the type is not part of this composition
        """
        try:
            return self._by_type[filter_type]
        except KeyError:
            raise KeyError(f"{filter_type.__name__} is not a component of {self.__class__.__name__}") from None

    def evaluate(self, card: Card) -> bool:
        return all(component.evaluate(card) for component in self._components)

    def apply(self, card: Card) -> FilterResult:
        """Evaluate components in order and report the first rejection."""
        results = []
        for component in self._components:
            result = component.apply(card)
            results.append({"filter": component.name, "passed": result.passed, "reason": result.reason})
            if not result.passed:
                return FilterResult(
                    passed=False,
                    reason=f"Failed {component.name}: {result.reason}",
                    metadata={
                        "card_id": card.id,
                        "failed_filter": component.name,
                        "filters_executed": len(results),
                        "total_filters": len(self._components),
                        "individual_results": results,
                    }
                )

        return FilterResult(
            passed=True,
            reason="All filters passed",
            metadata={
                "card_id": card.id,
                "filters_executed": len(results),
                "total_filters": len(self._components),
                "individual_results": results,
            }
        )

    def validate_config(self) -> List[str]:
        warnings = []
        for component in self._components:
            warnings.extend(f"{component.name}: {warning}" for warning in component.validate_config())
        return warnings

    def freeze(self) -> 'MetaFilter':
        super().freeze()
        for component in self._components:
            component.freeze()
        return self

    @contextmanager
    def frozen(self) -> Iterator['MetaFilter']:
        with ExitStack() as stack:
            stack.enter_context(super().frozen())
            for component in self._components:
                stack.enter_context(component.frozen())
            yield self

    def __len__(self) -> int:
        return len(self._components)

    def __repr__(self) -> str:
        inner = ", ".join(repr(component) for component in self._components)
        return f"{self.__class__.__name__}({inner})"


def compose(*filter_types: Type[Filter], name: Optional[str] = None) -> Type[MetaFilter]:
    """
    Define a composed filter class from an ordered list of filter types.

    Args:
        *filter_types: Component filter classes, evaluated in this order
        name: Optional class name (derived from the components otherwise)

    Returns:
        New MetaFilter subclass

    Raises:
        FilterDefinitionError: If the list is empty, contains duplicates or
            non-Filter types, or two components share a builder name
    """
    cls_name = name or "MetaFilter[" + ", ".join(getattr(t, '__name__', repr(t)) for t in filter_types) + "]"
    return types.new_class(
        cls_name,
        (MetaFilter,),
        {'filters': filter_types},
        lambda namespace: namespace.update(__module__=__name__),
    )
