from __future__ import annotations
import itertools
import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List

__all__ = [
    'HookRegistry',
    'DEFAULT_PRIORITY',
    'REGISTER_TAXONOMY_ARGS',
    'GRAPHQL_INIT',
    'TERM_CONNECTION_QUERY_ARGS',
    'TAXONOMY_NAME',
    'fields_filter_name',
]

_logger = logging.getLogger("coauthorsql")

DEFAULT_PRIORITY = 10

# Extension points fired by the schema host
REGISTER_TAXONOMY_ARGS = 'register_taxonomy_args'
GRAPHQL_INIT = 'graphql_init'
TERM_CONNECTION_QUERY_ARGS = 'graphql_term_object_connection_query_args'
TAXONOMY_NAME = 'coauthors_taxonomy_name'


def fields_filter_name(single_name: str) -> str:
    """Filter receiving the field definitions of a GraphQL object type."""
    return f"graphql_{single_name}_fields"

_seq = itertools.count()


@dataclass(order=True)
class _Callback:
    priority: int
    seq: int
    fn: Callable[..., Any] = field(compare=False)
    accepted_args: int = field(default=1, compare=False)

    def call(self, *args: Any) -> Any:
        n = self.accepted_args
        return self.fn(*(args if n is None or n < 0 else args[:n]))


class HookRegistry:
    """Named filter and action extension points.

    Filters thread a value through their callbacks, each receiving the current
    value plus any extra arguments (truncated to ``accepted_args``) and
    returning the new value. Actions call their callbacks for side effects.
    Callbacks run by ascending ``priority``; equal priorities keep
    registration order.

    Example:
        hooks = HookRegistry()
        hooks.add_filter('register_taxonomy_args', adapter.adjust, accepted_args=2)
        opts = hooks.apply_filters('register_taxonomy_args', {}, 'author')
    """

    def __init__(self):
        self._filters: Dict[str, List[_Callback]] = {}
        self._actions: Dict[str, List[_Callback]] = {}
        self._fired: Dict[str, int] = {}

    @staticmethod
    def _add(table: Dict[str, List[_Callback]], name: str, fn: Callable[..., Any], priority: int, accepted_args: int) -> None:
        if not callable(fn):
            raise TypeError(f"Hook callback for '{name}' must be callable, got {fn!r}")
        cbs = table.setdefault(name, [])
        cbs.append(_Callback(priority, next(_seq), fn, accepted_args))
        cbs.sort()

    @staticmethod
    def _remove(table: Dict[str, List[_Callback]], name: str, fn: Callable[..., Any], priority: int | None) -> bool:
        cbs = table.get(name) or []
        keep = [cb for cb in cbs if not (cb.fn == fn and (priority is None or cb.priority == priority))]
        table[name] = keep
        return len(keep) != len(cbs)

    def add_filter(self, name: str, fn: Callable[..., Any], priority: int = DEFAULT_PRIORITY, accepted_args: int = 1) -> None:
        self._add(self._filters, name, fn, priority, accepted_args)

    def remove_filter(self, name: str, fn: Callable[..., Any], priority: int | None = None) -> bool:
        return self._remove(self._filters, name, fn, priority)

    def has_filter(self, name: str) -> bool:
        return bool(self._filters.get(name))

    def apply_filters(self, name: str, value: Any, *args: Any) -> Any:
        for cb in list(self._filters.get(name) or ()):
            value = cb.call(value, *args)
        return value

    def add_action(self, name: str, fn: Callable[..., Any], priority: int = DEFAULT_PRIORITY, accepted_args: int = 1) -> None:
        self._add(self._actions, name, fn, priority, accepted_args)

    def remove_action(self, name: str, fn: Callable[..., Any], priority: int | None = None) -> bool:
        return self._remove(self._actions, name, fn, priority)

    def has_action(self, name: str) -> bool:
        return bool(self._actions.get(name))

    def do_action(self, name: str, *args: Any) -> None:
        self._fired[name] = self._fired.get(name, 0) + 1
        cbs = list(self._actions.get(name) or ())
        _logger.debug("coauthorsql.hooks: %s (%d callbacks)", name, len(cbs))
        for cb in cbs:
            cb.call(*args)

    def did_action(self, name: str) -> int:
        return self._fired.get(name, 0)
