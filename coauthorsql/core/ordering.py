from __future__ import annotations
from typing import Any, Mapping, MutableMapping, Optional

from ..config import CoAuthorsSettings

__all__ = ['ConnectionOrderAdapter', 'caller_orderby']


def caller_orderby(caller_args: Optional[Mapping[str, Any]]) -> Any:
    """Return the ``orderby`` the caller passed under ``where``, if any."""
    if not caller_args:
        return None
    where = caller_args.get('where')
    if where is None:
        return None
    if isinstance(where, Mapping):
        return where.get('orderby')
    return getattr(where, 'orderby', None)


class ConnectionOrderAdapter:
    """Keep author credit order in term connections.

    Without an explicit ``orderby`` the term query falls back to ordering by
    name, which scrambles the order a post assigned to its authors. For the
    author taxonomy the query is switched to the ``term_order`` sentinel unless
    the caller asked for a specific order.
    """

    def __init__(self, settings: CoAuthorsSettings | None = None):
        self.settings = settings or CoAuthorsSettings()

    def adjust(
        self,
        query_args: MutableMapping[str, Any],
        caller_args: Optional[Mapping[str, Any]] = None,
    ) -> MutableMapping[str, Any]:
        taxonomy = query_args.get('taxonomy')
        if taxonomy is None or taxonomy != self.settings.taxonomy:
            return query_args
        if caller_orderby(caller_args) is not None:
            return query_args
        query_args['orderby'] = self.settings.order_sentinel
        return query_args

    def filter(self, query_args, source, caller_args):  # noqa: ARG002 - hook signature
        return self.adjust(query_args, caller_args)
