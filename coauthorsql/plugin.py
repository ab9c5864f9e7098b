from __future__ import annotations
import logging
from typing import Any, Dict, Mapping, Optional

from .config import CoAuthorsSettings
from .core.fields import FieldMap, default_field_map
from .core.ordering import ConnectionOrderAdapter
from .core.records import AuthorLookup, MetadataStore
from .core.resolver import AuthorFieldResolver
from .core.taxonomy import TaxonomyRegistrationAdapter
from .hooks import (
    GRAPHQL_INIT,
    REGISTER_TAXONOMY_ARGS,
    TAXONOMY_NAME,
    TERM_CONNECTION_QUERY_ARGS,
    HookRegistry,
    fields_filter_name,
)

__all__ = ['CoAuthorsPlugin']

_logger = logging.getLogger("coauthorsql")


class CoAuthorsPlugin:
    """Expose co-author terms as a GraphQL object type.

    Constructing the plugin hooks taxonomy registration right away so the
    author taxonomy is flagged GraphQL-visible when the host registers it. The
    field and connection filters are added on ``graphql_init``, i.e. when the
    host starts building its schema.

    Example:
        hooks = HookRegistry()
        plugin = CoAuthorsPlugin(hooks, lookup=SQLAuthorLookup(Session),
                                 metadata=SQLMetadataStore(Session))
        host = TermSchema(hooks, terms=SQLTermQuery(Session), posts=SQLPostSource(Session))
        host.register_taxonomy('author')
        schema = host.to_strawberry()
    """

    def __init__(
        self,
        hooks: HookRegistry,
        lookup: AuthorLookup,
        metadata: Optional[MetadataStore] = None,
        *,
        settings: Optional[CoAuthorsSettings] = None,
        fields: Optional[FieldMap] = None,
    ):
        self.hooks = hooks
        base = settings or CoAuthorsSettings()
        self.settings = base.with_taxonomy(hooks.apply_filters(TAXONOMY_NAME, base.taxonomy))
        self.fields = fields if fields is not None else default_field_map()
        self.resolver = AuthorFieldResolver(lookup, metadata, fields=self.fields, settings=self.settings)
        self.taxonomy_adapter = TaxonomyRegistrationAdapter(self.settings)
        self.order_adapter = ConnectionOrderAdapter(self.settings)
        self._initialized = False
        hooks.add_filter(REGISTER_TAXONOMY_ARGS, self.taxonomy_adapter.adjust, accepted_args=2)
        hooks.add_action(GRAPHQL_INIT, self.init, accepted_args=0)

    @property
    def fields_filter(self) -> str:
        return fields_filter_name(self.settings.graphql_single_name)

    def init(self) -> None:
        # graphql_init fires on every schema build
        if self._initialized:
            return
        self.hooks.add_filter(self.fields_filter, self.add_fields)
        self.hooks.add_filter(TERM_CONNECTION_QUERY_ARGS, self.order_adapter.filter, accepted_args=3)
        self._initialized = True
        _logger.debug("coauthorsql: registered %s with %d fields", self.fields_filter, len(self.fields))

    def add_fields(self, fields: Optional[Mapping[str, Any]]) -> Dict[str, Any]:
        """Add one String field per mapped author attribute.

        Mapped names replace same-named fields already defined on the type.
        """
        out: Dict[str, Any] = dict(fields or {})
        for name, key in self.fields:
            out[name] = {
                'type': str,
                'description': f"The {key} of the author",
                'resolve': self.resolver.bind(name),
            }
        return out
