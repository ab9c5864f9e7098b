from __future__ import annotations
import base64
import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Annotated, Any, Callable, Dict, List, Mapping, Optional

import strawberry
from strawberry.types import Info

from .core.fields import ConfigurationError
from .core.records import PostSource, TermQuery
from .hooks import (
    GRAPHQL_INIT,
    REGISTER_TAXONOMY_ARGS,
    TERM_CONNECTION_QUERY_ARGS,
    HookRegistry,
    fields_filter_name,
)

__all__ = ['TermSchema', 'Taxonomy', 'term_global_id', 'TermConnectionWhereArgs', 'TermObjectsConnectionOrderbyEnum', 'OrderEnum']

_logger = logging.getLogger("coauthorsql")

_ARG_DESC_WHERE = (
    "Filtering and ordering of the connected terms. "
    "Example: where: {orderby: NAME, order: DESC}"
)
_ARG_DESC_FIRST = "Maximum number of terms to return."


class _TermOrderbyEnum(Enum):
    NAME = 'name'
    SLUG = 'slug'
    TERM_ID = 'term_id'
    TERM_ORDER = 'term_order'


class _OrderEnum(Enum):
    ASC = 'ASC'
    DESC = 'DESC'


TermObjectsConnectionOrderbyEnum = strawberry.enum(_TermOrderbyEnum, name="TermObjectsConnectionOrderbyEnum")  # type: ignore
OrderEnum = strawberry.enum(_OrderEnum, name="OrderEnum")  # type: ignore


@strawberry.input(name="TermConnectionWhereArgs")
class TermConnectionWhereArgs:
    orderby: Optional[TermObjectsConnectionOrderbyEnum] = None
    order: Optional[OrderEnum] = None


def _enum_value(v: Any) -> Any:
    return getattr(v, 'value', v)


def term_global_id(term_id: Any) -> Optional[str]:
    """Opaque global id of a term: base64 of ``"term:<term_id>"``."""
    if term_id is None:
        return None
    return base64.b64encode(f"term:{term_id}".encode('ascii')).decode('ascii')


def _ucfirst(name: str) -> str:
    return name[:1].upper() + name[1:]


@dataclass
class Taxonomy:
    """A registered taxonomy with its (filtered) registration options."""

    name: str
    options: Dict[str, Any] = field(default_factory=dict)

    @property
    def show_in_graphql(self) -> bool:
        return bool(self.options.get('show_in_graphql'))

    @property
    def single_name(self) -> str:
        return str(self.options.get('graphql_single_name') or self.name)

    @property
    def plural_name(self) -> str:
        return str(self.options.get('graphql_plural_name') or f"{self.single_name}s")

    @property
    def type_name(self) -> str:
        return _ucfirst(self.single_name)


class TermSchema:
    """Schema host exposing taxonomy terms and posts through Strawberry.

    Taxonomies are registered through the ``register_taxonomy_args`` filter;
    those flagged ``show_in_graphql`` get an object type whose field list is
    passed through ``graphql_<single_name>_fields``. Posts expose one connection
    per visible taxonomy; the query args of every term connection are passed
    through ``graphql_term_object_connection_query_args`` before the term query
    runs.

    Field definitions are mappings with keys ``type`` (Python type used for the
    GraphQL annotation), ``resolve`` (``callable(term, info)``) and an optional
    ``description``.
    """

    def __init__(self, hooks: HookRegistry, terms: TermQuery, posts: Optional[PostSource] = None):
        self.hooks = hooks
        self.terms = terms
        self.posts = posts
        self.taxonomies: Dict[str, Taxonomy] = {}

    def register_taxonomy(self, name: str, **options: Any) -> Taxonomy:
        opts = self.hooks.apply_filters(REGISTER_TAXONOMY_ARGS, dict(options), name)
        tax = Taxonomy(name=name, options=dict(opts or {}))
        self.taxonomies[name] = tax
        return tax

    def graphql_taxonomies(self) -> List[Taxonomy]:
        return [t for t in self.taxonomies.values() if t.show_in_graphql]

    # --- field definitions ---

    @staticmethod
    def base_term_fields() -> Dict[str, Dict[str, Any]]:
        return {
            'id': {
                'type': Optional[strawberry.ID],
                'description': "The globally unique ID for the term",
                'resolve': lambda term, info: term_global_id(getattr(term, 'term_id', None)),
            },
            'databaseId': {
                'type': Optional[int],
                'description': "The term id in the database",
                'resolve': lambda term, info: getattr(term, 'term_id', None),
            },
            'name': {
                'type': Optional[str],
                'description': "The human readable name of the term",
                'resolve': lambda term, info: getattr(term, 'name', None),
            },
            'slug': {
                'type': Optional[str],
                'description': "An alphanumeric identifier for the term",
                'resolve': lambda term, info: getattr(term, 'slug', None),
            },
            'taxonomyName': {
                'type': Optional[str],
                'description': "The name of the taxonomy the term belongs to",
                'resolve': lambda term, info: getattr(term, 'taxonomy', None),
            },
        }

    def term_fields(self, taxonomy: Taxonomy) -> Dict[str, Dict[str, Any]]:
        fields = self.hooks.apply_filters(fields_filter_name(taxonomy.single_name), self.base_term_fields())
        out: Dict[str, Dict[str, Any]] = {}
        for fname, fdef in dict(fields or {}).items():
            if not isinstance(fdef, Mapping) or 'type' not in fdef:
                raise ConfigurationError(f"Field '{taxonomy.type_name}.{fname}' has no type")
            if not callable(fdef.get('resolve')):
                raise ConfigurationError(f"Field '{taxonomy.type_name}.{fname}' has no resolver")
            out[fname] = dict(fdef)
        return out

    # --- connections ---

    def connection_args(self, taxonomy: Taxonomy, source: Any, caller_args: Mapping[str, Any]) -> Dict[str, Any]:
        args: Dict[str, Any] = {
            'taxonomy': taxonomy.name,
            'orderby': 'name',
            'order': 'ASC',
        }
        if source is not None:
            args['object_ids'] = [getattr(source, 'id')]
        where = caller_args.get('where') or {}
        if where.get('orderby') is not None:
            args['orderby'] = where['orderby']
        if where.get('order') is not None:
            args['order'] = where['order']
        if caller_args.get('first') is not None:
            args['number'] = caller_args['first']
        return self.hooks.apply_filters(TERM_CONNECTION_QUERY_ARGS, args, source, caller_args)

    def resolve_connection(self, taxonomy: Taxonomy, source: Any, caller_args: Mapping[str, Any]) -> List[Any]:
        args = self.connection_args(taxonomy, source, caller_args)
        _logger.debug("coauthorsql: %s connection args=%r", taxonomy.name, args)
        return list(self.terms.query(args))

    @staticmethod
    def _caller_args(where: Optional[TermConnectionWhereArgs], first: Optional[int]) -> Dict[str, Any]:
        out: Dict[str, Any] = {'first': first}
        if where is not None:
            out['where'] = {
                'orderby': _enum_value(where.orderby),
                'order': _enum_value(where.order),
            }
        return out

    # --- Strawberry building ---

    @staticmethod
    def _wrap(st_cls: Any, attr: str, value: Any) -> Any:
        obj = st_cls()
        setattr(obj, attr, value)
        return obj

    def _make_term_type(self, taxonomy: Taxonomy) -> Any:
        def _make_field_resolver(fname: str, fdef: Dict[str, Any]) -> Callable[..., Any]:
            resolve = fdef['resolve']

            def _resolver(self, info):
                return resolve(self._term, info)

            _resolver.__name__ = f"_resolve_{fname}"
            _resolver.__annotations__ = {'info': Info, 'return': fdef['type']}
            return _resolver

        st_cls = type(taxonomy.type_name, (), {'__module__': __name__, '__annotations__': {}})
        for fname, fdef in self.term_fields(taxonomy).items():
            desc = fdef.get('description')
            # explicit name: exposed names are used verbatim, never camel-cased
            setattr(st_cls, fname, strawberry.field(
                resolver=_make_field_resolver(fname, fdef),
                name=fname,
                description=str(desc) if desc else None,
            ))
        return strawberry.type(st_cls, name=taxonomy.type_name)  # type: ignore

    def _make_connection_resolver(self, taxonomy: Taxonomy, term_type: Any, *, on_post: bool) -> Callable[..., Any]:
        schema = self

        def _resolver(self, info, where=None, first=None):
            source = self._post if on_post else None
            terms = schema.resolve_connection(taxonomy, source, schema._caller_args(where, first))
            return [schema._wrap(term_type, '_term', t) for t in terms]

        _resolver.__name__ = f"_resolve_{taxonomy.plural_name}"
        _resolver.__annotations__ = {
            'info': Info,
            'where': Annotated[Optional[TermConnectionWhereArgs], strawberry.argument(description=_ARG_DESC_WHERE)],
            'first': Annotated[Optional[int], strawberry.argument(description=_ARG_DESC_FIRST)],
            'return': List[term_type],  # type: ignore[valid-type]
        }
        return _resolver

    def _make_post_type(self, term_types: Dict[str, Any]) -> Any:
        def _id(self, info):
            return getattr(self._post, 'id')

        def _title(self, info):
            return getattr(self._post, 'title', None)

        _id.__annotations__ = {'info': Info, 'return': int}
        _title.__annotations__ = {'info': Info, 'return': Optional[str]}

        st_cls = type('Post', (), {'__module__': __name__, '__annotations__': {}})
        st_cls.databaseId = strawberry.field(resolver=_id, description="The post id in the database")
        st_cls.title = strawberry.field(resolver=_title, description="The title of the post")
        for tname, term_type in term_types.items():
            tax = self.taxonomies[tname]
            setattr(st_cls, tax.plural_name, strawberry.field(
                resolver=self._make_connection_resolver(tax, term_type, on_post=True),
                name=tax.plural_name,
                description=f"Connection between the Post type and the {tax.type_name} type",
            ))
        return strawberry.type(st_cls, name='Post')  # type: ignore

    def _make_query_type(self, term_types: Dict[str, Any], post_type: Any) -> Any:
        schema = self
        st_cls = type('Query', (), {'__module__': __name__, '__annotations__': {}})
        if post_type is not None:
            def _post(self, info, id):
                row = schema.posts.get(id)
                return None if row is None else schema._wrap(post_type, '_post', row)

            def _posts(self, info):
                return [schema._wrap(post_type, '_post', row) for row in schema.posts.list()]

            _post.__annotations__ = {'info': Info, 'id': int, 'return': Optional[post_type]}
            _posts.__annotations__ = {'info': Info, 'return': List[post_type]}
            st_cls.post = strawberry.field(resolver=_post, description="A single post by database id")
            st_cls.posts = strawberry.field(resolver=_posts, description="All posts")
        for tname, term_type in term_types.items():
            tax = self.taxonomies[tname]
            setattr(st_cls, tax.plural_name, strawberry.field(
                resolver=self._make_connection_resolver(tax, term_type, on_post=False),
                name=tax.plural_name,
                description=f"All terms of the {tax.name} taxonomy",
            ))
        if not term_types and post_type is None:
            raise ConfigurationError("Schema has no query fields: register a GraphQL taxonomy or a post source")
        return strawberry.type(st_cls, name='Query')  # type: ignore

    def to_strawberry(self, *, strawberry_config: Optional[Any] = None) -> strawberry.Schema:
        self.hooks.do_action(GRAPHQL_INIT)
        # Strawberry classes are rebuilt on every call so hooks added since the last build apply
        term_types: Dict[str, Any] = {}
        for tax in self.graphql_taxonomies():
            term_types[tax.name] = self._make_term_type(tax)
        post_type = None
        if self.posts is not None:
            post_type = self._make_post_type(term_types)
        query_type = self._make_query_type(term_types, post_type)
        _logger.info(
            "coauthorsql: built schema with term types %s (posts=%s)",
            sorted(t.type_name for t in self.graphql_taxonomies()),
            post_type is not None,
        )
        if strawberry_config is not None:
            return strawberry.Schema(query=query_type, config=strawberry_config)
        return strawberry.Schema(query=query_type)
