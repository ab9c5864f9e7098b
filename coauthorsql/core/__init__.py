# Core subpackage: field map, resolution and hook adapters.
from .fields import ConfigurationError, FieldMap, DEFAULT_AUTHOR_FIELDS, default_field_map
from .records import AuthorRecord, TermReference, AuthorLookup, MetadataStore, TermQuery, PostSource
from .cache import CachedAuthorLookup, request_lookup
from .resolver import AuthorFieldResolver
from .taxonomy import TaxonomyRegistrationAdapter
from .ordering import ConnectionOrderAdapter, caller_orderby

__all__ = [
    'ConfigurationError', 'FieldMap', 'DEFAULT_AUTHOR_FIELDS', 'default_field_map',
    'AuthorRecord', 'TermReference', 'AuthorLookup', 'MetadataStore', 'TermQuery', 'PostSource',
    'CachedAuthorLookup', 'request_lookup',
    'AuthorFieldResolver', 'TaxonomyRegistrationAdapter', 'ConnectionOrderAdapter', 'caller_orderby',
]
