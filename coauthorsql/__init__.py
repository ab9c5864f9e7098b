"""CoAuthorsQL public API and lightweight lazy exports.

Co-author taxonomy terms exposed as a GraphQL object type on Strawberry.

Exposes (resolved lazily so importing the core does not pull in SQLAlchemy):
- CoAuthorsPlugin, CoAuthorsSettings, HookRegistry, TermSchema
- FieldMap, AuthorFieldResolver, TaxonomyRegistrationAdapter, ConnectionOrderAdapter
- AuthorRecord, TermReference, ConfigurationError, CachedAuthorLookup
- sql (SQLAlchemy reference collaborators)
"""
from __future__ import annotations

__version__ = '0.1.0'

_EXPORTS = {
    'CoAuthorsPlugin': '.plugin',
    'CoAuthorsSettings': '.config',
    'HookRegistry': '.hooks',
    'TermSchema': '.registry',
    'CachedAuthorLookup': '.core.cache',
    'FieldMap': '.core.fields',
    'ConfigurationError': '.core.fields',
    'default_field_map': '.core.fields',
    'AuthorFieldResolver': '.core.resolver',
    'TaxonomyRegistrationAdapter': '.core.taxonomy',
    'ConnectionOrderAdapter': '.core.ordering',
    'AuthorRecord': '.core.records',
    'TermReference': '.core.records',
}


def __getattr__(name: str):  # PEP 562 lazy exports
    import importlib as _importlib
    if name == 'sql':
        return _importlib.import_module(__name__ + '.sql')
    mod = _EXPORTS.get(name)
    if mod is None:
        raise AttributeError(name)
    return getattr(_importlib.import_module(mod, __name__), name)


__all__ = [*_EXPORTS, 'sql']
