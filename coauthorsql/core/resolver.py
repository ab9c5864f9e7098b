from __future__ import annotations
import logging
from typing import Any, Callable, Optional

from strawberry.types import Info

from ..config import CoAuthorsSettings
from .cache import request_lookup
from .fields import ConfigurationError, FieldMap, default_field_map
from .records import AuthorLookup, AuthorRecord, MetadataStore

__all__ = ['AuthorFieldResolver']

_logger = logging.getLogger("coauthorsql")


def _as_text(value: Any) -> str:
    if isinstance(value, bytes):
        return value.decode('utf-8', errors='replace')
    return value if isinstance(value, str) else str(value)


class AuthorFieldResolver:
    """Resolve scalar fields of an author term.

    The author record behind a term is fetched by slug from the lookup service.
    A field is read directly from the record first; when the record has no value
    and belongs to a platform user, the user's metadata is consulted with the
    same backing key. Anything unresolved comes back as an empty string so the
    GraphQL field can stay a non-null ``String``.

    Errors raised by the lookup service or the metadata store are not caught.
    """

    def __init__(
        self,
        lookup: AuthorLookup,
        metadata: Optional[MetadataStore] = None,
        *,
        fields: Optional[FieldMap] = None,
        settings: Optional[CoAuthorsSettings] = None,
    ):
        self.lookup = lookup
        self.metadata = metadata
        self.fields = fields if fields is not None else default_field_map()
        self.settings = settings or CoAuthorsSettings()

    def resolve(self, term: Any, exposed_field_name: str, *, lookup: Optional[AuthorLookup] = None) -> str:
        backing_key = self.fields.get(exposed_field_name)
        if backing_key is None:
            _logger.error("coauthorsql: no backing key for author field %r", exposed_field_name)
            return ''
        slug = getattr(term, 'slug', None)
        if not slug:
            return ''
        author = (lookup if lookup is not None else self.lookup).get_by_slug(slug)
        if author is None:
            _logger.debug("coauthorsql: no author record for slug %r", slug)
            return ''
        value = self._direct_value(author, backing_key)
        if value is None:
            value = self._meta_value(author, backing_key)
        return '' if value is None else _as_text(value)

    def _direct_value(self, author: AuthorRecord, backing_key: str) -> Any:
        return author.get(backing_key)

    def _meta_value(self, author: AuthorRecord, backing_key: str) -> Any:
        # Guest authors have no platform profile to fall back on
        if author.kind != self.settings.platform_user_kind or self.metadata is None:
            return None
        return self.metadata.get(author.identifier, backing_key)

    def bind(self, exposed_field_name: str) -> Callable[[Any, Info], str]:
        """Return a schema resolver for one exposed field.

        The callback has the ``(term, info)`` shape used by field definitions
        passed through the ``graphql_<type>_fields`` filter. Author lookups are
        memoized per request through ``info.context``.
        """
        if exposed_field_name not in self.fields:
            raise ConfigurationError(f"Author field '{exposed_field_name}' has no backing key")

        def _resolve(term: Any, info: Info) -> str:
            return self.resolve(term, exposed_field_name, lookup=request_lookup(info, self.lookup))

        _resolve.__name__ = f"resolve_{exposed_field_name}"
        return _resolve
