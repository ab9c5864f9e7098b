from __future__ import annotations
from typing import Any, Dict, MutableMapping, Optional

from .records import AuthorLookup, AuthorRecord

__all__ = ['CachedAuthorLookup', 'request_lookup', 'CONTEXT_KEY']

# Key under which per-request memos live in a dict-like GraphQL context
CONTEXT_KEY = 'coauthorsql.author_lookups'

_MISS = object()


class CachedAuthorLookup:
    """Memoize an :class:`AuthorLookup` by slug.

    Several fields requested on one author hit the lookup once. Misses are
    cached too. Instances are meant to live for one request; see
    :func:`request_lookup`.
    """

    def __init__(self, inner: AuthorLookup):
        self.inner = inner
        self._cache: Dict[str, Optional[AuthorRecord]] = {}

    def get_by_slug(self, slug: str) -> Optional[AuthorRecord]:
        hit = self._cache.get(slug, _MISS)
        if hit is _MISS:
            hit = self.inner.get_by_slug(slug)
            self._cache[slug] = hit
        return hit  # type: ignore[return-value]

    def clear(self) -> None:
        self._cache.clear()

    def __len__(self) -> int:
        return len(self._cache)


def request_lookup(info: Any, inner: AuthorLookup) -> AuthorLookup:
    """Return the memoized lookup for the request behind ``info``.

    The memo is stored in ``info.context`` when it is a mutable mapping (the
    default context of Strawberry's ASGI and FastAPI integrations is a fresh
    dict per request). Without such a context ``inner`` is returned unchanged.
    """
    context = getattr(info, 'context', None)
    if not isinstance(context, MutableMapping):
        return inner
    memos = context.setdefault(CONTEXT_KEY, {})
    cached = memos.get(id(inner))
    if cached is None:
        cached = memos[id(inner)] = CachedAuthorLookup(inner)
    return cached
