from __future__ import annotations
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Iterable, List, Mapping, Optional, Protocol, runtime_checkable

__all__ = [
    'AuthorRecord',
    'TermReference',
    'AuthorLookup',
    'MetadataStore',
    'TermQuery',
    'PostSource',
]


@dataclass(frozen=True)
class AuthorRecord:
    """Backing record of an author term, as returned by an :class:`AuthorLookup`.

    Attributes:
        kind: Discriminator, e.g. ``"wpuser"`` for platform users or
            ``"guest-author"`` for guest authors.
        identifier: Platform user id; only meaningful for platform users.
        attributes: Directly addressable values keyed by backing key
            (``user_email``, ``display_name``...). Read-only.
    """

    kind: str
    identifier: Any = None
    attributes: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        object.__setattr__(self, 'attributes', MappingProxyType(dict(self.attributes or {})))

    def get(self, key: str) -> Any:
        return self.attributes.get(key)


@dataclass(frozen=True)
class TermReference:
    """A taxonomy term. Only ``slug`` is needed to resolve author fields."""

    slug: str
    term_id: Optional[int] = None
    name: Optional[str] = None
    taxonomy: Optional[str] = None


@runtime_checkable
class AuthorLookup(Protocol):
    def get_by_slug(self, slug: str) -> Optional[AuthorRecord]: ...


@runtime_checkable
class MetadataStore(Protocol):
    def get(self, user_id: Any, key: str) -> Optional[str]: ...


@runtime_checkable
class TermQuery(Protocol):
    def query(self, args: Mapping[str, Any]) -> List[TermReference]: ...


@runtime_checkable
class PostSource(Protocol):
    def get(self, post_id: int) -> Any: ...
    def list(self) -> Iterable[Any]: ...
