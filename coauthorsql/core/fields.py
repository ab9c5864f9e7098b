from __future__ import annotations
from typing import Dict, Iterable, Iterator, Optional, Tuple

__all__ = [
    'ConfigurationError',
    'FieldMap',
    'DEFAULT_AUTHOR_FIELDS',
    'default_field_map',
]


class ConfigurationError(ValueError):
    """A GraphQL field was wired without a usable backing-key mapping."""


# GraphQL field name -> backing key on the author record (or user meta key).
# Names line up with the platform User type where possible; every value is a String.
DEFAULT_AUTHOR_FIELDS: Tuple[Tuple[str, str], ...] = (
    ('email', 'user_email'),
    ('firstName', 'first_name'),
    ('lastName', 'last_name'),
    ('name', 'display_name'),
    ('registeredDate', 'user_registered'),
    ('slug', 'user_nicename'),
    ('type', 'type'),
    ('url', 'user_url'),
    ('username', 'user_login'),
)


class FieldMap:
    """Immutable, ordered mapping of exposed GraphQL field names to backing keys.

    Insertion order decides the order in which fields are added to the schema;
    it has no effect on resolution. Declaring the same exposed name twice raises
    :class:`ConfigurationError` instead of silently overwriting.

    Example:
        fm = FieldMap([('slug', 'user_nicename')])
        fm.get('slug')      # 'user_nicename'
        fm.get('nickname')  # None
    """

    __slots__ = ('_entries',)

    def __init__(self, pairs: Iterable[Tuple[str, str]]):
        entries: Dict[str, str] = {}
        for exposed, key in pairs:
            if not exposed or not key:
                raise ConfigurationError(f"Invalid field mapping: {exposed!r} -> {key!r}")
            if exposed in entries:
                raise ConfigurationError(f"Duplicate author field '{exposed}'")
            entries[str(exposed)] = str(key)
        object.__setattr__(self, '_entries', entries)

    def __setattr__(self, name, value):
        raise AttributeError("FieldMap is read-only")

    def get(self, exposed_name: str) -> Optional[str]:
        return self._entries.get(exposed_name)

    def only(self, *names: str) -> "FieldMap":
        """Return a sub-map limited to ``names`` (keeps this map's order)."""
        missing = [n for n in names if n not in self._entries]
        if missing:
            raise ConfigurationError(f"Unknown author fields: {', '.join(missing)}")
        return FieldMap((n, k) for n, k in self._entries.items() if n in names)

    def names(self) -> Tuple[str, ...]:
        return tuple(self._entries)

    def items(self) -> Iterator[Tuple[str, str]]:
        return iter(self._entries.items())

    def __iter__(self) -> Iterator[Tuple[str, str]]:
        return self.items()

    def __contains__(self, exposed_name: object) -> bool:
        return exposed_name in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:  # pragma: no cover - debugging aid
        return f"FieldMap({list(self._entries.items())!r})"


def default_field_map() -> FieldMap:
    return FieldMap(DEFAULT_AUTHOR_FIELDS)
