"""Settings for the co-authors GraphQL integration.

Environment variables (read by :meth:`CoAuthorsSettings.from_env`):
  COAUTHORSQL_TAXONOMY      taxonomy holding author terms (default 'author')
  COAUTHORSQL_SINGLE_NAME   GraphQL single type name (default 'coAuthor')
  COAUTHORSQL_PLURAL_NAME   GraphQL plural/connection name (default 'coAuthors')
"""
from __future__ import annotations

import os
from dataclasses import dataclass, replace
from typing import Any

__all__ = ['CoAuthorsSettings', 'DEFAULT_TAXONOMY', 'TERM_ORDER', 'PLATFORM_USER_KIND', 'GUEST_AUTHOR_KIND']

DEFAULT_TAXONOMY = 'author'
# orderby value that keeps the order a post assigned to its terms
TERM_ORDER = 'term_order'
PLATFORM_USER_KIND = 'wpuser'
GUEST_AUTHOR_KIND = 'guest-author'


@dataclass(frozen=True)
class CoAuthorsSettings:
    taxonomy: str = DEFAULT_TAXONOMY
    graphql_single_name: str = 'coAuthor'
    graphql_plural_name: str = 'coAuthors'
    order_sentinel: str = TERM_ORDER
    platform_user_kind: str = PLATFORM_USER_KIND

    @classmethod
    def from_env(cls, **overrides: Any) -> "CoAuthorsSettings":
        env = {
            'taxonomy': os.getenv('COAUTHORSQL_TAXONOMY'),
            'graphql_single_name': os.getenv('COAUTHORSQL_SINGLE_NAME'),
            'graphql_plural_name': os.getenv('COAUTHORSQL_PLURAL_NAME'),
        }
        data = {k: v for k, v in env.items() if v}
        data.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**data)

    def with_taxonomy(self, taxonomy: str) -> "CoAuthorsSettings":
        if not taxonomy or taxonomy == self.taxonomy:
            return self
        return replace(self, taxonomy=taxonomy)
