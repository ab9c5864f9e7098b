from __future__ import annotations
from typing import Any, Dict, Mapping

from ..config import CoAuthorsSettings

__all__ = ['TaxonomyRegistrationAdapter']


class TaxonomyRegistrationAdapter:
    """Flag the author taxonomy as GraphQL-visible during taxonomy registration.

    Hooked on ``register_taxonomy_args``: receives the registration options and
    the taxonomy name and returns the options to register with. Other
    taxonomies pass through untouched (the very same object is returned).
    """

    def __init__(self, settings: CoAuthorsSettings | None = None):
        self.settings = settings or CoAuthorsSettings()

    @property
    def taxonomy(self) -> str:
        return self.settings.taxonomy

    def adjust(self, options: Mapping[str, Any], taxonomy_name: str) -> Mapping[str, Any]:
        if taxonomy_name != self.settings.taxonomy:
            return options
        out: Dict[str, Any] = dict(options or {})
        out['show_in_graphql'] = True
        out['graphql_single_name'] = self.settings.graphql_single_name
        out['graphql_plural_name'] = self.settings.graphql_plural_name
        return out

