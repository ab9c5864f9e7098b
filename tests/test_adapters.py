from coauthorsql.config import CoAuthorsSettings
from coauthorsql.core.ordering import ConnectionOrderAdapter, caller_orderby
from coauthorsql.core.taxonomy import TaxonomyRegistrationAdapter


def test_taxonomy_adapter_flags_author_taxonomy():
    adapter = TaxonomyRegistrationAdapter()
    opts = {'show_in_graphql': False, 'graphql_single_name': 'writer', 'hierarchical': False}
    out = adapter.adjust(opts, 'author')
    assert out['show_in_graphql'] is True
    assert out['graphql_single_name'] == 'coAuthor'
    assert out['graphql_plural_name'] == 'coAuthors'
    assert out['hierarchical'] is False
    # input left untouched
    assert opts['graphql_single_name'] == 'writer'


def test_taxonomy_adapter_returns_other_taxonomies_unchanged():
    adapter = TaxonomyRegistrationAdapter()
    opts = {'hierarchical': True}
    assert adapter.adjust(opts, 'category') is opts
    assert opts == {'hierarchical': True}


def test_taxonomy_adapter_is_idempotent():
    adapter = TaxonomyRegistrationAdapter()
    once = adapter.adjust({}, 'author')
    twice = adapter.adjust(adapter.adjust({}, 'author'), 'author')
    assert once == twice


def test_taxonomy_adapter_follows_settings():
    adapter = TaxonomyRegistrationAdapter(CoAuthorsSettings(taxonomy='byline', graphql_single_name='byline',
                                                            graphql_plural_name='bylines'))
    assert adapter.adjust({}, 'author') == {}
    assert adapter.adjust({}, 'byline') == {
        'show_in_graphql': True, 'graphql_single_name': 'byline', 'graphql_plural_name': 'bylines',
    }


def test_order_adapter_sets_term_order_without_caller_orderby():
    args = {'taxonomy': 'author', 'orderby': 'name'}
    out = ConnectionOrderAdapter().adjust(args, {})
    assert out is args
    assert out['orderby'] == 'term_order'


def test_order_adapter_respects_caller_orderby():
    args = {'taxonomy': 'author', 'orderby': 'name'}
    out = ConnectionOrderAdapter().adjust(args, {'where': {'orderby': 'name'}})
    assert out == {'taxonomy': 'author', 'orderby': 'name'}


def test_order_adapter_treats_none_orderby_as_absent():
    args = {'taxonomy': 'author'}
    ConnectionOrderAdapter().adjust(args, {'where': {'orderby': None}})
    assert args['orderby'] == 'term_order'


def test_order_adapter_ignores_other_taxonomies():
    adapter = ConnectionOrderAdapter()
    args = {'taxonomy': 'category', 'orderby': 'name'}
    assert adapter.adjust(args, {}) == {'taxonomy': 'category', 'orderby': 'name'}
    assert adapter.adjust(args, {'where': {'orderby': 'slug'}}) == {'taxonomy': 'category', 'orderby': 'name'}
    assert adapter.adjust({}, {}) == {}


def test_order_adapter_hook_signature():
    args = {'taxonomy': 'author'}
    assert ConnectionOrderAdapter().filter(args, object(), None)['orderby'] == 'term_order'


def test_caller_orderby_reads_objects_and_mappings():
    class Where:
        orderby = 'slug'

    assert caller_orderby(None) is None
    assert caller_orderby({'first': 2}) is None
    assert caller_orderby({'where': {'orderby': 'name'}}) == 'name'
    assert caller_orderby({'where': Where()}) == 'slug'
