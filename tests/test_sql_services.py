from coauthorsql.sql import SQLAuthorLookup, SQLMetadataStore, SQLPostSource, SQLTermQuery


def test_lookup_platform_user(session_factory, populated_db):
    rec = SQLAuthorLookup(session_factory).get_by_slug('jane-doe')
    assert rec is not None
    assert rec.kind == 'wpuser'
    assert rec.identifier == populated_db['users'][0].id
    assert rec.get('user_email') == 'jane@example.com'
    assert rec.get('type') == 'wpuser'
    # names are kept in user meta, not on the users table
    assert rec.get('first_name') is None


def test_lookup_guest_author(session_factory, populated_db):
    rec = SQLAuthorLookup(session_factory).get_by_slug('ghost-writer')
    assert rec is not None
    assert rec.kind == 'guest-author'
    assert rec.get('display_name') == 'Ghost Writer'
    assert rec.get('website') == 'https://ghost.example.com'
    assert rec.get('user_url') is None


def test_lookup_miss(session_factory, populated_db):
    assert SQLAuthorLookup(session_factory).get_by_slug('nobody') is None


def test_metadata_store(session_factory, populated_db):
    jane, bob = populated_db['users']
    meta = SQLMetadataStore(session_factory)
    assert meta.get(jane.id, 'first_name') == 'Jane'
    assert meta.get(bob.id, 'last_name') is None
    assert meta.get(None, 'first_name') is None


def test_term_query_orders(session_factory, populated_db):
    team = populated_db['posts'][0]
    q = SQLTermQuery(session_factory)
    by_name = q.query({'taxonomy': 'author', 'object_ids': [team.id], 'orderby': 'name', 'order': 'ASC'})
    assert [t.slug for t in by_name] == ['bob-smith', 'ghost-writer', 'jane-doe']
    by_term_order = q.query({'taxonomy': 'author', 'object_ids': [team.id], 'orderby': 'term_order'})
    assert [t.slug for t in by_term_order] == ['ghost-writer', 'jane-doe', 'bob-smith']
    desc = q.query({'taxonomy': 'author', 'object_ids': [team.id], 'orderby': 'term_order', 'order': 'DESC'})
    assert [t.slug for t in desc] == ['bob-smith', 'jane-doe', 'ghost-writer']
    limited = q.query({'taxonomy': 'author', 'object_ids': [team.id], 'orderby': 'term_order', 'number': 2})
    assert [t.slug for t in limited] == ['ghost-writer', 'jane-doe']


def test_term_query_without_objects(session_factory, populated_db):
    q = SQLTermQuery(session_factory)
    all_authors = q.query({'taxonomy': 'author', 'orderby': 'slug'})
    assert [t.slug for t in all_authors] == ['bob-smith', 'ghost-writer', 'jane-doe', 'nobody']
    assert all(t.taxonomy == 'author' for t in all_authors)
    # term_order without objects falls back to term id order
    by_id = q.query({'taxonomy': 'author', 'orderby': 'term_order'})
    assert [t.term_id for t in by_id] == sorted(t.term_id for t in by_id)


def test_term_query_unknown_orderby_uses_name(session_factory, populated_db, caplog):
    terms = SQLTermQuery(session_factory).query({'taxonomy': 'author', 'orderby': 'bogus'})
    assert [t.name for t in terms] == sorted(t.name for t in terms)
    assert 'bogus' in caplog.text


def test_post_source(session_factory, populated_db):
    posts = SQLPostSource(session_factory)
    assert [p.title for p in posts.list()] == ['Team effort', 'Solo']
    team = populated_db['posts'][0]
    assert posts.get(team.id).title == 'Team effort'
    assert posts.get(9999) is None
