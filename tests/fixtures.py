"""Database fixtures for CoAuthorsQL tests (shared)."""

import pytest
from datetime import datetime
from sqlalchemy.orm import Session

from coauthorsql.sql.models import User, UserMeta, GuestAuthor, Term, TermRelationship, Post


def create_sample_users(session: Session):
    """Create and commit platform users; names live in user meta only."""
    users = [
        User(
            user_login="jane",
            user_nicename="jane-doe",
            user_email="jane@example.com",
            user_url="https://jane.example.com",
            user_registered=datetime(2020, 1, 2, 3, 4, 5),
            display_name="Jane Doe",
        ),
        User(
            user_login="bob",
            user_nicename="bob-smith",
            user_email="bob@example.com",
            user_url="",
            user_registered=datetime(2021, 6, 7, 8, 9, 10),
            display_name="Bob Smith",
        ),
    ]
    session.add_all(users)
    session.flush()
    jane, bob = users
    session.add_all([
        UserMeta(user_id=jane.id, meta_key="first_name", meta_value="Jane"),
        UserMeta(user_id=jane.id, meta_key="last_name", meta_value="Doe"),
        UserMeta(user_id=bob.id, meta_key="first_name", meta_value="Bob"),
    ])
    session.commit()
    return users


@pytest.fixture(scope="function")
def sample_users(db_session: Session):
    return create_sample_users(db_session)


def create_sample_guest_authors(session: Session):
    guests = [
        GuestAuthor(
            user_nicename="ghost-writer",
            user_login="ghost-writer",
            display_name="Ghost Writer",
            first_name="Ghost",
            last_name=None,
            user_email="ghost@example.com",
            website="https://ghost.example.com",
        ),
    ]
    session.add_all(guests)
    session.commit()
    return guests


@pytest.fixture(scope="function")
def sample_guest_authors(db_session: Session):
    return create_sample_guest_authors(db_session)


def create_sample_terms(session: Session):
    """Author terms (one per author plus an orphan) and a category."""
    terms = {
        'jane-doe': Term(name="Jane Doe", slug="jane-doe", taxonomy="author"),
        'bob-smith': Term(name="Bob Smith", slug="bob-smith", taxonomy="author"),
        'ghost-writer': Term(name="Ghost Writer", slug="ghost-writer", taxonomy="author"),
        'nobody': Term(name="Nobody", slug="nobody", taxonomy="author"),
        'news': Term(name="News", slug="news", taxonomy="category"),
    }
    session.add_all(terms.values())
    session.commit()
    return terms


@pytest.fixture(scope="function")
def sample_terms(db_session: Session):
    return create_sample_terms(db_session)


def create_sample_posts(session: Session, terms):
    """Posts with authors attached in an order that differs from name order."""
    team = Post(title="Team effort")
    solo = Post(title="Solo")
    session.add_all([team, solo])
    session.flush()
    session.add_all([
        TermRelationship(object_id=team.id, term_id=terms['ghost-writer'].term_id, term_order=0),
        TermRelationship(object_id=team.id, term_id=terms['jane-doe'].term_id, term_order=1),
        TermRelationship(object_id=team.id, term_id=terms['bob-smith'].term_id, term_order=2),
        TermRelationship(object_id=team.id, term_id=terms['news'].term_id, term_order=0),
        TermRelationship(object_id=solo.id, term_id=terms['bob-smith'].term_id, term_order=0),
    ])
    session.commit()
    return [team, solo]


@pytest.fixture(scope="function")
def sample_posts(db_session: Session, sample_terms):
    return create_sample_posts(db_session, sample_terms)


def seed_populated_db(session: Session):
    """Seed users, guest authors, terms and posts; same structure as populated_db."""
    users = create_sample_users(session)
    guests = create_sample_guest_authors(session)
    terms = create_sample_terms(session)
    posts = create_sample_posts(session, terms)
    return {
        'users': users,
        'guest_authors': guests,
        'terms': terms,
        'posts': posts,
    }


@pytest.fixture(scope="function")
def populated_db(sample_users, sample_guest_authors, sample_terms, sample_posts):
    return {
        'users': sample_users,
        'guest_authors': sample_guest_authors,
        'terms': sample_terms,
        'posts': sample_posts,
    }
