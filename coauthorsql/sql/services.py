"""SQLAlchemy-backed collaborators: author lookup, user metadata, term query, posts.

Each call opens a short-lived session from the injected ``sessionmaker``;
database errors propagate to the caller untouched.
"""
from __future__ import annotations

import logging
from typing import Any, Dict, List, Mapping, Optional, Sequence

from sqlalchemy import select
from sqlalchemy.orm import Session, sessionmaker

from ..config import GUEST_AUTHOR_KIND, PLATFORM_USER_KIND, TERM_ORDER
from ..core.records import AuthorRecord, TermReference
from .models import GuestAuthor, Post, Term, TermRelationship, User, UserMeta

logger = logging.getLogger(__name__)

__all__ = ['SQLAuthorLookup', 'SQLMetadataStore', 'SQLTermQuery', 'SQLPostSource']

_USER_ATTRS = ('user_login', 'user_nicename', 'user_email', 'user_url', 'user_registered', 'display_name')
_GUEST_ATTRS = ('user_login', 'user_nicename', 'display_name', 'first_name', 'last_name', 'user_email', 'website')


def _user_record(user: User) -> AuthorRecord:
    attrs: Dict[str, Any] = {k: getattr(user, k) for k in _USER_ATTRS}
    attrs['ID'] = user.id
    attrs['type'] = PLATFORM_USER_KIND
    return AuthorRecord(kind=PLATFORM_USER_KIND, identifier=user.id, attributes=attrs)


def _guest_record(guest: GuestAuthor) -> AuthorRecord:
    attrs: Dict[str, Any] = {k: getattr(guest, k) for k in _GUEST_ATTRS}
    attrs['ID'] = guest.id
    attrs['type'] = GUEST_AUTHOR_KIND
    return AuthorRecord(kind=GUEST_AUTHOR_KIND, identifier=guest.id, attributes=attrs)


class SQLAuthorLookup:
    """Find the author behind a slug: guest authors first, then platform users."""

    def __init__(self, session_factory: sessionmaker[Session]):
        self._session_factory = session_factory

    def get_by_slug(self, slug: str) -> Optional[AuthorRecord]:
        with self._session_factory() as session:
            guest = session.scalars(
                select(GuestAuthor).where(GuestAuthor.user_nicename == slug).limit(1)
            ).first()
            if guest is not None:
                return _guest_record(guest)
            user = session.scalars(
                select(User).where(User.user_nicename == slug).order_by(User.id).limit(1)
            ).first()
            if user is not None:
                return _user_record(user)
        return None


class SQLMetadataStore:
    def __init__(self, session_factory: sessionmaker[Session]):
        self._session_factory = session_factory

    def get(self, user_id: Any, key: str) -> Optional[str]:
        if user_id is None:
            return None
        with self._session_factory() as session:
            return session.scalars(
                select(UserMeta.meta_value)
                .where(UserMeta.user_id == user_id, UserMeta.meta_key == key)
                .order_by(UserMeta.umeta_id)
                .limit(1)
            ).first()


class SQLTermQuery:
    """Term query over ``terms``/``term_relationships``.

    Supported args: ``taxonomy`` (str or list), ``object_ids``, ``orderby``
    (``name``, ``slug``, ``term_id``, ``term_order``), ``order`` (``ASC`` or
    ``DESC``) and ``number``. ``term_order`` needs ``object_ids``; without them
    terms are ordered by id.
    """

    _ORDER_COLUMNS = {
        'name': Term.name,
        'slug': Term.slug,
        'term_id': Term.term_id,
    }

    def __init__(self, session_factory: sessionmaker[Session]):
        self._session_factory = session_factory

    @staticmethod
    def _as_list(value: Any) -> Optional[List[Any]]:
        if value is None:
            return None
        if isinstance(value, (list, tuple, set)):
            return list(value)
        return [value]

    def query(self, args: Mapping[str, Any]) -> List[TermReference]:
        stmt = select(Term)
        taxonomies = self._as_list(args.get('taxonomy'))
        if taxonomies:
            stmt = stmt.where(Term.taxonomy.in_(taxonomies))
        object_ids = self._as_list(args.get('object_ids'))
        if object_ids is not None:
            stmt = stmt.join(TermRelationship, TermRelationship.term_id == Term.term_id).where(
                TermRelationship.object_id.in_(object_ids)
            )
        orderby = str(args.get('orderby') or 'name').lower()
        if orderby == TERM_ORDER:
            col = TermRelationship.term_order if object_ids is not None else Term.term_id
        else:
            col = self._ORDER_COLUMNS.get(orderby)
            if col is None:
                logger.warning("Unsupported term orderby %r; ordering by name", orderby)
                col = Term.name
        desc = str(args.get('order') or 'ASC').upper() == 'DESC'
        stmt = stmt.order_by(col.desc() if desc else col.asc(), Term.term_id.asc())
        number = args.get('number')
        if number:
            stmt = stmt.limit(int(number))
        with self._session_factory() as session:
            rows: Sequence[Term] = session.scalars(stmt).all()
            return [
                TermReference(slug=t.slug, term_id=t.term_id, name=t.name, taxonomy=t.taxonomy)
                for t in rows
            ]


class SQLPostSource:
    def __init__(self, session_factory: sessionmaker[Session]):
        self._session_factory = session_factory

    def get(self, post_id: int) -> Optional[Post]:
        with self._session_factory() as session:
            return session.get(Post, post_id)

    def list(self) -> List[Post]:
        with self._session_factory() as session:
            return list(session.scalars(select(Post).order_by(Post.id)).all())
