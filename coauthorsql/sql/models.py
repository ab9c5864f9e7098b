"""SQLAlchemy models backing the reference author, term and post services."""

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, Text, UniqueConstraint, func
from sqlalchemy.orm import DeclarativeBase, relationship


class Base(DeclarativeBase):
    pass


class User(Base):
    """Platform users."""
    __tablename__ = 'users'
    __table_args__ = {'comment': 'Platform users'}

    id = Column(Integer, primary_key=True)
    user_login = Column(String(60), nullable=False, unique=True)
    user_nicename = Column(String(50), nullable=False, index=True)
    user_email = Column(String(100), nullable=False, default='')
    user_url = Column(String(100), nullable=False, default='')
    user_registered = Column(DateTime, nullable=False, server_default=func.current_timestamp())
    display_name = Column(String(250), nullable=False, default='')

    meta = relationship('UserMeta', back_populates='user', cascade='all, delete-orphan')


class UserMeta(Base):
    """Free-form key/value attributes of a platform user."""
    __tablename__ = 'usermeta'

    umeta_id = Column(Integer, primary_key=True)
    user_id = Column(Integer, ForeignKey('users.id', ondelete='CASCADE'), nullable=False, index=True)
    meta_key = Column(String(255), nullable=False, index=True)
    meta_value = Column(Text, nullable=True)

    user = relationship('User', back_populates='meta')


class GuestAuthor(Base):
    """Authors credited on content without a platform account."""
    __tablename__ = 'guest_authors'

    id = Column(Integer, primary_key=True)
    user_nicename = Column(String(50), nullable=False, unique=True)
    user_login = Column(String(60), nullable=True)
    display_name = Column(String(250), nullable=False, default='')
    first_name = Column(String(100), nullable=True)
    last_name = Column(String(100), nullable=True)
    user_email = Column(String(100), nullable=True)
    website = Column(String(100), nullable=True)


class Term(Base):
    __tablename__ = 'terms'
    __table_args__ = (UniqueConstraint('taxonomy', 'slug', name='uq_terms_taxonomy_slug'),)

    term_id = Column(Integer, primary_key=True)
    name = Column(String(200), nullable=False)
    slug = Column(String(200), nullable=False)
    taxonomy = Column(String(32), nullable=False, index=True)


class Post(Base):
    __tablename__ = 'posts'

    id = Column(Integer, primary_key=True)
    title = Column(Text, nullable=False, default='')

    term_relationships = relationship('TermRelationship', back_populates='post', cascade='all, delete-orphan')


class TermRelationship(Base):
    """Terms attached to a post; ``term_order`` keeps the order they were assigned in."""
    __tablename__ = 'term_relationships'

    object_id = Column(Integer, ForeignKey('posts.id', ondelete='CASCADE'), primary_key=True)
    term_id = Column(Integer, ForeignKey('terms.term_id', ondelete='CASCADE'), primary_key=True)
    term_order = Column(Integer, nullable=False, default=0)

    post = relationship('Post', back_populates='term_relationships')
    term = relationship('Term')
