# SQLAlchemy reference collaborators for the co-authors integration.
from .models import Base, User, UserMeta, GuestAuthor, Term, TermRelationship, Post
from .services import SQLAuthorLookup, SQLMetadataStore, SQLTermQuery, SQLPostSource

__all__ = [
    'Base', 'User', 'UserMeta', 'GuestAuthor', 'Term', 'TermRelationship', 'Post',
    'SQLAuthorLookup', 'SQLMetadataStore', 'SQLTermQuery', 'SQLPostSource',
]
