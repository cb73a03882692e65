# data/__init__.py
"""
Data layer: the document store, the identity provider and the repositories
that know which collection each entity lives in.
"""

from .connection import ActionFailed, close_connection, connect
from .identity import Identity, IdentityError, IdentityProvider, MongoIdentityProvider
from .store import DocumentNotFound, DocumentStore, MongoDocumentStore

__all__ = [
	'ActionFailed',
	'close_connection',
	'connect',
	'DocumentNotFound',
	'DocumentStore',
	'Identity',
	'IdentityError',
	'IdentityProvider',
	'MongoDocumentStore',
	'MongoIdentityProvider',
]
