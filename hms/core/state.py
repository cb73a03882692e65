# core/state.py

from fastapi import Depends, Request
from pymongo import MongoClient

from hms.config.settings import Settings
from hms.data.connection import close_connection, connect
from hms.data.identity import IdentityProvider, MongoIdentityProvider
from hms.data.store import DocumentStore, MongoDocumentStore
from hms.utils.logger import logger


class HospitalState:
	"""Clients shared by all requests of one application instance."""

	def __init__(
		self,
		store: DocumentStore | None = None,
		identity: IdentityProvider | None = None,
		settings: Settings | None = None
	):
		self.settings = settings or Settings()
		self.store = store
		self.identity = identity
		self._client: MongoClient | None = None

	@property
	def initialized(self) -> bool:
		return self.store is not None and self.identity is not None

	def initialize(self) -> None:
		"""Connects to MongoDB for whichever clients were not supplied."""
		if self.initialized:
			return
		self._client = connect(self.settings)
		if self.store is None:
			self.store = MongoDocumentStore(
				self._client,
				self.settings.MONGO_DB,
				use_transactions=self.settings.MONGO_USE_TRANSACTIONS
			)
		if self.identity is None:
			identity = MongoIdentityProvider(self._client[self.settings.MONGO_DB])
			identity.ensure_indexes()
			self.identity = identity
		logger(tag="state").info("Store and identity clients ready")

	def close(self) -> None:
		close_connection(self._client)
		self._client = None

def get_state(request: Request) -> HospitalState:
	"""Provides the application's state, for use as a dependency."""
	return request.app.state.hospital

def get_store(state: HospitalState = Depends(get_state)) -> DocumentStore:
	return state.store

def get_identity(state: HospitalState = Depends(get_state)) -> IdentityProvider:
	return state.identity
