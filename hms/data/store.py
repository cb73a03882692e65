# data/store.py
"""
Document store used by every route.

Documents are schema-less dicts addressed by a string id inside a named
collection. Reads return the stored fields without the id; `query` returns
each document with its id merged in front as `"id"`, which is the shape the
list endpoints send back to clients.
"""

from abc import ABC, abstractmethod
from typing import Any
from uuid import uuid4

from pymongo import ASCENDING, MongoClient
from pymongo.collection import Collection
from pymongo.errors import PyMongoError

from hms.data.connection import ActionFailed
from hms.utils.logger import logger


# Largest skip MongoDB can encode; offsets past it cannot match anything
MAX_SKIP = 2 ** 63 - 1

class DocumentNotFound(Exception):
	"""Raised when updating a document that does not exist."""

def with_id(doc_id: str, data: dict[str, Any]) -> dict[str, Any]:
	return {"id": doc_id, **data}

class DocumentStore(ABC):

	@abstractmethod
	def get(self, collection: str, doc_id: str) -> dict[str, Any] | None:
		"""Returns the document fields, or None if absent."""

	@abstractmethod
	def set(self, collection: str, doc_id: str, fields: dict[str, Any]) -> None:
		"""Creates or overwrites the document."""

	@abstractmethod
	def update(self, collection: str, doc_id: str, fields: dict[str, Any]) -> None:
		"""Merges fields into an existing document. Raises DocumentNotFound."""

	@abstractmethod
	def add(self, collection: str, fields: dict[str, Any]) -> str:
		"""Inserts a document under a generated id and returns the id."""

	@abstractmethod
	def delete(self, collection: str, doc_id: str) -> None:
		"""Deletes the document. Deleting an absent id is not an error."""

	@abstractmethod
	def query(
		self,
		collection: str,
		filters: dict[str, Any] | None = None,
		*,
		offset: int = 0,
		limit: int | None = None
	) -> list[dict[str, Any]]:
		"""Equality-filtered scan in id order."""

	@abstractmethod
	def delete_batch(self, collection: str, doc_ids: list[str]) -> int:
		"""Deletes all ids together; either every delete applies or none does."""

	def ping(self) -> bool:
		return True

class MongoDocumentStore(DocumentStore):
	"""DocumentStore over pymongo. Ids live in `_id` as strings."""

	def __init__(
		self,
		client: MongoClient,
		db_name: str,
		*,
		use_transactions: bool = True
	):
		self._client = client
		self._db = client[db_name]
		self._use_transactions = use_transactions

	def _collection(self, name: str) -> Collection:
		return self._db.get_collection(name)

	def get(self, collection: str, doc_id: str) -> dict[str, Any] | None:
		doc = self._collection(collection).find_one({"_id": doc_id})
		if doc is None:
			return None
		doc.pop("_id", None)
		return doc

	def set(self, collection: str, doc_id: str, fields: dict[str, Any]) -> None:
		document = {k: v for k, v in fields.items() if k != "_id"}
		self._collection(collection).replace_one({"_id": doc_id}, document, upsert=True)

	def update(self, collection: str, doc_id: str, fields: dict[str, Any]) -> None:
		coll = self._collection(collection)
		updates = {k: v for k, v in fields.items() if k != "_id"}
		if not updates:
			# $set refuses an empty document
			if coll.find_one({"_id": doc_id}, {"_id": 1}) is None:
				raise DocumentNotFound(f"No document '{doc_id}' in '{collection}'")
			return
		result = coll.update_one({"_id": doc_id}, {"$set": updates})
		if result.matched_count == 0:
			raise DocumentNotFound(f"No document '{doc_id}' in '{collection}'")

	def add(self, collection: str, fields: dict[str, Any]) -> str:
		doc_id = uuid4().hex
		document = {k: v for k, v in fields.items() if k != "_id"}
		self._collection(collection).insert_one({"_id": doc_id, **document})
		return doc_id

	def delete(self, collection: str, doc_id: str) -> None:
		self._collection(collection).delete_one({"_id": doc_id})

	def query(
		self,
		collection: str,
		filters: dict[str, Any] | None = None,
		*,
		offset: int = 0,
		limit: int | None = None
	) -> list[dict[str, Any]]:
		if offset > MAX_SKIP:
			return []
		cursor = self._collection(collection).find(filters or {}).sort("_id", ASCENDING)
		if offset:
			cursor = cursor.skip(offset)
		if limit is not None:
			cursor = cursor.limit(limit)
		results = []
		for doc in cursor:
			doc_id = doc.pop("_id")
			results.append(with_id(str(doc_id), doc))
		return results

	def delete_batch(self, collection: str, doc_ids: list[str]) -> int:
		if not doc_ids:
			return 0
		coll = self._collection(collection)
		selector = {"_id": {"$in": list(doc_ids)}}
		try:
			if not self._use_transactions:
				return coll.delete_many(selector).deleted_count
			with self._client.start_session() as session:
				return session.with_transaction(
					lambda s: coll.delete_many(selector, session=s).deleted_count
				)
		except PyMongoError as e:
			logger(tag="batch").error(f"Batch delete of {len(doc_ids)} documents in '{collection}' failed: {e}")
			raise ActionFailed(f"Batch delete in '{collection}' failed") from e

	def ping(self) -> bool:
		try:
			self._client.admin.command("ping")
			return True
		except PyMongoError as e:
			logger(tag="ping").warning(f"MongoDB ping failed: {e}")
			return False
