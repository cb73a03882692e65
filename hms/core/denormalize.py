# core/denormalize.py

import asyncio
from typing import Any

from hms.data.store import DocumentStore

UNKNOWN_NAME = "Unknown"

def _reference(item: dict[str, Any], id_field: str) -> str | None:
	value = item.get(id_field)
	return value if isinstance(value, str) and value else None

async def fetch_names(
	store: DocumentStore,
	collection: str,
	doc_ids: set[str]
) -> dict[str, str]:
	"""Looks up every id concurrently and maps id -> name for the ones found."""
	ids = list(doc_ids)
	docs = await asyncio.gather(*(asyncio.to_thread(store.get, collection, doc_id) for doc_id in ids))
	return {
		doc_id: doc["name"]
		for doc_id, doc in zip(ids, docs)
		if doc is not None and doc.get("name")
	}

async def attach_names(
	store: DocumentStore,
	items: list[dict[str, Any]],
	*,
	id_field: str,
	collection: str,
	name_field: str
) -> list[dict[str, Any]]:
	"""
	Copies each item with `name_field` set from the document its `id_field` refers to.

	Unresolvable references get "Unknown". All lookups finish before anything
	is returned; lookup errors propagate.
	"""
	referenced = {ref for ref in (_reference(item, id_field) for item in items) if ref}
	names = await fetch_names(store, collection, referenced)
	return [
		{**item, name_field: names.get(_reference(item, id_field), UNKNOWN_NAME)}
		for item in items
	]
