# data/connection.py

from pymongo import MongoClient
from pymongo.errors import PyMongoError

from hms.config.settings import Settings
from hms.utils.logger import logger


class ActionFailed(Exception):
	"""Raised when a database action fails."""

def connect(settings: Settings) -> MongoClient:
	"""Opens a pooled client. The connection itself is established lazily by pymongo."""
	try:
		logger(tag="mongo").info(f"Initializing MongoDB connection to database '{settings.MONGO_DB}'")
		return MongoClient(
			settings.MONGO_URI,
			serverSelectionTimeoutMS=settings.MONGO_TIMEOUT_MS,
			tz_aware=True
		)
	except PyMongoError as e:
		logger(tag="mongo").error(f"Failed to create MongoDB client: {e}")
		raise

def close_connection(client: MongoClient | None) -> None:
	if client is not None:
		logger(tag="mongo").info("Closing MongoDB connection.")
		client.close()
