# data/identity.py
"""
User identities: email, password and display name.

Profiles (admins, doctors, patients) are stored separately under the same id
the provider hands out here.
"""

import re
from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime, timezone
from uuid import uuid4

from pymongo import ASCENDING
from pymongo.database import Database
from pymongo.errors import DuplicateKeyError
from werkzeug.security import check_password_hash, generate_password_hash

from hms.utils.logger import logger

# Must not end in "s": profile lookups build collection names from roles as <role>s
IDENTITIES_COLLECTION = "auth_identity"
MIN_PASSWORD_LENGTH = 6

_EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")

class IdentityError(Exception):
	"""Raised by identity providers; the message is safe to show to clients."""

@dataclass
class Identity:
	uid: str
	email: str
	display_name: str | None = None

class IdentityProvider(ABC):

	@abstractmethod
	def create(self, email: str, password: str, display_name: str | None = None) -> str:
		"""Creates an identity and returns its uid."""

	@abstractmethod
	def delete(self, uid: str) -> None:
		...

	@abstractmethod
	def authenticate(self, email: str, password: str) -> Identity:
		...

	@staticmethod
	def normalize_email(email) -> str:
		if not isinstance(email, str):
			raise IdentityError("The email address is improperly formatted.")
		return email.strip().lower()

	@classmethod
	def check_new_credentials(cls, email, password) -> str:
		"""Validates credentials for a new identity and returns the normalized email."""
		email = cls.normalize_email(email)
		if not _EMAIL_PATTERN.match(email):
			raise IdentityError("The email address is improperly formatted.")
		if not isinstance(password, str) or len(password) < MIN_PASSWORD_LENGTH:
			raise IdentityError(
				f"The password must be a string with at least {MIN_PASSWORD_LENGTH} characters."
			)
		return email

class MongoIdentityProvider(IdentityProvider):
	"""Identities kept in their own collection with salted password hashes."""

	def __init__(self, database: Database):
		self._collection = database.get_collection(IDENTITIES_COLLECTION)

	def ensure_indexes(self) -> None:
		self._collection.create_index([("email", ASCENDING)], unique=True)

	def create(self, email: str, password: str, display_name: str | None = None) -> str:
		email = self.check_new_credentials(email, password)
		uid = uuid4().hex
		try:
			self._collection.insert_one({
				"_id": uid,
				"email": email,
				"password_hash": generate_password_hash(password),
				"display_name": display_name,
				"created_at": datetime.now(timezone.utc)
			})
		except DuplicateKeyError as e:
			raise IdentityError("The email address is already in use by another account.") from e
		logger(tag="identity").info(f"Created identity {uid}")
		return uid

	def delete(self, uid: str) -> None:
		result = self._collection.delete_one({"_id": uid})
		if result.deleted_count == 0:
			raise IdentityError("There is no user record corresponding to the provided identifier.")
		logger(tag="identity").info(f"Deleted identity {uid}")

	def authenticate(self, email: str, password: str) -> Identity:
		doc = self._collection.find_one({"email": self.normalize_email(email)})
		if doc is None or not isinstance(password, str) or not check_password_hash(doc["password_hash"], password):
			raise IdentityError("Invalid email or password")
		return Identity(uid=doc["_id"], email=doc["email"], display_name=doc.get("display_name"))
