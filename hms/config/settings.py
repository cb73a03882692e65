# config/settings.py

import os


def _env_bool(name: str, default: bool) -> bool:
	value = os.getenv(name)
	if value is None:
		return default
	return value.strip().lower() in ("1", "true", "yes", "on")

class Settings:
	"""Process configuration, read from the environment when instantiated."""

	APP_NAME: str = "Hospital Management System"
	VERSION: str = "1.0.0"

	# Working hours used to offer appointment slots, in minutes from midnight
	SLOT_DAY_START: int = 9 * 60
	SLOT_DAY_END: int = 17 * 60
	SLOT_MINUTES: int = 30

	DEFAULT_PAGE_SIZE: int = 10
	MAX_PAGE_SIZE: int = 100

	def __init__(self):
		self.HOST: str = os.getenv("HOST", "0.0.0.0")
		self.PORT: int = int(os.getenv("PORT", "5000"))
		self.LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
		self.CORS_ORIGINS: list[str] = [
			origin.strip() for origin in os.getenv("CORS_ORIGINS", "*").split(",") if origin.strip()
		]

		self.MONGO_URI: str = os.getenv("MONGO_URI", "mongodb://127.0.0.1:27017/")
		self.MONGO_DB: str = os.getenv("MONGO_DB", "hospitalmanagement")
		self.MONGO_TIMEOUT_MS: int = int(os.getenv("MONGO_TIMEOUT_MS", "5000"))
		# Standalone mongod has no transactions; turn this off for local development
		self.MONGO_USE_TRANSACTIONS: bool = _env_bool("MONGO_USE_TRANSACTIONS", True)
