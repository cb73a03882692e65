#!/usr/bin/env python3
"""
Hospital Management System - Startup Script
Starts the API server with uvicorn using HOST/PORT from the environment.
"""

import sys

import uvicorn
from dotenv import load_dotenv

from hms.config.settings import Settings


def main():
	"""Start the Hospital Management System API"""
	load_dotenv()
	settings = Settings()

	print(settings.APP_NAME)
	print("=" * 50)
	print(f"MongoDB: {settings.MONGO_URI} (database '{settings.MONGO_DB}')")
	if not settings.MONGO_USE_TRANSACTIONS:
		print("Warning: MONGO_USE_TRANSACTIONS is off, health-record cascades are not atomic")
	print(f"API documentation at: http://{settings.HOST}:{settings.PORT}/docs")
	print("\nPress Ctrl+C to stop the server")
	print("=" * 50)

	try:
		uvicorn.run(
			"hms.main:app",
			host=settings.HOST,
			port=settings.PORT,
			log_level=settings.LOG_LEVEL.lower()
		)
	except Exception as e:
		print(f"Server startup failed: {e}")
		sys.exit(1)

if __name__ == "__main__":
	main()
