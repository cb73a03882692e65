# scripts/create_admin.py
"""
Creates an administrator account.

Admins cannot be created over HTTP, so the first one (and any later ones)
come from here.

Usage:
	python -m hms.scripts.create_admin --name "Ada Admin" --email ada@example.com --password secret1
"""

import argparse
import sys

from dotenv import load_dotenv

from hms.config.settings import Settings
from hms.core.state import HospitalState
from hms.data.identity import IdentityError
from hms.data.repositories.account import create_admin
from hms.utils.logger import logger, setup_logging


def main(argv: list[str] | None = None) -> int:
	parser = argparse.ArgumentParser(description="Create an administrator account")
	parser.add_argument("--name", required=True)
	parser.add_argument("--email", required=True)
	parser.add_argument("--password", required=True)
	args = parser.parse_args(argv)

	load_dotenv()
	settings = Settings()
	setup_logging(settings.LOG_LEVEL)

	state = HospitalState(settings=settings)
	state.initialize()
	try:
		uid = create_admin(state.store, state.identity, name=args.name, email=args.email, password=args.password)
	except IdentityError as e:
		logger(tag="create_admin").error(f"Could not create admin: {e}")
		return 1
	finally:
		state.close()

	logger(tag="create_admin").info(f"Created admin {args.email} with uid {uid}")
	return 0

if __name__ == "__main__":
	sys.exit(main())
