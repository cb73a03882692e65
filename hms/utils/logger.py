# utils/logger.py

import logging
import sys

_FORMAT = "%(asctime)s | %(levelname)-8s [%(name)s%(tag)s] %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

class TaggedFormatter(logging.Formatter):
	"""Fills in an empty tag for records from uvicorn, pymongo and other libraries."""

	def format(self, record: logging.LogRecord) -> str:
		if not hasattr(record, "tag"):
			record.tag = ""
		return super().format(record)

def setup_logging(level: int | str = logging.INFO) -> None:
	"""Configures the root logger once per process; later calls are ignored."""
	root_logger = logging.getLogger()
	if root_logger.handlers:
		return

	if isinstance(level, str):
		level = logging.getLevelName(level.upper())
		if not isinstance(level, int):
			level = logging.INFO

	handler = logging.StreamHandler(sys.stdout)
	handler.setFormatter(TaggedFormatter(_FORMAT, _DATE_FORMAT))
	root_logger.addHandler(handler)
	root_logger.setLevel(level)
	# pymongo is chatty at INFO about topology changes
	logging.getLogger("pymongo").setLevel(logging.WARNING)

def logger(tag: str | None = None) -> logging.LoggerAdapter:
	"""
	Logger named after the calling module, stamping records with `tag`.

	`logger(tag="startup").info("...")` inside `hms.main` prints `[hms.main:startup]`.
	"""
	module_name = sys._getframe(1).f_globals.get("__name__", "hms")
	return logging.LoggerAdapter(
		logging.getLogger(module_name),
		{"tag": f":{tag}" if tag is not None else ""}
	)
