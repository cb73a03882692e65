# utils/validation.py

from typing import Any, Iterable


def validate_input(payload: dict[str, Any], required_fields: Iterable[str]) -> str | None:
	"""Returns an error message for the first missing or falsy field, else None.

	Falsy values ("", 0, None, False, empty containers) count as missing.
	"""
	for field in required_fields:
		if not payload.get(field):
			return f"Missing required field: {field}"
	return None
