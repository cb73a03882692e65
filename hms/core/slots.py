# core/slots.py

from typing import Iterable

from hms.config.settings import Settings


def format_minutes(minutes: int) -> str:
	"""570 -> '09:30'"""
	hours, mins = divmod(minutes, 60)
	return f"{hours:02d}:{mins:02d}"

def generate_slots(
	start: int = Settings.SLOT_DAY_START,
	end: int = Settings.SLOT_DAY_END,
	step: int = Settings.SLOT_MINUTES
) -> list[str]:
	"""Slot start times from `start` (inclusive) to `end` (exclusive), in minutes from midnight."""
	return [format_minutes(minute) for minute in range(start, end, step)]

def available_slots(booked: Iterable[str], slots: list[str] | None = None) -> list[str]:
	"""Removes booked times from the day's slots, keeping slot order."""
	taken = set(booked)
	return [slot for slot in (slots if slots is not None else generate_slots()) if slot not in taken]
