# data/repositories/appointment.py

from datetime import datetime, timezone
from typing import Any

from hms.data.store import DocumentStore

APPOINTMENTS_COLLECTION = "appointments"
STATUS_SCHEDULED = "Scheduled"

def book_appointment(
	store: DocumentStore,
	*,
	patient_id: str,
	doctor_id: str,
	date: str,
	time: str
) -> str:
	"""Stores a new appointment. Overlapping bookings are not rejected."""
	return store.add(APPOINTMENTS_COLLECTION, {
		"patientId": patient_id,
		"doctorId": doctor_id,
		"date": date,
		"time": time,
		"status": STATUS_SCHEDULED,
		"createdAt": datetime.now(timezone.utc)
	})

def list_appointments(store: DocumentStore, *, offset: int = 0, limit: int | None = None) -> list[dict[str, Any]]:
	return store.query(APPOINTMENTS_COLLECTION, offset=offset, limit=limit)

def get_doctor_appointments(store: DocumentStore, doctor_id: str) -> list[dict[str, Any]]:
	return store.query(APPOINTMENTS_COLLECTION, {"doctorId": doctor_id})

def get_patient_appointments(store: DocumentStore, patient_id: str) -> list[dict[str, Any]]:
	return store.query(APPOINTMENTS_COLLECTION, {"patientId": patient_id})

def get_booked_times(store: DocumentStore, doctor_id: str, date: str) -> list[Any]:
	appointments = store.query(APPOINTMENTS_COLLECTION, {"doctorId": doctor_id, "date": date})
	return [appointment.get("time") for appointment in appointments]

def update_status(store: DocumentStore, appointment_id: str, status: str) -> None:
	store.update(APPOINTMENTS_COLLECTION, appointment_id, {"status": status})

def cancel_appointment(store: DocumentStore, appointment_id: str) -> None:
	store.delete(APPOINTMENTS_COLLECTION, appointment_id)
