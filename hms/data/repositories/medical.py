# data/repositories/medical.py
"""
Health records written by doctors. Records are never edited after upload.
"""

from datetime import datetime, timezone
from typing import Any

from hms.data.store import DocumentStore

HEALTH_RECORDS_COLLECTION = "healthRecords"

def create_health_record(
	store: DocumentStore,
	*,
	doctor_id: str,
	patient_id: str,
	diagnosis: str,
	prescription: str,
	notes: str
) -> str:
	return store.add(HEALTH_RECORDS_COLLECTION, {
		"doctorId": doctor_id,
		"patientId": patient_id,
		"diagnosis": diagnosis,
		"prescription": prescription,
		"notes": notes,
		"createdAt": datetime.now(timezone.utc)
	})

def get_patient_records(store: DocumentStore, patient_id: str) -> list[dict[str, Any]]:
	return store.query(HEALTH_RECORDS_COLLECTION, {"patientId": patient_id})

def delete_records_for_patient(store: DocumentStore, patient_id: str) -> int:
	"""Deletes every record of the patient in a single batch."""
	record_ids = [record["id"] for record in get_patient_records(store, patient_id)]
	return store.delete_batch(HEALTH_RECORDS_COLLECTION, record_ids)
