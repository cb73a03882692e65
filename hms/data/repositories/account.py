# data/repositories/account.py
"""
Admin, doctor and patient profiles.

A profile document lives under the same id as its identity. Nothing links the
two beyond that id: creating or deleting an account is an identity call
followed by a store call, and a failure between them is not rolled back.

## Doctor fields
	name, email, specialization, phone
	role: always "DOCTOR"
	available: whether patients can book; true on creation
	createdAt: creation timestamp

## Patient fields
	name, email, phone
	role: always "PATIENT"
	createdAt: creation timestamp
"""

from datetime import datetime, timezone
from typing import Any

from hms.data.identity import IdentityProvider
from hms.data.repositories.medical import delete_records_for_patient
from hms.data.store import DocumentStore
from hms.utils.logger import logger

ADMINS_COLLECTION = "admins"
DOCTORS_COLLECTION = "doctors"
PATIENTS_COLLECTION = "patients"

ROLE_ADMIN = "ADMIN"
ROLE_DOCTOR = "DOCTOR"
ROLE_PATIENT = "PATIENT"

# Login resolves roles in this order
ROLE_LOOKUP_ORDER = (
	(ROLE_ADMIN, ADMINS_COLLECTION),
	(ROLE_DOCTOR, DOCTORS_COLLECTION),
	(ROLE_PATIENT, PATIENTS_COLLECTION),
)

def collection_for_role(role: str) -> str:
	"""'DOCTOR' -> 'doctors'"""
	return role.lower() + "s"

def create_doctor(
	store: DocumentStore,
	identity: IdentityProvider,
	*,
	name: str,
	email: str,
	password: str,
	specialization: str,
	phone: str
) -> str:
	uid = identity.create(email, password, name)
	store.set(DOCTORS_COLLECTION, uid, {
		"name": name,
		"email": email,
		"specialization": specialization,
		"phone": phone,
		"role": ROLE_DOCTOR,
		"available": True,
		"createdAt": datetime.now(timezone.utc)
	})
	logger().info(f"Created doctor {uid}")
	return uid

def create_patient(
	store: DocumentStore,
	identity: IdentityProvider,
	*,
	name: str,
	email: str,
	password: str,
	phone: str
) -> str:
	uid = identity.create(email, password, name)
	store.set(PATIENTS_COLLECTION, uid, {
		"name": name,
		"email": email,
		"phone": phone,
		"role": ROLE_PATIENT,
		"createdAt": datetime.now(timezone.utc)
	})
	logger().info(f"Created patient {uid}")
	return uid

def create_admin(
	store: DocumentStore,
	identity: IdentityProvider,
	*,
	name: str,
	email: str,
	password: str
) -> str:
	uid = identity.create(email, password, name)
	store.set(ADMINS_COLLECTION, uid, {
		"name": name,
		"email": email,
		"role": ROLE_ADMIN,
		"createdAt": datetime.now(timezone.utc)
	})
	logger().info(f"Created admin {uid}")
	return uid

def get_doctor(store: DocumentStore, doctor_id: str) -> dict[str, Any] | None:
	return store.get(DOCTORS_COLLECTION, doctor_id)

def get_patient(store: DocumentStore, patient_id: str) -> dict[str, Any] | None:
	return store.get(PATIENTS_COLLECTION, patient_id)

def get_profile(store: DocumentStore, uid: str, role: str) -> dict[str, Any] | None:
	return store.get(collection_for_role(role), uid)

def resolve_role(store: DocumentStore, uid: str) -> tuple[str, dict[str, Any]] | None:
	"""Returns (role, profile) for the first collection holding uid."""
	for role, collection in ROLE_LOOKUP_ORDER:
		profile = store.get(collection, uid)
		if profile is not None:
			return role, profile
	return None

def update_doctor(store: DocumentStore, doctor_id: str, updates: dict[str, Any]) -> None:
	store.update(DOCTORS_COLLECTION, doctor_id, updates)

def set_doctor_availability(store: DocumentStore, doctor_id: str, available: Any) -> None:
	store.update(DOCTORS_COLLECTION, doctor_id, {"available": available})

def list_patients(store: DocumentStore) -> list[dict[str, Any]]:
	return store.query(PATIENTS_COLLECTION)

def list_doctors(
	store: DocumentStore,
	*,
	specialization: str | None = None,
	available_only: bool = False,
	offset: int = 0,
	limit: int | None = None
) -> list[dict[str, Any]]:
	filters: dict[str, Any] = {}
	if available_only:
		filters["available"] = True
	if specialization:
		filters["specialization"] = specialization
	return store.query(DOCTORS_COLLECTION, filters, offset=offset, limit=limit)

def delete_doctor(store: DocumentStore, identity: IdentityProvider, doctor_id: str) -> None:
	"""Removes the identity, then the profile. Appointments are left in place."""
	identity.delete(doctor_id)
	store.delete(DOCTORS_COLLECTION, doctor_id)
	logger().info(f"Deleted doctor {doctor_id}")

def delete_patient(store: DocumentStore, identity: IdentityProvider, patient_id: str) -> int:
	"""Removes the identity, the profile and every health record of the patient.

	Returns the number of health records deleted.
	"""
	identity.delete(patient_id)
	store.delete(PATIENTS_COLLECTION, patient_id)
	removed = delete_records_for_patient(store, patient_id)
	logger().info(f"Deleted patient {patient_id} and {removed} health records")
	return removed
