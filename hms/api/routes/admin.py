# api/routes/admin.py

from typing import Any

from fastapi import APIRouter, Body, Depends, HTTPException

from hms.api.errors import INTERNAL_ERROR, require_fields
from hms.api.pagination import Page, get_page
from hms.core.state import get_identity, get_store
from hms.data.identity import IdentityProvider
from hms.data.repositories.account import (create_doctor, delete_doctor,
                                           delete_patient, get_doctor,
                                           get_patient, list_doctors,
                                           list_patients, update_doctor)
from hms.data.repositories.appointment import list_appointments
from hms.data.repositories.medical import get_patient_records
from hms.data.store import DocumentStore
from hms.models.requests import DoctorCreateRequest
from hms.utils.logger import logger

router = APIRouter(prefix="/api/admin", tags=["Admin"])

@router.post("/add-doctor", status_code=201)
async def add_doctor(
	req: DoctorCreateRequest,
	store: DocumentStore = Depends(get_store),
	identity: IdentityProvider = Depends(get_identity)
):
	require_fields(req.model_dump(), ["name", "email", "password", "specialization", "phone"])
	try:
		logger().info(f"POST /add-doctor email={req.email}")
		uid = create_doctor(
			store,
			identity,
			name=req.name,
			email=req.email,
			password=req.password,
			specialization=req.specialization,
			phone=req.phone
		)
		return {"message": "Doctor added successfully!", "uid": uid}
	except Exception as e:
		logger().error(f"Error adding doctor: {e}")
		raise HTTPException(status_code=400, detail=str(e))

@router.put("/update-doctor/{doctor_id}")
async def update_doctor_details(
	doctor_id: str,
	updates: dict[str, Any] = Body(...),
	store: DocumentStore = Depends(get_store)
):
	"""Merges the request body into the doctor's profile as-is."""
	try:
		logger().info(f"PUT /update-doctor/{doctor_id} fields={list(updates.keys())}")
		if get_doctor(store, doctor_id) is None:
			raise HTTPException(status_code=404, detail="Doctor not found")
		update_doctor(store, doctor_id, updates)
		return {"message": "Doctor details updated successfully!"}
	except HTTPException:
		raise
	except Exception as e:
		logger().error(f"Error updating doctor {doctor_id}: {e}")
		raise HTTPException(status_code=500, detail=INTERNAL_ERROR)

@router.delete("/delete-doctor/{doctor_id}")
async def remove_doctor(
	doctor_id: str,
	store: DocumentStore = Depends(get_store),
	identity: IdentityProvider = Depends(get_identity)
):
	try:
		logger().info(f"DELETE /delete-doctor/{doctor_id}")
		delete_doctor(store, identity, doctor_id)
		return {"message": "Doctor deleted successfully!"}
	except Exception as e:
		logger().error(f"Error deleting doctor {doctor_id}: {e}")
		raise HTTPException(status_code=500, detail="Error deleting doctor")

@router.delete("/delete-patient/{patient_id}")
async def remove_patient(
	patient_id: str,
	store: DocumentStore = Depends(get_store),
	identity: IdentityProvider = Depends(get_identity)
):
	try:
		logger().info(f"DELETE /delete-patient/{patient_id}")
		delete_patient(store, identity, patient_id)
		return {"message": "Patient deleted successfully!"}
	except Exception as e:
		logger().error(f"Error deleting patient {patient_id}: {e}")
		raise HTTPException(status_code=500, detail="Error deleting patient")

@router.get("/patients")
async def get_all_patients(store: DocumentStore = Depends(get_store)):
	try:
		patients = list_patients(store)
		logger().info(f"GET /patients returned {len(patients)} patients")
		return {"patients": patients}
	except Exception as e:
		logger().error(f"Error fetching patients: {e}")
		raise HTTPException(status_code=500, detail="Error fetching patients")

@router.get("/all-appointments")
async def get_all_appointments(
	page: Page = Depends(get_page),
	store: DocumentStore = Depends(get_store)
):
	try:
		logger().info(f"GET /all-appointments page={page.page} limit={page.limit}")
		appointments = list_appointments(store, offset=page.offset, limit=page.limit)
		return {"appointments": appointments}
	except Exception as e:
		logger().error(f"Error fetching appointments: {e}")
		raise HTTPException(status_code=500, detail="Error fetching appointments")

@router.get("/doctors")
async def get_all_doctors(store: DocumentStore = Depends(get_store)):
	try:
		doctors = list_doctors(store)
		logger().info(f"GET /doctors returned {len(doctors)} doctors")
		return {"doctors": doctors}
	except Exception as e:
		logger().error(f"Error fetching doctors: {e}")
		raise HTTPException(status_code=500, detail="Error fetching doctors")

@router.get("/patient/{patient_id}")
async def get_patient_details(patient_id: str, store: DocumentStore = Depends(get_store)):
	"""Patient profile together with all of their health records."""
	try:
		logger().info(f"GET /patient/{patient_id}")
		patient = get_patient(store, patient_id)
		if patient is None:
			raise HTTPException(status_code=404, detail="Patient not found")
		return {"patient": patient, "healthRecords": get_patient_records(store, patient_id)}
	except HTTPException:
		raise
	except Exception as e:
		logger().error(f"Error fetching patient details: {e}")
		raise HTTPException(status_code=500, detail="Error fetching patient details")

@router.get("/doctor/{doctor_id}")
async def get_doctor_details(doctor_id: str, store: DocumentStore = Depends(get_store)):
	try:
		logger().info(f"GET /doctor/{doctor_id}")
		doctor = get_doctor(store, doctor_id)
		if doctor is None:
			raise HTTPException(status_code=404, detail="Doctor not found")
		return {"doctor": doctor}
	except HTTPException:
		raise
	except Exception as e:
		logger().error(f"Error fetching doctor details: {e}")
		raise HTTPException(status_code=500, detail="Error fetching doctor details")
