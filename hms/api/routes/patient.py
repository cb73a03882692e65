# api/routes/patient.py

from fastapi import APIRouter, Depends, HTTPException

from hms.api.errors import INTERNAL_ERROR, require_fields
from hms.api.pagination import Page, get_page
from hms.core.denormalize import attach_names
from hms.core.slots import available_slots
from hms.core.state import get_store
from hms.data.repositories.account import (DOCTORS_COLLECTION, get_patient,
                                           list_doctors)
from hms.data.repositories.appointment import (book_appointment,
                                               cancel_appointment,
                                               get_booked_times,
                                               get_patient_appointments)
from hms.data.repositories.medical import get_patient_records
from hms.data.store import DocumentStore
from hms.models.requests import AppointmentCreateRequest
from hms.utils.logger import logger

router = APIRouter(prefix="/api/patient", tags=["Patient"])

@router.get("/profile/{patient_id}")
async def get_patient_profile(patient_id: str, store: DocumentStore = Depends(get_store)):
	try:
		logger().info(f"GET /profile/{patient_id}")
		patient = get_patient(store, patient_id)
		if patient is None:
			raise HTTPException(status_code=404, detail="Patient not found")
		return patient
	except HTTPException:
		raise
	except Exception as e:
		logger().error(f"Error getting patient profile: {e}")
		raise HTTPException(status_code=500, detail=INTERNAL_ERROR)

@router.get("/doctors")
async def search_doctors(
	specialization: str | None = None,
	page: Page = Depends(get_page),
	store: DocumentStore = Depends(get_store)
):
	try:
		logger().info(f"GET /doctors specialization={specialization} page={page.page} limit={page.limit}")
		doctors = list_doctors(store, specialization=specialization, offset=page.offset, limit=page.limit)
		return {"doctors": doctors}
	except Exception as e:
		logger().error(f"Error fetching doctors: {e}")
		raise HTTPException(status_code=500, detail="Error fetching doctors")

@router.post("/book-appointment", status_code=201)
async def book(req: AppointmentCreateRequest, store: DocumentStore = Depends(get_store)):
	"""Books without checking the slot; clients should consult /available-slots first."""
	require_fields(req.model_dump(), ["patientId", "doctorId", "date", "time"])
	try:
		logger().info(f"POST /book-appointment doctor={req.doctorId} date={req.date} time={req.time}")
		appointment_id = book_appointment(
			store,
			patient_id=req.patientId,
			doctor_id=req.doctorId,
			date=req.date,
			time=req.time
		)
		return {"message": "Appointment booked successfully!", "id": appointment_id}
	except Exception as e:
		logger().error(f"Error booking appointment: {e}")
		raise HTTPException(status_code=500, detail="Error booking appointment")

@router.get("/appointments/{patient_id}")
async def get_appointments(patient_id: str, store: DocumentStore = Depends(get_store)):
	try:
		appointments = get_patient_appointments(store, patient_id)
		logger().info(f"GET /appointments/{patient_id} returned {len(appointments)} appointments")
		return {"appointments": appointments}
	except Exception as e:
		logger().error(f"Error fetching appointments: {e}")
		raise HTTPException(status_code=500, detail="Error fetching appointments")

@router.get("/health-records/{patient_id}")
async def get_health_records(patient_id: str, store: DocumentStore = Depends(get_store)):
	"""The patient's health records, each carrying the doctor's name."""
	try:
		logger().info(f"GET /health-records/{patient_id}")
		records = get_patient_records(store, patient_id)
		if not records:
			raise HTTPException(status_code=404, detail="No health records found")
		records = await attach_names(
			store,
			records,
			id_field="doctorId",
			collection=DOCTORS_COLLECTION,
			name_field="doctorName"
		)
		return {"records": records}
	except HTTPException:
		raise
	except Exception as e:
		logger().error(f"Error fetching health records: {e}")
		raise HTTPException(status_code=500, detail="Error fetching health records")

@router.get("/available-slots/{doctor_id}/{date}")
async def get_available_slots(doctor_id: str, date: str, store: DocumentStore = Depends(get_store)):
	try:
		logger().info(f"GET /available-slots/{doctor_id}/{date}")
		booked = get_booked_times(store, doctor_id, date)
		return {"availableSlots": available_slots(booked)}
	except Exception as e:
		logger().error(f"Error fetching available slots: {e}")
		raise HTTPException(status_code=500, detail="Error fetching available slots")

@router.delete("/cancel-appointment/{appointment_id}")
async def cancel(appointment_id: str, store: DocumentStore = Depends(get_store)):
	try:
		logger().info(f"DELETE /cancel-appointment/{appointment_id}")
		cancel_appointment(store, appointment_id)
		return {"message": "Appointment canceled successfully!"}
	except Exception as e:
		logger().error(f"Error canceling appointment: {e}")
		raise HTTPException(status_code=500, detail="Error canceling appointment")

@router.get("/available-doctors")
async def get_available_doctors(
	specialization: str | None = None,
	page: Page = Depends(get_page),
	store: DocumentStore = Depends(get_store)
):
	try:
		logger().info(f"GET /available-doctors specialization={specialization} page={page.page} limit={page.limit}")
		doctors = list_doctors(
			store,
			specialization=specialization,
			available_only=True,
			offset=page.offset,
			limit=page.limit
		)
		return {"doctors": doctors}
	except Exception as e:
		logger().error(f"Error fetching available doctors: {e}")
		raise HTTPException(status_code=500, detail="Error fetching available doctors")
