# api/routes/doctor.py

from fastapi import APIRouter, Depends, HTTPException

from hms.api.errors import INTERNAL_ERROR, require_fields
from hms.core.denormalize import attach_names
from hms.core.state import get_store
from hms.data.repositories.account import (PATIENTS_COLLECTION, get_doctor,
                                           set_doctor_availability)
from hms.data.repositories.appointment import (get_doctor_appointments,
                                               update_status)
from hms.data.repositories.medical import create_health_record
from hms.data.store import DocumentStore
from hms.models.requests import (AppointmentStatusRequest, AvailabilityRequest,
                                 HealthRecordRequest)
from hms.utils.logger import logger

router = APIRouter(prefix="/api/doctor", tags=["Doctor"])

@router.get("/profile/{doctor_id}")
async def get_doctor_profile(doctor_id: str, store: DocumentStore = Depends(get_store)):
	try:
		logger().info(f"GET /profile/{doctor_id}")
		doctor = get_doctor(store, doctor_id)
		if doctor is None:
			raise HTTPException(status_code=404, detail="Doctor not found")
		return doctor
	except HTTPException:
		raise
	except Exception as e:
		logger().error(f"Error getting doctor profile: {e}")
		raise HTTPException(status_code=500, detail=INTERNAL_ERROR)

@router.get("/appointments/{doctor_id}")
async def get_appointments(doctor_id: str, store: DocumentStore = Depends(get_store)):
	"""The doctor's appointments, each carrying the patient's name."""
	try:
		logger().info(f"GET /appointments/{doctor_id}")
		appointments = get_doctor_appointments(store, doctor_id)
		if not appointments:
			raise HTTPException(status_code=404, detail="No appointments found")
		appointments = await attach_names(
			store,
			appointments,
			id_field="patientId",
			collection=PATIENTS_COLLECTION,
			name_field="patientName"
		)
		return {"appointments": appointments}
	except HTTPException:
		raise
	except Exception as e:
		logger().error(f"Error fetching appointments: {e}")
		raise HTTPException(status_code=500, detail="Error fetching appointments")

@router.put("/status/{doctor_id}")
async def update_availability(
	doctor_id: str,
	req: AvailabilityRequest,
	store: DocumentStore = Depends(get_store)
):
	if req.available is None:
		raise HTTPException(status_code=400, detail="Missing required field: available")
	try:
		logger().info(f"PUT /status/{doctor_id} available={req.available}")
		if get_doctor(store, doctor_id) is None:
			raise HTTPException(status_code=404, detail="Doctor not found")
		set_doctor_availability(store, doctor_id, req.available)
		return {"message": "Doctor status updated successfully!"}
	except HTTPException:
		raise
	except Exception as e:
		logger().error(f"Error updating availability: {e}")
		raise HTTPException(status_code=500, detail="Error updating availability")

@router.post("/upload-record", status_code=201)
async def upload_health_record(req: HealthRecordRequest, store: DocumentStore = Depends(get_store)):
	require_fields(req.model_dump(), ["doctorId", "patientId", "diagnosis", "prescription", "notes"])
	try:
		logger().info(f"POST /upload-record doctor={req.doctorId} patient={req.patientId}")
		record_id = create_health_record(
			store,
			doctor_id=req.doctorId,
			patient_id=req.patientId,
			diagnosis=req.diagnosis,
			prescription=req.prescription,
			notes=req.notes
		)
		return {"message": "Health record uploaded successfully!", "id": record_id}
	except Exception as e:
		logger().error(f"Error uploading health record: {e}")
		raise HTTPException(status_code=500, detail="Error uploading health record")

@router.put("/update-appointment/{appointment_id}")
async def update_appointment_status(
	appointment_id: str,
	req: AppointmentStatusRequest,
	store: DocumentStore = Depends(get_store)
):
	require_fields(req.model_dump(), ["status"])
	try:
		logger().info(f"PUT /update-appointment/{appointment_id} status={req.status}")
		update_status(store, appointment_id, req.status)
		return {"message": "Appointment status updated successfully!"}
	except Exception as e:
		logger().error(f"Error updating appointment status: {e}")
		raise HTTPException(status_code=500, detail="Error updating appointment status")
