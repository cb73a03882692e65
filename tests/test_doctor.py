"""Tests for the doctor routes."""

import unittest

from tests.fakes import make_client


class TestDoctorRoutes(unittest.TestCase):

	def setUp(self):
		self.client, self.store, _ = make_client()
		self.store.set("doctors", "d1", {"name": "Dr House", "available": True})

	def test_profile(self):
		self.assertEqual(self.client.get("/api/doctor/profile/d1").json(), {"name": "Dr House", "available": True})
		response = self.client.get("/api/doctor/profile/d9")
		self.assertEqual(response.status_code, 404)
		self.assertEqual(response.json(), {"error": "Doctor not found"})

	def test_appointments_carry_patient_names(self):
		self.store.set("patients", "p1", {"name": "Alice"})
		self.store.set("appointments", "a1", {"doctorId": "d1", "patientId": "p1", "time": "09:00"})
		self.store.set("appointments", "a2", {"doctorId": "d1", "patientId": "deleted", "time": "10:00"})
		self.store.set("appointments", "a3", {"doctorId": "d2", "patientId": "p1", "time": "11:00"})

		response = self.client.get("/api/doctor/appointments/d1")
		self.assertEqual(response.status_code, 200)
		appointments = response.json()["appointments"]
		self.assertEqual([a["id"] for a in appointments], ["a1", "a2"])
		self.assertEqual([a["patientName"] for a in appointments], ["Alice", "Unknown"])

	def test_no_appointments_is_not_found(self):
		response = self.client.get("/api/doctor/appointments/d1")
		self.assertEqual(response.status_code, 404)
		self.assertEqual(response.json(), {"error": "No appointments found"})

	def test_update_availability(self):
		response = self.client.put("/api/doctor/status/d1", json={"available": False})
		self.assertEqual(response.status_code, 200)
		self.assertFalse(self.store.get("doctors", "d1")["available"])

		response = self.client.put("/api/doctor/status/d9", json={"available": True})
		self.assertEqual(response.status_code, 404)

	def test_update_availability_requires_value(self):
		response = self.client.put("/api/doctor/status/d1", json={})
		self.assertEqual(response.status_code, 400)
		self.assertEqual(response.json(), {"error": "Missing required field: available"})

	def test_upload_record(self):
		payload = {
			"doctorId": "d1",
			"patientId": "p1",
			"diagnosis": "Flu",
			"prescription": "Rest",
			"notes": "Fluids"
		}
		response = self.client.post("/api/doctor/upload-record", json=payload)
		self.assertEqual(response.status_code, 201)
		record = self.store.get("healthRecords", response.json()["id"])
		self.assertEqual(record["diagnosis"], "Flu")
		self.assertIn("createdAt", record)

		response = self.client.post("/api/doctor/upload-record", json={**payload, "notes": ""})
		self.assertEqual(response.status_code, 400)
		self.assertEqual(response.json(), {"error": "Missing required field: notes"})

	def test_update_appointment_status(self):
		self.store.set("appointments", "a1", {"doctorId": "d1", "status": "Scheduled"})
		response = self.client.put("/api/doctor/update-appointment/a1", json={"status": "Completed"})
		self.assertEqual(response.status_code, 200)
		self.assertEqual(self.store.get("appointments", "a1")["status"], "Completed")

	def test_update_status_of_missing_appointment_fails(self):
		response = self.client.put("/api/doctor/update-appointment/nope", json={"status": "Completed"})
		self.assertEqual(response.status_code, 500)
		self.assertEqual(response.json(), {"error": "Error updating appointment status"})

	def test_update_status_requires_status(self):
		response = self.client.put("/api/doctor/update-appointment/a1", json={})
		self.assertEqual(response.status_code, 400)
		self.assertEqual(response.json(), {"error": "Missing required field: status"})

if __name__ == "__main__":
	unittest.main()
