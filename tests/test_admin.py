"""Tests for the admin routes."""

import unittest

from tests.fakes import make_client

DOCTOR = {
	"name": "Dr Grey",
	"email": "grey@example.com",
	"password": "secret1",
	"specialization": "Cardiology",
	"phone": "555-0200"
}

class TestAdminRoutes(unittest.TestCase):

	def setUp(self):
		self.client, self.store, self.identity = make_client()

	def _add_doctor(self, **overrides) -> str:
		response = self.client.post("/api/admin/add-doctor", json={**DOCTOR, **overrides})
		self.assertEqual(response.status_code, 201)
		return response.json()["uid"]

	def test_add_doctor_defaults_to_available(self):
		uid = self._add_doctor()
		doctor = self.store.get("doctors", uid)
		self.assertTrue(doctor["available"])
		self.assertEqual(doctor["role"], "DOCTOR")
		self.assertIn("createdAt", doctor)
		self.assertIn(uid, self.identity.users)

	def test_add_doctor_missing_field(self):
		payload = {**DOCTOR, "specialization": ""}
		response = self.client.post("/api/admin/add-doctor", json=payload)
		self.assertEqual(response.status_code, 400)
		self.assertEqual(response.json(), {"error": "Missing required field: specialization"})

	def test_add_doctor_bad_email_surfaces_provider_message(self):
		response = self.client.post("/api/admin/add-doctor", json={**DOCTOR, "email": "not-an-email"})
		self.assertEqual(response.status_code, 400)
		self.assertEqual(response.json(), {"error": "The email address is improperly formatted."})

	def test_update_doctor_merges_arbitrary_fields(self):
		uid = self._add_doctor()
		response = self.client.put(f"/api/admin/update-doctor/{uid}", json={"phone": "555-9999", "room": "B12"})
		self.assertEqual(response.status_code, 200)
		doctor = self.store.get("doctors", uid)
		self.assertEqual(doctor["phone"], "555-9999")
		self.assertEqual(doctor["room"], "B12")
		self.assertEqual(doctor["name"], "Dr Grey")

	def test_update_missing_doctor(self):
		response = self.client.put("/api/admin/update-doctor/nope", json={"phone": "1"})
		self.assertEqual(response.status_code, 404)
		self.assertEqual(response.json(), {"error": "Doctor not found"})

	def test_delete_doctor_keeps_appointments(self):
		uid = self._add_doctor()
		self.store.set("appointments", "a1", {"doctorId": uid, "patientId": "p1", "date": "2025-01-01", "time": "09:00"})
		response = self.client.delete(f"/api/admin/delete-doctor/{uid}")
		self.assertEqual(response.status_code, 200)
		self.assertIsNone(self.store.get("doctors", uid))
		self.assertNotIn(uid, self.identity.users)
		self.assertIsNotNone(self.store.get("appointments", "a1"))

	def test_delete_unknown_doctor_fails(self):
		response = self.client.delete("/api/admin/delete-doctor/nope")
		self.assertEqual(response.status_code, 500)
		self.assertEqual(response.json(), {"error": "Error deleting doctor"})

	def test_delete_patient_cascades_health_records_in_one_batch(self):
		response = self.client.post("/api/auth/register", json={
			"name": "Pat", "email": "pat@example.com", "password": "secret1", "phone": "1"
		})
		patient_id = response.json()["uid"]
		for i in range(3):
			self.store.set("healthRecords", f"r{i}", {"patientId": patient_id, "doctorId": "d1"})
		self.store.set("healthRecords", "other", {"patientId": "someone-else", "doctorId": "d1"})
		self.store.set("appointments", "a1", {"patientId": patient_id, "doctorId": "d1"})

		response = self.client.delete(f"/api/admin/delete-patient/{patient_id}")
		self.assertEqual(response.status_code, 200)
		self.assertIsNone(self.store.get("patients", patient_id))
		self.assertEqual(self.store.query("healthRecords", {"patientId": patient_id}), [])
		self.assertIsNotNone(self.store.get("healthRecords", "other"))
		self.assertIsNotNone(self.store.get("appointments", "a1"))
		self.assertEqual(self.store.batches, [("healthRecords", ["r0", "r1", "r2"])])

	def test_list_patients_and_doctors_include_ids(self):
		self.store.set("patients", "p1", {"name": "A"})
		self.store.set("doctors", "d1", {"name": "B"})
		self.assertEqual(self.client.get("/api/admin/patients").json(), {"patients": [{"id": "p1", "name": "A"}]})
		self.assertEqual(self.client.get("/api/admin/doctors").json(), {"doctors": [{"id": "d1", "name": "B"}]})

	def test_list_patients_store_failure(self):
		self.store.broken = True
		response = self.client.get("/api/admin/patients")
		self.assertEqual(response.status_code, 500)
		self.assertEqual(response.json(), {"error": "Error fetching patients"})

	def test_all_appointments_pagination(self):
		for i in range(1, 13):
			self.store.set("appointments", f"appt-{i:02d}", {"time": "09:00"})

		response = self.client.get("/api/admin/all-appointments", params={"page": 2, "limit": 5})
		self.assertEqual(response.status_code, 200)
		ids = [a["id"] for a in response.json()["appointments"]]
		self.assertEqual(ids, ["appt-06", "appt-07", "appt-08", "appt-09", "appt-10"])

		response = self.client.get("/api/admin/all-appointments", params={"page": 4, "limit": 5})
		self.assertEqual(response.json(), {"appointments": []})

		response = self.client.get("/api/admin/all-appointments")
		self.assertEqual(len(response.json()["appointments"]), 10)

	def test_all_appointments_huge_page_is_empty(self):
		self.store.set("appointments", "a1", {})
		response = self.client.get("/api/admin/all-appointments", params={"page": 10 ** 30, "limit": 100})
		self.assertEqual(response.status_code, 200)
		self.assertEqual(response.json(), {"appointments": []})

	def test_all_appointments_limit_is_capped(self):
		response = self.client.get("/api/admin/all-appointments", params={"limit": 101})
		self.assertEqual(response.status_code, 400)
		self.assertIn("error", response.json())

	def test_all_appointments_rejects_bad_page(self):
		response = self.client.get("/api/admin/all-appointments", params={"page": 0})
		self.assertEqual(response.status_code, 400)
		self.assertIn("error", response.json())

	def test_patient_details_include_health_records(self):
		self.store.set("patients", "p1", {"name": "Pat"})
		self.store.set("healthRecords", "r1", {"patientId": "p1", "diagnosis": "Flu"})
		self.store.set("healthRecords", "r2", {"patientId": "p2", "diagnosis": "Cold"})
		response = self.client.get("/api/admin/patient/p1")
		self.assertEqual(response.status_code, 200)
		self.assertEqual(response.json(), {
			"patient": {"name": "Pat"},
			"healthRecords": [{"id": "r1", "patientId": "p1", "diagnosis": "Flu"}]
		})
		self.assertEqual(self.client.get("/api/admin/patient/p9").status_code, 404)

	def test_doctor_details(self):
		self.store.set("doctors", "d1", {"name": "Dr A"})
		self.assertEqual(self.client.get("/api/admin/doctor/d1").json(), {"doctor": {"name": "Dr A"}})
		response = self.client.get("/api/admin/doctor/d9")
		self.assertEqual(response.status_code, 404)
		self.assertEqual(response.json(), {"error": "Doctor not found"})

if __name__ == "__main__":
	unittest.main()
