"""Tests for the system routes and the error envelope."""

import unittest

from tests.fakes import make_client


class TestSystemRoutes(unittest.TestCase):

	def setUp(self):
		self.client, self.store, _ = make_client()

	def test_root_banner(self):
		response = self.client.get("/")
		self.assertEqual(response.status_code, 200)
		self.assertEqual(response.text, "Hospital Management System API is running...")

	def test_health(self):
		self.assertEqual(self.client.get("/system/health").json()["status"], "healthy")
		self.store.broken = True
		body = self.client.get("/system/health").json()
		self.assertEqual(body["status"], "degraded")
		self.assertEqual(body["components"]["document_store"], "unreachable")

	def test_info_lists_routes(self):
		endpoints = self.client.get("/api/info").json()["endpoints"]
		self.assertIn("/api/auth/login", endpoints)
		self.assertIn("/api/patient/available-slots/{doctor_id}/{date}", endpoints)

	def test_unknown_route_uses_error_envelope(self):
		response = self.client.get("/api/nowhere")
		self.assertEqual(response.status_code, 404)
		self.assertIn("error", response.json())

	def test_malformed_body_is_bad_request(self):
		response = self.client.post(
			"/api/auth/login",
			content="{not json",
			headers={"Content-Type": "application/json"}
		)
		self.assertEqual(response.status_code, 400)
		self.assertIn("error", response.json())

if __name__ == "__main__":
	unittest.main()
