# models/requests.py
"""
Request bodies.

Fields are untyped and optional at the schema level: presence is checked
by `validate_input` alone, so a missing field, an empty one and a 0 all
produce the same "Missing required field" error.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict


class _Payload(BaseModel):
	model_config = ConfigDict(extra="allow")

class RegisterRequest(_Payload):
	name: Any = None
	email: Any = None
	password: Any = None
	phone: Any = None

class LoginRequest(_Payload):
	email: Any = None
	password: Any = None

class ProfileRequest(_Payload):
	uid: Any = None
	role: Any = None

class DoctorCreateRequest(_Payload):
	name: Any = None
	email: Any = None
	password: Any = None
	specialization: Any = None
	phone: Any = None

class AvailabilityRequest(_Payload):
	available: bool | None = None

class HealthRecordRequest(_Payload):
	doctorId: Any = None
	patientId: Any = None
	diagnosis: Any = None
	prescription: Any = None
	notes: Any = None

class AppointmentStatusRequest(_Payload):
	status: Any = None

class AppointmentCreateRequest(_Payload):
	patientId: Any = None
	doctorId: Any = None
	date: Any = None
	time: Any = None
