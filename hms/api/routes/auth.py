# api/routes/auth.py

from fastapi import APIRouter, Depends, HTTPException

from hms.api.errors import INTERNAL_ERROR, require_fields
from hms.core.state import get_identity, get_store
from hms.data.identity import IdentityError, IdentityProvider
from hms.data.repositories.account import (create_patient, get_profile,
                                           resolve_role)
from hms.data.store import DocumentStore
from hms.models.requests import LoginRequest, ProfileRequest, RegisterRequest
from hms.utils.logger import logger

router = APIRouter(prefix="/api/auth", tags=["Auth"])

@router.post("/register", status_code=201)
async def register_patient(
	req: RegisterRequest,
	store: DocumentStore = Depends(get_store),
	identity: IdentityProvider = Depends(get_identity)
):
	require_fields(req.model_dump(), ["name", "email", "password", "phone"])
	try:
		logger().info(f"POST /register email={req.email}")
		uid = create_patient(
			store,
			identity,
			name=req.name,
			email=req.email,
			password=req.password,
			phone=req.phone
		)
		return {"message": "Patient registered successfully!", "uid": uid}
	except Exception as e:
		logger().error(f"Error registering patient: {e}")
		raise HTTPException(status_code=400, detail=str(e))

@router.post("/login")
async def login(
	req: LoginRequest,
	store: DocumentStore = Depends(get_store),
	identity: IdentityProvider = Depends(get_identity)
):
	"""Authenticates, then resolves the role from the first profile collection holding the uid."""
	require_fields(req.model_dump(), ["email", "password"])
	try:
		logger().info(f"POST /login email={req.email}")
		user = identity.authenticate(req.email, req.password)
		resolved = resolve_role(store, user.uid)
	except IdentityError as e:
		logger().info(f"Login rejected for {req.email}: {e}")
		raise HTTPException(status_code=400, detail=str(e))
	except Exception as e:
		logger().error(f"Error during login: {e}")
		raise HTTPException(status_code=400, detail=str(e))

	if resolved is None:
		logger().warning(f"Authenticated identity {user.uid} has no profile")
		raise HTTPException(status_code=403, detail="Unauthorized user")

	role, user_data = resolved
	return {"message": "Login successful", "uid": user.uid, "role": role, "userData": user_data}

@router.post("/profile")
async def get_user_profile(req: ProfileRequest, store: DocumentStore = Depends(get_store)):
	require_fields(req.model_dump(), ["uid", "role"])
	try:
		logger().info(f"POST /profile uid={req.uid} role={req.role}")
		profile = get_profile(store, req.uid, req.role)
		if profile is None:
			raise HTTPException(status_code=404, detail="User not found")
		return profile
	except HTTPException:
		raise
	except Exception as e:
		logger().error(f"Error getting profile: {e}")
		raise HTTPException(status_code=500, detail=INTERNAL_ERROR)
