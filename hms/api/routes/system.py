# api/routes/system.py

import time

from fastapi import APIRouter, Depends, Request
from fastapi.responses import PlainTextResponse
from fastapi.routing import APIRoute

from hms.core.state import HospitalState, get_state

router = APIRouter(tags=["System"])

@router.get("/", response_class=PlainTextResponse)
async def root():
	return "Hospital Management System API is running..."

@router.get("/system/health")
async def health_check(state: HospitalState = Depends(get_state)):
	"""Health check endpoint"""
	database_ok = state.store.ping()
	return {
		"status": "healthy" if database_ok else "degraded",
		"timestamp": time.strftime("%Y-%m-%d %H:%M:%S"),
		"components": {
			"document_store": "operational" if database_ok else "unreachable",
			"identity_provider": "operational" if state.identity is not None else "missing"
		}
	}

@router.get("/api/info")
async def get_api_info(request: Request, state: HospitalState = Depends(get_state)):
	"""Lists all paths available in the api."""
	return {
		"name": state.settings.APP_NAME,
		"version": state.settings.VERSION,
		"description": "Hospital management backend for admin, doctor and patient roles",
		"endpoints": sorted({route.path for route in request.app.routes if isinstance(route, APIRoute)})
	}
