# main.py

from contextlib import asynccontextmanager

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from hms.utils.logger import logger, setup_logging

# Environment must be loaded before settings are read
load_dotenv()

from hms.api.errors import register_exception_handlers
from hms.api.routes import admin as admin_route
from hms.api.routes import auth as auth_route
from hms.api.routes import doctor as doctor_route
from hms.api.routes import patient as patient_route
from hms.api.routes import system as system_route
from hms.core.state import HospitalState


def startup_event(state: HospitalState):
	"""Initialize application on startup"""
	logger(tag="startup").info(f"Starting {state.settings.APP_NAME}...")
	state.initialize()
	if state.store.ping():
		logger(tag="startup").info("Document store reachable")
	else:
		logger(tag="startup").warning("Document store did not answer ping; requests will fail until it is reachable")
	logger(tag="startup").info("Startup complete")

def shutdown_event(state: HospitalState):
	"""Cleanup on shutdown"""
	logger(tag="shutdown").info("Shutting down...")
	state.close()

def create_app(state: HospitalState | None = None) -> FastAPI:
	"""
	Builds the application around `state`.

	When no state is given one is created from the environment and connects to
	MongoDB on startup. Tests pass a state with the store and identity clients
	already filled in.
	"""
	state = state or HospitalState()
	setup_logging(state.settings.LOG_LEVEL)

	@asynccontextmanager
	async def lifespan(app: FastAPI):
		startup_event(state)
		yield
		shutdown_event(state)

	app = FastAPI(
		lifespan=lifespan,
		title=state.settings.APP_NAME,
		description="REST backend for admin, doctor and patient roles",
		version=state.settings.VERSION
	)
	app.state.hospital = state

	app.add_middleware(
		CORSMiddleware,
		allow_origins=state.settings.CORS_ORIGINS,
		allow_credentials="*" not in state.settings.CORS_ORIGINS,
		allow_methods=["*"],
		allow_headers=["*"],
	)
	register_exception_handlers(app)

	app.include_router(system_route.router)
	app.include_router(auth_route.router)
	app.include_router(admin_route.router)
	app.include_router(doctor_route.router)
	app.include_router(patient_route.router)
	return app

app = create_app()
