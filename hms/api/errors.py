# api/errors.py

from typing import Any, Iterable

from fastapi import FastAPI, HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from hms.utils.logger import logger
from hms.utils.validation import validate_input

INTERNAL_ERROR = "Internal server error"

def error_response(status_code: int, message: str) -> JSONResponse:
	return JSONResponse(status_code=status_code, content={"error": message})

def require_fields(payload: dict[str, Any], fields: Iterable[str]) -> None:
	"""Raises a 400 naming the first missing or falsy field."""
	message = validate_input(payload, fields)
	if message:
		raise HTTPException(status_code=400, detail=message)

async def _http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
	return error_response(exc.status_code, str(exc.detail))

async def _validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
	errors = exc.errors()
	if not errors:
		return error_response(400, "Invalid request")
	first = errors[0]
	field = ".".join(str(part) for part in first.get("loc", ()) if part not in ("body", "query", "path"))
	message = first.get("msg", "invalid value")
	logger(tag="validation").info(f"{request.method} {request.url.path} rejected: {field} {message}")
	return error_response(400, f"Invalid field: {field} ({message})" if field else f"Invalid request ({message})")

async def _unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
	logger(tag="unhandled").error(f"{request.method} {request.url.path} failed: {exc}")
	return error_response(500, INTERNAL_ERROR)

def register_exception_handlers(app: FastAPI) -> None:
	"""Renders every error as {"error": message}."""
	app.add_exception_handler(StarletteHTTPException, _http_exception_handler)
	app.add_exception_handler(RequestValidationError, _validation_exception_handler)
	app.add_exception_handler(Exception, _unhandled_exception_handler)
