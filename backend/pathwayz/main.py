import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from .db import create_tables, engine
from .errors import PathwayzError
from .settings import settings
from .routers import users
from .routers import game
from .routers import profile
from .routers import careers
from .routers import skills

logging.basicConfig(
	level=settings.log_level.upper(),
	format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(title="Pathwayz Career Quest API")
app.include_router(users.router)
app.include_router(game.router)
app.include_router(profile.router)
app.include_router(careers.router)
app.include_router(skills.router)


@app.exception_handler(PathwayzError)
async def pathwayz_error_handler(request: Request, exc: PathwayzError):
	if exc.status_code >= 500:
		logger.error("%s %s failed: %s: %s", request.method, request.url.path, exc.error, exc.message)
	return JSONResponse(status_code=exc.status_code, content={"error": exc.error, "details": exc.message})


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
	# Malformed or missing body fields are a 400, not FastAPI's default 422
	details = "; ".join(
		f"{'.'.join(str(p) for p in e.get('loc', ()))}: {e.get('msg', 'invalid')}" for e in exc.errors()
	)
	return JSONResponse(status_code=400, content={"error": "validation_error", "details": details})


@app.exception_handler(Exception)
async def unexpected_error_handler(request: Request, exc: Exception):
	logger.exception("%s %s: unexpected error", request.method, request.url.path)
	return JSONResponse(status_code=500, content={"error": "internal_error", "details": str(exc) or "Internal server error"})


@app.get("/info")
def root():
	return {"status": "ok", "gemini_configured": bool(settings.gemini_api_key)}


@app.on_event("startup")
async def startup_event():
	create_tables(engine)
