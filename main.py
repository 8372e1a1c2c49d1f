"""
Food Map FastAPI Application

Main entry point for the food map, serving the locations REST API and the
settings the map page needs.

Author: Food Map maintainers
Date: 2026-10-19
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from dotenv import load_dotenv

from database import SessionLocal, init_db
from logic.errors import NotFoundError, ValidationError
from logic.logging_config import setup_logging
from logic.seed import seed_database
from server.locations import router as locations_router
from server.routes import router as routes_router

# Load environment variables
load_dotenv()
setup_logging()

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Create tables and seed them before serving requests."""
    init_db()
    db = SessionLocal()
    try:
        seed_database(db)
    finally:
        db.close()
    logger.info("Food map ready")
    yield


app = FastAPI(title="Food Map", lifespan=lifespan)

# Include all routers
app.include_router(locations_router)
app.include_router(routes_router)

# ============================================================
# Error Handlers
# ============================================================


@app.exception_handler(ValidationError)
async def validation_error_handler(request: Request, exc: ValidationError):
    """Return the first validation failure as ``{message, field}``."""
    return JSONResponse(status_code=400, content=exc.to_dict())


@app.exception_handler(NotFoundError)
async def not_found_handler(request: Request, exc: NotFoundError):
    return JSONResponse(status_code=404, content=exc.to_dict())


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    """Report malformed or missing request input in the same ``{message, field}`` shape."""
    errors = exc.errors()
    err = errors[0] if errors else {}
    loc = [str(part) for part in err.get("loc", ())]
    if loc and loc[0] == "path":
        return JSONResponse(status_code=404, content=NotFoundError().to_dict())
    # Drop the "body"/"query" prefix; a JSON decode error locates a byte offset, not a field
    field = None if err.get("type") == "json_invalid" else ".".join(loc[1:]) or None
    error = ValidationError(err.get("msg", "Invalid request"), field)
    return JSONResponse(status_code=400, content=error.to_dict())
