# distress/main.py
import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from distress.api.api_router import api_router
from distress.core.config import settings
from distress.core.errors import CaseManagementError
from distress.core.logging import configure_logging
from distress.db import init_db

configure_logging()

app = FastAPI(title=settings.PROJECT_NAME, version="0.1.0")

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"],
    allow_headers=["*"],
)

app.include_router(api_router, prefix="/api")


@app.exception_handler(CaseManagementError)
async def case_management_error_handler(request: Request, exc: CaseManagementError):
    if exc.status_code >= 500:
        logging.error("%s %s failed: %s", request.method, request.url.path, exc.message)
    return JSONResponse(status_code=exc.status_code, content={"error": exc.to_dict()})


@app.exception_handler(SQLAlchemyError)
async def database_error_handler(request: Request, exc: SQLAlchemyError):
    logging.exception("Database error on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=500,
        content={"error": {"kind": "store_error", "message": "database error"}},
    )


@app.on_event("startup")
def on_startup():
    logging.info("Starting up: initializing DB...")
    init_db.init_db()
    logging.info("Startup complete")
