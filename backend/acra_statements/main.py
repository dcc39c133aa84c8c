"""
main.py — FastAPI Application Entrypoint

Purpose:
- Initialize logging from settings.
- Register the v1 routers (statements, filings, frameworks).
- Define the root-level health endpoint.
- Provide `app` object used by an ASGI server
  (e.g. `uvicorn acra_statements.main:app`).

This file should stay clean: no business logic here.
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from acra_statements.api.v1 import filings, frameworks, statements
from acra_statements.core.logging import configure_logging

# -----------------------------------------------------------------------------
# App Initialization
# -----------------------------------------------------------------------------

configure_logging()

app = FastAPI(
    title="ACRA Statements Backend",
    description="Validation, projection and ratio analysis for ACRA/XBRL financial statements",
    version="0.1.0",
)

# -----------------------------------------------------------------------------
# CORS (local frontend development)
# -----------------------------------------------------------------------------

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# -----------------------------------------------------------------------------
# Router Registration
# -----------------------------------------------------------------------------

app.include_router(statements.router, prefix="/api/v1")
app.include_router(filings.router, prefix="/api/v1")
app.include_router(frameworks.router, prefix="/api/v1")

# -----------------------------------------------------------------------------
# Health Check
# -----------------------------------------------------------------------------

@app.get("/")
def root():
    return {"status": "ok", "message": "ACRA statements backend running"}
