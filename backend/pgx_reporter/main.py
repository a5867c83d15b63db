from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from pgx_reporter.api.router import api_router
from pgx_reporter.core import logging  # Initialize logging

app = FastAPI(
    title="PGx Reporter API",
    description="Matches called diplotypes against dosing guideline annotation groups",
    version="1.0.0"
)

# CORS Configuration
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include API Routers
app.include_router(api_router, prefix="/api/v1")


@app.get("/health")
async def health():
    return {"status": "ok"}
