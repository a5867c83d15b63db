from fastapi import APIRouter
from pgx_reporter.api.routes import reporter

api_router = APIRouter()

api_router.include_router(reporter.router, prefix="/reporter", tags=["Reporter"])
