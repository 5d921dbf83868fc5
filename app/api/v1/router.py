"""API v1 router - includes all v1 endpoints."""

from fastapi import APIRouter

from app.api.v1.endpoints import admin_csv_drafts, admin_exam_import, admin_manual_drafts, health

api_router = APIRouter()

api_router.include_router(health.router, prefix="", tags=["Health"])
api_router.include_router(admin_exam_import.router)
api_router.include_router(admin_csv_drafts.router)
api_router.include_router(admin_manual_drafts.router)
