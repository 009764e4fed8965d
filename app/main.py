# ========================================
# app/main.py - PRAETORIAN RECRUITMENT API
# ========================================

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.config import get_allowed_origins
from app.database import close_mongo_connection, connect_to_mongo
from app.errors import register_exception_handlers
from app.logging_config import setup_logging
from app.middleware import AdminRouteGuard

# ===========================
# IMPORT ALL ROUTERS
# ===========================

# Public application form
from app.routes.submit import router as submit_router
from app.routes.recruitment import router as recruitment_router
from app.routes.resume import router as resume_router

# Admin
from app.routes.admin_auth import router as admin_auth_router
from app.routes.admin_applications import router as admin_applications_router
from app.routes.admin_dashboard import router as admin_dashboard_router

setup_logging()
logger = logging.getLogger(__name__)

# ===========================
# CREATE FASTAPI APP
# ===========================

app = FastAPI(
    title="Praetorian Recruitment API",
    description="Open recruitment form with an admin dashboard for reviewing applications",
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc"
)

register_exception_handlers(app)

# ===========================
# MIDDLEWARE
# ===========================

# Route guard runs inside CORS so redirects still carry CORS headers
app.add_middleware(AdminRouteGuard)
app.add_middleware(
    CORSMiddleware,
    allow_origins=get_allowed_origins(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# ===========================
# DATABASE EVENTS
# ===========================

@app.on_event("startup")
async def start_db():
    """Connect to MongoDB on startup"""
    await connect_to_mongo()

@app.on_event("shutdown")
async def stop_db():
    """Close MongoDB connection on shutdown"""
    await close_mongo_connection()

# ===========================
# REGISTER ROUTERS
# ===========================

app.include_router(submit_router)
app.include_router(recruitment_router)
app.include_router(resume_router)

app.include_router(admin_auth_router)
app.include_router(admin_applications_router)
app.include_router(admin_dashboard_router)

# ===========================
# ROOT ENDPOINTS
# ===========================

@app.get("/")
async def root():
    """API root endpoint with endpoint summary"""
    return {
        "status": "Praetorian Recruitment API running",
        "version": "1.0.0",
        "documentation": "/docs",
        "endpoints": {
            "public": [
                "/api/submit",
                "/api/recruitment-status",
                "/api/admin/login",
                "/api/admin/logout",
                "/resumes/{file_id}"
            ],
            "admin": [
                "/api/admin/applications",
                "/api/admin/applications/{id}",
                "/api/admin/recruitment",
                "/admin",
                "/admin/export"
            ]
        }
    }


@app.get("/health")
async def health_check():
    """Health check endpoint"""
    return {
        "status": "healthy",
        "version": "1.0.0"
    }
