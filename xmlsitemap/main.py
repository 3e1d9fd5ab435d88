"""
FastAPI main application module for the XML sitemap service
"""

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.concurrency import run_in_threadpool
import time
import logging

from xmlsitemap import models  # noqa: F401  registers tables on Base.metadata
from xmlsitemap.core.config import settings
from xmlsitemap.core.database_utils import create_all_tables, check_database_connection
from xmlsitemap.api.api_v1.api import api_router
from xmlsitemap.api.api_v1.endpoints.sitemap import sitemap_response
from xmlsitemap.services.data_provider import database_provider
from xmlsitemap.services.request_detection import should_generate

# Configure logging
logging.basicConfig(level=settings.LOG_LEVEL)
logger = logging.getLogger(__name__)

# Create FastAPI application
app = FastAPI(
    title="XML Sitemap API",
    description="Search engine sitemap built from the site menu structure and published articles",
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
)

# Records for each sitemap come from a fresh provider per request
app.state.provider_factory = database_provider

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.ALLOWED_HOSTS,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Sitemap requests are answered here, before routing
@app.middleware("http")
async def serve_sitemap(request: Request, call_next):
    raw_uri = (request.scope.get("raw_path") or b"").decode("latin-1")
    query_string = (request.scope.get("query_string") or b"").decode("latin-1")
    if query_string:
        raw_uri = f"{raw_uri}?{query_string}"

    if should_generate(request.url.path, raw_uri, request.query_params):
        logger.info(f"Sitemap requested via {raw_uri or request.url.path}")
        return await run_in_threadpool(sitemap_response, request)

    return await call_next(request)

# Request timing middleware
@app.middleware("http")
async def add_process_time_header(request: Request, call_next):
    start_time = time.time()
    response = await call_next(request)
    process_time = time.time() - start_time
    response.headers["X-Process-Time"] = str(process_time)
    return response

# Include API routes
app.include_router(api_router, prefix="/api/v1")

# Health check endpoint
@app.get("/health")
async def health_check():
    """Health check endpoint for monitoring"""
    return {
        "status": "healthy",
        "timestamp": time.time(),
        "version": "1.0.0"
    }

# Root endpoint
@app.get("/")
async def root():
    """Root endpoint with API information"""
    return {
        "message": "XML Sitemap API",
        "version": "1.0.0",
        "sitemap": "/sitemap.xml",
        "preview": "/api/v1/sitemap/entries",
        "docs": "/docs",
        "health": "/health"
    }

# Global exception handler
@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    logger.error(f"Global exception: {exc}", exc_info=True)
    return JSONResponse(
        status_code=500,
        content={
            "error": "Internal server error",
            "message": "An unexpected error occurred"
        }
    )

# Startup event
@app.on_event("startup")
async def startup_event():
    """Initialize application on startup"""
    logger.info("Starting XML Sitemap API...")

    if not check_database_connection():
        logger.error("Failed to connect to database")
        raise Exception("Database connection failed")

    # Note: In production the CMS owns the schema
    if settings.ENVIRONMENT == "development":
        create_all_tables()
        logger.info("Database tables created/verified successfully")

    logger.info("Application startup complete")

# Shutdown event
@app.on_event("shutdown")
async def shutdown_event():
    """Cleanup on application shutdown"""
    logger.info("Shutting down XML Sitemap API...")

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "xmlsitemap.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.DEBUG,
        log_level="info"
    )
