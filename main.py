from fastapi import FastAPI
from shortlink_app.config import settings
from shortlink_app.common.logging_config import setup_logging
from shortlink_app.database.connection import engine, Base
from shortlink_app.api import router, redirect
from shortlink_app.api.middleware import LoggingMiddleware

# Import models to ensure they're registered with Base
from shortlink_app.models import APIKey, Link

setup_logging(level=settings.log_level, log_file=settings.log_file, json_format=settings.log_json)

# Create database tables
Base.metadata.create_all(bind=engine)

# Create FastAPI app
app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    description="API-key-gated URL shortening service built with FastAPI",
    debug=settings.debug
)

app.add_middleware(LoggingMiddleware)


@app.get("/")
def read_root():
    """Root endpoint with API information"""
    return {
        "message": f"Welcome to {settings.app_name}",
        "version": settings.app_version,
        "endpoints": ["/api/add", "/api/resolve", "/{path}"],
    }


@app.get("/health")
def health_check():
    """Health check endpoint"""
    return {"status": "healthy", "environment": settings.environment}




######## Include routers
app.include_router(router.router)
app.include_router(redirect.router)


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("main:app", host=settings.host, port=settings.port, reload=settings.debug)
