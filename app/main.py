"""
Main application entry point.
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI

from app.config import configure_logging
from app.api.v1.dependencies import get_lesson_image_service, get_settings
from app.api.v1.search_endpoints import router as search_router


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Build the service graph eagerly: missing credentials stop startup
    settings = get_settings()
    configure_logging(settings.log_level)
    get_lesson_image_service()
    yield


app = FastAPI(
    title="Lesson Image Finder API",
    description="Turns lesson text into search phrases and illustrative images.",
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
)

# Include API routers
app.include_router(search_router, prefix="/api/v1", tags=["search"])

@app.get("/")
def read_root():
    """Root endpoint."""
    return {
        "message": "Welcome to the Lesson Image Finder API",
        "docs": "/docs",
        "health": "/api/v1/health"
    }

if __name__ == "__main__":
    import uvicorn
    uvicorn.run("app.main:app", host="0.0.0.0", port=8000, reload=True)
