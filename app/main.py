from fastapi import FastAPI

from app.core.config import settings
from app.routers import coordinates, distance

app = FastAPI(
    title=settings.project_name,
    version="1.0.0",
)

# Include routers
app.include_router(distance.router, prefix=settings.api_v1_prefix)
app.include_router(coordinates.router, prefix=settings.api_v1_prefix)


@app.get("/")
def root():
    """Root endpoint."""
    return {
        "message": "Welcome to the Great-Circle Distance API",
        "version": "1.0.0",
        "docs": "/docs"
    }


@app.get("/health")
def health_check():
    """Health check endpoint."""
    return {"status": "healthy"}
