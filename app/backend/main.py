"""FastAPI application entry point."""
import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from app.backend.core.config import settings
from app.backend.core.logging import setup_logging
from app.backend.api import meeting


# Setup logging
setup_logging(settings.log_level)

# Create FastAPI app
app = FastAPI(
    title="Meeting Point Optimiser API",
    description="Find the city minimizing total travel for a group meeting",
    version="1.0.0"
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(meeting.router, prefix="/api", tags=["meeting"])


@app.get("/")
async def root():
    """Root endpoint."""
    return {"message": "Meeting Point Optimiser API", "version": "1.0.0"}


@app.get("/health")
async def health():
    """Health check endpoint."""
    return {"status": "healthy"}


if __name__ == "__main__":
    uvicorn.run("app.backend.main:app", host=settings.api_host, port=settings.api_port)
