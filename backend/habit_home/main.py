"""
Habit Home Placement API

FastAPI application serving surface recommendations for habit objects.
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from habit_home.config import get_settings
from habit_home.models.api import HealthResponse
from habit_home.routes import habits, recommend
from habit_home.utils.logging import setup_logging


# Get settings
settings = get_settings()
setup_logging(settings.log_level)

# Create FastAPI app
app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    description="""
    **Habit Home Placement API** - Recommends where in a scanned room to keep
    the object that cues a habit.

    ## Features
    - **Habits**: Built-in habits with their default furniture associations
    - **Recommend**: Best and second-best surface for a habit, balancing the
      recorded movement path against associated furniture
    - **Sweep**: The recommendation at every bias position

    ## Workflow
    1. Scan the room and record a movement trace
    2. Pick a habit → `/api/v1/habits`
    3. Request a surface → `/api/v1/recommend`
    """,
    docs_url="/docs",
    redoc_url="/redoc"
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(habits.router, prefix=settings.api_prefix)
app.include_router(recommend.router, prefix=settings.api_prefix)


# ============ Health Check ============

@app.get("/", response_model=HealthResponse, tags=["Health"])
async def root():
    """Root endpoint - health check."""
    return HealthResponse(
        status="ok",
        version=settings.app_version,
        message="Habit Home Placement API is running. Visit /docs for API documentation."
    )


@app.get("/health", response_model=HealthResponse, tags=["Health"])
async def health_check():
    """Health check endpoint."""
    return HealthResponse(
        status="ok",
        version=settings.app_version
    )


# ============ Run with Uvicorn ============

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "habit_home.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.debug
    )
