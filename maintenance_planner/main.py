import logging

from fastapi import FastAPI

from . import config
from .routes import planning

logging.basicConfig(
    level=getattr(logging, config.LOG_LEVEL.upper(), logging.INFO),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

# Create FastAPI app
app = FastAPI(
    title="Maintenance Planner API",
    description="Places remediated equipment anomalies into maintenance windows",
    version="1.0.0"
)

# Include routers
app.include_router(planning.router, prefix="/planning", tags=["planning"])

@app.get("/")
def read_root():
    """Root endpoint with API information"""
    return {
        "message": "Welcome to the Maintenance Planner API",
        "version": "1.0.0",
        "endpoints": {
            "rank": "POST /planning/rank - Order a backlog by urgency",
            "capacity": "POST /planning/capacity - Remaining hours per window",
            "assign": "POST /planning/assign - Best-fit assignment of remediated items",
            "synthesize": "POST /planning/synthesize - New windows for unplaceable items",
            "recommend": "POST /planning/recommend - Overload/underuse findings and moves",
            "pass": "POST /planning/pass - Assign then synthesize in one pass"
        },
        "swagger_ui": "/docs - Interactive API documentation",
        "redoc": "/redoc - Alternative API documentation"
    }

@app.get("/health")
def health_check():
    """Health check endpoint"""
    return {"status": "healthy", "message": "API is running"}

# This allows running the app directly with: python -m maintenance_planner.main
if __name__ == "__main__":
    import uvicorn
    uvicorn.run("maintenance_planner.main:app", host="0.0.0.0", port=8000, reload=True)
