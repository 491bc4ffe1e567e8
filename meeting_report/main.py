from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from meeting_report import __version__
from meeting_report.core.config import settings
from meeting_report.core.logging import setup_logger
from meeting_report.api.export_routes import router as export_router

# Initialize settings and logger
logger = setup_logger(settings.LOG_LEVEL)

app = FastAPI(title=settings.APP_NAME, version=__version__)

# Configure CORS for the dashboard
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(export_router)  # Export endpoints (already has /export prefix)


@app.on_event("startup")
async def startup_event():
    """Log configuration on startup."""
    logger.info(f"{settings.APP_NAME} started in {settings.ENV} environment")
    logger.info(f"Export settings: {settings!r}")


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "ok", "version": __version__}
