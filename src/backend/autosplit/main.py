"""
FastAPI entrypoint for the AutoSplit backend.

Run with: uvicorn autosplit.main:app --reload
"""
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from autosplit.config import settings
from autosplit.routers import ocr, split

logging.basicConfig(level=settings.LOG_LEVEL)

API_VERSION = "0.1.0"


def create_app() -> FastAPI:
    """Build the app with CORS and the OCR and split routers mounted."""
    application = FastAPI(
        title=f"{settings.APP_NAME} API",
        description="Fuel cost split from a photographed kilometre logbook",
        version=API_VERSION,
        debug=settings.DEBUG,
    )
    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.ALLOWED_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    for module in (ocr, split):
        application.include_router(module.router)

    @application.get("/")
    async def root():
        return {"message": f"{settings.APP_NAME} API", "version": API_VERSION, "status": "running"}

    @application.get("/health")
    async def health_check():
        return {"status": "healthy"}

    return application


app = create_app()
