# routes.py
from fastapi import FastAPI
from controller.transcript_controller import transcript_router


def register_routes(app: FastAPI) -> None:
    """Register controllers here."""
    app.include_router(transcript_router)
