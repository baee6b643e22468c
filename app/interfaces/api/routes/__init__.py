from fastapi import FastAPI

from .inquiry_templates import router as inquiry_templates_router


def register_routes(app: FastAPI) -> None:
    """Register every API router on the FastAPI application."""

    app.include_router(inquiry_templates_router)
