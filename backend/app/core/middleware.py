"""
CORS middleware — lets the storefront configurator call the pricing API.
Version: 1.0.0
"""
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.core.config import Settings


def apply_cors(app: FastAPI, settings: Settings) -> None:
    """Credentials are only allowed for an explicit origin list, never for '*'."""
    origins = settings.cors_origins or ["*"]
    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        allow_credentials="*" not in origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
