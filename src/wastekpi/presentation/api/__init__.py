"""HTTP API (FastAPI)."""

from wastekpi.presentation.api.app import create_app

__all__ = ["create_app"]
