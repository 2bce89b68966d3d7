# app/__init__.py
"""
Package entrypoint for the BBQ tips FastAPI application.

    uvicorn app:app --reload
"""

from .main import app

__all__ = ["app"]
