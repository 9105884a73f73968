"""
Dashboard API package.

Exposes the FastAPI application and its factory.
"""

from issueboard.core.dashboard.api.app import app, create_app

__all__ = ["app", "create_app"]
