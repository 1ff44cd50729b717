"""
Scadenzario HTTP API (FastAPI).

Usage:
    from scadenzario.api import create_app

    app = create_app()
"""

from .main import create_app

__all__ = ["create_app"]
