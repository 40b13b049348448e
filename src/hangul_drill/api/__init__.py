"""API module for hangul-drill.

Usage:
    uvicorn hangul_drill.main:app --host 0.0.0.0 --port 8000
"""

from hangul_drill.api.routes import router

__all__ = ["router"]
