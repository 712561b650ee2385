"""
API Routers module.
"""
from diary_api.routers import auth, entries, health

__all__ = ["auth", "entries", "health"]
