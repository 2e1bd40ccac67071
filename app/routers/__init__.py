"""
API Routers
Separate router modules for each domain.
"""

from app.routers import schemes

__all__ = ["schemes"]
