"""API Routers"""

from api.routers import events, health, packing, recipes

__all__ = ["events", "health", "packing", "recipes"]
