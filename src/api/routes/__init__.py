"""API route exports."""

from api.routes.analysis import router as analysis_router
from api.routes.blocklist import router as blocklist_router
from api.routes.health import router as health_router
from api.routes.live import router as live_router

__all__ = ["analysis_router", "blocklist_router", "health_router", "live_router"]
