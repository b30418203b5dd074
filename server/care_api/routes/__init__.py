"""API route modules."""
from .auth import router as auth_router
from .medications import router as medications_router
from .vitals import router as vitals_router
from .appointments import router as appointments_router
from .reports import router as reports_router
from .sos import router as sos_router
from .dashboard import router as dashboard_router
from .womens import router as womens_router
from .ai import router as ai_router

__all__ = [
    "auth_router",
    "medications_router",
    "vitals_router",
    "appointments_router",
    "reports_router",
    "sos_router",
    "dashboard_router",
    "womens_router",
    "ai_router",
]
