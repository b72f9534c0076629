"""API routes."""

from pay_enhancement.api.routes.enhancements import router as enhancements_router
from pay_enhancement.api.routes.health import router as health_router
from pay_enhancement.api.routes.pay_scales import router as pay_scales_router

__all__ = ["enhancements_router", "health_router", "pay_scales_router"]
