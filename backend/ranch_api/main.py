"""
REST API main application.
Entry point for the FastAPI server.
"""

from fastapi import FastAPI
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware

from ranch_api.core import (
    configure_cors,
    lifespan,
    register_exception_handlers,
    register_middlewares,
)
from ranch_api.routers import (
    admin_router,
    auth_router,
    dashboard_router,
    finance_router,
    health_router,
    livestock_router,
    operations_router,
)
from ranch_shared.infrastructure.correlation import CorrelationIdMiddleware
from ranch_shared.security.rate_limit import limiter, rate_limit_exceeded_handler


# Create FastAPI application
app = FastAPI(
    title="Ranch Manager API",
    description="Livestock, finance and operations record keeping for ranches",
    version="1.0.0",
    lifespan=lifespan,
)

# Rate limiting
app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)
app.add_middleware(SlowAPIMiddleware)

# Security headers, request logging
register_middlewares(app)

# Correlation id wraps request logging so log lines carry the request id
app.add_middleware(CorrelationIdMiddleware)

# CORS runs outermost so preflight requests are answered first
configure_cors(app)

register_exception_handlers(app)


# =============================================================================
# Routers
# =============================================================================

app.include_router(health_router)
app.include_router(auth_router)
app.include_router(dashboard_router)
app.include_router(livestock_router)
app.include_router(finance_router)
app.include_router(operations_router)
app.include_router(admin_router)
