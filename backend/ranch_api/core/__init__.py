"""
Application core: lifespan, CORS, middlewares, exception handlers.
"""

from ranch_api.core.cors import configure_cors, get_cors_origins
from ranch_api.core.errors import register_exception_handlers
from ranch_api.core.lifespan import init_database, lifespan
from ranch_api.core.middlewares import register_middlewares

__all__ = [
    "configure_cors",
    "get_cors_origins",
    "register_exception_handlers",
    "init_database",
    "lifespan",
    "register_middlewares",
]
