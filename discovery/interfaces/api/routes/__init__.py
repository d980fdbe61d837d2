from fastapi import FastAPI

from .activity import router as activity_router
from .admin_catalog import router as admin_catalog_router
from .auth import router as auth_router
from .catalog import router as catalog_router
from .engagement import router as engagement_router
from .users import router as users_router


def register_routes(app: FastAPI) -> None:
    """Registra todos los routers de la API en la aplicación FastAPI."""

    app.include_router(auth_router)
    app.include_router(catalog_router)
    app.include_router(engagement_router)
    app.include_router(activity_router)
    app.include_router(users_router)
    app.include_router(admin_catalog_router)
