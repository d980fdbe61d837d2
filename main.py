import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from discovery.application.use_cases.users import ensure_default_roles
from discovery.config import get_settings
from discovery.infrastructure.database import SessionLocal, engine, initialize_database
from discovery.interfaces.api.routes import register_routes


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Inicializa la base de datos al arrancar y libera los recursos al cerrar."""

    initialize_database()
    with SessionLocal() as session:
        ensure_default_roles(session)
    yield
    engine.dispose()


def create_app() -> FastAPI:
    """Crea y configura la aplicación principal de FastAPI."""

    settings = get_settings()
    logging.getLogger("discovery").setLevel(settings.log_level.upper())

    app = FastAPI(title="Place Discovery API", lifespan=lifespan)

    # La cookie de sesión exige credenciales en las peticiones del cliente web.
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_routes(app)
    return app


app = create_app()
