"""
API HTTP de script-ai-core.

Expone el generador de guiones (script_ai_core.engine) como endpoints REST.

Variables de entorno:
    LOG_LEVEL:    nivel de logging (default INFO)
    CORS_ORIGINS: orígenes permitidos, separados por coma. Sin valor no se
                  monta CORS (la API queda same-origin).

Uso:
    uvicorn api.main:app --reload --port 8000
"""

import logging
import os
from typing import List, Optional

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from script_ai_core import __version__

from .routes import scripts

load_dotenv()

logging.basicConfig(
    level=getattr(logging, os.getenv("LOG_LEVEL", "INFO").upper(), logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


def _origins_from_env() -> List[str]:
    raw = os.getenv("CORS_ORIGINS", "")
    return [origin.strip() for origin in raw.split(",") if origin.strip()]


def create_app(cors_origins: Optional[List[str]] = None) -> FastAPI:
    """
    Arma la app con el router de guiones.

    Args:
        cors_origins: Orígenes para CORS. None = leerlos de CORS_ORIGINS.
    """
    application = FastAPI(
        title="Script AI Core API",
        description="Documentos PDF/Word → guiones de video por escenas",
        version=__version__,
    )

    origins = _origins_from_env() if cors_origins is None else cors_origins
    if origins:
        logger.info("CORS habilitado para: %s", origins)
        # Content-Disposition expuesto para que el front lea el nombre del PDF
        application.add_middleware(
            CORSMiddleware,
            allow_origins=origins,
            allow_methods=["GET", "POST"],
            allow_headers=["*"],
            expose_headers=["Content-Disposition"],
        )

    application.include_router(scripts.router)

    @application.get("/health")
    async def health():
        return {"status": "ok", "service": "script-ai-core-api", "version": __version__}

    return application


app = create_app()
