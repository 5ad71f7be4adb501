# script_ai_core/config.py
from dataclasses import dataclass
from functools import lru_cache
import os

from dotenv import load_dotenv

"""
script_ai_core.config
=====================

Gestión centralizada de configuración del generador de guiones.

Este módulo define:
- La estructura de configuración (`Settings`)
- El mecanismo para cargar variables desde entorno (.env)
- Un acceso único y cacheado a la configuración (`get_settings`)

Convenciones
------------
- Las variables de entorno se cargan desde un archivo `.env` si existe.
- Los defaults están pensados para desarrollo local.
- Si una variable crítica (ej. API key) no está presente,
  el error se lanza en el lugar donde se usa, no acá.
"""

# Cargar variables de entorno desde .env (si existe)
load_dotenv()


@dataclass
class Settings:
    """
    Contenedor tipado de configuración global.

    Attributes
    ----------
    openai_api_key:
        API key de OpenAI. Debe estar presente para generar guiones.
    openai_model_text:
        Modelo que lee el documento y devuelve el guion estructurado.
    openai_temperature:
        Temperatura de la generación.
    script_language:
        Idioma del guion (narración y frases clave).
    output_dir:
        Directorio base donde la CLI escribe JSON, Markdown y PDF.
    """

    # OpenAI
    openai_api_key: str
    openai_model_text: str
    openai_temperature: float = 0.2

    # Guion
    script_language: str = "Bahasa Indonesia"

    # I/O
    output_dir: str = "output"


@lru_cache
def get_settings() -> Settings:
    """
    Devuelve una instancia única y cacheada de `Settings`.

    Variables de entorno utilizadas
    -------------------------------
    - OPENAI_API_KEY
    - OPENAI_MODEL_TEXT (default: "gpt-4.1-mini")
    - OPENAI_TEMPERATURE (default: 0.2)
    - SCRIPT_LANGUAGE (default: "Bahasa Indonesia")
    - OUTPUT_DIR (default: "output")
    """
    return Settings(
        openai_api_key=os.getenv("OPENAI_API_KEY", ""),
        openai_model_text=os.getenv("OPENAI_MODEL_TEXT", "gpt-4.1-mini"),
        openai_temperature=float(os.getenv("OPENAI_TEMPERATURE", "0.2")),
        script_language=os.getenv("SCRIPT_LANGUAGE", "Bahasa Indonesia"),
        output_dir=os.getenv("OUTPUT_DIR", "output"),
    )
