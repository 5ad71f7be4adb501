from __future__ import annotations

"""
script_ai_core.script_engine
============================

Este módulo centraliza dos responsabilidades:

1) Request building
   - Arma el `ModelRequest`: instrucción de sistema (persona, duración, idioma,
     tono, contrato JSON), saludo de apertura literal, documento inline y
     esquema de salida estricto.

2) Parsing
   - Valida el texto devuelto por el modelo contra el esquema de escenas y lo
     convierte a `ScriptScene`. Cualquier desvío (JSON inválido, clave faltante,
     tipo incorrecto, clave extra) se rechaza entero: nunca se confía a medias
     en un valor decodificado.

Notas de diseño
---------------
- Ambas funciones son puras (sin I/O). La llamada al modelo vive en `llm_client`.
- El parser acepta el array "pelado" o el objeto `{"scenes": [...]}` que exige
  structured outputs.
- Política estricta: una escena con narración y sin frases clave es
  MALFORMED_RESPONSE, igual que un guion sin escenas.
"""

import json
import logging
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, StrictStr, TypeAdapter, ValidationError, model_validator

from .config import get_settings
from .domain_models import (
    EncodedPayload,
    ErrorCategory,
    GenerationFailure,
    GenerationResult,
    GenerationSuccess,
    ModelRequest,
    ScriptScene,
)
from .errors import user_message
from .prompts import (
    SCRIPT_OUTPUT_SCHEMA,
    build_greeting,
    get_script_system_prompt,
    get_script_user_prompt,
)

logger = logging.getLogger(__name__)


# ============================================================
# Request builder
# ============================================================

def build_script_request(
    payload: EncodedPayload,
    user_name: Optional[str] = None,
    *,
    language: Optional[str] = None,
    model: Optional[str] = None,
) -> ModelRequest:
    """
    Construye el request para el modelo a partir del documento codificado.

    Args:
        payload: Documento en base64 con su media type.
        user_name: Nombre del docente; si viene, el saludo de apertura lo nombra.
        language: Idioma del guion (default: settings.script_language).
        model: Modelo a usar (default: settings.openai_model_text).

    Returns:
        ModelRequest listo para `llm_client.generate_script_json`.
    """
    settings = get_settings()
    lang = language or settings.script_language

    return ModelRequest(
        model=model or settings.openai_model_text,
        system_instruction=get_script_system_prompt(build_greeting(user_name), language=lang),
        document=payload,
        instruction=get_script_user_prompt(language=lang),
        output_schema=SCRIPT_OUTPUT_SCHEMA,
        temperature=settings.openai_temperature,
    )


# ============================================================
# Parsing
# ============================================================

class SceneSchema(BaseModel):
    """Forma exacta de una escena en la respuesta del modelo."""

    model_config = ConfigDict(extra="forbid")

    scene: StrictStr
    narasi: StrictStr
    kalimatKunci: List[StrictStr]
    visual: StrictStr

    @model_validator(mode="after")
    def _key_sentences_present(self) -> "SceneSchema":
        if self.narasi.strip() and not self.kalimatKunci:
            raise ValueError("kalimatKunci must contain at least one item when narasi is not empty")
        return self


class ScriptEnvelope(BaseModel):
    model_config = ConfigDict(extra="forbid")

    scenes: List[SceneSchema] = Field(min_length=1)


_SCENES_ADAPTER = TypeAdapter(List[SceneSchema])


def _to_scene(s: SceneSchema) -> ScriptScene:
    return ScriptScene(
        scene=s.scene,
        narration=s.narasi,
        key_sentences=tuple(s.kalimatKunci),
        visual_prompt=s.visual,
    )


def _malformed(detail: str) -> GenerationFailure:
    logger.warning("Respuesta del modelo rechazada: %s", detail)
    return GenerationFailure(
        category=ErrorCategory.MALFORMED_RESPONSE,
        detail=detail,
        message=user_message(ErrorCategory.MALFORMED_RESPONSE),
    )


def parse_script_response(raw_text: Optional[str]) -> GenerationResult:
    """
    Valida el texto del modelo y lo convierte en un guion tipado.

    Args:
        raw_text: Texto devuelto por el modelo (puede ser None).

    Returns:
        GenerationSuccess con las escenas en el mismo orden, o GenerationFailure
        (EMPTY_RESPONSE / MALFORMED_RESPONSE).
    """
    if raw_text is None or not raw_text.strip():
        return GenerationFailure(
            category=ErrorCategory.EMPTY_RESPONSE,
            detail="no text returned by model",
            message=user_message(ErrorCategory.EMPTY_RESPONSE),
        )

    try:
        data: Any = json.loads(raw_text)
    except json.JSONDecodeError as e:
        return _malformed(f"invalid JSON: {e}")

    try:
        if isinstance(data, dict):
            scenes = ScriptEnvelope.model_validate(data).scenes
        else:
            scenes = _SCENES_ADAPTER.validate_python(data)
    except ValidationError as e:
        return _malformed(str(e))

    if not scenes:
        return _malformed("script contains no scenes")

    return GenerationSuccess(script=tuple(_to_scene(s) for s in scenes))
