from __future__ import annotations

"""
script_ai_core.engine
=====================

Orquestador de alto nivel del pipeline documento → guion.

Expone una API interna y estable para correr el flujo completo
(encode → request → modelo → parse) sin preocuparse por HTTP ni CLI.

- La validación ocurre ANTES (`validation.validate_document`): acá solo
  entran documentos ya validados.
- La función no guarda estado de resultados: devuelve un `GenerationResult`
  y es el llamador (sesión, API, CLI) quien decide qué hacer con él.
- Una sola generación en curso por documento: una segunda llamada con el mismo
  contenido mientras la primera está pendiente se rechaza de inmediato
  (`GenerationInProgressError`), no se encola.
"""

import hashlib
import logging
import threading
from contextlib import contextmanager
from typing import Iterator, Optional, Set

from .domain_models import (
    EncodedPayload,
    GenerationFailure,
    GenerationResult,
    GenerationSuccess,
    ValidatedDocument,
)
from .encoding import encode_document
from .errors import DocumentReadError, GenerationInProgressError, classify_delegate_error
from .llm_client import generate_script_json
from .script_engine import build_script_request, parse_script_response

logger = logging.getLogger(__name__)


class InFlightGuard:
    """Registro de documentos con una generación pendiente (por huella de contenido)."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._active: Set[str] = set()

    @contextmanager
    def hold(self, key: str) -> Iterator[None]:
        with self._lock:
            if key in self._active:
                raise GenerationInProgressError()
            self._active.add(key)
        try:
            yield
        finally:
            with self._lock:
                self._active.discard(key)

    def is_active(self, key: str) -> bool:
        with self._lock:
            return key in self._active


_GUARD = InFlightGuard()


def document_fingerprint(payload: EncodedPayload) -> str:
    return hashlib.sha256(payload.data.encode("ascii")).hexdigest()


def run_script_pipeline(
    *,
    document: ValidatedDocument,
    user_name: Optional[str] = None,
    guard: Optional[InFlightGuard] = None,
) -> GenerationResult:
    """
    Ejecuta el pipeline de generación para un documento validado.

    Flujo:
    ------
    1) Encode: lectura completa + base64. Un fallo de lectura termina acá
       (IO_ERROR), sin tocar la red.
    2) Request: instrucción de sistema, saludo, documento y esquema.
    3) Modelo: una sola llamada, sin reintentos.
    4) Parse: validación estricta del JSON → escenas tipadas.

    Args:
        document: Documento que ya pasó `validate_document`.
        user_name: Nombre del docente para el saludo de apertura (opcional).
        guard: Registro de generaciones en curso (default: el global del proceso).

    Returns:
        GenerationSuccess con el guion, o GenerationFailure con categoría,
        detalle técnico y mensaje para el usuario.

    Raises:
        GenerationInProgressError: si el mismo documento ya se está generando.
    """
    guard = guard or _GUARD

    # 1) Encode
    try:
        payload = encode_document(document)
    except DocumentReadError as e:
        logger.warning("No se pudo leer el documento %s: %s", document.filename, e.detail)
        return GenerationFailure(category=e.category, detail=e.detail, message=e.message)

    key = document_fingerprint(payload)
    with guard.hold(key):
        # 2) Request
        request = build_script_request(payload, user_name)
        logger.info(
            "Generando guion para %s (%s, modelo=%s)",
            document.filename,
            document.media_type,
            request.model,
        )

        # 3) Modelo
        try:
            raw_text = generate_script_json(request)
        except Exception as e:
            classified = classify_delegate_error(e)
            logger.exception("Falló la llamada al modelo (%s)", classified.category.value)
            return GenerationFailure(
                category=classified.category,
                detail=str(e),
                message=classified.message,
            )

    # 4) Parse
    result = parse_script_response(raw_text)
    if isinstance(result, GenerationSuccess):
        logger.info("Guion generado: %d escenas", len(result.script))
    return result
