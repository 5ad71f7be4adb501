"""
Endpoints del generador de guiones.

Este router maneja:
- POST /api/v1/scripts:          Subir un documento y generar el guion
- POST /api/v1/scripts/export:   Exportar un guion a PDF (descarga)
- POST /api/v1/scripts/duration: Estimar la duración de un guion
"""

import logging
from typing import Dict

from fastapi import APIRouter, File, Form, HTTPException, UploadFile
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import Response

from script_ai_core.domain_models import (
    MAX_DOCUMENT_BYTES,
    DocumentBlob,
    ErrorCategory,
    GenerationFailure,
)
from script_ai_core.duration import estimate_duration
from script_ai_core.engine import run_script_pipeline
from script_ai_core.errors import (
    DocumentTooLargeError,
    DocumentValidationError,
    GenerationInProgressError,
    ScriptPipelineError,
)
from script_ai_core.export import export_filename, export_script_pdf
from script_ai_core.validation import validate_document

from ..models.requests import (
    DurationModel,
    DurationRequest,
    DurationResponse,
    ExportRequest,
    ScriptRunResponse,
    ScriptSceneModel,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1/scripts", tags=["scripts"])

STATUS_BY_CATEGORY: Dict[ErrorCategory, int] = {
    ErrorCategory.UNSUPPORTED_FORMAT: 415,
    ErrorCategory.TOO_LARGE: 413,
    ErrorCategory.IO_ERROR: 400,
    ErrorCategory.EMPTY_RESPONSE: 502,
    ErrorCategory.MALFORMED_RESPONSE: 502,
    ErrorCategory.QUOTA_EXCEEDED: 429,
    ErrorCategory.SERVICE_UNAVAILABLE: 503,
    ErrorCategory.UNKNOWN: 500,
}


def _error_detail(category: ErrorCategory, message: str) -> dict:
    return {
        "category": category.value,
        "message": message,
        "can_retry": category is ErrorCategory.QUOTA_EXCEEDED,
    }


def _http_error(e: ScriptPipelineError, status_code: int | None = None) -> HTTPException:
    return HTTPException(
        status_code=status_code or STATUS_BY_CATEGORY.get(e.category, 500),
        detail=_error_detail(e.category, e.message),
    )


@router.post("", response_model=ScriptRunResponse)
async def create_script(
    document: UploadFile = File(...),
    name: str = Form(None),
):
    """
    Genera el guion de video de un documento.

    Recibe un PDF / DOC / DOCX (máx. 50 MiB) y un nombre opcional de docente
    para el saludo de apertura.

    Returns:
        ScriptRunResponse con las escenas y la duración estimada.

    Raises:
        415/413: documento no soportado o demasiado grande (no llega al modelo)
        409: ya hay una generación en curso para el mismo documento
        429/503/502/500/400: fallo de generación (`detail.category`)
    """
    # Se lee como máximo límite + 1 bytes
    if document.size is not None and document.size > MAX_DOCUMENT_BYTES:
        logger.info("Upload rechazado por tamaño declarado: %s (%d bytes)", document.filename, document.size)
        raise _http_error(
            DocumentTooLargeError(f"document is {document.size} bytes, limit is {MAX_DOCUMENT_BYTES}")
        )
    content = await document.read(MAX_DOCUMENT_BYTES + 1)
    blob = DocumentBlob.from_bytes(
        filename=document.filename or "document",
        media_type=document.content_type or "",
        content=content,
    )

    try:
        validated = validate_document(blob)
    except DocumentValidationError as e:
        raise _http_error(e) from e

    try:
        result = await run_in_threadpool(
            run_script_pipeline,
            document=validated,
            user_name=(name or "").strip() or None,
        )
    except GenerationInProgressError as e:
        logger.info("Generación rechazada, documento en curso: %s", blob.filename)
        raise _http_error(e, status_code=409) from e

    if isinstance(result, GenerationFailure):
        raise HTTPException(
            status_code=STATUS_BY_CATEGORY.get(result.category, 500),
            detail=_error_detail(result.category, result.message),
        )

    return ScriptRunResponse(
        status="completed",
        filename=blob.filename,
        scenes=[ScriptSceneModel.from_scene(s) for s in result.script],
        estimated_duration=DurationModel.from_estimate(estimate_duration(result.script)),
    )


@router.post("/export")
async def export_script(request: ExportRequest):
    """
    Exporta un guion a PDF y lo devuelve como descarga.

    El nombre del archivo sale del nombre del docente (o el default).
    """
    script = tuple(s.to_scene() for s in request.scenes)

    try:
        pdf_bytes = await run_in_threadpool(export_script_pdf, script, request.name)
    except ImportError as e:
        raise HTTPException(status_code=500, detail=f"WeasyPrint no disponible: {e}") from e
    except RuntimeError as e:
        raise HTTPException(status_code=500, detail=f"Error al generar PDF: {e}") from e

    filename = export_filename(request.name)
    return Response(
        content=pdf_bytes,
        media_type="application/pdf",
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )


@router.post("/duration", response_model=DurationResponse)
async def script_duration(request: DurationRequest):
    """Duración estimada de un guion (null si no tiene escenas)."""
    script = tuple(s.to_scene() for s in request.scenes)
    return DurationResponse(estimated_duration=DurationModel.from_estimate(estimate_duration(script)))
