from __future__ import annotations

"""
script_ai_core.validation
=========================

Validación del documento antes de cualquier llamada al modelo.

Responsabilidad
---------------
- Aceptar solo PDF, DOC y DOCX (por media type declarado).
- Rechazar documentos de más de 50 MiB.
- Inferir el media type a partir de la extensión cuando solo hay un path.

NO hace
-------
- Leer el contenido (eso es `encoding.encode_document`).
"""

import logging
import mimetypes
from pathlib import Path

from .domain_models import (
    ACCEPTED_MEDIA_TYPES,
    MAX_DOCUMENT_BYTES,
    MEDIA_TYPE_DOC,
    MEDIA_TYPE_DOCX,
    MEDIA_TYPE_PDF,
    DocumentBlob,
    ValidatedDocument,
)
from .errors import DocumentTooLargeError, UnsupportedFormatError

logger = logging.getLogger(__name__)

DOCUMENT_EXT = {
    ".pdf": MEDIA_TYPE_PDF,
    ".doc": MEDIA_TYPE_DOC,
    ".docx": MEDIA_TYPE_DOCX,
}


def media_type_for_filename(filename: str) -> str:
    """
    Devuelve el media type de un archivo según su extensión.

    Las extensiones de documento se resuelven con la tabla propia (no todas
    las versiones de `mimetypes` conocen .docx). El resto cae en `mimetypes`
    y, si no hay match, en "application/octet-stream".
    """
    ext = Path(filename).suffix.lower()
    if ext in DOCUMENT_EXT:
        return DOCUMENT_EXT[ext]
    mime, _ = mimetypes.guess_type(filename)
    return mime or "application/octet-stream"


def validate_document(candidate: DocumentBlob) -> ValidatedDocument:
    """
    Valida formato y tamaño de un documento.

    Args:
        candidate: Documento tal como lo cargó el usuario.

    Returns:
        ValidatedDocument con el mismo blob y el media type normalizado.

    Raises:
        UnsupportedFormatError: media type fuera de PDF/DOC/DOCX.
        DocumentTooLargeError: más de 52.428.800 bytes.
    """
    media_type = (candidate.media_type or "").split(";", 1)[0].strip().lower()

    if candidate.size > MAX_DOCUMENT_BYTES:
        logger.info("Documento rechazado por tamaño: %s (%d bytes)", candidate.filename, candidate.size)
        raise DocumentTooLargeError(
            f"document is {candidate.size} bytes, limit is {MAX_DOCUMENT_BYTES}"
        )

    if media_type not in ACCEPTED_MEDIA_TYPES:
        logger.info("Documento rechazado por formato: %s (%s)", candidate.filename, candidate.media_type)
        raise UnsupportedFormatError(f"unsupported media type: {candidate.media_type!r}")

    return ValidatedDocument(blob=candidate, media_type=media_type)
