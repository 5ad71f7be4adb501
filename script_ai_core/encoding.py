from __future__ import annotations

import base64
import binascii
from pathlib import Path

from .domain_models import EncodedPayload, ValidatedDocument
from .errors import DocumentReadError


def _read_all(doc: ValidatedDocument) -> bytes:
    source = doc.blob.source
    if isinstance(source, (bytes, bytearray, memoryview)):
        return bytes(source)

    path = Path(source)
    try:
        return path.read_bytes()
    except OSError as e:
        raise DocumentReadError(f"could not read {path}: {e}") from e


def encode_document(doc: ValidatedDocument) -> EncodedPayload:
    """
    Lee el documento completo y lo codifica en base64 estándar (sin saltos de línea).

    Raises:
        DocumentReadError: si el contenido no se puede leer entero.
    """
    content = _read_all(doc)
    if len(content) != doc.blob.size:
        raise DocumentReadError(
            f"read {len(content)} bytes from {doc.filename}, expected {doc.blob.size}"
        )

    return EncodedPayload(
        data=base64.b64encode(content).decode("ascii"),
        mime_type=doc.media_type,
        filename=doc.filename or "document",
    )


def decode_payload(payload: EncodedPayload) -> bytes:
    try:
        return base64.b64decode(payload.data, validate=True)
    except (binascii.Error, ValueError) as e:
        raise DocumentReadError(f"invalid base64 payload: {e}") from e
