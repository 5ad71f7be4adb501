"""
script_ai_core.errors
=====================

Excepciones del pipeline y clasificador de errores del modelo.

Las excepciones de validación/lectura se lanzan antes de cualquier llamada
de red. Los errores del modelo NO se lanzan hacia afuera: el engine los
clasifica con `classify_delegate_error` y los devuelve como
`GenerationFailure` con un mensaje listo para mostrar.

Reglas de clasificación (en orden). Un `status_code` HTTP explícito decide
primero; si no es 429/500/503 se mira la señal textual, con los códigos
numéricos como token completo ("150029 tokens" no es un 500):
1) 429 / RESOURCE_EXHAUSTED / cuota → QUOTA_EXCEEDED (único reintentable).
2) 500 / 503 / servicio no disponible → SERVICE_UNAVAILABLE.
3) Cualquier otra cosa → UNKNOWN.
"""

from __future__ import annotations

import re
from typing import Dict, List, NamedTuple, Optional

from .domain_models import ErrorCategory

USER_MESSAGES: Dict[ErrorCategory, str] = {
    ErrorCategory.UNSUPPORTED_FORMAT: "Format file tidak didukung. Harap gunakan PDF atau Word.",
    ErrorCategory.TOO_LARGE: "File terlalu besar. Maksimal 50MB.",
    ErrorCategory.IO_ERROR: "Dokumen tidak dapat dibaca. Harap pilih ulang file dan coba lagi.",
    ErrorCategory.EMPTY_RESPONSE: (
        "Gagal menerima respons dari AI. Pastikan dokumen terbaca dengan baik atau coba lagi nanti."
    ),
    ErrorCategory.MALFORMED_RESPONSE: (
        "Respons AI tidak sesuai format naskah. Pastikan dokumen terbaca dengan baik atau coba lagi nanti."
    ),
    ErrorCategory.QUOTA_EXCEEDED: (
        "Kuota API telah habis atau terlalu banyak permintaan (Rate Limit). "
        "Harap tunggu beberapa menit sebelum mencoba lagi, atau pastikan tagihan akun API Anda aktif."
    ),
    ErrorCategory.SERVICE_UNAVAILABLE: (
        "Server AI sedang sibuk atau mengalami gangguan teknis. Harap coba lagi dalam beberapa saat."
    ),
    ErrorCategory.UNKNOWN: (
        "Gagal memproses dokumen. Pastikan dokumen terbaca dengan baik atau coba lagi nanti."
    ),
}

MISSING_DOCUMENT_MESSAGE = "Harap pilih dokumen terlebih dahulu."
IN_PROGRESS_MESSAGE = "Naskah untuk dokumen ini sedang diproses. Harap tunggu hingga selesai."

_QUOTA_STATUS = frozenset({429})
_SERVICE_STATUS = frozenset({500, 503})

_QUOTA_SIGNALS = re.compile(r"\b429\b|RESOURCE_EXHAUSTED|insufficient_quota|rate_limit", re.IGNORECASE)
_SERVICE_SIGNALS = re.compile(r"\b50[03]\b|UNAVAILABLE|overloaded", re.IGNORECASE)


def user_message(category: ErrorCategory) -> str:
    return USER_MESSAGES.get(category, USER_MESSAGES[ErrorCategory.UNKNOWN])


# ============================================================
# Excepciones
# ============================================================

class ScriptPipelineError(Exception):
    """Error base del pipeline. Lleva la categoría y un mensaje para el usuario."""

    category: ErrorCategory = ErrorCategory.UNKNOWN

    def __init__(self, detail: str, *, message: str | None = None):
        super().__init__(detail)
        self.detail = detail
        self.message = message or user_message(self.category)


class DocumentValidationError(ScriptPipelineError):
    """El documento no cumple formato o tamaño. Nunca llega al modelo."""


class UnsupportedFormatError(DocumentValidationError):
    category = ErrorCategory.UNSUPPORTED_FORMAT


class DocumentTooLargeError(DocumentValidationError):
    category = ErrorCategory.TOO_LARGE


class DocumentReadError(ScriptPipelineError):
    category = ErrorCategory.IO_ERROR


class MissingDocumentError(ScriptPipelineError):
    def __init__(self, detail: str = "no document selected"):
        super().__init__(detail, message=MISSING_DOCUMENT_MESSAGE)


class GenerationInProgressError(ScriptPipelineError):
    def __init__(self, detail: str = "a generation for this document is already running"):
        super().__init__(detail, message=IN_PROGRESS_MESSAGE)


# ============================================================
# Clasificador
# ============================================================

class ClassifiedError(NamedTuple):
    category: ErrorCategory
    message: str


def _status_code(exc: BaseException) -> Optional[int]:
    value = getattr(exc, "status_code", None)
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    return None


def _error_signal(exc: BaseException) -> str:
    """
    Junta en un string todo lo que el error expone como señal: status HTTP,
    código/estado del proveedor y el mensaje.
    """
    parts: List[str] = []
    for attr in ("status_code", "code", "status"):
        value = getattr(exc, attr, None)
        if value is not None:
            parts.append(str(value))
    try:
        parts.append(str(exc))
    except Exception:
        parts.append(type(exc).__name__)
    return " ".join(parts)


def classify_delegate_error(exc: BaseException) -> ClassifiedError:
    """
    Mapea un error del modelo a una categoría y un mensaje para el usuario.
    Nunca lanza.
    """
    status = _status_code(exc)
    if status in _QUOTA_STATUS:
        category = ErrorCategory.QUOTA_EXCEEDED
    elif status in _SERVICE_STATUS:
        category = ErrorCategory.SERVICE_UNAVAILABLE
    else:
        signal = _error_signal(exc)
        if _QUOTA_SIGNALS.search(signal):
            category = ErrorCategory.QUOTA_EXCEEDED
        elif _SERVICE_SIGNALS.search(signal):
            category = ErrorCategory.SERVICE_UNAVAILABLE
        else:
            category = ErrorCategory.UNKNOWN

    return ClassifiedError(category=category, message=user_message(category))
