from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Optional, Tuple, Union

# Tipos de documento aceptados (media type declarado)
MEDIA_TYPE_PDF = "application/pdf"
MEDIA_TYPE_DOC = "application/msword"
MEDIA_TYPE_DOCX = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"

ACCEPTED_MEDIA_TYPES = (MEDIA_TYPE_PDF, MEDIA_TYPE_DOC, MEDIA_TYPE_DOCX)

# 50 MiB
MAX_DOCUMENT_BYTES = 50 * 1024 * 1024


class ErrorCategory(str, Enum):
    UNSUPPORTED_FORMAT = "unsupported_format"
    TOO_LARGE = "too_large"
    IO_ERROR = "io_error"
    EMPTY_RESPONSE = "empty_response"
    MALFORMED_RESPONSE = "malformed_response"
    QUOTA_EXCEEDED = "quota_exceeded"
    SERVICE_UNAVAILABLE = "service_unavailable"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class DocumentBlob:
    """
    Documento subido por el usuario, tal cual llega (sin validar).

    `source` es el contenido en memoria (bytes) o una ruta local que se lee
    recién al codificar.
    """

    filename: str
    media_type: str
    size: int
    source: Union[bytes, Path] = field(repr=False)

    @classmethod
    def from_bytes(cls, filename: str, media_type: str, content: bytes) -> "DocumentBlob":
        return cls(filename=filename, media_type=media_type, size=len(content), source=content)

    @classmethod
    def from_path(cls, path: Union[str, Path], media_type: Optional[str] = None) -> "DocumentBlob":
        # Import local: validation depende de este módulo
        from .validation import media_type_for_filename

        p = Path(path)
        return cls(
            filename=p.name,
            media_type=media_type or media_type_for_filename(p.name),
            size=p.stat().st_size,
            source=p,
        )


@dataclass(frozen=True)
class ValidatedDocument:
    """
    Documento que ya pasó formato y tamaño. Solo lo construye `validate_document`.

    `media_type` es el tipo normalizado que se aceptó (sin parámetros, en
    minúsculas); es el que viaja al modelo, no el declarado en el blob.
    """

    blob: DocumentBlob
    media_type: str

    @property
    def filename(self) -> str:
        return self.blob.filename


@dataclass(frozen=True)
class EncodedPayload:
    data: str            # base64 estándar, sin saltos de línea
    mime_type: str
    filename: str = "document"


@dataclass(frozen=True)
class UserInput:
    """
    Snapshot de lo que cargó el usuario. El documento se setea o se limpia
    entero: nunca se edita parcialmente.
    """

    name: str = ""
    document: Optional[DocumentBlob] = None

    def with_name(self, name: str) -> "UserInput":
        return replace(self, name=name)

    def with_document(self, document: DocumentBlob) -> "UserInput":
        return replace(self, document=document)

    def without_document(self) -> "UserInput":
        return replace(self, document=None)


@dataclass(frozen=True)
class ScriptScene:
    scene: str
    narration: str
    key_sentences: Tuple[str, ...]
    visual_prompt: str

    def to_wire(self) -> Dict[str, Any]:
        """Devuelve la escena con las claves del contrato JSON del modelo."""
        return {
            "scene": self.scene,
            "narasi": self.narration,
            "kalimatKunci": list(self.key_sentences),
            "visual": self.visual_prompt,
        }


Script = Tuple[ScriptScene, ...]


@dataclass(frozen=True)
class GenerationSuccess:
    script: Script


@dataclass(frozen=True)
class GenerationFailure:
    category: ErrorCategory
    detail: str
    message: str = ""

    @property
    def can_retry(self) -> bool:
        # Solo la cuota agotada ofrece "reintentar ahora"
        return self.category is ErrorCategory.QUOTA_EXCEEDED


GenerationResult = Union[GenerationSuccess, GenerationFailure]


@dataclass(frozen=True)
class EstimatedDuration:
    minutes: int
    seconds: int

    @property
    def total_seconds(self) -> int:
        return self.minutes * 60 + self.seconds

    def __str__(self) -> str:
        return f"{self.minutes} Menit {self.seconds} Detik"


@dataclass(frozen=True)
class ModelRequest:
    """
    Request completo para el modelo: instrucción de sistema, documento inline,
    instrucción de usuario y esquema de salida estricto.
    """

    model: str
    system_instruction: str
    document: EncodedPayload
    instruction: str
    output_schema: Dict[str, Any]
    temperature: float = 0.2
