from __future__ import annotations

from typing import Any, Dict, List, Optional

from openai import OpenAI

from .config import get_settings
from .domain_models import ModelRequest


def get_client() -> OpenAI:
    settings = get_settings()
    if not settings.openai_api_key:
        raise RuntimeError("OPENAI_API_KEY no está configurada en el .env")
    return OpenAI(api_key=settings.openai_api_key)


def _document_data_url(request: ModelRequest) -> str:
    doc = request.document
    return f"data:{doc.mime_type};base64,{doc.data}"


def build_messages(request: ModelRequest) -> List[Dict[str, Any]]:
    """
    Arma los mensajes de chat: instrucción de sistema + documento inline y
    la instrucción de usuario.
    """
    return [
        {"role": "system", "content": request.system_instruction},
        {
            "role": "user",
            "content": [
                {
                    "type": "file",
                    "file": {
                        "filename": request.document.filename,
                        "file_data": _document_data_url(request),
                    },
                },
                {"type": "text", "text": request.instruction},
            ],
        },
    ]


def generate_script_json(request: ModelRequest) -> Optional[str]:
    """
    Pide al modelo el guion en JSON, validado por structured outputs.

    Devuelve el texto crudo (o None si el modelo no devolvió contenido).
    Los errores del SDK (rate limit, 5xx, red) se propagan sin tocar:
    los clasifica el engine.
    """
    client = get_client()

    completion = client.chat.completions.create(
        model=request.model,
        messages=build_messages(request),
        response_format={
            "type": "json_schema",
            "json_schema": {
                "name": "video_script",
                "strict": True,
                "schema": request.output_schema,
            },
        },
        temperature=request.temperature,
    )

    if not completion.choices:
        return None
    return completion.choices[0].message.content
