# script_ai_core/prompts.py

"""
Prompts, saludo de apertura y esquema de salida para la generación de guiones.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

DEFAULT_LANGUAGE = "Bahasa Indonesia"

GREETING_PERSONAL = (
    "Halo, saya {name}. Pada video ini saya akan menjelaskan materi penting "
    "berdasarkan dokumen yang Anda pelajari."
)
GREETING_GENERIC = (
    "Halo. Pada video ini saya akan menjelaskan materi penting "
    "berdasarkan dokumen yang Anda pelajari."
)

SCRIPT_SYSTEM_TEMPLATE = """
Act as a professor who has mastered the material from the uploaded document.
Your task is to convert the contents of the document into an educational video script with a duration of about 5 to 6 minutes.

Output Requirements:
1. Language: {language}.
2. Tone: Communicative, academic, and fluid.
3. Format: JSON Array containing objects with keys: "scene", "narasi", "kalimatKunci", "visual".

Content Guidelines:
- Divide the material into several logical scenes.
- Opening: Use the phrase: "{greeting}"
- Scene: A short label or title for the scene.
- Narasi: Written for voice over, clear, easy to understand, aligned with key sentences.
- Kalimat Kunci: Extract MULTIPLE important points (at least 1, and 2-3 points per scene if the narration is long) from the narration to be used as visual highlights. Make each sentence VERY CONCISE (short and solid) without reducing the essence of the information. Return in the form of a string ARRAY.
- Visual: English prompt for AI image generator (Educational illustration, professional layout).
- Closing: Contains a conclusion and a call to action (CTA) to watch other videos.

IMPORTANT: Do not use decorative icons or symbols in the narration. Focus on educational quality.
"""

SCRIPT_USER_TEMPLATE = (
    "Generate a full video script in {language} based on this document "
    "with multiple concise key sentences per scene."
)

_SCENE_SCHEMA: Dict[str, Any] = {
    "type": "object",
    "properties": {
        "scene": {"type": "string", "description": "Scene label or title."},
        "narasi": {"type": "string", "description": "Voice-over narration."},
        "kalimatKunci": {
            "type": "array",
            "items": {"type": "string"},
            "description": "List of concise key points from the narration (at least one).",
        },
        "visual": {"type": "string", "description": "English prompt for an AI image generator."},
    },
    "required": ["scene", "narasi", "kalimatKunci", "visual"],
    "additionalProperties": False,
}

# Structured outputs exige un objeto en la raíz: el array va envuelto en "scenes".
SCRIPT_OUTPUT_SCHEMA: Dict[str, Any] = {
    "type": "object",
    "properties": {
        "scenes": {"type": "array", "items": _SCENE_SCHEMA},
    },
    "required": ["scenes"],
    "additionalProperties": False,
}


def build_greeting(user_name: Optional[str] = None) -> str:
    name = (user_name or "").strip()
    if name:
        return GREETING_PERSONAL.format(name=name)
    return GREETING_GENERIC


def get_script_system_prompt(greeting: str, language: str = DEFAULT_LANGUAGE) -> str:
    return SCRIPT_SYSTEM_TEMPLATE.format(language=language, greeting=greeting)


def get_script_user_prompt(language: str = DEFAULT_LANGUAGE) -> str:
    return SCRIPT_USER_TEMPLATE.format(language=language)
